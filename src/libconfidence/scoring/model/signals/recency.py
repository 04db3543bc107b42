"""Model recency signal: how current the knowledge cutoff and last update are."""

from __future__ import annotations

from datetime import datetime, timezone

from libconfidence.scoring.normalize import normalize
from libconfidence.types import ModelContext
from libconfidence.utils.dates import month_index

MODEL_RECENCY_WEIGHT = 0.35

REFERENCE_START = datetime(2020, 1, 1, tzinfo=timezone.utc)

# Used when a date is missing: partial metadata still scores, just lower
MISSING_DATE_SCORE = 0.3


def compute_model_recency(
    context: ModelContext,
    reference_start: datetime = REFERENCE_START,
) -> float:
    """Position of the model's dates between ``reference_start`` and ``as_of``.

    Both ends are calendar months. Knowledge cutoff counts 70%, last update 30%.
    """
    model = context.model
    min_months = month_index(reference_start)
    max_months = month_index(context.as_of)

    if model.knowledge_cutoff is not None:
        cutoff_score = normalize(month_index(model.knowledge_cutoff), min_months, max_months)
    else:
        cutoff_score = MISSING_DATE_SCORE

    if model.last_updated is not None:
        updated_score = normalize(month_index(model.last_updated), min_months, max_months)
    else:
        updated_score = MISSING_DATE_SCORE

    return cutoff_score * 0.7 + updated_score * 0.3
