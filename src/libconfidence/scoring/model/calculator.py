"""Model capability score (LGS) calculator."""

from __future__ import annotations

import functools
from datetime import datetime

from libconfidence.scoring.aggregator import (
    ComponentInfo,
    ScoreComponent,
    WeightedScoreAggregator,
)
from libconfidence.scoring.model.signals.capability import (
    CAPABILITY_WEIGHT,
    compute_capability,
)
from libconfidence.scoring.model.signals.limit import LIMIT_WEIGHT, compute_limit
from libconfidence.scoring.model.signals.openness import OPENNESS_WEIGHT, compute_openness
from libconfidence.scoring.model.signals.recency import (
    MODEL_RECENCY_WEIGHT,
    REFERENCE_START,
    compute_model_recency,
)
from libconfidence.scoring.normalize import round_score
from libconfidence.types import (
    ModelContext,
    ModelMetadata,
    ModelScore,
    ModelScoreBreakdown,
)
from libconfidence.utils.dates import ensure_utc, utc_now


def default_model_components(
    reference_start: datetime = REFERENCE_START,
) -> list[ScoreComponent[ModelContext]]:
    """The fixed LGS component set, in registration order."""
    return [
        ScoreComponent("capability", CAPABILITY_WEIGHT, compute_capability),
        ScoreComponent("limit", LIMIT_WEIGHT, compute_limit),
        ScoreComponent(
            "recency",
            MODEL_RECENCY_WEIGHT,
            functools.partial(compute_model_recency, reference_start=ensure_utc(reference_start)),
        ),
        ScoreComponent("openness", OPENNESS_WEIGHT, compute_openness),
    ]


class ModelCalculator:
    """Score a model's general feature breadth, limits, recency and openness."""

    def __init__(self, reference_start: datetime = REFERENCE_START) -> None:
        self._aggregator = WeightedScoreAggregator(default_model_components(reference_start))

    def score(self, model: ModelMetadata, as_of: datetime | None = None) -> ModelScore:
        """Score ``model``; recency is measured up to ``as_of`` (default: now, UTC)."""
        context = ModelContext(model=model, as_of=as_of or utc_now())
        result = self._aggregator.calculate(context)

        return ModelScore(
            score=round_score(result.score),
            breakdown=ModelScoreBreakdown(
                capability=result.component_result("capability"),
                limit=result.component_result("limit"),
                recency=result.component_result("recency"),
                openness=result.component_result("openness"),
            ),
        )

    def get_component_info(self) -> list[ComponentInfo]:
        return self._aggregator.get_component_info()
