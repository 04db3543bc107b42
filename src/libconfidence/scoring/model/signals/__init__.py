"""Model capability signal implementations."""

from libconfidence.scoring.model.signals.capability import compute_capability
from libconfidence.scoring.model.signals.limit import compute_limit
from libconfidence.scoring.model.signals.openness import compute_openness
from libconfidence.scoring.model.signals.recency import compute_model_recency

__all__ = [
    "compute_capability",
    "compute_limit",
    "compute_model_recency",
    "compute_openness",
]
