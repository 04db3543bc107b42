"""Library confidence signal implementations."""

from libconfidence.scoring.library.signals.language import compute_language_affinity
from libconfidence.scoring.library.signals.popularity import compute_popularity
from libconfidence.scoring.library.signals.recency import compute_recency
from libconfidence.scoring.library.signals.simplicity import compute_simplicity
from libconfidence.scoring.library.signals.stability import compute_stability

__all__ = [
    "compute_recency",
    "compute_stability",
    "compute_simplicity",
    "compute_popularity",
    "compute_language_affinity",
]
