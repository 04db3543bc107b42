"""Popularity signal: adoption as a proxy for training-data exposure."""

from __future__ import annotations

from libconfidence.scoring.normalize import normalize_log
from libconfidence.types import LibraryContext

POPULARITY_WEIGHT = 0.20

_STARS_MAX = 100_000
_DEPENDENTS_MAX = 10_000


def compute_popularity(context: LibraryContext) -> float:
    """Log-scaled stars and dependents; dependents weigh more (0.6 vs 0.4)."""
    stars_score = normalize_log(context.library.stars, _STARS_MAX)
    dependents_score = normalize_log(context.library.dependents_count, _DEPENDENTS_MAX)
    return stars_score * 0.4 + dependents_score * 0.6
