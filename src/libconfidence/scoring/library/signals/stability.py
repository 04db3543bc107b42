"""Stability signal: API volatility from release cadence."""

from __future__ import annotations

from libconfidence.scoring.normalize import normalize_inverse
from libconfidence.types import LibraryContext

STABILITY_WEIGHT = 0.20

# Score for a library with no measurable age (release cadence undefined)
NEUTRAL_STABILITY_SCORE = 0.5


def compute_stability(context: LibraryContext) -> float:
    """Fewer releases per year means a more stable API and a higher score.

    Versions released on or before the model's cutoff score 1.0: the
    training data already covers the library's release history up to them.
    """
    if context.version.release_date <= context.model.cutoff_date:
        return 1.0

    library = context.library
    if library.age_in_years <= 0:
        return NEUTRAL_STABILITY_SCORE

    releases_per_year = library.release_count / library.age_in_years
    # <=2 releases/year -> 1.0, >=20 -> 0.0
    return normalize_inverse(releases_per_year, 2, 20)
