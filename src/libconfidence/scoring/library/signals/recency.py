"""Recency signal: version release date relative to the model's cutoff."""

from __future__ import annotations

from libconfidence.scoring.normalize import clamp, normalize
from libconfidence.types import LibraryContext
from libconfidence.utils.dates import months_between

RECENCY_WEIGHT = 0.40

# Months before the cutoff at which the score saturates at 1.0
_MONTHS_BEFORE_FULL = 24
# Months after the cutoff at which the score bottoms out at 0.0
_MONTHS_AFTER_ZERO = 12


def compute_recency(context: LibraryContext) -> float:
    """Score a version by calendar months between its release and the cutoff.

    Centred on the cutoff month (0.5), rising to 1.0 for versions released
    24+ months earlier and falling to 0.0 for versions 12+ months later.
    """
    months_diff = months_between(context.version.release_date, context.model.cutoff_date)

    if months_diff <= 0:
        before = normalize(abs(months_diff), 0, _MONTHS_BEFORE_FULL)
        return clamp(0.5 + before * 0.5, 0.0, 1.0)

    after = normalize(months_diff, 0, _MONTHS_AFTER_ZERO)
    return clamp(0.5 - after * 0.5, 0.0, 1.0)
