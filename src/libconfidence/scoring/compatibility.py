"""Quick compatibility estimate from release date alone.

A single-signal 0-100 estimate with a human-readable reason, for callers that
have a release date and a cutoff but no library or model metadata.
"""

from __future__ import annotations

from datetime import datetime

from libconfidence.scoring.risk import classify_risk
from libconfidence.types import CompatibilityEstimate
from libconfidence.utils.dates import elapsed_months

BREAKING_PENALTY = 15

_PARTIAL_WINDOW_MONTHS = 6
_UNRELIABLE_WINDOW_MONTHS = 12


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


def estimate_compatibility(
    release_date: datetime,
    cutoff_date: datetime,
    breaking: bool = False,
) -> CompatibilityEstimate:
    """Estimate how reliably a model answers questions about one release.

    Time is measured in fractional 30-day months, so a release late in the
    cutoff month already counts as after the cutoff.

    - At or before the cutoff: 85, plus 0.5 per month before (max 100).
    - Up to 6 months after: linear 70 -> 50.
    - Beyond 6 months after: linear 40 -> 10, reached at 12 months.
    Breaking releases lose a further 15 points.
    """
    months_diff = elapsed_months(release_date, cutoff_date)

    if months_diff <= 0:
        months_before = -months_diff
        score = min(100.0, 85 + months_before * 0.5)
        when = (
            "around"
            if months_before < 1
            else f"{_round_half_up(months_before)} months before"
        )
        reason = (
            f"Released {when} the LLM's training cutoff. "
            "The model likely has strong knowledge of this version."
        )
    elif months_diff <= _PARTIAL_WINDOW_MONTHS:
        score = 70 - (months_diff / _PARTIAL_WINDOW_MONTHS) * 20
        reason = (
            f"Released {_round_half_up(months_diff)} months after the LLM's training cutoff. "
            "The model may have partial knowledge of this version."
        )
    else:
        span = _UNRELIABLE_WINDOW_MONTHS - _PARTIAL_WINDOW_MONTHS
        ratio = min((months_diff - _PARTIAL_WINDOW_MONTHS) / span, 1.0)
        score = 40 - ratio * 30
        reason = (
            f"Released {_round_half_up(months_diff)} months after the LLM's training cutoff. "
            "The model is unlikely to have reliable knowledge of this version."
        )

    if breaking:
        score -= BREAKING_PENALTY
        reason += (
            " This is a breaking release, which increases the risk of outdated"
            " or incorrect responses."
        )

    final = _round_half_up(max(0.0, min(100.0, score)))
    return CompatibilityEstimate(score=final, risk=classify_risk(final), reason=reason)
