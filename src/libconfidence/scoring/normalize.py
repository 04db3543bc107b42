"""Normalization primitives shared by all score components."""

from __future__ import annotations

import math


def clamp(value: float, min_value: float = 0.0, max_value: float = 1.0) -> float:
    return max(min_value, min(max_value, value))


def normalize(value: float, min_value: float, max_value: float) -> float:
    """Linear map of ``value`` onto [0, 1].

    Values below ``min_value`` give 0, above ``max_value`` give 1.
    A degenerate range (min == max) gives 0.
    """
    if max_value == min_value:
        return 0.0
    return clamp((value - min_value) / (max_value - min_value), 0.0, 1.0)


def normalize_inverse(value: float, min_value: float, max_value: float) -> float:
    """Inverse normalization for "less is better" metrics (e.g. release cadence)."""
    return 1.0 - normalize(value, min_value, max_value)


def normalize_log(value: float, max_value: float) -> float:
    """Log-scaled normalization for heavy-tailed counts (stars, token limits).

    Keeps very large values from dominating linearly.
    """
    if value <= 0:
        return 0.0
    log_value = math.log10(value + 1)
    log_max = math.log10(max_value + 1)
    if log_max <= 0:
        return 0.0
    return clamp(log_value / log_max, 0.0, 1.0)


def round_score(value: float, digits: int = 2) -> float:
    """Round half-up (0.125 -> 0.13), unlike Python's banker's ``round``."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor
