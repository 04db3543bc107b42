"""Custom exception hierarchy for libconfidence."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class LibConfidenceError(Exception):
    """Base exception for all libconfidence errors."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(LibConfidenceError):
    """Programmer error in a scoring setup. Raised at construction time.

    Examples: component weights not summing to 1.0, a weight outside (0, 1],
    duplicate component ids, inverted risk thresholds.
    """

    def __init__(
        self,
        message: str = "",
        error_type: str = "weight_sum",
        total_weight: float | None = None,
    ) -> None:
        super().__init__(message)
        self.error_type = error_type
        self.total_weight = total_weight


class InputError(LibConfidenceError):
    """Score request could not be read or does not describe a scorable pair.

    Examples: missing file, YAML that is not a mapping, a model without a cutoff.
    """

    def __init__(
        self,
        message: str = "",
        source: str | Path | None = None,
        original: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.source = source
        self.original = original
