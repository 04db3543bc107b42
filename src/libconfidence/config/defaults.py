"""Package-level default configuration values."""

from __future__ import annotations

from typing import Any

# Risk tier lower bounds on the 0-100 display scale
DEFAULT_RISK_LOW_THRESHOLD = 70
DEFAULT_RISK_MEDIUM_THRESHOLD = 40

# Start of the model recency reference range ("YYYY-MM")
DEFAULT_MODEL_RECENCY_START = "2020-01"

# CLI output: "table" or "json"
DEFAULT_OUTPUT_FORMAT = "table"

# Log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "risk_low_threshold": DEFAULT_RISK_LOW_THRESHOLD,
        "risk_medium_threshold": DEFAULT_RISK_MEDIUM_THRESHOLD,
        "model_recency_start": DEFAULT_MODEL_RECENCY_START,
        "output_format": DEFAULT_OUTPUT_FORMAT,
        "log_level": DEFAULT_LOG_LEVEL,
    }
