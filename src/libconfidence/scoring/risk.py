"""Risk tiers for 0-100 display scores."""

from __future__ import annotations

from libconfidence.errors.exceptions import ConfigurationError
from libconfidence.scoring.normalize import clamp
from libconfidence.types import RiskLevel

DEFAULT_LOW_THRESHOLD = 70
DEFAULT_MEDIUM_THRESHOLD = 40

RISK_LABELS: dict[RiskLevel, str] = {
    RiskLevel.LOW: "High reliability",
    RiskLevel.MEDIUM: "May require adjustments",
    RiskLevel.HIGH: "High risk of outdated responses",
}


def validate_thresholds(low_threshold: float, medium_threshold: float) -> None:
    if medium_threshold > low_threshold:
        raise ConfigurationError(
            f"Medium risk threshold ({medium_threshold}) must not exceed "
            f"low risk threshold ({low_threshold})",
            error_type="risk_thresholds",
        )


def classify_risk(
    score: float,
    low_threshold: float = DEFAULT_LOW_THRESHOLD,
    medium_threshold: float = DEFAULT_MEDIUM_THRESHOLD,
) -> RiskLevel:
    """Classify a 0-100 score; each tier's lower bound is inclusive."""
    validate_thresholds(low_threshold, medium_threshold)
    if score >= low_threshold:
        return RiskLevel.LOW
    if score >= medium_threshold:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH


def to_display_score(score: float) -> int:
    """Convert a [0, 1] score to the 0-100 display scale (half-up)."""
    return int(clamp(score, 0.0, 1.0) * 100 + 0.5)
