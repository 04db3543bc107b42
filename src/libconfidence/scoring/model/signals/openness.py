"""Openness signal: open weights and API compatibility."""

from __future__ import annotations

from libconfidence.types import ModelContext

OPENNESS_WEIGHT = 0.15

COMPATIBILITY_MARKER = "openai-compatible"


def compute_openness(context: ModelContext) -> float:
    score = 0.0
    if context.model.open_weights:
        score += 0.7
    if COMPATIBILITY_MARKER in context.model.api_compatibility.lower():
        score += 0.3
    return score
