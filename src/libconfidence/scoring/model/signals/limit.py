"""Limit signal: operational capacity from context and output limits."""

from __future__ import annotations

from libconfidence.scoring.normalize import normalize_log
from libconfidence.types import ModelContext

LIMIT_WEIGHT = 0.20

_CONTEXT_MAX = 2_000_000
_OUTPUT_MAX = 200_000


def compute_limit(context: ModelContext) -> float:
    context_score = normalize_log(context.model.context_limit, _CONTEXT_MAX)
    output_score = normalize_log(context.model.output_limit, _OUTPUT_MAX)
    return context_score * 0.6 + output_score * 0.4
