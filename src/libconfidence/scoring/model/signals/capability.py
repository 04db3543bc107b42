"""Capability signal: breadth of declared model features."""

from __future__ import annotations

from libconfidence.types import ModelContext

CAPABILITY_WEIGHT = 0.30

_SIGNAL_COUNT = 6


def compute_capability(context: ModelContext) -> float:
    """Fraction of six binary feature signals the model declares.

    Signals: reasoning, tool calling, structured output, attachments,
    multimodal input and multimodal output (more than one modality).
    """
    model = context.model
    present = [
        model.reasoning,
        model.tool_call,
        model.structured_output,
        model.attachment,
        len(model.modalities.input) > 1,
        len(model.modalities.output) > 1,
    ]
    return sum(present) / _SIGNAL_COUNT
