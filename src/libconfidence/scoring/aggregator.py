"""Weighted score aggregation with eager weight validation."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from libconfidence.errors.exceptions import ConfigurationError
from libconfidence.scoring.normalize import clamp
from libconfidence.types import ComponentResult

logger = logging.getLogger(__name__)

ContextT = TypeVar("ContextT")

WEIGHT_TOLERANCE = 0.001


@dataclass(frozen=True)
class ScoreComponent(Generic[ContextT]):
    """One weighted signal: an id, a fixed weight and a pure scoring function."""

    id: str
    weight: float
    compute: Callable[[ContextT], float]

    def __post_init__(self) -> None:
        if not 0.0 < self.weight <= 1.0:
            raise ConfigurationError(
                f"Component '{self.id}' weight must be in (0, 1], got {self.weight}",
                error_type="weight_range",
            )

    def calculate(self, context: ContextT) -> float:
        return self.compute(context)


class ComponentBreakdown(BaseModel):
    model_config = {"frozen": True}

    id: str
    raw_value: float
    weight: float
    contribution: float


class AggregatorResult(BaseModel):
    model_config = {"frozen": True}

    score: float = 0.0
    breakdown: list[ComponentBreakdown] = Field(default_factory=list)

    def get(self, component_id: str) -> ComponentBreakdown:
        for item in self.breakdown:
            if item.id == component_id:
                return item
        raise KeyError(component_id)

    def component_result(self, component_id: str) -> ComponentResult:
        """Typed value/weight/contribution view of one component."""
        item = self.get(component_id)
        return ComponentResult(
            value=item.raw_value, weight=item.weight, contribution=item.contribution
        )


class ComponentInfo(BaseModel):
    model_config = {"frozen": True}

    id: str
    weight: float


class WeightedScoreAggregator(Generic[ContextT]):
    """Combine independently scored components into one [0, 1] value.

    Weights are validated once at construction and must sum to 1.0. At
    calculation time each component output is clamped into [0, 1] before
    weighting, so a misbehaving signal cannot push the total out of range.
    """

    def __init__(self, components: Iterable[ScoreComponent[ContextT]]) -> None:
        self._components: tuple[ScoreComponent[ContextT], ...] = tuple(components)
        self._validate()

    def _validate(self) -> None:
        ids = [c.id for c in self._components]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ConfigurationError(
                f"Duplicate component ids: {', '.join(duplicates)}",
                error_type="duplicate_id",
            )

        total = sum(c.weight for c in self._components)
        if abs(total - 1.0) > WEIGHT_TOLERANCE:
            raise ConfigurationError(
                f"Component weights must sum to 1.0, got {total:.3f}",
                error_type="weight_sum",
                total_weight=total,
            )

    @property
    def components(self) -> tuple[ScoreComponent[ContextT], ...]:
        return self._components

    def calculate(self, context: ContextT) -> AggregatorResult:
        breakdown: list[ComponentBreakdown] = []
        total = 0.0

        for component in self._components:
            raw = component.calculate(context)
            if math.isnan(raw):
                logger.warning("Component '%s' returned NaN; scoring it as 0.0", component.id)
                raw = 0.0
            elif not 0.0 <= raw <= 1.0:
                logger.debug("Component '%s' out of range (%s), clamping", component.id, raw)

            value = clamp(raw, 0.0, 1.0)
            contribution = value * component.weight
            breakdown.append(
                ComponentBreakdown(
                    id=component.id,
                    raw_value=value,
                    weight=component.weight,
                    contribution=contribution,
                )
            )
            total += contribution

        return AggregatorResult(score=clamp(total, 0.0, 1.0), breakdown=breakdown)

    def get_component_info(self) -> list[ComponentInfo]:
        """Component ids and weights, in registration order."""
        return [ComponentInfo(id=c.id, weight=c.weight) for c in self._components]
