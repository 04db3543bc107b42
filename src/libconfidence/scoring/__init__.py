"""Confidence scoring: weighted multi-signal library and model scores."""

from libconfidence.scoring.aggregator import (
    AggregatorResult,
    ComponentBreakdown,
    ComponentInfo,
    ScoreComponent,
    WeightedScoreAggregator,
)
from libconfidence.scoring.compatibility import estimate_compatibility
from libconfidence.scoring.engine import ScoringEngine
from libconfidence.scoring.final import FORMULA, combine_scores
from libconfidence.scoring.library.calculator import LibraryCalculator
from libconfidence.scoring.model.calculator import ModelCalculator
from libconfidence.scoring.risk import RISK_LABELS, classify_risk, to_display_score

__all__ = [
    "AggregatorResult",
    "ComponentBreakdown",
    "ComponentInfo",
    "ScoreComponent",
    "WeightedScoreAggregator",
    "LibraryCalculator",
    "ModelCalculator",
    "ScoringEngine",
    "FORMULA",
    "combine_scores",
    "RISK_LABELS",
    "classify_risk",
    "to_display_score",
    "estimate_compatibility",
]
