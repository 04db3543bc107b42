"""Tests for the weighted score aggregator."""

import logging
import math

import pytest

from libconfidence.errors.exceptions import ConfigurationError
from libconfidence.scoring.aggregator import (
    ComponentInfo,
    ScoreComponent,
    WeightedScoreAggregator,
)


def _component(component_id: str, weight: float, value: float) -> ScoreComponent:
    return ScoreComponent(component_id, weight, lambda _ctx: value)


class TestConstruction:
    def test_weights_not_summing_to_one_raise(self):
        components = [_component("a", 0.5, 1), _component("b", 0.3, 1)]
        with pytest.raises(ConfigurationError, match="must sum to 1.0"):
            WeightedScoreAggregator(components)

    def test_weights_above_one_raise(self):
        components = [_component("a", 0.6, 1), _component("b", 0.45, 1)]
        with pytest.raises(ConfigurationError) as exc_info:
            WeightedScoreAggregator(components)
        assert exc_info.value.error_type == "weight_sum"
        assert exc_info.value.total_weight == pytest.approx(1.05)

    def test_weights_summing_to_one_accepted(self):
        WeightedScoreAggregator([_component("a", 0.6, 1), _component("b", 0.4, 1)])

    def test_within_tolerance_accepted(self):
        WeightedScoreAggregator([_component("a", 0.6, 1), _component("b", 0.4005, 1)])

    def test_float_noise_accepted(self):
        # 0.1 * 10 != 1.0 exactly in floating point
        WeightedScoreAggregator([_component(str(i), 0.1, 1) for i in range(10)])

    def test_empty_set_raises(self):
        with pytest.raises(ConfigurationError):
            WeightedScoreAggregator([])

    def test_duplicate_ids_raise(self):
        components = [_component("a", 0.5, 1), _component("a", 0.5, 1)]
        with pytest.raises(ConfigurationError, match="Duplicate") as exc_info:
            WeightedScoreAggregator(components)
        assert exc_info.value.error_type == "duplicate_id"

    @pytest.mark.parametrize("weight", [0.0, -0.2, 1.5])
    def test_component_weight_out_of_range(self, weight):
        with pytest.raises(ConfigurationError) as exc_info:
            _component("a", weight, 1)
        assert exc_info.value.error_type == "weight_range"

    def test_accepts_generator(self):
        agg = WeightedScoreAggregator(_component(c, 0.5, 1) for c in "ab")
        assert len(agg.components) == 2


class TestCalculate:
    def test_clamps_component_values(self):
        agg = WeightedScoreAggregator([_component("a", 0.5, 1.5), _component("b", 0.5, -0.5)])
        result = agg.calculate({})
        assert result.breakdown[0].raw_value == 1.0
        assert result.breakdown[1].raw_value == 0.0
        assert result.score == 0.5

    def test_weighted_sum(self):
        agg = WeightedScoreAggregator([_component("a", 0.6, 1.0), _component("b", 0.4, 0.5)])
        assert agg.calculate({}).score == pytest.approx(0.8)

    def test_breakdown_with_contributions(self):
        agg = WeightedScoreAggregator([_component("a", 0.7, 0.8), _component("b", 0.3, 0.6)])
        result = agg.calculate({})

        assert [b.id for b in result.breakdown] == ["a", "b"]
        assert result.breakdown[0].raw_value == 0.8
        assert result.breakdown[0].weight == 0.7
        assert result.breakdown[0].contribution == pytest.approx(0.56)
        assert result.breakdown[1].contribution == pytest.approx(0.18)

    def test_score_equals_sum_of_contributions(self):
        agg = WeightedScoreAggregator(
            [_component("a", 0.25, 0.9), _component("b", 0.25, 0.1), _component("c", 0.5, 0.4)]
        )
        result = agg.calculate({})
        assert result.score == pytest.approx(sum(b.contribution for b in result.breakdown))
        assert 0.0 <= result.score <= 1.0

    def test_nan_scored_as_zero(self, caplog):
        agg = WeightedScoreAggregator([_component("a", 0.5, math.nan), _component("b", 0.5, 1.0)])
        with caplog.at_level(logging.WARNING):
            result = agg.calculate({})
        assert result.breakdown[0].raw_value == 0.0
        assert result.score == 0.5
        assert "NaN" in caplog.text

    def test_context_passed_to_components(self):
        seen = []

        def _record(ctx):
            seen.append(ctx)
            return 1.0

        agg = WeightedScoreAggregator([ScoreComponent("a", 1.0, _record)])
        agg.calculate({"key": "value"})
        assert seen == [{"key": "value"}]

    def test_identical_inputs_identical_outputs(self):
        agg = WeightedScoreAggregator([_component("a", 0.6, 0.3), _component("b", 0.4, 0.9)])
        assert agg.calculate({}) == agg.calculate({})

    def test_component_result_view(self):
        agg = WeightedScoreAggregator([_component("a", 0.6, 0.5), _component("b", 0.4, 1.0)])
        view = agg.calculate({}).component_result("a")
        assert view.value == 0.5
        assert view.weight == 0.6
        assert view.contribution == pytest.approx(0.3)

    def test_unknown_component_lookup(self):
        agg = WeightedScoreAggregator([_component("a", 1.0, 0.5)])
        with pytest.raises(KeyError):
            agg.calculate({}).get("missing")


class TestComponentInfo:
    def test_returns_ids_and_weights_in_order(self):
        agg = WeightedScoreAggregator([_component("stability", 0.6, 1), _component("recency", 0.4, 1)])
        assert agg.get_component_info() == [
            ComponentInfo(id="stability", weight=0.6),
            ComponentInfo(id="recency", weight=0.4),
        ]
