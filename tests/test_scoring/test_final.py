"""Tests for the final score combination."""

from datetime import datetime, timezone

from libconfidence.scoring.final import FORMULA, combine_scores
from libconfidence.types import ComponentResult, VersionScore


def _version_score(version: str, score: float) -> VersionScore:
    return VersionScore(
        version=version,
        release_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
        recency=ComponentResult(value=0.5, weight=0.4, contribution=0.2),
        score=score,
    )


class TestCombineScores:
    def test_multiplies(self):
        result = combine_scores([_version_score("1.0.0", 0.94)], 0.99)
        assert result.versions[0].final == 0.93
        assert result.versions[0].library_score == 0.94
        assert result.versions[0].model_score == 0.99

    def test_typical_products(self):
        result = combine_scores([_version_score("1.0.0", 0.75)], 0.8)
        assert result.versions[0].final == 0.60
        result = combine_scores([_version_score("1.0.0", 0.50)], 1.0)
        assert result.versions[0].final == 0.50

    def test_exact_product(self):
        result = combine_scores([_version_score("1.0.0", 0.8)], 0.5)
        assert result.versions[0].final == 0.4

    def test_rounds_half_up(self):
        # 0.5 * 0.25 = 0.125
        result = combine_scores([_version_score("1.0.0", 0.5)], 0.25)
        assert result.versions[0].final == 0.13

    def test_zero_model_score(self):
        result = combine_scores([_version_score("1.0.0", 1.0)], 0.0)
        assert result.versions[0].final == 0.0

    def test_preserves_order(self):
        versions = [_version_score("2.0.0", 0.3), _version_score("1.0.0", 0.9)]
        result = combine_scores(versions, 1.0)
        assert [v.version for v in result.versions] == ["2.0.0", "1.0.0"]

    def test_formula(self):
        result = combine_scores([], 0.5)
        assert result.formula == FORMULA == "LCS × LGS"
        assert result.versions == []
