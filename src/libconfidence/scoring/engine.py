"""Scoring engine: library, model and final scores plus version heuristics."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime
from typing import Any

from libconfidence.config.defaults import (
    DEFAULT_MODEL_RECENCY_START,
    DEFAULT_RISK_LOW_THRESHOLD,
    DEFAULT_RISK_MEDIUM_THRESHOLD,
)
from libconfidence.errors.exceptions import ConfigurationError
from libconfidence.scoring.final import combine_scores
from libconfidence.scoring.library.calculator import LibraryCalculator
from libconfidence.scoring.model.calculator import ModelCalculator
from libconfidence.scoring.risk import (
    RISK_LABELS,
    classify_risk,
    to_display_score,
    validate_thresholds,
)
from libconfidence.types import (
    FinalScores,
    LibraryMetadata,
    ModelMetadata,
    ScoredVersion,
    ScoreReport,
    ScoreRequest,
    VersionMetadata,
)
from libconfidence.utils.dates import parse_year_month, utc_now
from libconfidence.versions.breaking import breaking_flags, detect_breaking_changes
from libconfidence.versions.buckets import group_versions_into_buckets

logger = logging.getLogger(__name__)


class ScoringEngine:
    """Library confidence → model score → final score → buckets.

    Build one instance per process and share it: weights are validated at
    construction and nothing is mutated afterwards.
    """

    def __init__(
        self,
        library_calculator: LibraryCalculator | None = None,
        model_calculator: ModelCalculator | None = None,
        risk_low_threshold: float = DEFAULT_RISK_LOW_THRESHOLD,
        risk_medium_threshold: float = DEFAULT_RISK_MEDIUM_THRESHOLD,
    ) -> None:
        validate_thresholds(risk_low_threshold, risk_medium_threshold)
        self.library_calculator = library_calculator or LibraryCalculator()
        self.model_calculator = model_calculator or ModelCalculator()
        self.risk_low_threshold = risk_low_threshold
        self.risk_medium_threshold = risk_medium_threshold

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> ScoringEngine:
        """Build an engine from a merged config dict (see ``load_config_hierarchy``)."""
        start_raw = config.get("model_recency_start", DEFAULT_MODEL_RECENCY_START)
        reference_start = parse_year_month(str(start_raw))
        if reference_start is None:
            raise ConfigurationError(
                f"model_recency_start must be 'YYYY-MM', got {start_raw!r}",
                error_type="model_recency_start",
            )

        return cls(
            model_calculator=ModelCalculator(reference_start=reference_start),
            risk_low_threshold=_threshold(
                config, "risk_low_threshold", DEFAULT_RISK_LOW_THRESHOLD
            ),
            risk_medium_threshold=_threshold(
                config, "risk_medium_threshold", DEFAULT_RISK_MEDIUM_THRESHOLD
            ),
        )

    def score(
        self,
        library: LibraryMetadata,
        versions: Sequence[VersionMetadata],
        model: ModelMetadata,
        as_of: datetime | None = None,
    ) -> ScoreReport:
        """Score every version of ``library`` for ``model``.

        ``as_of`` anchors the model recency range (default: now, UTC).
        """
        as_of = as_of or utc_now()

        library_report = self.library_calculator.report(library, versions, model)
        model_score = self.model_calculator.score(model, as_of=as_of)
        final = combine_scores(library_report.versions, model_score.score)
        breaking = detect_breaking_changes(versions)

        scored = self._scored_versions(versions, final, breaking_flags(versions))
        buckets = group_versions_into_buckets(scored)

        logger.info(
            "Scored %d versions of %s for %s (model score %.2f, %d buckets)",
            len(versions),
            library.name,
            model.id,
            model_score.score,
            len(buckets),
        )
        for item in final.versions:
            logger.debug(
                "%s: lcs=%.2f lgs=%.2f final=%.2f",
                item.version,
                item.library_score,
                item.model_score,
                item.final,
            )

        return ScoreReport(
            library=library.name,
            model=model.id,
            library_confidence=library_report,
            model_score=model_score,
            final=final,
            breaking=breaking,
            buckets=buckets,
        )

    def score_request(self, request: ScoreRequest, as_of: datetime | None = None) -> ScoreReport:
        return self.score(request.library, request.versions, request.model, as_of=as_of)

    def _scored_versions(
        self,
        versions: Sequence[VersionMetadata],
        final: FinalScores,
        breaking: Sequence[bool],
    ) -> list[ScoredVersion]:
        """Pair final scores with release dates, risk tiers and breaking flags."""
        scored: list[ScoredVersion] = []
        for meta, item, is_breaking in zip(versions, final.versions, breaking, strict=True):
            display = to_display_score(item.final)
            risk = classify_risk(display, self.risk_low_threshold, self.risk_medium_threshold)
            scored.append(
                ScoredVersion(
                    version=item.version,
                    release_date=meta.release_date,
                    breaking=is_breaking,
                    score=display,
                    risk=risk,
                    reason=RISK_LABELS[risk],
                )
            )
        return scored


def _threshold(config: dict[str, Any], key: str, default: float) -> float:
    raw = config.get(key, default)
    try:
        return float(raw)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            f"{key} must be a number, got {raw!r}", error_type="risk_thresholds"
        ) from e
