"""Library Confidence Score (LCS) calculator."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from libconfidence.scoring.aggregator import (
    ComponentInfo,
    ScoreComponent,
    WeightedScoreAggregator,
)
from libconfidence.scoring.library.signals.language import (
    LANGUAGE_WEIGHT,
    compute_language_affinity,
)
from libconfidence.scoring.library.signals.popularity import (
    POPULARITY_WEIGHT,
    compute_popularity,
)
from libconfidence.scoring.library.signals.recency import RECENCY_WEIGHT, compute_recency
from libconfidence.scoring.library.signals.simplicity import (
    SIMPLICITY_WEIGHT,
    compute_simplicity,
)
from libconfidence.scoring.library.signals.stability import (
    STABILITY_WEIGHT,
    compute_stability,
)
from libconfidence.scoring.normalize import round_score
from libconfidence.types import (
    LibraryConfidenceReport,
    LibraryContext,
    LibraryMetadata,
    LibraryScoreBreakdown,
    ModelMetadata,
    VersionCalculationResult,
    VersionMetadata,
    VersionScore,
)

logger = logging.getLogger(__name__)


def default_library_components() -> list[ScoreComponent[LibraryContext]]:
    """The fixed LCS component set, in registration order."""
    return [
        ScoreComponent("recency", RECENCY_WEIGHT, compute_recency),
        ScoreComponent("stability", STABILITY_WEIGHT, compute_stability),
        ScoreComponent("simplicity", SIMPLICITY_WEIGHT, compute_simplicity),
        ScoreComponent("popularity", POPULARITY_WEIGHT, compute_popularity),
        ScoreComponent("language", LANGUAGE_WEIGHT, compute_language_affinity),
    ]


class LibraryCalculator:
    """Score library versions against a model's knowledge cutoff.

    Four components describe the library as a whole (stability, simplicity,
    popularity, language); recency is version-specific and reported
    separately, though its contribution is part of the same total.
    """

    def __init__(self) -> None:
        self._aggregator = WeightedScoreAggregator(default_library_components())

    def score_version(
        self,
        library: LibraryMetadata,
        version: VersionMetadata,
        model: ModelMetadata,
    ) -> VersionCalculationResult:
        context = LibraryContext(library=library, version=version, model=model)
        result = self._aggregator.calculate(context)

        breakdown = LibraryScoreBreakdown(
            stability=result.component_result("stability"),
            simplicity=result.component_result("simplicity"),
            popularity=result.component_result("popularity"),
            language=result.component_result("language"),
        )

        return VersionCalculationResult(
            version=version.version,
            release_date=version.release_date,
            score=round_score(result.score),
            library_breakdown=breakdown,
            recency_breakdown=result.component_result("recency"),
        )

    def score_versions(
        self,
        library: LibraryMetadata,
        versions: Sequence[VersionMetadata],
        model: ModelMetadata,
    ) -> list[VersionCalculationResult]:
        """Score each version; output order matches ``versions``."""
        return [self.score_version(library, v, model) for v in versions]

    def report(
        self,
        library: LibraryMetadata,
        versions: Sequence[VersionMetadata],
        model: ModelMetadata,
    ) -> LibraryConfidenceReport:
        """Build the presentation shape: one library breakdown plus per-version scores.

        The library breakdown is taken from the first version scored. With no
        versions there is nothing to break down and it is left empty.
        """
        results = self.score_versions(library, versions, model)
        if not results:
            logger.debug("No versions to score for library %s", library.name)
            return LibraryConfidenceReport()

        return LibraryConfidenceReport(
            library_breakdown=results[0].library_breakdown,
            versions=[
                VersionScore(
                    version=r.version,
                    release_date=r.release_date,
                    recency=r.recency_breakdown,
                    score=r.score,
                )
                for r in results
            ],
        )

    def get_component_info(self) -> list[ComponentInfo]:
        return self._aggregator.get_component_info()
