"""Final score: library confidence multiplied by model capability."""

from __future__ import annotations

from collections.abc import Sequence

from libconfidence.scoring.normalize import round_score
from libconfidence.types import FinalScores, FinalVersionScore, VersionScore

FORMULA = "LCS × LGS"


def combine_scores(versions: Sequence[VersionScore], model_score: float) -> FinalScores:
    """Multiply each version's library score by the model score.

    A weak model suppresses an excellent library score and vice versa.
    """
    return FinalScores(
        versions=[
            FinalVersionScore(
                version=v.version,
                library_score=v.score,
                model_score=model_score,
                final=round_score(v.score * model_score),
            )
            for v in versions
        ],
        formula=FORMULA,
    )
