"""libconfidence — estimate how well an LLM's training data covers a library version."""

from libconfidence.scoring.engine import ScoringEngine
from libconfidence.types import (
    LibraryMetadata,
    ModelMetadata,
    ScoreReport,
    ScoreRequest,
    VersionMetadata,
)

__version__ = "0.1.0"

__all__ = [
    "ScoringEngine",
    "LibraryMetadata",
    "ModelMetadata",
    "ScoreReport",
    "ScoreRequest",
    "VersionMetadata",
    "__version__",
]
