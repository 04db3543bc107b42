"""Library Confidence Score (LCS): how well a model knows a library version."""

from libconfidence.scoring.library.calculator import (
    LibraryCalculator,
    default_library_components,
)

__all__ = ["LibraryCalculator", "default_library_components"]
