"""Model capability score (LGS): general strength of a model."""

from libconfidence.scoring.model.calculator import ModelCalculator, default_model_components

__all__ = ["ModelCalculator", "default_model_components"]
