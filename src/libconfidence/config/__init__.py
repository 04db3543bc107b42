"""Configuration: defaults, layered config hierarchy and score-request loading."""

from libconfidence.config.defaults import get_defaults
from libconfidence.config.hierarchy import load_config_hierarchy
from libconfidence.config.loader import load_score_request

__all__ = ["get_defaults", "load_config_hierarchy", "load_score_request"]
