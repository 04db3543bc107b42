"""Layered settings for the CLI and ``ScoringEngine.from_config``.

Sources, lowest priority first:
  defaults, ~/.libconfidence/config.yaml, the nearest libconfidence.yaml
  at or above cwd, LIBCONFIDENCE_* variables, explicit runtime values.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from libconfidence.config.defaults import get_defaults

logger = logging.getLogger(__name__)

_GLOBAL_CONFIG_PATH = Path.home() / ".libconfidence" / "config.yaml"
_PROJECT_CONFIG_NAME = "libconfidence.yaml"

_ENV_PREFIX = "LIBCONFIDENCE_"
_ENV_KEYS = (
    "log_level",
    "risk_low_threshold",
    "risk_medium_threshold",
    "model_recency_start",
    "output_format",
)

# Thresholds are compared numerically; everything else stays a string
_NUMERIC_KEYS = frozenset({"risk_low_threshold", "risk_medium_threshold"})


def load_config_hierarchy(**runtime_overrides: Any) -> dict[str, Any]:
    """Resolve every setting; runtime values of None leave lower layers alone."""
    config = get_defaults()

    for path in (_GLOBAL_CONFIG_PATH, _find_project_config()):
        if path is not None:
            config.update(_load_yaml_config(path) or {})

    config.update(_load_env_vars())
    config.update({k: v for k, v in runtime_overrides.items() if v is not None})
    return config


def _load_yaml_config(path: Path) -> dict[str, Any] | None:
    if not path.is_file():
        return None
    try:
        data = yaml.safe_load(path.read_text())
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return None
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: top level is not a mapping", path)
        return None
    return data


def _find_project_config() -> Path | None:
    """Nearest libconfidence.yaml in cwd or one of its parents."""
    cwd = Path.cwd()
    for directory in (cwd, *cwd.parents):
        candidate = directory / _PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
    return None


def _load_env_vars() -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key in _ENV_KEYS:
        value = os.environ.get(_ENV_PREFIX + key.upper())
        if value is not None:
            result[key] = _coerce_env_value(key, value)
    return result


def _coerce_env_value(key: str, value: str) -> Any:
    """Parse numeric settings; a malformed number is kept as text for later validation."""
    if key not in _NUMERIC_KEYS:
        return value
    try:
        return float(value)
    except ValueError:
        logger.warning("%s%s is not a number: %r", _ENV_PREFIX, key.upper(), value)
        return value
