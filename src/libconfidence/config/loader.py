"""Score-request loading (YAML or JSON) and validation."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from libconfidence.errors.exceptions import InputError
from libconfidence.metadata import library_metadata_from_releases
from libconfidence.types import LibraryMetadata, ModelMetadata, ScoreRequest, VersionMetadata

logger = logging.getLogger(__name__)


def load_score_request(path: str | Path, as_of: datetime | None = None) -> ScoreRequest:
    """Load a score request file and return a validated ScoreRequest.

    Expected top-level keys: ``library``, ``model`` and optionally ``versions``.
    When the library omits ``age_in_years`` or ``release_count`` they are
    derived from the versions list, measured up to ``as_of``.
    """
    path = Path(path)
    raw = _read_mapping(path)

    for key in ("library", "model"):
        if not isinstance(raw.get(key), dict):
            raise InputError(f"Invalid score request: missing '{key}' mapping in {path}", source=path)

    raw_versions = raw.get("versions") or []
    if not isinstance(raw_versions, list):
        raise InputError(f"Invalid score request: 'versions' must be a list in {path}", source=path)

    try:
        versions = [VersionMetadata(**v) for v in raw_versions]
        library = _build_library(raw["library"], versions, as_of)
        model = _build_model(raw["model"], path)
    except (ValidationError, TypeError, KeyError) as e:
        raise InputError(f"Invalid score request {path}: {e}", source=path, original=e) from e

    logger.debug("Loaded %s: %d versions, model %s", path, len(versions), model.id)
    return ScoreRequest(library=library, versions=versions, model=model)


def _read_mapping(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise InputError(f"Score request not found: {path}", source=path)

    try:
        with open(path) as f:
            if path.suffix.lower() == ".json":
                raw = json.load(f)
            else:
                raw = yaml.safe_load(f)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise InputError(f"Cannot read score request {path}: {e}", source=path, original=e) from e

    if not isinstance(raw, dict):
        raise InputError(
            f"Expected a mapping, got {type(raw).__name__} in {path}", source=path
        )
    return raw


def _build_library(
    data: dict[str, Any],
    versions: list[VersionMetadata],
    as_of: datetime | None,
) -> LibraryMetadata:
    if "age_in_years" in data and "release_count" in data:
        return LibraryMetadata(**data)

    derived = library_metadata_from_releases(
        name=data["name"],
        versions=versions,
        language=data.get("language"),
        keywords=data.get("keywords") or (),
        stars=data.get("stars"),
        dependents_count=data.get("dependents_count"),
        as_of=as_of,
    )
    overrides = {k: data[k] for k in ("age_in_years", "release_count") if k in data}
    if not overrides:
        return derived
    return LibraryMetadata(**{**derived.model_dump(), **overrides})


def _build_model(data: dict[str, Any], path: Path) -> ModelMetadata:
    data = dict(data)
    if not data.get("cutoff_date"):
        if not data.get("knowledge_cutoff"):
            raise InputError(
                f"Model '{data.get('id', '?')}' has no knowledge cutoff date in {path}",
                source=path,
            )
        data["cutoff_date"] = data["knowledge_cutoff"]
    return ModelMetadata(**data)
