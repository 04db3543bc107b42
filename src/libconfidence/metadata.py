"""Derive scoring metadata from raw registry facts."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime

from libconfidence.types import LibraryMetadata, VersionMetadata
from libconfidence.utils.dates import ensure_utc, utc_now

_DAYS_PER_YEAR = 365


def library_age_in_years(versions: Sequence[VersionMetadata], as_of: datetime | None = None) -> float:
    """Years from the earliest release to ``as_of``; 0 without releases."""
    if not versions:
        return 0.0
    as_of = ensure_utc(as_of) if as_of else utc_now()
    first_release = min(v.release_date for v in versions)
    days = (as_of - first_release).total_seconds() / 86400
    return max(0.0, days / _DAYS_PER_YEAR)


def library_metadata_from_releases(
    name: str,
    versions: Sequence[VersionMetadata],
    *,
    language: str | None = None,
    keywords: Iterable[str] = (),
    stars: int | None = None,
    dependents_count: int | None = None,
    as_of: datetime | None = None,
) -> LibraryMetadata:
    """Build LibraryMetadata, taking age and release count from the release history."""
    return LibraryMetadata(
        name=name,
        language=language or "unknown",
        age_in_years=library_age_in_years(versions, as_of),
        release_count=len(versions),
        keywords=frozenset(keywords),
        stars=stars or 0,
        dependents_count=dependents_count or 0,
    )
