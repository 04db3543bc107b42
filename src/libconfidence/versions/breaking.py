"""Breaking-change detection by major-version delta."""

from __future__ import annotations

from collections.abc import Sequence

from libconfidence.types import ScoredVersionWithBreaking, VersionMetadata
from libconfidence.versions.parsing import parse_major


def _chronological(versions: Sequence[VersionMetadata]) -> list[int]:
    """Indices of ``versions`` by release date; equal dates keep input order."""
    return sorted(range(len(versions)), key=lambda i: versions[i].release_date)


def breaking_flags(versions: Sequence[VersionMetadata]) -> list[bool]:
    """Breaking flag for each entry of ``versions``, in input order.

    A version is breaking when its major differs from the chronologically
    previous release. The earliest version is never breaking. This is a
    placeholder heuristic, not an API diff.
    """
    flags = [False] * len(versions)
    previous_major: int | None = None
    for index in _chronological(versions):
        major = parse_major(versions[index].version)
        flags[index] = previous_major is not None and major != previous_major
        previous_major = major
    return flags


def detect_breaking_changes(
    versions: Sequence[VersionMetadata],
) -> list[ScoredVersionWithBreaking]:
    """Breaking flags as records, ordered by release date."""
    flags = breaking_flags(versions)
    return [
        ScoredVersionWithBreaking(
            version=versions[i].version,
            published_at=versions[i].release_date,
            breaking=flags[i],
        )
        for i in _chronological(versions)
    ]
