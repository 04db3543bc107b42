"""Group scored versions into major-version buckets."""

from __future__ import annotations

from collections.abc import Sequence

from libconfidence.types import ScoredVersion, VersionBucket
from libconfidence.versions.parsing import parse_major


def group_versions_into_buckets(versions: Sequence[ScoredVersion]) -> list[VersionBucket]:
    """Bucket versions by major number.

    Ranking policy:
      - members: score descending (equal scores keep input order)
      - representative: best member score
      - buckets: best score descending, then major descending
    """
    grouped: dict[int, list[ScoredVersion]] = {}
    for version in versions:
        grouped.setdefault(parse_major(version.version), []).append(version)

    buckets = []
    for major, members in grouped.items():
        ranked = sorted(members, key=lambda v: v.score, reverse=True)
        buckets.append(VersionBucket(major=major, best_score=ranked[0].score, versions=ranked))

    buckets.sort(key=lambda b: (b.best_score, b.major), reverse=True)
    return buckets
