"""Version heuristics: major parsing, bucketing, breaking-change detection."""

from libconfidence.versions.breaking import breaking_flags, detect_breaking_changes
from libconfidence.versions.buckets import group_versions_into_buckets
from libconfidence.versions.parsing import parse_major

__all__ = [
    "parse_major",
    "breaking_flags",
    "detect_breaking_changes",
    "group_versions_into_buckets",
]
