"""Simplicity signal: conceptual scope estimated from keywords."""

from __future__ import annotations

from libconfidence.scoring.normalize import normalize_inverse
from libconfidence.types import LibraryContext

SIMPLICITY_WEIGHT = 0.10

COMPLEX_KEYWORDS: tuple[str, ...] = (
    "framework",
    "platform",
    "ecosystem",
    "full-stack",
    "fullstack",
    "enterprise",
    "monorepo",
    "suite",
    "sdk",
)


def count_complex_keywords(keywords: frozenset[str] | list[str]) -> int:
    """Number of keywords containing any complexity marker (case-insensitive)."""
    count = 0
    for keyword in keywords:
        lower = keyword.lower()
        if any(marker in lower for marker in COMPLEX_KEYWORDS):
            count += 1
    return count


def compute_simplicity(context: LibraryContext) -> float:
    count = count_complex_keywords(context.library.keywords)
    # 0 complex keywords -> 1.0, 4+ -> 0.0
    return normalize_inverse(count, 0, 4)
