"""Language affinity signal: representation in general pretraining corpora."""

from __future__ import annotations

from libconfidence.types import LibraryContext

LANGUAGE_WEIGHT = 0.10

LANGUAGE_SCORES: dict[str, float] = {
    "javascript": 1.0,
    "typescript": 1.0,
    "python": 1.0,
    "java": 0.9,
    "go": 0.85,
    "rust": 0.8,
    "ruby": 0.8,
    "php": 0.75,
    "csharp": 0.75,
    "c#": 0.75,
    "swift": 0.7,
    "kotlin": 0.7,
    "c": 0.7,
    "c++": 0.7,
    "cpp": 0.7,
}

DEFAULT_LANGUAGE_SCORE = 0.5


def compute_language_affinity(context: LibraryContext) -> float:
    language = context.library.language.strip().lower()
    return LANGUAGE_SCORES.get(language, DEFAULT_LANGUAGE_SCORE)
