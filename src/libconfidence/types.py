"""Shared Pydantic models for libconfidence."""

from __future__ import annotations

from datetime import date, datetime, timezone
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from libconfidence.utils.dates import ensure_utc, parse_year_month, utc_now

# ── Enums ──


class RiskLevel(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def _coerce_datetime(value: Any) -> Any:
    """Accept "YYYY-MM" strings and plain dates; make datetimes timezone-aware."""
    if isinstance(value, str):
        parsed = parse_year_month(value)
        if parsed is not None:
            return parsed
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, date):
        # YAML loads unquoted YYYY-MM-DD as a date
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    return value


class _Frozen(BaseModel):
    model_config = {"frozen": True, "protected_namespaces": ()}


# ── Input metadata ──


class LibraryMetadata(_Frozen):
    name: str
    language: str = "unknown"
    age_in_years: float = Field(default=0.0, ge=0)
    release_count: int = Field(default=0, ge=0)
    keywords: frozenset[str] = Field(default_factory=frozenset)
    stars: int = Field(default=0, ge=0)
    dependents_count: int = Field(default=0, ge=0)


class VersionMetadata(_Frozen):
    version: str
    release_date: datetime

    @field_validator("release_date", mode="before")
    @classmethod
    def _release_date_utc(cls, value: Any) -> Any:
        return _coerce_datetime(value)

    @field_validator("release_date")
    @classmethod
    def _release_date_aware(cls, value: datetime) -> datetime:
        return ensure_utc(value)


class Modalities(_Frozen):
    input: frozenset[str] = frozenset({"text"})
    output: frozenset[str] = frozenset({"text"})


class ModelMetadata(_Frozen):
    """Model facts needed by both sub-scores.

    ``cutoff_date`` drives library confidence; the remaining fields feed the
    model capability score.
    """

    id: str
    name: str = ""
    cutoff_date: datetime
    reasoning: bool = False
    tool_call: bool = False
    structured_output: bool = False
    attachment: bool = False
    modalities: Modalities = Field(default_factory=Modalities)
    context_limit: int = Field(default=0, ge=0)
    output_limit: int = Field(default=0, ge=0)
    knowledge_cutoff: datetime | None = None
    last_updated: datetime | None = None
    open_weights: bool = False
    api_compatibility: str = ""

    @field_validator("cutoff_date", "knowledge_cutoff", "last_updated", mode="before")
    @classmethod
    def _dates_utc(cls, value: Any) -> Any:
        return _coerce_datetime(value)

    @field_validator("cutoff_date", "knowledge_cutoff", "last_updated")
    @classmethod
    def _dates_aware(cls, value: datetime | None) -> datetime | None:
        return ensure_utc(value) if value is not None else None


# ── Scoring contexts ──


class LibraryContext(_Frozen):
    library: LibraryMetadata
    version: VersionMetadata
    model: ModelMetadata


class ModelContext(_Frozen):
    model: ModelMetadata
    as_of: datetime = Field(default_factory=utc_now)

    @field_validator("as_of")
    @classmethod
    def _as_of_aware(cls, value: datetime) -> datetime:
        return ensure_utc(value)


# ── Score results ──


class ComponentResult(_Frozen):
    value: float
    weight: float
    contribution: float


class LibraryScoreBreakdown(_Frozen):
    stability: ComponentResult
    simplicity: ComponentResult
    popularity: ComponentResult
    language: ComponentResult


class VersionCalculationResult(_Frozen):
    version: str
    release_date: datetime
    score: float
    library_breakdown: LibraryScoreBreakdown
    recency_breakdown: ComponentResult


class VersionScore(_Frozen):
    version: str
    release_date: datetime
    recency: ComponentResult
    score: float


class LibraryConfidenceReport(_Frozen):
    library_breakdown: LibraryScoreBreakdown | None = None
    versions: list[VersionScore] = Field(default_factory=list)


class ModelScoreBreakdown(_Frozen):
    capability: ComponentResult
    limit: ComponentResult
    recency: ComponentResult
    openness: ComponentResult


class ModelScore(_Frozen):
    score: float
    breakdown: ModelScoreBreakdown


class FinalVersionScore(_Frozen):
    version: str
    library_score: float
    model_score: float
    final: float


class FinalScores(_Frozen):
    versions: list[FinalVersionScore] = Field(default_factory=list)
    formula: str = "LCS × LGS"


# ── Version heuristics ──


class ScoredVersionWithBreaking(_Frozen):
    version: str
    published_at: datetime
    breaking: bool = False


class ScoredVersion(_Frozen):
    version: str
    release_date: datetime | None = None
    breaking: bool = False
    score: int = Field(default=0, ge=0, le=100)
    risk: RiskLevel = RiskLevel.HIGH
    reason: str = ""


class VersionBucket(_Frozen):
    major: int
    best_score: int
    versions: list[ScoredVersion] = Field(default_factory=list)


class CompatibilityEstimate(_Frozen):
    score: int = Field(ge=0, le=100)
    risk: RiskLevel
    reason: str


# ── Engine I/O ──


class ScoreRequest(_Frozen):
    library: LibraryMetadata
    versions: list[VersionMetadata] = Field(default_factory=list)
    model: ModelMetadata


class ScoreReport(_Frozen):
    library: str
    model: str
    library_confidence: LibraryConfidenceReport
    model_score: ModelScore
    final: FinalScores
    breaking: list[ScoredVersionWithBreaking] = Field(default_factory=list)
    buckets: list[VersionBucket] = Field(default_factory=list)
