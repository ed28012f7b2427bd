"""Data models for candidate matching."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_GENRE_POPULARITY = 0.5


class ExperienceBand(str, Enum):
    """Required experience band for a project."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    EXPERT = "expert"
    BEGINNER_TO_INTERMEDIATE = "beginner_to_intermediate"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: object) -> ExperienceBand:
        """Parse a band name, falling back to UNKNOWN for anything unrecognized."""
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.UNKNOWN
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.UNKNOWN


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict):
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


class BudgetRange(_Record):
    """Inclusive budget interval."""

    min: Annotated[int, Field(ge=0)] = Field(..., description="Lower bound")
    max: Annotated[int, Field(ge=0)] = Field(..., description="Upper bound")

    @model_validator(mode="after")
    def validate_order(self) -> BudgetRange:
        if self.min > self.max:
            raise ValueError(f"budget min ({self.min}) exceeds max ({self.max})")
        return self

    def overlaps(self, other: BudgetRange) -> bool:
        """Return True if the two intervals share at least one value."""
        return self.min <= other.max and self.max >= other.min


class DateRange(_Record):
    """Inclusive date interval."""

    start: date = Field(..., description="First day")
    end: date = Field(..., description="Last day")

    @model_validator(mode="after")
    def validate_order(self) -> DateRange:
        if self.start > self.end:
            raise ValueError(f"start ({self.start}) is after end ({self.end})")
        return self

    def contains(self, start: date, end: date) -> bool:
        """Return True if [start, end] lies within this interval, bounds inclusive."""
        return self.start <= start and self.end >= end


def _unique_tags(value: object) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    seen: dict[str, None] = {}
    for tag in value:
        tag = str(tag).strip()
        if tag:
            seen.setdefault(tag, None)
    return tuple(seen)


class Candidate(_Record):
    """An artist profile being scored against a project."""

    id: str = Field(..., description="Candidate identifier")
    name: str = Field(default="", description="Display name")
    genres: tuple[str, ...] = Field(
        default=(), description="Genre tags, primary genre first"
    )
    work_styles: frozenset[str] = Field(
        default_factory=frozenset, description="Work-style tags"
    )
    experience_years: Annotated[int, Field(ge=0)] = Field(
        ..., description="Years of experience"
    )
    rating: Annotated[float, Field(ge=0.0, le=5.0)] = Field(
        default=0.0, description="Average rating (0-5)"
    )
    is_local: bool = Field(default=False, description="Based in the project region")
    budget: BudgetRange = Field(..., description="Preferred budget interval")
    availability: DateRange = Field(..., description="Availability interval")

    @field_validator("genres", mode="before")
    @classmethod
    def _normalize_genres(cls, value: object) -> tuple[str, ...]:
        return _unique_tags(value)

    @field_validator("work_styles", mode="before")
    @classmethod
    def _normalize_styles(cls, value: object) -> frozenset[str]:
        return frozenset(_unique_tags(value))

    @property
    def genre_set(self) -> frozenset[str]:
        return frozenset(self.genres)

    @property
    def primary_genre(self) -> str | None:
        return self.genres[0] if self.genres else None


class ProjectRequest(_Record):
    """A project's requirements for candidate selection."""

    id: str = Field(..., description="Project identifier")
    title: str = Field(default="", description="Project title")
    curator_id: str | None = Field(default=None, description="Owning curator")
    categories: frozenset[str] = Field(
        default_factory=frozenset, description="Required category tags"
    )
    budget: BudgetRange = Field(..., description="Project budget interval")
    preparation_start: date = Field(..., description="Preparation period start")
    event_end: date = Field(..., description="Event period end")
    experience_band: ExperienceBand = Field(
        default=ExperienceBand.UNKNOWN, description="Required experience band"
    )

    @field_validator("categories", mode="before")
    @classmethod
    def _normalize_categories(cls, value: object) -> frozenset[str]:
        return frozenset(_unique_tags(value))

    @field_validator("experience_band", mode="before")
    @classmethod
    def _parse_band(cls, value: object) -> ExperienceBand:
        return ExperienceBand.parse(value)

    @model_validator(mode="after")
    def validate_timeline(self) -> ProjectRequest:
        if self.preparation_start > self.event_end:
            raise ValueError(
                f"preparation_start ({self.preparation_start}) is after "
                f"event_end ({self.event_end})"
            )
        return self


class CuratorProfile(_Record):
    """A curator's style preferences."""

    id: str = Field(..., description="Curator identifier")
    name: str = Field(default="", description="Display name")
    preferred_styles: frozenset[str] = Field(
        default_factory=frozenset, description="Preferred style tags"
    )

    @field_validator("preferred_styles", mode="before")
    @classmethod
    def _normalize_styles(cls, value: object) -> frozenset[str]:
        return frozenset(_unique_tags(value))


class AudienceModel(_Record):
    """Genre popularity weights for the target audience."""

    genre_popularity: dict[str, Annotated[float, Field(ge=0.0, le=1.0)]] = Field(
        default_factory=dict, description="Genre tag -> popularity (0-1)"
    )

    def popularity(self, genre: str | None) -> float:
        """Return the popularity of a genre, 0.5 when unknown."""
        if genre is None:
            return DEFAULT_GENRE_POPULARITY
        return self.genre_popularity.get(genre, DEFAULT_GENRE_POPULARITY)


@dataclass(frozen=True)
class ScoreBreakdown:
    """Rounded per-factor scores for one candidate."""

    basic_compatibility: int
    style_affinity: int
    experience_fit: int
    audience_reception: int

    def __post_init__(self) -> None:
        for name in (
            "basic_compatibility",
            "style_affinity",
            "experience_fit",
            "audience_reception",
        ):
            value = getattr(self, name)
            if not (0 <= value <= 100):
                raise ValueError(f"{name} must be between 0 and 100 (got {value})")


@dataclass(frozen=True)
class MatchResult:
    """Scored candidate, ready for presentation."""

    candidate: Candidate
    total_score: int
    breakdown: ScoreBreakdown
    explanation: str
    label: str = "fair"

    def __post_init__(self) -> None:
        if not (0 <= self.total_score <= 100):
            raise ValueError(
                f"total_score must be between 0 and 100 (got {self.total_score})"
            )
        if self.label not in {"excellent", "good", "fair"}:
            raise ValueError(
                f"label must be one of: excellent, good, fair (got {self.label})"
            )

    def to_dict(self) -> dict:
        """Serialize to a JSON-friendly dictionary."""
        return {
            "candidate_id": self.candidate.id,
            "candidate_name": self.candidate.name,
            "total_score": self.total_score,
            "label": self.label,
            "breakdown": {
                "basic_compatibility": self.breakdown.basic_compatibility,
                "style_affinity": self.breakdown.style_affinity,
                "experience_fit": self.breakdown.experience_fit,
                "audience_reception": self.breakdown.audience_reception,
            },
            "explanation": self.explanation,
        }
