"""Configuration settings for candidate matching."""

from __future__ import annotations

import math
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScoringWeights(BaseModel):
    """Aggregation weights for the four match factors (must sum to 1.0)."""

    model_config = ConfigDict(frozen=True)

    basic_compatibility: Annotated[float, Field(ge=0.0, le=1.0)] = 0.40
    style_affinity: Annotated[float, Field(ge=0.0, le=1.0)] = 0.25
    experience_fit: Annotated[float, Field(ge=0.0, le=1.0)] = 0.20
    audience_reception: Annotated[float, Field(ge=0.0, le=1.0)] = 0.15

    @model_validator(mode="after")
    def validate_weights_sum_to_one(self) -> ScoringWeights:
        """Ensure weights sum to 1.0 (within tolerance)."""
        weight_sum = self.total()
        if abs(weight_sum - 1.0) > 1e-9:
            raise ValueError(
                "Scoring weights must sum to 1.0. "
                f"Got {weight_sum:.6f} "
                f"(basic={self.basic_compatibility}, style={self.style_affinity}, "
                f"experience={self.experience_fit}, audience={self.audience_reception})."
            )
        return self

    def total(self) -> float:
        return math.fsum(
            (
                self.basic_compatibility,
                self.style_affinity,
                self.experience_fit,
                self.audience_reception,
            )
        )


WEIGHTS = ScoringWeights()


class MatchingConfig(BaseSettings):
    """Matching configuration settings.

    All settings have sensible defaults and can be overridden via
    environment variables with `MATCHING_` prefix or a .env file.
    The aggregation weights are fixed and not configurable.
    """

    model_config = SettingsConfigDict(
        env_prefix="MATCHING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    explanation_locale: Literal["en", "ko"] = Field(
        default="en",
        description="Language of the canned explanation sentences",
    )
    max_workers: Annotated[int, Field(ge=1)] = Field(
        default=1,
        description="Worker threads for per-candidate scoring (1 = serial)",
    )
    local_region: str = Field(
        default="천안",
        description="Region name that marks a candidate as local when loading data",
    )
    default_limit: Annotated[int, Field(gt=0)] | None = Field(
        default=None,
        description="Default number of results to return (None = all)",
    )

    @classmethod
    def defaults(cls) -> MatchingConfig:
        """Build a config from field defaults only, ignoring the environment."""
        return cls.model_construct()


# Singleton instance for easy import
_matching_config: MatchingConfig | None = None


def get_matching_config() -> MatchingConfig:
    """Get the matching configuration singleton."""
    global _matching_config
    if _matching_config is None:
        _matching_config = MatchingConfig()
    return _matching_config


def reset_matching_config() -> None:
    """Reset the matching configuration singleton (useful for testing)."""
    global _matching_config
    _matching_config = None
