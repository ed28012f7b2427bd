"""Canned-text explanations for match results."""

from __future__ import annotations

from enum import Enum


class Factor(str, Enum):
    """Scored factors, in explanation order."""

    BASIC = "basic"
    STYLE = "style"
    EXPERIENCE = "experience"
    AUDIENCE = "audience"


class Tier(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


HIGH_THRESHOLD = 80.0
MEDIUM_THRESHOLD = 60.0

FACTOR_ORDER: tuple[Factor, ...] = (
    Factor.BASIC,
    Factor.STYLE,
    Factor.EXPERIENCE,
    Factor.AUDIENCE,
)

_TIER_LABELS: dict[Tier, str] = {
    Tier.HIGH: "excellent",
    Tier.MEDIUM: "good",
    Tier.LOW: "fair",
}

_CATALOGS: dict[str, dict[tuple[Factor, Tier], str]] = {
    "en": {
        (Factor.BASIC, Tier.HIGH): "Fully meets the project's basic requirements.",
        (Factor.BASIC, Tier.MEDIUM): "Meets most of the project's requirements.",
        (Factor.BASIC, Tier.LOW): "Differs from the project's requirements in some areas.",
        (Factor.STYLE, Tier.HIGH): "Closely matches the curator's preferred styles.",
        (Factor.STYLE, Tier.MEDIUM): "Reasonably aligned with the curator's preferences.",
        (Factor.STYLE, Tier.LOW): "Could be an opportunity to try a new style.",
        (Factor.EXPERIENCE, Tier.HIGH): "Well suited to the required experience level.",
        (Factor.EXPERIENCE, Tier.MEDIUM): "Experience level is close to what is required.",
        (Factor.EXPERIENCE, Tier.LOW): "Experience differs from the requirement but shows growth potential.",
        (Factor.AUDIENCE, Tier.HIGH): "High audience satisfaction is expected.",
        (Factor.AUDIENCE, Tier.MEDIUM): "A positive audience response is expected.",
        (Factor.AUDIENCE, Tier.LOW): "Could offer audiences a new experience.",
    },
    "ko": {
        (Factor.BASIC, Tier.HIGH): "프로젝트 기본 요구사항과 완벽하게 일치합니다.",
        (Factor.BASIC, Tier.MEDIUM): "프로젝트 요구사항과 대부분 일치합니다.",
        (Factor.BASIC, Tier.LOW): "프로젝트 요구사항과 일부 차이가 있습니다.",
        (Factor.STYLE, Tier.HIGH): "기획자의 선호 스타일과 잘 맞습니다.",
        (Factor.STYLE, Tier.MEDIUM): "기획자 선호도와 적당히 일치합니다.",
        (Factor.STYLE, Tier.LOW): "새로운 스타일 도전의 기회가 될 수 있습니다.",
        (Factor.EXPERIENCE, Tier.HIGH): "요구되는 경력 수준에 적합합니다.",
        (Factor.EXPERIENCE, Tier.MEDIUM): "요구되는 경력 수준에 대체로 부합합니다.",
        (Factor.EXPERIENCE, Tier.LOW): "경력 수준에 약간의 차이가 있지만 성장 가능성이 있습니다.",
        (Factor.AUDIENCE, Tier.HIGH): "관객들의 높은 만족도가 예상됩니다.",
        (Factor.AUDIENCE, Tier.MEDIUM): "관객들의 긍정적인 반응이 예상됩니다.",
        (Factor.AUDIENCE, Tier.LOW): "관객들에게 새로운 경험을 제공할 수 있습니다.",
    },
}

SUPPORTED_LOCALES: tuple[str, ...] = tuple(_CATALOGS)


def tier_for(score: float) -> Tier:
    """Map a score to its tier (>= 80 high, >= 60 medium, else low)."""
    if score >= HIGH_THRESHOLD:
        return Tier.HIGH
    if score >= MEDIUM_THRESHOLD:
        return Tier.MEDIUM
    return Tier.LOW


def label_for(score: float) -> str:
    """Return the presentation label for a total score."""
    return _TIER_LABELS[tier_for(score)]


def sentence_for(factor: Factor, tier: Tier, locale: str = "en") -> str:
    catalog = _CATALOGS.get(locale)
    if catalog is None:
        raise ValueError(
            f"Unsupported explanation locale '{locale}' "
            f"(expected one of: {', '.join(SUPPORTED_LOCALES)})"
        )
    return catalog[(factor, tier)]


def build_explanation(scores: dict[Factor, float], locale: str = "en") -> str:
    """Join one sentence per factor, in fixed factor order, with single spaces."""
    return " ".join(
        sentence_for(factor, tier_for(scores[factor]), locale)
        for factor in FACTOR_ORDER
    )
