"""Per-factor scoring functions for candidate matching.

Each scorer is a pure function of validated input records and returns a
raw (unrounded) score in the range [0, 100].
"""

from __future__ import annotations

from collections.abc import Set

from artmatch.matching.models import (
    AudienceModel,
    Candidate,
    ExperienceBand,
    ProjectRequest,
)

GENRE_GATE_POINTS = 50
BUDGET_GATE_POINTS = 25
TIMELINE_GATE_POINTS = 25

UNKNOWN_BAND_SCORE = 70.0

RATING_SCALE = 5.0
RATING_POINTS = 60.0
POPULARITY_POINTS = 30.0
LOCAL_BONUS_POINTS = 10.0


def clamp_score(value: float) -> float:
    """Clamp a score into [0, 100]."""
    return max(0.0, min(100.0, value))


def genre_gate(candidate: Candidate, project: ProjectRequest) -> bool:
    return not candidate.genre_set.isdisjoint(project.categories)


def budget_gate(candidate: Candidate, project: ProjectRequest) -> bool:
    return candidate.budget.overlaps(project.budget)


def timeline_gate(candidate: Candidate, project: ProjectRequest) -> bool:
    return candidate.availability.contains(project.preparation_start, project.event_end)


def evaluate_compatibility(candidate: Candidate, project: ProjectRequest) -> int:
    """Score basic compatibility from the genre, budget and timeline gates.

    Each gate is all-or-nothing: genre +50, budget +25, timeline +25.
    """
    score = 0
    if genre_gate(candidate, project):
        score += GENRE_GATE_POINTS
    if budget_gate(candidate, project):
        score += BUDGET_GATE_POINTS
    if timeline_gate(candidate, project):
        score += TIMELINE_GATE_POINTS
    return score


def score_style_affinity(
    candidate_styles: Set[str], preferred_styles: Set[str]
) -> float:
    """Return the shared-style ratio, normalized by the larger set, as 0-100."""
    if not candidate_styles or not preferred_styles:
        return 0.0
    shared = len(set(candidate_styles) & set(preferred_styles))
    return shared / max(len(candidate_styles), len(preferred_styles)) * 100


def score_experience_fit(years: int, band: ExperienceBand | str | None) -> float:
    """Score years of experience against a required band.

    Unrecognized bands score a flat 70.
    """
    band = ExperienceBand.parse(band)

    if band is ExperienceBand.BEGINNER:
        score = 100.0 if years <= 3 else 100 - (years - 3) * 20
    elif band is ExperienceBand.INTERMEDIATE:
        score = 100.0 if 3 <= years <= 8 else 100 - abs(years - 5.5) * 15
    elif band is ExperienceBand.EXPERT:
        score = 100.0 if years >= 8 else years * 12.5
    elif band is ExperienceBand.BEGINNER_TO_INTERMEDIATE:
        score = 100.0 if years <= 8 else 100 - (years - 8) * 15
    else:
        score = UNKNOWN_BAND_SCORE

    return clamp_score(float(score))


def predict_audience_reception(
    rating: float,
    primary_genre: str | None,
    is_local: bool,
    audience: AudienceModel,
) -> float:
    """Predict audience reception from rating, genre popularity and locality."""
    predicted = (
        (rating / RATING_SCALE) * RATING_POINTS
        + audience.popularity(primary_genre) * POPULARITY_POINTS
        + (LOCAL_BONUS_POINTS if is_local else 0.0)
    )
    return min(100.0, predicted)
