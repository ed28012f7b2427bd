"""Candidate matching service: score aggregation and ranking."""

from __future__ import annotations

import math
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from artmatch.matching.config import WEIGHTS, MatchingConfig, get_matching_config
from artmatch.matching.explanation import Factor, build_explanation, label_for
from artmatch.matching.models import (
    AudienceModel,
    Candidate,
    CuratorProfile,
    MatchResult,
    ProjectRequest,
    ScoreBreakdown,
)
from artmatch.matching.provider import (
    CuratorNotFoundError,
    MatchingDataProvider,
)
from artmatch.matching.scorers import (
    clamp_score,
    evaluate_compatibility,
    predict_audience_reception,
    score_experience_fit,
    score_style_affinity,
)
from artmatch.utils.logging import get_logger

logger = get_logger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for non-negative input."""
    return int(math.floor(value + 0.5))


class MatchingService:
    """Service for scoring and ranking candidates against a project."""

    def __init__(self, config: MatchingConfig | None = None) -> None:
        self.config = config or get_matching_config()
        self.weights = WEIGHTS

    def factor_scores(
        self,
        candidate: Candidate,
        project: ProjectRequest,
        curator: CuratorProfile,
        audience: AudienceModel,
    ) -> dict[Factor, float]:
        """Return the raw (unrounded) score of each factor for one candidate."""
        return {
            Factor.BASIC: float(evaluate_compatibility(candidate, project)),
            Factor.STYLE: score_style_affinity(
                candidate.work_styles, curator.preferred_styles
            ),
            Factor.EXPERIENCE: score_experience_fit(
                candidate.experience_years, project.experience_band
            ),
            Factor.AUDIENCE: predict_audience_reception(
                candidate.rating,
                candidate.primary_genre,
                candidate.is_local,
                audience,
            ),
        }

    def aggregate(self, scores: dict[Factor, float]) -> int:
        """Combine raw factor scores into a weighted total in [0, 100]."""
        total = (
            scores[Factor.BASIC] * self.weights.basic_compatibility
            + scores[Factor.STYLE] * self.weights.style_affinity
            + scores[Factor.EXPERIENCE] * self.weights.experience_fit
            + scores[Factor.AUDIENCE] * self.weights.audience_reception
        )
        return round_half_up(clamp_score(total))

    def score_candidate(
        self,
        candidate: Candidate,
        project: ProjectRequest,
        curator: CuratorProfile,
        audience: AudienceModel,
    ) -> MatchResult:
        """Score one candidate and build its MatchResult."""
        scores = {
            factor: clamp_score(value)
            for factor, value in self.factor_scores(
                candidate, project, curator, audience
            ).items()
        }
        total = self.aggregate(scores)

        breakdown = ScoreBreakdown(
            basic_compatibility=round_half_up(scores[Factor.BASIC]),
            style_affinity=round_half_up(scores[Factor.STYLE]),
            experience_fit=round_half_up(scores[Factor.EXPERIENCE]),
            audience_reception=round_half_up(scores[Factor.AUDIENCE]),
        )
        logger.debug(
            "Scored candidate %s: total=%d basic=%d style=%d experience=%d audience=%d",
            candidate.id,
            total,
            breakdown.basic_compatibility,
            breakdown.style_affinity,
            breakdown.experience_fit,
            breakdown.audience_reception,
        )

        return MatchResult(
            candidate=candidate,
            total_score=total,
            breakdown=breakdown,
            explanation=build_explanation(scores, self.config.explanation_locale),
            label=label_for(total),
        )

    def rank(
        self,
        project: ProjectRequest,
        candidates: Iterable[Candidate],
        curator: CuratorProfile,
        audience: AudienceModel,
        *,
        limit: int | None = None,
        min_score: int | None = None,
    ) -> list[MatchResult]:
        """Score every candidate and return results by descending total score.

        Candidates with equal totals keep their input order. ``min_score``
        and ``limit`` are applied after sorting; without them every candidate
        is returned.
        """
        pool = list(candidates)
        logger.info(
            "Ranking %d candidate(s) for project %s (curator %s)",
            len(pool),
            project.id,
            curator.id,
        )

        def _score(candidate: Candidate) -> MatchResult:
            return self.score_candidate(candidate, project, curator, audience)

        if self.config.max_workers > 1 and len(pool) > 1:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                results = list(executor.map(_score, pool))
        else:
            results = [_score(candidate) for candidate in pool]

        # list.sort is stable, so ties keep input order.
        results.sort(key=lambda result: result.total_score, reverse=True)

        if min_score is not None:
            results = [r for r in results if r.total_score >= min_score]

        if limit is not None:
            results = results[:limit]

        if results:
            logger.info(
                "Top candidate for project %s: %s (score=%d)",
                project.id,
                results[0].candidate.id,
                results[0].total_score,
            )
        return results

    def resolve_project(
        self,
        provider: MatchingDataProvider,
        project_id: str,
        curator_id: str | None = None,
    ) -> tuple[ProjectRequest, CuratorProfile]:
        """Look up a project and its curator (explicit id or the project's own)."""
        project = provider.get_project(project_id)
        resolved_curator_id = curator_id or project.curator_id
        if resolved_curator_id is None:
            raise CuratorNotFoundError(
                f"Project '{project_id}' has no curator; pass a curator id"
            )
        return project, provider.get_curator(resolved_curator_id)

    def rank_project(
        self,
        provider: MatchingDataProvider,
        project_id: str,
        curator_id: str | None = None,
        *,
        limit: int | None = None,
        min_score: int | None = None,
    ) -> list[MatchResult]:
        """Resolve a project's inputs from a data provider and rank candidates.

        ``limit`` falls back to the configured ``default_limit``.
        """
        if limit is None:
            limit = self.config.default_limit
        project, curator = self.resolve_project(provider, project_id, curator_id)

        return self.rank(
            project,
            provider.list_candidates(),
            curator,
            provider.get_audience_model(),
            limit=limit,
            min_score=min_score,
        )

    def format_result(self, result: MatchResult, position: int | None = None) -> str:
        """Format a MatchResult for CLI output."""
        candidate = result.candidate
        heading = f"{candidate.name} ({candidate.id})" if candidate.name else candidate.id
        if position is not None:
            heading = f"{position}. {heading}"

        breakdown = result.breakdown
        lines = [
            heading,
            f"Score: {result.total_score} ({result.label})",
            "Breakdown: "
            f"basic={breakdown.basic_compatibility} "
            f"style={breakdown.style_affinity} "
            f"experience={breakdown.experience_fit} "
            f"audience={breakdown.audience_reception}",
            f"Explanation: {result.explanation}",
        ]
        return "\n".join(lines)


def rank(
    project: ProjectRequest,
    candidates: Iterable[Candidate],
    curator: CuratorProfile,
    audience: AudienceModel,
) -> list[MatchResult]:
    """Rank candidates with the default configuration.

    Environment variables and .env files are not consulted, so the result
    always holds every candidate.
    """
    service = MatchingService(config=MatchingConfig.defaults())
    return service.rank(project, candidates, curator, audience)
