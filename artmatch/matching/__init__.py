"""Candidate scoring and ranking for artist/curator matching.

Public API:
    - MatchingService: Scores and ranks candidates for a project
    - rank: Rank candidates with the default configuration
    - Candidate, ProjectRequest, CuratorProfile, AudienceModel: Input records
    - MatchResult, ScoreBreakdown: Ranking output
    - FileDataProvider, InMemoryDataProvider: Input sources
    - MatchingConfig: Configuration settings
"""

from artmatch.matching.config import (
    WEIGHTS,
    MatchingConfig,
    ScoringWeights,
    get_matching_config,
    reset_matching_config,
)
from artmatch.matching.models import (
    AudienceModel,
    BudgetRange,
    Candidate,
    CuratorProfile,
    DateRange,
    ExperienceBand,
    MatchResult,
    ProjectRequest,
    ScoreBreakdown,
)
from artmatch.matching.provider import (
    CandidateNotFoundError,
    CuratorNotFoundError,
    FileDataProvider,
    InMemoryDataProvider,
    MatchingDataProvider,
    ProjectNotFoundError,
)
from artmatch.matching.service import MatchingService, rank

__all__ = [
    "MatchingService",
    "rank",
    "Candidate",
    "ProjectRequest",
    "CuratorProfile",
    "AudienceModel",
    "BudgetRange",
    "DateRange",
    "ExperienceBand",
    "MatchResult",
    "ScoreBreakdown",
    "MatchingDataProvider",
    "InMemoryDataProvider",
    "FileDataProvider",
    "ProjectNotFoundError",
    "CandidateNotFoundError",
    "CuratorNotFoundError",
    "MatchingConfig",
    "ScoringWeights",
    "WEIGHTS",
    "get_matching_config",
    "reset_matching_config",
]
