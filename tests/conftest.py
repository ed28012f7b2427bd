"""Pytest configuration and shared fixtures."""

from datetime import date

import pytest


@pytest.fixture(autouse=True)
def _reset_singletons():
    """Reset config and logging singletons between tests."""
    yield
    from artmatch.config.settings import reset_settings
    from artmatch.matching.config import reset_matching_config
    from artmatch.utils.logging import reset_logging

    reset_settings()
    reset_matching_config()
    reset_logging()


@pytest.fixture
def matching_config():
    """Matching config isolated from any local .env file."""
    from artmatch.matching.config import MatchingConfig

    return MatchingConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def painter():
    """Local painter with five years of experience."""
    from artmatch.matching.models import Candidate

    return Candidate(
        id="artist_001",
        name="Kim Minsu",
        genres=["painting"],
        work_styles=["abstract", "contemporary"],
        experience_years=5,
        rating=4.2,
        is_local=True,
        budget={"min": 3_000_000, "max": 10_000_000},
        availability={"start": date(2025, 9, 1), "end": date(2025, 12, 31)},
    )


@pytest.fixture
def exhibition():
    """Emerging-artist exhibition project."""
    from artmatch.matching.models import ProjectRequest

    return ProjectRequest(
        id="project_001",
        curator_id="curator_001",
        categories=["painting", "sculpture", "installation"],
        budget={"min": 30_000_000, "max": 50_000_000},
        preparation_start=date(2025, 10, 1),
        event_end=date(2025, 12, 31),
        experience_band="beginner_to_intermediate",
    )


@pytest.fixture
def curator():
    from artmatch.matching.models import CuratorProfile

    return CuratorProfile(
        id="curator_001", preferred_styles=["contemporary", "experimental"]
    )


@pytest.fixture
def audience():
    from artmatch.matching.models import AudienceModel

    return AudienceModel(genre_popularity={"painting": 0.8})


@pytest.fixture
def fixtures_path():
    """Path to the sample dataset shipped with the repo."""
    from pathlib import Path

    return Path(__file__).resolve().parents[1] / "data" / "fixtures.yaml"
