"""Tests for matching data providers."""

from __future__ import annotations

import json

import pytest

DATASET_YAML = """
audience:
  genre_popularity:
    painting: 0.8
curators:
  - id: cur_1
    preferred_styles: [contemporary, experimental]
projects:
  - id: proj_1
    curator_id: cur_1
    title: Autumn Show
    categories: [painting]
    budget: {min: 100, max: 500}
    preparation_start: 2025-10-01
    event_end: 2025-12-31
    experience_band: expert
candidates:
  - id: art_1
    genres: [painting]
    work_styles: [contemporary]
    experience_years: 10
    rating: 4.0
    is_local: true
    budget: {min: 50, max: 200}
    availability: {start: 2025-09-01, end: 2026-01-31}
""".lstrip()


class TestInMemoryDataProvider:
    """Test InMemoryDataProvider lookups."""

    def test_lookups(self, painter, exhibition, curator, audience):
        from artmatch.matching.provider import InMemoryDataProvider

        provider = InMemoryDataProvider(
            projects=[exhibition],
            curators=[curator],
            candidates=[painter],
            audience=audience,
        )

        assert provider.get_project("project_001") is exhibition
        assert provider.get_curator("curator_001") is curator
        assert provider.get_candidate("artist_001") is painter
        assert provider.list_projects() == [exhibition]
        assert provider.list_candidates() == [painter]
        assert provider.get_audience_model() is audience

    def test_missing_ids_raise_lookup_errors(self):
        from artmatch.matching.provider import (
            CandidateNotFoundError,
            CuratorNotFoundError,
            InMemoryDataProvider,
            ProjectNotFoundError,
        )

        provider = InMemoryDataProvider()

        with pytest.raises(ProjectNotFoundError):
            provider.get_project("missing")
        with pytest.raises(CuratorNotFoundError):
            provider.get_curator("missing")
        with pytest.raises(CandidateNotFoundError):
            provider.get_candidate("missing")
        assert issubclass(ProjectNotFoundError, LookupError)

    def test_default_audience_model_is_empty(self):
        from artmatch.matching.provider import InMemoryDataProvider

        audience = InMemoryDataProvider().get_audience_model()

        assert audience.genre_popularity == {}
        assert audience.popularity("painting") == 0.5


class TestFileDataProviderYaml:
    """Test FileDataProvider with YAML datasets."""

    def test_loads_snake_case_dataset(self, tmp_path, matching_config):
        from artmatch.matching.models import ExperienceBand
        from artmatch.matching.provider import FileDataProvider

        path = tmp_path / "dataset.yaml"
        path.write_text(DATASET_YAML, encoding="utf-8")

        provider = FileDataProvider(path, config=matching_config)

        project = provider.get_project("proj_1")
        assert project.experience_band is ExperienceBand.EXPERT
        assert project.categories == frozenset({"painting"})
        assert provider.get_curator("cur_1").preferred_styles == frozenset(
            {"contemporary", "experimental"}
        )
        candidate = provider.get_candidate("art_1")
        assert candidate.is_local is True
        assert candidate.rating == 4.0
        assert provider.get_audience_model().popularity("painting") == 0.8

    def test_loads_application_shaped_records(self, fixtures_path, matching_config):
        """camelCase records from the web application should map onto the models."""
        from datetime import date

        from artmatch.matching.models import ExperienceBand
        from artmatch.matching.provider import FileDataProvider

        provider = FileDataProvider(fixtures_path, config=matching_config)

        project = provider.get_project("project_001")
        assert project.curator_id == "curator_001"
        assert project.preparation_start == date(2025, 10, 1)
        assert project.event_end == date(2025, 12, 31)
        assert project.experience_band is ExperienceBand.BEGINNER_TO_INTERMEDIATE

        artist = provider.get_candidate("artist_001")
        assert artist.work_styles == frozenset({"abstract", "contemporary"})
        assert artist.experience_years == 5
        assert artist.rating == 4.2
        assert artist.budget.min == 3_000_000
        assert artist.availability.start == date(2025, 9, 1)

        assert provider.get_audience_model().popularity("music") == 0.9

    def test_locality_derived_from_configured_region(
        self, fixtures_path, matching_config
    ):
        from artmatch.matching.config import MatchingConfig
        from artmatch.matching.provider import FileDataProvider

        default_region = FileDataProvider(fixtures_path, config=matching_config)
        seoul = FileDataProvider(
            fixtures_path,
            config=MatchingConfig(_env_file=None, local_region="서울"),  # type: ignore[call-arg]
        )

        assert default_region.get_candidate("artist_001").is_local is True
        assert default_region.get_candidate("artist_004").is_local is False
        assert seoul.get_candidate("artist_001").is_local is False
        assert seoul.get_candidate("artist_004").is_local is True

    def test_empty_file_loads_empty_dataset(self, tmp_path, matching_config):
        from artmatch.matching.provider import FileDataProvider

        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        provider = FileDataProvider(path, config=matching_config)

        assert provider.list_projects() == []
        assert provider.list_candidates() == []

    def test_raises_file_not_found_error(self, tmp_path, matching_config):
        from artmatch.matching.provider import FileDataProvider

        with pytest.raises(FileNotFoundError):
            FileDataProvider(tmp_path / "missing.yaml", config=matching_config)

    def test_raises_value_error_on_invalid_yaml(self, tmp_path, matching_config):
        from artmatch.matching.provider import FileDataProvider

        path = tmp_path / "bad.yaml"
        path.write_text("projects: [unclosed", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid YAML dataset"):
            FileDataProvider(path, config=matching_config)

    def test_raises_value_error_on_non_mapping(self, tmp_path, matching_config):
        from artmatch.matching.provider import FileDataProvider

        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ValueError, match="mapping"):
            FileDataProvider(path, config=matching_config)

    def test_raises_value_error_on_invalid_record(self, tmp_path, matching_config):
        """Malformed records should be rejected when the dataset is loaded."""
        from artmatch.matching.provider import FileDataProvider

        path = tmp_path / "dataset.yaml"
        path.write_text(
            DATASET_YAML.replace("experience_years: 10", "experience_years: -2"),
            encoding="utf-8",
        )

        with pytest.raises(ValueError, match="Invalid dataset"):
            FileDataProvider(path, config=matching_config)

    def test_raises_value_error_on_non_mapping_audience(
        self, tmp_path, matching_config
    ):
        from artmatch.matching.provider import FileDataProvider

        path = tmp_path / "dataset.yaml"
        path.write_text("audience: [painting, music]\n", encoding="utf-8")

        with pytest.raises(ValueError, match="'audience' must be a mapping"):
            FileDataProvider(path, config=matching_config)


class TestFileDataProviderJson:
    """Test FileDataProvider with JSON datasets."""

    def test_loads_json_dataset(self, tmp_path, matching_config):
        from artmatch.matching.provider import FileDataProvider

        payload = {
            "projects": [
                {
                    "id": "p",
                    "categories": ["music"],
                    "budget": {"min": 1, "max": 2},
                    "preparation_start": "2025-01-01",
                    "event_end": "2025-02-01",
                }
            ],
            "candidates": [
                {
                    "id": "c",
                    "genres": ["music"],
                    "experience_years": 2,
                    "budget": {"min": 1, "max": 2},
                    "availability": {"start": "2024-12-01", "end": "2025-03-01"},
                }
            ],
        }
        path = tmp_path / "dataset.json"
        path.write_text(json.dumps(payload), encoding="utf-8")

        provider = FileDataProvider(path, config=matching_config)

        assert provider.get_project("p").curator_id is None
        assert provider.get_candidate("c").is_local is False
        assert provider.list_projects()[0].experience_band.value == "unknown"

    def test_raises_value_error_on_invalid_json(self, tmp_path, matching_config):
        from artmatch.matching.provider import FileDataProvider

        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON dataset"):
            FileDataProvider(path, config=matching_config)
