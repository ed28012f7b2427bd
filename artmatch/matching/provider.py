"""Data providers that supply matching inputs.

The calling application owns its data. A provider is the seam through
which projects, curators, candidates and the audience model reach the
matching service, so the service itself never touches global state.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Protocol

import yaml
from pydantic import ValidationError

from artmatch.matching.config import MatchingConfig, get_matching_config
from artmatch.matching.models import (
    AudienceModel,
    Candidate,
    CuratorProfile,
    ProjectRequest,
)
from artmatch.utils.logging import get_logger

logger = get_logger(__name__)


class ProjectNotFoundError(LookupError):
    """Raised when a project id is not known to the provider."""


class CuratorNotFoundError(LookupError):
    """Raised when a curator id is not known to the provider."""


class CandidateNotFoundError(LookupError):
    """Raised when a candidate id is not known to the provider."""


class MatchingDataProvider(Protocol):
    """Source of matching inputs."""

    def get_project(self, project_id: str) -> ProjectRequest: ...

    def get_curator(self, curator_id: str) -> CuratorProfile: ...

    def list_projects(self) -> list[ProjectRequest]: ...

    def get_candidate(self, candidate_id: str) -> Candidate: ...

    def list_candidates(self) -> list[Candidate]: ...

    def get_audience_model(self) -> AudienceModel: ...


class InMemoryDataProvider:
    """Provider backed by already-validated records."""

    def __init__(
        self,
        *,
        projects: Iterable[ProjectRequest] = (),
        curators: Iterable[CuratorProfile] = (),
        candidates: Iterable[Candidate] = (),
        audience: AudienceModel | None = None,
    ) -> None:
        self._projects = {p.id: p for p in projects}
        self._curators = {c.id: c for c in curators}
        self._candidates = tuple(candidates)
        self._audience = audience or AudienceModel()

    def get_project(self, project_id: str) -> ProjectRequest:
        try:
            return self._projects[project_id]
        except KeyError:
            raise ProjectNotFoundError(f"Project not found: {project_id}") from None

    def get_curator(self, curator_id: str) -> CuratorProfile:
        try:
            return self._curators[curator_id]
        except KeyError:
            raise CuratorNotFoundError(f"Curator not found: {curator_id}") from None

    def list_projects(self) -> list[ProjectRequest]:
        return list(self._projects.values())

    def get_candidate(self, candidate_id: str) -> Candidate:
        for candidate in self._candidates:
            if candidate.id == candidate_id:
                return candidate
        raise CandidateNotFoundError(f"Candidate not found: {candidate_id}")

    def list_candidates(self) -> list[Candidate]:
        return list(self._candidates)

    def get_audience_model(self) -> AudienceModel:
        return self._audience


class FileDataProvider(InMemoryDataProvider):
    """Provider that loads a dataset from a YAML or JSON file.

    The document is a mapping with top-level keys ``projects``,
    ``curators``, ``candidates`` and ``audience``. Candidate entries may
    set ``is_local`` directly or give a ``location`` that is compared
    against the configured local region.
    """

    def __init__(
        self, path: Path | str, config: MatchingConfig | None = None
    ) -> None:
        self.config = config or get_matching_config()
        self.path = Path(path)

        data = load_dataset(self.path)
        try:
            projects = [
                ProjectRequest.model_validate(_project_fields(entry))
                for entry in _entries(data, "projects")
            ]
            curators = [
                CuratorProfile.model_validate(_curator_fields(entry))
                for entry in _entries(data, "curators")
            ]
            candidates = [
                Candidate.model_validate(self._candidate_fields(entry))
                for entry in _entries(data, "candidates")
            ]
            audience = AudienceModel.model_validate(
                _audience_fields(data.get("audience") or {})
            )
        except ValidationError as e:
            raise ValueError(f"Invalid dataset {self.path}: {e}") from e

        logger.info(
            "Loaded dataset %s: %d project(s), %d curator(s), %d candidate(s)",
            self.path,
            len(projects),
            len(curators),
            len(candidates),
        )
        super().__init__(
            projects=projects,
            curators=curators,
            candidates=candidates,
            audience=audience,
        )

    def _candidate_fields(self, entry: Mapping[str, Any]) -> dict[str, Any]:
        fields = dict(entry)
        _rename(fields, "workStyle", "work_styles")
        _rename(fields, "work_style", "work_styles")
        _rename(fields, "experienceYears", "experience_years")
        _rename(fields, "preferredBudget", "budget")
        _rename(fields, "isLocal", "is_local")

        ratings = fields.get("ratings")
        if "rating" not in fields and isinstance(ratings, Mapping):
            fields["rating"] = ratings.get("averageScore", ratings.get("average_score"))

        availability = fields.get("availability")
        if isinstance(availability, Mapping):
            fields["availability"] = {
                "start": availability.get("start", availability.get("startDate")),
                "end": availability.get("end", availability.get("endDate")),
            }

        if "is_local" not in fields:
            location = str(fields.get("location") or "").strip()
            fields["is_local"] = bool(location) and location == self.config.local_region
        return fields


def load_dataset(path: Path) -> dict[str, Any]:
    """Load a dataset mapping from YAML or JSON."""
    if not path.exists():
        raise FileNotFoundError(f"Dataset not found: {path}")

    suffix = path.suffix.lower()
    try:
        with path.open("r", encoding="utf-8") as f:
            if suffix == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON dataset: {path}") from e
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML dataset: {path}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Dataset must be a mapping/dict: {path}")
    return data


def _entries(data: Mapping[str, Any], key: str) -> list[Mapping[str, Any]]:
    entries = data.get(key) or []
    if not isinstance(entries, list):
        raise ValueError(f"Dataset key '{key}' must be a list")
    for entry in entries:
        if not isinstance(entry, Mapping):
            raise ValueError(f"Entries under '{key}' must be mappings")
    return entries


def _rename(fields: dict[str, Any], old: str, new: str) -> None:
    if old in fields and new not in fields:
        fields[new] = fields.pop(old)


def _project_fields(entry: Mapping[str, Any]) -> dict[str, Any]:
    fields = dict(entry)
    _rename(fields, "curatorId", "curator_id")

    requirements = fields.get("requirements")
    if "experience_band" not in fields and isinstance(requirements, Mapping):
        fields["experience_band"] = requirements.get(
            "experienceLevel", requirements.get("experience_level")
        )

    timeline = fields.get("timeline")
    if isinstance(timeline, Mapping):
        preparation = timeline.get("preparationPeriod") or {}
        event = timeline.get("eventPeriod") or {}
        fields.setdefault("preparation_start", preparation.get("start"))
        fields.setdefault("event_end", event.get("end"))
    return fields


def _curator_fields(entry: Mapping[str, Any]) -> dict[str, Any]:
    fields = dict(entry)
    preferences = fields.get("preferences")
    if "preferred_styles" not in fields and isinstance(preferences, Mapping):
        fields["preferred_styles"] = preferences.get(
            "preferredStyles", preferences.get("preferred_styles", [])
        )
    return fields


def _audience_fields(entry: Any) -> dict[str, Any]:
    if not isinstance(entry, Mapping):
        raise ValueError("Dataset key 'audience' must be a mapping")
    fields = dict(entry)
    _rename(fields, "genrePreferences", "genre_popularity")
    _rename(fields, "genre_preferences", "genre_popularity")
    return fields
