"""Tests for event payload loading and repository resolution."""

import json
from pathlib import Path

import pytest

from merge_resolver.event import MissingRepositoryError, load_event, resolve_repository
from merge_resolver.models import GitHubEvent


def _write(tmp_path: Path, payload: dict) -> Path:
    path = tmp_path / "event.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_event_pull_request(tmp_path: Path) -> None:
    """Payload with pull_request is parsed; unknown fields ignored."""
    path = _write(
        tmp_path,
        {
            "action": "closed",
            "number": 3,
            "pull_request": {
                "number": 3,
                "state": "closed",
                "merged": True,
                "labels": [{"id": 1, "name": "merge:v1.0.0", "color": "fff"}],
                "base": {"ref": "main", "sha": "abc"},
                "head": {"ref": "fix/x", "sha": "def"},
                "user": {"login": "octocat"},
            },
            "repository": {"full_name": "owner/repo", "default_branch": "main"},
        },
    )
    event = load_event(path)

    assert event.action == "closed"
    assert event.pull_request is not None
    assert event.pull_request.is_closed_and_merged
    assert [lb.name for lb in event.pull_request.labels] == ["merge:v1.0.0"]
    assert event.pull_request.base.ref == "main"
    assert event.repository is not None
    assert event.repository.full_name == "owner/repo"


def test_load_event_without_pull_request(tmp_path: Path) -> None:
    """Push payload has no pull_request."""
    event = load_event(_write(tmp_path, {"ref": "refs/heads/main", "before": "a", "after": "b"}))
    assert event.pull_request is None


def test_load_event_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_event(tmp_path / "missing.json")


def test_resolve_repository_prefers_override() -> None:
    event = GitHubEvent.model_validate({"repository": {"full_name": "payload/repo"}})
    assert resolve_repository(event, {"GITHUB_REPOSITORY": "env/repo"}, override="cli/repo") == "cli/repo"


def test_resolve_repository_from_env() -> None:
    event = GitHubEvent.model_validate({"repository": {"full_name": "payload/repo"}})
    assert resolve_repository(event, {"GITHUB_REPOSITORY": "env/repo"}) == "env/repo"


def test_resolve_repository_from_payload() -> None:
    event = GitHubEvent.model_validate({"repository": {"full_name": "payload/repo"}})
    assert resolve_repository(event, {}) == "payload/repo"


def test_resolve_repository_missing_raises() -> None:
    with pytest.raises(MissingRepositoryError):
        resolve_repository(GitHubEvent(), {})
