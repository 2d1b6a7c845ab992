"""Workflow event context: the triggering payload and repository
coordinates."""

import json
from pathlib import Path
from typing import Mapping

from merge_resolver.models import GitHubEvent


class ResolverError(Exception):
    """Raised when the run cannot proceed."""

    pass


class MissingPullRequestError(ResolverError):
    """The event payload carries no pull request."""

    def __init__(self, message: str = "No pull request found.") -> None:
        super().__init__(message)


class MissingRepositoryError(ResolverError):
    """Neither GITHUB_REPOSITORY nor the payload names the repository."""

    pass


def load_event(path: Path) -> GitHubEvent:
    """Read the event payload JSON written by the runner."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return GitHubEvent.model_validate(data)


def resolve_repository(
    event: GitHubEvent,
    env: Mapping[str, str],
    override: str | None = None,
) -> str:
    """Return owner/repo from override, GITHUB_REPOSITORY or the payload."""
    repo = override or env.get("GITHUB_REPOSITORY")
    if not repo and event.repository is not None:
        repo = event.repository.full_name
    if not repo:
        raise MissingRepositoryError("Repository not set (GITHUB_REPOSITORY or payload repository.full_name).")
    return repo
