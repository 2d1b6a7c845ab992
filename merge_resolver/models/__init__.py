"""Data models for pull requests, branches, repository contents and events (Pydantic)."""

from merge_resolver.models.branch import Branch
from merge_resolver.models.content import FileContent
from merge_resolver.models.event import GitHubEvent, Repository
from merge_resolver.models.pr import PR, GitRef, Label, PullRequest

__all__ = [
    "Branch",
    "FileContent",
    "GitHubEvent",
    "GitRef",
    "Label",
    "PR",
    "PullRequest",
    "Repository",
]
