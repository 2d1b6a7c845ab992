"""Schema of the pull_request event payload the workflow is triggered with."""

from pydantic import BaseModel, ConfigDict

from merge_resolver.models.pr import PullRequest


class Repository(BaseModel):
    model_config = ConfigDict(extra="ignore")

    full_name: str | None = None
    default_branch: str | None = None


class GitHubEvent(BaseModel):
    """Event payload (GITHUB_EVENT_PATH); pull_request is absent for other
    event types."""

    model_config = ConfigDict(extra="ignore")

    action: str | None = None
    pull_request: PullRequest | None = None
    repository: Repository | None = None
