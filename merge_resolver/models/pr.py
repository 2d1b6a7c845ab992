"""Pull request models."""

from pydantic import BaseModel, ConfigDict, Field


class Label(BaseModel):
    """Label attached to an issue or pull request."""

    model_config = ConfigDict(extra="ignore")

    name: str


class GitRef(BaseModel):
    """Head or base of a pull request."""

    model_config = ConfigDict(extra="ignore")

    ref: str
    sha: str = ""


class PullRequest(BaseModel):
    """Pull request as delivered in the pull_request webhook payload."""

    model_config = ConfigDict(extra="ignore")

    number: int = 0
    title: str = ""
    state: str = "open"
    merged: bool | None = False
    labels: list[Label] = Field(default_factory=list)
    base: GitRef | None = None
    head: GitRef | None = None

    @property
    def is_closed_and_merged(self) -> bool:
        return self.state == "closed" and bool(self.merged)


class PR(BaseModel):
    """Pull request created through the API."""

    number: int
    title: str
    body: str = ""
    head_branch: str
    base_branch: str
    state: str
    html_url: str | None = None
