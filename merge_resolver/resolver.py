"""Map merge:<version> labels of a merged pull request to target branches.

A version token names a branch directly (e.g. v2.0.0) or, when no such
branch exists, the development branch whose build manifest declares that
version. Each resolved branch can be turned into a follow-up merge pull
request into the merged PR's base branch.
"""

import logging
import re
from typing import Iterable, List

import requests
from pydantic import BaseModel, Field

from merge_resolver.adapters.base import GitPlatformAdapter, GitPlatformError
from merge_resolver.config import ResolverConfig
from merge_resolver.event import MissingPullRequestError, ResolverError
from merge_resolver.models import PR, GitHubEvent, Label, PullRequest

logger = logging.getLogger("merge_resolver.resolver")


class BranchMatch(BaseModel):
    version: str
    branch: str


class RunResult(BaseModel):
    """What a run resolved; empty when the pull request was not applicable."""

    matches: List[BranchMatch] = Field(default_factory=list)
    unresolved: List[str] = Field(default_factory=list)
    created: List[PR] = Field(default_factory=list)


def extract_version_tokens(labels: Iterable[Label], prefix: str = "merge:") -> List[str]:
    """Return label names starting with prefix, prefix removed and trimmed,
    in label order."""
    return [label.name[len(prefix) :].strip() for label in labels if label.name.startswith(prefix)]


def get_develop_version(
    adapter: GitPlatformAdapter,
    repo: str,
    config: ResolverConfig | None = None,
) -> str | None:
    """Read the version declared in the manifest on the development branch.

    Returns the version with the configured prefix (e.g. v1.2.3), or None
    when the manifest is missing, is not a file, is empty or declares no
    version.
    """
    config = config or ResolverConfig()
    entry = adapter.get_file_content(repo, config.manifest_path, ref=config.develop_branch)
    if entry is None or isinstance(entry, list) or entry.type != "file" or not entry.content:
        return None

    match = re.search(config.version_pattern, entry.decoded())
    if match is None or not match.group(1):
        logger.info("Version not found in %s", config.manifest_path)
        return None

    version = match.group(1)
    logger.info("Version found: %s", version)
    return f"{config.version_prefix}{version}"


def resolve_branch(
    adapter: GitPlatformAdapter,
    repo: str,
    version: str,
    config: ResolverConfig | None = None,
) -> str | None:
    """Return the branch a version token refers to, or None."""
    config = config or ResolverConfig()
    try:
        branch = adapter.get_branch(repo, version)
    except (GitPlatformError, requests.RequestException) as e:
        logger.debug("Branch lookup for %s failed: %s", version, e)
        branch = None
    if branch is not None:
        return version

    develop_version = get_develop_version(adapter, repo, config)
    if develop_version == version:
        return config.develop_branch
    return None


def create_merge_pull_request(
    adapter: GitPlatformAdapter,
    repo: str,
    branch: str,
    pull_request: PullRequest,
) -> PR | None:
    """Open a PR merging branch into the base of the merged pull request.

    Returns None when GitHub rejects it as unprocessable (a PR for the
    same head and base exists, or there is nothing to merge). Raises
    ResolverError when the payload carries no base branch.
    """
    if pull_request.base is None:
        raise ResolverError(f"Cannot merge {branch}: pull request #{pull_request.number} has no base branch.")
    base = pull_request.base.ref
    title = f"Merge {branch} into {base}"
    body = f"This pull request merges {branch} into {base}."
    try:
        pr = adapter.create_pr(repo, title=title, body=body, head=branch, base=base)
    except GitPlatformError as e:
        if e.status_code == 422:
            logger.warning("Pull request not created (%s): %s", title, e)
            return None
        raise
    logger.info("Pull request created: %s", title)
    return pr


def run(
    event: GitHubEvent,
    repo: str,
    adapter: GitPlatformAdapter,
    config: ResolverConfig | None = None,
) -> RunResult:
    """Resolve the merge labels of the pull request in event.

    Raises MissingPullRequestError when the event has no pull request.
    """
    config = config or ResolverConfig()
    result = RunResult()
    pull_request = event.pull_request
    if pull_request is None:
        raise MissingPullRequestError()

    if not pull_request.is_closed_and_merged:
        logger.info("Pull request is not closed and merged.")
        return result

    versions = extract_version_tokens(pull_request.labels, config.label_prefix)
    if not versions:
        logger.info("No labels found on the pull request.")
        return result

    for version in versions:
        if not version:
            logger.warning("Ignoring %s label without a version", config.label_prefix)
            result.unresolved.append(version)
            continue
        branch = resolve_branch(adapter, repo, version, config)
        if branch is None:
            logger.warning("No branch found for %s", version)
            result.unresolved.append(version)
            continue
        logger.info("Match found: %s is in %s", version, branch)
        result.matches.append(BranchMatch(version=version, branch=branch))

    if config.create_pull_requests:
        for match in result.matches:
            pr = create_merge_pull_request(adapter, repo, match.branch, pull_request)
            if pr is not None:
                result.created.append(pr)
    return result
