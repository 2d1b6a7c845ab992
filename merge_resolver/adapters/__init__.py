"""Git platform adapters."""

from merge_resolver.adapters.base import GitPlatformAdapter, GitPlatformError
from merge_resolver.adapters.github import GitHubAdapter

__all__ = ["GitPlatformAdapter", "GitPlatformError", "GitHubAdapter"]
