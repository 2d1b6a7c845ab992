"""Abstract base for Git platform adapters."""

from abc import ABC, abstractmethod
from typing import List

from merge_resolver.models import PR, Branch, FileContent


class GitPlatformError(Exception):
    """Raised when a Git platform API call fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GitPlatformAdapter(ABC):
    """Abstract interface for Git hosting platforms.

    Lookups return None when the object does not exist and raise
    GitPlatformError for any other failure.
    """

    @abstractmethod
    def get_branch(self, repo: str, branch: str) -> Branch | None:
        """Fetch branch by name; None if it does not exist."""
        ...

    @abstractmethod
    def get_file_content(
        self,
        repo: str,
        path: str,
        ref: str | None = None,
    ) -> FileContent | List[FileContent] | None:
        """Fetch file at path and ref; a list for directories, None if
        missing."""
        ...

    @abstractmethod
    def create_pr(
        self,
        repo: str,
        title: str,
        body: str,
        head: str,
        base: str,
    ) -> PR:
        """Create a pull request."""
        ...
