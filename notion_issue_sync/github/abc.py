"""Base ABC for GitHub clients."""

from abc import ABC, abstractmethod
from typing import Any, Literal


class GitHubClientBase(ABC):
    """Base ABC for GitHub clients."""

    # Issue reads
    @abstractmethod
    async def list_issues(self, state: Literal["open", "closed", "all"] = "all", per_page: int = 100, **kwargs: Any) -> list[Any]:
        """List issues (and pull requests) for a repository."""
        pass

    # Label reads
    @abstractmethod
    async def list_labels_on_issue(self, issue_number: int, per_page: int = 100) -> list[Any]:
        """List labels attached to a single issue."""
        pass
