"""GitHub client adapter for the githubkit library."""

from typing import Any, Literal, Self

import structlog
from githubkit import Response
from githubkit.versions.latest.models import Issue, Label

from notion_issue_sync.utils.constants import DEFAULT_GITHUB_API_URL, GITHUB_ISSUES_PAGE_SIZE

from .abc import GitHubClientBase
from .client import GitHubClient, get_github_pat_client

logger = structlog.get_logger(__name__)


class GitHubKitAdapter(GitHubClientBase):
    """GitHub client adapter for the githubkit library."""

    def __init__(self, client: GitHubClient, owner: str, repo_name: str) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client
        self.owner = owner
        self.repo_name = repo_name

    @classmethod
    async def create(
        cls,
        owner: str,
        repo_name: str,
        github_token: str,
        github_api_url: str = DEFAULT_GITHUB_API_URL,
    ) -> Self:
        """Create a new GitHub client adapter.

        Args:
            owner: Owner (user or organization) of the source repository
            repo_name: Name of the source repository
            github_token: Token used to authenticate against the GitHub API
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured GitHubKitAdapter instance
        """
        logger.info(
            "Creating client for GitHub instance and repository",
            github_api_url=github_api_url,
            owner=owner,
            repo_name=repo_name,
        )
        client = await get_github_pat_client(github_token=github_token, github_api_url=github_api_url)
        return cls(client, owner, repo_name)

    async def list_issues(
        self, state: Literal["open", "closed", "all"] = "all", per_page: int = GITHUB_ISSUES_PAGE_SIZE, **kwargs: Any
    ) -> list[Issue]:
        """List all issues for a repository, handling pagination.

        GitHub returns pull requests from this endpoint as well; callers filter them out.
        """
        all_issues: list[Issue] = []
        page: int = 1
        while True:
            response: Response[list[Issue]] = await self.client.rest.issues.async_list_for_repo(
                owner=self.owner,
                repo=self.repo_name,
                state=state,
                per_page=per_page,
                page=page,
                **kwargs,
            )
            issues: list[Issue] = response.parsed_data
            logger.debug("Fetched page of GitHub issues", page=page, issue_count=len(issues))
            if not issues:
                break
            all_issues.extend(issues)
            if len(issues) < per_page:
                break
            page += 1
        return all_issues

    async def list_labels_on_issue(self, issue_number: int, per_page: int = GITHUB_ISSUES_PAGE_SIZE) -> list[Label]:
        """List all labels on an issue, handling pagination."""
        all_labels: list[Label] = []
        page: int = 1
        while True:
            response: Response[list[Label]] = await self.client.rest.issues.async_list_labels_on_issue(
                owner=self.owner,
                repo=self.repo_name,
                issue_number=issue_number,
                per_page=per_page,
                page=page,
            )
            labels: list[Label] = response.parsed_data
            all_labels.extend(labels)
            if len(labels) < per_page:
                break
            page += 1
        return all_labels
