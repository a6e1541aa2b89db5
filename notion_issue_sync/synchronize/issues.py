"""Contains synchronization logic for GitHub issues."""

import time

import structlog
from githubkit.exception import GitHubException
from pydantic import ValidationError

from notion_issue_sync.configuration.models import LabelErrorPolicy
from notion_issue_sync.github.abc import GitHubClientBase
from notion_issue_sync.schemas.issue import IssueModel
from notion_issue_sync.synchronize.models import FetchedIssues, NotionOperations, PageUpdate, SyncDecision
from notion_issue_sync.utils.constants import GITHUB_ISSUES_PAGE_SIZE

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def fetch_github_issues(
    github_adapter: GitHubClientBase,
    label_error_policy: LabelErrorPolicy = LabelErrorPolicy.DROP,
) -> FetchedIssues:
    """Fetch every issue of the repository, skipping pull requests, and attach its labels.

    Listing failures propagate. A failed label lookup, including a label payload that
    does not parse, only affects its own issue: under the DROP policy the issue is left
    out of this run, under the EMPTY policy it is kept with no labels.
    """
    start_time = time.time()
    logger.info("Fetching issues from GitHub repository", start_time=start_time)
    github_issues = await github_adapter.list_issues(state="all", per_page=GITHUB_ISSUES_PAGE_SIZE)

    fetched = FetchedIssues()
    for github_issue in github_issues:
        if github_issue.pull_request:
            logger.debug("Skipping pull request", issue_number=github_issue.number)
            continue

        logger.debug("Processing issue", issue_number=github_issue.number, issue_title=github_issue.title)
        try:
            labels = [label.name for label in await github_adapter.list_labels_on_issue(github_issue.number)]
        except (GitHubException, ValidationError) as exc:
            logger.error("Error fetching labels for issue", issue_number=github_issue.number, error=str(exc))
            if label_error_policy == LabelErrorPolicy.DROP:
                logger.warning("Skipping issue because its labels could not be fetched", issue_number=github_issue.number)
                fetched.dropped.append(github_issue.number)
                continue
            labels = []

        logger.debug("Fetched labels for issue", issue_number=github_issue.number, labels=labels)
        fetched.issues.append(IssueModel.from_github_issue(github_issue, labels))

    logger.info(
        "Fetched issues from GitHub repository",
        issue_count=len(fetched.issues),
        listed_count=len(github_issues),
        dropped_count=len(fetched.dropped),
        duration=round(time.time() - start_time, 2),
    )
    return fetched


def decide_notion_sync_action(issue: IssueModel, issue_index: dict[int, str]) -> SyncDecision:
    """Decide whether an issue needs a new Notion page or an update to its existing one.

    Key is issue number.
    """
    if issue.number in issue_index:
        return SyncDecision.UPDATE
    return SyncDecision.CREATE


def get_notion_operations(issues: list[IssueModel], issue_index: dict[int, str]) -> NotionOperations:
    """Partition issues into pages to create and pages to update, preserving order."""
    operations = NotionOperations()
    for issue in issues:
        decision = decide_notion_sync_action(issue, issue_index)
        if decision == SyncDecision.UPDATE:
            operations.pages_to_update.append(PageUpdate(page_id=issue_index[issue.number], issue=issue))
        else:
            operations.pages_to_create.append(issue)
    return operations
