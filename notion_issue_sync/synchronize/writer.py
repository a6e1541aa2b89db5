"""Applies create and update operations to the Notion database in bounded batches."""

import asyncio
from typing import Any, Coroutine, TypeVar

import httpx
import structlog
from notion_client.errors import HTTPResponseError, RequestTimeoutError

from notion_issue_sync.notion.abc import NotionClientBase
from notion_issue_sync.schemas.issue import IssueModel
from notion_issue_sync.synchronize.models import PageUpdate
from notion_issue_sync.synchronize.properties import get_properties_from_issue
from notion_issue_sync.synchronize.results import CreatePagesResult
from notion_issue_sync.utils.constants import DEFAULT_BATCH_SIZE, DEFAULT_CONFLICT_RETRY_DELAY, DEFAULT_MAX_CONFLICT_RETRIES
from notion_issue_sync.utils.helpers import chunk
from notion_issue_sync.utils.retry import retry_on_conflict

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

NOTION_REQUEST_ERRORS = (HTTPResponseError, RequestTimeoutError, httpx.HTTPError)

T = TypeVar("T")


async def run_batch(coroutines: list[Coroutine[Any, Any, T]]) -> list[T]:
    """Run one batch of requests concurrently and return their results in order.

    If any request raises, the rest of the batch is cancelled and awaited before the
    error propagates, so no request outlives the batch.
    """
    tasks = [asyncio.create_task(coroutine) for coroutine in coroutines]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


async def create_page_for_issue(notion_adapter: NotionClientBase, issue: IssueModel) -> bool:
    """Create the Notion page for a single issue, returning whether it succeeded.

    Failures are logged and swallowed so the rest of the batch carries on.
    """
    try:
        await notion_adapter.create_page(properties=get_properties_from_issue(issue))
    except NOTION_REQUEST_ERRORS as exc:
        logger.error("Error creating page for issue", issue_number=issue.number, error=str(exc), error_type=type(exc).__name__)
        return False
    logger.debug("Created page for issue", issue_number=issue.number)
    return True


async def create_pages(
    notion_adapter: NotionClientBase,
    issues: list[IssueModel],
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> CreatePagesResult:
    """Create Notion pages for new issues.

    Issues are split into chunks of `batch_size`. The creates in a chunk run
    concurrently and the whole chunk completes before the next one starts.
    """
    created: list[IssueModel] = []
    failed: list[IssueModel] = []
    for batch in chunk(issues, batch_size):
        outcomes = await run_batch([create_page_for_issue(notion_adapter, issue) for issue in batch])
        for issue, succeeded in zip(batch, outcomes):
            (created if succeeded else failed).append(issue)
        logger.info("Completed create batch", batch_size=len(batch))
    return CreatePagesResult(created=created, failed=failed)


async def update_pages(
    notion_adapter: NotionClientBase,
    updates: list[PageUpdate],
    batch_size: int = DEFAULT_BATCH_SIZE,
    max_retries: int = DEFAULT_MAX_CONFLICT_RETRIES,
    retry_delay: float = DEFAULT_CONFLICT_RETRY_DELAY,
) -> int:
    """Overwrite the Notion pages of existing issues, returning how many were updated.

    Chunking matches `create_pages`. Each update is retried on conflict errors only.
    Any other error, or a conflict that outlasts the retries, cancels the rest of the
    batch and propagates, ending the run.
    """

    @retry_on_conflict(max_retries=max_retries, delay=retry_delay)
    async def update_page_with_retry(page_id: str, properties: dict[str, Any]) -> None:
        await notion_adapter.update_page(page_id=page_id, properties=properties)

    updated = 0
    for batch in chunk(updates, batch_size):
        await run_batch([update_page_with_retry(update.page_id, get_properties_from_issue(update.issue)) for update in batch])
        updated += len(batch)
        logger.info("Completed update batch", batch_size=len(batch))
    return updated
