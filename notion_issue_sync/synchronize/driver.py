"""Orchestrates the synchronization of GitHub issues into a Notion database."""

import time

import structlog

from notion_issue_sync.configuration.models import LabelErrorPolicy, SyncConfig
from notion_issue_sync.github.abc import GitHubClientBase
from notion_issue_sync.github.adapter import GitHubKitAdapter
from notion_issue_sync.notion.abc import NotionClientBase
from notion_issue_sync.notion.adapter import NotionClientAdapter
from notion_issue_sync.synchronize.index import build_issue_index
from notion_issue_sync.synchronize.issues import fetch_github_issues, get_notion_operations
from notion_issue_sync.synchronize.results import SyncResult
from notion_issue_sync.synchronize.writer import create_pages, update_pages
from notion_issue_sync.utils.constants import DEFAULT_BATCH_SIZE, DEFAULT_CONFLICT_RETRY_DELAY, DEFAULT_MAX_CONFLICT_RETRIES

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def run_sync_workflow(
    github_adapter: GitHubClientBase,
    notion_adapter: NotionClientBase,
    batch_size: int = DEFAULT_BATCH_SIZE,
    max_retries: int = DEFAULT_MAX_CONFLICT_RETRIES,
    retry_delay: float = DEFAULT_CONFLICT_RETRY_DELAY,
    label_error_policy: LabelErrorPolicy = LabelErrorPolicy.DROP,
    dry_run: bool = False,
) -> SyncResult:
    """Run one sync: index the Notion database, fetch GitHub issues, then create and update pages.

    The stages run strictly in order. A run that fails partway leaves the database
    partially synchronized; the next run carries on from there.
    """
    start_time = time.time()

    issue_index = await build_issue_index(notion_adapter)
    fetched = await fetch_github_issues(github_adapter, label_error_policy=label_error_policy)
    if fetched.dropped:
        logger.warning("Issues left out of this run because their labels could not be fetched", issue_numbers=fetched.dropped)

    operations = get_notion_operations(fetched.issues, issue_index)
    logger.info(
        "Determined Notion operations",
        pages_to_create=len(operations.pages_to_create),
        pages_to_update=len(operations.pages_to_update),
    )

    if dry_run:
        logger.info(
            "Dry run enabled - not writing to Notion",
            issue_numbers_to_create=[issue.number for issue in operations.pages_to_create],
            issue_numbers_to_update=[update.issue.number for update in operations.pages_to_update],
        )
        return SyncResult(fetched_issue_count=len(fetched.issues), dropped_issues=fetched.dropped, dry_run=True)

    logger.info("Adding new issues to Notion", issue_count=len(operations.pages_to_create))
    create_result = await create_pages(notion_adapter, operations.pages_to_create, batch_size=batch_size)

    logger.info("Updating existing issues in Notion", issue_count=len(operations.pages_to_update))
    updated_count = await update_pages(
        notion_adapter,
        operations.pages_to_update,
        batch_size=batch_size,
        max_retries=max_retries,
        retry_delay=retry_delay,
    )

    result = SyncResult(
        fetched_issue_count=len(fetched.issues),
        created_count=len(create_result.created),
        failed_creations=[issue.number for issue in create_result.failed],
        updated_count=updated_count,
        dropped_issues=fetched.dropped,
    )
    logger.info(
        "Notion database is synced with GitHub",
        created=result.created_count,
        failed_creations=result.failed_creations,
        updated=result.updated_count,
        duration=round(time.time() - start_time, 2),
    )
    return result


async def run_sync_workflow_from_config(config: SyncConfig) -> SyncResult:
    """Build both API adapters from the configuration and run the sync workflow."""
    github_adapter = await GitHubKitAdapter.create(
        owner=config.repo_owner,
        repo_name=config.repo_name,
        github_token=config.github_token,
        github_api_url=config.github_api_url,
    )
    notion_adapter = await NotionClientAdapter.create(notion_token=config.notion_token, database_id=config.notion_database_id)
    try:
        return await run_sync_workflow(
            github_adapter,
            notion_adapter,
            batch_size=config.batch_size,
            max_retries=config.max_conflict_retries,
            retry_delay=config.conflict_retry_delay,
            label_error_policy=config.label_error_policy,
            dry_run=config.dry_run,
        )
    finally:
        await notion_adapter.close()
