"""Builds the run-scoped index of GitHub issue numbers to Notion page IDs."""

import time

import structlog

from notion_issue_sync.notion.abc import NotionClientBase
from notion_issue_sync.synchronize.models import NotionIndexEntry
from notion_issue_sync.utils.constants import ISSUE_NUMBER_PROPERTY

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def fetch_notion_index_entries(notion_adapter: NotionClientBase) -> list[NotionIndexEntry]:
    """Return the page ID and issue number of every page in the Notion database.

    The query results do not carry the property value itself, so each page costs one
    extra property lookup. Any request failure propagates to the caller.
    """
    pages = await notion_adapter.list_database_pages()
    logger.info("Fetched pages from Notion database", page_count=len(pages))

    entries: list[NotionIndexEntry] = []
    for page in pages:
        page_id: str = page["id"]
        issue_number_property_id: str = page["properties"][ISSUE_NUMBER_PROPERTY]["id"]
        property_result = await notion_adapter.retrieve_property_value(page_id=page_id, property_id=issue_number_property_id)
        issue_number = property_result.get("number")
        if issue_number is None:
            logger.warning("Notion page has no issue number, ignoring it", page_id=page_id)
            continue
        entries.append(NotionIndexEntry(page_id=page_id, issue_number=int(issue_number)))
    return entries


async def build_issue_index(notion_adapter: NotionClientBase) -> dict[int, str]:
    """Build the mapping of issue number to Notion page ID.

    One page per issue number is expected. If the database holds duplicates, the
    last page seen wins.
    """
    start_time = time.time()
    logger.info("Building issue index from Notion database", start_time=start_time)
    issue_index: dict[int, str] = {}
    for entry in await fetch_notion_index_entries(notion_adapter):
        if entry.issue_number in issue_index:
            logger.warning(
                "Duplicate issue number in Notion database",
                issue_number=entry.issue_number,
                previous_page_id=issue_index[entry.issue_number],
                page_id=entry.page_id,
            )
        issue_index[entry.issue_number] = entry.page_id
    logger.info("Built issue index", issue_count=len(issue_index), duration=round(time.time() - start_time, 2))
    return issue_index
