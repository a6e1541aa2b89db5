"""Notion client adapter for the notion-client library."""

from typing import Any, Self

import structlog
from notion_client import AsyncClient

from .abc import NotionClientBase
from .client import get_notion_client

logger = structlog.get_logger(__name__)


class NotionClientAdapter(NotionClientBase):
    """Notion client adapter for the notion-client library.

    Every call is scoped to the database the adapter was created for.
    """

    def __init__(self, client: AsyncClient, database_id: str) -> None:
        """Initialize the Notion client adapter with an already-initialized client."""
        self.client = client
        self.database_id = database_id

    def _omit_null_parameters(self, **kwargs: Any) -> dict[str, Any]:
        """Omit parameters that are None."""
        return {k: v for k, v in kwargs.items() if v is not None}

    @classmethod
    async def create(cls, notion_token: str, database_id: str) -> Self:
        """Create a new Notion client adapter.

        Args:
            notion_token: Notion integration token with access to the database
            database_id: ID of the target database

        Returns:
            Configured NotionClientAdapter instance
        """
        logger.info("Creating client for Notion database", database_id=database_id)
        client = await get_notion_client(notion_token)
        return cls(client, database_id)

    async def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self.client.aclose()

    async def query_database(self, start_cursor: str | None = None, **kwargs: Any) -> dict[str, Any]:
        """Fetch a single page of database query results."""
        params = self._omit_null_parameters(start_cursor=start_cursor, **kwargs)
        response: dict[str, Any] = await self.client.databases.query(database_id=self.database_id, **params)
        return response

    async def list_database_pages(self, **kwargs: Any) -> list[dict[str, Any]]:
        """Fetch every page in the database, following `next_cursor` until Notion stops returning one."""
        all_pages: list[dict[str, Any]] = []
        start_cursor: str | None = None
        while True:
            response = await self.query_database(start_cursor=start_cursor, **kwargs)
            results: list[dict[str, Any]] = response.get("results", [])
            all_pages.extend(results)
            logger.debug("Fetched page of Notion database results", result_count=len(results), total=len(all_pages))
            start_cursor = response.get("next_cursor")
            if not start_cursor:
                break
        return all_pages

    async def retrieve_property_value(self, page_id: str, property_id: str, **kwargs: Any) -> dict[str, Any]:
        """Retrieve the value of a single page property."""
        response: dict[str, Any] = await self.client.pages.properties.retrieve(page_id=page_id, property_id=property_id, **kwargs)
        return response

    async def create_page(self, properties: dict[str, Any], **kwargs: Any) -> dict[str, Any]:
        """Create a page in the database."""
        response: dict[str, Any] = await self.client.pages.create(
            parent={"database_id": self.database_id},
            properties=properties,
            **kwargs,
        )
        return response

    async def update_page(self, page_id: str, properties: dict[str, Any], **kwargs: Any) -> dict[str, Any]:
        """Overwrite the given properties of an existing page."""
        response: dict[str, Any] = await self.client.pages.update(page_id=page_id, properties=properties, **kwargs)
        return response
