"""Base ABC for Notion clients."""

from abc import ABC, abstractmethod
from typing import Any


class NotionClientBase(ABC):
    """Base ABC for Notion clients bound to a single database."""

    # Database reads
    @abstractmethod
    async def query_database(self, start_cursor: str | None = None, **kwargs: Any) -> dict[str, Any]:
        """Fetch a single page of database query results."""
        pass

    @abstractmethod
    async def list_database_pages(self, **kwargs: Any) -> list[dict[str, Any]]:
        """Fetch every page in the database, following pagination."""
        pass

    # Page property reads
    @abstractmethod
    async def retrieve_property_value(self, page_id: str, property_id: str, **kwargs: Any) -> dict[str, Any]:
        """Retrieve the value of a single page property."""
        pass

    # Page writes
    @abstractmethod
    async def create_page(self, properties: dict[str, Any], **kwargs: Any) -> dict[str, Any]:
        """Create a page in the database."""
        pass

    @abstractmethod
    async def update_page(self, page_id: str, properties: dict[str, Any], **kwargs: Any) -> dict[str, Any]:
        """Overwrite the given properties of an existing page."""
        pass
