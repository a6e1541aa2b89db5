"""Unit tests for the NotionClientAdapter class."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from notion_issue_sync.notion.adapter import NotionClientAdapter


def make_adapter() -> NotionClientAdapter:
    """Build an adapter around a mocked notion-client AsyncClient."""
    client = MagicMock()
    client.databases.query = AsyncMock()
    client.pages.properties.retrieve = AsyncMock()
    client.pages.create = AsyncMock()
    client.pages.update = AsyncMock()
    client.aclose = AsyncMock()
    return NotionClientAdapter(client, "db-id")


@pytest.mark.asyncio
async def test_query_database_omits_missing_cursor() -> None:
    """Test that the first query sends no start_cursor."""
    adapter = make_adapter()
    adapter.client.databases.query.return_value = {"results": [], "next_cursor": None, "has_more": False}

    await adapter.query_database()

    adapter.client.databases.query.assert_awaited_once_with(database_id="db-id")


@pytest.mark.asyncio
async def test_list_database_pages_follows_cursor() -> None:
    """Test that list_database_pages follows next_cursor until it is empty."""
    adapter = make_adapter()
    adapter.client.databases.query.side_effect = [
        {"results": [{"id": "page-1"}, {"id": "page-2"}], "next_cursor": "cursor-2", "has_more": True},
        {"results": [{"id": "page-3"}], "next_cursor": "cursor-3", "has_more": True},
        {"results": [], "next_cursor": None, "has_more": False},
    ]

    pages = await adapter.list_database_pages()

    assert [page["id"] for page in pages] == ["page-1", "page-2", "page-3"]
    assert adapter.client.databases.query.await_args_list[0].kwargs == {"database_id": "db-id"}
    assert adapter.client.databases.query.await_args_list[1].kwargs == {"database_id": "db-id", "start_cursor": "cursor-2"}
    assert adapter.client.databases.query.await_args_list[2].kwargs == {"database_id": "db-id", "start_cursor": "cursor-3"}


@pytest.mark.asyncio
async def test_list_database_pages_empty_database() -> None:
    """Test that an empty database yields no pages after a single query."""
    adapter = make_adapter()
    adapter.client.databases.query.return_value = {"results": [], "next_cursor": None, "has_more": False}

    assert await adapter.list_database_pages() == []
    adapter.client.databases.query.assert_awaited_once()


@pytest.mark.asyncio
async def test_retrieve_property_value() -> None:
    """Test that property values are retrieved by page and property ID."""
    adapter = make_adapter()
    adapter.client.pages.properties.retrieve.return_value = {"object": "property_item", "type": "number", "number": 12}

    value = await adapter.retrieve_property_value(page_id="page-1", property_id="prop-1")

    assert value["number"] == 12
    adapter.client.pages.properties.retrieve.assert_awaited_once_with(page_id="page-1", property_id="prop-1")


@pytest.mark.asyncio
async def test_create_page_targets_database() -> None:
    """Test that pages are created with the adapter's database as parent."""
    adapter = make_adapter()
    properties = {"Issue Number": {"number": 1}}

    await adapter.create_page(properties=properties)

    adapter.client.pages.create.assert_awaited_once_with(parent={"database_id": "db-id"}, properties=properties)


@pytest.mark.asyncio
async def test_update_page() -> None:
    """Test that updates are sent to the given page."""
    adapter = make_adapter()
    properties = {"State": {"select": {"name": "closed"}}}

    await adapter.update_page(page_id="page-1", properties=properties)

    adapter.client.pages.update.assert_awaited_once_with(page_id="page-1", properties=properties)


@pytest.mark.asyncio
async def test_close() -> None:
    """Test that close releases the underlying client."""
    adapter = make_adapter()

    await adapter.close()

    adapter.client.aclose.assert_awaited_once()


@pytest.mark.asyncio
async def test_create_builds_client_from_token() -> None:
    """Test that create builds a client for the given database."""
    fake_client = MagicMock()
    with patch("notion_issue_sync.notion.adapter.get_notion_client", new=AsyncMock(return_value=fake_client)) as mock_get_client:
        adapter = await NotionClientAdapter.create(notion_token="secret", database_id="db-id")

    mock_get_client.assert_awaited_once_with("secret")
    assert adapter.client is fake_client
    assert adapter.database_id == "db-id"
