"""Sets up the authenticated Notion client."""

from notion_client import AsyncClient


async def get_notion_client(notion_token: str) -> AsyncClient:
    """Returns an authenticated asynchronous Notion client using an integration token."""
    if not notion_token:
        raise RuntimeError("Notion authentication requires an integration token (NOTION_KEY).")
    return AsyncClient(auth=notion_token)
