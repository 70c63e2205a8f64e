import logging
from typing import Optional

from notion_client import AsyncClient

from notion_blog.settings import settings

logger = logging.getLogger(__name__)

_client: Optional[AsyncClient] = None


def get_notion() -> AsyncClient:
    """
    Return the shared Notion client, creating it on first use.
    Called at runtime to avoid import-time client construction.
    """
    global _client
    if _client is None:
        if not settings.NOTION_API_KEY:
            logger.warning("NOTION_API_KEY is not set; Notion calls will fail")
        _client = AsyncClient(auth=settings.NOTION_API_KEY)
    return _client


async def close_notion() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
