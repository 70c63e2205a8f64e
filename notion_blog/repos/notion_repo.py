import logging
from typing import Any, Dict, List, Optional

from notion_blog.repos.result import ContentResult
from notion_blog.settings import Settings, settings

logger = logging.getLogger(__name__)

PUBLIC_FILTER = {"property": "public", "checkbox": {"equals": True}}
CREATED_DESC_SORT = [{"property": "Created time", "direction": "descending"}]


class NotionPostsRepo:
    def __init__(self, notion, config: Optional[Settings] = None):
        self.notion = notion
        self.config = config or settings

    async def list_public_pages(self) -> ContentResult[List[dict]]:
        """Query the blog database for pages flagged public, newest first."""
        database_id = self.config.NOTION_DATABASE_ID
        if not self.config.database_configured:
            logger.error("NOTION_DATABASE_ID is not set.")
            return ContentResult.failure([], "NOTION_DATABASE_ID is not set")

        try:
            response = await self.notion.databases.query(
                database_id=database_id,
                filter=PUBLIC_FILTER,
                sorts=CREATED_DESC_SORT,
            )
        except Exception as e:
            logger.error(f"Error fetching blog posts from Notion: {e}")
            return ContentResult.failure([], f"database query failed: {e}")

        results = response.get("results", [])
        logger.debug(f"Fetched {len(results)} public pages from {database_id}")
        return ContentResult.success(results)

    async def list_block_children(self, block_id: str) -> ContentResult[List[dict]]:
        """
        Fetch the immediate child blocks of a page or block.
        Follows continuation cursors unless pagination is disabled,
        in which case only the first page is returned.
        """
        blocks: List[dict] = []
        cursor = None
        try:
            while True:
                kwargs: Dict[str, Any] = {
                    "block_id": block_id,
                    "page_size": self.config.NOTION_BLOCK_PAGE_SIZE,
                }
                if cursor:
                    kwargs["start_cursor"] = cursor
                response = await self.notion.blocks.children.list(**kwargs)
                blocks.extend(response.get("results", []))

                cursor = response.get("next_cursor")
                if not self.config.NOTION_PAGINATE_BLOCKS:
                    if response.get("has_more"):
                        logger.debug(f"Truncated children of {block_id} to one page")
                    break
                if not response.get("has_more") or not cursor:
                    break
        except Exception as e:
            logger.error(f"Error fetching block children from Notion: {e}")
            return ContentResult.failure([], f"block children fetch failed: {e}")

        return ContentResult.success(blocks)

    async def retrieve_page(self, page_id: str) -> ContentResult[Optional[dict]]:
        try:
            page = await self.notion.pages.retrieve(page_id=page_id)
        except Exception as e:
            logger.error(f"Error fetching blog post by ID from Notion: {e}")
            return ContentResult.failure(None, f"page retrieve failed: {e}")
        return ContentResult.success(page)
