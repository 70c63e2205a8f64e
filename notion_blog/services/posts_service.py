import asyncio
import logging
from typing import Iterable, List, Optional

from notion_blog.locale import fallback_for, format_date
from notion_blog.repos.result import ContentResult
from notion_blog.schemas.blog import BlockEntry, PostDetail, PostSummary, RecordMap
from notion_blog.services.properties import to_document_properties, to_post_summary
from notion_blog.settings import settings

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, repo, locale: Optional[str] = None):
        self.repo = repo
        self.locale = locale or settings.BLOG_LOCALE

    async def list_posts(self) -> ContentResult[List[PostSummary]]:
        result = await self.repo.list_public_pages()
        if not result.ok:
            return ContentResult.failure([], result.reason or "unknown error")

        posts = []
        for page in result.value:
            if not isinstance(page, dict) or not page.get("id"):
                logger.warning(f"Skipping malformed page record: {page!r}")
                continue
            posts.append(to_post_summary(page, self.locale))
        return ContentResult.success(posts)

    async def get_post(self, page_id: str) -> Optional[PostDetail]:
        """
        Fetch a page and its child blocks concurrently and assemble them.
        Returns None when the page is missing or has no child blocks.
        """
        page_result, blocks_result = await asyncio.gather(
            self.repo.retrieve_page(page_id),
            self.repo.list_block_children(page_id),
        )
        page = page_result.value
        blocks = blocks_result.value

        if not page:
            logger.info(f"Post {page_id} not found: {page_result.reason or 'no page'}")
            return None
        if not blocks:
            logger.info(
                f"Post {page_id} not found: {blocks_result.reason or 'no blocks'}"
            )
            return None

        properties = to_document_properties(page, self.locale)
        return PostDetail(
            id=page_id,
            properties=properties,
            lastEditedDisplay=format_date(properties.lastEditedAt, self.locale),
            hasBody=properties.body != fallback_for("body", self.locale),
            recordMap=build_record_map(page_id, page, blocks),
        )


def build_record_map(page_id: str, page: dict, blocks: Iterable[dict]) -> RecordMap:
    """Key the page and its child blocks by id, the page entry taking precedence."""
    entries = {page_id: BlockEntry(value=page)}
    for block in blocks:
        block_id = block.get("id")
        if not block_id:
            logger.warning("Skipping child block without an id")
            continue
        if block_id == page_id:
            logger.warning(f"Child block id collides with page id {page_id}")
            continue
        entries[block_id] = BlockEntry(value=block)
    return RecordMap(block=entries)
