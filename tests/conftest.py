import time

import pytest

from notion_blog.repos.result import ContentResult
from notion_blog.settings import Settings


@pytest.fixture(autouse=True)
def utc_timezone(monkeypatch):
    """Pin the process time zone so local-date formatting is deterministic."""
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


def make_settings(**overrides) -> Settings:
    values = {
        "NOTION_API_KEY": "secret",
        "NOTION_DATABASE_ID": "db-123",
        "NOTION_PAGINATE_BLOCKS": True,
        "NOTION_BLOCK_PAGE_SIZE": 100,
        "BLOG_LOCALE": "en",
    }
    values.update(overrides)
    return Settings(**values)


def make_page(
    page_id: str,
    title=None,
    description=None,
    body=None,
    reading_time=None,
    last_edited_time="2024-05-03T10:20:00.000Z",
) -> dict:
    """Build a Notion page object with the blog database's property bag."""

    def rich(text):
        return [{"type": "text", "plain_text": text}] if text is not None else []

    return {
        "object": "page",
        "id": page_id,
        "last_edited_time": last_edited_time,
        "properties": {
            "Title": {"type": "title", "title": rich(title)},
            "Description": {"type": "rich_text", "rich_text": rich(description)},
            "Body": {"type": "rich_text", "rich_text": rich(body)},
            "Reading Time": {
                "type": "formula",
                "formula": {"type": "number", "number": reading_time},
            },
            "public": {"type": "checkbox", "checkbox": True},
        },
    }


def make_block(block_id: str, text: str = "hello") -> dict:
    return {
        "object": "block",
        "id": block_id,
        "type": "paragraph",
        "paragraph": {"rich_text": [{"plain_text": text}]},
    }


class _FakeDatabases:
    def __init__(self, owner):
        self.owner = owner

    async def query(self, **kwargs):
        self.owner.calls.append(("databases.query", kwargs))
        if self.owner.error:
            raise self.owner.error
        return {"object": "list", "results": list(self.owner.query_results)}


class _FakeChildren:
    def __init__(self, owner):
        self.owner = owner

    async def list(self, **kwargs):
        self.owner.calls.append(("blocks.children.list", kwargs))
        if self.owner.error or self.owner.blocks_error:
            raise self.owner.error or self.owner.blocks_error
        pages = self.owner.block_pages.get(kwargs["block_id"], [[]])
        index = int(kwargs.get("start_cursor") or 0)
        has_more = index + 1 < len(pages)
        return {
            "object": "list",
            "results": list(pages[index]),
            "has_more": has_more,
            "next_cursor": str(index + 1) if has_more else None,
        }


class _FakeBlocks:
    def __init__(self, owner):
        self.children = _FakeChildren(owner)


class _FakePages:
    def __init__(self, owner):
        self.owner = owner

    async def retrieve(self, **kwargs):
        self.owner.calls.append(("pages.retrieve", kwargs))
        if self.owner.error or self.owner.page_error:
            raise self.owner.error or self.owner.page_error
        page_id = kwargs["page_id"]
        if page_id not in self.owner.page_by_id:
            raise LookupError(f"Could not find page with ID: {page_id}")
        return self.owner.page_by_id[page_id]


class FakeNotion:
    """
    Minimal in-memory stand-in for notion_client.AsyncClient.
    `block_pages` maps a block id to a list of result pages; the page
    index doubles as the continuation cursor.
    """

    def __init__(
        self,
        query_results=None,
        page_by_id=None,
        block_pages=None,
        error=None,
        page_error=None,
        blocks_error=None,
    ):
        self.query_results = query_results or []
        self.page_by_id = page_by_id or {}
        self.block_pages = block_pages or {}
        self.error = error
        self.page_error = page_error
        self.blocks_error = blocks_error
        self.calls = []
        self.databases = _FakeDatabases(self)
        self.blocks = _FakeBlocks(self)
        self.pages = _FakePages(self)

    def call_names(self):
        return [name for name, _kwargs in self.calls]


class FakeRepo:
    """
    Minimal repo stand-in used in service tests.
    """

    def __init__(self, pages=None, page=None, blocks=None, page_ok=True, blocks_ok=True):
        self.pages = pages
        self.page = page
        self.blocks = blocks or []
        self.page_ok = page_ok
        self.blocks_ok = blocks_ok
        self.calls = []

    async def list_public_pages(self):
        self.calls.append("list_public_pages")
        if self.pages is None:
            return ContentResult.failure([], "boom")
        return ContentResult.success(list(self.pages))

    async def retrieve_page(self, page_id):
        self.calls.append(("retrieve_page", page_id))
        if not self.page_ok:
            return ContentResult.failure(None, "page retrieve failed")
        return ContentResult.success(self.page)

    async def list_block_children(self, block_id):
        self.calls.append(("list_block_children", block_id))
        if not self.blocks_ok:
            return ContentResult.failure([], "block children fetch failed")
        return ContentResult.success(list(self.blocks))


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, get_post_return=None, locale="en"):
        self._list_posts_return = list_posts_return or ContentResult.success([])
        self._get_post_return = get_post_return
        self.locale = locale

    async def list_posts(self):
        return self._list_posts_return

    async def get_post(self, page_id: str):
        return self._get_post_return
