import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from notion_blog.db.notion import close_notion
from notion_blog.routers import posts
from notion_blog.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Notion Blog API", description="Blog content served from Notion")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.database_configured:
        logger.error("NOTION_DATABASE_ID is not set; the post index will be empty")

    try:
        yield
    finally:
        await close_notion()
        logger.info("Notion client closed")


app.router.lifespan_context = lifespan

app.include_router(posts.router)


@app.get("/")
async def root():
    return {"message": "Notion blog API is running"}
