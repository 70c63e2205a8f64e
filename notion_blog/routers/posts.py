import logging

from fastapi import APIRouter, Depends, HTTPException

from notion_blog import dependencies as deps
from notion_blog.locale import index_message
from notion_blog.schemas.blog import PostDetail, PostIndex
from notion_blog.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=PostIndex)
async def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get the public posts, newest first."""
    try:
        result = await service.list_posts()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")

    if not result.ok:
        logger.warning(f"Posts unavailable: {result.reason}")
        status = "unavailable"
    elif not result.value:
        status = "empty"
    else:
        status = "ok"
    return PostIndex(
        posts=result.value,
        status=status,
        message=index_message(status, service.locale),
    )


@router.get("/posts/{page_id}", response_model=PostDetail)
async def get_post(
    page_id: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post with its child blocks by Notion page id."""
    try:
        post = await service.get_post(page_id)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {page_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
