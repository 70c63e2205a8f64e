from fastapi import Depends

from notion_blog.db.notion import get_notion
from notion_blog.repos.notion_repo import NotionPostsRepo
from notion_blog.services.posts_service import PostsService


def get_posts_repo(notion=Depends(get_notion)):
    return NotionPostsRepo(notion)


def get_posts_service(repo=Depends(get_posts_repo)):
    return PostsService(repo=repo)
