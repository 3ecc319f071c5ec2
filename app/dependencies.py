from fastapi import Depends

from app.repos.content_repo import MarkdownContentRepo
from app.services.posts_service import PostsService
from app.settings import settings


def get_content_repo():
    return MarkdownContentRepo(settings.CONTENT_ROOT)


def get_posts_service(repo=Depends(get_content_repo)):
    return PostsService(repo=repo)
