import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException

from app import dependencies as deps
from app.config import config
from app.services.posts_service import InvalidCollectionError, PostsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")
GO_WEB_COLLECTION = "go-web"


@router.get("/site")
def get_site():
    """Static site configuration."""
    return config.as_dict()


@router.get("/go-web")
async def list_go_web_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get all posts of the go-web collection."""
    return await _list_posts(GO_WEB_COLLECTION, service)


@router.get("/{collection}")
async def list_posts(
    collection: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get all posts of a collection, ordered by indexVal."""
    return await _list_posts(collection, service)


async def _list_posts(collection: str, service: PostsService) -> List[Dict[str, Any]]:
    try:
        posts = await service.collect(collection)
        return [post.to_json() for post in posts]
    except HTTPException:
        raise
    except InvalidCollectionError:
        raise HTTPException(status_code=404, detail="Collection not found")
    except Exception as e:
        logger.error(f"Unexpected error listing posts for {collection}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")
