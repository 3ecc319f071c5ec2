import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.dependencies import get_content_repo
from app.routers import posts
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Postlist API", description="Markdown post listings")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.PRELOAD_CONTENT:
        count = get_content_repo().warm(settings.DEFAULT_COLLECTION)
        logger.info(f"Preloaded {count} posts from {settings.DEFAULT_COLLECTION}")

    yield


app.router.lifespan_context = lifespan

app.include_router(posts.router)


@app.get("/")
async def root():
    return {"message": "Postlist API is running"}
