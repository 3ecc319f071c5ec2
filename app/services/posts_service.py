import logging
import posixpath
import re
from typing import List, Mapping, Optional

from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError

from app.schemas.blog import Post

logger = logging.getLogger(__name__)

COLLECTION_NAME_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]*$")
MARKDOWN_SUFFIX = ".md"


class InvalidCollectionError(ValueError):
    pass


class PostsService:
    def __init__(self, repo):
        self.repo = repo

    async def collect(self, collection: str) -> List[Post]:
        """Return every well-formed post of a collection, ordered by indexVal."""
        if not COLLECTION_NAME_RE.match(collection):
            raise InvalidCollectionError(collection)

        # discover does blocking file I/O
        pattern = self.repo.collection_pattern(collection)
        units = await run_in_threadpool(self.repo.discover, pattern)
        return collect_posts(units)


def collect_posts(units: Mapping[str, object]) -> List[Post]:
    posts = []
    for path, unit in units.items():
        slug = derive_slug(path)
        metadata = _metadata_of(unit)
        if metadata is None or not slug:
            continue

        post = build_post(metadata, slug)
        if post:
            posts.append(post)

    # list.sort is stable, so equal indexVal keep discovery order
    posts.sort(key=lambda p: p.indexVal)
    return posts


def derive_slug(path: str) -> str:
    name = posixpath.basename(path.replace("\\", "/"))
    return name.removesuffix(MARKDOWN_SUFFIX)


def build_post(metadata: Mapping, slug: str) -> Optional[Post]:
    try:
        post = Post.model_validate({**metadata, "slug": slug})
    except ValidationError as e:
        logger.warning(
            f"Skipping malformed post {slug}: {e.error_count()} invalid field(s)"
        )
        return None

    # extra front-matter values are untyped and must still render as JSON
    try:
        post.to_json()
    except (ValueError, TypeError) as e:
        logger.warning(f"Skipping post {slug} with unserializable metadata: {e}")
        return None
    return post


def _metadata_of(unit) -> Optional[Mapping]:
    if unit is None:
        return None
    if isinstance(unit, Mapping):
        metadata = unit.get("metadata")
    else:
        metadata = getattr(unit, "metadata", None)
    return metadata if isinstance(metadata, Mapping) else None
