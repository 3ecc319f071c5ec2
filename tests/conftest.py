import os
import textwrap

import pytest

from app.repos import content_repo
from app.schemas.blog import ContentUnit


class FakeRepo:
    """
    Minimal content repo stand-in used in service tests.
    Set track_calls=True to record the patterns passed to discover().
    """

    def __init__(self, units: dict, track_calls: bool = False):
        self.units = units
        self.track_calls = track_calls
        self.calls = []

    def collection_pattern(self, collection: str) -> str:
        return f"/content/{collection}/*.md"

    def discover(self, pattern: str) -> dict:
        if self.track_calls:
            self.calls.append(pattern)
        return dict(self.units)


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, collect_return=None):
        self._collect_return = collect_return or []
        self.collections = []

    async def collect(self, collection: str):
        self.collections.append(collection)
        return self._collect_return


def unit(**metadata) -> ContentUnit:
    return ContentUnit(metadata=metadata, content="body")


def write_post(directory, name: str, front_matter: str, body: str = "Body text.\n"):
    """Write a markdown file with a YAML front matter block."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    text = f"---\n{textwrap.dedent(front_matter).strip()}\n---\n{body}"
    path.write_text(text, encoding="utf-8")
    return path


def bump_mtime(path) -> None:
    stat = path.stat()
    os.utime(path, ns=(stat.st_atime_ns, stat.st_mtime_ns + 1_000_000_000))


@pytest.fixture(autouse=True)
def clear_content_cache():
    content_repo.clear_cache()
    yield
    content_repo.clear_cache()
