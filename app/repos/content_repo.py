import glob
import logging
import os
from typing import Dict, Optional, Tuple

import frontmatter

from app.schemas.blog import ContentUnit

logger = logging.getLogger(__name__)

# path -> (mtime_ns, parsed unit); shared by every repo instance in the process
_unit_cache: Dict[str, Tuple[int, Optional[ContentUnit]]] = {}


class MarkdownContentRepo:
    def __init__(self, root: str):
        self.root = root

    def collection_pattern(self, collection: str) -> str:
        return os.path.join(self.root, collection, "*.md")

    def discover(self, pattern: str) -> Dict[str, Optional[ContentUnit]]:
        """Eagerly load every markdown file matching pattern, keyed by path."""
        paths = sorted(glob.glob(pattern))
        units = {}
        for path in paths:
            units[path] = self._load(path)
        _prune_cache(pattern, paths)
        return units

    def warm(self, collection: str) -> int:
        units = self.discover(self.collection_pattern(collection))
        return sum(1 for unit in units.values() if unit is not None)

    def _load(self, path: str) -> Optional[ContentUnit]:
        mtime = os.stat(path).st_mtime_ns
        cached = _unit_cache.get(path)
        if cached and cached[0] == mtime:
            return cached[1]

        unit = parse_content_file(path)
        _unit_cache[path] = (mtime, unit)
        return unit


def parse_content_file(path: str) -> Optional[ContentUnit]:
    """Parse front matter of a markdown file. Unparseable files yield None."""
    with open(path, "rb") as fh:
        raw = fh.read()

    try:
        parsed = frontmatter.loads(raw.decode("utf-8"))
    except Exception as e:
        logger.warning(f"Failed to parse front matter in {path}: {e}")
        return None

    return ContentUnit(metadata=parsed.metadata, content=parsed.content)


def clear_cache() -> None:
    _unit_cache.clear()


def _prune_cache(pattern: str, current_paths) -> None:
    directory = os.path.dirname(pattern)
    keep = set(current_paths)
    stale_keys = [
        key
        for key in _unit_cache
        if os.path.dirname(key) == directory and key not in keep
    ]
    for key in stale_keys:
        _unit_cache.pop(key, None)
