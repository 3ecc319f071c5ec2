import argparse
import asyncio
import json
import logging
import sys

from app.repos.content_repo import MarkdownContentRepo
from app.services.posts_service import PostsService
from app.settings import settings

logger = logging.getLogger(__name__)


def export_posts(collection: str, root: str) -> str:
    service = PostsService(repo=MarkdownContentRepo(root))
    posts = asyncio.run(service.collect(collection))
    return json.dumps([post.to_json() for post in posts], ensure_ascii=False)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Export a post collection as JSON")
    parser.add_argument("collection", nargs="?", default=settings.DEFAULT_COLLECTION)
    parser.add_argument("--root", default=settings.CONTENT_ROOT)
    parser.add_argument("--output", help="write to this file instead of stdout")
    args = parser.parse_args(argv)

    try:
        payload = export_posts(args.collection, args.root)
    except Exception as e:
        logger.error(f"Export of {args.collection} failed: {e}", exc_info=True)
        return 1

    if args.output:
        with open(args.output, "w", encoding="utf-8") as fh:
            fh.write(payload)
        logger.info(f"Exported {args.collection} to {args.output}")
    else:
        sys.stdout.write(payload + "\n")
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper()))
    sys.exit(main())
