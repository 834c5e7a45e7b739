from __future__ import annotations

import argparse
import datetime as dt
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional

from .config import (
    DEFAULT_SITE_DESCRIPTION,
    DEFAULT_SITE_NAME,
    DEFAULT_SITE_URL,
    SiteConfig,
    load_config,
)
from .content import Post, load_posts
from .errors import InputError, SiteError
from .og import build_og_image
from .pages import (
    BLOG_DIR,
    FEED_FILE,
    HTML_EXT,
    OG_DIR,
    SITEMAP_FILE,
    build_blog_index,
    build_post_page,
    build_rss,
    build_sitemap,
)
from .render import ensure_dir

DEFAULT_POSTS = "data/posts.json"
DEFAULT_CONFIG = "site.toml"


def build_site(
    config: SiteConfig,
    posts: list[Post],
    output_dir: Path,
    workers: int = 1,
    today: Optional[dt.date] = None,
) -> None:
    print("Building blog...")
    ensure_dir(output_dir / BLOG_DIR)
    ensure_dir(output_dir / OG_DIR)

    build_blog_index(config, output_dir, posts)
    print(f"  {BLOG_DIR}/index.html")

    def render_post(post: Post) -> Post:
        build_post_page(config, output_dir, post)
        build_og_image(config, output_dir, post)
        return post

    workers = max(1, int(workers or 1))
    if workers <= 1 or len(posts) <= 1:
        for post in posts:
            render_post(post)
            print(f"  {BLOG_DIR}/{post.id}{HTML_EXT} + {OG_DIR}/{post.id}.svg")
    else:
        with ThreadPoolExecutor(max_workers=min(workers, len(posts))) as executor:
            for post in executor.map(render_post, posts):
                print(f"  {BLOG_DIR}/{post.id}{HTML_EXT} + {OG_DIR}/{post.id}.svg")

    build_rss(config, output_dir, posts, today)
    print(f"  {FEED_FILE}")

    build_sitemap(config, output_dir, posts, today)
    print(f"  {SITEMAP_FILE}")

    print(f"\nDone. {len(posts)} posts generated.")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG,
        help="Path to site config file (TOML/YAML/JSON).",
    )
    pre_args, _ = pre_parser.parse_known_args(argv)
    config = load_config(Path(pre_args.config))

    def cfg_str(key: str, default: str) -> str:
        value = config.get(key)
        return default if value is None else str(value)

    def cfg_int(key: str, default: int) -> int:
        value = config.get(key)
        if value is None:
            return default
        try:
            return int(str(value).strip())
        except ValueError:
            raise InputError(f"Config value '{key}' must be an integer, got {value!r}") from None

    parser = argparse.ArgumentParser(description="Build the blog from a JSON list of posts.")
    parser.add_argument("--config", default=pre_args.config, help="Path to site config file (TOML/YAML/JSON).")
    parser.add_argument("--posts", default=cfg_str("posts", DEFAULT_POSTS), help="JSON file with the post list.")
    parser.add_argument("--output", default=cfg_str("output", "."), help="Root directory for generated files.")
    parser.add_argument("--site-url", default=cfg_str("site_url", DEFAULT_SITE_URL), help="Public site URL.")
    parser.add_argument("--site-name", default=cfg_str("site_name", DEFAULT_SITE_NAME), help="Site title.")
    parser.add_argument(
        "--site-description",
        default=cfg_str("site_description", DEFAULT_SITE_DESCRIPTION),
        help="Site description used in pages and the feed.",
    )
    parser.add_argument(
        "--workers",
        default=cfg_int("workers", 1),
        type=int,
        help="Number of worker threads for per-post pages and images.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    start = time.perf_counter()
    try:
        args = parse_args(argv)
        config = SiteConfig(
            site_url=args.site_url,
            site_name=args.site_name,
            site_description=args.site_description,
        )
        posts = load_posts(Path(args.posts))
        build_site(config, posts, Path(args.output), workers=args.workers)
    except SiteError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    elapsed = time.perf_counter() - start
    print(f"Build completed in {elapsed:.2f}s.")
