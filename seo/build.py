"""Post-render build step: inject route SEO tags and write sitemap.xml.

    python -m seo.build --dist dist
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

import settings
from logging_config import init_logging
from seo.meta_tags import replace_meta_tags_in_html
from seo.routes import PRERENDER_ROUTES
from seo.sitemap import build_sitemap_xml, is_indexed

logger = logging.getLogger(__name__)

SITEMAP_FILENAME = "sitemap.xml"


@dataclass
class BuildSummary:
    injected: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    sitemap_path: Optional[Path] = None
    sitemap_url_count: int = 0


def page_path(dist_dir: Path, route: str) -> Path:
    """Rendered page for a route in the nested layout: dist/<route>/index.html."""
    relative = route.strip("/")
    return dist_dir / relative / "index.html" if relative else dist_dir / "index.html"


def inject_route(dist_dir: Path, route: str) -> bool:
    """Rewrite one rendered page in place. Returns False when the page is missing."""
    path = page_path(dist_dir, route)
    if not path.is_file():
        logger.warning("No rendered page for %s at %s, skipping", route, path)
        return False
    html = path.read_text(encoding="utf-8")
    path.write_text(replace_meta_tags_in_html(route, html), encoding="utf-8")
    logger.debug("Injected SEO tags for %s", route)
    return True


def write_sitemap(dist_dir: Path, routes: Sequence[str]) -> Path:
    dist_dir.mkdir(parents=True, exist_ok=True)
    path = dist_dir / SITEMAP_FILENAME
    path.write_text(build_sitemap_xml(routes), encoding="utf-8")
    logger.info("sitemap.xml generated with %d URLs", sum(1 for r in routes if is_indexed(r)))
    return path


def run_build(dist_dir: Path, routes: Sequence[str] = PRERENDER_ROUTES, inject: bool = True) -> BuildSummary:
    summary = BuildSummary()
    if inject:
        for route in routes:
            if inject_route(dist_dir, route):
                summary.injected.append(route)
            else:
                summary.skipped.append(route)
    summary.sitemap_path = write_sitemap(dist_dir, routes)
    summary.sitemap_url_count = sum(1 for r in routes if is_indexed(r))
    return summary


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Inject route SEO tags and write sitemap.xml")
    parser.add_argument("--dist", default=settings.DIST_DIR, help="Build output directory")
    parser.add_argument("--skip-inject", action="store_true", help="Only write sitemap.xml")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL)
    args = parser.parse_args(argv)

    init_logging(args.log_level)
    summary = run_build(Path(args.dist), inject=not args.skip_inject)
    logger.info(
        "Build step done: %d pages injected, %d skipped",
        len(summary.injected), len(summary.skipped),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
