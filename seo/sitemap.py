"""sitemap.xml rendering for the pre-rendered routes."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Iterable, List, Optional
from xml.sax.saxutils import escape

from models.seo import SitemapUrl
from settings import SITE_URL

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"

# Never indexed
EXCLUDED_ROUTES = frozenset({"/demo"})

# Educational / stat-focused posts rank above the rest of the blog
HIGH_VALUE_BLOGS = frozenset({
    "/blog/how-to-calculate-golf-handicap",
    "/blog/golf-stats-to-track",
    "/blog/understanding-golf-handicap-system",
    "/blog/putts-per-round",
    "/blog/golf-score-tracking-tips",
})

DEFAULT_PRIORITY = "0.4"
DEFAULT_CHANGEFREQ = "monthly"


def get_priority(route: str) -> str:
    """Priority for a route. Rules are checked in order; the first match wins."""
    if route == "/":
        return "1.0"
    if route == "/guides":
        return "0.7"
    if route.startswith("/guides/") or route.startswith("/compare/"):
        return "0.8"
    if route in HIGH_VALUE_BLOGS:
        return "0.7"
    if route.startswith("/blog/") or route == "/blog":
        return "0.6"
    if route in ("/about", "/faq", "/courses"):
        return "0.4"
    if route == "/privacy":
        return "0.3"
    return DEFAULT_PRIORITY


def get_changefreq(route: str) -> str:
    if route in ("/", "/guides", "/blog"):
        return "weekly"
    if route == "/courses":
        return "daily"
    if route.startswith(("/blog/", "/guides/", "/compare/")):
        return "monthly"
    return DEFAULT_CHANGEFREQ


def route_loc(route: str) -> str:
    return f"{SITE_URL}/" if route == "/" else f"{SITE_URL}{route}"


def is_indexed(route: str) -> bool:
    return route not in EXCLUDED_ROUTES


def sitemap_entries(routes: Iterable[str], today: Optional[date] = None) -> List[SitemapUrl]:
    """One entry per indexed route, all sharing the same lastmod date."""
    lastmod = (today or datetime.now(timezone.utc).date()).isoformat()
    return [
        SitemapUrl(
            loc=route_loc(route),
            lastmod=lastmod,
            changefreq=get_changefreq(route),
            priority=get_priority(route),
        )
        for route in routes
        if is_indexed(route)
    ]


def _url_block(entry: SitemapUrl) -> str:
    return (
        "  <url>\n"
        f"    <loc>{escape(entry.loc)}</loc>\n"
        f"    <lastmod>{entry.lastmod}</lastmod>\n"
        f"    <changefreq>{entry.changefreq}</changefreq>\n"
        f"    <priority>{entry.priority}</priority>\n"
        "  </url>"
    )


def build_sitemap_xml(routes: Iterable[str], today: Optional[date] = None) -> str:
    """Render a sitemaps.org urlset document for the given routes."""
    urls = "\n".join(_url_block(entry) for entry in sitemap_entries(routes, today))
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<urlset xmlns="{SITEMAP_NAMESPACE}">\n'
        f"{urls}\n"
        "</urlset>\n"
    )
