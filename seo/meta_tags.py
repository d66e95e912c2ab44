"""Build-time <head> metadata injection for pre-rendered pages.

Pages are rewritten with regular expressions rather than a DOM round trip.
The serializer that produced the HTML may reorder attributes, so every
pattern matches its key attribute wherever it sits inside the tag.
"""

from __future__ import annotations

import re
from typing import Iterable, List

from settings import OG_IMAGE, SITE_URL
from seo.route_map import lookup_route

TWITTER_CARD = "summary_large_image"
DEFAULT_OG_TYPE = "website"
TAG_SEPARATOR = "\n    "

MANAGED_META_NAMES = (
    "description",
    "keywords",
    "twitter:card",
    "twitter:title",
    "twitter:description",
    "twitter:image",
    "twitter:image:alt",
)

MANAGED_META_PROPERTIES = (
    "og:title",
    "og:description",
    "og:url",
    "og:type",
    "og:image",
    "og:image:alt",
    "article:modified_time",
)

# A removed tag takes its line break and indentation with it
_LEADING_WS = r"(?:\r?\n[ \t]*)?"


def _attribute_pattern(tag: str, attribute: str, values: Iterable[str]) -> re.Pattern:
    alternatives = "|".join(re.escape(v) for v in values)
    return re.compile(
        rf"{_LEADING_WS}<{tag}\b[^>]*?\s{attribute}\s*=\s*[\"'](?:{alternatives})[\"'][^>]*>",
        re.IGNORECASE,
    )


_TITLE_RE = re.compile(rf"{_LEADING_WS}<title\b[^>]*>.*?</title\s*>", re.IGNORECASE | re.DOTALL)
_META_NAME_RE = _attribute_pattern("meta", "name", MANAGED_META_NAMES)
_META_PROPERTY_RE = _attribute_pattern("meta", "property", MANAGED_META_PROPERTIES)
_CANONICAL_RE = _attribute_pattern("link", "rel", ("canonical",))
_HEAD_OPEN_RE = re.compile(r"<head(?:\s[^>]*)?>", re.IGNORECASE)

MANAGED_TAG_PATTERNS = (_TITLE_RE, _META_NAME_RE, _META_PROPERTY_RE, _CANONICAL_RE)


def build_meta_tags(route_path: str) -> List[str]:
    """Tags for a route in their fixed order. Empty for unmapped routes.

    Entry text is emitted as-is; the route table holds pre-sanitized text.
    """
    path, seo = lookup_route(route_path)
    if seo is None:
        return []

    canonical_url = f"{SITE_URL}{path}"
    og_type = seo.og_type or DEFAULT_OG_TYPE
    og_image = seo.og_image or OG_IMAGE

    tags = [
        f"<title>{seo.title}</title>",
        f'<meta name="description" content="{seo.description}">',
        f'<link rel="canonical" href="{canonical_url}">',
        f'<meta property="og:title" content="{seo.title}">',
        f'<meta property="og:description" content="{seo.description}">',
        f'<meta property="og:url" content="{canonical_url}">',
        f'<meta property="og:type" content="{og_type}">',
        f'<meta property="og:image" content="{og_image}">',
        f'<meta property="og:image:alt" content="{seo.title}">',
        f'<meta name="twitter:card" content="{TWITTER_CARD}">',
        f'<meta name="twitter:title" content="{seo.title}">',
        f'<meta name="twitter:description" content="{seo.description}">',
        f'<meta name="twitter:image" content="{og_image}">',
        f'<meta name="twitter:image:alt" content="{seo.title}">',
    ]
    if seo.keywords:
        tags.append(f'<meta name="keywords" content="{seo.keywords}">')
    return tags


def generate_meta_tags_html(route_path: str) -> str:
    """The <head> tag block for a route, or "" when the route has no entry."""
    return TAG_SEPARATOR.join(build_meta_tags(route_path))


def strip_managed_tags(html: str) -> str:
    """Remove every <title>, meta and canonical tag this module generates."""
    for pattern in MANAGED_TAG_PATTERNS:
        html = pattern.sub("", html)
    return html


def replace_meta_tags_in_html(route_path: str, html: str) -> str:
    """Swap a page's SEO tags for the route's generated block.

    Unmapped routes return the page untouched. The block goes right after the
    opening <head> tag; a page without one just loses its old tags.
    """
    meta_tags = generate_meta_tags_html(route_path)
    if not meta_tags:
        return html

    cleaned = strip_managed_tags(html)
    return _HEAD_OPEN_RE.sub(lambda m: f"{m.group(0)}{TAG_SEPARATOR}{meta_tags}", cleaned, count=1)
