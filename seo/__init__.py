from .meta_tags import build_meta_tags, generate_meta_tags_html, replace_meta_tags_in_html
from .route_map import ROUTE_SEO_MAP, lookup_route, normalize_route
from .routes import PRERENDER_ROUTES
from .sitemap import EXCLUDED_ROUTES, build_sitemap_xml, sitemap_entries

__all__ = [
    "build_meta_tags",
    "generate_meta_tags_html",
    "replace_meta_tags_in_html",
    "ROUTE_SEO_MAP",
    "lookup_route",
    "normalize_route",
    "PRERENDER_ROUTES",
    "EXCLUDED_ROUTES",
    "build_sitemap_xml",
    "sitemap_entries",
]
