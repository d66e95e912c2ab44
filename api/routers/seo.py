"""SEO metadata and sitemap endpoints."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from api.dependencies import get_prerender_routes
from api.schemas import MetaTagsResponse, RenderRequest, RenderResponse
from seo.meta_tags import TAG_SEPARATOR, build_meta_tags, replace_meta_tags_in_html
from seo.route_map import normalize_route
from seo.sitemap import build_sitemap_xml

router = APIRouter()
sitemap_router = APIRouter()


@router.get("/meta", response_model=MetaTagsResponse)
async def get_meta_tags(path: str = Query(..., min_length=1)):
    tags = build_meta_tags(path)
    if not tags:
        raise HTTPException(404, "No SEO entry for route")
    return MetaTagsResponse(path=normalize_route(path), tags=tags, html=TAG_SEPARATOR.join(tags))


@router.post("/render", response_model=RenderResponse)
async def render_page(req: RenderRequest):
    """Replace the SEO tags of a rendered page. Unmapped routes come back unchanged."""
    return RenderResponse(path=req.path, html=replace_meta_tags_in_html(req.path, req.html))


@sitemap_router.get("/sitemap.xml")
async def sitemap(routes: List[str] = Depends(get_prerender_routes)):
    return Response(content=build_sitemap_xml(routes), media_type="application/xml")
