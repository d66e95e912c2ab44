from typing import List

from fastapi import Request


def get_prerender_routes(request: Request) -> List[str]:
    """FastAPI dependency that provides the site's pre-rendered route list."""
    return request.app.state.prerender_routes
