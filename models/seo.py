from pydantic import BaseModel, ConfigDict
from typing import Literal, Optional

ChangeFreq = Literal["always", "hourly", "daily", "weekly", "monthly", "yearly", "never"]


class RouteSEO(BaseModel):
    """Static SEO metadata for one pre-rendered route."""
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    og_type: Optional[str] = None
    og_image: Optional[str] = None
    keywords: Optional[str] = None


class SitemapUrl(BaseModel):
    """One <url> entry of sitemap.xml."""
    model_config = ConfigDict(frozen=True)

    loc: str
    lastmod: str  # YYYY-MM-DD
    changefreq: ChangeFreq
    priority: str  # "1.0", "0.8", ...
