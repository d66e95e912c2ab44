"""Application settings and environment helpers."""

from __future__ import annotations

import os
from typing import Iterable, List

from dotenv import load_dotenv

load_dotenv(override=False)


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


# Site --------------------------------------------------------------------
SITE_URL = os.getenv("SITE_URL", "https://mybirdieboard.com").rstrip("/")
OG_IMAGE = os.getenv("OG_IMAGE") or f"{SITE_URL}/og-image.png"

# Static build output (pre-rendered pages + sitemap.xml)
DIST_DIR = os.getenv("DIST_DIR", "dist")


# API ---------------------------------------------------------------------
_local_dev_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:8080",
]

ALLOWED_CORS_ORIGINS = _unique(
    [
        *_split_csv(os.getenv("FRONTEND_ORIGIN")),
        *_local_dev_origins,
    ]
)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
