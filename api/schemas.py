"""API-specific request and response models."""

from pydantic import BaseModel
from typing import Any, Dict, List, Optional

from models import RatingEstimate, Tee


class TeeSummaryResponse(RatingEstimate):
    """Estimate plus nine-hole totals for the tee summary panel."""
    front_nine_par: Optional[int] = None
    back_nine_par: Optional[int] = None
    front_nine_yards: Optional[int] = None
    back_nine_yards: Optional[int] = None


class UpdateHoleRequest(BaseModel):
    tee: Tee
    hole_index: int
    field: str
    value: Optional[str] = None


class UpdatedTeeResponse(BaseModel):
    tee: Tee
    summary: TeeSummaryResponse


class CreateCourseRequest(BaseModel):
    name: str
    city: Optional[str] = None
    state: Optional[str] = None
    tees: List[Tee] = []


class CoursePayloadResponse(BaseModel):
    """Rows handed to the persistence layer for a manual course."""
    course: Dict[str, Any]
    tees: List[Dict[str, Any]]
    holes: List[Dict[str, Any]]


class MetaTagsResponse(BaseModel):
    path: str
    tags: List[str]
    html: str


class RenderRequest(BaseModel):
    path: str
    html: str


class RenderResponse(BaseModel):
    path: str
    html: str
