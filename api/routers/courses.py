"""Course form API endpoints: tee defaults, hole edits and rating estimates."""

from typing import List

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from api.schemas import (
    CoursePayloadResponse,
    CreateCourseRequest,
    TeeSummaryResponse,
    UpdatedTeeResponse,
    UpdateHoleRequest,
)
from database.converters import course_to_payload
from models import Course, Tee
from ratings import (
    TEE_OPTIONS,
    HoleInputError,
    TeeOption,
    create_default_tee,
    estimate_ratings,
    normalize_tee,
    update_hole,
)

router = APIRouter()


def summarize_tee(tee: Tee) -> TeeSummaryResponse:
    estimate = estimate_ratings(tee)
    return TeeSummaryResponse(
        **estimate.model_dump(),
        front_nine_par=tee.front_nine_par,
        back_nine_par=tee.back_nine_par,
        front_nine_yards=tee.front_nine_yards,
        back_nine_yards=tee.back_nine_yards,
    )


def _first_error(e: ValidationError) -> str:
    return e.errors()[0]["msg"]


@router.get("/tees/default", response_model=Tee)
async def default_tee():
    return create_default_tee()


@router.get("/tees/options", response_model=List[TeeOption])
async def tee_options():
    return TEE_OPTIONS


@router.post("/tees/estimate", response_model=TeeSummaryResponse)
async def estimate_tee(tee: Tee):
    return summarize_tee(tee)


@router.post("/tees/update-hole", response_model=UpdatedTeeResponse)
async def update_tee_hole(req: UpdateHoleRequest):
    """Apply one hole input change and return the new tee with its summary."""
    try:
        tee = update_hole(req.tee, req.hole_index, req.field, req.value)
    except HoleInputError as e:
        raise HTTPException(422, str(e))
    except ValidationError as e:
        raise HTTPException(422, _first_error(e))
    except (ValueError, IndexError) as e:
        raise HTTPException(400, str(e))
    return UpdatedTeeResponse(tee=tee, summary=summarize_tee(tee))


@router.post("/tees/normalize", response_model=Tee)
async def normalize_stored_tee(data: dict):
    try:
        return normalize_tee(data)
    except ValidationError as e:
        raise HTTPException(422, _first_error(e))


@router.post("/payload", response_model=CoursePayloadResponse)
async def course_payload(req: CreateCourseRequest):
    """Build the rows the save operation writes for a manual course."""
    if not req.name.strip():
        raise HTTPException(422, "Please enter a course name.")
    try:
        course = Course(name=req.name.strip(), city=req.city, state=req.state, tees=req.tees)
    except ValidationError as e:
        raise HTTPException(422, _first_error(e))
    return CoursePayloadResponse(**course_to_payload(course))
