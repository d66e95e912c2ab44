"""Conversion between persisted row dicts and Pydantic domain models.

Rows follow the tee / tee-hole shape the persistence layer stores: one tee
row carrying the estimate, plus 18 hole rows keyed by the tee id.
"""

from typing import Dict, List, Optional

from models import Course, Hole, RatingEstimate, Tee
from ratings.estimator import estimate_ratings


# ================================================================
# Row -> Model (reads)
# ================================================================

def hole_from_row(row) -> Hole:
    """tee hole row -> Hole model."""
    return Hole(
        number=row["hole_number"],
        par=row["par"],
        yards=row["yards"],
        handicap=row["handicap"],
    )


def tee_from_rows(tee_row, hole_rows: list) -> Tee:
    """tee row + its hole rows -> Tee model. Holes are ordered by hole_number."""
    holes = sorted(
        [hole_from_row(r) for r in hole_rows],
        key=lambda h: h.number or 0,
    )
    return Tee(
        id=str(tee_row["id"]),
        name=tee_row["name"],
        color=tee_row["color"],
        gender=tee_row["gender"],
        rating=float(tee_row["rating"]) if tee_row["rating"] is not None else None,
        slope=tee_row["slope"],
        par=tee_row["par"],
        yards=tee_row["yards"],
        holes=holes or None,
    )


# ================================================================
# Model -> Row dict (writes)
# ================================================================

def course_to_row(course: Course) -> dict:
    """Course -> dict for the course INSERT."""
    return {
        "name": course.stored_name,
        "city": course.city,
        "state": course.state,
    }


def tee_to_row(tee: Tee, estimate: Optional[RatingEstimate] = None) -> dict:
    """Tee + its estimate -> dict for the tee INSERT. Estimates when none is given."""
    estimate = estimate or estimate_ratings(tee)
    return {
        "id": tee.id,
        "name": tee.name,
        "color": tee.color,
        "gender": tee.gender,
        "rating": estimate.rating,
        "slope": estimate.slope,
        "par": estimate.par,
        "yards": estimate.yards,
    }


def hole_to_row(hole: Hole, tee_id: str) -> dict:
    """Hole -> dict for the tee hole INSERT."""
    return {
        "tee_id": tee_id,
        "hole_number": hole.number,
        "par": hole.par,
        "yards": hole.yards,
        "handicap": hole.handicap,
    }


def tee_holes_to_rows(tee: Tee) -> List[dict]:
    """All recorded holes of a tee -> row dicts (missing entries are skipped)."""
    return [hole_to_row(h, tee.id) for h in (tee.holes or []) if h is not None]


def course_to_payload(course: Course) -> Dict[str, object]:
    """Everything the save operation writes for a manual course, in one dict."""
    return {
        "course": course_to_row(course),
        "tees": [tee_to_row(t) for t in course.tees],
        "holes": [row for t in course.tees for row in tee_holes_to_rows(t)],
    }
