from database.converters import (
    course_to_payload,
    course_to_row,
    hole_from_row,
    hole_to_row,
    tee_from_rows,
    tee_holes_to_rows,
    tee_to_row,
)

__all__ = [
    "course_to_payload",
    "course_to_row",
    "hole_from_row",
    "hole_to_row",
    "tee_from_rows",
    "tee_holes_to_rows",
    "tee_to_row",
]
