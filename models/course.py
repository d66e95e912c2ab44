from pydantic import Field
from typing import List, Optional, Tuple

from .base import BaseGolfModel
from .tee import Tee

USER_ADDED_MARKER = "[User added course]"


def parse_course_name(full_name: str) -> Tuple[str, str]:
    """Split a stored "Club - Course" name into (club_name, course_name)."""
    if not full_name:
        return "Unknown Club", "Unknown Course"
    parts = full_name.split(" - ")
    if len(parts) > 1:
        return parts[0].strip(), " - ".join(parts[1:]).strip()
    return full_name.strip(), full_name.strip()


def format_course_name(club_name: str, course_name: str) -> str:
    """Inverse of parse_course_name, collapsing identical club/course names."""
    if not club_name and not course_name:
        return ""
    if not club_name:
        return course_name
    if not course_name or club_name == course_name:
        return club_name
    return f"{club_name} - {course_name}"


def is_user_added_course(course_name: Optional[str]) -> bool:
    return bool(course_name) and USER_ADDED_MARKER in course_name


class Course(BaseGolfModel):
    """A manually entered course and its tee boxes."""

    name: str = ""
    city: Optional[str] = None
    state: Optional[str] = None
    tees: List[Tee] = Field(min_length=1)

    @property
    def stored_name(self) -> str:
        """Name as saved for user-entered courses."""
        if is_user_added_course(self.name):
            return self.name
        return f"{self.name} {USER_ADDED_MARKER}"

    def get_tee(self, name: str) -> Optional[Tee]:
        """Get a tee by its name (case-insensitive)."""
        for tee in self.tees:
            if tee.name and tee.name.lower() == name.lower():
                return tee
        return None

    def add_tee(self, tee: Optional[Tee] = None) -> Tee:
        """Append a tee (a fresh default one when none is given) and return it."""
        if tee is None:
            from ratings.tees import create_default_tee
            tee = create_default_tee()
        self.tees = [*self.tees, tee]
        return tee

    def remove_tee(self, index: int) -> Tee:
        """Remove the tee at index. A course always keeps at least one tee."""
        if len(self.tees) <= 1:
            raise ValueError("A course must have at least one tee.")
        if not 0 <= index < len(self.tees):
            raise IndexError(f"No tee at index {index}")
        removed = self.tees[index]
        self.tees = [t for i, t in enumerate(self.tees) if i != index]
        return removed
