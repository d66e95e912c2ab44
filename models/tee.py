import random
import string
import time
from pydantic import Field, field_validator
from typing import List, Literal, Optional

from .base import BaseGolfModel
from .hole import Hole

HOLES_PER_TEE = 18

_ID_ALPHABET = string.ascii_lowercase + string.digits


def new_tee_id() -> str:
    """Client-side tee id: millisecond timestamp plus a random base-36 suffix."""
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"tee-{int(time.time() * 1000)}-{suffix}"


class Tee(BaseGolfModel):
    """A tee box: its 18 holes plus rating, slope, par and yardage."""

    id: Optional[str] = None
    name: Optional[str] = None
    color: Optional[str] = None  # hex, e.g. "#FFFFFF"
    gender: Optional[Literal["male", "female"]] = None
    holes: Optional[List[Optional[Hole]]] = None
    rating: Optional[float] = None
    slope: Optional[int] = None
    par: Optional[int] = None
    yards: Optional[int] = None
    use_manual_ratings: bool = False

    @field_validator('holes')
    @classmethod
    def validate_holes(cls, v):
        if v is None:
            return v
        if len(v) != HOLES_PER_TEE:
            raise ValueError(f"A tee must have {HOLES_PER_TEE} holes, got {len(v)}")
        numbers = [h.number for h in v if h is not None and h.number is not None]
        if len(numbers) != len(set(numbers)):
            raise ValueError("Hole numbers must be unique within a tee")
        return v

    def get_hole(self, number: int) -> Optional[Hole]:
        """Get a hole by its number (1-18)."""
        if self.holes and 1 <= number <= len(self.holes):
            return self.holes[number - 1]
        return None

    @property
    def front_nine(self) -> List[Optional[Hole]]:
        return list(self.holes[:9]) if self.holes else []

    @property
    def back_nine(self) -> List[Optional[Hole]]:
        return list(self.holes[9:]) if self.holes else []

    @staticmethod
    def _nine_total(holes: List[Optional[Hole]], attr: str) -> Optional[int]:
        # None when any hole of the nine is missing the value
        if not holes or any(h is None or getattr(h, attr) is None for h in holes):
            return None
        return sum(getattr(h, attr) for h in holes)

    @property
    def front_nine_par(self) -> Optional[int]:
        return self._nine_total(self.front_nine, "par")

    @property
    def back_nine_par(self) -> Optional[int]:
        return self._nine_total(self.back_nine, "par")

    @property
    def front_nine_yards(self) -> Optional[int]:
        return self._nine_total(self.front_nine, "yards")

    @property
    def back_nine_yards(self) -> Optional[int]:
        return self._nine_total(self.back_nine, "yards")
