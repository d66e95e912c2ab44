"""Tee helpers for the manual course form.

Edits return a new Tee rather than mutating the one passed in, so a
snapshot handed to estimate_ratings never changes underneath it.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from models.hole import Hole
from models.tee import HOLES_PER_TEE, Tee, new_tee_id
from ratings.estimator import DEFAULT_RATING, DEFAULT_SLOPE, round_slope

logger = logging.getLogger(__name__)

HOLE_FIELDS = ("par", "yards", "handicap")

_INT_PREFIX_RE = re.compile(r"\s*([+-]?\d+)")

# Fill-in values for stored tees that are missing hole data
STORED_HOLE_PAR = 4
STORED_HOLE_YARDS = 400


@dataclass(frozen=True)
class TeeOption:
    name: str
    color: str
    gender: str


TEE_OPTIONS: List[TeeOption] = [
    TeeOption("Black", "#000000", "male"),
    TeeOption("Blue", "#0000FF", "male"),
    TeeOption("White", "#FFFFFF", "male"),
    TeeOption("Yellow", "#FFFF00", "male"),
    TeeOption("Red", "#FF0000", "female"),
    TeeOption("Green", "#008000", "female"),
    TeeOption("Gold", "#FFD700", "male"),
    TeeOption("Silver", "#C0C0C0", "female"),
]


def get_tee_option(name: str) -> Optional[TeeOption]:
    for option in TEE_OPTIONS:
        if option.name == name:
            return option
    return None


def create_default_tee() -> Tee:
    """A new "White" tee with 18 empty holes and template ratings."""
    return Tee(
        id=new_tee_id(),
        name="White",
        color="#FFFFFF",
        gender="male",
        rating=DEFAULT_RATING,
        slope=DEFAULT_SLOPE,
        par=72,
        holes=[Hole(number=i + 1) for i in range(HOLES_PER_TEE)],
    )


def apply_tee_option(tee: Tee, option_name: str) -> Tee:
    """Copy of tee with name, color and gender taken from a preset. Unknown presets are ignored."""
    option = get_tee_option(option_name)
    if option is None:
        return tee
    return tee.model_copy(update={"name": option.name, "color": option.color, "gender": option.gender})


class HoleInputError(ValueError):
    """A hole value entered on the form is outside its allowed range."""


def _parse_int_prefix(raw_value: Union[str, int]) -> Optional[int]:
    """Leading integer of form input ("12abc" -> 12, "4.5" -> 4), else None."""
    if isinstance(raw_value, int) and not isinstance(raw_value, bool):
        return raw_value
    match = _INT_PREFIX_RE.match(str(raw_value))
    return int(match.group(1)) if match else None


def update_hole(tee: Tee, hole_index: int, field: str, raw_value: Union[str, int, None]) -> Tee:
    """Copy of tee with one hole field set from raw form input.

    Empty input falls back to par 4, 0 yards, or the hole number as stroke
    index. Input is read up to its first non-digit; input with no leading
    integer leaves the tee unchanged. Out-of-range values raise HoleInputError.
    """
    if field not in HOLE_FIELDS:
        raise ValueError(f"Unknown hole field '{field}'")
    if tee.holes is None:
        raise ValueError("Tee has no holes to update")
    if not 0 <= hole_index < len(tee.holes):
        raise IndexError(f"No hole at index {hole_index}")

    if raw_value is None or (isinstance(raw_value, str) and raw_value.strip() == ""):
        value = {"par": 4, "yards": 0, "handicap": hole_index + 1}[field]
    else:
        value = _parse_int_prefix(raw_value)
        if value is None:
            return tee

    current = tee.holes[hole_index]
    hole = current.model_copy() if current is not None else Hole(number=hole_index + 1)
    error = hole.update_field(field, value)
    if error:
        raise HoleInputError(f"Hole {hole_index + 1} {field}: {error}")

    holes = list(tee.holes)
    holes[hole_index] = hole
    updated = tee.model_copy()
    updated.holes = holes
    return updated


def _truthy_number(value: Any) -> Optional[float]:
    """Numeric value of a non-zero number or numeric string, else None."""
    if isinstance(value, bool) or value is None or value == "":
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or number == 0:
        return None
    return number


def _normalize_hole(raw: Any, index: int) -> Hole:
    raw = raw if isinstance(raw, Mapping) else {}
    return Hole(
        number=raw.get("number") or index + 1,
        par=raw.get("par") or STORED_HOLE_PAR,
        yards=raw.get("yards") or STORED_HOLE_YARDS,
        handicap=raw.get("handicap") or index + 1,
    )


def normalize_tee(data: Union[Tee, Mapping[str, Any], None]) -> Optional[Tee]:
    """Build a complete tee from loosely shaped stored data.

    Fills a missing id, name, rating, slope and par, and pads or trims the
    hole list to 18 holes with stored defaults. Out-of-range hole values
    still fail validation.
    """
    if data is None:
        return None
    raw: Dict[str, Any] = data.model_dump() if isinstance(data, Tee) else dict(data)

    tee_id = raw.get("id")
    if not isinstance(tee_id, str) or not tee_id.strip():
        tee_id = new_tee_id()
        logger.debug("Generated new id for tee %s: %s", raw.get("name") or "unnamed", tee_id)

    name = raw.get("name")
    if not isinstance(name, str) or not name.strip():
        name = "Standard"

    rating = _truthy_number(raw.get("rating"))
    slope = _truthy_number(raw.get("slope"))

    raw_holes = raw.get("holes")
    if not isinstance(raw_holes, list):
        raw_holes = []
    holes = [_normalize_hole(raw_holes[i] if i < len(raw_holes) else None, i) for i in range(HOLES_PER_TEE)]

    par = _truthy_number(raw.get("par"))
    if par is None or par <= 0:
        par = sum(h.par for h in holes)
        logger.debug("Calculated par for tee %s: %s", name, par)

    gender = raw.get("gender") if raw.get("gender") in ("male", "female") else None

    tee = Tee(
        id=tee_id,
        name=name,
        color=raw.get("color"),
        gender=gender,
        holes=holes,
        rating=rating if rating is not None else DEFAULT_RATING,
        slope=round_slope(slope) if slope is not None else DEFAULT_SLOPE,
        par=int(par),
        yards=raw.get("yards"),
        use_manual_ratings=bool(raw.get("use_manual_ratings", False)),
    )
    logger.debug(
        "Normalized tee %s: id=%s par=%s rating=%s slope=%s",
        tee.name, tee.id, tee.par, tee.rating, tee.slope,
    )
    return tee
