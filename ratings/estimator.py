"""Approximate course rating / slope estimation for a tee box.

The figures are linear heuristics over total yardage and par, shown to the
user as approximate values. They are not a World Handicap System rating.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional

from models.rating import RatingEstimate
from models.tee import Tee

DEFAULT_RATING = 72.0
DEFAULT_SLOPE = 113
DEFAULT_PAR = 72

RATING_PER_100_YARDS = 0.56
RATING_PER_PAR_STROKE = 0.24
BASELINE_YARDS = 6000
BASELINE_SLOPE = 113
SLOPE_PER_YARD = 0.05

DEFAULT_ESTIMATE = RatingEstimate(rating=DEFAULT_RATING, slope=DEFAULT_SLOPE, par=DEFAULT_PAR, yards=0)


def _as_number(value: Any):
    """Numbers pass through; None, bools, NaN and anything else count as 0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if isinstance(value, float) and math.isnan(value):
        return 0
    return value


def round_rating(value: float) -> float:
    """Round to one decimal, ties away from zero."""
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def round_slope(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    return math.floor(value + 0.5)


def calculate_rating(total_yards: float, total_par: float) -> float:
    return round_rating((total_yards / 100) * RATING_PER_100_YARDS + total_par * RATING_PER_PAR_STROKE)


def calculate_slope(total_yards: float) -> int:
    return round_slope(BASELINE_SLOPE + (total_yards - BASELINE_YARDS) * SLOPE_PER_YARD)


def is_default_rating(tee: Tee) -> bool:
    """True when rating/slope are missing, zero, or still at the 72.0/113 template values.

    A user who deliberately enters 72.0/113 is indistinguishable from one who
    never touched the fields; both get auto-calculated values.
    """
    return (
        not tee.rating
        or not tee.slope
        or (tee.rating == DEFAULT_RATING and tee.slope == DEFAULT_SLOPE)
    )


def estimate_ratings(tee: Optional[Tee]) -> RatingEstimate:
    """Estimate rating, slope, par and yardage for a tee.

    Never raises: a missing tee, missing holes or a missing hole entry yields
    DEFAULT_ESTIMATE. Par and yardage are always summed from the holes, even
    when the tee carries manual ratings.
    """
    if tee is None or tee.holes is None or not all(tee.holes):
        return DEFAULT_ESTIMATE

    total_yards = sum(_as_number(hole.yards) for hole in tee.holes)
    total_par = sum(_as_number(hole.par) for hole in tee.holes)

    if tee.use_manual_ratings and tee.rating is not None and tee.slope is not None:
        return RatingEstimate(rating=tee.rating, slope=tee.slope, par=total_par, yards=total_yards)

    if is_default_rating(tee):
        return RatingEstimate(
            rating=calculate_rating(total_yards, total_par),
            slope=calculate_slope(total_yards),
            par=total_par,
            yards=total_yards,
        )

    return RatingEstimate(
        rating=tee.rating if tee.rating is not None else DEFAULT_RATING,
        slope=tee.slope if tee.slope is not None else DEFAULT_SLOPE,
        par=total_par,
        yards=total_yards,
    )
