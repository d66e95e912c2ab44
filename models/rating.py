from pydantic import BaseModel, ConfigDict


class RatingEstimate(BaseModel):
    """Course rating, slope, par and yardage derived from a tee's holes.

    Always recomputed as a whole; never persisted on its own.
    """
    model_config = ConfigDict(frozen=True)

    rating: float
    slope: int
    par: int
    yards: int
