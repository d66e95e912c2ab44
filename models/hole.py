from pydantic import Field
from typing import Optional

from .base import BaseGolfModel


class Hole(BaseGolfModel):
    """One hole of a tee's card. Fields stay None until the user fills them in."""

    number: Optional[int] = Field(None, ge=1, le=18)
    par: Optional[int] = Field(None, ge=2, le=6)
    yards: Optional[int] = Field(None, ge=0)
    handicap: Optional[int] = Field(None, ge=1, le=18)  # stroke index
