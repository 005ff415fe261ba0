from __future__ import annotations

from typing import Annotated, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field, Strict, field_validator


class LegoSet(BaseModel):
    """LEGO set catalog record."""
    number: str = Field(..., description="Set number, e.g. '3836'")
    name: str = Field(..., description="Set name")
    theme: Optional[str] = Field(None, description="Theme; required by theme queries")
    subtheme: Optional[str] = Field(None)
    year: Optional[int] = Field(None, description="Release year")
    pieces: Annotated[int, Strict()] = Field(..., description="Number of pieces")
    minifigs: Optional[int] = Field(None, description="Number of minifigures")
    tags: Optional[FrozenSet[str]] = Field(None, description="Free-form tags")

    # JSON numbers are read as text for string fields, e.g. "number": 3836
    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    @field_validator("pieces", mode="before")
    @classmethod
    def _parse_pieces(cls, v):
        """
        Accept integer strings such as "50"; booleans and fractions are rejected.
        """
        if isinstance(v, str) and v.strip().lstrip("-").isdigit():
            return int(v)
        return v
