"""
Pydantic models for city data.

A city owns an ordered list of points of interest; the number of
points is derived and always included in the serialized output.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, computed_field

from .point_of_interest import PointOfInterestRead


class CityRead(BaseModel):
    """Schema for reading a city from the API."""

    id: int
    name: str = Field(..., examples=["New York City"])
    description: Optional[str] = Field(None, examples=["The one with that big park."])
    points_of_interest: List[PointOfInterestRead] = Field(default_factory=list)

    model_config = {
        "from_attributes": True,
    }

    @computed_field
    @property
    def number_of_points_of_interest(self) -> int:
        return len(self.points_of_interest)
