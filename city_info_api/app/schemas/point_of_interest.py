"""
Pydantic models for points of interest.

``PointOfInterestRead`` is the stored and returned representation.
``PointOfInterestCreate`` and ``PointOfInterestUpdate`` are request
bodies; both enforce a required, non-empty name of at most 50
characters and an optional description of at most 200 characters.
``PointOfInterestUpdate`` is also the target model a JSON Patch
document is applied to before the result is re-validated.
"""

from typing import Optional

from pydantic import BaseModel, Field


class PointOfInterestBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=50, examples=["Central Park"])
    description: Optional[str] = Field(
        None,
        max_length=200,
        examples=["The most visited urban park in the United States."],
    )


class PointOfInterestCreate(PointOfInterestBase):
    """Schema for creating a point of interest."""
    pass


class PointOfInterestUpdate(PointOfInterestBase):
    """Schema for replacing or patching a point of interest.

    A full replace: an omitted description is stored as ``None``.
    """
    pass


class PointOfInterestRead(BaseModel):
    """Schema for reading a point of interest from the API."""

    id: int
    name: str
    description: Optional[str] = None

    model_config = {
        "from_attributes": True,
    }
