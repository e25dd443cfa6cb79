"""
Pydantic models for locations.

A location is a named place with a short description and its
coordinates.  Events reference a location through ``location_id``.
"""

from typing import Optional

from pydantic import BaseModel, Field


class LocationBase(BaseModel):
    name: str = Field(..., examples=["Harbour Hall"])
    desc: str = Field(..., examples=["Conference hall on the waterfront"])
    lat: float = Field(..., examples=[41.0151])
    lng: float = Field(..., examples=[28.9795])


class LocationCreate(LocationBase):
    """Schema for creating a location."""
    pass


class LocationUpdate(BaseModel):
    """Schema for updating a location.

    All fields are optional; only provided fields will be updated.
    """
    name: Optional[str] = None
    desc: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None


class LocationRead(LocationBase):
    id: int
