"""
Pydantic models for event data.

Events carry ``from`` and ``to`` time fields.  Because ``from`` is a
Python keyword the attribute is called ``from_`` and mapped to the
JSON name through an alias; ``populate_by_name`` allows either name on
input, and responses are serialised by alias.

Dates and times are kept as the strings supplied by the client.  The
foreign keys ``location_id`` and ``user_id`` are not checked against
the other collections when an event is written.
"""

from typing import Optional

from pydantic import BaseModel, Field


class EventBase(BaseModel):
    title: str = Field(..., examples=["Python Meetup"])
    desc: str = Field(..., examples=["Monthly community meetup with two talks"])
    date: str = Field(..., examples=["2026-11-05"])
    from_: str = Field(..., alias="from", examples=["18:30"])
    to: str = Field(..., examples=["21:00"])
    location_id: int = Field(..., examples=[1])
    user_id: int = Field(..., examples=[1])

    model_config = {
        "populate_by_name": True,
    }


class EventCreate(EventBase):
    """Schema for creating an event."""
    pass


class EventUpdate(BaseModel):
    """Schema for updating an event.

    All fields are optional; only provided fields will be updated.
    """
    title: Optional[str] = None
    desc: Optional[str] = None
    date: Optional[str] = None
    from_: Optional[str] = Field(None, alias="from")
    to: Optional[str] = None
    location_id: Optional[int] = None
    user_id: Optional[int] = None

    model_config = {
        "populate_by_name": True,
    }


class EventRead(EventBase):
    """Schema for reading an event from the API."""

    id: int
