"""
Pydantic models for event participants.

A participant links a user to an event.  Both references are plain
identifiers and are only resolved when a client asks for them.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ParticipantBase(BaseModel):
    user_id: int = Field(..., examples=[2])
    event_id: int = Field(..., examples=[1])


class ParticipantCreate(ParticipantBase):
    """Schema for creating a participant."""
    pass


class ParticipantUpdate(BaseModel):
    user_id: Optional[int] = None
    event_id: Optional[int] = None


class ParticipantRead(ParticipantBase):
    id: int
