"""
Read models with embedded relations.

These extend the plain ``*Read`` schemas with optional relation
fields.  A relation field is only filled when the client asks for it
with ``?expand=<name>``; otherwise it stays ``None`` and is left out of
the response.
"""

from typing import List, Optional

from .event import EventRead
from .location import LocationRead
from .participant import ParticipantRead
from .user import UserRead


class UserDetail(UserRead):
    events: Optional[List[EventRead]] = None


class LocationDetail(LocationRead):
    events: Optional[List[EventRead]] = None


class EventDetail(EventRead):
    user: Optional[UserRead] = None
    location: Optional[LocationRead] = None
    participants: Optional[List[ParticipantRead]] = None


class ParticipantDetail(ParticipantRead):
    user: Optional[UserRead] = None
    event: Optional[EventRead] = None
