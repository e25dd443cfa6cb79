"""
Business logic for events.

An event belongs to exactly one user and one location and has any
number of participants.  The ``user_id`` and ``location_id`` written
with an event are stored as given; whether they point at existing
records is only checked when ``user`` or ``location`` is resolved, at
which point a missing target raises ``DanglingReferenceError``.
"""

from typing import Any, Iterable, List, Optional

from event_hub_api.app.core.errors import EntityKind
from event_hub_api.app.schemas.common import DeleteAllResult
from event_hub_api.app.schemas.detail import EventDetail
from event_hub_api.app.schemas.event import EventCreate, EventRead, EventUpdate

from .entity_service import EntityService


class EventService(EntityService):
    """Service for managing events and resolving their relations."""

    kind = EntityKind.EVENT
    read_schema = EventRead
    detail_schema = EventDetail

    @classmethod
    async def get_event(cls, event_id: Any, expand: Iterable[str] = ()) -> Optional[EventDetail]:
        """Retrieve a single event by ID, or ``None`` if it does not exist.

        ``expand`` names relations (``user``, ``location``,
        ``participants``) to embed in the result.
        """
        return await cls.get_record(event_id, expand)

    @classmethod
    async def list_events(cls, expand: Iterable[str] = ()) -> List[EventDetail]:
        return await cls.list_records(expand)

    @classmethod
    async def create_event(cls, data: EventCreate) -> EventRead:
        return await cls.create_record(data)

    @classmethod
    async def update_event(cls, event_id: Any, data: EventUpdate) -> EventRead:
        """Update fields of an existing event.

        Only fields provided (and not null) in ``data`` are changed.
        Raises ``EntityNotFoundError`` if the event does not exist.
        """
        return await cls.update_record(event_id, data)

    @classmethod
    async def delete_event(cls, event_id: Any) -> EventRead:
        """Delete an event and return it.

        Participants of the event are left in place.
        """
        return await cls.delete_record(event_id)

    @classmethod
    async def delete_all_events(cls) -> DeleteAllResult:
        return await cls.delete_all_records()

    @classmethod
    async def get_event_user(cls, event_id: Any) -> dict:
        return await cls.get_related(event_id, "user")

    @classmethod
    async def get_event_location(cls, event_id: Any) -> dict:
        return await cls.get_related(event_id, "location")

    @classmethod
    async def list_event_participants(cls, event_id: Any) -> List[dict]:
        return await cls.get_related(event_id, "participants")
