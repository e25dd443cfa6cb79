"""
Event endpoints for API v1.

These routes provide CRUD operations for events and access to the
``user``, ``location`` and ``participants`` relations.  Relations are
resolved only when requested, either through the dedicated
sub-resources or with ``?expand=<relation>`` on ``GET``.  An event
whose ``user_id`` or ``location_id`` points at a missing record can be
stored and listed, but resolving that relation answers 409.
"""

from typing import List

from fastapi import APIRouter, HTTPException, Query, status

from event_hub_api.app.schemas.common import DeleteAllResult
from event_hub_api.app.schemas.detail import EventDetail
from event_hub_api.app.schemas.event import EventCreate, EventRead, EventUpdate
from event_hub_api.app.schemas.location import LocationRead
from event_hub_api.app.schemas.participant import ParticipantRead
from event_hub_api.app.schemas.user import UserRead
from event_hub_api.app.services.event_service import EventService


router = APIRouter()


@router.post("/", response_model=EventRead, status_code=status.HTTP_201_CREATED)
async def create_event(event: EventCreate) -> EventRead:
    """Create a new event.

    ``user_id`` and ``location_id`` are stored without checking that
    the referenced records exist.
    """
    return await EventService.create_event(event)


@router.get("/", response_model=List[EventDetail], response_model_exclude_none=True)
async def list_events(expand: List[str] = Query([])) -> List[EventDetail]:
    """List all events.

    - **expand**: relations to embed (`user`, `location`, `participants`).
      May be repeated.
    """
    return await EventService.list_events(expand)


@router.delete("/", response_model=DeleteAllResult)
async def delete_all_events() -> DeleteAllResult:
    return await EventService.delete_all_events()


@router.get("/{event_id}", response_model=EventDetail, response_model_exclude_none=True)
async def get_event(event_id: int, expand: List[str] = Query([])) -> EventDetail:
    """Retrieve a single event by its ID.

    Raises 404 if the event is not found.
    """
    event = await EventService.get_event(event_id, expand)
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Event {event_id} not found")
    return event


@router.put("/{event_id}", response_model=EventRead)
async def update_event(event_id: int, updates: EventUpdate) -> EventRead:
    """Update an existing event.

    Partial updates are supported; any unspecified fields remain
    unchanged.
    """
    return await EventService.update_event(event_id, updates)


@router.delete("/{event_id}", response_model=EventRead)
async def delete_event(event_id: int) -> EventRead:
    return await EventService.delete_event(event_id)


@router.get("/{event_id}/user", response_model=UserRead)
async def get_event_user(event_id: int) -> UserRead:
    return await EventService.get_event_user(event_id)


@router.get("/{event_id}/location", response_model=LocationRead)
async def get_event_location(event_id: int) -> LocationRead:
    return await EventService.get_event_location(event_id)


@router.get("/{event_id}/participants", response_model=List[ParticipantRead])
async def list_event_participants(event_id: int) -> List[ParticipantRead]:
    """List all participants registered for an event."""
    return await EventService.list_event_participants(event_id)
