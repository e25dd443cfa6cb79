"""Location endpoints for API v1."""

from typing import List

from fastapi import APIRouter, HTTPException, Query, status

from event_hub_api.app.schemas.common import DeleteAllResult
from event_hub_api.app.schemas.detail import LocationDetail
from event_hub_api.app.schemas.event import EventRead
from event_hub_api.app.schemas.location import LocationCreate, LocationRead, LocationUpdate
from event_hub_api.app.services.location_service import LocationService


router = APIRouter()


@router.post("/", response_model=LocationRead, status_code=status.HTTP_201_CREATED)
async def create_location(location: LocationCreate) -> LocationRead:
    return await LocationService.create_location(location)


@router.get("/", response_model=List[LocationDetail], response_model_exclude_none=True)
async def list_locations(expand: List[str] = Query([])) -> List[LocationDetail]:
    return await LocationService.list_locations(expand)


@router.delete("/", response_model=DeleteAllResult)
async def delete_all_locations() -> DeleteAllResult:
    return await LocationService.delete_all_locations()


@router.get("/{location_id}", response_model=LocationDetail, response_model_exclude_none=True)
async def get_location(location_id: int, expand: List[str] = Query([])) -> LocationDetail:
    location = await LocationService.get_location(location_id, expand)
    if location is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Location {location_id} not found")
    return location


@router.put("/{location_id}", response_model=LocationRead)
async def update_location(location_id: int, updates: LocationUpdate) -> LocationRead:
    return await LocationService.update_location(location_id, updates)


@router.delete("/{location_id}", response_model=LocationRead)
async def delete_location(location_id: int) -> LocationRead:
    return await LocationService.delete_location(location_id)


@router.get("/{location_id}/events", response_model=List[EventRead])
async def list_location_events(location_id: int) -> List[EventRead]:
    """Events hosted at the location."""
    return await LocationService.list_location_events(location_id)
