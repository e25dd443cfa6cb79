"""Participant endpoints for API v1."""

from typing import List

from fastapi import APIRouter, HTTPException, Query, status

from event_hub_api.app.schemas.common import DeleteAllResult
from event_hub_api.app.schemas.detail import ParticipantDetail
from event_hub_api.app.schemas.event import EventRead
from event_hub_api.app.schemas.participant import (
    ParticipantCreate,
    ParticipantRead,
    ParticipantUpdate,
)
from event_hub_api.app.schemas.user import UserRead
from event_hub_api.app.services.participant_service import ParticipantService


router = APIRouter()


@router.post("/", response_model=ParticipantRead, status_code=status.HTTP_201_CREATED)
async def create_participant(participant: ParticipantCreate) -> ParticipantRead:
    return await ParticipantService.create_participant(participant)


@router.get("/", response_model=List[ParticipantDetail], response_model_exclude_none=True)
async def list_participants(expand: List[str] = Query([])) -> List[ParticipantDetail]:
    return await ParticipantService.list_participants(expand)


@router.delete("/", response_model=DeleteAllResult)
async def delete_all_participants() -> DeleteAllResult:
    return await ParticipantService.delete_all_participants()


@router.get("/{participant_id}", response_model=ParticipantDetail, response_model_exclude_none=True)
async def get_participant(participant_id: int, expand: List[str] = Query([])) -> ParticipantDetail:
    participant = await ParticipantService.get_participant(participant_id, expand)
    if participant is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Participant {participant_id} not found",
        )
    return participant


@router.put("/{participant_id}", response_model=ParticipantRead)
async def update_participant(participant_id: int, updates: ParticipantUpdate) -> ParticipantRead:
    return await ParticipantService.update_participant(participant_id, updates)


@router.delete("/{participant_id}", response_model=ParticipantRead)
async def delete_participant(participant_id: int) -> ParticipantRead:
    return await ParticipantService.delete_participant(participant_id)


@router.get("/{participant_id}/user", response_model=UserRead)
async def get_participant_user(participant_id: int) -> UserRead:
    return await ParticipantService.get_participant_user(participant_id)


@router.get("/{participant_id}/event", response_model=EventRead)
async def get_participant_event(participant_id: int) -> EventRead:
    return await ParticipantService.get_participant_event(participant_id)
