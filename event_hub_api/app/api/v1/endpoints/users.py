"""
User endpoints for API v1.

Plain CRUD over the users collection plus the ``events`` relation.
``GET`` requests accept ``?expand=events`` to embed the user's events.
"""

from typing import List

from fastapi import APIRouter, HTTPException, Query, status

from event_hub_api.app.schemas.common import DeleteAllResult
from event_hub_api.app.schemas.detail import UserDetail
from event_hub_api.app.schemas.event import EventRead
from event_hub_api.app.schemas.user import UserCreate, UserRead, UserUpdate
from event_hub_api.app.services.user_service import UserService


router = APIRouter()


@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(user: UserCreate) -> UserRead:
    """Create a new user."""
    return await UserService.create_user(user)


@router.get("/", response_model=List[UserDetail], response_model_exclude_none=True)
async def list_users(expand: List[str] = Query([])) -> List[UserDetail]:
    """List all users in insertion order."""
    return await UserService.list_users(expand)


@router.delete("/", response_model=DeleteAllResult)
async def delete_all_users() -> DeleteAllResult:
    """Remove every user and return how many were removed."""
    return await UserService.delete_all_users()


@router.get("/{user_id}", response_model=UserDetail, response_model_exclude_none=True)
async def get_user(user_id: int, expand: List[str] = Query([])) -> UserDetail:
    user = await UserService.get_user(user_id, expand)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"User {user_id} not found")
    return user


@router.put("/{user_id}", response_model=UserRead)
async def update_user(user_id: int, updates: UserUpdate) -> UserRead:
    """Update an existing user.

    Partial updates are supported; any unspecified fields remain
    unchanged.
    """
    return await UserService.update_user(user_id, updates)


@router.delete("/{user_id}", response_model=UserRead)
async def delete_user(user_id: int) -> UserRead:
    """Delete a user and return the removed record.

    Events and participants referencing the user are kept.
    """
    return await UserService.delete_user(user_id)


@router.get("/{user_id}/events", response_model=List[EventRead])
async def list_user_events(user_id: int) -> List[EventRead]:
    return await UserService.list_user_events(user_id)
