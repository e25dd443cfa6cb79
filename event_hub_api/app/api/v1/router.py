"""
Top-level router for version 1 of the API.

This router aggregates the per-entity routers under a unified prefix.
"""

from fastapi import APIRouter

from .endpoints import events, locations, participants, users

# Create a router for version 1 and include sub-routers for each entity kind.
router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(locations.router, prefix="/locations", tags=["locations"])
router.include_router(events.router, prefix="/events", tags=["events"])
router.include_router(participants.router, prefix="/participants", tags=["participants"])
