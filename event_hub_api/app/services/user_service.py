"""
Business logic for users.

Users own events through ``Event.user_id``.  Deleting a user does not
touch the events or participants that reference it; those references
become dangling and surface only when they are resolved.
"""

from typing import Any, Iterable, List, Optional

from event_hub_api.app.core.errors import EntityKind
from event_hub_api.app.schemas.common import DeleteAllResult
from event_hub_api.app.schemas.detail import UserDetail
from event_hub_api.app.schemas.user import UserCreate, UserRead, UserUpdate

from .entity_service import EntityService


class UserService(EntityService):
    """Service for managing users."""

    kind = EntityKind.USER
    read_schema = UserRead
    detail_schema = UserDetail

    @classmethod
    async def get_user(cls, user_id: Any, expand: Iterable[str] = ()) -> Optional[UserDetail]:
        return await cls.get_record(user_id, expand)

    @classmethod
    async def list_users(cls, expand: Iterable[str] = ()) -> List[UserDetail]:
        return await cls.list_records(expand)

    @classmethod
    async def create_user(cls, data: UserCreate) -> UserRead:
        return await cls.create_record(data)

    @classmethod
    async def update_user(cls, user_id: Any, data: UserUpdate) -> UserRead:
        return await cls.update_record(user_id, data)

    @classmethod
    async def delete_user(cls, user_id: Any) -> UserRead:
        return await cls.delete_record(user_id)

    @classmethod
    async def delete_all_users(cls) -> DeleteAllResult:
        return await cls.delete_all_records()

    @classmethod
    async def list_user_events(cls, user_id: Any) -> List[dict]:
        """Events whose ``user_id`` is this user, in stored order."""
        return await cls.get_related(user_id, "events")
