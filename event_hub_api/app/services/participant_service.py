"""
Business logic for participants.

A participant record links a user to an event.  Creating one does not
verify that either exists.
"""

from typing import Any, Iterable, List, Optional

from event_hub_api.app.core.errors import EntityKind
from event_hub_api.app.schemas.common import DeleteAllResult
from event_hub_api.app.schemas.detail import ParticipantDetail
from event_hub_api.app.schemas.participant import (
    ParticipantCreate,
    ParticipantRead,
    ParticipantUpdate,
)

from .entity_service import EntityService


class ParticipantService(EntityService):
    kind = EntityKind.PARTICIPANT
    read_schema = ParticipantRead
    detail_schema = ParticipantDetail

    @classmethod
    async def get_participant(cls, participant_id: Any, expand: Iterable[str] = ()) -> Optional[ParticipantDetail]:
        return await cls.get_record(participant_id, expand)

    @classmethod
    async def list_participants(cls, expand: Iterable[str] = ()) -> List[ParticipantDetail]:
        return await cls.list_records(expand)

    @classmethod
    async def create_participant(cls, data: ParticipantCreate) -> ParticipantRead:
        return await cls.create_record(data)

    @classmethod
    async def update_participant(cls, participant_id: Any, data: ParticipantUpdate) -> ParticipantRead:
        return await cls.update_record(participant_id, data)

    @classmethod
    async def delete_participant(cls, participant_id: Any) -> ParticipantRead:
        return await cls.delete_record(participant_id)

    @classmethod
    async def delete_all_participants(cls) -> DeleteAllResult:
        return await cls.delete_all_records()

    @classmethod
    async def get_participant_user(cls, participant_id: Any) -> dict:
        return await cls.get_related(participant_id, "user")

    @classmethod
    async def get_participant_event(cls, participant_id: Any) -> dict:
        return await cls.get_related(participant_id, "event")
