"""Business logic for locations."""

from typing import Any, Iterable, List, Optional

from event_hub_api.app.core.errors import EntityKind
from event_hub_api.app.schemas.common import DeleteAllResult
from event_hub_api.app.schemas.detail import LocationDetail
from event_hub_api.app.schemas.location import LocationCreate, LocationRead, LocationUpdate

from .entity_service import EntityService


class LocationService(EntityService):
    kind = EntityKind.LOCATION
    read_schema = LocationRead
    detail_schema = LocationDetail

    @classmethod
    async def get_location(cls, location_id: Any, expand: Iterable[str] = ()) -> Optional[LocationDetail]:
        return await cls.get_record(location_id, expand)

    @classmethod
    async def list_locations(cls, expand: Iterable[str] = ()) -> List[LocationDetail]:
        return await cls.list_records(expand)

    @classmethod
    async def create_location(cls, data: LocationCreate) -> LocationRead:
        return await cls.create_record(data)

    @classmethod
    async def update_location(cls, location_id: Any, data: LocationUpdate) -> LocationRead:
        return await cls.update_record(location_id, data)

    @classmethod
    async def delete_location(cls, location_id: Any) -> LocationRead:
        return await cls.delete_record(location_id)

    @classmethod
    async def delete_all_locations(cls) -> DeleteAllResult:
        return await cls.delete_all_records()

    @classmethod
    async def list_location_events(cls, location_id: Any) -> List[dict]:
        return await cls.get_related(location_id, "events")
