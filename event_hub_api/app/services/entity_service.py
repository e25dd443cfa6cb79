"""
Generic service operations shared by every entity kind.

``EntityService`` implements lookup, listing, the four mutations and
relation access once, parametrised by the ``kind`` class attribute.
Concrete services (``UserService``, ``EventService`` ...) only bind
the kind and the schemas and add operation names used by the API
handlers.

The coroutines never await anything that suspends, so each operation
runs to completion before the event loop admits the next request.
"""

import logging
from typing import Any, ClassVar, Iterable, List, Optional, Type

from pydantic import BaseModel

from event_hub_api.app.core.errors import EntityKind, EntityNotFoundError
from event_hub_api.app.core.relations import RelationResolver, Resolved
from event_hub_api.app.core.store import EntityCollection, store
from event_hub_api.app.schemas.common import DeleteAllResult


logger = logging.getLogger(__name__)


class EntityService:
    """Base class for the per-kind services."""

    kind: ClassVar[EntityKind]
    read_schema: ClassVar[Type[BaseModel]]
    detail_schema: ClassVar[Type[BaseModel]]

    @classmethod
    def _collection(cls) -> EntityCollection:
        return store.collection(cls.kind)

    @classmethod
    def _log_context(cls, record_id: Any = None) -> dict:
        return {"entity_kind": cls.kind.value, "entity_id": record_id}

    @classmethod
    def _present(cls, record: dict, expand: Iterable[str] = ()) -> BaseModel:
        names = list(expand)
        if names:
            record = RelationResolver(store).expand(cls.kind, record, names)
        return cls.detail_schema.model_validate(record)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @classmethod
    async def get_record(cls, record_id: Any, expand: Iterable[str] = ()) -> Optional[BaseModel]:
        """Return the record with ``record_id`` or ``None`` if it does not exist."""
        record = cls._collection().find_by_id(record_id)
        if record is None:
            logger.debug("%s %s not found", cls.kind.value, record_id, extra=cls._log_context(record_id))
            return None
        return cls._present(record, expand)

    @classmethod
    async def list_records(cls, expand: Iterable[str] = ()) -> List[BaseModel]:
        names = list(expand)
        return [cls._present(record, names) for record in cls._collection().list_all()]

    @classmethod
    async def get_related(cls, record_id: Any, relation: str) -> Resolved:
        """Resolve one relation of an existing record.

        Raises ``EntityNotFoundError`` if the source record is missing,
        ``UnknownRelationError`` for an unknown relation name and
        ``DanglingReferenceError`` when a mandatory target is missing.
        """
        record = cls._collection().find_by_id(record_id)
        if record is None:
            raise EntityNotFoundError(cls.kind, record_id)
        return RelationResolver(store).resolve_named(cls.kind, record, relation)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    @classmethod
    async def create_record(cls, data: BaseModel) -> BaseModel:
        record = cls._collection().create(data.model_dump(by_alias=True))
        logger.info("Created %s %s", cls.kind.value, record["id"], extra=cls._log_context(record["id"]))
        return cls.read_schema.model_validate(record)

    @classmethod
    async def update_record(cls, record_id: Any, data: BaseModel) -> BaseModel:
        """Merge the non-null fields of ``data`` onto an existing record."""
        patch = data.model_dump(by_alias=True, exclude_none=True)
        try:
            record = cls._collection().update(record_id, patch)
        except EntityNotFoundError:
            logger.warning("Update of missing %s %s", cls.kind.value, record_id, extra=cls._log_context(record_id))
            raise
        logger.info(
            "Updated %s %s: %s", cls.kind.value, record_id, sorted(patch),
            extra=cls._log_context(record_id),
        )
        return cls.read_schema.model_validate(record)

    @classmethod
    async def delete_record(cls, record_id: Any) -> BaseModel:
        try:
            record = cls._collection().delete(record_id)
        except EntityNotFoundError:
            logger.warning("Delete of missing %s %s", cls.kind.value, record_id, extra=cls._log_context(record_id))
            raise
        logger.info("Deleted %s %s", cls.kind.value, record_id, extra=cls._log_context(record_id))
        return cls.read_schema.model_validate(record)

    @classmethod
    async def delete_all_records(cls) -> DeleteAllResult:
        count = cls._collection().delete_all()
        logger.info("Deleted all %s records (%d)", cls.kind.value, count, extra=cls._log_context())
        return DeleteAllResult(count=count)
