"""
Domain errors raised by the data-access core.

Every error carries the HTTP status the REST layer should answer with
and a short machine-readable ``code``.  The global handlers registered
in ``api/error_handlers.py`` turn these into JSON responses, so
endpoint functions do not need to catch them individually.

Entity kinds are represented by the ``EntityKind`` enum rather than
free-form strings.  The enum value doubles as the human-readable label
used in error messages (``"User 7 not found"``).
"""

from enum import Enum
from typing import Any


class EntityKind(str, Enum):
    """The four record types held by the entity store."""

    USER = "User"
    LOCATION = "Location"
    EVENT = "Event"
    PARTICIPANT = "Participant"


class EventHubError(Exception):
    """Base class for all errors raised by the core."""

    code = "EVENT_HUB_ERROR"
    http_status = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        # ``detail`` keeps the shape FastAPI uses for HTTPException bodies.
        return {"detail": self.message, "code": self.code}


class EntityNotFoundError(EventHubError):
    """No record with the given id exists in the collection for ``kind``."""

    code = "NOT_FOUND"
    http_status = 404

    def __init__(self, kind: EntityKind, entity_id: Any) -> None:
        super().__init__(f"{kind.value} {entity_id} not found")
        self.kind = kind
        self.entity_id = entity_id


class DanglingReferenceError(EventHubError):
    """A mandatory relation points at a record that does not exist.

    Foreign keys are never checked on write, so this is only raised
    while resolving a relation for a read.
    """

    code = "DANGLING_REFERENCE"
    http_status = 409

    def __init__(
        self,
        source_kind: EntityKind,
        source_id: Any,
        relation: str,
        target_kind: EntityKind,
        target_id: Any,
    ) -> None:
        super().__init__(
            f"{source_kind.value} {source_id} references missing "
            f"{target_kind.value} {target_id} through '{relation}'"
        )
        self.source_kind = source_kind
        self.source_id = source_id
        self.relation = relation
        self.target_kind = target_kind
        self.target_id = target_id


class UnknownRelationError(EventHubError):
    """A caller asked to expand a relation the entity kind does not have."""

    code = "UNKNOWN_RELATION"
    http_status = 400

    def __init__(self, kind: EntityKind, relation: str) -> None:
        super().__init__(f"{kind.value} has no relation '{relation}'")
        self.kind = kind
        self.relation = relation
