"""
In-memory entity store.

The store owns four insertion-ordered collections (users, locations,
events and participants).  Each collection is an ``EntityCollection``
holding plain ``dict`` records keyed by an integer ``id`` that is
unique within that collection.  Nothing outside this module touches
the underlying lists; callers receive shallow copies of records so a
returned record can be serialised or modified without affecting the
stored one.

Identifiers come from a per-collection counter that only ever moves
forward.  Deleting records, or clearing the whole collection, never
makes an id available again, so a stale foreign key elsewhere can not
silently start pointing at a newly created record.

Allocation, insertion and removal inside one collection are serialised
with a re-entrant lock.  There is no isolation across collections.
"""

import logging
import threading
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .errors import EntityKind, EntityNotFoundError


logger = logging.getLogger(__name__)


def normalize_id(value: Any) -> Optional[int]:
    """Coerce an identifier coming from a caller into an ``int``.

    Integers pass through; numeric strings (``"3"``, ``" 3 "``,
    ``"3.0"``) and integral floats are converted.  Anything else,
    including booleans, yields ``None`` which matches no record.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if number.is_integer() else None
    return None


class EntityCollection:
    """Ordered collection of records of a single entity kind."""

    def __init__(self, kind: EntityKind) -> None:
        self.kind = kind
        self._records: List[Dict[str, Any]] = []
        self._next_id = 1
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._records)

    def _index_of(self, record_id: Any) -> int:
        wanted = normalize_id(record_id)
        if wanted is None:
            return -1
        for index, record in enumerate(self._records):
            if record["id"] == wanted:
                return index
        return -1

    # ------------------------------------------------------------------
    # Identity allocation
    # ------------------------------------------------------------------
    def allocate_id(self) -> int:
        """Return an id that has never been handed out by this collection."""
        with self._lock:
            record_id = self._next_id
            self._next_id += 1
            return record_id

    def insert(self, record_id: int, fields: Mapping[str, Any]) -> Dict[str, Any]:
        """Append a fully formed record and return a copy of it.

        Raises ``ValueError`` if ``record_id`` is already in use.
        """
        with self._lock:
            if self._index_of(record_id) != -1:
                raise ValueError(f"{self.kind.value} id {record_id} is already in use")
            record = {"id": record_id}
            record.update((key, value) for key, value in fields.items() if key != "id")
            self._records.append(record)
            if record_id >= self._next_id:
                self._next_id = record_id + 1
            return dict(record)

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------
    def create(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        with self._lock:
            return self.insert(self.allocate_id(), data)

    def update(self, record_id: Any, patch: Mapping[str, Any]) -> Dict[str, Any]:
        """Shallow-merge ``patch`` onto the record and return the result.

        Keys absent from ``patch`` keep their values; ``id`` is never
        overwritten.  Raises ``EntityNotFoundError`` when no record
        matches, in which case nothing is modified.
        """
        with self._lock:
            index = self._index_of(record_id)
            if index == -1:
                raise EntityNotFoundError(self.kind, record_id)
            merged = dict(self._records[index])
            merged.update((key, value) for key, value in patch.items() if key != "id")
            self._records[index] = merged
            return dict(merged)

    def delete(self, record_id: Any) -> Dict[str, Any]:
        """Remove a record, keeping the order of the others, and return it."""
        with self._lock:
            index = self._index_of(record_id)
            if index == -1:
                raise EntityNotFoundError(self.kind, record_id)
            return self._records.pop(index)

    def delete_all(self) -> int:
        """Remove every record and return how many were removed."""
        with self._lock:
            count = len(self._records)
            self._records.clear()
            return count

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def find_by_id(self, record_id: Any) -> Optional[Dict[str, Any]]:
        with self._lock:
            index = self._index_of(record_id)
            if index == -1:
                return None
            return dict(self._records[index])

    def list_all(self) -> List[Dict[str, Any]]:
        """Snapshot of the collection in stored order."""
        with self._lock:
            return [dict(record) for record in self._records]

    def filter_by(self, field: str, value: Any) -> List[Dict[str, Any]]:
        """Records whose ``field`` denotes the same identifier as ``value``."""
        wanted = normalize_id(value)
        if wanted is None:
            return []
        with self._lock:
            return [
                dict(record)
                for record in self._records
                if normalize_id(record.get(field)) == wanted
            ]

    # ------------------------------------------------------------------
    # Seeding
    # ------------------------------------------------------------------
    def load(self, records: Iterable[Mapping[str, Any]]) -> int:
        """Append pre-existing records, keeping their ids when they have one.

        Records without an id get fresh ids after the largest explicit id
        in ``records``, so they never collide with a later explicit id.
        """
        pending = [(normalize_id(raw.get("id")), raw) for raw in records]
        with self._lock:
            explicit = [record_id for record_id, _ in pending if record_id is not None]
            if explicit:
                self._next_id = max(self._next_id, max(explicit) + 1)
            for record_id, raw in pending:
                self.insert(self.allocate_id() if record_id is None else record_id, raw)
        return len(pending)

    def replace_with(self, other: "EntityCollection") -> None:
        """Take over the records and id counter of ``other``."""
        with self._lock, other._lock:
            self._records = [dict(record) for record in other._records]
            self._next_id = other._next_id

    def reset(self) -> None:
        """Drop all records and restart id allocation at 1."""
        with self._lock:
            self._records.clear()
            self._next_id = 1


class EntityStore:
    """Owner of the four entity collections."""

    def __init__(self) -> None:
        self._collections: Dict[EntityKind, EntityCollection] = {
            kind: EntityCollection(kind) for kind in EntityKind
        }

    def collection(self, kind: EntityKind) -> EntityCollection:
        return self._collections[kind]

    @property
    def users(self) -> EntityCollection:
        return self._collections[EntityKind.USER]

    @property
    def locations(self) -> EntityCollection:
        return self._collections[EntityKind.LOCATION]

    @property
    def events(self) -> EntityCollection:
        return self._collections[EntityKind.EVENT]

    @property
    def participants(self) -> EntityCollection:
        return self._collections[EntityKind.PARTICIPANT]

    def counts(self) -> Dict[str, int]:
        return {kind.value: len(collection) for kind, collection in self._collections.items()}

    def replace_with(self, other: "EntityStore") -> None:
        """Copy every collection of ``other`` into this store."""
        for kind, collection in self._collections.items():
            collection.replace_with(other.collection(kind))

    def reset(self) -> None:
        for collection in self._collections.values():
            collection.reset()
        logger.debug("Entity store reset")


# Process-wide store shared by the service layer, in the same way the
# settings object is shared.
store = EntityStore()
