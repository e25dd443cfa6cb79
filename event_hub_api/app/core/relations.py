"""
Relation descriptors and the resolver that follows them.

A ``Relation`` names a derived field of an entity kind (``Event.user``,
``User.events``) together with the foreign key and target collection
needed to compute it.  Foreign keys always live on the "many" side:

* many-to-one: the source record holds the key, e.g. ``event.user_id``
  points at one user;
* one-to-many: the target records hold the key, e.g. every event whose
  ``user_id`` equals the user's id.

Resolution is a linear scan of the target collection performed each
time a relation is requested.  Nothing is cached between calls.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .errors import DanglingReferenceError, EntityKind, UnknownRelationError
from .store import EntityStore


logger = logging.getLogger(__name__)


class Cardinality(str, Enum):
    MANY_TO_ONE = "many_to_one"
    ONE_TO_MANY = "one_to_many"


@dataclass(frozen=True)
class Relation:
    """Description of one relation field.

    ``mandatory`` marks many-to-one relations whose target must exist;
    resolving such a relation against a missing target raises
    ``DanglingReferenceError`` instead of returning ``None``.
    """

    name: str
    source: EntityKind
    target: EntityKind
    foreign_key: str
    cardinality: Cardinality
    mandatory: bool = False


def _relations(*relations: Relation) -> Dict[str, Relation]:
    return {relation.name: relation for relation in relations}


RELATIONS: Dict[EntityKind, Dict[str, Relation]] = {
    EntityKind.USER: _relations(
        Relation("events", EntityKind.USER, EntityKind.EVENT, "user_id", Cardinality.ONE_TO_MANY),
    ),
    EntityKind.LOCATION: _relations(
        Relation("events", EntityKind.LOCATION, EntityKind.EVENT, "location_id", Cardinality.ONE_TO_MANY),
    ),
    EntityKind.EVENT: _relations(
        Relation("user", EntityKind.EVENT, EntityKind.USER, "user_id", Cardinality.MANY_TO_ONE, mandatory=True),
        Relation("location", EntityKind.EVENT, EntityKind.LOCATION, "location_id", Cardinality.MANY_TO_ONE, mandatory=True),
        Relation("participants", EntityKind.EVENT, EntityKind.PARTICIPANT, "event_id", Cardinality.ONE_TO_MANY),
    ),
    EntityKind.PARTICIPANT: _relations(
        Relation("user", EntityKind.PARTICIPANT, EntityKind.USER, "user_id", Cardinality.MANY_TO_ONE, mandatory=True),
        Relation("event", EntityKind.PARTICIPANT, EntityKind.EVENT, "event_id", Cardinality.MANY_TO_ONE, mandatory=True),
    ),
}


def get_relation(kind: EntityKind, name: str) -> Relation:
    """Look up a relation by name, raising ``UnknownRelationError``."""
    try:
        return RELATIONS[kind][name]
    except KeyError:
        raise UnknownRelationError(kind, name) from None


Resolved = Union[Optional[Dict[str, Any]], List[Dict[str, Any]]]


class RelationResolver:
    """Compute relation fields against a given store."""

    def __init__(self, store: EntityStore) -> None:
        self.store = store

    def resolve(self, record: Mapping[str, Any], relation: Relation) -> Resolved:
        target = self.store.collection(relation.target)
        if relation.cardinality is Cardinality.MANY_TO_ONE:
            foreign_id = record.get(relation.foreign_key)
            related = target.find_by_id(foreign_id)
            if related is None:
                logger.warning(
                    "%s %s references missing %s %s via %s",
                    relation.source.value,
                    record.get("id"),
                    relation.target.value,
                    foreign_id,
                    relation.foreign_key,
                    extra={"entity_kind": relation.source.value, "entity_id": record.get("id")},
                )
                if relation.mandatory:
                    raise DanglingReferenceError(
                        relation.source,
                        record.get("id"),
                        relation.name,
                        relation.target,
                        foreign_id,
                    )
            return related
        return target.filter_by(relation.foreign_key, record.get("id"))

    def resolve_named(self, kind: EntityKind, record: Mapping[str, Any], name: str) -> Resolved:
        return self.resolve(record, get_relation(kind, name))

    def expand(
        self, kind: EntityKind, record: Mapping[str, Any], names: Iterable[str]
    ) -> Dict[str, Any]:
        """Return a copy of ``record`` with the named relations filled in.

        Unknown names are rejected before anything is resolved.
        """
        relations = [get_relation(kind, name) for name in dict.fromkeys(names)]
        expanded = dict(record)
        for relation in relations:
            expanded[relation.name] = self.resolve(record, relation)
        return expanded
