"""
Loading of the initial dataset.

The store is populated once at startup from a JSON document of the
form::

    {
        "users": [{"id": 1, "username": "...", "email": "..."}, ...],
        "events": [...],
        "locations": [...],
        "participants": [...]
    }

Seeded records keep their ids.  Identifier fields are coerced to
integers so that ``"1"`` in a hand-written fixture and ``1`` created
through the API refer to the same record.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping

from .errors import EntityKind
from .store import EntityStore, normalize_id


logger = logging.getLogger(__name__)


# Top-level keys of the fixture document for each entity kind.
DATASET_KEYS: Dict[EntityKind, str] = {
    EntityKind.USER: "users",
    EntityKind.LOCATION: "locations",
    EntityKind.EVENT: "events",
    EntityKind.PARTICIPANT: "participants",
}

ID_FIELDS = ("id", "user_id", "event_id", "location_id")


def load_dataset(path: str) -> Dict[str, List[Dict[str, Any]]]:
    """Read and parse the fixture at ``path``.

    Raises ``FileNotFoundError`` if the file is missing and
    ``ValueError`` if the document is not a JSON object.
    """
    with Path(path).open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Dataset {path} must be a JSON object")
    return data


def _coerce_ids(record: Mapping[str, Any]) -> Dict[str, Any]:
    coerced = dict(record)
    for field in ID_FIELDS:
        if field in coerced:
            value = normalize_id(coerced[field])
            if value is not None:
                coerced[field] = value
    return coerced


def seed_store(store: EntityStore, dataset: Mapping[str, Any]) -> Dict[str, int]:
    """Replace the store contents with ``dataset``.

    Missing arrays are treated as empty.  Returns the number of records
    loaded per entity kind.  Duplicate ids inside one array raise
    ``ValueError`` and leave ``store`` untouched.
    """
    staging = EntityStore()
    loaded: Dict[str, int] = {}
    for kind, key in DATASET_KEYS.items():
        records = dataset.get(key) or []
        if not isinstance(records, list):
            raise ValueError(f"Dataset entry '{key}' must be a list")
        loaded[key] = staging.collection(kind).load(_coerce_ids(r) for r in records)
    store.replace_with(staging)
    logger.info(
        "Seeded store: %s",
        ", ".join(f"{count} {key}" for key, count in loaded.items()),
    )
    return loaded


def seed_from_file(store: EntityStore, path: str) -> Dict[str, int]:
    logger.info("Loading dataset from %s", path)
    return seed_store(store, load_dataset(path))
