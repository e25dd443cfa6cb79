"""Root conftest: shared test configuration."""

import copy
import os

# Tests build their own store contents; never load the bundled fixture.
os.environ.setdefault("SEED_ON_STARTUP", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402

from event_hub_api.app.core.seed import seed_store  # noqa: E402
from event_hub_api.app.core.store import store  # noqa: E402


SAMPLE_DATASET = {
    "users": [
        {"id": 1, "username": "ayla", "email": "ayla@example.com"},
        {"id": 2, "username": "marco", "email": "marco@example.com"},
    ],
    "locations": [
        {"id": 1, "name": "Harbour Hall", "desc": "Waterfront hall", "lat": 41.01, "lng": 28.97},
        {"id": 2, "name": "Old Library", "desc": "Reading room", "lat": 41.0, "lng": 28.9},
    ],
    "events": [
        {"id": 1, "title": "Meetup", "desc": "Talks", "date": "2026-11-05",
         "from": "18:30", "to": "21:00", "location_id": 1, "user_id": 1},
        {"id": 2, "title": "Poetry", "desc": "Open mic", "date": "2026-11-12",
         "from": "19:00", "to": "22:00", "location_id": 2, "user_id": 2},
        {"id": 3, "title": "Run", "desc": "5k", "date": "2026-11-15",
         "from": "08:00", "to": "09:00", "location_id": 1, "user_id": 1},
    ],
    "participants": [
        {"id": 1, "user_id": 2, "event_id": 1},
        {"id": 2, "user_id": 1, "event_id": 2},
        {"id": 3, "user_id": 2, "event_id": 3},
    ],
}


@pytest.fixture
def dataset():
    return copy.deepcopy(SAMPLE_DATASET)


@pytest.fixture(autouse=True)
def clean_store():
    """Every test starts and ends with an empty process-wide store."""
    store.reset()
    yield
    store.reset()


@pytest.fixture
def seeded_store(dataset):
    seed_store(store, dataset)
    return store
