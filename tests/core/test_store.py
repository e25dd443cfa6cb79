"""Entity store: identity allocation and CRUD on a single collection.

Tests:
    - create followed by find_by_id returns an equal record
    - update merges only the patched fields and never touches the id
    - update/delete of a missing id raise and leave the collection unchanged
    - delete_all returns the count and is idempotent
    - ids are never reused after deletes or clears
    - string and integer ids denote the same record
    - concurrent creates and deletes on one collection stay consistent
"""

import threading

import pytest

from event_hub_api.app.core.errors import EntityKind, EntityNotFoundError
from event_hub_api.app.core.store import EntityCollection, EntityStore, normalize_id


@pytest.fixture
def users():
    return EntityCollection(EntityKind.USER)


def _add(collection, *names):
    return [collection.create({"username": name, "email": f"{name}@example.com"}) for name in names]


@pytest.mark.parametrize(
    "value, expected",
    [
        (3, 3),
        ("3", 3),
        (" 7 ", 7),
        ("3.0", 3),
        (4.0, 4),
        (4.5, None),
        ("abc", None),
        ("", None),
        (None, None),
        (True, None),
    ],
)
def test_normalize_id(value, expected):
    assert normalize_id(value) == expected


def test_create_then_find_returns_equal_record(users):
    created = users.create({"username": "ayla", "email": "ayla@example.com"})
    assert created == {"id": 1, "username": "ayla", "email": "ayla@example.com"}
    assert users.find_by_id(created["id"]) == created


def test_create_allocates_sequential_ids(users):
    records = _add(users, "a", "b", "c")
    assert [r["id"] for r in records] == [1, 2, 3]


def test_create_ignores_id_in_input(users):
    record = users.create({"id": 42, "username": "x", "email": "x@example.com"})
    assert record["id"] == 1
    assert users.find_by_id(42) is None


def test_update_merges_only_patched_fields(users):
    _add(users, "ayla", "marco")
    updated = users.update(2, {"email": "new@example.com"})
    assert updated == {"id": 2, "username": "marco", "email": "new@example.com"}
    assert users.find_by_id(2) == updated
    assert users.find_by_id(1) == {"id": 1, "username": "ayla", "email": "ayla@example.com"}


def test_update_never_overwrites_id(users):
    _add(users, "ayla")
    updated = users.update(1, {"id": 99, "username": "renamed"})
    assert updated["id"] == 1
    assert users.find_by_id(99) is None


def test_update_missing_raises_and_leaves_collection_unchanged(users):
    _add(users, "ayla", "marco")
    before = users.list_all()
    with pytest.raises(EntityNotFoundError) as excinfo:
        users.update(5, {"username": "ghost"})
    assert excinfo.value.kind is EntityKind.USER
    assert excinfo.value.entity_id == 5
    assert str(excinfo.value) == "User 5 not found"
    assert users.list_all() == before


def test_delete_returns_record_and_keeps_order(users):
    _add(users, "a", "b", "c")
    removed = users.delete(2)
    assert removed["username"] == "b"
    assert [r["username"] for r in users.list_all()] == ["a", "c"]


def test_delete_missing_raises_and_leaves_collection_unchanged(users):
    _add(users, "a", "b")
    before = users.list_all()
    with pytest.raises(EntityNotFoundError):
        users.delete(3)
    assert users.list_all() == before
    assert len(users) == 2


def test_delete_all_returns_count_and_is_idempotent(users):
    _add(users, "a", "b", "c")
    assert users.delete_all() == 3
    assert users.list_all() == []
    assert users.delete_all() == 0


def test_ids_not_reused_after_delete(users):
    a, b = _add(users, "a", "b")
    users.delete(a["id"])
    (c,) = _add(users, "c")
    assert c["id"] == 3
    assert {r["id"] for r in users.list_all()} == {2, 3}


def test_ids_not_reused_after_deleting_last_record(users):
    _add(users, "a", "b")
    users.delete(2)
    (c,) = _add(users, "c")
    assert c["id"] == 3


def test_ids_not_reused_after_delete_all(users):
    _add(users, "a", "b")
    users.delete_all()
    (c,) = _add(users, "c")
    assert c["id"] == 3


def test_string_ids_match_numeric_ids(users):
    _add(users, "a", "b")
    assert users.find_by_id("2")["username"] == "b"
    assert users.update("1", {"username": "z"})["username"] == "z"
    assert users.delete(" 2 ")["username"] == "b"


def test_non_numeric_id_matches_nothing(users):
    _add(users, "a")
    assert users.find_by_id("abc") is None
    with pytest.raises(EntityNotFoundError):
        users.delete("abc")


def test_returned_records_are_copies(users):
    created = users.create({"username": "a", "email": "a@example.com"})
    created["username"] = "mutated"
    users.list_all()[0]["email"] = "mutated"
    assert users.find_by_id(1) == {"id": 1, "username": "a", "email": "a@example.com"}


def test_filter_by_compares_identifiers():
    events = EntityCollection(EntityKind.EVENT)
    events.load([
        {"id": 1, "user_id": 1},
        {"id": 2, "user_id": "2"},
        {"id": 3, "user_id": 1},
    ])
    assert [e["id"] for e in events.filter_by("user_id", 1)] == [1, 3]
    assert [e["id"] for e in events.filter_by("user_id", "2")] == [2]
    assert events.filter_by("user_id", None) == []


def test_load_keeps_ids_and_continues_counter(users):
    users.load([
        {"id": 4, "username": "d", "email": "d@example.com"},
        {"id": 2, "username": "b", "email": "b@example.com"},
    ])
    assert [r["id"] for r in users.list_all()] == [4, 2]
    (new,) = _add(users, "e")
    assert new["id"] == 5


def test_load_rejects_duplicate_ids(users):
    with pytest.raises(ValueError):
        users.load([{"id": 1, "username": "a"}, {"id": 1, "username": "b"}])


def test_reset_restarts_allocation(users):
    _add(users, "a", "b")
    users.reset()
    assert len(users) == 0
    assert _add(users, "c")[0]["id"] == 1


def test_store_collections_are_independent():
    store = EntityStore()
    store.users.create({"username": "a", "email": "a@example.com"})
    location = store.locations.create({"name": "Hall", "desc": "", "lat": 0.0, "lng": 0.0})
    assert location["id"] == 1
    assert store.collection(EntityKind.USER) is store.users
    assert store.counts() == {"User": 1, "Location": 1, "Event": 0, "Participant": 0}
    store.reset()
    assert store.counts() == {"User": 0, "Location": 0, "Event": 0, "Participant": 0}


def test_load_allocates_missing_ids_after_explicit_ones(users):
    users.load([
        {"username": "a", "email": "a@example.com"},
        {"id": 1, "username": "b", "email": "b@example.com"},
        {"username": "c", "email": "c@example.com"},
    ])
    assert [(r["id"], r["username"]) for r in users.list_all()] == [(2, "a"), (1, "b"), (3, "c")]
    assert _add(users, "d")[0]["id"] == 4


def test_replace_with_copies_records_and_counter(users):
    staging = EntityCollection(EntityKind.USER)
    _add(staging, "a", "b")
    staging.delete(2)
    _add(users, "old")
    users.replace_with(staging)
    assert [r["username"] for r in users.list_all()] == ["a"]
    assert _add(users, "c")[0]["id"] == 3
    assert len(staging) == 1


def _run_threads(count, target):
    threads = [threading.Thread(target=target, args=(n,)) for n in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def test_concurrent_creates_allocate_unique_ids(users):
    per_thread = 200

    def worker(n):
        for i in range(per_thread):
            users.create({"username": f"u{n}-{i}", "email": f"u{n}-{i}@example.com"})

    _run_threads(8, worker)

    ids = [r["id"] for r in users.list_all()]
    assert len(ids) == 8 * per_thread
    assert len(set(ids)) == len(ids)
    assert sorted(ids) == list(range(1, 8 * per_thread + 1))


def test_concurrent_creates_and_deletes_stay_consistent(users):
    per_thread = 100
    deleted = []
    deleted_lock = threading.Lock()

    def worker(n):
        for i in range(per_thread):
            record = users.create({"username": f"u{n}-{i}", "email": f"u{n}-{i}@example.com"})
            if i % 2 == 0:
                removed = users.delete(record["id"])
                with deleted_lock:
                    deleted.append(removed["id"])

    _run_threads(6, worker)

    remaining = [r["id"] for r in users.list_all()]
    assert len(remaining) == 6 * per_thread - len(deleted)
    assert len(set(remaining)) == len(remaining)
    assert not set(remaining) & set(deleted)
    assert len(set(remaining) | set(deleted)) == 6 * per_thread
    assert _add(users, "last")[0]["id"] == 6 * per_thread + 1
