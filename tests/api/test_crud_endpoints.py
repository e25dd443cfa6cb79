"""CRUD endpoints: create, read, partial update, delete and delete-all over HTTP."""

import pytest

API = "/api/v1"


@pytest.mark.usefixtures("seeded_store")
class TestUsers:
    def test_list_users(self, client):
        response = client.get(f"{API}/users/")
        assert response.status_code == 200
        assert response.json() == [
            {"id": 1, "username": "ayla", "email": "ayla@example.com"},
            {"id": 2, "username": "marco", "email": "marco@example.com"},
        ]

    def test_get_user(self, client):
        response = client.get(f"{API}/users/2")
        assert response.status_code == 200
        assert response.json()["username"] == "marco"

    def test_get_missing_user(self, client):
        response = client.get(f"{API}/users/9")
        assert response.status_code == 404
        assert response.json()["detail"] == "User 9 not found"

    def test_non_numeric_id_rejected(self, client):
        assert client.get(f"{API}/users/abc").status_code == 422

    def test_create_user(self, client):
        response = client.post(f"{API}/users/", json={"username": "nina", "email": "nina@example.com"})
        assert response.status_code == 201
        assert response.json() == {"id": 3, "username": "nina", "email": "nina@example.com"}
        assert client.get(f"{API}/users/3").json() == response.json()

    def test_create_user_missing_field(self, client):
        response = client.post(f"{API}/users/", json={"username": "nina"})
        assert response.status_code == 422

    def test_partial_update(self, client):
        response = client.put(f"{API}/users/1", json={"email": "ayla@new.example.com"})
        assert response.status_code == 200
        assert response.json() == {"id": 1, "username": "ayla", "email": "ayla@new.example.com"}

    def test_update_missing_user(self, client):
        response = client.put(f"{API}/users/9", json={"email": "x@example.com"})
        assert response.status_code == 404
        assert response.json() == {"detail": "User 9 not found", "code": "NOT_FOUND"}
        assert len(client.get(f"{API}/users/").json()) == 2

    def test_delete_user_echoes_record(self, client):
        response = client.delete(f"{API}/users/1")
        assert response.status_code == 200
        assert response.json()["username"] == "ayla"
        second = client.delete(f"{API}/users/1")
        assert second.status_code == 404
        assert second.json()["code"] == "NOT_FOUND"

    def test_delete_all_users(self, client):
        assert client.delete(f"{API}/users/").json() == {"count": 2}
        assert client.get(f"{API}/users/").json() == []
        assert client.delete(f"{API}/users/").json() == {"count": 0}

    def test_no_id_reuse_after_delete(self, client):
        client.delete(f"{API}/users/1")
        created = client.post(f"{API}/users/", json={"username": "c", "email": "c@example.com"})
        assert created.json()["id"] == 3


@pytest.mark.usefixtures("seeded_store")
class TestEvents:
    def test_event_uses_from_and_to_names(self, client):
        body = client.get(f"{API}/events/1").json()
        assert body["from"] == "18:30"
        assert body["to"] == "21:00"
        assert "from_" not in body
        assert "user" not in body

    def test_create_event(self, client):
        payload = {
            "title": "Workshop",
            "desc": "Hands-on session",
            "date": "2026-12-01",
            "from": "10:00",
            "to": "12:00",
            "location_id": "2",
            "user_id": 1,
        }
        response = client.post(f"{API}/events/", json=payload)
        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 4
        assert body["location_id"] == 2
        assert body["from"] == "10:00"

    def test_update_event_keeps_other_fields(self, client):
        response = client.put(f"{API}/events/2", json={"to": "23:00", "title": None})
        assert response.status_code == 200
        body = response.json()
        assert body["to"] == "23:00"
        assert body["title"] == "Poetry"
        assert body["from"] == "19:00"

    def test_delete_all_events(self, client):
        assert client.delete(f"{API}/events/").json() == {"count": 3}


@pytest.mark.usefixtures("seeded_store")
class TestLocationsAndParticipants:
    def test_create_location(self, client):
        payload = {"name": "Park", "desc": "Lawn", "lat": 41.03, "lng": 28.98}
        response = client.post(f"{API}/locations/", json=payload)
        assert response.status_code == 201
        assert response.json() == {"id": 3, **payload}

    def test_update_location_coordinates(self, client):
        response = client.put(f"{API}/locations/1", json={"lat": 40.5})
        assert response.json()["lat"] == 40.5
        assert response.json()["name"] == "Harbour Hall"

    def test_delete_participant(self, client):
        response = client.delete(f"{API}/participants/2")
        assert response.json() == {"id": 2, "user_id": 1, "event_id": 2}
        assert [p["id"] for p in client.get(f"{API}/participants/").json()] == [1, 3]

    def test_participant_foreign_keys_unchecked(self, client):
        response = client.post(f"{API}/participants/", json={"user_id": 50, "event_id": 60})
        assert response.status_code == 201
        assert response.json() == {"id": 4, "user_id": 50, "event_id": 60}
