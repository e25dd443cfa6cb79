"""Event Hub API client.

This module defines a small client wrapper around the REST API served
by ``event_hub_api``.  It uses the ``requests`` library internally to
make HTTP calls.

Every public method returns a tuple ``(data, error)``.  On success
``error`` is ``None``; on failure ``data`` is empty and ``error`` is a
dictionary with the keys ``status_code`` and ``message``.  The client
never raises for HTTP or connection errors.

Generic methods take a resource name (``"users"``, ``"locations"``,
``"events"`` or ``"participants"``):

* :meth:`list_records` / :meth:`get_record` – read records, optionally
  expanding relations.
* :meth:`create_record` / :meth:`update_record` / :meth:`delete_record`
  – single-record mutations.
* :meth:`delete_all_records` – clear a collection and return the count.
* :meth:`get_related` – follow a relation such as ``events/3/user``.

Named wrappers (``get_user``, ``list_events``, ``create_location``,
``delete_all_participants`` ...) cover the same operations per entity
kind.

The client supports optional authentication via an API key which will
be sent in the ``Authorization`` header.  To enable this behaviour,
initialise the client with ``api_key='<your token>'``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)


RESOURCES = ("users", "locations", "events", "participants")

Error = Dict[str, Any]


class EventHubAPI:
    """Client for interacting with the Event Hub API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api/v1",
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:4000``.
            api_prefix: Path prefix of the versioned API.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` will be
                included in all requests.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/") + "/" + api_prefix.strip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the API prefix (e.g. ``/events/``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _path(resource: str, record_id: Any = None, relation: Optional[str] = None) -> str:
        if resource not in RESOURCES:
            raise ValueError(f"Unknown resource '{resource}'")
        if record_id is None:
            return f"/{resource}/"
        path = f"/{resource}/{record_id}"
        if relation:
            path += f"/{relation}"
        return path

    @staticmethod
    def _expand_params(expand: Optional[Iterable[str]]) -> Optional[Dict[str, Any]]:
        names = list(expand or [])
        return {"expand": names} if names else None

    # ------------------------------------------------------------------
    # Generic operations
    # ------------------------------------------------------------------
    def list_records(
        self, resource: str, expand: Optional[Iterable[str]] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", self._path(resource), params=self._expand_params(expand))
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_record(
        self, resource: str, record_id: Any, expand: Optional[Iterable[str]] = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve one record; a missing record is reported as a 404 error."""
        return self._request(
            "GET", self._path(resource, record_id), params=self._expand_params(expand)
        )

    def create_record(self, resource: str, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", self._path(resource), json_body=payload)

    def update_record(
        self, resource: str, record_id: Any, patch: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Send a partial update; fields missing from ``patch`` are kept."""
        return self._request("PUT", self._path(resource, record_id), json_body=patch)

    def delete_record(self, resource: str, record_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Delete a record and return the removed record."""
        return self._request("DELETE", self._path(resource, record_id))

    def delete_all_records(self, resource: str) -> Tuple[int, Optional[Error]]:
        data, error = self._request("DELETE", self._path(resource))
        if error:
            return 0, error
        return int((data or {}).get("count", 0)), None

    def get_related(self, resource: str, record_id: Any, relation: str) -> Tuple[Any, Optional[Error]]:
        return self._request("GET", self._path(resource, record_id, relation))

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def get_user(self, user_id: Any, expand: Optional[Iterable[str]] = None):
        return self.get_record("users", user_id, expand)

    def list_users(self, expand: Optional[Iterable[str]] = None):
        return self.list_records("users", expand)

    def create_user(self, payload: Dict[str, Any]):
        return self.create_record("users", payload)

    def update_user(self, user_id: Any, patch: Dict[str, Any]):
        return self.update_record("users", user_id, patch)

    def delete_user(self, user_id: Any):
        return self.delete_record("users", user_id)

    def delete_all_users(self):
        return self.delete_all_records("users")

    # ------------------------------------------------------------------
    # Locations
    # ------------------------------------------------------------------
    def get_location(self, location_id: Any, expand: Optional[Iterable[str]] = None):
        return self.get_record("locations", location_id, expand)

    def list_locations(self, expand: Optional[Iterable[str]] = None):
        return self.list_records("locations", expand)

    def create_location(self, payload: Dict[str, Any]):
        return self.create_record("locations", payload)

    def update_location(self, location_id: Any, patch: Dict[str, Any]):
        return self.update_record("locations", location_id, patch)

    def delete_location(self, location_id: Any):
        return self.delete_record("locations", location_id)

    def delete_all_locations(self):
        return self.delete_all_records("locations")

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def get_event(self, event_id: Any, expand: Optional[Iterable[str]] = None):
        return self.get_record("events", event_id, expand)

    def list_events(self, expand: Optional[Iterable[str]] = None):
        return self.list_records("events", expand)

    def create_event(self, payload: Dict[str, Any]):
        return self.create_record("events", payload)

    def update_event(self, event_id: Any, patch: Dict[str, Any]):
        return self.update_record("events", event_id, patch)

    def delete_event(self, event_id: Any):
        return self.delete_record("events", event_id)

    def delete_all_events(self):
        return self.delete_all_records("events")

    # ------------------------------------------------------------------
    # Participants
    # ------------------------------------------------------------------
    def get_participant(self, participant_id: Any, expand: Optional[Iterable[str]] = None):
        return self.get_record("participants", participant_id, expand)

    def list_participants(self, expand: Optional[Iterable[str]] = None):
        return self.list_records("participants", expand)

    def create_participant(self, payload: Dict[str, Any]):
        return self.create_record("participants", payload)

    def update_participant(self, participant_id: Any, patch: Dict[str, Any]):
        return self.update_record("participants", participant_id, patch)

    def delete_participant(self, participant_id: Any):
        return self.delete_record("participants", participant_id)

    def delete_all_participants(self):
        return self.delete_all_records("participants")
