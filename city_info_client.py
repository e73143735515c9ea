"""City Info API client.

This module defines a simple client wrapper around the City Info REST
API.  The client uses the ``requests`` library internally to make HTTP
calls and exposes one method per operation:

* :meth:`list_cities` – return all cities.
* :meth:`get_city` – fetch a single city by its identifier.
* :meth:`list_points_of_interest` / :meth:`get_point_of_interest` – read
  the points of interest of a city.
* :meth:`create_point_of_interest`, :meth:`update_point_of_interest`,
  :meth:`patch_point_of_interest`, :meth:`delete_point_of_interest` –
  modify them.
* :meth:`download_file` – fetch the downloadable file as bytes.

Every method returns a ``(result, error)`` tuple.  On success ``error``
is ``None``; on failure ``result`` is empty and ``error`` is a
dictionary with ``status_code`` and ``message`` keys.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

JSON_PATCH_CONTENT_TYPE = "application/json-patch+json"


class CityInfoClient:
    """Client for interacting with the City Info API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the API including the ``/api`` prefix,
                e.g. ``http://localhost:8000/api``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        json_body: Any | None = None,
        headers: Dict[str, str] | None = None,
        raw: bool = False,
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``, etc.).
            path: Path relative to :attr:`base_url` (e.g. ``/cities``).
            json_body: JSON body to send with the request.
            headers: Extra request headers.
            raw: Return the response body as bytes instead of parsed JSON.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        kwargs: Dict[str, Any] = {"headers": dict(headers or {}), "timeout": self.timeout}
        if json_body is not None:
            if kwargs["headers"].get("Content-Type") == JSON_PATCH_CONTENT_TYPE:
                kwargs["data"] = json.dumps(json_body)
            else:
                kwargs["json"] = json_body
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method=method, url=url, **kwargs)
            response.raise_for_status()
            if raw:
                return response.content, None
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message: Any = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("detail") or str(err_json)
                    else:
                        message = err_json
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
    def _poi_path(city_id: Any, point_of_interest_id: Any = None) -> str:
        path = f"/cities/{city_id}/pointsofinterest"
        if point_of_interest_id is not None:
            path += f"/{point_of_interest_id}"
        return path

    # ------------------------------------------------------------------
    # City operations
    # ------------------------------------------------------------------
    def list_cities(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all cities."""
        data, error = self._request("GET", "/cities")
        if error:
            return [], error
        return data or [], None

    def get_city(self, city_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve a single city by ID."""
        return self._request("GET", f"/cities/{city_id}")

    # ------------------------------------------------------------------
    # Point of interest operations
    # ------------------------------------------------------------------
    def list_points_of_interest(self, city_id: Any) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", self._poi_path(city_id))
        if error:
            return [], error
        return data or [], None

    def get_point_of_interest(
        self, city_id: Any, point_of_interest_id: Any
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        return self._request("GET", self._poi_path(city_id, point_of_interest_id))

    def create_point_of_interest(
        self, city_id: Any, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Create a point of interest.

        Args:
            city_id: Identifier of the city.
            payload: ``name`` and optional ``description``.
        Returns:
            A tuple ``(point_of_interest, error)``.
        """
        return self._request("POST", self._poi_path(city_id), json_body=payload)

    def update_point_of_interest(
        self, city_id: Any, point_of_interest_id: Any, payload: Dict[str, Any]
    ) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Replace a point of interest.  Returns ``(success, error)``."""
        _, error = self._request("PUT", self._poi_path(city_id, point_of_interest_id), json_body=payload)
        return error is None, error

    def patch_point_of_interest(
        self, city_id: Any, point_of_interest_id: Any, operations: List[Dict[str, Any]]
    ) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Apply JSON Patch operations to a point of interest.

        Args:
            operations: RFC 6902 operations, e.g.
                ``[{"op": "replace", "path": "/name", "value": "New"}]``.
        Returns:
            A tuple ``(success, error)``.  On a validation failure the
            error message holds the list of errors returned by the API.
        """
        _, error = self._request(
            "PATCH",
            self._poi_path(city_id, point_of_interest_id),
            json_body=operations,
            headers={"Content-Type": JSON_PATCH_CONTENT_TYPE},
        )
        return error is None, error

    def delete_point_of_interest(
        self, city_id: Any, point_of_interest_id: Any
    ) -> Tuple[bool, Optional[Dict[str, Any]]]:
        _, error = self._request("DELETE", self._poi_path(city_id, point_of_interest_id))
        return error is None, error

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------
    def download_file(self, file_id: Any) -> Tuple[Optional[bytes], Optional[Dict[str, Any]]]:
        """Download a file as raw bytes."""
        return self._request("GET", f"/files/{file_id}", raw=True)
