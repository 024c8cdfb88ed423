"""World Cup Winners API client.

This module defines a small client wrapper around the winners
service.  The client uses the ``requests`` library internally and
exposes one method per operation:

* :meth:`ping` – check that the service is up.
* :meth:`list_winners` – return every winner, optionally for one year.
* :meth:`add_winner` – append a new winner (needs the access token).

Failures never raise.  Methods return a tuple ``(result, error)``
where ``error`` is ``None`` on success or a dictionary with keys
``status_code`` and ``message`` describing the issue.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ACCESS_TOKEN_HEADER = "X-ACCESS-TOKEN"

# Messages for status codes the service answers with an empty body.
_STATUS_MESSAGES = {
    400: "Invalid year filter",
    401: "Invalid access token",
    405: "Method not allowed",
    422: "Winner rejected",
}


class WorldCupWinnersAPI:
    """Client for interacting with the World Cup Winners API."""

    def __init__(
        self,
        *,
        base_url: str,
        access_token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            access_token: Optional access token.  Required only for
                :meth:`add_winner`; sent in the ``X-ACCESS-TOKEN`` header.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds for every request.
        """
        self.base_url = base_url.rstrip("/")
        self.access_token = access_token
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None, authenticated: bool = False,
    ) -> Tuple[Optional[requests.Response], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(response, error)``.  On failure ``response`` is
            ``None`` and ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if authenticated and self.access_token:
            headers[ACCESS_TOKEN_HEADER] = self.access_token
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
            return response, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = _STATUS_MESSAGES.get(status, "")
            if exc.response is not None and exc.response.content:
                try:
                    err_json = exc.response.json()
                except ValueError:
                    message = exc.response.text or message
                else:
                    if isinstance(err_json, dict):
                        message = err_json.get("detail") or message
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def ping(self) -> bool:
        """Return ``True`` when the service answers its liveness probe."""
        response, error = self._request("GET", "/")
        return error is None and response.status_code == 204

    def list_winners(self, year: Optional[int] = None) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve the winners, optionally only those of ``year``.

        Returns:
            A tuple ``(winners, error)``.  ``winners`` is empty on
            failure.
        """
        params = {"year": year} if year is not None else None
        response, error = self._request("GET", "/winners", params=params)
        if error:
            return [], error
        try:
            data = response.json()
        except ValueError:
            return [], {"status_code": response.status_code, "message": "Response is not valid JSON"}
        if not isinstance(data, dict) or not isinstance(data.get("winners"), list):
            return [], {"status_code": response.status_code, "message": "Unexpected response shape"}
        return data["winners"], None

    def add_winner(self, country: str, year: int) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Append a new winner.

        Args:
            country: Name of the winning country.
            year: Tournament year; must be after the latest stored one.
        Returns:
            A tuple ``(created, error)``.
        """
        if not self.access_token:
            logger.warning("No access token configured; cannot add winners")
            return False, {"status_code": None, "message": "No access token configured"}
        _, error = self._request(
            "POST",
            "/winners",
            json_body={"country": country, "year": year},
            authenticated=True,
        )
        if error:
            return False, error
        return True, None
