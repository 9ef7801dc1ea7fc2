"""
JSON client for the HSM REST backend.

The base URL is passed in per client, so several environments (or
tests) can run side by side. Non-2xx responses become ``ApiError``
carrying the server's ``message``. There is no retry: callers report
the failure and let the user try again.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

import httpx
from pydantic import ValidationError

from hsm_booking.config import settings
from hsm_booking.logging_context import get_session_logger

logger = get_session_logger(__name__)

FALLBACK_ERROR = "Request failed"
UNPARSEABLE_ERROR = "An error occurred"
UNEXPECTED_RESPONSE = "Unexpected response from server"

T = TypeVar("T")


class ApiError(Exception):
    """A backend call failed. ``status_code`` is None when no HTTP error status applies."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return UNPARSEABLE_ERROR
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return FALLBACK_ERROR


class ApiClient:
    """Thin wrapper over ``httpx.Client`` speaking JSON to the backend."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        self.base_url = (base_url or settings.api.base_url).rstrip("/")
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else settings.api.timeout_seconds,
            transport=transport,
            headers={"Content-Type": "application/json", **(headers or {})},
        )

    def request(
        self,
        method: str,
        endpoint: str,
        json: Any = None,
        params: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Send a request and return the decoded JSON body (None when empty)."""
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        logger.debug("%s %s", method, endpoint)
        try:
            response = self._client.request(method, endpoint, json=json, params=params or None)
        except httpx.HTTPError as exc:
            logger.error("%s %s failed: %s", method, endpoint, exc)
            raise ApiError(f"Network error: {exc}") from exc

        if response.is_error:
            message = _error_message(response)
            logger.warning(
                "%s %s returned %d: %s", method, endpoint, response.status_code, message
            )
            raise ApiError(message, status_code=response.status_code)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(UNPARSEABLE_ERROR, status_code=response.status_code) from exc

    def get(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> Any:
        return self.request("GET", endpoint, params=params)

    def post(self, endpoint: str, data: Any = None) -> Any:
        return self.request("POST", endpoint, json=data)

    def put(self, endpoint: str, data: Any = None) -> Any:
        return self.request("PUT", endpoint, json=data)

    def patch(self, endpoint: str, data: Any = None) -> Any:
        return self.request("PATCH", endpoint, json=data)

    def delete(self, endpoint: str) -> Any:
        return self.request("DELETE", endpoint)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> ApiClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def parse_response(parser: Callable[[Any], T], payload: Any, endpoint: str) -> T:
    """Apply ``parser`` to a decoded body, reporting shape mismatches as ``ApiError``.

    A 2xx body that does not fit the expected model is a failed call as
    far as the user is concerned, even if the server did the work.
    """
    try:
        return parser(payload)
    except ValidationError as exc:
        logger.error("Unexpected response from %s: %s", endpoint, exc)
        raise ApiError(UNEXPECTED_RESPONSE) from exc
