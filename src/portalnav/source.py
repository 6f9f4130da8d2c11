"""Menu source client.

Fetches raw menu envelopes for a menu location from the portal's public
API. This module only fetches and unwraps; it never builds navigation.
"""

import logging
from collections.abc import Mapping
from typing import Any, Protocol

import httpx

from portalnav.core.records import MenuLocation

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3000/api/v1"


class MenuSourceError(Exception):
    """Raised when the menu source answers with an unusable payload."""


class MenuSource(Protocol):
    """Anything that can deliver raw menu envelopes for a location."""

    async def get_menus(self, location: MenuLocation) -> list[dict[str, Any]]: ...


class HttpMenuSource:
    """Async HTTP client for the public menu API."""

    def __init__(self, client: httpx.AsyncClient, base_url: str = DEFAULT_BASE_URL):
        """Initialize menu source.

        Args:
            client: httpx AsyncClient (timeouts and headers are set by the caller)
            base_url: API base URL (e.g., http://localhost:3000/api/v1)
        """
        self.client = client
        self.base_url = base_url.rstrip("/")

    async def get_menus(self, location: MenuLocation) -> list[dict[str, Any]]:
        """Fetch menu envelopes for a location.

        A single request is made; retrying is left to the caller.

        Args:
            location: Menu location (e.g., MenuLocation.HEADER)

        Returns:
            Raw menu envelope objects, possibly empty

        Raises:
            httpx.HTTPError: If the request fails
            MenuSourceError: If the response body has an unexpected shape
        """
        url = f"{self.base_url}/menus/location/{location.value}"
        logger.info(f"Fetching {location.value} menus")
        logger.debug(f"Menu URL: {url}")

        response = await self.client.get(url, headers={"Accept": "application/json"})
        if response.status_code >= 400:
            logger.error(f"Error response: {response.text}")
        response.raise_for_status()

        try:
            payload = response.json()
        except ValueError as e:
            raise MenuSourceError(f"Menu response is not JSON: {e}") from e

        menus = extract_menus(payload)
        logger.info(f"Received {len(menus)} {location.value} menus")
        return menus


def extract_menus(payload: object) -> list[dict[str, Any]]:
    """Unwrap menu envelopes from an API response body.

    Handles ``{"data": [...]}``, ``{"data": {"data": [...]}}``, a bare list,
    and a single menu object.

    Args:
        payload: Decoded JSON body

    Returns:
        List of menu envelope objects

    Raises:
        MenuSourceError: If the API reports failure or the shape is unknown
    """
    data = payload
    for _ in range(2):
        if not isinstance(data, Mapping):
            break
        if data.get("success") is False:
            raise MenuSourceError(_error_message(data))
        if "data" not in data:
            break
        data = data["data"]

    if data is None:
        return []
    if isinstance(data, list):
        return [dict(menu) for menu in data if isinstance(menu, Mapping)]
    if isinstance(data, Mapping):
        if "id" in data or "menuItems" in data:
            return [dict(data)]
        if not data:
            return []
    raise MenuSourceError(f"Unexpected menu payload type: {type(data).__name__}")


def _error_message(data: Mapping[str, Any]) -> str:
    error = data.get("error")
    if isinstance(error, Mapping):
        error = error.get("message")
    if isinstance(error, str) and error:
        return error
    message = data.get("message")
    if isinstance(message, str) and message:
        return message
    return "Menu API request failed"
