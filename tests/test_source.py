"""Tests for the HTTP menu source."""

from typing import Any

import httpx
import pytest
from portalnav.core.records import MenuLocation
from portalnav.source import HttpMenuSource, MenuSourceError, extract_menus

MENU = {"id": "menu-1", "name": {"en": "Main"}, "menuItems": []}


def _source(handler: Any, base_url: str = "https://api.example.gov.np/api/v1/") -> HttpMenuSource:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpMenuSource(client, base_url)


class TestHttpMenuSource:
    """Tests for HttpMenuSource.get_menus()."""

    async def test__requests_location_endpoint(self) -> None:
        """Request the location endpoint and unwrap the envelope."""
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"success": True, "data": [MENU]})

        source = _source(handler)
        menus = await source.get_menus(MenuLocation.HEADER)
        await source.client.aclose()

        assert menus == [MENU]
        assert len(requests) == 1
        assert str(requests[0].url) == "https://api.example.gov.np/api/v1/menus/location/HEADER"

    async def test__server_error__raises_http_error(self) -> None:
        """Propagate HTTP failures without retrying."""
        calls = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal calls
            calls += 1
            return httpx.Response(503, text="maintenance")

        source = _source(handler)
        with pytest.raises(httpx.HTTPStatusError):
            await source.get_menus(MenuLocation.FOOTER)
        await source.client.aclose()

        assert calls == 1

    async def test__transport_error__propagates(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        source = _source(handler)
        with pytest.raises(httpx.ConnectError):
            await source.get_menus(MenuLocation.HEADER)
        await source.client.aclose()

    async def test__non_json_body__raises_source_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>oops</html>")

        source = _source(handler)
        with pytest.raises(MenuSourceError, match="not JSON"):
            await source.get_menus(MenuLocation.HEADER)
        await source.client.aclose()


class TestExtractMenus:
    """Tests for extract_menus()."""

    def test__standard_envelope(self) -> None:
        assert extract_menus({"success": True, "data": [MENU]}) == [MENU]

    def test__double_wrapped_envelope(self) -> None:
        """Unwrap ``{"data": {"data": [...]}}``."""
        assert extract_menus({"data": {"data": [MENU]}}) == [MENU]

    def test__bare_list(self) -> None:
        assert extract_menus([MENU, "junk", 3]) == [MENU]

    def test__single_menu_object(self) -> None:
        assert extract_menus({"data": MENU}) == [MENU]

    @pytest.mark.parametrize("payload", [None, {"data": None}, {"data": []}, {"data": {}}])
    def test__empty_payloads(self, payload: object) -> None:
        assert extract_menus(payload) == []

    def test__api_failure__raises_with_message(self) -> None:
        """Surface the API's own error message."""
        with pytest.raises(MenuSourceError, match="Menu not found"):
            extract_menus({"success": False, "error": {"code": "404", "message": "Menu not found"}})

    def test__api_failure_without_message(self) -> None:
        with pytest.raises(MenuSourceError, match="Menu API request failed"):
            extract_menus({"success": False})

    @pytest.mark.parametrize("payload", ["text", 42, {"data": "text"}, {"unexpected": 1}])
    def test__unknown_shape__raises(self, payload: object) -> None:
        with pytest.raises(MenuSourceError):
            extract_menus(payload)
