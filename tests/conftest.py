"""Shared test fixtures."""

import copy
from typing import Any

import pytest
from portalnav.config import Config, NavigationConfig, ServerConfig, SourceConfig
from portalnav.core.records import MenuLocation

HEADER_MENUS: list[dict[str, Any]] = [
    {
        "id": "m-about",
        "name": {"en": "About", "ne": "बारेमा"},
        "resolvedUrl": "/about",
        "order": 2,
        "isActive": True,
        "isPublished": True,
        "menuItems": [
            {
                "id": "i-history",
                "title": {"en": "History", "ne": "इतिहास"},
                "resolvedUrl": "/about/history",
                "order": 1,
                "isActive": True,
                "isPublished": True,
            },
            {
                "id": "i-staff-chief",
                "parentId": "i-staff",
                "title": {"en": "Chief Officer", "ne": "प्रमुख अधिकृत"},
                "resolvedUrl": "/about/staff/chief",
                "order": 1,
                "isActive": True,
                "isPublished": True,
            },
            {
                "id": "i-staff",
                "title": {"en": "Staff", "ne": "कर्मचारी"},
                "url": "/about/staff",
                "order": 2,
                "isActive": True,
                "isPublished": True,
            },
            {
                "id": "i-draft",
                "title": {"en": "Draft", "ne": "मस्यौदा"},
                "resolvedUrl": "/about/draft",
                "order": 3,
                "isActive": True,
                "isPublished": False,
            },
        ],
    },
    {
        "id": "m-home",
        "name": {"en": "Home", "ne": "गृह"},
        "resolvedUrl": "/",
        "order": 1,
        "isActive": True,
        "isPublished": True,
        "menuItems": [],
    },
    {
        "id": "m-unpublished",
        "name": {"en": "Unpublished", "ne": "अप्रकाशित"},
        "resolvedUrl": "/unpublished",
        "order": 0,
        "isActive": True,
        "isPublished": False,
        "menuItems": [],
    },
    {
        "id": "m-notices",
        "name": {"en": "Notices", "ne": "सूचनाहरू"},
        "resolvedUrl": "/content/notice-board",
        "order": 3,
        "isActive": True,
        "isPublished": True,
        "menuItems": [
            {
                "id": "i-portal",
                "title": {"en": "National Portal", "ne": "राष्ट्रिय पोर्टल"},
                "url": "nepal.gov.np",
                "target": "_blank",
                "order": 1,
                "isActive": True,
                "isPublished": True,
            },
        ],
    },
]


class StaticMenuSource:
    """In-memory menu source returning canned envelopes per location."""

    def __init__(self, menus: dict[MenuLocation, list[dict[str, Any]]] | None = None) -> None:
        self.menus = menus or {}
        self.calls: list[MenuLocation] = []

    async def get_menus(self, location: MenuLocation) -> list[dict[str, Any]]:
        self.calls.append(location)
        return copy.deepcopy(self.menus.get(location, []))


class FailingMenuSource:
    """Menu source whose every fetch fails."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error or ConnectionError("menu API unreachable")

    async def get_menus(self, location: MenuLocation) -> list[dict[str, Any]]:
        raise self.error


@pytest.fixture
def header_menus() -> list[dict[str, Any]]:
    return copy.deepcopy(HEADER_MENUS)


@pytest.fixture
def static_source(header_menus: list[dict[str, Any]]) -> StaticMenuSource:
    return StaticMenuSource({MenuLocation.HEADER: header_menus})


@pytest.fixture
def failing_source() -> FailingMenuSource:
    return FailingMenuSource()


@pytest.fixture
def test_config() -> Config:
    """Create a test configuration pointing at an unreachable menu API."""
    return Config(
        server=ServerConfig(),
        source=SourceConfig(base_url="http://127.0.0.1:9/api/v1", timeout=1.0),
        navigation=NavigationConfig(locales=["en", "ne"], default_locale="en"),
    )
