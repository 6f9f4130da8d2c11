"""Raw menu records as delivered by the menu source.

Records arrive with heterogeneous field names depending on the endpoint
that produced them. Parsing here is lenient: unknown or mistyped fields
fall back to conservative defaults instead of raising, so one bad record
never takes the whole menu down.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from portalnav.core.types import LocalizedText


class MenuLocation(Enum):
    """Placement slot a menu is requested for."""

    HEADER = "HEADER"
    FOOTER = "FOOTER"
    SIDEBAR = "SIDEBAR"
    TOP = "TOP"

    @classmethod
    def parse(cls, value: str) -> "MenuLocation":
        """Parse a location name case-insensitively.

        Raises:
            ValueError: If the name is not a known location
        """
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise ValueError(f"Unknown menu location: {value!r}") from None


@dataclass(frozen=True)
class MenuItemRecord:
    """Single menu item as stored by the source, optionally pointing at a parent."""

    id: str
    title: LocalizedText = field(default_factory=dict)
    url: str | None = None
    resolved_url: str | None = None
    order: int | None = None
    is_active: bool = False
    is_published: bool = False
    parent_id: str | None = None
    target: str | None = None
    description: LocalizedText | None = None
    children: tuple["MenuItemRecord", ...] = ()

    @property
    def is_visible(self) -> bool:
        """Whether the record is both active and published."""
        return self.is_active and self.is_published

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MenuItemRecord":
        """Build a record from a raw JSON object.

        Args:
            data: Raw menu item object from the source

        Returns:
            MenuItemRecord with defaults for missing or mistyped fields
        """
        raw_children = data.get("children")
        children: tuple[MenuItemRecord, ...] = ()
        if isinstance(raw_children, list):
            children = tuple(
                cls.from_dict(child) for child in raw_children if isinstance(child, Mapping)
            )

        return cls(
            id=_identifier(data.get("id")),
            title=_text_map(_first(data, "title", "name", "label")),
            url=_optional_str(_first(data, "url", "link", "href")),
            resolved_url=_optional_str(_first(data, "resolvedUrl", "resolved_url")),
            order=_order(data.get("order")),
            is_active=_flag(_first(data, "isActive", "is_active")),
            is_published=_flag(_first(data, "isPublished", "is_published")),
            parent_id=_parent_id(_first(data, "parentId", "parent_id", "parent")),
            target=_optional_str(data.get("target")),
            description=_optional_text_map(data.get("description")),
            children=children,
        )


@dataclass(frozen=True)
class MenuRecord:
    """Menu envelope: a named menu with its embedded flat item list."""

    id: str
    name: LocalizedText = field(default_factory=dict)
    url: str | None = None
    resolved_url: str | None = None
    order: int | None = None
    is_active: bool = False
    is_published: bool = False
    location: str | None = None
    description: LocalizedText | None = None
    menu_items: tuple[MenuItemRecord, ...] = ()

    @property
    def is_visible(self) -> bool:
        """Whether the menu is both active and published."""
        return self.is_active and self.is_published

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MenuRecord":
        """Build a menu envelope from a raw JSON object."""
        raw_items = _first(data, "menuItems", "menu_items", "items")
        menu_items: tuple[MenuItemRecord, ...] = ()
        if isinstance(raw_items, list):
            menu_items = tuple(
                MenuItemRecord.from_dict(item) for item in raw_items if isinstance(item, Mapping)
            )

        return cls(
            id=_identifier(data.get("id")),
            name=_text_map(_first(data, "name", "title")),
            url=_optional_str(_first(data, "url", "link")),
            resolved_url=_optional_str(_first(data, "resolvedUrl", "resolved_url")),
            order=_order(data.get("order")),
            is_active=_flag(_first(data, "isActive", "is_active")),
            is_published=_flag(_first(data, "isPublished", "is_published")),
            location=_optional_str(data.get("location")),
            description=_optional_text_map(data.get("description")),
            menu_items=menu_items,
        )


def _first(data: Mapping[str, Any], *keys: str) -> Any:
    """Return the value of the first present, non-null key."""
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return None


def _identifier(value: object) -> str:
    if value is None or isinstance(value, bool):
        return ""
    return str(value)


def _parent_id(value: object) -> str | None:
    if isinstance(value, Mapping):
        value = value.get("id")
    if value is None or isinstance(value, bool):
        return None
    parent = str(value)
    return parent or None


def _text_map(value: object) -> LocalizedText:
    # Plain strings come from sources without translations
    if isinstance(value, str):
        return {"en": value}
    if isinstance(value, Mapping):
        return {str(k): v for k, v in value.items() if isinstance(v, str)}
    return {}


def _optional_text_map(value: object) -> LocalizedText | None:
    if value is None:
        return None
    return _text_map(value) or None


def _optional_str(value: object) -> str | None:
    return value if isinstance(value, str) else None


def _order(value: object) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _flag(value: object) -> bool:
    return value is True
