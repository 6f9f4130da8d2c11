"""Canonical navigation item shared by every stage after normalization."""

from dataclasses import dataclass, field
from typing import NotRequired, TypedDict

from portalnav.core.localization import get_localized_text
from portalnav.core.types import LocalizedText


class NavigationItemDict(TypedDict):
    """Dictionary representation of a navigation item."""

    id: str
    title: LocalizedText
    href: str
    order: int
    isActive: bool
    external: bool
    label: NotRequired[str]
    description: NotRequired[LocalizedText]
    submenu: NotRequired[list["NavigationItemDict"]]


@dataclass
class NavigationItem:
    """Render-ready navigation node.

    ``is_active`` mirrors the source's active and published flags; it is
    not the "currently selected" state, which depends on the request path
    (see ``portalnav.core.paths``). ``submenu`` is None rather than empty
    when the node has no visible children.
    """

    id: str
    title: LocalizedText = field(default_factory=dict)
    href: str = "/"
    order: int = 0
    is_active: bool = True
    external: bool = False
    description: LocalizedText | None = None
    submenu: list["NavigationItem"] | None = None

    def label(self, locale: str, default_locale: str = "en") -> str:
        """Display title for a locale."""
        return get_localized_text(self.title, locale, default_locale)

    def to_dict(self, locale: str | None = None) -> NavigationItemDict:
        """Convert to dictionary for JSON serialization.

        Args:
            locale: When given, include a ``label`` resolved for this locale

        Returns:
            Dictionary with camelCase keys, recursing into the submenu
        """
        result: NavigationItemDict = {
            "id": self.id,
            "title": dict(self.title),
            "href": self.href,
            "order": self.order,
            "isActive": self.is_active,
            "external": self.external,
        }
        if locale is not None:
            result["label"] = self.label(locale)
        if self.description is not None:
            result["description"] = dict(self.description)
        if self.submenu is not None:
            result["submenu"] = [child.to_dict(locale) for child in self.submenu]
        return result
