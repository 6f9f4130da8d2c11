"""Request-path matching over a navigation tree.

Decides which nodes are active for the current path and derives the
breadcrumb trail to the active node.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from portalnav.core.items import NavigationItem
from portalnav.core.types import LocalizedText

ROOT_HREF = "/"


@dataclass(frozen=True)
class PathBreadcrumb:
    """Breadcrumb derived from URL segments rather than the menu tree."""

    title: LocalizedText
    href: str
    current: bool = False

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for JSON serialization."""
        return {"title": dict(self.title), "href": self.href, "current": self.current}


# Titles for well-known URL segments
_SEGMENT_TITLES: dict[str, LocalizedText] = {
    "content": {"en": "Content", "ne": "सामग्री"},
    "documents": {"en": "Documents", "ne": "कागजातहरू"},
    "search": {"en": "Search", "ne": "खोजी"},
    "office": {"en": "Office", "ne": "कार्यालय"},
    "about": {"en": "About", "ne": "बारेमा"},
    "services": {"en": "Services", "ne": "सेवाहरू"},
    "contact": {"en": "Contact", "ne": "सम्पर्क"},
    "faq": {"en": "FAQ", "ne": "बारम्बार सोधिने प्रश्नहरू"},
    "news": {"en": "News", "ne": "समाचार"},
    "notices": {"en": "Notices", "ne": "सूचनाहरू"},
    "events": {"en": "Events", "ne": "कार्यक्रमहरू"},
}

_HOME_TITLE: LocalizedText = {"en": "Home", "ne": "मुख्य पृष्ठ"}


def matches_path(item: NavigationItem, current_path: str) -> bool:
    """Exact or prefix match of an item's own href, ignoring its submenu.

    The root href only ever matches "/" itself. Other hrefs match as a raw
    string prefix, so "/cont" matches "/content-x".
    """
    if item.href == ROOT_HREF:
        return current_path == ROOT_HREF
    if current_path == item.href:
        return True
    return current_path.startswith(item.href)


def is_navigation_item_active(item: NavigationItem, current_path: str) -> bool:
    """Whether an item, or anything in its submenu, matches the current path.

    Args:
        item: Navigation item to test
        current_path: Path of the current request

    Returns:
        True if the item's href matches, or any submenu item is active
    """
    if matches_path(item, current_path):
        return True
    if item.submenu is not None:
        return any(is_navigation_item_active(child, current_path) for child in item.submenu)
    return False


def get_breadcrumb_trail(
    items: Sequence[NavigationItem],
    current_path: str,
) -> list[NavigationItem]:
    """Ancestor chain from a root down to the first directly matching node.

    Depth-first, siblings in order; the first node whose own href matches
    ends the search.

    Args:
        items: Root navigation items
        current_path: Path of the current request

    Returns:
        Items from root to the matching node, empty when nothing matches
    """
    stack: list[tuple[NavigationItem, list[NavigationItem]]] = [
        (item, []) for item in reversed(items)
    ]
    while stack:
        item, ancestors = stack.pop()
        chain = [*ancestors, item]
        if matches_path(item, current_path):
            return chain
        if item.submenu:
            stack.extend((child, chain) for child in reversed(item.submenu))
    return []


def find_navigation_item_by_href(
    items: Sequence[NavigationItem],
    href: str,
) -> NavigationItem | None:
    """First item, depth-first, whose href equals ``href`` exactly."""
    for item in items:
        if item.href == href:
            return item
        if item.submenu:
            found = find_navigation_item_by_href(item.submenu, href)
            if found is not None:
                return found
    return None


def build_path_breadcrumbs(path: str, locale: str) -> list[PathBreadcrumb]:
    """Build breadcrumbs from the segments of a URL path.

    Used when the menu tree has no node for the current page. Starts with
    a Home crumb pointing at the locale root; the locale segment itself is
    skipped.

    Args:
        path: Request path (e.g., "/en/content/notices")
        locale: Locale code the site is served in

    Returns:
        Home crumb followed by one crumb per remaining segment
    """
    segments = [segment for segment in path.split("/") if segment]
    trail_segments = [segment for segment in segments if segment != locale]

    href = f"/{locale}"
    breadcrumbs = [
        PathBreadcrumb(title=dict(_HOME_TITLE), href=href, current=not trail_segments),
    ]
    for position, segment in enumerate(trail_segments):
        href = f"{href}/{segment}"
        breadcrumbs.append(
            PathBreadcrumb(
                title=_segment_title(segment),
                href=href,
                current=position == len(trail_segments) - 1,
            )
        )
    return breadcrumbs


def _segment_title(segment: str) -> LocalizedText:
    known = _SEGMENT_TITLES.get(segment)
    if known is not None:
        return dict(known)
    readable = segment.replace("-", " ").replace("_", " ").title()
    return {"en": readable, "ne": readable}
