"""portalnav - navigation menu resolution for the public portal."""

__version__ = "0.1.0"

from portalnav.core.fallback import default_fallback_navigation
from portalnav.core.items import NavigationItem
from portalnav.core.navigation import build_menu_navigation, build_tree
from portalnav.core.normalizer import normalize, resolve_href
from portalnav.core.paths import (
    build_path_breadcrumbs,
    find_navigation_item_by_href,
    get_breadcrumb_trail,
    is_navigation_item_active,
    matches_path,
)
from portalnav.core.records import MenuItemRecord, MenuLocation, MenuRecord
from portalnav.service import NavigationService

__all__ = [
    "MenuItemRecord",
    "MenuLocation",
    "MenuRecord",
    "NavigationItem",
    "NavigationService",
    "build_menu_navigation",
    "build_path_breadcrumbs",
    "build_tree",
    "default_fallback_navigation",
    "find_navigation_item_by_href",
    "get_breadcrumb_trail",
    "is_navigation_item_active",
    "matches_path",
    "normalize",
    "resolve_href",
]
