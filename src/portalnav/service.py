"""Navigation facade.

Single entry point for callers that need a renderable menu: fetch raw
menus, build the tree, and fall back to the static table whenever the
source is unavailable or yields nothing usable.
"""

import logging
from collections.abc import Sequence

from portalnav.core.fallback import default_fallback_navigation
from portalnav.core.items import NavigationItem
from portalnav.core.localization import DEFAULT_LOCALE
from portalnav.core.navigation import build_menu_navigation
from portalnav.core.records import MenuLocation, MenuRecord
from portalnav.source import MenuSource

logger = logging.getLogger(__name__)


class NavigationService:
    """Resolves navigation trees from a menu source.

    Each call works on its own data; the service holds no per-request
    state, so concurrent calls for different locales are independent.
    """

    def __init__(
        self,
        source: MenuSource,
        *,
        fallback: Sequence[NavigationItem] | None = None,
        locales: Sequence[str] = ("en", "ne"),
        default_locale: str = DEFAULT_LOCALE,
    ) -> None:
        """Initialize the service.

        Args:
            source: Collaborator that fetches raw menu envelopes
            fallback: Header navigation used on failure (default: built-in table)
            locales: Supported locale codes
            default_locale: Locale substituted for unsupported ones

        Raises:
            ValueError: If an injected fallback is empty
        """
        if fallback is not None and not fallback:
            raise ValueError("fallback must contain at least one item")
        self._source = source
        self._fallback = list(fallback) if fallback is not None else None
        self._locales = tuple(locales)
        self._default_locale = default_locale

    @property
    def locales(self) -> tuple[str, ...]:
        return self._locales

    @property
    def default_locale(self) -> str:
        return self._default_locale

    def resolve_locale(self, locale: str | None) -> str:
        """Return ``locale`` if supported, else the default locale."""
        if locale and locale in self._locales:
            return locale
        return self._default_locale

    def fallback_navigation(self) -> list[NavigationItem]:
        """Fresh copy of the configured fallback navigation."""
        if self._fallback is None:
            return default_fallback_navigation()
        return [_copy_item(item) for item in self._fallback]

    async def get_header_navigation(self, locale: str | None = None) -> list[NavigationItem]:
        """Header navigation for a locale; never raises.

        Args:
            locale: Requested locale code

        Returns:
            Non-empty navigation tree, from the source or the fallback table
        """
        locale = self.resolve_locale(locale)
        items = await self._resolve(MenuLocation.HEADER, locale)
        if not items:
            logger.warning(f"Using fallback header navigation (locale={locale})")
            return self.fallback_navigation()
        return items

    async def get_menu_navigation(
        self,
        location: MenuLocation,
        locale: str | None = None,
    ) -> list[NavigationItem]:
        """Navigation for any menu location; never raises.

        Unlike the header, other locations have no fallback table and
        degrade to an empty list.
        """
        if location is MenuLocation.HEADER:
            return await self.get_header_navigation(locale)
        return await self._resolve(location, self.resolve_locale(locale))

    async def _resolve(self, location: MenuLocation, locale: str) -> list[NavigationItem]:
        try:
            raw_menus = await self._source.get_menus(location)
            menus = [MenuRecord.from_dict(raw) for raw in raw_menus]
            items = build_menu_navigation(menus)
        except Exception:
            logger.exception(f"Failed to resolve {location.value} navigation (locale={locale})")
            return []

        logger.info(
            f"Resolved {len(items)} {location.value} navigation items "
            f"from {len(menus)} menus (locale={locale})"
        )
        return items


def _copy_item(item: NavigationItem) -> NavigationItem:
    return NavigationItem(
        id=item.id,
        title=dict(item.title),
        href=item.href,
        order=item.order,
        is_active=item.is_active,
        external=item.external,
        description=dict(item.description) if item.description is not None else None,
        submenu=[_copy_item(child) for child in item.submenu] if item.submenu is not None else None,
    )
