"""Navigation API endpoints.

Provides the navigation tree, the breadcrumb trail, and the active root
items for a request path.
"""

from aiohttp import web

from portalnav.app_keys import navigation_service_key
from portalnav.core.paths import (
    build_path_breadcrumbs,
    get_breadcrumb_trail,
    is_navigation_item_active,
)
from portalnav.core.records import MenuLocation


def create_navigation_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/navigation", get_navigation),
        web.get("/api/navigation/breadcrumbs", get_breadcrumbs),
        web.get("/api/navigation/active", get_active),
    ]


async def get_navigation(request: web.Request) -> web.Response:
    service = request.app[navigation_service_key]
    locale = service.resolve_locale(request.query.get("locale"))

    raw_location = request.query.get("location", MenuLocation.HEADER.value)
    try:
        location = MenuLocation.parse(raw_location)
    except ValueError:
        return web.json_response(
            {"error": "Unknown menu location", "location": raw_location},
            status=400,
        )

    items = await service.get_menu_navigation(location, locale)
    return web.json_response(
        {
            "location": location.value,
            "locale": locale,
            "items": [item.to_dict(locale) for item in items],
        }
    )


async def get_breadcrumbs(request: web.Request) -> web.Response:
    service = request.app[navigation_service_key]
    locale = service.resolve_locale(request.query.get("locale"))

    path = request.query.get("path")
    if not path:
        return web.json_response({"error": "Missing path parameter"}, status=400)

    items = await service.get_header_navigation(locale)
    trail = get_breadcrumb_trail(items, path)
    if trail:
        # Crumbs carry no nested submenu
        crumbs = [item.to_dict(locale) for item in trail]
        for crumb in crumbs:
            crumb.pop("submenu", None)
        source = "menu"
    else:
        crumbs = [crumb.to_dict() for crumb in build_path_breadcrumbs(path, locale)]
        source = "path"

    return web.json_response(
        {"path": path, "locale": locale, "source": source, "items": crumbs},
    )


async def get_active(request: web.Request) -> web.Response:
    service = request.app[navigation_service_key]
    locale = service.resolve_locale(request.query.get("locale"))

    path = request.query.get("path")
    if not path:
        return web.json_response({"error": "Missing path parameter"}, status=400)

    items = await service.get_header_navigation(locale)
    active_ids = [item.id for item in items if is_navigation_item_active(item, path)]
    return web.json_response({"path": path, "activeIds": active_ids})
