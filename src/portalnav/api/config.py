"""Config API endpoint."""

from aiohttp import web

from portalnav.app_keys import navigation_service_key


def create_config_routes() -> list[web.RouteDef]:
    return [web.get("/api/config", get_config)]


async def get_config(request: web.Request) -> web.Response:
    service = request.app[navigation_service_key]
    return web.json_response(
        {"locales": list(service.locales), "defaultLocale": service.default_locale},
    )
