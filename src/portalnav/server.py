"""aiohttp server for portalnav.

Application factory and route registration for standalone server mode.
"""

import logging

import httpx
from aiohttp import web

from portalnav.api.config import create_config_routes
from portalnav.api.navigation import create_navigation_routes
from portalnav.app_keys import navigation_service_key
from portalnav.config import Config, SourceConfig
from portalnav.service import NavigationService
from portalnav.source import HttpMenuSource, MenuSource

logger = logging.getLogger(__name__)

http_client_key = web.AppKey("http_client", httpx.AsyncClient)


def create_app(config: Config, *, source: MenuSource | None = None) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration
        source: Menu source to use instead of the HTTP API client (for tests)

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    if source is None:
        client = create_http_client(config.source)
        app[http_client_key] = client
        app.on_cleanup.append(_close_http_client)
        source = HttpMenuSource(client, config.source.base_url)

    app[navigation_service_key] = NavigationService(
        source,
        locales=config.navigation.locales,
        default_locale=config.navigation.default_locale,
    )

    app.router.add_routes(create_navigation_routes())
    app.router.add_routes(create_config_routes())

    return app


def create_http_client(source_config: SourceConfig) -> httpx.AsyncClient:
    """Create the httpx client used to reach the menu API."""
    return httpx.AsyncClient(
        timeout=source_config.timeout,
        headers={"User-Agent": source_config.user_agent},
    )


async def _close_http_client(app: web.Application) -> None:
    """Close the menu API client on application cleanup."""
    await app[http_client_key].aclose()
    logger.debug("Closed menu API client")


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
