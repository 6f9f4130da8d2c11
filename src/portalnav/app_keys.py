"""Application keys for type-safe app configuration access."""

from aiohttp import web

from portalnav.service import NavigationService

navigation_service_key = web.AppKey("navigation_service", NavigationService)
