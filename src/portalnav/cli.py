"""CLI interface for portalnav.

Command-line tool for serving and inspecting portal navigation.
"""

import asyncio
import json
import logging
import sys
from pathlib import Path

import click

from portalnav.config import Config
from portalnav.core.items import NavigationItem
from portalnav.core.paths import get_breadcrumb_trail, matches_path
from portalnav.core.records import MenuLocation
from portalnav.service import NavigationService
from portalnav.source import HttpMenuSource

_config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover portalnav.toml)",
)
_base_url_option = click.option(
    "--base-url",
    default=None,
    help="Menu API base URL (overrides config)",
)
_verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (debug logging)",
)


@click.group()
def cli() -> None:
    """portalnav - navigation menus for the public portal."""


@cli.command()
@_config_option
@_base_url_option
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@_verbose_option
def serve(
    config_path: Path | None,
    base_url: str | None,
    host: str | None,
    port: int | None,
    verbose: bool,
) -> None:
    """Start the navigation API server."""
    from portalnav.server import run_server

    _configure_logging(verbose)
    config = _load_config(config_path).with_overrides(host=host, port=port, base_url=base_url)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Menu API: {config.source.base_url}")
    click.echo(
        f"Locales: {', '.join(config.navigation.locales)} "
        f"(default: {config.navigation.default_locale})"
    )

    run_server(config)


@cli.command()
@_config_option
@_base_url_option
@click.option(
    "--location",
    "-l",
    type=click.Choice([location.value for location in MenuLocation], case_sensitive=False),
    default=MenuLocation.HEADER.value,
    show_default=True,
    help="Menu location to resolve",
)
@click.option(
    "--locale",
    default=None,
    help="Locale for labels (default: from config)",
)
@click.option(
    "--path",
    "current_path",
    default=None,
    help="Request path; marks active items with * and prints the breadcrumb trail",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the navigation as JSON",
)
@_verbose_option
def show(
    config_path: Path | None,
    base_url: str | None,
    location: str,
    locale: str | None,
    current_path: str | None,
    as_json: bool,
    verbose: bool,
) -> None:
    """Fetch navigation once and print it."""
    _configure_logging(verbose)
    config = _load_config(config_path).with_overrides(base_url=base_url)
    menu_location = MenuLocation.parse(location)

    items, effective_locale = asyncio.run(_resolve(config, menu_location, locale))

    if as_json:
        click.echo(
            json.dumps(
                [item.to_dict(effective_locale) for item in items],
                ensure_ascii=False,
                indent=2,
            )
        )
        return

    if not items:
        click.echo(click.style(f"No {menu_location.value} navigation", fg="yellow"))
        return

    _print_tree(items, effective_locale, current_path)

    if current_path is not None:
        trail = get_breadcrumb_trail(items, current_path)
        if trail:
            labels = " > ".join(item.label(effective_locale) for item in trail)
            click.echo(f"\nBreadcrumb: {labels}")
        else:
            click.echo(f"\nBreadcrumb: no menu item matches {current_path}")


async def _resolve(
    config: Config,
    location: MenuLocation,
    locale: str | None,
) -> tuple[list[NavigationItem], str]:
    from portalnav.server import create_http_client

    async with create_http_client(config.source) as client:
        service = NavigationService(
            HttpMenuSource(client, config.source.base_url),
            locales=config.navigation.locales,
            default_locale=config.navigation.default_locale,
        )
        effective_locale = service.resolve_locale(locale)
        items = await service.get_menu_navigation(location, effective_locale)
    return items, effective_locale


def _print_tree(
    items: list[NavigationItem],
    locale: str,
    current_path: str | None,
    depth: int = 0,
) -> None:
    for item in items:
        marker = "*" if current_path is not None and matches_path(item, current_path) else " "
        suffix = " (external)" if item.external else ""
        click.echo(f"{'  ' * depth}{marker} {item.label(locale)} [{item.href}]{suffix}")
        if item.submenu:
            _print_tree(item.submenu, locale, current_path, depth + 1)


def _load_config(config_path: Path | None) -> Config:
    """Load config, exiting with an error message when it is invalid."""
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
