"""Configuration management for portalnav.

Supports TOML configuration format with auto-discovery.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from portalnav import __version__
from portalnav.source import DEFAULT_BASE_URL

CONFIG_FILENAME = "portalnav.toml"


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class SourceConfig:
    """Menu source API configuration."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0
    user_agent: str = f"portalnav/{__version__}"


@dataclass
class NavigationConfig:
    """Navigation locale configuration."""

    locales: list[str] = field(default_factory=lambda: ["en", "ne"])
    default_locale: str = "en"


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    source: SourceConfig
    navigation: NavigationConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for portalnav.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls.default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def default(cls) -> "Config":
        """Create config with all defaults."""
        return cls(
            server=ServerConfig(),
            source=SourceConfig(),
            navigation=NavigationConfig(),
        )

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents.

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a specific file.

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        return cls(
            server=cls._parse_server(data.get("server")),
            source=cls._parse_source(data.get("source")),
            navigation=cls._parse_navigation(data.get("navigation")),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if isinstance(port, bool) or not isinstance(port, int):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_source(cls, data: object) -> SourceConfig:
        """Parse source configuration section.

        Args:
            data: Raw source section data

        Returns:
            SourceConfig instance
        """
        if data is None:
            return SourceConfig()

        if not isinstance(data, dict):
            raise ValueError("source section must be a dictionary")

        defaults = SourceConfig()

        base_url = data.get("base_url", defaults.base_url)
        if not isinstance(base_url, str) or not base_url:
            raise ValueError("source.base_url must be a non-empty string")

        timeout = data.get("timeout", defaults.timeout)
        if isinstance(timeout, bool) or not isinstance(timeout, int | float):
            raise ValueError("source.timeout must be a number")
        if timeout <= 0:
            raise ValueError("source.timeout must be positive")

        user_agent = data.get("user_agent", defaults.user_agent)
        if not isinstance(user_agent, str):
            raise ValueError("source.user_agent must be a string")

        return SourceConfig(base_url=base_url, timeout=float(timeout), user_agent=user_agent)

    @classmethod
    def _parse_navigation(cls, data: object) -> NavigationConfig:
        """Parse navigation configuration section.

        Args:
            data: Raw navigation section data

        Returns:
            NavigationConfig instance
        """
        if data is None:
            return NavigationConfig()

        if not isinstance(data, dict):
            raise ValueError("navigation section must be a dictionary")

        locales_raw = data.get("locales", ["en", "ne"])
        if not isinstance(locales_raw, list) or not locales_raw:
            raise ValueError("navigation.locales must be a non-empty list")
        locales: list[str] = []
        for item in locales_raw:
            if not isinstance(item, str):
                raise ValueError("navigation.locales items must be strings")
            locales.append(item)

        default_locale = data.get("default_locale", locales[0])
        if not isinstance(default_locale, str):
            raise ValueError("navigation.default_locale must be a string")
        if default_locale not in locales:
            raise ValueError("navigation.default_locale must be one of navigation.locales")

        return NavigationConfig(locales=locales, default_locale=default_locale)

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        base_url: str | None = None,
        default_locale: str | None = None,
    ) -> "Config":
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            base_url: Override source.base_url
            default_locale: Override navigation.default_locale

        Returns:
            New Config instance with overrides applied

        Raises:
            ValueError: If default_locale is not a configured locale
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        source = self.source
        if base_url is not None:
            source = replace(self.source, base_url=base_url)

        navigation = self.navigation
        if default_locale is not None:
            if default_locale not in self.navigation.locales:
                raise ValueError(f"Unsupported locale: {default_locale}")
            navigation = replace(self.navigation, default_locale=default_locale)

        return replace(self, server=server, source=source, navigation=navigation)
