"""Centralized configuration settings."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

# Fixed location of the translation bundles; intentionally not overridable
TRANSLATIONS_DIR = Path(__file__).resolve().parent.parent / "translations"


@dataclass
class ServerSettings:
    """Settings for the translation server."""
    host: str = "127.0.0.1"
    port: int = 3001
    # Single origin allowed by the CORS policy
    allowed_origin: str = "http://localhost:3000"
    cache_max_age: int = 3600  # seconds


@dataclass
class LanguageSettings:
    """Settings for language routing."""
    default_language: str = "en"
    # Languages offered by the header switcher
    switcher_languages: list[str] = field(default_factory=lambda: ["en", "fr"])


@dataclass
class ClientSettings:
    """Settings for the translation client."""
    server_url: str = "http://localhost:3001"
    request_timeout: int = 15
    max_workers: int = 2


@dataclass
class Settings:
    """Main application settings container."""
    server: ServerSettings = field(default_factory=ServerSettings)
    languages: LanguageSettings = field(default_factory=LanguageSettings)
    client: ClientSettings = field(default_factory=ClientSettings)

    debug: bool = False
    log_level: str = "INFO"

    def __post_init__(self):
        """Load settings from environment variables."""
        self.debug = os.environ.get("LANGROUTE_DEBUG", "").lower() in ("true", "1", "yes")
        if log_level := os.environ.get("LANGROUTE_LOG_LEVEL"):
            self.log_level = log_level.upper()
        elif self.debug:
            self.log_level = "DEBUG"

        # Server overrides
        if host := os.environ.get("LANGROUTE_HOST"):
            self.server.host = host
        if port := os.environ.get("LANGROUTE_PORT"):
            self.server.port = int(port)
        if origin := os.environ.get("LANGROUTE_ALLOWED_ORIGIN"):
            self.server.allowed_origin = origin.rstrip("/")

        # Client overrides
        if server_url := os.environ.get("LANGROUTE_SERVER_URL"):
            self.client.server_url = server_url.rstrip("/")
        if timeout := os.environ.get("LANGROUTE_REQUEST_TIMEOUT"):
            self.client.request_timeout = int(timeout)


# Global settings instance
settings = Settings()
