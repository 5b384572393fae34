"""Application configuration for the Sales Intel Hub.

All settings come from environment variables and have defaults, so the app
runs out of the box with no configuration at all.
"""

from __future__ import annotations

import os

_LOG_FORMATS = ("text", "json")


def _parse_origins(raw: str) -> list[str]:
    if raw.strip() == "*":
        return ["*"]
    return [o.strip() for o in raw.split(",") if o.strip()]


class AppConfig:
    """Application-level configuration loaded from environment variables.

    Environment variables:
        APP_HOST: Bind address for the dev server (default: 127.0.0.1)
        APP_PORT: Dev server port (default: 8000)
        APP_LOG_FORMAT: Logging format, "text" or "json" (default: text)
        APP_LOG_LEVEL: Root log level name (default: INFO)
        APP_CORS_ORIGINS: Comma-separated allowed origins (default: *)
        APP_TITLE: Title shown in the sidebar and the OpenAPI docs
            (default: Sales Intel Hub)

    Raises:
        ValueError: if APP_PORT is not an integer.
    """

    def __init__(self) -> None:
        self.api_host = os.getenv("APP_HOST", "127.0.0.1")
        self.api_port = int(os.getenv("APP_PORT", "8000"))
        log_format = os.getenv("APP_LOG_FORMAT", "text").strip().lower()
        self.log_format = log_format if log_format in _LOG_FORMATS else "text"
        self.log_level = os.getenv("APP_LOG_LEVEL", "INFO").strip().upper()
        self.cors_origins: list[str] = _parse_origins(
            os.getenv("APP_CORS_ORIGINS", "*")
        )
        self.title = os.getenv("APP_TITLE", "Sales Intel Hub")

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create an AppConfig instance populated from environment variables."""
        return cls()

    def to_dict(self) -> dict:
        return {
            "api_host": self.api_host,
            "api_port": self.api_port,
            "log_format": self.log_format,
            "log_level": self.log_level,
            "cors_origins": list(self.cors_origins),
            "title": self.title,
        }
