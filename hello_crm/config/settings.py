"""
Server configuration for the Hello CRM greeter.
Values come from the environment (optionally seeded from a .env file by the
entrypoint) and fall back to the fixed defaults below.
"""

import os
from typing import Optional

DEFAULT_HOST: str = "0.0.0.0"
DEFAULT_PORT: int = 3000
DEFAULT_LOG_LEVEL: str = "info"

# Level names uvicorn accepts for its --log-level option
LOG_LEVELS = ("critical", "error", "warning", "info", "debug", "trace")


class Settings:
    """Listener and logging settings, resolved once at startup."""

    def __init__(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        log_level: Optional[str] = None,
    ):
        self.host: str = host if host is not None else os.getenv("APP_HOST", DEFAULT_HOST)
        self.port: int = _parse_port(port if port is not None else os.getenv("APP_PORT", str(DEFAULT_PORT)))
        self.log_level: str = _parse_log_level(
            log_level if log_level is not None else os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)
        )

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def __repr__(self) -> str:
        return f"Settings(host={self.host!r}, port={self.port}, log_level={self.log_level!r})"


def _parse_port(value) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"APP_PORT must be an integer, got {value!r}")
    if not 0 <= port <= 65535:
        raise ValueError(f"APP_PORT out of range: {port} (expected 0-65535)")
    return port


def _parse_log_level(value: str) -> str:
    level = (value or "").strip().lower()
    if level not in LOG_LEVELS:
        raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
    return level


def get_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings()


if __name__ == "__main__":
    # Debug: print resolved configuration
    print(f"Resolved settings: {get_settings()!r}")
