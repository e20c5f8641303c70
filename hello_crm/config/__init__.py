from .settings import DEFAULT_PORT, Settings, get_settings

__all__ = ["DEFAULT_PORT", "Settings", "get_settings"]
