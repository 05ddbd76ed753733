from .settings import (
    ApiSettings,
    DatabaseSettings,
    ServerSettings,
    Settings,
    get_settings,
)

__all__ = [
    "ApiSettings",
    "DatabaseSettings",
    "ServerSettings",
    "Settings",
    "get_settings",
]
