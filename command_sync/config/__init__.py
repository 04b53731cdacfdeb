"""
Config Module
Configuration management.
"""

from .settings import ConfigManager, Config
from .registry import (
    get_bot_token,
    get_application_id,
    get_api_url,
    get_scoped_guilds,
    get_auth_headers,
)

__all__ = [
    "ConfigManager",
    "Config",
    "get_bot_token",
    "get_application_id",
    "get_api_url",
    "get_scoped_guilds",
    "get_auth_headers",
]
