"""
Registry Configuration

Environment getters for the Discord application-command registry.
"""

import os
from typing import List, Optional

from command_sync.errors import ConfigurationError


DEFAULT_API_URL = "https://discord.com/api/v10"


def get_bot_token() -> str:
    """Get the bot token from environment.

    Raises ConfigurationError if not set.
    """
    token = os.environ.get("DISCORD_TOKEN")
    if not token:
        raise ConfigurationError(
            "DISCORD_TOKEN environment variable is required. "
            "You can find this in the Bot tab of your Discord application."
        )
    return token


def get_application_id() -> Optional[str]:
    """Get the application id, if configured. Resolved from the API otherwise."""
    return os.environ.get("DISCORD_APPLICATION_ID") or None


def get_api_url() -> str:
    """Get the Discord REST API base URL."""
    return os.environ.get("DISCORD_API_URL", DEFAULT_API_URL).rstrip("/")


def get_scoped_guilds() -> List[str]:
    """Get the guild ids commands are scoped to.

    SCOPED_GUILDS is comma-separated. Empty means global commands.
    """
    raw = os.environ.get("SCOPED_GUILDS", "")
    return [g.strip() for g in raw.split(",") if g.strip()]


def get_auth_headers(token: Optional[str] = None) -> dict:
    """Get headers for Discord REST API calls."""
    token = token or get_bot_token()
    return {
        "Authorization": f"Bot {token}",
        "Content-Type": "application/json",
    }
