"""
Settings
Configuration management for Command Sync.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from command_sync.config.registry import (
    get_api_url,
    get_application_id,
    get_bot_token,
    get_scoped_guilds,
)
from command_sync.errors import ConfigurationError

# Load .env file
load_dotenv()


DEFAULT_COMMANDS_PATH = "commands"
DEFAULT_REQUEST_TIMEOUT = 15.0


@dataclass
class Config:
    """Sync configuration."""
    environment: str = "development"
    log_level: str = "DEBUG"
    token: str = ""
    application_id: Optional[str] = None
    api_url: str = ""  # Set in __post_init__
    commands_path: Path = Path(DEFAULT_COMMANDS_PATH)
    scoped_guilds: List[str] = field(default_factory=list)
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    def __post_init__(self):
        if not self.api_url:
            self.api_url = get_api_url()
        self.commands_path = Path(self.commands_path)

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_global(self) -> bool:
        return not self.scoped_guilds


def _parse_timeout(raw: Optional[str]) -> float:
    if not raw:
        return DEFAULT_REQUEST_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigurationError(f"REQUEST_TIMEOUT must be a number, got {raw!r}")
    if timeout <= 0:
        raise ConfigurationError(f"REQUEST_TIMEOUT must be positive, got {raw!r}")
    return timeout


class ConfigManager:
    """Configuration manager - loads and provides config."""

    _instance: Optional["ConfigManager"] = None

    def __init__(self):
        self._config: Optional[Config] = None

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def load(self) -> Config:
        """Load configuration from environment."""
        env = os.getenv("ENVIRONMENT", "development")
        self._config = Config(
            environment=env,
            log_level=os.getenv("LOG_LEVEL", "DEBUG" if env != "production" else "INFO"),
            token=get_bot_token(),
            application_id=get_application_id(),
            api_url=get_api_url(),
            commands_path=Path(os.getenv("COMMANDS_PATH", DEFAULT_COMMANDS_PATH)),
            scoped_guilds=get_scoped_guilds(),
            request_timeout=_parse_timeout(os.getenv("REQUEST_TIMEOUT")),
        )
        return self._config

    def get(self) -> Config:
        """Get current configuration."""
        if self._config is None:
            # Create default config if not loaded
            self._config = Config()
        return self._config
