"""
Registry Module
Remote application-command registry access.
"""

from .client import RegistryClient, DiscordRegistryClient
from .models import (
    ApplicationCommandType,
    GlobalTarget,
    PartitionHandle,
    PartitionTarget,
    RemoteEntry,
    Target,
)

__all__ = [
    "RegistryClient",
    "DiscordRegistryClient",
    "ApplicationCommandType",
    "GlobalTarget",
    "PartitionHandle",
    "PartitionTarget",
    "RemoteEntry",
    "Target",
]
