"""
Registry Models
The remote application-command registry's view of commands and targets.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Optional, Union, cast

# Type alias for Discord API JSON objects
Row = Dict[str, Any]


def get_rows(data: Any) -> List[Row]:
    """Safely extract rows from an API response body."""
    if isinstance(data, list):
        return cast(List[Row], [r for r in data if isinstance(r, dict)])
    return []


class ApplicationCommandType(IntEnum):
    """Discord application command types."""
    CHAT_INPUT = 1
    USER = 2
    MESSAGE = 3


@dataclass(frozen=True)
class GlobalTarget:
    """The application's single global command registry."""

    def __str__(self) -> str:
        return "global"


@dataclass(frozen=True)
class PartitionTarget:
    """One guild's command registry."""
    id: str

    def __str__(self) -> str:
        return f"guild {self.id}"


Target = Union[GlobalTarget, PartitionTarget]


@dataclass(frozen=True)
class PartitionHandle:
    """A guild that has been resolved and is reachable by the bot."""
    id: str
    name: str = ""


@dataclass(slots=True)
class RemoteEntry:
    """A command as currently registered with Discord."""
    id: str
    name: str
    description: str = ""
    type: int = ApplicationCommandType.CHAT_INPUT
    options: List[Row] = field(default_factory=list)
    application_id: Optional[str] = None
    guild_id: Optional[str] = None

    @classmethod
    def from_row(cls, row: Row) -> "RemoteEntry":
        """Build RemoteEntry from an API response object."""
        return cls(
            id=str(row.get("id", "")),
            name=str(row.get("name", "")),
            description=str(row.get("description") or ""),
            type=int(row.get("type", ApplicationCommandType.CHAT_INPUT)),
            options=list(row.get("options") or []),
            application_id=row.get("application_id"),
            guild_id=row.get("guild_id"),
        )
