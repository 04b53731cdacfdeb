"""
Shared pytest fixtures for Command Sync tests

Centralized fakes for the remote registry, config, and logger so every test
exercises the real sync code against an in-memory Discord.
"""

import sys
from pathlib import Path
import pytest
from unittest.mock import Mock
from typing import Any, Dict, List, Optional, Set

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from command_sync.errors import PartitionNotFound, RemoteCallFailure
from command_sync.registry.client import RegistryClient
from command_sync.registry.models import (
    GlobalTarget,
    PartitionHandle,
    PartitionTarget,
    RemoteEntry,
)


# ============================================================================
# Mock Helper Classes
# ============================================================================

def target_key(target) -> str:
    """Key a target the same way FakeRegistry stores it."""
    if isinstance(target, PartitionTarget):
        return target.id
    return "global"


class FakeRegistry(RegistryClient):
    """
    In-memory stand-in for Discord's application-command registry.

    Records every call in `calls` as (operation, target_key, name) tuples.

    Usage:
        registry = FakeRegistry()
        registry.seed("global", [{"id": "1", "name": "ban"}])
        registry.missing_partitions.add("g1")
        registry.fail_names["kick"] = RemoteCallFailure("boom", status_code=400)
    """

    def __init__(self, guilds: Optional[Dict[str, str]] = None):
        self.entries: Dict[str, List[RemoteEntry]] = {}
        self.guilds: Dict[str, str] = dict(guilds or {})
        self.missing_partitions: Set[str] = set()
        self.fail_names: Dict[str, RemoteCallFailure] = {}
        self.fail_fetch: Dict[str, RemoteCallFailure] = {}
        self.calls: List[tuple] = []
        self._next_id = 1000

    def seed(self, key: str, rows: List[Dict[str, Any]]) -> None:
        """Pre-populate a registry with entries."""
        guild_id = None if key == "global" else key
        self.entries[key] = [
            RemoteEntry.from_row({**row, "guild_id": guild_id}) for row in rows
        ]

    def names(self, key: str) -> List[str]:
        return [e.name for e in self.entries.get(key, [])]

    def calls_of(self, operation: str) -> List[tuple]:
        return [c for c in self.calls if c[0] == operation]

    def _new_id(self) -> str:
        self._next_id += 1
        return str(self._next_id)

    async def fetch_all(self, target) -> List[RemoteEntry]:
        key = target_key(target)
        self.calls.append(("fetch_all", key, None))
        if key in self.fail_fetch:
            raise self.fail_fetch[key]
        # Copies, so later mutations never leak into a caller's snapshot
        return [
            RemoteEntry(e.id, e.name, e.description, e.type, list(e.options), e.application_id, e.guild_id)
            for e in self.entries.get(key, [])
        ]

    async def create(self, target, payload: Dict[str, Any]) -> RemoteEntry:
        key = target_key(target)
        self.calls.append(("create", key, payload["name"]))
        if payload["name"] in self.fail_names:
            raise self.fail_names[payload["name"]]
        entry = RemoteEntry.from_row({
            **payload,
            "id": self._new_id(),
            "guild_id": None if key == "global" else key,
        })
        self.entries.setdefault(key, []).append(entry)
        return entry

    async def edit(self, entry: RemoteEntry, payload: Dict[str, Any]) -> RemoteEntry:
        key = entry.guild_id or "global"
        self.calls.append(("edit", key, payload["name"]))
        if payload["name"] in self.fail_names:
            raise self.fail_names[payload["name"]]
        stored = self.entries.get(key, [])
        for i, existing in enumerate(stored):
            if existing.id == entry.id:
                stored[i] = RemoteEntry.from_row({**payload, "id": entry.id, "guild_id": entry.guild_id})
                return stored[i]
        raise RemoteCallFailure(f"Unknown command {entry.id}", status_code=404)

    async def resolve_partition(self, partition_id: str) -> PartitionHandle:
        self.calls.append(("resolve_partition", partition_id, None))
        if partition_id in self.missing_partitions:
            raise PartitionNotFound(partition_id)
        return PartitionHandle(id=partition_id, name=self.guilds.get(partition_id, ""))


class StaticLoader:
    """Loader stand-in that yields a fixed list of definitions once."""

    def __init__(self, definitions):
        self.definitions = list(definitions)
        self.discover_calls = 0

    async def discover(self):
        self.discover_calls += 1
        for definition in self.definitions:
            yield definition


def write_command(directory: Path, filename: str, body: str) -> Path:
    """Write a command module to disk and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_text(body)
    return path


# ============================================================================
# Base Fixtures
# ============================================================================

@pytest.fixture
def mock_config(tmp_path):
    """
    Standard mock configuration for all tests.

    Provides all required Config attributes with sensible defaults.
    """
    from command_sync.config.settings import Config

    config = Mock(spec=Config)
    config.environment = "test"
    config.log_level = "DEBUG"
    config.token = "test-token"
    config.application_id = "42"
    config.api_url = "https://discord.test/api/v10"
    config.commands_path = tmp_path / "commands"
    config.scoped_guilds = []
    config.request_timeout = 5.0
    config.is_production = False
    config.is_global = True
    return config


@pytest.fixture
def logger():
    """
    Standard mock logger for all tests.
    """
    from command_sync.utils.logger import Logger
    return Mock(spec=Logger)


@pytest.fixture
def fake_registry():
    """
    In-memory registry with two known guilds.

    Usage:
        def test_something(fake_registry):
            fake_registry.seed("global", [{"id": "1", "name": "ban"}])
    """
    return FakeRegistry(guilds={"g1": "Guild One", "g2": "Guild Two"})
