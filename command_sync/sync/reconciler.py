"""
Registry Reconciler

Brings one or more remote command registries in line with the local
command definitions.

Per target, the registry is fetched exactly once and indexed by name. Each
definition is then either created (no entry with that name) or edited in
full (entry found). Edits are never diffed against the remote copy: every
matched command is re-sent on every pass, which also overwrites changes made
out of band.
"""

from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence

from command_sync.definitions.models import CommandDefinition, CommandType
from command_sync.errors import RemoteCallFailure, SyncError
from command_sync.registry.client import RegistryClient
from command_sync.registry.models import (
    ApplicationCommandType,
    PartitionTarget,
    RemoteEntry,
    Target,
)
from command_sync.sync.options import PLACEHOLDER_DESCRIPTION, transform_options
from command_sync.sync.results import SyncReport, SyncResult, TargetFailure
from command_sync.sync.scope import SyncScope, resolve_targets
from command_sync.utils.logger import Logger


COMMAND_TYPES = {
    CommandType.SLASH: ApplicationCommandType.CHAT_INPUT,
    CommandType.BOTH: ApplicationCommandType.CHAT_INPUT,
    CommandType.CONTEXT_USER: ApplicationCommandType.USER,
    CommandType.CONTEXT_MESSAGE: ApplicationCommandType.MESSAGE,
}


def build_payload(definition: CommandDefinition, name: str) -> Dict[str, Any]:
    """Build the create/edit body for a publishable definition."""
    payload: Dict[str, Any] = {
        "name": name,
        "description": definition.description or PLACEHOLDER_DESCRIPTION,
        "type": int(COMMAND_TYPES[definition.kind]),
    }
    options = transform_options(definition)
    if options is not None:
        payload["options"] = options
    return payload


class RegistryReconciler:
    """Creates or updates commands in every registry of a scope."""

    def __init__(self, client: RegistryClient, scope: Optional[SyncScope] = None, logger: Optional[Logger] = None):
        self.client = client
        self.scope = scope or SyncScope.global_()
        self.logger = logger or Logger("registry-reconciler")

    def _debug(self, message: str):
        self.logger.debug(message)

    @property
    def targets(self) -> List[Target]:
        return resolve_targets(self.scope)

    async def _describe_target(self, target: Target) -> str:
        """Resolve a guild target (raising PartitionNotFound) and label it for logs."""
        if isinstance(target, PartitionTarget):
            guild = await self.client.resolve_partition(target.id)
            return f"guild {guild.name} ({guild.id})" if guild.name else f"guild {guild.id}"
        return "global"

    async def _fetch_lookup(self, target: Target, label: str) -> Mapping[str, RemoteEntry]:
        """Snapshot a target's registry as a read-only name index."""
        self._debug(f"Fetching {label} commands...")
        entries = await self.client.fetch_all(target)
        return MappingProxyType({entry.name: entry for entry in entries})

    async def reconcile(self, target: Target, definitions: Sequence[CommandDefinition]) -> List[SyncResult]:
        """
        Sync definitions into a single target.

        Raises:
            PartitionNotFound: the guild cannot be resolved.
            RemoteCallFailure: the initial fetch failed.

        Failures creating or editing one command are recorded and do not
        stop the remaining commands.
        """
        label = await self._describe_target(target)
        lookup = await self._fetch_lookup(target, label)
        target_name = str(target)

        results: List[SyncResult] = []
        seen = set()
        for definition in definitions:
            try:
                name = definition.resolved_name
            except ValueError as e:
                results.append(SyncResult.skipped("<unnamed>", str(e), target=target_name))
                continue

            if name in seen:
                self._debug(f"Skipping duplicate command {name} in {label}")
                results.append(SyncResult.skipped(name, "duplicate name", target=target_name))
                continue
            seen.add(name)

            self._debug(f"Checking if {name} is already registered")
            results.append(await self._sync_one(target, label, definition, name, lookup.get(name)))

        return results

    async def _sync_one(
        self,
        target: Target,
        label: str,
        definition: CommandDefinition,
        name: str,
        registered: Optional[RemoteEntry],
    ) -> SyncResult:
        target_name = str(target)
        payload = build_payload(definition, name)
        try:
            if registered is not None:
                self._debug(f"Updating {label} command {name}...")
                entry = await self.client.edit(registered, payload)
                self._debug(f"Command {name} updated")
                return SyncResult.updated(name, target_name, remote_id=entry.id or registered.id)

            self._debug(f"Registering {label} command {name}.")
            entry = await self.client.create(target, payload)
            self._debug(f"Command {name} registered to {label}")
            return SyncResult.created(name, target_name, remote_id=entry.id)
        except RemoteCallFailure as e:
            self.logger.error(f"Failed to sync command {name} to {label}: {e.message}")
            return SyncResult.failed(name, target_name, e)

    async def reconcile_all(self, definitions: Sequence[CommandDefinition]) -> SyncReport:
        """Reconcile every target of the scope, one after another."""
        report = SyncReport()
        for target in self.targets:
            try:
                report.extend(await self.reconcile(target, definitions))
            except SyncError as e:
                self.logger.error(f"Could not sync {target}: {e.message}")
                report.target_failures.append(TargetFailure(target=str(target), error=e))
        return report
