"""
Command Syncer
Drives a full sync pass: discover, classify, reconcile, report.
"""

from typing import List, Optional

from command_sync.config.settings import Config
from command_sync.definitions.loader import CommandLoader
from command_sync.definitions.models import CommandDefinition
from command_sync.errors import DefinitionLoadError
from command_sync.registry.client import DiscordRegistryClient
from command_sync.sync.classifier import is_publishable
from command_sync.sync.reconciler import RegistryReconciler
from command_sync.sync.results import SyncReport, SyncResult
from command_sync.sync.scope import SyncScope
from command_sync.utils.logger import Logger


class CommandSyncer:
    """Syncs application commands once, at startup."""

    def __init__(self, loader: CommandLoader, reconciler: RegistryReconciler, logger: Optional[Logger] = None):
        self.loader = loader
        self.reconciler = reconciler
        self.logger = logger or Logger("command-syncer")

    @classmethod
    def from_config(cls, config: Config, logger: Logger) -> "CommandSyncer":
        """Wire a syncer against the live Discord API."""
        client = DiscordRegistryClient(
            token=config.token,
            api_url=config.api_url,
            application_id=config.application_id,
            timeout=config.request_timeout,
            logger=logger,
        )
        return cls(
            loader=CommandLoader(config.commands_path, logger=logger),
            reconciler=RegistryReconciler(client, SyncScope.scoped(config.scoped_guilds), logger=logger),
            logger=logger,
        )

    async def run_sync(self) -> SyncReport:
        """
        Run one pass and return its report.

        The loader is consumed once, in discovery order. Text-only commands
        are reported as skipped and never reach the registry.

        Raises:
            DefinitionLoadError: a command file could not be loaded.
        """
        publishable: List[CommandDefinition] = []
        skipped: List[SyncResult] = []

        async for definition in self.loader.discover():
            if is_publishable(definition):
                publishable.append(definition)
            else:
                skipped.append(SyncResult.skipped(_display_name(definition), "not publishable"))

        self.logger.debug(
            f"Discovered {len(publishable)} publishable commands, "
            f"skipping {len(skipped)}; scope: {self.reconciler.scope}"
        )

        report = await self.reconciler.reconcile_all(publishable)
        report.results[:0] = skipped
        return report

    async def sync(self) -> SyncReport:
        """Syncs application commands and logs the outcome."""
        self.logger.info("Syncing commands")

        try:
            report = await self.run_sync()
        except DefinitionLoadError as e:
            self.logger.error(f"Command sync aborted: {e.message}")
            raise

        summary = report.summary()
        if report.ok:
            self.logger.info("Commands synced successfully", extra={"summary": summary})
        else:
            for failure in report.target_failures:
                self.logger.warning(f"{failure.target}: {failure.error.message}")
            for result in report.failures:
                self.logger.warning(f"{result.name} ({result.target}): {result.reason}")
            self.logger.error(
                f"Command sync finished with errors: {summary['failed']} failed commands, "
                f"{summary['failed_targets']} failed targets",
                extra={"summary": summary},
            )

        self.logger.info(
            f"Created {summary['created']}, updated {summary['updated']}, "
            f"skipped {summary['skipped']}, failed {summary['failed']}"
        )
        return report


def _display_name(definition: CommandDefinition) -> str:
    try:
        return definition.resolved_name
    except ValueError:
        return "<unnamed>"
