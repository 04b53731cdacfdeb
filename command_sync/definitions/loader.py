"""
Command Loader

Discovers command modules on disk and loads their definitions.

Each command lives in its own Python file under the commands directory and
exposes its definition as a module-level `command` attribute, either a
CommandDefinition or a plain dict:

    command = {
        "type": "slash",
        "description": "Replies with pong",
        "options": [{"name": "ephemeral", "type": "boolean"}],
    }
"""

import asyncio
import hashlib
import importlib.util
import os
import sys
from pathlib import Path
from typing import AsyncIterator, List

from command_sync.definitions.models import CommandDefinition
from command_sync.errors import DefinitionLoadError
from command_sync.utils.logger import Logger


EXPORT_NAME = "command"
MODULE_SUFFIX = ".py"


def _scan(directory: Path) -> List[os.DirEntry]:
    with os.scandir(directory) as entries:
        return sorted(entries, key=lambda e: e.name)


async def iter_command_files(root: Path) -> AsyncIterator[Path]:
    """
    Walk `root` depth-first, yielding every file.

    Directories are descended into but never yielded. Entries are visited in
    name order so discovery is deterministic across platforms.
    """
    entries = await asyncio.to_thread(_scan, root)
    for entry in entries:
        path = Path(root, entry.name).resolve()
        if entry.is_dir():
            async for child in iter_command_files(path):
                yield child
        else:
            yield path


def _module_name(path: Path) -> str:
    digest = hashlib.sha256(str(path).encode()).hexdigest()[:12]
    return f"command_sync_loaded.{path.stem}_{digest}"


def load_definition(path: Path) -> CommandDefinition:
    """
    Import a command file and read its exported definition.

    Raises:
        DefinitionLoadError: if the file cannot be imported, has no
            `command` export, or the export is malformed.
    """
    module_name = _module_name(path)
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise DefinitionLoadError(path, "not an importable module")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        sys.modules.pop(module_name, None)
        raise DefinitionLoadError(path, f"import failed: {e}", details=repr(e)) from e

    if not hasattr(module, EXPORT_NAME):
        raise DefinitionLoadError(path, f"module does not export '{EXPORT_NAME}'")
    exported = getattr(module, EXPORT_NAME)

    try:
        if isinstance(exported, CommandDefinition):
            return exported.normalized(source_path=path)
        return CommandDefinition.from_dict(exported, source_path=path)
    except (TypeError, ValueError) as e:
        raise DefinitionLoadError(path, str(e)) from e


class CommandLoader:
    """Loads command definitions from a commands directory."""

    def __init__(self, commands_path: Path, logger: Logger | None = None):
        self.commands_path = Path(commands_path)
        self.logger = logger or Logger("command-loader")

    def _should_load(self, path: Path) -> bool:
        return path.suffix == MODULE_SUFFIX and not path.name.startswith("_")

    async def discover(self) -> AsyncIterator[CommandDefinition]:
        """
        Yield each command definition under the commands directory.

        The walk happens lazily, once per call. A file that fails to load
        stops the walk: DefinitionLoadError propagates to the caller.
        """
        if not self.commands_path.is_dir():
            raise DefinitionLoadError(self.commands_path, "commands directory does not exist")

        async for path in iter_command_files(self.commands_path):
            if not self._should_load(path):
                self.logger.debug(f"Skipping non-command file {path}")
                continue
            definition = load_definition(path)
            self.logger.debug(f"Loaded command {definition.resolved_name} from {path}")
            yield definition
