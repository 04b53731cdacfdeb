"""Tests for the command-sync CLI."""

import argparse
from pathlib import Path
from unittest.mock import AsyncMock, Mock, patch

import pytest

from command_sync import cli
from command_sync.errors import ConfigurationError
from command_sync.sync.results import SyncReport, SyncResult


def make_args(**overrides):
    defaults = {"version": False, "commands_dir": None, "guild": None, "log_level": None}
    defaults.update(overrides)
    return argparse.Namespace(**defaults)


def fake_syncer(report):
    syncer = Mock()
    syncer.sync = AsyncMock(return_value=report)
    syncer.reconciler.client.aclose = AsyncMock()
    return syncer


@pytest.mark.asyncio
class TestRunSync:
    """Test cli.run_sync."""

    async def test_flags_override_config(self, mock_config):
        syncer = fake_syncer(SyncReport())
        manager = Mock()
        manager.load.return_value = mock_config

        with patch('command_sync.config.ConfigManager.get_instance', return_value=manager), \
             patch('command_sync.sync.CommandSyncer.from_config', return_value=syncer) as from_config:
            code = await cli.run_sync(make_args(commands_dir="cmds", guild=["g1", "g2"], log_level="INFO"))

        assert code == 0
        config = from_config.call_args.args[0]
        assert config.commands_path == Path("cmds")
        assert config.scoped_guilds == ["g1", "g2"]
        assert config.log_level == "INFO"
        syncer.reconciler.client.aclose.assert_awaited_once()

    async def test_failures_exit_nonzero(self, mock_config):
        report = SyncReport(results=[SyncResult.failed("ban", "global", ConfigurationError("x"))])
        syncer = fake_syncer(report)
        manager = Mock()
        manager.load.return_value = mock_config

        with patch('command_sync.config.ConfigManager.get_instance', return_value=manager), \
             patch('command_sync.sync.CommandSyncer.from_config', return_value=syncer):
            code = await cli.run_sync(make_args())

        assert code == 1


class TestMain:
    """Test cli.main."""

    def test_version(self, capsys):
        with patch('sys.argv', ['command-sync', '--version']):
            with pytest.raises(SystemExit) as exc_info:
                cli.main()

        assert exc_info.value.code == 0
        assert "command-sync v" in capsys.readouterr().out

    def test_configuration_error_exit_code(self, capsys):
        with patch('sys.argv', ['command-sync']), \
             patch.dict('os.environ', {}, clear=True):
            with pytest.raises(SystemExit) as exc_info:
                cli.main()

        assert exc_info.value.code == 2
        assert "DISCORD_TOKEN" in capsys.readouterr().err
