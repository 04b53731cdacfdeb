"""Tests for the publishability classifier."""

import pytest

from command_sync.definitions.models import CommandDefinition, CommandType
from command_sync.sync.classifier import is_publishable


class TestIsPublishable:
    """Test is_publishable."""

    @pytest.mark.parametrize("kind", [
        CommandType.SLASH,
        CommandType.BOTH,
        CommandType.CONTEXT_USER,
        CommandType.CONTEXT_MESSAGE,
    ])
    def test_publishable_kinds(self, kind):
        assert is_publishable(CommandDefinition(kind=kind, name="x")) is True

    def test_text_commands_are_not_published(self):
        assert is_publishable(CommandDefinition(kind=CommandType.TEXT, name="x")) is False

    @pytest.mark.parametrize("kind", ["modal", 64, None, "slash"])
    def test_unknown_kinds_are_not_published(self, kind):
        """Should reject anything that is not a known CommandType member."""
        assert is_publishable(CommandDefinition(kind=kind, name="x")) is False

    def test_unhashable_kind(self):
        assert is_publishable(CommandDefinition(kind=["slash"], name="x")) is False
