"""Command definition loading and models."""

from .models import CommandDefinition, CommandType, OptionType, ParameterSpec
from .loader import CommandLoader, iter_command_files, load_definition

__all__ = [
    "CommandDefinition",
    "CommandType",
    "OptionType",
    "ParameterSpec",
    "CommandLoader",
    "iter_command_files",
    "load_definition",
]
