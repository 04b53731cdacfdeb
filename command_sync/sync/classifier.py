"""
Publishability Classifier
Decides which command definitions belong in the remote registry.
"""

from command_sync.definitions.models import CommandDefinition, CommandType


PUBLISHABLE_TYPES = frozenset({
    CommandType.SLASH,
    CommandType.BOTH,
    CommandType.CONTEXT_USER,
    CommandType.CONTEXT_MESSAGE,
})


def is_publishable(definition: CommandDefinition) -> bool:
    """Returns True if a definition should be synced to the registry.

    Text commands and any unrecognized kind are never published.
    """
    try:
        return definition.kind in PUBLISHABLE_TYPES
    except TypeError:
        # Unhashable kind values are not a known command type
        return False
