"""
Option Transformer
Converts local parameter specs into Discord's wire format.
"""

from typing import Any, Dict, List, Optional

from command_sync.definitions.models import CommandDefinition, CommandType, ParameterSpec


PLACEHOLDER_DESCRIPTION = ".."

# Only these kinds carry an option list; context menus never do
OPTION_BEARING_TYPES = frozenset({CommandType.SLASH, CommandType.BOTH})


def parameter_to_wire(parameter: ParameterSpec) -> Dict[str, Any]:
    """
    Serialize one parameter, dropping its local autocomplete handler.

    Discord only needs to know that autocomplete is enabled.
    """
    wire: Dict[str, Any] = dict(parameter.extra)
    wire.update({
        "name": parameter.name,
        "type": int(parameter.type),
        "description": parameter.description or PLACEHOLDER_DESCRIPTION,
    })
    if parameter.required:
        wire["required"] = True
    if parameter.has_autocomplete:
        wire["autocomplete"] = True
    if parameter.choices:
        wire["choices"] = [dict(c) for c in parameter.choices]
    if parameter.options:
        wire["options"] = [parameter_to_wire(o) for o in parameter.options]
    return wire


def transform_options(definition: CommandDefinition) -> Optional[List[Dict[str, Any]]]:
    """Parse a definition's options into the registry's shape.

    Returns None for context-menu commands, which are sent without options.
    Order is preserved exactly.
    """
    if definition.kind not in OPTION_BEARING_TYPES:
        return None
    return [parameter_to_wire(p) for p in definition.options]
