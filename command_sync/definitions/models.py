"""
Command Definition Models
Locally authored command definitions and their parameters.
"""

from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional


class CommandType(Enum):
    """How a command is triggered."""
    TEXT = "text"                        # Prefix-only, never published
    SLASH = "slash"
    BOTH = "both"                        # Prefix and slash
    CONTEXT_USER = "context_user"
    CONTEXT_MESSAGE = "context_message"

    @classmethod
    def parse(cls, value: Any) -> Any:
        """
        Coerce a raw kind into a CommandType.

        Accepts members, their values, or their names (case-insensitive).
        Unrecognized values are returned unchanged so callers can reject them.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.name.lower()):
                    return member
        return value


class OptionType(IntEnum):
    """Discord application command option types."""
    SUB_COMMAND = 1
    SUB_COMMAND_GROUP = 2
    STRING = 3
    INTEGER = 4
    BOOLEAN = 5
    USER = 6
    CHANNEL = 7
    ROLE = 8
    MENTIONABLE = 9
    NUMBER = 10
    ATTACHMENT = 11

    @classmethod
    def parse(cls, value: Any) -> "OptionType":
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and not value.isdigit():
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"Unknown option type: {value!r}")
        return cls(int(value))


# Keys ParameterSpec understands; anything else is forwarded to the wire as-is
_PARAMETER_KEYS = {
    "name", "type", "description", "required", "autocomplete",
    "autocomplete_handler", "command", "choices", "options",
}


@dataclass
class ParameterSpec:
    """One command argument."""
    name: str
    type: OptionType = OptionType.STRING
    description: Optional[str] = None
    required: bool = False
    autocomplete: bool = False
    # Local callback; belongs to this process and is never sent to Discord
    autocomplete_handler: Optional[Callable[..., Any]] = None
    choices: List[Dict[str, Any]] = field(default_factory=list)
    options: List["ParameterSpec"] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def has_autocomplete(self) -> bool:
        return self.autocomplete or self.autocomplete_handler is not None

    def normalized(self) -> "ParameterSpec":
        """Coerce the option type and any nested options built as plain dicts."""
        if not self.name:
            raise ValueError("Option is missing a name")
        return replace(
            self,
            type=OptionType.parse(self.type),
            options=_coerce_parameters(self.options),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParameterSpec":
        """Build a ParameterSpec from a plain mapping."""
        if not isinstance(data, dict):
            raise TypeError(f"Option must be a mapping, got {type(data).__name__}")
        if not data.get("name"):
            raise ValueError("Option is missing a name")

        handler = data.get("autocomplete_handler") or data.get("command")
        autocomplete = data.get("autocomplete", False)
        if callable(autocomplete):
            handler, autocomplete = autocomplete, True

        return cls(
            name=str(data["name"]),
            type=OptionType.parse(data.get("type", OptionType.STRING)),
            description=data.get("description"),
            required=bool(data.get("required", False)),
            autocomplete=bool(autocomplete),
            autocomplete_handler=handler,
            choices=list(data.get("choices") or []),
            options=_coerce_parameters(data.get("options") or []),
            extra={k: v for k, v in data.items() if k not in _PARAMETER_KEYS},
        )


def _coerce_parameter(value: Any) -> ParameterSpec:
    if isinstance(value, ParameterSpec):
        return value.normalized()
    return ParameterSpec.from_dict(value)


def _coerce_parameters(values: Any) -> List[ParameterSpec]:
    if not isinstance(values, (list, tuple)):
        raise TypeError("Command options must be a list")
    return [_coerce_parameter(v) for v in values]


@dataclass
class CommandDefinition:
    """A locally authored command, as loaded from a command module."""
    kind: Any
    name: Optional[str] = None
    description: Optional[str] = None
    options: List[ParameterSpec] = field(default_factory=list)
    source_path: Optional[Path] = None

    @property
    def resolved_name(self) -> str:
        """
        Effective registry name.

        Falls back to the source file's base name without its extension,
        so `commands/ping.py` resolves to `ping`.
        """
        if self.name:
            return self.name
        if self.source_path is not None:
            return Path(self.source_path).stem
        raise ValueError("Command has no name and no source file to derive one from")

    def normalized(self, source_path: Optional[Path] = None) -> "CommandDefinition":
        """
        Coerce a definition built in code the same way `from_dict` does.

        String kinds become CommandType members and dict options become
        ParameterSpecs. Raises TypeError or ValueError for options that
        cannot be coerced.
        """
        return replace(
            self,
            kind=CommandType.parse(self.kind),
            options=_coerce_parameters(self.options or []),
            source_path=self.source_path if self.source_path is not None else source_path,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source_path: Optional[Path] = None) -> "CommandDefinition":
        """Build a CommandDefinition from a plain mapping."""
        if not isinstance(data, dict):
            raise TypeError(f"Command must be a mapping, got {type(data).__name__}")
        if "type" not in data and "kind" not in data:
            raise ValueError("Command is missing a type")

        return cls(
            kind=CommandType.parse(data.get("kind", data.get("type"))),
            name=data.get("name"),
            description=data.get("description"),
            options=_coerce_parameters(data.get("options") or []),
            source_path=source_path,
        )
