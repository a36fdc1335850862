"""Parameter descriptors, and helpers for reading their string-encoded attributes."""

from __future__ import annotations

import dataclasses
import enum
import warnings
from typing import Any, Dict, Mapping, Union

from ._warnings import FlagbindWarning


class ParamType(enum.Enum):
    """Value types a parameter can be declared with. The enum value doubles as the
    spelling used in tags."""

    STRING = "string"
    INT = "int"
    OPTION = "option"
    BOOL = "bool"


def param_type_from_str(name: str) -> ParamType:
    """Read a `type` tag. An empty tag means `string`; so does any unknown spelling,
    though the latter emits a :class:`FlagbindWarning`."""
    if name == "":
        return ParamType.STRING
    try:
        return ParamType(name)
    except ValueError:
        warnings.warn(
            f"Unknown parameter type {name!r}, falling back to 'string'.",
            category=FlagbindWarning,
        )
        return ParamType.STRING


def parse_options(text: str) -> Dict[str, str]:
    """Parse an `options` tag into a mapping from allowed value to display label.

    'global:Global,rule:Rule' => {'global': 'Global', 'rule': 'Rule'}

    Entries that don't contain exactly one ':' are dropped without complaint.
    """
    options: Dict[str, str] = {}
    for item in text.split(","):
        parts = item.split(":")
        if len(parts) != 2:
            continue
        key, label = parts
        options[key.strip()] = label.strip()
    return options


def parse_require(value: Union[bool, str]) -> bool:
    """Read a `require` tag. Only `True` and the string 'true' mark a parameter as
    required."""
    if isinstance(value, bool):
        return value
    return value == "true"


@dataclasses.dataclass
class Param:
    """One declared command-line parameter.

    `name`, `usage`, `required`, `type`, `options` and `default` are the declaration.
    `value`, `int_value` and `bool_value` are filled in by a parse; `value` is the raw
    string, where an empty string means the flag was absent. `registration_order` is
    assigned by the :class:`flagbind.Registry` that owns the parameter."""

    name: str
    usage: str = ""
    required: bool = False
    type: ParamType = ParamType.STRING
    options: Mapping[str, str] = dataclasses.field(default_factory=dict)
    default: str = ""

    value: str = dataclasses.field(default="", compare=False)
    int_value: int = dataclasses.field(default=0, compare=False)
    bool_value: bool = dataclasses.field(default=False, compare=False)
    registration_order: int = dataclasses.field(default=-1, compare=False)

    def __post_init__(self) -> None:
        if self.name == "":
            raise ValueError("Parameters need a non-empty name.")
        if isinstance(self.type, str):
            self.type = param_type_from_str(self.type)
        if isinstance(self.options, str):
            self.options = parse_options(self.options)

        # Only options carry an option set.
        self.options = dict(self.options) if self.type is ParamType.OPTION else {}

    def reset(self) -> None:
        """Forget the values of a previous parse."""
        self.value = ""
        self.int_value = 0
        self.bool_value = False

    @property
    def typed_value(self) -> Any:
        """The value as written back onto a destination field."""
        if self.type is ParamType.INT:
            return self.int_value
        elif self.type is ParamType.BOOL:
            return self.bool_value
        else:
            return self.value
