"""Rendering for the usage screen and validation diagnostics.

Colors are purely decorative; with `_settings.options["use_color"]` turned off, or when
termcolor decides the terminal can't show them, output is plain text."""

from __future__ import annotations

from typing import Iterable, List, Mapping

import termcolor

from . import _settings
from ._binder import Violation, ViolationKind
from ._params import Param, ParamType


def _colored(text: str, color: str, attrs: Iterable[str] = ()) -> str:
    if not _settings.options["use_color"]:
        return text
    return termcolor.colored(text, color, attrs=list(attrs))


def format_name(name: str) -> str:
    return _colored(f"-{name}", "red", attrs=["bold"])


def format_error_name(name: str) -> str:
    return _colored(f"-{name}", "red", attrs=["blink"])


def format_options(options: Mapping[str, str], error: bool = False) -> str:
    """'[ global - Global  rule - Rule ]'"""
    parts: List[str] = []
    for key, label in options.items():
        key_str = _colored(key, "red", attrs=["blink"] if error else ["bold"])
        parts.append(f" {key_str} - {_colored(label, 'yellow')} ")
    return "[" + "".join(parts) + "]"


def format_param_line(param: Param) -> str:
    """One line of the usage screen."""
    required = "required" if param.required else "optional"
    line = (
        f"{format_name(param.name)}  {_colored(required, 'yellow')}"
        f" {_colored(param.type.value.ljust(6), 'blue')} | {param.usage}"
    )
    if param.type is ParamType.OPTION and len(param.options) > 0:
        line += " " + format_options(param.options)
    return line


def format_usage(title: str, params: Iterable[Param]) -> str:
    """Title line, then one line per parameter in the order given."""
    lines = [title] if title != "" else []
    lines.extend(format_param_line(param) for param in params)
    return "\n".join(lines)


def format_violation(violation: Violation) -> str:
    """Single-line diagnostic for one violation."""
    param = violation.param
    if violation.kind is ViolationKind.BAD_ARGUMENTS or param is None:
        return f"{_colored('bad arguments', 'red')}: {violation.message}"

    name = format_error_name(param.name)
    if violation.kind is ViolationKind.MISSING_REQUIRED:
        return f"parameter {name} is required | {param.usage}"
    elif violation.kind is ViolationKind.INVALID_INTEGER:
        return f"parameter {name} must be an integer | {param.usage}"
    elif violation.kind is ViolationKind.INVALID_OPTION:
        return (
            f"parameter {name} must be one of the listed values | {param.usage}:"
            f" {format_options(param.options, error=True)}"
        )
    else:
        raise ValueError(f"Unknown violation kind {violation.kind}.")
