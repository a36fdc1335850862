"""Binding between a registry, the command line, and a destination dataclass.

A parse runs in four steps:
1. Tokenize: argparse splits the arguments into one raw string per parameter (or a
   bool, for `bool` parameters).
2. Check for `-h`.
3. Validate every parameter, reporting each violation as soon as it's found.
4. Write validated values back onto the destination's fields.
"""

from __future__ import annotations

import argparse
import dataclasses
import enum
import re
from typing import Any, Callable, List, NoReturn, Optional, Sequence

from . import _strings
from ._errors import ArgumentTokenizeError, UnsupportedDestinationError
from ._params import Param, ParamType
from ._registry import Registry
from ._tags import BoundField, bound_fields_from_dataclass

_HELP_DEST = "__flagbind_help__"

# Base-10 integers only; no whitespace, underscores, or non-ASCII digits.
_int_pattern = re.compile(r"[+-]?[0-9]+")


class ViolationKind(enum.Enum):
    MISSING_REQUIRED = "missing_required"
    INVALID_INTEGER = "invalid_integer"
    INVALID_OPTION = "invalid_option"
    BAD_ARGUMENTS = "bad_arguments"


@dataclasses.dataclass(frozen=True)
class Violation:
    """One problem found in the command-line arguments. `param` is None only for
    `BAD_ARGUMENTS`, which covers tokens that match no parameter."""

    kind: ViolationKind
    param: Optional[Param]
    message: str

    @property
    def name(self) -> Optional[str]:
        return None if self.param is None else self.param.name


class _TokenizingParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing usage and exiting."""

    def error(self, message: str) -> NoReturn:
        raise ArgumentTokenizeError(message)


def _parse_bool(value: str) -> bool:
    """Explicit value of a bool flag, as in `-v=false`."""
    if value in ("1", "t", "T", "true", "TRUE", "True"):
        return True
    elif value in ("0", "f", "F", "false", "FALSE", "False"):
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value {value!r}")


def _add_help_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-h", "--help", action="store_true", dest=_HELP_DEST)


def make_tokenizer(registry: Registry) -> argparse.ArgumentParser:
    """Build an argument parser with one option per registered parameter. All values
    come back as raw strings, except for bools; conversion is left to
    :func:`validate`."""
    parser = _TokenizingParser(add_help=False, allow_abbrev=False)
    _add_help_argument(parser)
    for param in registry:
        if param.type is ParamType.BOOL:
            # `-v` alone means true; `-v=false` is accepted too.
            parser.add_argument(
                *_strings.option_strings(param.name),
                nargs="?",
                const=True,
                default=False,
                type=_parse_bool,
                dest=param.name,
            )
        else:
            parser.add_argument(
                *_strings.option_strings(param.name),
                type=str,
                default=param.default,
                dest=param.name,
            )
    return parser


def _help_in(args: Optional[Sequence[str]]) -> bool:
    """Look for `-h` on its own, for command lines the full tokenizer rejects."""
    parser = _TokenizingParser(add_help=False, allow_abbrev=False)
    _add_help_argument(parser)
    try:
        namespace, _ = parser.parse_known_args(args)
    except ArgumentTokenizeError:
        return False
    return bool(getattr(namespace, _HELP_DEST))


@dataclasses.dataclass(frozen=True)
class Tokens:
    """Outcome of tokenizing a command line.

    Attributes:
        help_requested: Whether `-h` or `--help` was passed.
        violations: Arguments that match no parameter, or can't be split.
        complete: False when the command line couldn't be split at all, in which case
            no parameter received a value and validation should be skipped.
    """

    help_requested: bool
    violations: List[Violation]
    complete: bool = True


def tokenize(registry: Registry, args: Optional[Sequence[str]]) -> Tokens:
    """Run the tokenizer and store raw values on the registered parameters."""
    registry.reset()
    parser = make_tokenizer(registry)
    try:
        namespace, unknown_args = parser.parse_known_args(args)
    except ArgumentTokenizeError as e:
        registry.help_requested = _help_in(args)
        if registry.help_requested:
            return Tokens(True, [])
        return Tokens(
            False,
            [Violation(ViolationKind.BAD_ARGUMENTS, None, e.args[0])],
            complete=False,
        )

    value_from_dest = vars(namespace)
    for param in registry:
        raw = value_from_dest[param.name]
        if param.type is ParamType.BOOL:
            param.bool_value = bool(raw)
            param.value = "true" if raw else ""
        else:
            param.value = "" if raw is None else raw

    violations: List[Violation] = []
    if len(unknown_args) > 0:
        violations.append(
            Violation(
                ViolationKind.BAD_ARGUMENTS,
                None,
                f"unrecognized arguments: {' '.join(unknown_args)}",
            )
        )

    registry.help_requested = bool(value_from_dest[_HELP_DEST])
    return Tokens(registry.help_requested, violations)


def validate_param(param: Param) -> Optional[Violation]:
    """Check the raw value of a single parameter, and fill in its typed value."""
    if param.value == "":
        # Absent booleans are false, never missing.
        if param.required and param.type is not ParamType.BOOL:
            return Violation(
                ViolationKind.MISSING_REQUIRED,
                param,
                f"-{param.name} is required",
            )
        return None

    if param.type is ParamType.INT:
        if _int_pattern.fullmatch(param.value) is None:
            return Violation(
                ViolationKind.INVALID_INTEGER,
                param,
                f"-{param.name} should be an integer, got {param.value!r}",
            )
        param.int_value = int(param.value)
    elif param.type is ParamType.OPTION:
        if param.value not in param.options:
            return Violation(
                ViolationKind.INVALID_OPTION,
                param,
                f"-{param.name} should be one of {', '.join(param.options)},"
                f" got {param.value!r}",
            )
    return None


def validate(
    registry: Registry, report: Callable[[Violation], Any]
) -> List[Violation]:
    """Validate every registered parameter. Each violation is passed to `report` as
    soon as it is found; all of them are returned."""
    violations: List[Violation] = []
    for param in registry:
        violation = validate_param(param)
        if violation is not None:
            report(violation)
            violations.append(violation)
    return violations


def check_destination(dest: Any) -> None:
    if not dataclasses.is_dataclass(dest) or isinstance(dest, type):
        raise UnsupportedDestinationError(
            f"Expected a dataclass instance as destination, but got {dest!r}."
        )
    if dest.__dataclass_params__.frozen:  # type: ignore
        raise UnsupportedDestinationError(
            f"Can't write parsed values onto frozen dataclass {type(dest).__name__}."
        )


def register_fields(registry: Registry, dest: Any) -> List[BoundField]:
    """Register one parameter per tagged field of `dest`, in declaration order."""
    check_destination(dest)
    bound_fields = bound_fields_from_dataclass(type(dest))
    for bound in bound_fields:
        registry.register(bound.param)
    return bound_fields


def write_back(
    registry: Registry,
    dest: Any,
    bound_fields: Sequence[BoundField],
    violations: Sequence[Violation],
) -> None:
    """Assign typed values onto the fields of `dest`. Parameters with a violation are
    skipped, leaving their fields untouched."""
    failed_names = {v.name for v in violations if v.name is not None}
    for bound in bound_fields:
        name = bound.param.name
        if name not in registry or name in failed_names:
            continue
        setattr(dest, bound.field_name, registry.lookup(name).typed_value)
