import pytest
import termcolor

import flagbind
from flagbind import Param, ParamType, Violation, ViolationKind
from flagbind._formatting import (
    format_options,
    format_param_line,
    format_usage,
    format_violation,
)
from flagbind._strings import strip_ansi_sequences

MODE = Param(
    "m",
    usage="Mode",
    required=True,
    type=ParamType.OPTION,
    options={"global": "Global", "rule": "Rule"},
)


def test_param_lines() -> None:
    assert format_param_line(Param("u", usage="User", required=True)) == (
        "-u  required string | User"
    )
    assert format_param_line(Param("P", usage="Port", type=ParamType.INT)) == (
        "-P  optional int    | Port"
    )
    assert format_param_line(MODE) == (
        "-m  required option | Mode [ global - Global  rule - Rule ]"
    )


def test_usage_keeps_given_order() -> None:
    params = [Param("b"), Param("a"), Param("c")]
    lines = format_usage("title", params).splitlines()
    assert lines[0] == "title"
    assert [line.split()[0] for line in lines[1:]] == ["-b", "-a", "-c"]


def test_usage_without_title() -> None:
    assert format_usage("", [Param("a", usage="A")]) == "-a  optional string | A"


def test_violations() -> None:
    user = Param("u", usage="User", required=True)
    port = Param("P", usage="Port", type=ParamType.INT)

    assert (
        format_violation(Violation(ViolationKind.MISSING_REQUIRED, user, ""))
        == "parameter -u is required | User"
    )
    assert (
        format_violation(Violation(ViolationKind.INVALID_INTEGER, port, ""))
        == "parameter -P must be an integer | Port"
    )
    assert format_violation(Violation(ViolationKind.INVALID_OPTION, MODE, "")) == (
        "parameter -m must be one of the listed values | Mode:"
        " [ global - Global  rule - Rule ]"
    )
    assert (
        format_violation(
            Violation(ViolationKind.BAD_ARGUMENTS, None, "unrecognized arguments: -x")
        )
        == "bad arguments: unrecognized arguments: -x"
    )


def test_colors(monkeypatch) -> None:
    flagbind._settings.options["use_color"] = True
    # termcolor otherwise disables itself when stdout isn't a terminal.
    monkeypatch.setenv("FORCE_COLOR", "1")
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("ANSI_COLORS_DISABLED", raising=False)

    line = format_param_line(MODE)
    assert termcolor.colored("-m", "red", attrs=["bold"]) in line
    assert strip_ansi_sequences(line) == (
        "-m  required option | Mode [ global - Global  rule - Rule ]"
    )
    assert strip_ansi_sequences(format_options(MODE.options, error=True)) == (
        "[ global - Global  rule - Rule ]"
    )


def test_unknown_violation_kind() -> None:
    violation = Violation("not-a-kind", MODE, "")  # type: ignore
    with pytest.raises(ValueError):
        format_violation(violation)
