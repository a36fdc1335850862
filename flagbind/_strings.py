"""Utilities and constants for working with strings."""

import functools
import re
from typing import Sequence

# Names taken by the help flag; parameters can't use them.
HELP_NAMES = ("h", "help")


def option_strings(name: str) -> Sequence[str]:
    """Flags a parameter is reachable by on the command line.

    'u' => ('-u', '--u')
    """
    return (f"-{name}", f"--{name}")


def remove_single_line_breaks(docstring: str) -> str:
    """Join wrapped lines of a docstring; blank lines are kept as paragraph breaks."""
    lines = docstring.strip().split("\n")
    out = []
    for i, line in enumerate(lines):
        line = line.strip()
        if line == "":
            out.append("\n")
        elif i > 0 and out and out[-1] != "\n":
            out.append(" " + line)
        else:
            out.append(line)
    return "".join(out).strip()


@functools.lru_cache(maxsize=None)
def _get_ansi_pattern() -> re.Pattern:
    # https://stackoverflow.com/a/14693789
    return re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def strip_ansi_sequences(x: str) -> str:
    return _get_ansi_pattern().sub("", x)
