"""Annotated tags

Tags can also live in `typing.Annotated` metadata. Types are inferred from annotations
when a tag doesn't name one, and usage text falls back to the class docstring.

Usage:

    python ./02_annotated.py -h
    python ./02_annotated.py -host=example.com -level=debug -retries=3

"""

import dataclasses
import sys

from typing_extensions import Annotated, Literal

import flagbind
from flagbind import Tag


@dataclasses.dataclass
class Options:
    """Options for a fetch job.

    Attributes:
        host: Host to fetch from.
        level: How much to log.
        retries: Attempts before giving up.
        dry_run: Only print what would happen.
    """

    host: Annotated[str, Tag("host", require=True)] = ""
    level: Annotated[Literal["debug", "info", "error"], Tag("level")] = "info"
    retries: Annotated[int, Tag("retries")] = 1
    dry_run: Annotated[bool, Tag("dry-run")] = False


if __name__ == "__main__":
    options = Options()
    result = flagbind.cli(options, spinner=False)
    if not result:
        sys.exit(2)
    print(options)
