"""Core public API."""

from __future__ import annotations

import dataclasses
import enum
import sys
from typing import Any, List, Optional, Sequence, TextIO

from . import _binder, _formatting
from ._binder import Violation
from ._params import Param
from ._registry import Registry
from ._spinner import Spinner


class Outcome(enum.Enum):
    OK = "ok"
    FAILED = "failed"
    HELP_REQUESTED = "help_requested"


@dataclasses.dataclass
class ParseResult:
    """What came out of a parse. Truthy only when the outcome is `OK`.

    Attributes:
        outcome: `OK`, `FAILED`, or `HELP_REQUESTED`.
        violations: Every problem found, in the order they were printed.
        registry: The registry the parse ran against.
        spinner: The progress spinner started on success, if any.
    """

    outcome: Outcome
    violations: List[Violation]
    registry: Registry
    spinner: Optional[Spinner] = None

    def __bool__(self) -> bool:
        return self.outcome is Outcome.OK

    @property
    def help_requested(self) -> bool:
        return self.outcome is Outcome.HELP_REQUESTED

    def stop_loading(self) -> None:
        if self.spinner is not None:
            self.spinner.stop()


class CommandLine:
    """Parameters for one command invocation, bound from tags or declared directly.

    ```python
    @dataclasses.dataclass
    class Params:
        user: str = flagbind.tag("u", usage="User name.", require="true", default="")
        verbose: bool = flagbind.tag("v", usage="Chatty output.", default=False)

    command_line = CommandLine("usage: demo", "working")
    params = Params()
    if not command_line.parse(params):
        sys.exit(1)
    ...
    command_line.stop_loading()
    ```

    Parameters can also be declared without a destination, and read back by name:

    ```python
    command_line.set(Param("P", usage="Port.", type=ParamType.INT))
    command_line.parse()
    port = command_line.get_int("P")
    ```
    """

    def __init__(
        self,
        usage_title: str = "",
        loading_title: str = "",
        *,
        stream: Optional[TextIO] = None,
        spinner: bool = True,
    ) -> None:
        self.usage_title = usage_title
        self.loading_title = loading_title
        self.show_spinner = spinner
        self.registry = Registry()
        self._stream = stream
        self._spinner: Optional[Spinner] = None

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def set(self, param: Param) -> Param:
        """Declare a parameter. A parameter with the same name is replaced."""
        return self.registry.register(param)

    def parse(
        self, dest: Any = None, args: Optional[Sequence[str]] = None
    ) -> ParseResult:
        """Parse `args` (default: `sys.argv[1:]`), validate, and write values onto the
        tagged fields of `dest`.

        Violations are printed as they are found, and returned on the result. If `-h`
        is passed, usage is printed and nothing else happens. On success, the
        progress spinner is started; stop it with :meth:`stop_loading`."""
        self.stop_loading()
        bound_fields = []
        if dest is not None:
            bound_fields = _binder.register_fields(self.registry, dest)

        tokens = _binder.tokenize(self.registry, args)
        if tokens.help_requested:
            self.print_usage()
            return ParseResult(Outcome.HELP_REQUESTED, [], self.registry)

        violations = list(tokens.violations)
        for violation in violations:
            self._report(violation)
        if not tokens.complete:
            return ParseResult(Outcome.FAILED, violations, self.registry)
        violations.extend(_binder.validate(self.registry, report=self._report))

        if dest is not None:
            _binder.write_back(self.registry, dest, bound_fields, violations)

        if len(violations) > 0:
            return ParseResult(Outcome.FAILED, violations, self.registry)

        if self.show_spinner:
            self._spinner = Spinner(self.loading_title, stream=self._stream).start()
        return ParseResult(Outcome.OK, violations, self.registry, self._spinner)

    def get(self, name: str) -> str:
        return self.registry.get(name)

    def get_int(self, name: str) -> int:
        return self.registry.get_int(name)

    def get_bool(self, name: str) -> bool:
        return self.registry.get_bool(name)

    def usage(self) -> str:
        return _formatting.format_usage(self.usage_title, self.registry)

    def print_usage(self) -> None:
        print(self.usage(), file=self.stream)

    def stop_loading(self) -> None:
        """Stop the spinner started by a successful parse. No-op if none is
        running."""
        if self._spinner is not None:
            self._spinner.stop()
            self._spinner = None

    def _report(self, violation: Violation) -> None:
        print(_formatting.format_violation(violation), file=self.stream)


def cli(
    dest: Any,
    args: Optional[Sequence[str]] = None,
    *,
    usage_title: str = "",
    loading_title: str = "",
    spinner: bool = True,
) -> ParseResult:
    """Parse command-line arguments onto the tagged fields of `dest`.

    Unlike :meth:`CommandLine.parse`, passing `-h` prints usage and exits the process
    with status 0. Every other outcome is returned, so the caller picks its own exit
    code on failure.

    Args:
        dest: Dataclass instance whose tagged fields receive the parsed values.
        args: Arguments to parse. Defaults to `sys.argv[1:]`.
        usage_title: First line of the usage screen.
        loading_title: Text shown in front of the spinner.
        spinner: Whether to start the spinner after a successful parse.

    Returns:
        The parse result. Call `result.stop_loading()` once the long-running work is
        done.
    """
    command_line = CommandLine(usage_title, loading_title, spinner=spinner)
    result = command_line.parse(dest, args)
    if result.help_requested:
        sys.exit(0)
    return result
