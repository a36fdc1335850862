"""Exceptions raised by flagbind.

Validation problems in user input are never raised; they are reported as
:class:`flagbind.Violation` objects. Exceptions here signal programmer errors: bad
declarations, or reads that break an accessor's precondition."""


class FlagbindError(Exception):
    """Base class for all flagbind exceptions."""


class ParamNotFoundError(FlagbindError, KeyError):
    """Raised when a parameter name was never registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No parameter named -{name} was registered.")
        self.name = name

    def __str__(self) -> str:
        # KeyError.__str__ would wrap the message in quotes.
        return str(self.args[0])


class ParamTypeError(FlagbindError, TypeError):
    """Raised when a typed accessor is used on a parameter of a different type."""


class ReservedNameError(FlagbindError, ValueError):
    """Raised when a parameter tries to use a name reserved for the help flag."""


class UnsupportedDestinationError(FlagbindError, TypeError):
    """Raised when the destination passed to the binder is not a dataclass
    instance."""


class ArgumentTokenizeError(FlagbindError):
    """Raised by the tokenizer instead of exiting the process. The binder turns it
    into a violation."""
