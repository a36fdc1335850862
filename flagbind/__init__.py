__version__ = "0.1.0"


from . import _settings as _settings
from ._binder import Violation, ViolationKind
from ._cli import CommandLine, Outcome, ParseResult, cli
from ._errors import (
    ArgumentTokenizeError,
    FlagbindError,
    ParamNotFoundError,
    ParamTypeError,
    ReservedNameError,
    UnsupportedDestinationError,
)
from ._params import Param, ParamType
from ._registry import Registry
from ._spinner import Spinner
from ._tags import Tag, tag
from ._warnings import FlagbindWarning

__all__ = [
    "ArgumentTokenizeError",
    "CommandLine",
    "FlagbindError",
    "FlagbindWarning",
    "Outcome",
    "Param",
    "ParamNotFoundError",
    "ParamType",
    "ParamTypeError",
    "ParseResult",
    "Registry",
    "ReservedNameError",
    "Spinner",
    "Tag",
    "UnsupportedDestinationError",
    "Violation",
    "ViolationKind",
    "cli",
    "tag",
]
