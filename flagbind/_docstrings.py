"""Helpers for parsing dataclass docstrings. Used as a fallback for usage text."""

import functools
import inspect
from typing import Dict, Optional, Type

import docstring_parser

from . import _strings


@functools.lru_cache(maxsize=64)
def _docstring_from_field_name(cls: Type) -> Dict[str, str]:
    docstring = inspect.getdoc(cls)
    if docstring is None:
        return {}

    out: Dict[str, str] = {}
    for param_doc in docstring_parser.parse(docstring).params:
        if param_doc.description is not None:
            out[param_doc.arg_name] = _strings.remove_single_line_breaks(
                param_doc.description
            )
    return out


def get_field_docstring(cls: Type, field_name: str) -> Optional[str]:
    """Get the documented description of a field, from the `Attributes:` (or `Args:`)
    section of its class docstring.

    Note that `dataclasses.dataclass` will populate __doc__ with the class signature if
    no docstring is written; that has no sections and yields nothing here."""
    return _docstring_from_field_name(cls).get(field_name)
