"""Ordered collection of the parameters declared for one invocation."""

from __future__ import annotations

from typing import Dict, Iterator, List

from . import _strings
from ._errors import ParamNotFoundError, ParamTypeError, ReservedNameError
from ._params import Param, ParamType


class Registry:
    """Parameters in declaration order, with lookup by name.

    Names are unique: registering a name twice replaces the earlier parameter, and the
    replacement moves to the end. `registration_order` always runs 0, 1, 2, ... in list
    order, so iterating the registry is the order usage is printed in."""

    def __init__(self) -> None:
        self._params: List[Param] = []
        self._param_from_name: Dict[str, Param] = {}
        self.help_requested: bool = False

    def register(self, param: Param) -> Param:
        """Insert `param`, or replace the parameter registered under the same name."""
        if param.name in _strings.HELP_NAMES:
            raise ReservedNameError(
                f"-{param.name} is reserved for the help flag and can't be declared."
            )

        previous = self._param_from_name.pop(param.name, None)
        if previous is not None:
            self._params = [p for p in self._params if p is not previous]
            for i, p in enumerate(self._params):
                p.registration_order = i

        param.registration_order = len(self._params)
        self._params.append(param)
        self._param_from_name[param.name] = param
        return param

    def lookup(self, name: str) -> Param:
        if name not in self._param_from_name:
            raise ParamNotFoundError(name)
        return self._param_from_name[name]

    def get(self, name: str) -> str:
        """Raw value of a parameter. For options this is the selected key, not its
        label."""
        return self.lookup(name).value

    def get_int(self, name: str) -> int:
        """Parsed value of an `int` parameter.

        Only valid for parameters declared as `int`; anything else raises
        :class:`flagbind.ParamTypeError` rather than being coerced."""
        return self._lookup_typed(name, ParamType.INT).int_value

    def get_bool(self, name: str) -> bool:
        """Parsed value of a `bool` parameter. Only valid for parameters declared as
        `bool`."""
        return self._lookup_typed(name, ParamType.BOOL).bool_value

    def _lookup_typed(self, name: str, typ: ParamType) -> Param:
        param = self.lookup(name)
        if param.type is not typ:
            raise ParamTypeError(
                f"-{name} is declared as {param.type.value}, not {typ.value}."
            )
        return param

    def names(self) -> List[str]:
        return [p.name for p in self._params]

    def reset(self) -> None:
        """Clear parsed values so the registry can take part in a fresh parse."""
        self.help_requested = False
        for param in self._params:
            param.reset()

    def __iter__(self) -> Iterator[Param]:
        return iter(list(self._params))

    def __len__(self) -> int:
        return len(self._params)

    def __contains__(self, name: object) -> bool:
        return name in self._param_from_name
