"""Field tags: how a dataclass field declares the parameter it is bound to.

A tag can be attached in two ways. As `typing.Annotated` metadata:

```python
@dataclasses.dataclass
class Params:
    user: Annotated[str, flagbind.Tag("u", usage="User name.", require=True)] = ""
```

Or as string attributes in the field's metadata, which :func:`flagbind.tag` writes for
us:

```python
@dataclasses.dataclass
class Params:
    user: str = flagbind.tag("u", usage="User name.", require="true", default="")
```

Both spellings carry the same attributes: `name`, `usage`, `require`, `type`,
`options`, and `default`. Fields without a tag are not bound.
"""

from __future__ import annotations

import dataclasses
import sys
import types
import typing
import warnings
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, Union

from typing_extensions import Annotated, Literal, get_args, get_origin, get_type_hints

from . import _docstrings
from ._errors import UnsupportedDestinationError
from ._warnings import FlagbindWarning
from ._params import Param, ParamType, param_type_from_str, parse_options, parse_require

TAG_KEYS = ("name", "usage", "require", "type", "options", "default")

NoneType = type(None)


@dataclasses.dataclass(frozen=True)
class Tag:
    """Parameter declaration attached to a dataclass field.

    Attributes:
        name: Registry key; the parameter is exposed as `-name`.
        usage: Help text. Falls back to the field's entry in the class docstring.
        require: `True` or `"true"` marks the parameter as required.
        type: One of `string`, `int`, `option`, `bool`. Inferred from the field's
            annotation when left empty.
        options: Allowed values of an `option` parameter, as `key:label,...` or as a
            mapping.
        default: Raw string used when the flag is absent. Taken from the field's
            default when left unset.
    """

    name: str
    usage: str = ""
    require: Union[bool, str] = False
    type: str = ""
    options: Union[str, Mapping[str, str]] = ""
    default: Optional[str] = None

    @staticmethod
    def from_metadata(metadata: Mapping[str, Any]) -> Optional[Tag]:
        """Read a tag out of `dataclasses.field(metadata=...)`. Returns None when no
        `name` is set."""
        if "name" not in metadata:
            return None
        return Tag(**{k: metadata[k] for k in TAG_KEYS if k in metadata})


def tag(
    name: str,
    *,
    usage: str = "",
    require: Union[bool, str] = False,
    type: str = "",
    options: Union[str, Mapping[str, str]] = "",
    default: Any = dataclasses.MISSING,
) -> Any:
    """Returns a dataclass field carrying a parameter tag.

    `default` is the field's default value, as with `dataclasses.field()`; it is also
    used, stringified, as the parameter's default when the flag is absent."""
    metadata = {
        "name": name,
        "usage": usage,
        "require": require,
        "type": type,
        "options": options,
    }
    return dataclasses.field(default=default, metadata=metadata)


@dataclasses.dataclass(frozen=True)
class BoundField:
    """A dataclass field, and the parameter declared by its tag."""

    field_name: str
    param: Param


def bound_fields_from_dataclass(cls: Type) -> List[BoundField]:
    """Read the tags of every field of `cls`, in declaration order, and build one
    parameter per tagged field."""
    if not dataclasses.is_dataclass(cls):
        raise UnsupportedDestinationError(
            f"Expected a dataclass destination, but got {cls}."
        )

    # If any annotation can't be resolved, fall back to resolving them one at a time.
    hints: Optional[Dict[str, Any]]
    try:
        hints = get_type_hints(cls, include_extras=True)
    except (NameError, TypeError):
        hints = None

    out: List[BoundField] = []
    for field in dataclasses.fields(cls):
        if hints is not None:
            typ = hints.get(field.name, field.type)
        else:
            typ = _resolve_field_type(cls, field)
        typ, field_tag = _unwrap_tag(typ)
        if field_tag is None:
            field_tag = Tag.from_metadata(field.metadata)
        if field_tag is None:
            continue
        if typ is None and isinstance(field.type, str) and field_tag.type == "":
            warnings.warn(
                f"Could not resolve annotation {field.type!r} of field"
                f" {cls.__name__}.{field.name}; treating -{field_tag.name} as a string.",
                category=FlagbindWarning,
            )
        out.append(BoundField(field.name, _param_from_tag(cls, field, typ, field_tag)))
    return out


def _resolve_field_type(cls: Type, field: dataclasses.Field) -> Any:
    """Resolve the annotation of a single field. Returns None when a postponed
    annotation can't be evaluated."""
    if not isinstance(field.type, str):
        return field.type

    # Evaluate in the namespace of the class that declared the field.
    owner = cls
    for base in cls.__mro__:
        if field.name in base.__dict__.get("__annotations__", {}):
            owner = base
            break
    module = sys.modules.get(owner.__module__)
    globalns = dict(vars(module)) if module is not None else {}

    holder = types.SimpleNamespace(__annotations__={field.name: field.type})
    try:
        return get_type_hints(holder, globalns=globalns, include_extras=True)[
            field.name
        ]
    except (NameError, TypeError, SyntaxError) as e:
        if "Annotated" in field.type:
            raise UnsupportedDestinationError(
                f"Could not resolve annotation {field.type!r} of field"
                f" {cls.__name__}.{field.name}, so its tag can't be read: {e}"
            ) from e
        return None


def _unwrap_tag(typ: Any) -> Tuple[Any, Optional[Tag]]:
    if get_origin(typ) is not Annotated:
        return typ, None

    base, *metadata = get_args(typ)
    for item in metadata:
        if isinstance(item, Tag):
            return base, item
    return base, None


def _param_from_tag(
    cls: Type, field: dataclasses.Field, typ: Any, field_tag: Tag
) -> Param:
    usage = field_tag.usage
    if usage == "":
        usage = _docstrings.get_field_docstring(cls, field.name) or ""

    param_type, inferred_options = _infer_type(typ)
    if field_tag.type != "":
        param_type = param_type_from_str(field_tag.type)

    if isinstance(field_tag.options, str):
        options = parse_options(field_tag.options)
    else:
        options = dict(field_tag.options)
    if len(options) == 0:
        options = inferred_options

    default = field_tag.default
    if default is None:
        default = _default_from_field(field, param_type)

    return Param(
        name=field_tag.name,
        usage=usage,
        required=parse_require(field_tag.require),
        type=param_type,
        options=options,
        default=default,
    )


def _infer_type(typ: Any) -> Tuple[ParamType, Dict[str, str]]:
    """Pick a parameter type for an untyped tag from the field's annotation."""
    origin = get_origin(typ)
    if origin is Union or (
        hasattr(types, "UnionType") and origin is types.UnionType  # type: ignore
    ):
        # Optional[X] is treated as X.
        args = [arg for arg in get_args(typ) if arg is not NoneType]
        if len(args) == 1:
            return _infer_type(args[0])
        return ParamType.STRING, {}

    if origin in (Literal, typing.Literal):
        choices = get_args(typ)
        if all(isinstance(choice, str) for choice in choices):
            return ParamType.OPTION, {choice: choice for choice in choices}
        return ParamType.STRING, {}

    if typ is bool:
        return ParamType.BOOL, {}
    elif typ is int:
        return ParamType.INT, {}
    else:
        return ParamType.STRING, {}


def _default_from_field(field: dataclasses.Field, param_type: ParamType) -> str:
    # Absent booleans are always false.
    if param_type is ParamType.BOOL:
        return ""

    if field.default is not dataclasses.MISSING:
        default = field.default
    elif field.default_factory is not dataclasses.MISSING:  # type: ignore
        default = field.default_factory()  # type: ignore
    else:
        return ""

    return "" if default is None else str(default)
