import dataclasses
from typing import Optional

import pytest
from typing_extensions import Annotated, Literal

import flagbind
from flagbind import FlagbindWarning, ParamType, UnsupportedDestinationError
from flagbind._tags import Tag, bound_fields_from_dataclass


@dataclasses.dataclass
class Params:
    user: str = flagbind.tag("u", usage="User name", require="true", default="")
    password: str = flagbind.tag("p", usage="Password", require="true", default="")
    local_port: int = flagbind.tag("P", usage="Local port", type="int", default=0)
    mode: str = flagbind.tag(
        "m",
        usage="Mode",
        require="true",
        type="option",
        options="global:Global,rule:Rule,auto:Auto",
        default="",
    )
    verbose: bool = flagbind.tag("v", usage="Verbose output", type="bool", default=False)
    untagged: str = "left alone"


def test_tags_from_metadata() -> None:
    bound = bound_fields_from_dataclass(Params)
    assert [b.field_name for b in bound] == [
        "user",
        "password",
        "local_port",
        "mode",
        "verbose",
    ]
    params = {b.param.name: b.param for b in bound}
    assert params["u"].required
    assert params["u"].usage == "User name"
    assert params["P"].type is ParamType.INT
    assert not params["P"].required
    assert params["P"].default == "0"
    assert params["m"].options == {"global": "Global", "rule": "Rule", "auto": "Auto"}
    assert params["v"].type is ParamType.BOOL
    assert params["v"].default == ""


def test_raw_field_metadata() -> None:
    @dataclasses.dataclass
    class Raw:
        user: str = dataclasses.field(
            default="",
            metadata={"name": "u", "usage": "User", "require": "true", "default": "me"},
        )

    (bound,) = bound_fields_from_dataclass(Raw)
    assert bound.param.name == "u"
    assert bound.param.required
    assert bound.param.default == "me"


def test_annotated_tags() -> None:
    @dataclasses.dataclass
    class Annotations:
        user: Annotated[str, Tag("u", usage="User", require=True)] = ""
        port: Annotated[int, Tag("P", usage="Port")] = 8080
        mode: Annotated[
            str, Tag("m", type="option", options={"global": "Global"})
        ] = "global"

    params = [b.param for b in bound_fields_from_dataclass(Annotations)]
    assert [p.name for p in params] == ["u", "P", "m"]
    assert params[0].required
    assert params[1].type is ParamType.INT
    assert params[1].default == "8080"
    assert params[2].options == {"global": "Global"}


def test_type_inferred_from_annotation() -> None:
    @dataclasses.dataclass
    class Inferred:
        port: int = flagbind.tag("P", default=0)
        verbose: bool = flagbind.tag("v", default=True)
        name: Optional[str] = flagbind.tag("n", default=None)
        count: Optional[int] = flagbind.tag("c", default=None)
        mode: Literal["fast", "slow"] = flagbind.tag("m", default="fast")
        level: Literal[1, 2] = flagbind.tag("l", default=1)

    param_from_name = {
        b.param.name: b.param for b in bound_fields_from_dataclass(Inferred)
    }
    assert param_from_name["P"].type is ParamType.INT
    assert param_from_name["v"].type is ParamType.BOOL
    # Absent booleans are false, whatever the field default says.
    assert param_from_name["v"].default == ""
    assert param_from_name["n"].type is ParamType.STRING
    assert param_from_name["n"].default == ""
    assert param_from_name["c"].type is ParamType.INT
    assert param_from_name["m"].type is ParamType.OPTION
    assert param_from_name["m"].options == {"fast": "fast", "slow": "slow"}
    assert param_from_name["l"].type is ParamType.STRING


def test_unknown_type_tag_falls_back_to_string() -> None:
    @dataclasses.dataclass
    class Unknown:
        ratio: str = flagbind.tag("r", type="float", default="")

    with pytest.warns(FlagbindWarning):
        (bound,) = bound_fields_from_dataclass(Unknown)
    assert bound.param.type is ParamType.STRING


def test_usage_from_docstring() -> None:
    @dataclasses.dataclass
    class Documented:
        """Connection settings.

        Attributes:
            user: Name of the user to log in
                as.
            port: Port to connect to.
        """

        user: str = flagbind.tag("u", default="")
        port: int = flagbind.tag("P", usage="Explicit usage wins.", default=0)

    user, port = [b.param for b in bound_fields_from_dataclass(Documented)]
    assert user.usage == "Name of the user to log in as."
    assert port.usage == "Explicit usage wins."


def test_destination_must_be_dataclass() -> None:
    class NotADataclass:
        pass

    with pytest.raises(UnsupportedDestinationError):
        bound_fields_from_dataclass(NotADataclass)


def test_explicit_option_type_keeps_literal_choices() -> None:
    @dataclasses.dataclass
    class Explicit:
        mode: Annotated[Literal["a", "b"], Tag("m", type="option")] = "a"
        level: Literal["low", "high"] = flagbind.tag(
            "l", type="option", options="low:Low", default="low"
        )

    mode, level = [b.param for b in bound_fields_from_dataclass(Explicit)]
    assert mode.type is ParamType.OPTION
    assert mode.options == {"a": "a", "b": "b"}
    # Options written in the tag take precedence.
    assert level.options == {"low": "Low"}


def test_explicit_option_type_parses_literal_value() -> None:
    @dataclasses.dataclass
    class Explicit:
        mode: Annotated[Literal["a", "b"], Tag("m", type="option")] = "a"

    params = Explicit()
    result = flagbind.CommandLine(spinner=False).parse(params, ["-m=b"])
    assert result
    assert params.mode == "b"
