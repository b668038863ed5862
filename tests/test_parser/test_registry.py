import re

import pytest

from decli.exceptions import ConfigError, SpecNotFoundError
from decli.parser import MISSING, OptionKind, Registry, SpecKind
from decli.parser.parser_types import NO_DESCRIPTION


def noop(*args):
    return None


def test_add_opt_defaults():
    registry = Registry()
    spec = registry.add_opt("foo")
    assert spec.kind is OptionKind.SCALAR
    assert spec.aliases == ()
    assert spec.default is MISSING
    assert spec.description == NO_DESCRIPTION
    assert registry.options == {"foo": spec}


def test_aliases_share_one_spec():
    registry = Registry()
    spec = registry.add_opt("verbose", alias=["v", "loud"], bool=True)
    assert registry.options["v"] is spec
    assert registry.options["loud"] is spec
    assert registry.option_specs == {"verbose": spec}


def test_single_alias_string():
    registry = Registry()
    spec = registry.add_opt("nameA", alias="nameB")
    assert spec.aliases == ("nameB",)


def test_alias_equal_to_own_name_is_ignored():
    registry = Registry()
    spec = registry.add_opt("otherA", alias=["otherA", "otherB"])
    assert spec.aliases == ("otherB",)


@pytest.mark.parametrize(
    "config,message",
    [
        ({"bool": True, "check": "number"}, "'check' cannot be used with 'bool'"),
        ({"bool": True, "transform": str}, "'transform' cannot be used with 'bool'"),
        ({"bool": True, "list": True}, "mutually exclusive"),
        ({"colour": "red"}, "invalid opt property: 'colour'"),
        ({"check": "integer"}, "not a valid value for 'check'"),
        ({"default": ["a"]}, "wrap them in a callable"),
        ({"default": {"a": 1}}, "wrap them in a callable"),
        ({"transform": "upper"}, "'transform' must be callable"),
        ({"trigger": 1}, "'trigger' must be callable"),
    ],
)
def test_add_opt_config_errors(config, message):
    registry = Registry()
    with pytest.raises(ConfigError) as excinfo:
        registry.add_opt("foo", **config)
    assert message in str(excinfo.value)
    assert registry.options == {}


def test_add_opt_duplicate_name():
    registry = Registry()
    registry.add_opt("foo", alias="f")
    with pytest.raises(ConfigError, match="opt 'foo' already defined"):
        registry.add_opt("foo")
    with pytest.raises(ConfigError, match="opt 'f' already defined"):
        registry.add_opt("f")


def test_add_opt_alias_collision():
    registry = Registry()
    registry.add_opt("foo", alias="f")
    with pytest.raises(ConfigError, match="Cannot use alias 'foo'"):
        registry.add_opt("bar", alias="foo")
    with pytest.raises(ConfigError, match="Cannot use alias 'f'"):
        registry.add_opt("baz", alias=["b", "f"])
    assert "b" not in registry.options


def test_add_opt_accepts_callable_default_and_pattern_check():
    registry = Registry()
    spec = registry.add_opt("types", list=True, default=lambda: ["txt"])
    assert spec.kind is OptionKind.LIST
    assert spec.default() == ["txt"]
    registry.add_opt("name", check=re.compile(r"^\w+$"))


def test_add_opt_rejects_empty_name():
    with pytest.raises(ConfigError):
        Registry().add_opt("")


def test_add_arg_with_positional_handler():
    registry = Registry()
    spec = registry.add_arg("build", noop)
    assert spec.handler is noop
    assert spec.description == NO_DESCRIPTION


def test_add_arg_with_handler_property():
    registry = Registry()
    spec = registry.add_arg("build", handler=noop, alias="b", description="Build it")
    assert registry.arguments["b"] is spec
    assert spec.description == "Build it"


@pytest.mark.parametrize(
    "args,config,message",
    [
        ((), {}, "You must provide a handler"),
        ((), {"description": "x"}, "You must provide a handler"),
        ((), {"handler": noop, "bool": True}, "invalid arg property: 'bool'"),
        (("not callable",), {}, "'handler' must be callable"),
    ],
)
def test_add_arg_config_errors(args, config, message):
    registry = Registry()
    with pytest.raises(ConfigError) as excinfo:
        registry.add_arg("build", *args, **config)
    assert message in str(excinfo.value)


def test_add_arg_duplicate_and_alias_collision():
    registry = Registry()
    registry.add_arg("build", noop, alias="b")
    with pytest.raises(ConfigError, match="arg 'build' already defined"):
        registry.add_arg("build", noop)
    with pytest.raises(ConfigError, match="Cannot use alias 'b'"):
        registry.add_arg("bake", noop, alias="b")


def test_option_and_argument_namespaces_are_disjoint():
    registry = Registry()
    registry.add_opt("help", bool=True)
    registry.add_arg("help", noop)
    assert registry.options["help"].name == "help"
    assert registry.arguments["help"].name == "help"


def test_describe():
    registry = Registry()
    registry.add_opt("foo", alias="f")
    registry.add_arg("build", noop)
    assert registry.describe(SpecKind.OPTION, "foo") == NO_DESCRIPTION
    assert registry.describe("opt", "f", "The foo") == "The foo"
    assert registry.describe("option", "foo") == "The foo"
    assert registry.describe("arg", "build", "Build it") == "Build it"


def test_describe_unknown_name():
    registry = Registry()
    registry.add_opt("foo")
    with pytest.raises(SpecNotFoundError, match="No such argument 'foo'"):
        registry.describe(SpecKind.ARGUMENT, "foo")
    with pytest.raises(LookupError):
        registry.describe(SpecKind.OPTION, "fo")


def test_constructor_registers_mappings():
    registry = Registry(
        options={"foo": {"alias": "f"}, "bar": {"list": True}},
        arguments={"build": noop, "test": {"handler": noop, "alias": "t"}},
    )
    assert set(registry.option_specs) == {"foo", "bar"}
    assert set(registry.arguments) == {"build", "test", "t"}


def test_suggest():
    registry = Registry()
    registry.add_opt("verbose", alias="v")
    registry.add_opt("version")
    registry.add_opt("quiet")
    assert registry.suggest(SpecKind.OPTION, "v") == ["v", "verbose", "version"]
    assert registry.suggest("opt", "x") == []
    assert registry.suggest("opt") == ["quiet", "v", "verbose", "version"]


def test_resolve_method():
    registry = Registry()
    registry.add_arg("build", noop)
    assert registry.resolve("arg", "b") == "build"


def test_str():
    registry = Registry()
    registry.add_opt("foo", alias=["f", "fo"])
    registry.add_arg("build", noop)
    assert (
        str(registry)
        == "Registry(options=1, option_keys=3, arguments=1, argument_keys=1)"
    )
    assert repr(registry) == str(registry)


def test_add_arg_handler_keyword_matches_positional():
    registry = Registry()
    by_keyword = registry.add_arg("build", handler=noop)
    by_position = registry.add_arg("test", noop)
    assert by_keyword.handler is by_position.handler is noop
    with pytest.raises(TypeError):
        registry.add_arg("lint", noop, handler=noop)
    assert "lint" not in registry.arguments
