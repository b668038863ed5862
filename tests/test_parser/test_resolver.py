import pytest

from decli.exceptions import AmbiguityError, UnknownNameError
from decli.parser import Registry, SpecKind, resolve
from decli.parser.resolver import find_candidates


@pytest.fixture
def registry():
    registry = Registry()
    registry.add_opt("foo")
    registry.add_opt("bar")
    registry.add_opt("baz", alias=["zed"])
    registry.add_opt("foobar")
    return registry


@pytest.mark.parametrize("key", ["foob", "fooba", "foobar"])
def test_unambiguous_prefix(registry, key):
    assert resolve(SpecKind.OPTION, registry.options, key) == "foobar"


def test_exact_match_wins_over_prefix(registry):
    assert resolve(SpecKind.OPTION, registry.options, "foo") == "foo"


def test_alias_resolves_to_canonical_name(registry):
    assert resolve("option", registry.options, "zed") == "baz"
    assert resolve("option", registry.options, "z") == "baz"


def test_ambiguous_prefix_lists_sorted_candidates(registry):
    with pytest.raises(AmbiguityError) as excinfo:
        resolve(SpecKind.OPTION, registry.options, "b")
    assert excinfo.value.candidates == ["bar", "baz"]
    assert excinfo.value.key == "b"
    assert str(excinfo.value) == "partial option 'b' is ambiguous, could be: bar, baz"


def test_ambiguity_counts_canonical_names_not_aliases():
    registry = Registry()
    registry.add_opt("verbose", alias=["verb", "vv"])
    assert resolve(SpecKind.OPTION, registry.options, "v") == "verbose"


def test_unknown_name(registry):
    with pytest.raises(UnknownNameError) as excinfo:
        resolve(SpecKind.OPTION, registry.options, "qux")
    assert str(excinfo.value) == "unknown option 'qux'"


def test_prefix_match_is_case_sensitive(registry):
    with pytest.raises(UnknownNameError):
        resolve(SpecKind.OPTION, registry.options, "FOO")


def test_prefix_is_literal_not_a_pattern():
    registry = Registry()
    registry.add_opt("a.b")
    registry.add_opt("axb")
    assert resolve(SpecKind.OPTION, registry.options, "a.") == "a.b"


def test_argument_namespace_is_separate(registry):
    registry.add_arg("build", lambda *args: None)
    assert resolve(SpecKind.ARGUMENT, registry.arguments, "bu") == "build"
    with pytest.raises(UnknownNameError) as excinfo:
        resolve(SpecKind.ARGUMENT, registry.arguments, "foo")
    assert excinfo.value.kind == "argument"


def test_find_candidates(registry):
    assert find_candidates(registry.options, "foo") == ["foo", "foobar"]
    assert find_candidates(registry.options, "x") == []
