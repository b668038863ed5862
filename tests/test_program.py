import pytest

from decli import Program, Registry
from decli.exceptions import ConfigError, SpecNotFoundError


class Files(Program):
    def filter_files(self, name, opts, *files):
        types = set(opts["types"])
        return [f for f in files if f.rsplit(".", 1)[-1] in types]

    def sort_files(self, name, opts, *files):
        return sorted(files, reverse=opts.get("reverse", False))


Files.opt("types", list=True, default=lambda: ["txt", "rtf", "doc"])
Files.opt("reverse", bool=True, description="Sort descending")
Files.arg("filter", Files.filter_files)
Files.arg("sort", Files.sort_files, description="sort args")
Files.describe_arg("filter", "Filters args to only show those specified in types")


class Other(Program):
    pass


@Other.command("echo", alias="e")
def echo(owner, name, opts, *words):
    return " ".join(words)


def test_each_subclass_has_its_own_registry():
    assert isinstance(Files.registry, Registry)
    assert Files.registry is not Other.registry
    assert "types" in Files.registry.options
    assert "types" not in Other.registry.options


def test_filter_with_default_types():
    result = Files().process_cli("filter", "a.txt", "b.jpg", "c.doc")
    assert result == ["a.txt", "c.doc"]


def test_filter_with_given_types():
    result = Files().process_cli("-types", "txt,jpg,gif", "filter", "a.txt", "b.jpg")
    assert result == ["a.txt", "b.jpg"]


def test_sort_and_last_options():
    files = Files()
    assert files.process_cli("-r", "so", "a", "c", "b") == ["c", "b", "a"]
    assert files.opts == {"reverse": True, "types": ["txt", "rtf", "doc"]}


def test_instances_keep_their_own_options():
    first, second = Files(), Files()
    first.process_cli("-r")
    second.process_cli()
    assert first.opts["reverse"] is True
    assert "reverse" not in second.opts


def test_command_decorator_returns_function():
    assert Other().process_cli("e", "hello", "world") == "hello world"
    assert echo(None, "echo", {}, "x") == "x"


def test_descriptions_and_usage():
    assert Files.describe_opt("reverse") == "Sort descending"
    assert Files.describe_arg("filter").startswith("Filters args")
    usage = Files.usage()
    assert "-reverse" in usage
    assert "    sort      sort args" in usage
    with pytest.raises(SpecNotFoundError):
        Files.describe_opt("missing")


def test_registration_errors_surface():
    class Broken(Program):
        pass

    with pytest.raises(ConfigError):
        Broken.opt("x", bool=True, list=True)
    with pytest.raises(ConfigError):
        Broken.arg("y")


def test_explicit_registry_is_kept():
    shared = Registry()
    shared.add_opt("level")

    class Explicit(Program):
        registry = shared

    assert Explicit.registry is shared
    assert Explicit().process_cli("-l", "3") == {"level": "3"}


def test_program_base_class_has_no_registry():
    with pytest.raises(ConfigError, match="Program has no registry"):
        Program.opt("verbose", bool=True)
    with pytest.raises(ConfigError, match="declare options on a subclass"):
        Program.arg("run", lambda *args: None)
    with pytest.raises(ConfigError):
        Program.usage()
    with pytest.raises(ConfigError):
        Program().process_cli("-v")


def test_get_registry_returns_class_registry():
    assert Files.get_registry() is Files.registry
    assert Files().get_registry() is Files.registry
