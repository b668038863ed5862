import pytest
from prompt_toolkit.completion import Completion
from prompt_toolkit.document import Document

from decli.completer import DecliCompleter
from decli.parser import Registry


def noop(owner, name, opts, *operands):
    return None


@pytest.fixture
def registry():
    registry = Registry()
    registry.add_opt("verbose", bool=True)
    registry.add_opt("types", list=True)
    registry.add_opt("target", alias="tgt")
    registry.add_arg("build", noop)
    registry.add_arg("bench", noop)
    registry.add_arg("run", noop)
    return registry


def texts(completer, text):
    return [c.text for c in completer.get_completions(Document(text), None)]


def test_get_completions_no_input(registry):
    completer = DecliCompleter(registry)
    results = list(completer.get_completions(Document(""), None))
    assert all(isinstance(c, Completion) for c in results)
    assert [c.text for c in results] == ["bench", "build", "run"]


def test_get_completions_partial_command(registry):
    completer = DecliCompleter(registry)
    assert texts(completer, "b") == ["bench", "build"]
    assert texts(completer, "bu") == ["build"]
    assert texts(completer, "z") == []


def test_get_completions_partial_option_keeps_dashes(registry):
    completer = DecliCompleter(registry)
    assert texts(completer, "--ty") == ["--types"]
    assert texts(completer, "-ve") == ["-verbose"]
    assert texts(completer, "--t") == ["--target", "--tgt", "--types"]


def test_start_position_covers_stub(registry):
    completer = DecliCompleter(registry)
    [completion] = completer.get_completions(Document("-v --ty"), None)
    assert completion.start_position == -4


def test_no_completion_for_option_value(registry):
    completer = DecliCompleter(registry)
    assert texts(completer, "--types ") == []
    assert texts(completer, "-tgt ") == []


def test_commands_follow_complete_options(registry):
    completer = DecliCompleter(registry)
    assert texts(completer, "--types=a,b r") == ["run"]
    assert texts(completer, "-v ") == ["bench", "build", "run"]
    assert texts(completer, "--types a ") == ["bench", "build", "run"]


def test_no_completion_after_command(registry):
    completer = DecliCompleter(registry)
    assert texts(completer, "build ") == []
    assert texts(completer, "build -") == []


def test_separator_disables_options(registry):
    completer = DecliCompleter(registry)
    assert texts(completer, "-- ") == ["bench", "build", "run"]
    assert texts(completer, "-- -v") == []
    assert texts(completer, "-- run ") == []


def test_unbalanced_quotes(registry):
    completer = DecliCompleter(registry)
    assert texts(completer, 'run "unterminated') == []


def test_lcp_completions():
    registry = Registry()
    registry.add_arg("deploy-prod", noop)
    registry.add_arg("deploy-stage", noop)
    completer = DecliCompleter(registry)
    assert texts(completer, "d") == ["deploy-", "deploy-prod", "deploy-stage"]


def test_ensure_quote(registry):
    completer = DecliCompleter(registry)
    assert completer._ensure_quote("a b") == '"a b"'
    assert completer._ensure_quote("ab") == "ab"
