# Decli CLI Declarations — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `DecliCompleter`, a Prompt Toolkit completer for command lines parsed
by a `Registry`.

Completion follows the same rules as name resolution:
- A word starting with a dash completes against option names and aliases,
  keeping the dashes the user typed.
- The first non-option word completes against argument (command) names and
  aliases.
- Words after `--` or after the command are not completed.
- The value following a scalar or list option is not completed.

When several candidates share a longer common prefix than the typed stub, that
prefix is offered first, followed by every candidate.
"""
from __future__ import annotations

import os
import shlex
from typing import TYPE_CHECKING, Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from decli.exceptions import ParseError
from decli.parser.parser_types import SpecKind
from decli.parser.tokenizer import OPTION_TOKEN, SEPARATOR

if TYPE_CHECKING:
    from decli.parser.registry import Registry


class DecliCompleter(Completer):
    """
    Prompt Toolkit completer for options and commands declared in a `Registry`.

    Args:
        registry (Registry): The declarations to complete against.
    """

    def __init__(self, registry: Registry):
        self.registry = registry

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        """
        Compute completions for the current input.

        Args:
            document (Document): The current Prompt Toolkit document.
            complete_event: The triggering event, not used.

        Yields:
            Completion: Matching option or command names.
        """
        text = document.text_before_cursor
        try:
            tokens = shlex.split(text)
        except ValueError:
            return
        cursor_at_end_of_token = text.endswith((" ", "\t")) or not tokens

        parsed_tokens = tokens if cursor_at_end_of_token else tokens[:-1]
        stub = "" if cursor_at_end_of_token else tokens[-1]

        state = self._scan(parsed_tokens)
        if state is None:
            return

        if stub.startswith("-") and state == "options":
            dashes = len(stub) - len(stub.lstrip("-"))
            prefix = "-" * dashes
            names = self.registry.suggest(SpecKind.OPTION, stub[dashes:])
            yield from self._yield_lcp_completions(
                [f"{prefix}{name}" for name in names], stub
            )
        elif state in ("options", "command"):
            yield from self._yield_lcp_completions(
                self.registry.suggest(SpecKind.ARGUMENT, stub), stub
            )

    def _scan(self, tokens: list[str]) -> str | None:
        """
        Walk the completed tokens and report what the next word may be.

        Returns:
            "options" when an option or the command may follow, "command" after
            `--` when only the command may follow, and None when nothing should
            be completed.
        """
        options_enabled = True
        expecting_value = False
        for token in tokens:
            if expecting_value:
                expecting_value = False
                continue
            if token == SEPARATOR:
                options_enabled = False
                continue
            match = OPTION_TOKEN.match(token) if options_enabled else None
            if not match:
                return None
            try:
                name = self.registry.resolve(SpecKind.OPTION, match.group(1))
            except ParseError:
                continue
            spec = self.registry.options[name]
            expecting_value = not spec.is_bool and match.group(2) is None

        if expecting_value:
            return None
        return "options" if options_enabled else "command"

    def _ensure_quote(self, text: str) -> str:
        """Quote a completion containing whitespace."""
        if " " in text or "\t" in text:
            return f'"{text}"'
        return text

    def _yield_lcp_completions(self, suggestions, stub):
        """
        Yield completions for the current stub using longest-common-prefix logic.

        Args:
            suggestions (list[str]): The raw suggestions to consider.
            stub (str): The currently typed prefix.

        Yields:
            Completion: Completion objects for the Prompt Toolkit menu.
        """
        matches = [s for s in suggestions if s.startswith(stub)]
        if not matches:
            return

        lcp = os.path.commonprefix(matches)

        if len(matches) == 1:
            yield Completion(
                self._ensure_quote(matches[0]),
                start_position=-len(stub),
                display=matches[0],
            )
        elif len(lcp) > len(stub):
            yield Completion(lcp, start_position=-len(stub), display=lcp)
            for match in matches:
                yield Completion(
                    self._ensure_quote(match), start_position=-len(stub), display=match
                )
        else:
            for match in matches:
                yield Completion(
                    self._ensure_quote(match), start_position=-len(stub), display=match
                )
