"""Replacement of ``$NAME`` references inside words."""

from __future__ import annotations

from collections.abc import Iterable

from minihell.environment import Environment


def strip_single_quotes(text: str) -> str:
    """Return *text* with every single quote removed."""
    return text.replace("'", "")


def expand_tokens(tokens: Iterable[str], env: Environment) -> list[str]:
    """Return *tokens* with ``$NAME`` references replaced by their values.

    The name runs to the end of the word, so only a reference that ends the
    word is replaced. Once a double quote has been seen in any earlier word,
    single quotes are dropped from the name before it is looked up. Unknown
    names are left as they are.
    """
    expanded: list[str] = []
    seen_quote = False
    for token in tokens:
        position = 0
        while position < len(token):
            char = token[position]
            if char == '"':
                seen_quote = True
            elif char == "$" and position + 1 < len(token):
                name = token[position + 1 :]
                if seen_quote:
                    name = strip_single_quotes(name)
                value = env.get(name)
                if value is not None:
                    tail = token[position + len(name) + 1 :]
                    token = token[:position] + value + tail
            position += 1
        expanded.append(token)
    return expanded