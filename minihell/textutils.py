"""Small string helpers used by the shell."""

from __future__ import annotations


def _is_alpha(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z")


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def trim_leading_spaces(text: str) -> str:
    """Return *text* without the spaces at its start."""
    return text.lstrip(" ")


def squeeze_spaces(text: str) -> str:
    """Drop each space together with the character after it, keeping at most three characters."""
    kept: list[str] = []
    chars = iter(text)
    for char in chars:
        if char == " ":
            next(chars, None)
        else:
            kept.append(char)
    return "".join(kept)[:3]


def compare(first: str, second: str) -> int:
    """Compare two strings: 0 if equal, 1 if *first* sorts after, -1 if before.

    Either string being empty yields 2.
    """
    if not first or not second:
        return 2
    if first == second:
        return 0
    return 1 if first > second else -1


def count_char(text: str, char: str) -> int:
    """Count how many times *char* occurs in *text*."""
    return text.count(char)


def invalid_first_char(text: str | None) -> bool:
    """Tell whether *text* starts with something other than an ASCII letter."""
    if not text:
        return False
    return not _is_alpha(text[0])


def is_valid_identifier(text: str) -> bool:
    """Tell whether the name part (before any '=') of *text* is letters and digits led by a letter."""
    if text.startswith("="):
        return False
    name = text.split("=", 1)[0]
    if name and invalid_first_char(text):
        return False
    return all(_is_alpha(char) or _is_digit(char) for char in name)