"""Splitting one command segment into words, with quote removal."""

from __future__ import annotations

from dataclasses import dataclass

_OPERATORS = ("|", ">", "<")


@dataclass(frozen=True)
class WordSplit:
    """The words of a segment and whether its last quoted word used single quotes."""

    words: tuple[str, ...]
    inside_single_quotes: bool

    def __iter__(self):
        return iter(self.words)

    def __len__(self) -> int:
        return len(self.words)


@dataclass
class _QuoteState:
    double: int
    single: int
    inside_single: bool


def _at(text: str, index: int) -> str:
    return text[index] if 0 <= index < len(text) else ""


def _initial_state(text: str) -> _QuoteState:
    first = next((char for char in text if char in "'\""), "")
    return _QuoteState(
        double=text.count('"'),
        single=text.count("'"),
        inside_single=first == "'",
    )


def _skip_quoted(text: str, last: int, index: int, quote: str, total: int) -> int:
    if _at(text, index + 1) == quote and _at(text, index + 2) in (" ", ""):
        return index + 2
    seen = 0
    while index <= last and seen <= total:
        if text[index] == quote:
            seen += 1
        if seen % 2 == 0 and _at(text, index + 1) == " ":
            return index + 1
        index += 1
    return index


def _count(text: str, state: _QuoteState) -> int:
    last = len(text) - 1
    count = 0
    index = 0
    while index <= last:
        char = text[index]
        if char == "'":
            count += 1
            index = _skip_quoted(text, last, index, "'", state.single)
        elif char == '"':
            count += 1
            index = _skip_quoted(text, last, index, '"', state.double)
        elif char != " ":
            count += 1
            while index <= last and text[index] != " ":
                index += 1
            index += 1
        else:
            index += 1
    return count


def _operator_at(text: str, index: int, state: _QuoteState) -> str | None:
    if state.single % 2 or state.double % 2:
        return None
    char = _at(text, index)
    if char not in _OPERATORS:
        return None
    return char * 2 if _at(text, index + 1) == char else char


def _copy_run(text: str, index: int, quote: str, chars: list[str], length: int) -> int:
    closed = 0
    while len(chars) < length and index < len(text):
        if text[index] == quote:
            closed += 1
        while index < len(text) and text[index] != quote:
            if closed >= 2 and text[index] == " ":
                return index
            chars.append(text[index])
            index += 1
        index += 1
    return index


def _copy_without(text: str, quote: str, length: int) -> str:
    # A word never grows beyond the length the scan set for it.
    chars: list[str] = []
    index = 0
    while len(chars) < length and index < len(text):
        index = _copy_run(text, index, quote, chars, length) + 1
    return "".join(chars[:length])


def _quoted_word(text: str, start: int, quote: str, state: _QuoteState) -> str:
    if quote == '"':
        state.double -= 1
    else:
        state.single -= 1
    seen = 0
    index = start
    while index < len(text):
        if text[index] == quote:
            seen += 1
        following = _at(text, index + 1)
        if not following:
            index += 1
            break
        if following == " " and seen % 2 == 0:
            index += 1
            break
        index += 1
    return _copy_without(text, quote, index - seen)


def _unquote(text: str, state: _QuoteState) -> str:
    for index, char in enumerate(text):
        if char in "'\"":
            return _quoted_word(text, index, char, state)
    return ""


def _next_word(text: str, state: _QuoteState) -> tuple[str, int]:
    """Return the next word of *text* and how far the cursor moves past it."""
    mode = 0
    quotes = 0
    index = 0
    while index < len(text):
        char = text[index]
        if char == '"' and mode in (0, 2):
            state.inside_single = False
            mode = 2
            quotes += 1
            if state.double == quotes and _at(text, index + 1) == " ":
                index += 1
                break
        elif char == "'" and mode in (0, 1):
            state.inside_single = True
            mode = 1
            quotes += 1
            if state.single == quotes and _at(text, index + 1) == " ":
                index += 1
                break
        elif char == " " and quotes % 2 == 0:
            break
        operator = _operator_at(text, index, state)
        if operator is not None:
            return operator, index
        index += 1
    if quotes >= 2:
        return _unquote(text, state), index
    return text[:index], index


def count_words(text: str) -> int:
    """Count the words of a segment; a quoted run counts as one word."""
    return _count(text, _initial_state(text))


def split_words(text: str) -> WordSplit:
    """Split a segment into exactly as many words as count_words finds, removing quotes."""
    state = _initial_state(text)
    count = _count(text, state)
    words: list[str] = []
    rest = text
    for _ in range(count):
        rest = rest.lstrip(" ")
        word, advance = _next_word(rest, state)
        words.append(word)
        rest = rest[advance:]
    return WordSplit(tuple(words), state.inside_single)