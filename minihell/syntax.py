"""Checks that reject malformed command lines before they are run."""

from __future__ import annotations


class ShellSyntaxError(Exception):
    """A command line that cannot be run; *token* is the offending token, or None for unclosed quotes."""

    status = 2

    def __init__(self, token: str | None = None, notes: list[str] | None = None) -> None:
        self.token = token
        self.notes = list(notes or [])
        if token is None:
            message = "syntax error: unclosed quotes"
        else:
            message = f"syntax error near unexpected token `{token}'"
        super().__init__(message)


def _at(line: str, index: int) -> str:
    return line[index] if 0 <= index < len(line) else ""


def _message(token: str) -> str:
    return f"syntax error near unexpected token `{token}'"


def check_trailing(line: str, char: str) -> None:
    """Reject a line that ends with *char*."""
    if not line or line[-1] != char:
        return
    if char != "|":
        raise ShellSyntaxError("newline")
    if _at(line, len(line) - 2) == char:
        raise ShellSyntaxError("||")
    raise ShellSyntaxError("|")


def check_leading(line: str | None, char: str) -> None:
    """Reject a line that starts with *char*."""
    if not line:
        return
    if line[0] == char and _at(line, 1) == char:
        raise ShellSyntaxError(line[0] + line[1])
    if line[0] == char:
        raise ShellSyntaxError(line[0])


def _redirect_before_pipe(line: str, index: int) -> None:
    char = line[index]
    before = _at(line, index - 1)
    if char == ">" and _at(line, index + 2) == "" and before != ">":
        raise ShellSyntaxError("newline")
    if before == char:
        raise ShellSyntaxError("||" if _at(line, index + 2) == "|" else "|")


def _pipe_pair_error(line: str, index: int) -> ShellSyntaxError:
    if _at(line, index + 1) == "|":
        return ShellSyntaxError("||")
    return ShellSyntaxError("|")


def _check_lone_pipes(line: str) -> None:
    after_operator = False
    for index, char in enumerate(line):
        if char == '"':
            break
        if char in "><" and _at(line, index + 1) == "|":
            _redirect_before_pipe(line, index)
        elif char in "|><" and not after_operator:
            after_operator = True
        elif char not in "| " and after_operator:
            after_operator = False
        elif char == "|" and after_operator:
            raise _pipe_pair_error(line, index)


def check_pipes(line: str) -> None:
    """Reject misplaced pipe symbols."""
    check_trailing(line, "|")
    check_leading(line, "|")
    _check_lone_pipes(line)


def _check_bare_operator(line: str, char: str) -> None:
    if len(line) >= 2 and line[0] == char and line[1] == char and len(line) == 2:
        raise ShellSyntaxError("newline")


def _repeat_error(line: str, index: int, char: str) -> ShellSyntaxError:
    if _at(line, index + 1) == char:
        return ShellSyntaxError(char + char)
    return ShellSyntaxError(char)


def _check_single(line: str, char: str) -> None:
    pending = False
    for index, current in enumerate(line):
        nxt = _at(line, index + 1)
        if current == char and nxt == char and not pending:
            return
        if current == char and not pending:
            pending = True
        elif current != char and current != " " and pending:
            pending = False
        elif current == char and pending:
            raise _repeat_error(line, index, char)


def _check_double(line: str, char: str) -> None:
    state = 0
    for index, current in enumerate(line):
        nxt = _at(line, index + 1)
        if current == char and nxt == char and state == 0:
            state = 1
        elif current != char and current != " " and state:
            state = 0
        elif current == char and state == 1:
            state = 2
        elif current == char and state == 2:
            raise _repeat_error(line, index, char)


def mixed_warnings(line: str, char: str, other: str) -> list[str]:
    """Messages for *other* following *char* with only spaces between; these never stop the line."""
    warnings: list[str] = []
    state = 0
    for index, current in enumerate(line):
        nxt = _at(line, index + 1)
        if current == ">" and nxt == "|":
            break
        if current == "<" and nxt == ">" and state == 0:
            break
        if current == char and state == 0:
            state = 1
        elif current == char and state == 1:
            state = 2
        elif current not in (char, " ", other) and state in (1, 2):
            state = 0
        elif current == other and state in (1, 2):
            token = other + other if nxt == other else other
            warnings.append(_message(token))
    return warnings


def check_redirections(line: str) -> list[str]:
    """Reject misplaced redirections; return the warnings found on the way."""
    for char in "><":
        _check_bare_operator(line, char)
    warnings: list[str] = []
    for char, other in ((">", "<"), ("<", ">"), ("<", "|"), (">", "|")):
        warnings.extend(mixed_warnings(line, char, other))
    try:
        for check in (_check_double, _check_single, check_trailing):
            for char in "><":
                check(line, char)
    except ShellSyntaxError as error:
        error.notes = warnings + error.notes
        raise
    return warnings


def _quotes_balanced(line: str, quote: str, other: str) -> bool:
    state = 0
    for char in line:
        if char == quote and state == 0:
            state = 1
        elif char == other and state == 1:
            state = 2
        elif char == other and state == 2:
            state = 1
        elif char == quote and state == 1:
            state = 0
    return state == 0


def check_quotes(line: str) -> None:
    """Reject a line with unclosed quotes."""
    if not _quotes_balanced(line, '"', "'") or not _quotes_balanced(line, "'", '"'):
        raise ShellSyntaxError(None)


def verify_line(line: str) -> list[str]:
    """Run every check on *line*; return warnings or raise ShellSyntaxError."""
    check_pipes(line)
    warnings = check_redirections(line)
    try:
        check_quotes(line)
    except ShellSyntaxError as error:
        error.notes = warnings + error.notes
        raise
    return warnings