"""Deciding what each command of a segmented line connects to."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_OPERATORS = frozenset({">", "<", ">>", "<<", "|"})


@dataclass
class StepFlags:
    """What the command at one position reads from, writes to, or skips."""

    write_to_pipe: bool = False
    redir: bool = False
    read_from_pipe: bool = False
    read_from_file: bool = False
    heredoc: bool = False
    skip: bool = False
    create_file: bool = False
    only_create: bool = False


def is_operator(text: str) -> bool:
    """Tell whether *text* is exactly one of the shell operators."""
    return text in _OPERATORS


def _part(parts: Sequence[str], index: int) -> str | None:
    return parts[index] if 0 <= index < len(parts) else None


def _apply_following(flags: StepFlags, parts: Sequence[str], index: int) -> None:
    following = _part(parts, index + 1)
    if following == "|":
        flags.write_to_pipe = True
    elif following in (">", ">>"):
        flags.redir = True
    elif following == "<":
        flags.read_from_file = True
        if _part(parts, index + 3) == "|":
            flags.write_to_pipe = True
    elif following == "<<":
        flags.heredoc = True


def _apply_preceding(flags: StepFlags, parts: Sequence[str], index: int) -> None:
    preceding = _part(parts, index - 1)
    if preceding == "|":
        flags.read_from_pipe = True
    if preceding in (">>", ">", "<", "<<"):
        flags.skip = True


def plan_step(parts: Sequence[str], index: int) -> StepFlags:
    """Work out the flags for the command at *index* of the segmented line."""
    flags = StepFlags()
    if _part(parts, 0) in (">", ">>"):
        flags.only_create = True
        flags.skip = True
    elif _part(parts, index) is not None and _part(parts, index + 1) is not None:
        _apply_following(flags, parts, index)
    if index > 1:
        _apply_preceding(flags, parts, index)
    return flags


def format_array(items: Iterable[str]) -> str:
    """Number each item on its own line and close with an end marker."""
    lines = [f"{position} - {item}\n" for position, item in enumerate(items)]
    return "".join(lines) + "end of array\n\n"


def format_flags(flags: StepFlags, parts: Sequence[str], index: int, pipes: int) -> str:
    """Describe the flags of one step for debugging."""
    rule = "----------------------\n"
    return (
        rule
        + f"nb of pipes: {pipes}\n"
        + f"token: {_part(parts, index)}, index: {index}\n"
        + f"read from pipe: {int(flags.read_from_pipe)}\n"
        + f"write to pipe: {int(flags.write_to_pipe)}\n"
        + f"redir: {int(flags.redir)}\n"
        + f"read from file: {int(flags.read_from_file)}\n"
        + rule
    )