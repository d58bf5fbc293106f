"""Cutting a command line into command text and operator parts."""

from __future__ import annotations

from dataclasses import dataclass

_OPERATOR_CHARS = "|<>"


@dataclass(frozen=True)
class Segmentation:
    """The parts of a line and how many pipe, output and input operators were cut out.

    Command parts keep the spaces that follow them. The parts always end with
    one empty string, which marks the end of the line.
    """

    parts: tuple[str, ...]
    pipes: int = 0
    redirections: int = 0
    reads: int = 0

    def __iter__(self):
        return iter(self.parts)

    def __len__(self) -> int:
        return len(self.parts)


def _at(line: str, index: int) -> str:
    return line[index] if 0 <= index < len(line) else ""


def _operator_width(line: str, position: int) -> int:
    """Width of an operator that ends at *position*, or 0 when there is none."""
    char = line[position]
    if char not in _OPERATOR_CHARS:
        return 0
    return 2 if _at(line, position - 1) == char else 1


def count_segments(line: str | None) -> int:
    """Count command texts and operators, scanning the line from its end."""
    if not line:
        return 0
    count = 0
    position = len(line) - 1
    while position >= 0:
        if line[position] not in " " + _OPERATOR_CHARS:
            count += 1
            while position > 0 and line[position] not in _OPERATOR_CHARS:
                position -= 1
        if line[position] == " ":
            position -= 1
            continue
        width = _operator_width(line, position)
        if width:
            count += 1
            position -= width
        else:
            position -= 1
    return count


def _next_part(rest: str) -> str:
    if rest and rest[0] in _OPERATOR_CHARS:
        width = 2 if _at(rest, 1) == rest[0] else 1
        return rest[:width]
    end = next(
        (index for index, char in enumerate(rest) if char in _OPERATOR_CHARS),
        len(rest),
    )
    return rest[:end]


def segment(line: str) -> Segmentation:
    """Cut *line* into one more part than count_segments finds."""
    parts: list[str] = []
    pipes = redirections = reads = 0
    rest = line
    for _ in range(count_segments(line) + 1):
        rest = rest.lstrip(" ")
        part = _next_part(rest)
        if part.startswith("|"):
            pipes += 1
        elif part.startswith(">"):
            redirections += 1
        elif part.startswith("<"):
            reads += 1
        parts.append(part)
        rest = rest[len(part):]
    return Segmentation(tuple(parts), pipes, redirections, reads)