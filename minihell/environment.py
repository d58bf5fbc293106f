"""The shell's variable table and the PATH helpers built on it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def has_assignment(text: str) -> bool:
    """Tell whether *text* holds an '=' that is not its first character."""
    if text.startswith("="):
        return False
    return "=" in text


class Environment:
    """An ordered list of ``NAME=value`` entries."""

    def __init__(self, entries: Iterable[str]) -> None:
        self.entries: list[str] = list(entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def get(self, name: str) -> str | None:
        """Return the value of variable *name*, or None when it is not set.

        Entries without an '=' are never matched.
        """
        for entry in self.entries:
            key, sep, value = entry.partition("=")
            if sep and key == name:
                return value
        return None

    def index_of(self, name: str) -> int | None:
        """Return the position of the first entry that *name* leads into.

        With an assignment (``NAME=value``) the part up to the '=' is compared
        against the start of each entry; otherwise the whole of *name* is.
        The comparison is by prefix, so a shorter name matches a longer entry.
        """
        if has_assignment(name):
            length = name.index("=")
        else:
            length = len(name)
        prefix = name[:length]
        for position, entry in enumerate(self.entries):
            if entry[:length] == prefix:
                return position
        return None

    def add(self, entry: str) -> None:
        """Append *entry* at the end of the table."""
        self.entries.append(entry)

    def remove(self, index: int) -> None:
        """Drop the entry at *index*; raise IndexError when there is none."""
        if not 0 <= index < len(self.entries):
            raise IndexError(f"no environment entry at {index}")
        del self.entries[index]

    def path_value(self) -> str | None:
        """Return the text after ``PATH=`` of the first entry starting with PATH."""
        for entry in self.entries:
            if entry.startswith("PATH"):
                return entry[5:]
        return None


def count_paths(path_value: str) -> int:
    """Count the ':' separators in a PATH value; only that many directories are searched."""
    return path_value.count(":")


def command_candidates(directories: Iterable[str], command: str) -> list[str]:
    """Join *command* onto each directory."""
    return [f"{directory}/{command}" for directory in directories]


def quote_export(entry: str) -> str:
    """Format *entry* as export prints it: the value after the first '=' in double quotes."""
    key, sep, value = entry.partition("=")
    if not sep:
        return entry + '"'
    return f'{key}="{value}"'