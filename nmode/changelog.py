"""Record of changes to the XML format, keyed by version."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from nmode.version import Version


@dataclass(frozen=True)
class ChangeLogEntry:
    """A single change to the XML format."""

    version: Version
    description: str
    crucial: bool = False


class ChangeLog:
    """Entries kept in version order, with the latest and last crucial versions."""

    def __init__(self) -> None:
        self._entries: list[ChangeLogEntry] = []
        self._version = Version()
        self._last_crucial_change = Version()

    def add(self, version: Version, description: str, crucial: bool = False) -> ChangeLogEntry:
        """Add an entry and keep the log sorted by version."""
        entry = ChangeLogEntry(version, description, crucial)
        self._entries.append(entry)
        self._entries.sort(key=lambda e: e.version)
        self._version = self._entries[-1].version
        latest_crucial = next(
            (e.version for e in reversed(self._entries) if e.crucial), None
        )
        if latest_crucial is not None:
            self._last_crucial_change = latest_crucial
        return entry

    def version(self) -> Version:
        """Return the newest version in the log."""
        return self._version

    def last_crucial_change(self) -> Version:
        """Return the newest version that carries a crucial change."""
        return self._last_crucial_change

    def changes(self, since: Version) -> str:
        """Describe every change newer than ``since``, one line each."""
        width = max((len(str(e.version)) for e in self._entries), default=0)
        lines = []
        for entry in self._entries:
            if entry.version > since:
                kind = "crucial " if entry.crucial else "optional"
                lines.append(
                    f"{str(entry.version):>{width}} -- {kind} -- {entry.description}\n"
                )
        return "".join(lines)

    def __iter__(self) -> Iterator[ChangeLogEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)