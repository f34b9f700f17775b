"""Flat record of which files were modified, by whom and when."""

from __future__ import annotations

from pathlib import Path

from auriga.models import AgentId, FileActivity


class FileActivityStore:
    def __init__(self) -> None:
        self._entries: list[FileActivity] = []

    def _find(self, path: Path) -> FileActivity | None:
        return next((e for e in self._entries if e.path == path), None)

    def record(self, path, agent: AgentId | None) -> None:
        path = Path(path)
        entry = self._find(path)
        if entry is not None:
            entry.touch(agent)
        else:
            self._entries.append(FileActivity(path, agent))

    def remove(self, path) -> None:
        path = Path(path)
        self._entries = [e for e in self._entries if e.path != path]

    def rename(self, old, new, agent: AgentId | None) -> None:
        entry = self._find(Path(old))
        if entry is not None:
            entry.path = Path(new)
            entry.touch(agent)
        else:
            self._entries.append(FileActivity(Path(new), agent))

    def sorted(self) -> list[FileActivity]:
        """Entries ordered by last modification, most recent first."""
        return sorted(self._entries, key=lambda e: e.last_modified, reverse=True)

    def count(self) -> int:
        return len(self._entries)