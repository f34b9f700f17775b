"""Project file tree with collapsible directories and recent-activity views."""

from __future__ import annotations

from pathlib import Path

from auriga.models import AgentId, FileEntry

_RECENT_CACHE_LIMIT = 10


class FileTree:
    """Flat, depth-annotated list of file entries under a root directory.

    Entries are kept in display order: each directory is followed by its
    descendants. Visible and recent-activity views are cached and rebuilt
    by :meth:`refresh_caches` after any mutation.
    """

    def __init__(self, root=None) -> None:
        self.root = Path(root) if root is not None else Path("")
        self._entries: list[FileEntry] = []
        self._index: dict[Path, int] = {}
        self._visible_cache: list[int] | None = None
        self._recent_cache: list[int] | None = None

    def _rebuild_index(self) -> None:
        self._index = {entry.path: i for i, entry in enumerate(self._entries)}

    def _invalidate_caches(self) -> None:
        self._visible_cache = None
        self._recent_cache = None

    def set_entries(self, entries) -> None:
        self._entries = list(entries)
        self._rebuild_index()
        self._invalidate_caches()

    def entries(self) -> list[FileEntry]:
        return list(self._entries)

    def _compute_visible(self) -> list[int]:
        """Indices of entries whose ancestors are all expanded."""
        visible: list[int] = []
        collapsed_depth: int | None = None
        for i, entry in enumerate(self._entries):
            if collapsed_depth is not None:
                if entry.depth > collapsed_depth:
                    continue
                collapsed_depth = None
            visible.append(i)
            if entry.is_dir and not entry.expanded:
                collapsed_depth = entry.depth
        return visible

    def _compute_recent(self, limit: int) -> list[int]:
        modified = [
            i
            for i, e in enumerate(self._entries)
            if not e.is_dir and e.last_modified is not None
        ]
        modified.sort(key=lambda i: self._entries[i].last_modified, reverse=True)
        return modified[:limit]

    def refresh_caches(self) -> None:
        """Rebuild any invalidated cached views."""
        if self._visible_cache is None:
            self._visible_cache = self._compute_visible()
        if self._recent_cache is None:
            self._recent_cache = self._compute_recent(_RECENT_CACHE_LIMIT)

    def has_cached_views(self) -> bool:
        """True when both the visible and the recent views are cached."""
        return self._visible_cache is not None and self._recent_cache is not None

    def visible_entries(self) -> list[FileEntry]:
        indices = self._visible_cache
        if indices is None:
            indices = self._compute_visible()
        return [self._entries[i] for i in indices]

    def visible_count(self) -> int:
        if self._visible_cache is not None:
            return len(self._visible_cache)
        return len(self._compute_visible())

    def visible_entry_at(self, idx: int) -> FileEntry | None:
        """Entry at a visible position; None if out of range or not cached."""
        indices = self._visible_cache
        if indices is None or not 0 <= idx < len(indices):
            return None
        return self._entries[indices[idx]]

    def recent_activity(self, limit: int) -> list[FileEntry]:
        """Most recently modified files, newest first."""
        if self._recent_cache is not None:
            indices = self._recent_cache[:limit]
        else:
            indices = self._compute_recent(limit)
        return [self._entries[i] for i in indices]

    def recent_count(self, limit: int) -> int:
        if self._recent_cache is not None:
            return min(len(self._recent_cache), limit)
        return len(self._compute_recent(limit))

    def recent_entry_at(self, idx: int) -> FileEntry | None:
        indices = self._recent_cache
        if indices is None or not 0 <= idx < len(indices):
            return None
        return self._entries[indices[idx]]

    def toggle_dir(self, idx: int) -> None:
        """Expand or collapse the directory at a visible position."""
        visible = self._visible_cache
        if visible is None:
            visible = self._compute_visible()
        if 0 <= idx < len(visible):
            entry = self._entries[visible[idx]]
            if entry.is_dir:
                entry.expanded = not entry.expanded
        self._invalidate_caches()

    def record_activity(self, path, agent: AgentId | None) -> None:
        """Touch a path and its ancestor directories, inserting it if new."""
        path = Path(path)
        idx = self._index.get(path)
        if idx is not None:
            self._entries[idx].touch(agent)
        else:
            self._insert_entry(path, agent)

        for parent in path.parents:
            if parent == self.root:
                break
            parent_idx = self._index.get(parent)
            if parent_idx is not None:
                self._entries[parent_idx].touch(agent)

        self._invalidate_caches()

    def _depth_of(self, path: Path) -> int:
        try:
            relative = path.relative_to(self.root)
        except ValueError:
            return 0
        return max(0, len(relative.parts) - 1)

    def _insert_entry(self, path: Path, agent: AgentId | None) -> None:
        is_dir = path.is_dir()
        depth = self._depth_of(path)
        entry = FileEntry.dir(path, depth) if is_dir else FileEntry.file(path, depth)
        entry.touch(agent)

        parent = path.parent
        if parent != path and parent != self.root and parent not in self._index:
            self._insert_entry(parent, agent)

        if parent == self.root:
            insert_at = self._find_sorted_position(0, is_dir, path, 0)
        elif parent in self._index:
            insert_at = self._find_sorted_position(
                self._index[parent] + 1, is_dir, path, depth
            )
        else:
            insert_at = len(self._entries)

        self._entries.insert(insert_at, entry)
        self._rebuild_index()

    def _find_sorted_position(
        self, start: int, is_dir: bool, path: Path, depth: int
    ) -> int:
        """Position among siblings: directories first, then by path."""
        for i in range(start, len(self._entries)):
            e = self._entries[i]
            if e.depth < depth:
                return i
            if e.depth != depth:
                continue
            if is_dir and not e.is_dir:
                return i
            if not is_dir and e.is_dir:
                continue
            if path < e.path:
                return i
        return len(self._entries)

    def update_diff(self, path, added: int, removed: int) -> None:
        idx = self._index.get(Path(path))
        if idx is not None:
            self._entries[idx].set_diff(added, removed)

    def remove_entry(self, path) -> None:
        """Remove a path and everything beneath it."""
        path = Path(path)
        self._entries = [e for e in self._entries if not e.path.is_relative_to(path)]
        self._rebuild_index()
        self._invalidate_caches()

    def count(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)