"""Scroll offset and selection state for a list view."""

from __future__ import annotations

from auriga.models import ScrollDirection


class Scrollable:
    def __init__(self) -> None:
        self.offset = 0
        self.selected: int | None = None
        self._item_count = 0
        self._visible_height = 0

    def set_item_count(self, count: int) -> None:
        """Update the item count, clamping or clearing the selection."""
        self._item_count = count
        if self.selected is not None:
            if count == 0:
                self.selected = None
            elif self.selected >= count:
                self.selected = count - 1

    def set_visible_height(self, height: int) -> None:
        self._visible_height = height

    def scroll(self, direction: ScrollDirection) -> None:
        if direction is ScrollDirection.UP:
            self.offset = max(0, self.offset - 1)
        else:
            max_offset = max(0, self._item_count - self._visible_height)
            if self.offset < max_offset:
                self.offset += 1

    def select(self, idx: int) -> None:
        if 0 <= idx < self._item_count:
            self.selected = idx
            self.ensure_visible()

    def select_next(self) -> None:
        if self.selected is None:
            if self._item_count == 0:
                return
            self.selected = 0
        elif self.selected + 1 < self._item_count:
            self.selected += 1
        else:
            return
        self.ensure_visible()

    def select_prev(self) -> None:
        if not self.selected:
            return
        self.selected -= 1
        self.ensure_visible()

    def ensure_visible(self) -> None:
        """Move the offset so the selected item lies inside the view."""
        sel = self.selected
        if sel is None:
            return
        if sel < self.offset:
            self.offset = sel
        elif self._visible_height > 0 and sel >= self.offset + self._visible_height:
            self.offset = sel - self._visible_height + 1

    def visible_range(self) -> range:
        end = min(self.offset + self._visible_height, self._item_count)
        return range(self.offset, end)

    def can_scroll_up(self) -> bool:
        return self.offset > 0

    def can_scroll_down(self) -> bool:
        return self.offset + self._visible_height < self._item_count