"""Grid layout: rows of cells spanning columns (and rows), resolved to rectangles."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from typing import Any

_U16_MAX = 0xFFFF
_PERCENT_NUMBER = re.compile(r"\+?\d+")


class WidgetId(enum.Enum):
    AGENT_PANE = "agent-pane"
    RECENT_ACTIVITY = "recent-activity"
    FILE_TREE = "file-tree"
    SETTINGS_PAGE = "settings-page"
    DATABASE_PAGE = "database-page"
    PROMPTS_PAGE = "prompts-page"


@dataclass(frozen=True)
class Rect:
    """A rectangle in terminal cells."""

    x: int
    y: int
    width: int
    height: int

    def contains(self, col: int, row: int) -> bool:
        return (
            self.x <= col < self.x + self.width
            and self.y <= row < self.y + self.height
        )


def _check_u16(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer, got {value!r}")
    if not 0 <= value <= _U16_MAX:
        raise ValueError(f"{what} out of range: {value}")
    return value


@dataclass(frozen=True)
class Size:
    """A row height: a percentage string such as "50%" or a fixed cell count."""

    value: str | int

    def __post_init__(self) -> None:
        if isinstance(self.value, str):
            return
        _check_u16(self.value, "fixed size")

    @classmethod
    def percent(cls, text: str) -> Size:
        return cls(str(text))

    @classmethod
    def fixed(cls, value: int) -> Size:
        return cls(_check_u16(value, "fixed size"))

    @property
    def is_percent(self) -> bool:
        return isinstance(self.value, str)

    def resolve(self, total: int) -> int:
        """Absolute size within ``total``; an unparsable percentage counts as 0."""
        if not isinstance(self.value, str):
            return self.value
        number = self.value.rstrip("%")
        pct = 0
        if _PERCENT_NUMBER.fullmatch(number):
            parsed = int(number)
            if parsed <= _U16_MAX:
                pct = parsed
        return total * pct // 100

    def to_json(self) -> str | int:
        return self.value

    @classmethod
    def from_json(cls, data: Any) -> Size:
        if isinstance(data, str):
            return cls.percent(data)
        return cls.fixed(data)


@dataclass
class Cell:
    widget: WidgetId
    span: int
    rowspan: int = 1

    def to_dict(self) -> dict[str, Any]:
        return {"widget": self.widget.value, "span": self.span, "rowspan": self.rowspan}

    @classmethod
    def from_dict(cls, data: Any) -> Cell:
        if not isinstance(data, dict):
            raise ValueError("cell must be an object")
        try:
            widget = WidgetId(data["widget"])
            span = data["span"]
        except KeyError as exc:
            raise ValueError(f"cell is missing field {exc.args[0]!r}") from exc
        return cls(
            widget=widget,
            span=_check_u16(span, "span"),
            rowspan=_check_u16(data.get("rowspan", 1), "rowspan"),
        )


@dataclass
class Row:
    height: Size
    cells: list[Cell] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "height": self.height.to_json(),
            "cells": [c.to_dict() for c in self.cells],
        }

    @classmethod
    def from_dict(cls, data: Any) -> Row:
        if not isinstance(data, dict):
            raise ValueError("row must be an object")
        if "height" not in data or "cells" not in data:
            raise ValueError("row needs 'height' and 'cells'")
        cells = data["cells"]
        if not isinstance(cells, list):
            raise ValueError("row cells must be a list")
        return cls(Size.from_json(data["height"]), [Cell.from_dict(c) for c in cells])


@dataclass
class CellRect:
    """Where a widget is drawn."""

    widget: WidgetId
    rect: Rect


@dataclass
class _OccupiedSpan:
    col_start: int
    col_end: int
    end_row: int  # exclusive


@dataclass
class Grid:
    columns: int
    rows: list[Row] = field(default_factory=list)

    @classmethod
    def default(cls) -> Grid:
        return cls(
            columns=12,
            rows=[
                Row(
                    Size.percent("50%"),
                    [
                        Cell(WidgetId.RECENT_ACTIVITY, span=2, rowspan=1),
                        Cell(WidgetId.AGENT_PANE, span=10, rowspan=2),
                    ],
                ),
                Row(
                    Size.percent("50%"),
                    [Cell(WidgetId.FILE_TREE, span=2, rowspan=1)],
                ),
            ],
        )

    @classmethod
    def from_dict(cls, data: Any) -> Grid:
        if not isinstance(data, dict):
            raise ValueError("grid must be an object")
        if "columns" not in data or "rows" not in data:
            raise ValueError("grid needs 'columns' and 'rows'")
        rows = data["rows"]
        if not isinstance(rows, list):
            raise ValueError("grid rows must be a list")
        return cls(
            columns=_check_u16(data["columns"], "columns"),
            rows=[Row.from_dict(r) for r in rows],
        )

    def to_dict(self) -> dict[str, Any]:
        return {"columns": self.columns, "rows": [r.to_dict() for r in self.rows]}

    def _row_heights(self, area: Rect) -> list[int]:
        heights: list[int] = []
        y = area.y
        last = len(self.rows) - 1
        for ri, row in enumerate(self.rows):
            if ri == last:
                h = max(0, area.y + area.height - y)
            else:
                h = row.height.resolve(area.height)
            heights.append(h)
            y += h
        return heights

    def compute_rects(self, area: Rect) -> list[CellRect]:
        """Resolve every cell to a rectangle inside ``area``.

        The last cell of a row absorbs the remaining width up to the next
        rowspanning cell or the right edge; the last row absorbs the
        remaining height.
        """
        if self.columns == 0:
            raise ValueError("grid has no columns")
        col_width = area.width // self.columns
        row_heights = self._row_heights(area)

        result: list[CellRect] = []
        occupied: list[_OccupiedSpan] = []
        y = area.y

        for ri, row in enumerate(self.rows):
            occupied = [o for o in occupied if o.end_row > ri]
            row_height = row_heights[ri]
            cells = row.cells
            pos = 0
            col_cursor = 0

            while col_cursor < self.columns:
                blocking = next(
                    (o for o in occupied if o.col_start <= col_cursor < o.col_end),
                    None,
                )
                if blocking is not None:
                    col_cursor = blocking.col_end
                    continue
                if pos >= len(cells):
                    break
                cell = cells[pos]
                pos += 1

                x = area.x + col_cursor * col_width
                if pos == len(cells):
                    next_boundary = min(
                        (o.col_start for o in occupied if o.col_start > col_cursor),
                        default=self.columns,
                    )
                    if next_boundary >= self.columns:
                        end_x = area.x + area.width
                    else:
                        end_x = area.x + next_boundary * col_width
                    cell_width = max(0, end_x - x)
                else:
                    cell_width = col_width * cell.span

                if cell.rowspan > 1:
                    end_row = min(ri + cell.rowspan, len(self.rows))
                    cell_height = sum(row_heights[ri:end_row])
                    occupied.append(
                        _OccupiedSpan(col_cursor, col_cursor + cell.span, ri + cell.rowspan)
                    )
                else:
                    cell_height = row_height

                result.append(CellRect(cell.widget, Rect(x, y, cell_width, cell_height)))
                col_cursor += cell.span

            y += row_height

        return result