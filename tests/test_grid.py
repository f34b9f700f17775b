import pytest

from auriga.grid import Cell, CellRect, Grid, Rect, Row, Size, WidgetId


def test_default_grid_has_two_rows():
    grid = Grid.default()
    assert grid.columns == 12
    assert len(grid.rows) == 2


def test_default_grid_layout_correct():
    grid = Grid.default()
    assert grid.rows[0].cells[0].widget is WidgetId.RECENT_ACTIVITY
    assert grid.rows[0].cells[0].span == 2
    assert grid.rows[0].cells[1].widget is WidgetId.AGENT_PANE
    assert grid.rows[0].cells[1].span == 10
    assert grid.rows[0].cells[1].rowspan == 2
    assert grid.rows[1].cells[0].widget is WidgetId.FILE_TREE
    assert grid.rows[1].cells[0].span == 2


def test_size_percent_resolves_correctly():
    size = Size.percent("80%")
    assert size.resolve(100) == 80
    assert size.resolve(50) == 40


def test_size_fixed_returns_value():
    size = Size.fixed(10)
    assert size.resolve(100) == 10
    assert size.resolve(999) == 10


def test_size_unparsable_percent_is_zero():
    assert Size.percent("abc%").resolve(100) == 0


def test_size_fixed_rejects_negative():
    with pytest.raises(ValueError):
        Size.fixed(-1)


def test_rowspan_merges_heights():
    grid = Grid(
        columns=12,
        rows=[
            Row(
                Size.fixed(10),
                [
                    Cell(WidgetId.RECENT_ACTIVITY, span=4, rowspan=1),
                    Cell(WidgetId.AGENT_PANE, span=8, rowspan=2),
                ],
            ),
            Row(Size.fixed(20), [Cell(WidgetId.RECENT_ACTIVITY, span=4, rowspan=1)]),
        ],
    )
    rects = grid.compute_rects(Rect(0, 0, 120, 30))
    assert len(rects) == 3
    assert rects[0].widget is WidgetId.RECENT_ACTIVITY
    assert rects[0].rect == Rect(0, 0, 40, 10)
    assert rects[1].widget is WidgetId.AGENT_PANE
    assert rects[1].rect == Rect(40, 0, 80, 30)
    assert rects[2].widget is WidgetId.RECENT_ACTIVITY
    assert rects[2].rect == Rect(0, 10, 40, 20)


def test_no_rowspan_works_as_before():
    grid = Grid(
        columns=12,
        rows=[
            Row(
                Size.fixed(10),
                [
                    Cell(WidgetId.RECENT_ACTIVITY, span=4),
                    Cell(WidgetId.AGENT_PANE, span=8),
                ],
            ),
            Row(Size.fixed(30), [Cell(WidgetId.RECENT_ACTIVITY, span=12)]),
        ],
    )
    rects = grid.compute_rects(Rect(0, 0, 120, 40))
    assert len(rects) == 3
    assert rects[0].rect == Rect(0, 0, 40, 10)
    assert rects[1].rect == Rect(40, 0, 80, 10)
    assert rects[2].rect == Rect(0, 10, 120, 30)


def test_last_cell_absorbs_remainder_width():
    grid = Grid(
        columns=12,
        rows=[
            Row(
                Size.fixed(10),
                [
                    Cell(WidgetId.RECENT_ACTIVITY, span=5),
                    Cell(WidgetId.AGENT_PANE, span=7),
                ],
            )
        ],
    )
    rects = grid.compute_rects(Rect(0, 0, 121, 10))
    assert rects[0].rect.width == 50
    assert rects[1].rect.width == 71


def test_grid_default_layout_within_bounds():
    area = Rect(0, 0, 200, 60)
    cells = Grid.default().compute_rects(area)
    assert cells
    for cell in cells:
        assert cell.rect.x + cell.rect.width <= area.width
        assert cell.rect.y + cell.rect.height <= area.height


def test_grid_default_layout_widgets():
    cells = Grid.default().compute_rects(Rect(0, 0, 200, 60))
    assert [c.widget for c in cells] == [
        WidgetId.RECENT_ACTIVITY,
        WidgetId.AGENT_PANE,
        WidgetId.FILE_TREE,
    ]
    assert all(isinstance(c, CellRect) for c in cells)


def test_grid_consistent_on_repeated_calls():
    grid = Grid.default()
    area = Rect(0, 0, 200, 60)
    first = grid.compute_rects(area)
    second = grid.compute_rects(area)
    assert len(first) == len(second)
    for a, b in zip(first, second):
        assert a.widget == b.widget
        assert a.rect == b.rect


def test_grid_handles_small_area():
    cells = Grid.default().compute_rects(Rect(0, 0, 20, 10))
    assert len(cells) == 3
    for cell in cells:
        assert cell.rect.width > 0 or cell.rect.height > 0


def test_grid_handles_large_area():
    area = Rect(0, 0, 400, 120)
    cells = Grid.default().compute_rects(area)
    assert cells
    for cell in cells:
        assert cell.rect.x + cell.rect.width <= area.width
        assert cell.rect.y + cell.rect.height <= area.height


def test_rowspan_cell_height_covers_area():
    area = Rect(0, 0, 200, 60)
    cells = Grid.default().compute_rects(area)
    pane = next(c for c in cells if c.widget is WidgetId.AGENT_PANE)
    assert pane.rect.height == area.height
    assert pane.rect.x + pane.rect.width == area.width


def test_dict_round_trip():
    grid = Grid.default()
    data = grid.to_dict()
    assert data["rows"][0]["height"] == "50%"
    assert data["rows"][0]["cells"][1]["widget"] == "agent-pane"
    restored = Grid.from_dict(data)
    assert restored == grid


def test_from_dict_defaults_rowspan_and_fixed_height():
    grid = Grid.from_dict(
        {
            "columns": 4,
            "rows": [{"height": 7, "cells": [{"widget": "file-tree", "span": 4}]}],
        }
    )
    assert grid.rows[0].cells[0].rowspan == 1
    assert grid.rows[0].height.resolve(100) == 7


def test_from_dict_rejects_unknown_widget():
    with pytest.raises(ValueError):
        Grid.from_dict(
            {"columns": 4, "rows": [{"height": 7, "cells": [{"widget": "x", "span": 4}]}]}
        )


def test_compute_rects_rejects_zero_columns():
    with pytest.raises(ValueError):
        Grid(columns=0, rows=[]).compute_rects(Rect(0, 0, 10, 10))


def test_rect_contains():
    rect = Rect(2, 3, 4, 5)
    assert rect.contains(2, 3)
    assert not rect.contains(6, 3)