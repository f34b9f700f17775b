from auriga.models import ScrollDirection
from auriga.scrollable import Scrollable


def make(count, height):
    s = Scrollable()
    s.set_item_count(count)
    s.set_visible_height(height)
    return s


def test_scroll_down_advances_offset():
    s = make(20, 5)
    s.scroll(ScrollDirection.DOWN)
    assert s.offset == 1


def test_scroll_up_at_zero_stays_zero():
    s = make(20, 5)
    s.scroll(ScrollDirection.UP)
    assert s.offset == 0


def test_scroll_down_stops_at_max():
    s = make(5, 5)
    s.scroll(ScrollDirection.DOWN)
    assert s.offset == 0


def test_select_next_wraps_correctly():
    s = make(3, 3)
    s.select_next()
    assert s.selected == 0
    s.select_next()
    assert s.selected == 1
    s.select_next()
    assert s.selected == 2
    s.select_next()
    assert s.selected == 2


def test_select_prev_stops_at_zero():
    s = make(3, 3)
    s.select(1)
    s.select_prev()
    assert s.selected == 0
    s.select_prev()
    assert s.selected == 0


def test_visible_range_correct():
    s = make(20, 5)
    s.offset = 3
    assert s.visible_range() == range(3, 8)


def test_set_item_count_clamps_selection():
    s = Scrollable()
    s.set_item_count(5)
    s.select(4)
    s.set_item_count(2)
    assert s.selected == 1


def test_set_item_count_to_zero_clears_selection():
    s = Scrollable()
    s.set_item_count(5)
    s.select(2)
    s.set_item_count(0)
    assert s.selected is None


def test_select_out_of_range_is_ignored():
    s = make(3, 3)
    s.select(3)
    assert s.selected is None


def test_selection_scrolls_into_view():
    s = make(20, 5)
    s.select(10)
    assert 10 in s.visible_range()
    s.select(2)
    assert s.offset == 2


def test_can_scroll_flags():
    s = make(20, 5)
    assert not s.can_scroll_up()
    assert s.can_scroll_down()
    s.offset = 15
    assert s.can_scroll_up()
    assert not s.can_scroll_down()


def test_scrollable_navigation():
    s = make(100, 20)
    assert s.offset == 0
    for _ in range(25):
        s.scroll(ScrollDirection.DOWN)
    assert s.offset == 25
    for _ in range(25):
        s.scroll(ScrollDirection.UP)
    assert s.offset == 0


def test_scrollable_selection():
    s = make(100, 20)
    assert s.selected is None
    s.select(5)
    assert s.selected == 5
    s.select_next()
    assert s.selected == 6
    s.select_prev()
    assert s.selected == 5