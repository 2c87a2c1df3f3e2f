import numpy as np
import pygame
import pytest

from bubble_sort import render
from bubble_sort.render import CANDIDATE, MARKED, Layout, outline_color
from bubble_sort.sim import Snapshot, Step

WIDTH, HEIGHT = 800, 600


def pixel(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def full_bars(step, cursor, count=32):
    items = np.full(count, 255, dtype=np.uint8)
    return Snapshot(items, cursor, step, 0)


@pytest.mark.parametrize(
    "step, offset, expected",
    [
        (Step.MARK, 0, MARKED),
        (Step.MARK, 1, None),
        (Step.COMPARE, 0, MARKED),
        (Step.COMPARE, 1, CANDIDATE),
        (Step.COMPARE, -1, None),
        (Step.SWAP_HAPPENED, 0, CANDIDATE),
        (Step.SWAP_HAPPENED, 1, MARKED),
        (Step.SWAP_HAPPENED, 2, None),
        (Step.NEXT, 0, None),
        (Step.NEXT, 1, None),
        (Step.FINISHED, 0, None),
    ],
)
def test_outline_color_table(step, offset, expected):
    assert outline_color(step, offset) == expected


def test_compare_at_cursor_five_highlights_pair_only():
    colors = [outline_color(Step.COMPARE, i - 5) for i in range(32)]

    assert colors[5] == MARKED
    assert colors[6] == CANDIDATE
    assert [c for i, c in enumerate(colors) if i not in (5, 6)] == [None] * 30


def test_layout_geometry():
    layout = Layout(WIDTH, HEIGHT, 32)

    assert layout.column_w == pytest.approx(19.2)
    assert layout.gap == pytest.approx(4.8)
    assert layout.column_x(0) == 16
    assert layout.column_x(1) == pytest.approx(40.0)
    assert layout.column_h == 472
    assert layout.arrow_h == pytest.approx(472 / 24)


def test_bar_height_is_proportional_to_value():
    layout = Layout(WIDTH, HEIGHT, 32)

    full = layout.bar_rect(0, 255)
    empty = layout.bar_rect(1, 0)

    assert full.top == 64
    assert full.height == 472
    assert full.bottom == layout.bottom
    assert empty.height == 0
    assert layout.bar_rect(2, 51).height == round(472 * 51 / 255)


def test_arrow_sits_below_cursor_column():
    layout = Layout(WIDTH, HEIGHT, 32)

    apex, left, right = layout.arrow_points(3)

    assert apex == (pytest.approx(layout.column_x(3) + layout.column_w / 2), layout.bottom + 8)
    assert left[0] == pytest.approx(layout.column_x(3))
    assert right[0] == pytest.approx(layout.column_x(3) + layout.column_w)
    assert left[1] == right[1] == pytest.approx(layout.bottom + 8 + layout.arrow_h)


def test_layout_follows_window_size():
    small = Layout(400, 300, 32)
    large = Layout(1600, 900, 32)

    assert small.column_w < large.column_w
    assert small.column_h == 300 - 128
    assert large.column_h == 900 - 128


def test_draw_outlines_compare_pair():
    surface = pygame.Surface((WIDTH, HEIGHT))
    layout = Layout(WIDTH, HEIGHT, 32)

    render.draw(surface, full_bars(Step.COMPARE, 5))

    for i in range(32):
        edge = layout.outline_rect(i, 255)
        color = pixel(surface, (edge.left, edge.centery))
        if i == 5:
            assert color == MARKED
        elif i == 6:
            assert color == CANDIDATE
        else:
            assert color == render.BACKGROUND
        assert pixel(surface, layout.bar_rect(i, 255).center) == render.BAR


def test_draw_swap_colors_are_reversed():
    surface = pygame.Surface((WIDTH, HEIGHT))
    layout = Layout(WIDTH, HEIGHT, 32)

    render.draw(surface, full_bars(Step.SWAP_HAPPENED, 10))

    assert pixel(surface, (layout.outline_rect(10, 255).left, 300)) == CANDIDATE
    assert pixel(surface, (layout.outline_rect(11, 255).left, 300)) == MARKED


def arrow_center(layout, i):
    apex, left, right = layout.arrow_points(i)
    return (int((apex[0] + left[0] + right[0]) / 3), int((apex[1] + left[1] + right[1]) / 3))


def test_draw_arrow_until_finished():
    surface = pygame.Surface((WIDTH, HEIGHT))
    layout = Layout(WIDTH, HEIGHT, 32)

    render.draw(surface, full_bars(Step.NEXT, 5))
    assert pixel(surface, arrow_center(layout, 5)) == render.ARROW
    assert pixel(surface, arrow_center(layout, 6)) == render.BACKGROUND

    render.draw(surface, full_bars(Step.FINISHED, 5))
    assert pixel(surface, arrow_center(layout, 5)) == render.BACKGROUND
