#!/usr/bin/env python3
"""
Grid properties of horizontal boxes across a range of column settings.
"""

import math

import pytest

from textslides.config import LayoutConfig
from textslides.layout_engine import LayoutEngine
from textslides.parser import parse


def rows_of(boxes):
    rows = {}
    for box in boxes:
        rows.setdefault(box.y, []).append(box)
    return [rows[y] for y in sorted(rows)]


@pytest.mark.parametrize("per_row", [1, 2, 3, 4, 6])
@pytest.mark.parametrize("count", [1, 2, 5, 9])
def test_grid_shape(per_row, count):
    items = ",".join(f"item {i}" for i in range(count))
    slides = parse(f"#Grid\n--[{items}]")
    engine = LayoutEngine(LayoutConfig(horizontal_boxes_per_row=per_row))
    boxes = engine.layout_slide(slides[0])[1:]

    rows = rows_of(boxes)
    assert len(rows) == math.ceil(count / per_row)
    for row in rows:
        assert len({box.h for box in row}) == 1
        xs = [box.x for box in row]
        assert xs == sorted(xs)
        assert xs[0] == pytest.approx(0.5)


@pytest.mark.parametrize("per_row", [1, 2, 3, 4])
def test_rows_do_not_overlap_vertically(per_row):
    slides = parse("--[alpha, a considerably longer label, gamma, delta, epsilon, zeta]")
    boxes = LayoutEngine(LayoutConfig(horizontal_boxes_per_row=per_row)).layout_slide(slides[0])

    rows = rows_of(boxes)
    for upper, lower in zip(rows, rows[1:]):
        assert lower[0].y >= upper[0].bottom


@pytest.mark.parametrize("per_row", [1, 2, 3, 4])
def test_last_column_stays_inside_right_padding(per_row):
    cfg = LayoutConfig(horizontal_boxes_per_row=per_row)
    boxes = LayoutEngine(cfg).layout_slide(parse("--[a,b,c,d,e,f,g,h]")[0])
    for box in boxes:
        assert box.right <= cfg.slide_width - cfg.right_padding + 1e-9
