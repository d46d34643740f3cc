"""Tests for shapes and narrow-phase collision detection."""
from __future__ import annotations

import math

import pytest
from jmp_physics import vec
from jmp_physics.shapes import (
    Box,
    Circle,
    box_vs_box,
    circle_vs_box,
    circle_vs_circle,
    collide,
)


# ── Shapes ────────────────────────────────────────────────────


def test_box_area():
    assert Box(1.0, 2.0).area == 8.0


def test_circle_area():
    assert math.isclose(Circle(1.0).area, math.pi)


@pytest.mark.parametrize("args", [(0.0, 1.0), (1.0, -1.0)])
def test_box_invalid_extents(args):
    with pytest.raises(ValueError):
        Box(*args)


def test_circle_invalid_radius():
    with pytest.raises(ValueError):
        Circle(0.0)


# ── Box vs Box ────────────────────────────────────────────────


class TestBoxVsBox:
    def test_overlap_on_y(self) -> None:
        m = box_vs_box((0.0, 0.0), Box(5.0, 0.5), (0.0, 0.9), Box(0.5, 0.5))
        assert m is not None
        assert m.normal == (0.0, 1.0)
        assert math.isclose(m.depth, 0.1)

    def test_overlap_on_x_negative(self) -> None:
        m = box_vs_box((0.0, 0.0), Box(0.5, 5.0), (-0.8, 0.0), Box(0.5, 0.5))
        assert m is not None
        assert m.normal == (-1.0, 0.0)
        assert math.isclose(m.depth, 0.2)

    def test_separated(self) -> None:
        assert box_vs_box((0.0, 0.0), Box(0.5, 0.5), (2.0, 0.0), Box(0.5, 0.5)) is None

    def test_touching_edges_do_not_collide(self) -> None:
        assert box_vs_box((0.0, 0.0), Box(0.5, 0.5), (1.0, 0.0), Box(0.5, 0.5)) is None


# ── Circles ───────────────────────────────────────────────────


class TestCircles:
    def test_circle_overlap(self) -> None:
        m = circle_vs_circle((0.0, 0.0), Circle(1.0), (1.5, 0.0), Circle(1.0))
        assert m is not None
        assert m.normal == (1.0, 0.0)
        assert math.isclose(m.depth, 0.5)

    def test_circle_separated(self) -> None:
        assert circle_vs_circle((0.0, 0.0), Circle(1.0), (3.0, 0.0), Circle(1.0)) is None

    def test_coincident_centres(self) -> None:
        m = circle_vs_circle((1.0, 1.0), Circle(1.0), (1.0, 1.0), Circle(0.5))
        assert m is not None
        assert math.isclose(vec.length(m.normal), 1.0)
        assert m.depth == 1.5

    def test_circle_above_box(self) -> None:
        m = circle_vs_box((0.0, 1.4), Circle(0.5), (0.0, 0.0), Box(2.0, 1.0))
        assert m is not None
        # normal points from circle towards box
        assert m.normal == (0.0, -1.0)
        assert math.isclose(m.depth, 0.1)

    def test_circle_centre_inside_box(self) -> None:
        m = circle_vs_box((1.8, 0.0), Circle(0.5), (0.0, 0.0), Box(2.0, 1.0))
        assert m is not None
        assert m.normal == (-1.0, 0.0)
        assert math.isclose(m.depth, 0.7)

    def test_circle_clear_of_box(self) -> None:
        assert circle_vs_box((0.0, 3.0), Circle(0.5), (0.0, 0.0), Box(2.0, 1.0)) is None


# ── Dispatch ──────────────────────────────────────────────────


class TestCollide:
    def test_box_then_circle_flips_normal(self) -> None:
        m = collide((0.0, 0.0), Box(2.0, 1.0), (0.0, 1.4), Circle(0.5))
        assert m is not None
        assert m.normal == (0.0, 1.0)

    def test_circle_then_box(self) -> None:
        m = collide((0.0, 1.4), Circle(0.5), (0.0, 0.0), Box(2.0, 1.0))
        assert m is not None
        assert m.normal == (0.0, -1.0)

    def test_unsupported_shape(self) -> None:
        with pytest.raises(TypeError):
            collide((0.0, 0.0), object(), (0.0, 0.0), Box(1.0, 1.0))  # type: ignore[arg-type]


def test_vec_helpers():
    assert vec.add((1.0, 2.0), (3.0, 4.0)) == (4.0, 6.0)
    assert vec.sub((1.0, 2.0), (3.0, 4.0)) == (-2.0, -2.0)
    assert vec.scale((1.0, -2.0), 2.0) == (2.0, -4.0)
    assert vec.dot((1.0, 2.0), (3.0, 4.0)) == 11.0
    assert vec.length((3.0, 4.0)) == 5.0
    assert vec.normalize((0.0, 0.0)) == (0.0, 0.0)
    assert vec.normalize((0.0, 2.0)) == (0.0, 1.0)
    assert vec.neg((1.0, -1.0)) == (-1.0, 1.0)
