import numpy as np

from detect.filters import (
    approx_vertex_count,
    filter_circular_contours,
    is_circular,
    select_largest_contour,
)
from shapes import ShapeCircle


def make_circle_contour(cx: float, cy: float, radius: float, samples: int = 360) -> np.ndarray:
    angles = np.linspace(0.0, 2.0 * np.pi, samples, endpoint=False)
    points = np.stack([cx + radius * np.cos(angles), cy + radius * np.sin(angles)], axis=1)
    return np.round(points).astype(np.int32).reshape(-1, 1, 2)


def make_square_contour(x: int, y: int, size: int) -> np.ndarray:
    return np.array(
        [[[x, y]], [[x + size, y]], [[x + size, y + size]], [[x, y + size]]],
        dtype=np.int32,
    )


def make_triangle_contour() -> np.ndarray:
    return np.array([[[0, 0]], [[80, 0]], [[40, 70]]], dtype=np.int32)


def test_circle_keeps_many_vertices() -> None:
    """Test that a circle contour keeps at least eight vertices."""
    assert approx_vertex_count(make_circle_contour(100, 100, 60)) >= 8
    assert is_circular(make_circle_contour(100, 100, 60))


def test_angular_shapes_are_not_circular() -> None:
    """Test that squares and triangles fail the circularity check."""
    assert approx_vertex_count(make_square_contour(0, 0, 100)) == 4
    assert not is_circular(make_square_contour(0, 0, 100))
    assert not is_circular(make_triangle_contour())


def test_filter_keeps_only_circle() -> None:
    """Test that filtering keeps circles and drops polygons."""
    circle = make_circle_contour(200, 200, 50)
    square = make_square_contour(10, 10, 150)

    survivors = filter_circular_contours([square, circle])

    assert len(survivors) == 1
    assert survivors[0] is circle


def test_filter_of_nothing_is_empty() -> None:
    """Test filtering an empty contour list."""
    assert filter_circular_contours([]) == []


def test_select_largest_by_area() -> None:
    """Test that the contour with the largest area is selected."""
    small = make_circle_contour(50, 50, 20)
    large = make_circle_contour(200, 200, 45)

    best = select_largest_contour([small, large])

    assert best is large
    assert abs(ShapeCircle.from_points(best).get_radius() - 45.0) < 2.0


def test_select_largest_tie_keeps_first() -> None:
    """Test that the first contour wins an area tie."""
    first = make_square_contour(0, 0, 30)
    second = make_square_contour(100, 100, 30)

    assert select_largest_contour([first, second]) is first


def test_select_largest_of_nothing() -> None:
    """Test that selecting from no contours gives None."""
    assert select_largest_contour([]) is None
