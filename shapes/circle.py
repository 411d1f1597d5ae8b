"""Circle value type used to report detections."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Sequence, Tuple

import cv2
import numpy as np

from shapes.numeric import check_widening, is_arithmetic, numeric_kind

DEFAULT_DTYPE = np.dtype(np.float64)


class ShapeCircle:
    """Immutable circle with a center and a non-negative radius.

    The radius is always stored as ``abs(radius)``; a negative input is
    accepted and silently flipped rather than rejected. A radius of zero
    marks the circle as empty, which is how "no detection" is reported.

    All coordinates are stored in the circle's numeric kind (a numpy
    dtype, ``float64`` unless given). Constructors that take typed sources
    (vectors, points) refuse sources whose range exceeds that kind.
    """

    __slots__ = ("_center_x", "_center_y", "_radius", "_dtype")

    def __init__(
        self,
        center_x: Any = 0,
        center_y: Any = 0,
        radius: Any = 0,
        dtype: Any = DEFAULT_DTYPE,
    ) -> None:
        kind = np.dtype(dtype)
        if not is_arithmetic(kind):
            raise TypeError(f"ShapeCircle needs an arithmetic dtype, got {kind}")
        self._dtype = kind
        self._center_x = kind.type(center_x)
        self._center_y = kind.type(center_y)
        self._radius = kind.type(abs(radius))

    @classmethod
    def empty_circle(cls, dtype: Any = DEFAULT_DTYPE) -> "ShapeCircle":
        return cls(0, 0, 0, dtype=dtype)

    @classmethod
    def from_points(
        cls, points: Optional[Sequence], dtype: Any = DEFAULT_DTYPE
    ) -> "ShapeCircle":
        """Fit the minimum enclosing circle of a point set.

        Accepts an OpenCV contour (N x 1 x 2) or any N x 2 sequence.
        ``None`` or an empty set gives the empty circle.
        """
        if points is None:
            return cls.empty_circle(dtype)
        pts = np.asarray(points)
        if pts.size == 0:
            return cls.empty_circle(dtype)
        if pts.dtype not in (np.int32, np.float32):
            pts = pts.astype(np.float32)
        (x, y), radius = cv2.minEnclosingCircle(pts.reshape(-1, 1, 2))
        return cls(x, y, radius, dtype=dtype)

    @classmethod
    def from_vector(cls, params: Sequence, dtype: Any = DEFAULT_DTYPE) -> "ShapeCircle":
        """Build from a packed ``(x, y, r)`` vector, e.g. a HoughCircles row."""
        vec = np.asarray(params)
        if vec.shape != (3,):
            raise ValueError(f"Expected a 3-component vector, got shape {vec.shape}")
        check_widening(np.dtype(dtype), numeric_kind(vec))
        return cls(vec[0], vec[1], vec[2], dtype=dtype)

    @classmethod
    def from_point(
        cls, center: Sequence, radius: Any, dtype: Any = DEFAULT_DTYPE
    ) -> "ShapeCircle":
        x, y = _unpack_point(center)
        check_widening(np.dtype(dtype), numeric_kind(np.asarray((x, y))))
        return cls(x, y, radius, dtype=dtype)

    @property
    def center_x(self):
        return self._center_x

    @property
    def center_y(self):
        return self._center_y

    @property
    def radius(self):
        return self._radius

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    def get_center(self) -> Tuple[Any, Any]:
        return (self._center_x, self._center_y)

    def get_center_x(self):
        return self._center_x

    def get_center_y(self):
        return self._center_y

    def get_radius(self):
        return self._radius

    def empty(self) -> bool:
        return bool(self._radius == 0)

    def with_center(self, x: Any, y: Any = None) -> "ShapeCircle":
        """Return a copy moved to a new center (a point or two scalars)."""
        if y is None:
            x, y = _unpack_point(x)
        check_widening(self._dtype, numeric_kind(np.asarray((x, y))))
        return ShapeCircle(x, y, self._radius, dtype=self._dtype)

    def with_radius(self, radius: Any) -> "ShapeCircle":
        return ShapeCircle(self._center_x, self._center_y, radius, dtype=self._dtype)

    def astype(self, dtype: Any) -> "ShapeCircle":
        """Convert to another numeric kind, refusing narrowing conversions."""
        check_widening(np.dtype(dtype), self._dtype)
        return ShapeCircle(self._center_x, self._center_y, self._radius, dtype=dtype)

    def __iter__(self) -> Iterator:
        return iter((self._center_x, self._center_y, self._radius))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShapeCircle):
            return NotImplemented
        return tuple(self) == tuple(other)

    def __hash__(self) -> int:
        return hash(tuple(float(v) for v in self))

    def __repr__(self) -> str:
        return (
            f"ShapeCircle(center_x={self._center_x!r}, center_y={self._center_y!r}, "
            f"radius={self._radius!r}, dtype={self._dtype.name})"
        )


def _unpack_point(point: Any) -> Tuple[Any, Any]:
    if hasattr(point, "x") and hasattr(point, "y"):
        return point.x, point.y
    x, y = point
    return x, y


EMPTY_CIRCLE = ShapeCircle.empty_circle()
