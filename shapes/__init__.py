"""Geometric value types for detection results."""

from .circle import EMPTY_CIRCLE, ShapeCircle
from .numeric import check_widening, max_value, numeric_kind

__all__ = [
    "EMPTY_CIRCLE",
    "ShapeCircle",
    "check_widening",
    "max_value",
    "numeric_kind",
]
