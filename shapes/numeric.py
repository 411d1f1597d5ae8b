"""Numeric kind helpers for shape coordinates.

A numeric kind is a numpy dtype. Python ``int`` maps to ``int64`` and
``float`` to ``float64`` so plain literals compare like their numpy
counterparts.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from exceptions import NumericRangeError


def numeric_kind(value: Any) -> np.dtype:
    """Return the numeric kind of a scalar, array, dtype or Python type."""
    if isinstance(value, np.dtype):
        kind = value
    elif isinstance(value, type):
        if issubclass(value, bool):
            kind = np.dtype(np.bool_)
        elif issubclass(value, int):
            kind = np.dtype(np.int64)
        elif issubclass(value, float):
            kind = np.dtype(np.float64)
        else:
            kind = np.dtype(value)
    elif isinstance(value, bool):
        kind = np.dtype(np.bool_)
    elif isinstance(value, int):
        kind = np.dtype(np.int64)
    elif isinstance(value, float):
        kind = np.dtype(np.float64)
    elif hasattr(value, "dtype"):
        kind = np.dtype(value.dtype)
    else:
        kind = np.asarray(value).dtype
    return kind


def is_arithmetic(kind: np.dtype) -> bool:
    return bool(np.issubdtype(kind, np.number) or np.issubdtype(kind, np.bool_))


def max_value(kind: np.dtype) -> float:
    """Largest representable value of a numeric kind."""
    kind = np.dtype(kind)
    if np.issubdtype(kind, np.bool_):
        return 1
    if np.issubdtype(kind, np.integer):
        return int(np.iinfo(kind).max)
    if np.issubdtype(kind, np.floating):
        return float(np.finfo(kind).max)
    raise TypeError(f"Not an arithmetic kind: {kind}")


def check_widening(destination: np.dtype, source: np.dtype) -> None:
    """Raise NumericRangeError unless ``destination`` can hold ``source``'s range.

    Only the maximum representable value is compared, so int64 into
    float64 passes while float64 into float32 or int32 is rejected.
    """
    if not is_arithmetic(np.dtype(source)):
        raise TypeError(f"Source kind is not arithmetic: {source}")
    if max_value(destination) < max_value(source):
        raise NumericRangeError(
            f"Cannot store {np.dtype(source).name} values as {np.dtype(destination).name} "
            "without losing range"
        )
