from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

import cv2
import numpy as np

HUE_MAX = 179
CHANNEL_MAX = 255


def is_empty_image(image: Optional[np.ndarray]) -> bool:
    return image is None or getattr(image, "size", 0) == 0


def hsv_at_pixel(frame: np.ndarray, x: int, y: int) -> Tuple[int, int, int]:
    """Return the HSV value of a BGR frame at column ``x``, row ``y``.

    Useful for picking colour bounds from a sample frame.

    Raises:
        IndexError: If (x, y) lies outside the frame
    """
    height, width = frame.shape[:2]
    if not (0 <= x < width and 0 <= y < height):
        raise IndexError(f"Pixel ({x}, {y}) outside {width}x{height} frame")
    pixel = np.ascontiguousarray(frame[y : y + 1, x : x + 1])
    h, s, v = cv2.cvtColor(pixel, cv2.COLOR_BGR2HSV)[0, 0][:3]
    return int(h), int(s), int(v)


def colour_bounds_around(
    hsv: Sequence[Any],
    hue_margin: int = 5,
    min_saturation: int = 50,
    min_value: int = 50,
) -> Tuple[Tuple[int, int, int], Tuple[int, int, int]]:
    """Build a ``(lower, upper)`` HSV range around a sampled colour.

    Hue is widened by ``hue_margin`` each way; saturation and value accept
    anything from the given minimums up. All channels are clamped to the
    OpenCV HSV ranges. Hue wrap-around at red is not handled.
    """
    h = int(hsv[0])
    lower = (
        max(h - hue_margin, 0),
        min(max(min_saturation, 0), CHANNEL_MAX),
        min(max(min_value, 0), CHANNEL_MAX),
    )
    upper = (min(h + hue_margin, HUE_MAX), CHANNEL_MAX, CHANNEL_MAX)
    return lower, upper
