"""Colour segmentation mask pipeline."""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

import cv2
import numpy as np

from detect.config import DetectorConfig
from detect.utils import is_empty_image

KERNEL_SIZE = (3, 3)


def _scalar_bound(bound: Sequence[float]) -> Tuple[float, ...]:
    # A plain tuple reaches inRange as a cv::Scalar for 3 or 4 components
    return tuple(float(c) for c in bound)


def segment_colour(frame: np.ndarray, config: DetectorConfig) -> np.ndarray:
    """Binary mask of BGR pixels whose HSV value lies in the configured range."""
    hsv = cv2.cvtColor(frame, cv2.COLOR_BGR2HSV)
    return cv2.inRange(
        hsv,
        _scalar_bound(config.lower_colour_bound),
        _scalar_bound(config.upper_colour_bound),
    )


def clean_mask(mask: np.ndarray) -> np.ndarray:
    """Blur, then open and close the mask with a small elliptical element."""
    out = cv2.GaussianBlur(mask, KERNEL_SIZE, 0)
    element = cv2.getStructuringElement(cv2.MORPH_ELLIPSE, KERNEL_SIZE)

    # Opening drops small foreground specks
    out = cv2.erode(out, element)
    out = cv2.dilate(out, element)

    # Closing fills small holes inside the object
    out = cv2.dilate(out, element)
    out = cv2.erode(out, element)
    return out


def process_image(
    frame: Optional[np.ndarray],
    config: DetectorConfig,
    subtractor: Optional[Any] = None,
) -> Optional[np.ndarray]:
    """Turn a BGR frame into the cleaned, background-subtracted mask.

    The background model sees the segmented mask, not the raw frame, so it
    separates moving from static regions of the target colour only.

    Args:
        frame: BGR image (3 channels)
        config: Colour bounds to segment with
        subtractor: Optional OpenCV background model, updated in place

    Returns:
        Single-channel uint8 mask, or None for an empty frame
    """
    if is_empty_image(frame):
        return None
    mask = clean_mask(segment_colour(frame, config))
    if subtractor is not None:
        mask = subtractor.apply(mask)
    return mask
