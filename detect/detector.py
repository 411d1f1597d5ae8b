"""Colour-and-shape detector for a single circular object."""

from __future__ import annotations

import time
from dataclasses import replace
from typing import Any, Optional

import cv2
import numpy as np

from detect import telemetry
from detect.background import create_background_subtractor
from detect.config import BackgroundSubtractorType, DetectorConfig
from detect.filters import filter_circular_contours, select_largest_contour
from detect.processing import process_image
from detect.utils import is_empty_image
from log_config.logger import get_logger
from shapes import ShapeCircle

logger = get_logger(__name__)


class Detector:
    """Stateful detection pipeline for one capture session.

    Owns one background model (or none), built from the current config.
    Frames must be fed one at a time; the model accumulates history across
    calls, so a single instance is not safe to share between threads.
    """

    def __init__(self, config: Optional[DetectorConfig] = None) -> None:
        self._config = _copy_config(config or DetectorConfig())
        self._subtractor: Optional[Any] = None
        self._create_background_subtractor()

    @property
    def config(self) -> DetectorConfig:
        return replace(self._config)

    @property
    def background_subtractor(self) -> Optional[Any]:
        return self._subtractor

    def set_characteristics(self, config: DetectorConfig) -> "Detector":
        """Replace the whole config and start a fresh background model.

        History is discarded even if the subtractor kind did not change.
        """
        self._config = _copy_config(config)
        self._create_background_subtractor()
        return self

    def supply_background_image(self, frame: Optional[np.ndarray]) -> bool:
        """Feed a background-only frame to warm up the model."""
        if is_empty_image(frame):
            return False
        self.process_image(frame)
        return True

    def process_image(self, frame: Optional[np.ndarray]) -> Optional[np.ndarray]:
        return process_image(frame, self._config, self._subtractor)

    def detect_circular_object_centers(self, frame: Optional[np.ndarray]) -> ShapeCircle:
        """Locate the largest circular blob of the configured colour.

        Args:
            frame: BGR image

        Returns:
            The fitted circle, or an empty circle (radius 0) when the frame
            is empty or nothing circular was found
        """
        if is_empty_image(frame):
            return ShapeCircle.empty_circle()

        start = time.perf_counter()
        circle = self._detect(frame)
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        telemetry.log_timing(
            self._config.background_subtractor.value,
            not circle.empty(),
            elapsed_ms,
            telemetry.frame_budget_ms(self._config.frames_per_second),
        )
        return circle

    detect = detect_circular_object_centers

    def _detect(self, frame: np.ndarray) -> ShapeCircle:
        mask = self.process_image(frame)
        if is_empty_image(mask):
            return ShapeCircle.empty_circle()

        edges = cv2.Canny(mask, self._config.canny_low, self._config.canny_high)
        contours, _ = cv2.findContours(edges, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)

        candidates = filter_circular_contours(contours)
        best = select_largest_contour(candidates)
        if best is None:
            return ShapeCircle.empty_circle()
        return ShapeCircle.from_points(best)

    def _create_background_subtractor(self) -> None:
        self._subtractor = create_background_subtractor(self._config)
        logger.info(
            f"Detector configured: subtractor={self._config.background_subtractor.value}, "
            f"fps={self._config.frames_per_second}"
        )


def _copy_config(config: DetectorConfig) -> DetectorConfig:
    return replace(
        config,
        background_subtractor=BackgroundSubtractorType.parse(config.background_subtractor),
    )
