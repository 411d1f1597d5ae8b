"""Background-subtractor factory.

Each ``BackgroundSubtractorType`` maps to one OpenCV model constructor.
MOG, GMG and CNT live in the contrib ``cv2.bgsegm`` module; MOG2 and KNN
ship with core OpenCV.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Dict, Optional

import cv2

from detect.config import BackgroundSubtractorType, DetectorConfig
from exceptions import BackgroundSubtractorUnavailableError
from log_config.logger import get_logger, log_performance

logger = get_logger(__name__)

# CNT keeps a rolling history of this many seconds
CNT_HISTORY_SECONDS = 60


def _bgsegm(kind: BackgroundSubtractorType) -> Any:
    module = getattr(cv2, "bgsegm", None)
    if module is None:
        raise BackgroundSubtractorUnavailableError(
            f"{kind.value} background subtractor needs cv2.bgsegm "
            "(install opencv-contrib-python)",
            kind=kind.value,
        )
    return module


def _create_mog(config: DetectorConfig) -> Any:
    return _bgsegm(BackgroundSubtractorType.MOG).createBackgroundSubtractorMOG()


def _create_gmg(config: DetectorConfig) -> Any:
    return _bgsegm(BackgroundSubtractorType.GMG).createBackgroundSubtractorGMG()


def _create_cnt(config: DetectorConfig) -> Any:
    fps = config.frames_per_second
    return _bgsegm(BackgroundSubtractorType.CNT).createBackgroundSubtractorCNT(
        fps, True, CNT_HISTORY_SECONDS * fps
    )


def _create_mog2(config: DetectorConfig) -> Any:
    return cv2.createBackgroundSubtractorMOG2()


def _create_knn(config: DetectorConfig) -> Any:
    return cv2.createBackgroundSubtractorKNN()


_FACTORIES: Dict[BackgroundSubtractorType, Callable[[DetectorConfig], Any]] = {
    BackgroundSubtractorType.MOG: _create_mog,
    BackgroundSubtractorType.MOG2: _create_mog2,
    BackgroundSubtractorType.GMG: _create_gmg,
    BackgroundSubtractorType.CNT: _create_cnt,
    BackgroundSubtractorType.KNN: _create_knn,
}


def create_background_subtractor(config: DetectorConfig) -> Optional[Any]:
    """Build a fresh background model for ``config``.

    Args:
        config: Detector settings; only the subtractor kind and, for CNT,
            the frame rate are read

    Returns:
        A new OpenCV ``BackgroundSubtractor`` or None for ``NONE``

    Raises:
        BackgroundSubtractorUnavailableError: If the contrib module is missing
    """
    kind = BackgroundSubtractorType.parse(config.background_subtractor)
    if kind is BackgroundSubtractorType.NONE:
        logger.debug("Background subtraction disabled")
        return None

    start = time.perf_counter()
    subtractor = _FACTORIES[kind](config)
    log_performance(
        f"create {kind.value} background subtractor",
        (time.perf_counter() - start) * 1000.0,
        threshold_ms=50.0,
    )
    logger.debug(f"Created {kind.value} background subtractor (fps={config.frames_per_second})")
    return subtractor
