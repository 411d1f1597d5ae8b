"""Detection module."""

from .background import create_background_subtractor
from .config import COLOUR_PRESETS, BackgroundSubtractorType, Characteristics, DetectorConfig
from .detector import Detector
from .filters import filter_circular_contours, select_largest_contour
from .processing import process_image
from .utils import colour_bounds_around, hsv_at_pixel

__all__ = [
    "BackgroundSubtractorType",
    "COLOUR_PRESETS",
    "Characteristics",
    "Detector",
    "DetectorConfig",
    "colour_bounds_around",
    "create_background_subtractor",
    "filter_circular_contours",
    "hsv_at_pixel",
    "process_image",
    "select_largest_contour",
]
