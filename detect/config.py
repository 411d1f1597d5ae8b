from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Sequence, Tuple

from exceptions import UnknownColourPresetError

ColourBound = Tuple[float, ...]

# HSV ranges in OpenCV units (H 0..179, S/V 0..255)
COLOUR_PRESETS: Dict[str, Tuple[ColourBound, ColourBound]] = {
    "yellow": ((20, 70, 70), (30, 255, 255)),
    "purple": ((115, 50, 50), (116, 255, 255)),
}


class BackgroundSubtractorType(str, Enum):
    NONE = "NONE"
    MOG = "MOG"
    MOG2 = "MOG2"
    GMG = "GMG"
    # Fastest of the family on low-power boards
    CNT = "CNT"
    KNN = "KNN"

    @classmethod
    def parse(cls, value: "str | BackgroundSubtractorType | None") -> "BackgroundSubtractorType":
        if value is None:
            return cls.NONE
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown background subtractor: {value!r}") from None


@dataclass
class DetectorConfig:
    """Settings for one detection session.

    Setters return the config so calls can be chained. Values are stored
    as given; lower <= upper for the colour bounds and the Canny threshold
    order are left to the caller.
    """

    lower_colour_bound: ColourBound = (0, 0, 0)
    upper_colour_bound: ColourBound = (0, 0, 0)
    background_subtractor: BackgroundSubtractorType = BackgroundSubtractorType.NONE
    frames_per_second: int = 15
    canny_low: float = 100
    canny_high: float = 100

    def set_colour_bounds(
        self, lower: Sequence[float], upper: Sequence[float]
    ) -> "DetectorConfig":
        """Set the inclusive HSV range. Give 3 or 4 components."""
        self.lower_colour_bound = tuple(lower)
        self.upper_colour_bound = tuple(upper)
        return self

    def set_colour_preset(self, name: str) -> "DetectorConfig":
        try:
            lower, upper = COLOUR_PRESETS[name.lower()]
        except KeyError:
            raise UnknownColourPresetError(
                f"Unknown colour preset '{name}' (known: {', '.join(sorted(COLOUR_PRESETS))})",
                preset=name,
            ) from None
        return self.set_colour_bounds(lower, upper)

    def set_background_subtractor(
        self, kind: "BackgroundSubtractorType | str"
    ) -> "DetectorConfig":
        # Records the choice only; Detector builds the model.
        self.background_subtractor = BackgroundSubtractorType.parse(kind)
        return self

    def set_frames_per_second(self, fps: int) -> "DetectorConfig":
        self.frames_per_second = fps
        return self

    def set_canny_threshold(self, low: float, high: float) -> "DetectorConfig":
        self.canny_low = low
        self.canny_high = high
        return self

    def get_lower_colour_bound(self) -> ColourBound:
        return self.lower_colour_bound

    def get_upper_colour_bound(self) -> ColourBound:
        return self.upper_colour_bound

    def get_background_subtractor_type(self) -> BackgroundSubtractorType:
        return self.background_subtractor

    def get_frames_per_second(self) -> int:
        return self.frames_per_second

    def get_canny_threshold_first(self) -> float:
        return self.canny_low

    def get_canny_threshold_second(self) -> float:
        return self.canny_high


Characteristics = DetectorConfig
