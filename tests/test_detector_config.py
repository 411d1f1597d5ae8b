import pytest

from detect import Detector
from detect.config import (
    COLOUR_PRESETS,
    BackgroundSubtractorType,
    Characteristics,
    DetectorConfig,
)
from exceptions import ConfigError, UnknownColourPresetError


def test_defaults() -> None:
    """Test the default detector settings."""
    config = DetectorConfig()

    assert config.get_background_subtractor_type() is BackgroundSubtractorType.NONE
    assert config.get_frames_per_second() == 15
    assert config.get_canny_threshold_first() == 100
    assert config.get_canny_threshold_second() == 100


def test_fluent_setters_chain_on_same_object() -> None:
    """Test that every setter returns the same config object."""
    config = Characteristics()

    result = (
        config.set_background_subtractor(BackgroundSubtractorType.CNT)
        .set_colour_bounds((115, 50, 50), (116, 255, 255))
        .set_canny_threshold(100, 100)
        .set_frames_per_second(2)
    )

    assert result is config
    assert config.get_lower_colour_bound() == (115, 50, 50)
    assert config.get_upper_colour_bound() == (116, 255, 255)
    assert config.get_frames_per_second() == 2
    assert config.get_background_subtractor_type() is BackgroundSubtractorType.CNT


def test_values_stored_without_validation() -> None:
    """Test that setters store values as given."""
    config = DetectorConfig().set_colour_bounds((50, 255, 255, 0), (10, 0, 0, 0))
    config.set_canny_threshold(300, 20)

    assert config.lower_colour_bound == (50, 255, 255, 0)
    assert config.upper_colour_bound == (10, 0, 0, 0)
    assert (config.canny_low, config.canny_high) == (300, 20)


def test_colour_preset() -> None:
    """Test that a preset name sets its HSV bounds, ignoring case."""
    config = DetectorConfig().set_colour_preset("Yellow")

    assert (config.lower_colour_bound, config.upper_colour_bound) == COLOUR_PRESETS["yellow"]


def test_unknown_colour_preset() -> None:
    """Test that an unknown preset raises and names the preset."""
    with pytest.raises(UnknownColourPresetError) as excinfo:
        DetectorConfig().set_colour_preset("magenta")

    assert excinfo.value.preset == "magenta"
    assert isinstance(excinfo.value, ConfigError)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("cnt", BackgroundSubtractorType.CNT),
        (" MOG2 ", BackgroundSubtractorType.MOG2),
        (None, BackgroundSubtractorType.NONE),
        (BackgroundSubtractorType.KNN, BackgroundSubtractorType.KNN),
    ],
)
def test_parse_subtractor_kind(value, expected) -> None:
    """Test parsing subtractor kinds from names and members."""
    assert BackgroundSubtractorType.parse(value) is expected


def test_parse_unknown_subtractor_kind() -> None:
    """Test that an unknown subtractor name raises ValueError."""
    with pytest.raises(ValueError):
        BackgroundSubtractorType.parse("median")


def test_setting_subtractor_accepts_names() -> None:
    """Test that set_background_subtractor accepts a lower-case name."""
    config = DetectorConfig().set_background_subtractor("knn")

    assert config.background_subtractor is BackgroundSubtractorType.KNN


def test_detector_keeps_private_copy() -> None:
    """Test that later edits to a config do not reach the detector."""
    config = DetectorConfig().set_frames_per_second(30)
    detector = Detector(config)

    config.set_frames_per_second(5).set_colour_preset("yellow")

    assert detector.config.frames_per_second == 30
    assert detector.config.lower_colour_bound == (0, 0, 0)


def test_detector_config_property_is_a_copy() -> None:
    """Test that Detector.config hands out a copy."""
    detector = Detector(DetectorConfig())

    detector.config.set_frames_per_second(99)

    assert detector.config.frames_per_second == 15
