"""Configuration loading for the circular object detector."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Union

import yaml

from configs.validator import validate_config
from detect.config import BackgroundSubtractorType, DetectorConfig
from exceptions import ConfigError, InvalidConfigError
from log_config.logger import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).with_name("default.yaml")


def detector_config_from_dict(data: Dict[str, Any]) -> DetectorConfig:
    """Build a DetectorConfig from a validated ``detector`` section.

    A ``colour_preset`` is applied first; explicit bounds override it.
    """
    config = DetectorConfig()
    if data.get("colour_preset"):
        config.set_colour_preset(data["colour_preset"])
    if "lower_colour_bound" in data:
        config.set_colour_bounds(data["lower_colour_bound"], data["upper_colour_bound"])
    low, high = data.get("canny_threshold", (100, 100))
    return (
        config.set_background_subtractor(
            BackgroundSubtractorType.parse(data.get("background_subtractor"))
        )
        .set_frames_per_second(int(data.get("frames_per_second", 15)))
        .set_canny_threshold(low, high)
    )


def load_detector_config(path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> DetectorConfig:
    """Load and validate detector configuration from YAML file.

    Args:
        path: Path to configuration file

    Returns:
        Validated DetectorConfig instance

    Raises:
        ConfigError: If configuration is invalid or cannot be loaded
    """
    path = Path(path)
    try:
        logger.info(f"Loading configuration from {path}")
        if not path.exists():
            raise InvalidConfigError(f"Configuration file not found: {path}")

        data = yaml.safe_load(path.read_text())

        # Validate against JSON Schema
        validate_config(data)

        logger.debug("Parsing detector section")

    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML configuration: {e}")
        raise InvalidConfigError(f"Failed to parse configuration file: {e}")

    try:
        config = detector_config_from_dict(data["detector"])
    except ConfigError:
        raise
    except (KeyError, TypeError, ValueError) as e:
        logger.error(f"Failed to construct configuration objects: {e}")
        raise InvalidConfigError(f"Failed to construct configuration: {e}")

    logger.info(
        f"Configuration loaded successfully: subtractor={config.background_subtractor.value}, "
        f"fps={config.frames_per_second}, bounds={config.lower_colour_bound}-{config.upper_colour_bound}"
    )
    return config


__all__ = ["DEFAULT_CONFIG_PATH", "detector_config_from_dict", "load_detector_config"]
