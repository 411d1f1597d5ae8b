"""Configuration loading and validation."""

from .settings import DEFAULT_CONFIG_PATH, detector_config_from_dict, load_detector_config
from .validator import CONFIG_SCHEMA, validate_config

__all__ = [
    "CONFIG_SCHEMA",
    "DEFAULT_CONFIG_PATH",
    "detector_config_from_dict",
    "load_detector_config",
    "validate_config",
]
