"""Custom exception classes for the circular object detector."""

from __future__ import annotations

from typing import Optional


class DetectorError(Exception):
    """Base exception for all detector errors."""

    pass


class ConfigError(DetectorError):
    """Base exception for configuration errors."""

    pass


class InvalidConfigError(ConfigError):
    """Raised when configuration file is invalid or corrupted."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when configuration fails schema validation."""

    def __init__(self, message: str, validation_errors: Optional[list] = None):
        self.validation_errors = validation_errors or []
        super().__init__(message)


class UnknownColourPresetError(ConfigError):
    """Raised when a named colour preset does not exist."""

    def __init__(self, message: str, preset: Optional[str] = None):
        self.preset = preset
        super().__init__(message)


class DetectionError(DetectorError):
    """Base exception for detection-related errors."""

    pass


class BackgroundSubtractorUnavailableError(DetectionError):
    """Raised when OpenCV lacks the module providing a background subtractor."""

    def __init__(self, message: str, kind: Optional[str] = None):
        self.kind = kind
        super().__init__(message)


class ShapeError(DetectorError):
    """Base exception for shape construction errors."""

    pass


class NumericRangeError(ShapeError, TypeError):
    """Raised when a shape would be built from a wider numeric kind than it stores."""

    pass
