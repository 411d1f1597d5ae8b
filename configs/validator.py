"""Configuration validation using JSON Schema."""

from __future__ import annotations

from typing import Any, Dict

import jsonschema
from jsonschema import Draft7Validator, validators

from exceptions import ConfigValidationError
from log_config.logger import get_logger

logger = get_logger(__name__)

_COLOUR_BOUND = {
    "type": "array",
    "items": {"type": "number", "minimum": 0, "maximum": 255},
    "minItems": 3,
    "maxItems": 4,
}

# JSON Schema for default.yaml configuration
CONFIG_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["detector"],
    "properties": {
        "detector": {
            "type": "object",
            "properties": {
                "colour_preset": {"type": ["string", "null"], "default": None},
                "lower_colour_bound": _COLOUR_BOUND,
                "upper_colour_bound": _COLOUR_BOUND,
                "background_subtractor": {
                    "type": "string",
                    "enum": ["NONE", "MOG", "MOG2", "GMG", "CNT", "KNN",
                             "none", "mog", "mog2", "gmg", "cnt", "knn"],
                    "default": "NONE",
                },
                "frames_per_second": {"type": "integer", "minimum": 1, "maximum": 1000, "default": 15},
                "canny_threshold": {
                    "type": "array",
                    "items": {"type": "number", "minimum": 0},
                    "minItems": 2,
                    "maxItems": 2,
                    "default": [100, 100],
                },
            },
            "dependencies": {
                "lower_colour_bound": ["upper_colour_bound"],
                "upper_colour_bound": ["lower_colour_bound"],
            },
        },
    },
}


def with_schema_defaults(validator_class):
    """Validator class that also writes ``default`` values into the checked dict."""
    check_properties = validator_class.VALIDATORS["properties"]

    def fill_defaults(validator, properties, instance, schema):
        if validator.is_type(instance, "object"):
            for name, subschema in properties.items():
                if "default" in subschema:
                    instance.setdefault(name, subschema["default"])
        yield from check_properties(validator, properties, instance, schema)

    return validators.extend(validator_class, {"properties": fill_defaults})


DetectorSchemaValidator = with_schema_defaults(Draft7Validator)


def _describe(error: jsonschema.ValidationError) -> str:
    location = ".".join(str(part) for part in error.absolute_path) or "<document>"
    return f"{location}: {error.message}"


def validate_config(config: Dict[str, Any]) -> None:
    """Check a loaded YAML document against ``CONFIG_SCHEMA``.

    Missing optional detector keys are filled in with their schema defaults.

    Args:
        config: Parsed YAML document

    Raises:
        ConfigValidationError: If any key is missing, mistyped or out of range
    """
    try:
        problems = [
            _describe(error)
            for error in DetectorSchemaValidator(CONFIG_SCHEMA).iter_errors(config)
        ]
    except jsonschema.exceptions.SchemaError as e:
        logger.error(f"Detector config schema is malformed: {e}")
        raise ConfigValidationError(f"Detector config schema is malformed: {e}")

    if problems:
        logger.error(f"Rejected detector config ({len(problems)} problem(s)): {'; '.join(problems)}")
        raise ConfigValidationError(
            f"Detector config rejected: {problems[0]}"
            + (f" (and {len(problems) - 1} more)" if len(problems) > 1 else ""),
            validation_errors=problems,
        )

    logger.debug("Detector config passed schema check")


__all__ = ["validate_config", "CONFIG_SCHEMA", "DetectorSchemaValidator"]
