"""
Schema validation for configuration files.

The schema is built in; configuration files may only set the keys it lists.
"""

import logging
from typing import Any, Dict

import jsonschema

from ...exceptions.config_exceptions import ConfigurationValidationError


logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "extensions": {
            "type": "array",
            "items": {"type": "string", "pattern": "^\\."},
            "minItems": 1,
        },
        "max_workers": {"type": "integer", "minimum": 1},
        "indent": {"type": "integer", "minimum": 0},
        "log_level": {"type": "string", "enum": LOG_LEVELS},
    },
    "additionalProperties": False,
}


def validate_config(config: Dict[str, Any], source: str = "configuration") -> None:
    """
    Validate configuration against the built-in schema.
    
    Args:
        config: Configuration dictionary to validate
        source: Where the values came from, for error reporting
        
    Raises:
        ConfigurationValidationError: If validation fails
    """
    try:
        jsonschema.validate(config, CONFIG_SCHEMA)
    except jsonschema.ValidationError as e:
        invalid_fields = []
        if e.absolute_path:
            invalid_fields.append(".".join(str(p) for p in e.absolute_path))
        
        raise ConfigurationValidationError(
            f"Configuration validation failed: {e.message}",
            source,
            [e.message],
            invalid_fields
        ) from e
    logger.debug(f"Configuration from {source} passed validation")
