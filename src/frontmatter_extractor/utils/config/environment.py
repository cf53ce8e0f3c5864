"""
Environment variable handling for configuration management.

Reads FRONTMATTER_EXTRACTOR_* overrides, optionally after loading a .env file.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv

from ...exceptions.config_exceptions import ENV_PREFIX, ConfigurationValidationError


logger = logging.getLogger(__name__)


class EnvironmentHandler:
    """
    Environment variable handling for configuration management.
    
    Handles .env loading, environment variable overrides and type conversion.
    """
    
    ENV_MAPPING = {
        f"{ENV_PREFIX}MAX_WORKERS": ("max_workers", "integer"),
        f"{ENV_PREFIX}LOG_LEVEL": ("log_level", "string"),
    }
    
    def load_env_file(self, env_file: Union[str, Path]) -> None:
        """Load environment variables from a .env file if it exists."""
        env_path = Path(env_file)
        if env_path.exists():
            logger.debug(f"Loading environment variables from {env_path}")
            load_dotenv(env_path)
        else:
            logger.debug(f"Environment file not found at {env_path}, skipping")
    
    def convert_env_value(self, name: str, value: str, target_type: str) -> Any:
        """
        Convert an environment variable string to the configured type.
        
        Raises:
            ConfigurationValidationError: If the value cannot be converted
        """
        if target_type == "integer":
            try:
                return int(value)
            except ValueError as e:
                raise ConfigurationValidationError(
                    f"Environment variable {name} must be an integer, got {value!r}",
                    invalid_fields=[name]
                ) from e
        if target_type == "string":
            return value.strip().upper() if name.endswith("LOG_LEVEL") else value
        return value
    
    def get_overrides(self, environ: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        """Return configuration overrides found in the environment."""
        environ = os.environ if environ is None else environ
        overrides = {}
        for env_name, (key, target_type) in self.ENV_MAPPING.items():
            value = environ.get(env_name)
            if value is None or value == "":
                continue
            overrides[key] = self.convert_env_value(env_name, value, target_type)
            logger.debug(f"Applied environment override {env_name} -> {key}")
        return overrides
