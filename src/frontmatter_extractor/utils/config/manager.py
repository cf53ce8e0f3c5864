"""
Main configuration manager for the frontmatter extractor.

This module provides the ConfigManager class that merges defaults, an
optional JSON configuration file, environment variables and explicit
overrides into an ExtractorConfig.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ...exceptions.config_exceptions import (
    ConfigurationError,
    ConfigurationFileNotFoundError,
)
from .environment import EnvironmentHandler
from .schema_validation import validate_config


logger = logging.getLogger(__name__)

ENV_FILE = ".env"


@dataclass
class ExtractorConfig:
    """
    Effective settings for one extraction run.

    Attributes:
        extensions: Document extensions selected by the locator
        max_workers: Worker pool size (None: number of CPUs)
        indent: JSON indentation of emitted records
        log_level: Explicit log level name (None: derived from --verbose)
    """
    extensions: List[str] = field(default_factory=lambda: [".md"])
    max_workers: Optional[int] = None
    indent: int = 2
    log_level: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}


class ConfigManager:
    """
    Configuration manager for the frontmatter extractor.

    Handles loading and validation of configuration from:
    - Built-in defaults
    - A JSON configuration file (optional)
    - Environment variables, including a .env file in the project root
    - Explicit overrides such as CLI flags
    """

    def __init__(
        self,
        config_file: Optional[Union[str, Path]] = None,
        project_root: Optional[Union[str, Path]] = None,
        load_env: bool = True,
        environ: Optional[Dict[str, str]] = None,
    ) -> None:
        """
        Initialize the ConfigManager.

        Args:
            config_file: Path to a JSON configuration file
            project_root: Directory holding the .env file (default: current working directory)
            load_env: Whether to load environment variables from the .env file
            environ: Environment mapping to read overrides from (default: os.environ)
        """
        self.project_root = Path(project_root or os.getcwd())
        self.config_file = Path(config_file) if config_file else None
        self.env_handler = EnvironmentHandler()
        self.environ = environ

        if load_env:
            self.env_handler.load_env_file(self.project_root / ENV_FILE)

    def load_json_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Load and parse a JSON configuration file.

        Raises:
            ConfigurationFileNotFoundError: If file doesn't exist
            ConfigurationError: If the file cannot be read or parsed
        """
        if not file_path.exists():
            raise ConfigurationFileNotFoundError(
                f"Configuration file not found: {file_path}", str(file_path)
            )

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in configuration file {file_path}: {e}", str(file_path)
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Error reading configuration file {file_path}: {e}", str(file_path)
            ) from e

        logger.info(f"Loaded configuration from {file_path}")
        return data

    def load(self, overrides: Optional[Dict[str, Any]] = None) -> ExtractorConfig:
        """
        Build the effective configuration.

        Args:
            overrides: Highest-precedence values; None entries are ignored

        Returns:
            Validated ExtractorConfig

        Raises:
            ConfigurationError: If any source is missing, unreadable or invalid
        """
        merged = ExtractorConfig().to_dict()

        if self.config_file is not None:
            file_data = self.load_json_file(self.config_file)
            validate_config(file_data, str(self.config_file))
            merged.update(file_data)

        env_data = self.env_handler.get_overrides(self.environ)
        if env_data:
            validate_config(env_data, "environment")
            merged.update(env_data)

        explicit = {k: v for k, v in (overrides or {}).items() if v is not None}
        if explicit:
            validate_config(explicit, "command line")
            merged.update(explicit)

        return ExtractorConfig(**merged)
