"""
Configuration management for the frontmatter extractor.

Settings come from built-in defaults, an optional JSON config file,
environment variables (optionally from a .env file) and CLI flags, in
increasing order of precedence.
"""

from .manager import ConfigManager, ExtractorConfig
from .schema_validation import CONFIG_SCHEMA, validate_config
from .environment import EnvironmentHandler

__all__ = [
    "ConfigManager",
    "ExtractorConfig",
    "CONFIG_SCHEMA",
    "validate_config",
    "EnvironmentHandler",
]
