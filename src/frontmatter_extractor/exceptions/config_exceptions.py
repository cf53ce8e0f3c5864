"""
Configuration-related exceptions for the frontmatter extractor.

Settings come from three places: the JSON file passed with ``--config``,
``FRONTMATTER_EXTRACTOR_*`` environment variables (a project ``.env`` is
loaded first) and command-line flags. Each error names where the bad value
came from and carries one hint for fixing it.
"""

from typing import List, Optional

from .extraction_exceptions import FrontmatterExtractorError

ENV_PREFIX = "FRONTMATTER_EXTRACTOR_"
ALLOWED_KEYS = ("extensions", "max_workers", "indent", "log_level")


class ConfigurationError(FrontmatterExtractorError):
    """The ``--config`` file or an environment setting could not be used."""

    default_hint = "Fix the file passed with --config, or drop --config to run with the defaults"

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        hint: Optional[str] = None
    ) -> None:
        """
        Args:
            message: Error description
            source: Config file path, or "environment" / "command line"
            hint: How to fix it (default: ``default_hint``)
        """
        super().__init__(message)
        self.source = source
        self.hint = hint if hint is not None else self.default_hint

    def __str__(self) -> str:
        msg = super().__str__()
        if self.source and self.source not in msg:
            msg = f"{msg} [from {self.source}]"
        if self.hint:
            msg = f"{msg}\nHint: {self.hint}"
        return msg


class ConfigurationFileNotFoundError(ConfigurationError):
    """The path given to ``--config`` does not exist."""

    default_hint = "Check the path given to --config; relative paths start from the current directory"


class ConfigurationValidationError(ConfigurationError):
    """A setting has the wrong type, an out-of-range value or an unknown name."""

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        validation_errors: Optional[List[str]] = None,
        invalid_fields: Optional[List[str]] = None
    ) -> None:
        self.validation_errors = validation_errors or []
        self.invalid_fields = invalid_fields or []
        super().__init__(message, source, self._hint_for(self.invalid_fields))

    @staticmethod
    def _hint_for(fields: List[str]) -> str:
        env_vars = [f for f in fields if f.startswith(ENV_PREFIX)]
        if env_vars:
            return f"Correct or unset {', '.join(env_vars)} in the environment or .env file"
        hint = f"Recognised keys are {', '.join(ALLOWED_KEYS)}"
        if fields:
            hint += f"; check {', '.join(fields)}"
        return hint
