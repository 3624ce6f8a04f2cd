"""
Configuration validation utilities.

Environment lookups and path checks shared by the config loader and the CLI.
"""
import os
import warnings
from typing import Optional
from .exceptions import ConfigurationError


def get_optional_env(
    key: str,
    default: Optional[str] = None,
    check_placeholder: bool = True,
) -> Optional[str]:
    """
    Get optional environment variable.

    :param key: Environment variable name
    :param default: Default value if not set
    :param check_placeholder: Reject values that look like template placeholders.
        Off for file paths, which are checked for existence instead.
    :return: Environment variable value or default
    """
    value = os.getenv(key, default)

    if check_placeholder and value and _is_placeholder(value):
        # Warn but don't fail for optional configs
        warnings.warn(
            f"{key} appears to be a placeholder. Using default or None.",
            UserWarning
        )
        return default

    return value


def validate_path(path: str, path_name: str, must_exist: bool = False) -> str:
    """
    Validate file path.

    :param path: Path to validate
    :param path_name: Name of the path (for error messages)
    :param must_exist: Whether path must exist
    :return: Validated path
    :raises: ConfigurationError if invalid
    """
    if not path:
        raise ConfigurationError(f"{path_name} is required.")

    if must_exist and not os.path.exists(path):
        raise ConfigurationError(
            f"{path_name} does not exist: {path}\n"
            f"Please check the path and ensure the file exists."
        )

    return path


def validate_log_level(level: str) -> str:
    """
    Normalize a logging level name.

    :param level: Level name, any case (e.g. "debug")
    :return: Upper-case level name
    :raises: ConfigurationError if the name is not a standard logging level
    """
    normalized = (level or "").strip().upper()
    if normalized not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise ConfigurationError(
            f"LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL. "
            f"Got: {level!r}"
        )
    return normalized


def _is_placeholder(value: str) -> bool:
    """Check if value is a placeholder."""
    if not value:
        return False

    placeholder_patterns = [
        "your_",
        "placeholder",
        "replace",
        "changeme",
    ]

    value_lower = value.lower()
    return any(pattern in value_lower for pattern in placeholder_patterns)
