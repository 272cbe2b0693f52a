"""
Configuration validation utilities.

Typed environment lookups with placeholder detection and helpful error messages.
"""
import os
import warnings
from typing import Iterable, Optional
from .exceptions import ConfigurationError


_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


def get_required_env(key: str, description: str = None) -> str:
    """
    Get required environment variable with validation.

    :param key: Environment variable name
    :param description: Human-readable description for error messages
    :return: Environment variable value
    :raises: ConfigurationError if not set or a placeholder
    """
    value = os.getenv(key)

    if not value:
        desc = description or key
        raise ConfigurationError(
            f"{key} is required but not set.\n"
            f"Please set it using one of these methods:\n"
            f"  1. Environment variable: export {key}='your-value'\n"
            f"  2. .env file: Create .env in project root with {key}=your-value\n\n"
            f"Description: {desc}"
        )

    if _is_placeholder(value):
        raise ConfigurationError(
            f"{key} appears to be a placeholder value.\n"
            f"Please set a real value. Current value: {_mask_secret(value)}"
        )

    return value


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get optional environment variable.

    :param key: Environment variable name
    :param default: Default value if not set
    :return: Environment variable value or default
    """
    value = os.getenv(key, default)

    if value and _is_placeholder(value):
        warnings.warn(
            f"{key} appears to be a placeholder. Using default or None.",
            UserWarning
        )
        return default

    return value


def get_bool_env(key: str, default: bool = False) -> bool:
    """
    Parse a boolean environment variable.

    Accepts true/false, 1/0, yes/no, on/off (case-insensitive).

    :raises: ConfigurationError on any other value
    """
    value = get_optional_env(key)
    if value is None or value.strip() == "":
        return default

    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False

    raise ConfigurationError(
        f"{key} must be a boolean (true/false), got '{value}'."
    )


def get_int_env(key: str, default: int) -> int:
    """Parse an integer environment variable, raising ConfigurationError on bad input."""
    value = get_optional_env(key)
    if value is None or value.strip() == "":
        return default

    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"{key} must be an integer, got '{value}'.")


def get_float_env(key: str, default: float) -> float:
    """Parse a float environment variable, raising ConfigurationError on bad input."""
    value = get_optional_env(key)
    if value is None or value.strip() == "":
        return default

    try:
        return float(value)
    except ValueError:
        raise ConfigurationError(f"{key} must be a number, got '{value}'.")


def validate_choice(value: str, key: str, choices: Iterable[str]) -> str:
    """
    Validate that a value is one of the allowed choices.

    :return: The value, lowercased
    :raises: ConfigurationError if not allowed
    """
    allowed = list(choices)
    normalized = (value or "").strip().lower()
    if normalized not in allowed:
        raise ConfigurationError(
            f"{key} must be one of {allowed}, got '{value}'."
        )
    return normalized


def _is_placeholder(value: str) -> bool:
    """Check if value is a placeholder."""
    if not value:
        return False

    placeholder_patterns = [
        "your_",
        "your-",
        "placeholder",
        "xxx",
        "replace",
        "changeme",
    ]

    value_lower = value.lower()
    return any(pattern in value_lower for pattern in placeholder_patterns)


def _mask_secret(secret: str, show_chars: int = 4) -> str:
    """
    Mask secret for safe display in error messages.

    :param secret: Secret to mask
    :param show_chars: Number of characters to show at start/end
    :return: Masked secret
    """
    if not secret or len(secret) <= show_chars * 2:
        return "***"

    return f"{secret[:show_chars]}...{secret[-show_chars:]}"
