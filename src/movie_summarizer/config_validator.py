"""
Configuration validation utilities.

Environment lookups that fail with a remediation message instead of a
KeyError deep inside a provider client.
"""
import os
import re
import warnings
from typing import Optional
from .exceptions import ConfigurationError


def get_required_env(key: str, description: str = None) -> str:
    """
    Get required environment variable with validation.

    :param key: Environment variable name
    :param description: Human-readable description for error messages
    :return: Environment variable value
    :raises: ConfigurationError if not set or a placeholder
    """
    value = os.getenv(key)

    if not value or not value.strip():
        desc = description or key
        raise ConfigurationError(
            f"Please add {key} to your .env file.\n"
            f"You can set it using one of these methods:\n"
            f"  1. Environment variable: export {key}='your-value'\n"
            f"  2. .env file: Create .env in the working directory with {key}=your-value\n"
            f"  3. See .env.example for template\n\n"
            f"Description: {desc}"
        )

    if _is_placeholder(value):
        raise ConfigurationError(
            f"{key} appears to be a placeholder value.\n"
            f"Please set a real value. Current value: {_mask_secret(value)}\n"
            f"See .env.example for the correct format."
        )

    return value.strip()


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
            f"{key} appears to be a placeholder. Using default.",
            UserWarning
        )
        return default

    return value


def get_int_env(key: str, default: int, minimum: int = 1) -> int:
    """Read an integer setting, rejecting junk and values below ``minimum``."""
    raw = get_optional_env(key, str(default))
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}.")
    if value < minimum:
        raise ConfigurationError(f"{key} must be at least {minimum}, got {value}.")
    return value


def get_float_env(key: str, default: float) -> float:
    raw = get_optional_env(key, str(default))
    try:
        return float(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{key} must be a number, got {raw!r}.")


def _is_placeholder(value: str) -> bool:
    """
    Check if value is a placeholder.

    Prefix and whole-value checks only: real keys may contain "xxx" or
    "replace" anywhere in their random part.
    """
    if not value:
        return False

    placeholder_prefixes = [
        "your_",
        "your-",
        "replace_",
        "replace-",
        "replace me",
        "<",
    ]
    placeholder_words = [
        "placeholder",
        "changeme",
    ]

    value_lower = value.strip().lower()
    if re.fullmatch(r"x{3,}", value_lower):
        return True
    if any(value_lower.startswith(prefix) for prefix in placeholder_prefixes):
        return True
    return any(word in value_lower for word in placeholder_words)


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
