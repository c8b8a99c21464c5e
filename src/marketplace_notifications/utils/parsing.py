"""Parsing helpers for string values held in the configuration store."""
from typing import Any


def parse_bool(value: str) -> bool:
    """
    Strictly parse a boolean string.

    Args:
        value (str): "true" or "false" in any case, optionally padded with whitespace.

    Returns:
        bool: The parsed value.

    Raises:
        ValueError: If the value is not a recognised boolean string.
    """
    if value is None:
        raise ValueError("Cannot parse boolean from None")

    normalized = value.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False

    raise ValueError(f"String '{value}' was not recognized as a valid boolean")


def to_bool(value: Any) -> bool:
    """Leniently convert a stored flag to a boolean. None is False."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    return parse_bool(str(value))
