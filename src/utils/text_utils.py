"""
Text utility functions for request payload handling.
"""
from typing import Any, List, Mapping, Optional


def is_blank(value: Any) -> bool:
    """
    Check whether a payload value counts as "missing".

    None, empty strings and whitespace-only strings are blank. Lists and
    tuples are blank when empty. Any other value is considered present.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def any_blank(*values: Any) -> bool:
    """Return True if at least one of the values is blank."""
    return any(is_blank(value) for value in values)


def text_field(payload: Mapping[str, Any], key: str) -> Optional[str]:
    """
    Read a scalar field from a request payload as a string.

    Args:
        payload: Parsed JSON body or query parameters
        key: Field name

    Returns:
        The value as a string, or None if absent. Lists and objects are
        treated as absent since no scalar field accepts them.
    """
    value = payload.get(key)
    if value is None or isinstance(value, (list, dict)):
        return None
    return value if isinstance(value, str) else str(value)


def list_field(payload: Mapping[str, Any], key: str) -> List[str]:
    """
    Read a list-of-strings field from a request payload.

    Returns [] if the field is absent or not a list. Items are read the way
    text_field reads a scalar, and null, blank or nested items are dropped.
    """
    value = payload.get(key)
    if not isinstance(value, list):
        return []
    items = [text_field({key: item}, key) for item in value]
    return [item for item in items if not is_blank(item)]
