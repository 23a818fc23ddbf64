"""
Utility modules for shared functionality.
"""
from .text_utils import (
    is_blank,
    any_blank,
    text_field,
    list_field,
)

__all__ = [
    "is_blank",
    "any_blank",
    "text_field",
    "list_field",
]
