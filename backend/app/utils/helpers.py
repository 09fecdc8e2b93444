"""
Utility functions and helpers.
"""

from typing import Optional

from app.core.exceptions import ValidationError


def is_blank(value: Optional[str]) -> bool:
    """True for None, the empty string, or whitespace only."""
    return value is None or not str(value).strip()


def require_text(value: Optional[str], label: str) -> str:
    """
    Return `value` unchanged, or raise ValidationError if it is blank.

    Args:
        value: Caller-supplied text (an id, a comment...).
        label: Human name used in the error, e.g. "Activity ID".
    """
    if is_blank(value):
        raise ValidationError(f"{label} cannot be null or empty.")
    return value


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """Shorten text for log lines."""
    if len(text) <= max_length:
        return text
    return text[: max_length - len(suffix)] + suffix
