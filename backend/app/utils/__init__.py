"""
Utils package initialization.
"""

from app.utils.helpers import is_blank, require_text, truncate_text

__all__ = [
    "is_blank",
    "require_text",
    "truncate_text",
]
