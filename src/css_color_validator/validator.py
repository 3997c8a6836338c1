# src/css_color_validator/validator.py
"""
validator.
=========

Does: Decide whether an arbitrary value is a CSS <color>: CSS-wide keywords,
      named colors, system colors, then every notation recognizer in turn.
Returns: `is_valid_css_color()` -> bool (never raises); `ensure_css_color()` -> the
         value itself, or raises `InvalidCssColor`.
Used by: schema.CssColor and any caller needing an accept/reject decision.
"""

from __future__ import annotations

import logging

from css_color_validator.color.vocab import (
    get_keyword_names,
    get_named_color_names,
    get_system_color_names,
)
from css_color_validator.grammar.notations import match_notation
from css_color_validator.utils.log import debug

__all__ = [
    "INVALID_CSS_COLOR_MESSAGE",
    "InvalidCssColor",
    "is_valid_css_color",
    "validate",
    "ensure_css_color",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

INVALID_CSS_COLOR_MESSAGE = "Invalid CSS color value"


# ── Exceptions ───────────────────────────────────────────────────────────────
class InvalidCssColor(ValueError):
    """Raise when a value does not conform to the CSS <color> grammar."""

    def __init__(self, message: str = INVALID_CSS_COLOR_MESSAGE) -> None:
        super().__init__(message)


# ── Entry point ──────────────────────────────────────────────────────────────
def is_valid_css_color(value: object) -> bool:
    """
    Does: Validate `value` against the CSS Color Level 4 <color> grammar.
    Returns: True iff `value` is a string naming or spelling a CSS color.
             Non-strings and empty/blank strings are False.
    """
    if not isinstance(value, str):
        return False

    trimmed = value.strip()
    if not trimmed:
        return False

    # Keyword tables first: the common case, and cheaper than the regex sweep.
    lowered = trimmed.lower()
    if lowered in get_keyword_names():
        return True
    if lowered in get_named_color_names():
        return True
    if lowered in get_system_color_names():
        return True

    # Recognizers see the original case; their patterns are case-insensitive.
    if match_notation(trimmed) is not None:
        return True

    log.debug("Rejected CSS color %r", trimmed)
    debug("rejected %r", trimmed, topic="validate")
    return False


# Short alias for predicate-style callers.
validate = is_valid_css_color


def ensure_css_color(value: object) -> str:
    """
    Does: Raising form of `is_valid_css_color()`.
    Returns: `value` unchanged when valid; raises InvalidCssColor otherwise.
    """
    if isinstance(value, str) and is_valid_css_color(value):
        return value
    raise InvalidCssColor()
