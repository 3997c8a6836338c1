"""
css_color_validator
===================

Does: Root package for the CSS <color> validator (CSS Color Module Level 4).
Returns: Re-exports the predicate, its raising form, the pydantic type and the
         keyword catalogues.
Used by: Schema layers, design-token tooling, style linters.
"""

from css_color_validator.color import (
    CSS_WIDE_KEYWORDS,
    NAMED_COLORS,
    SYSTEM_COLORS,
    suggest_color_names,
)
from css_color_validator.grammar import match_notation
from css_color_validator.schema import CssColor, css_color_adapter
from css_color_validator.validator import (
    InvalidCssColor,
    ensure_css_color,
    is_valid_css_color,
    validate,
)

__all__: list[str] = [
    "is_valid_css_color",
    "validate",
    "ensure_css_color",
    "InvalidCssColor",
    "match_notation",
    "CssColor",
    "css_color_adapter",
    "NAMED_COLORS",
    "SYSTEM_COLORS",
    "CSS_WIDE_KEYWORDS",
    "suggest_color_names",
]
__docformat__ = "google"
