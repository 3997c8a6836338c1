"""
color.
=====

Does: Aggregate the CSS color keyword catalogues and the fuzzy keyword suggester.
Used By: validate (keyword lookups), schema consumers, autocomplete callers.
Returns: Pure data structures and accessor functions; no side effects.
"""

# ── Vocabulary ───────────────────────────────────────────────────────────────
from .vocab import (
    CSS_WIDE_KEYWORDS,
    DEPRECATED_SYSTEM_COLORS,
    NAMED_COLORS,
    SYSTEM_COLORS,
    get_keyword_names,
    get_named_color_names,
    get_system_color_names,
    is_css_wide_keyword,
    is_named_color,
    is_system_color,
)

# ── Suggestions ──────────────────────────────────────────────────────────────
from .suggest import suggest_color_names

__all__ = [
    # vocab
    "NAMED_COLORS",
    "SYSTEM_COLORS",
    "DEPRECATED_SYSTEM_COLORS",
    "CSS_WIDE_KEYWORDS",
    "get_named_color_names",
    "get_system_color_names",
    "get_keyword_names",
    "is_named_color",
    "is_system_color",
    "is_css_wide_keyword",
    # suggest
    "suggest_color_names",
]
