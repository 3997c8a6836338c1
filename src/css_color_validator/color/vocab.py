"""
vocab
=====

Does: Define the static CSS color keyword catalogues (named colors, system colors,
      CSS-wide keywords) and case-insensitive membership helpers.
Used By: validate (keyword lookups), suggest (fuzzy candidates), callers needing enumeration.
Returns: Tuples in source order, lowercase frozensets, and getter/predicate functions.
"""

from __future__ import annotations

from typing import FrozenSet

__all__ = [
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
]

# ── Named colors (CSS Color Level 4) ─────────────────────────────────────────
_BASIC_COLORS = (
    "black", "silver", "gray", "white", "maroon", "red", "purple", "fuchsia",
    "green", "lime", "olive", "yellow", "navy", "blue", "teal", "aqua",
)

_EXTENDED_COLORS = (
    "aliceblue", "antiquewhite", "aquamarine", "azure", "beige", "bisque",
    "blanchedalmond", "blueviolet", "brown", "burlywood", "cadetblue",
    "chartreuse", "chocolate", "coral", "cornflowerblue", "cornsilk", "crimson",
    "cyan", "darkblue", "darkcyan", "darkgoldenrod", "darkgray", "darkgreen",
    "darkgrey", "darkkhaki", "darkmagenta", "darkolivegreen", "darkorange",
    "darkorchid", "darkred", "darksalmon", "darkseagreen", "darkslateblue",
    "darkslategray", "darkslategrey", "darkturquoise", "darkviolet", "deeppink",
    "deepskyblue", "dimgray", "dimgrey", "dodgerblue", "firebrick", "floralwhite",
    "forestgreen", "gainsboro", "ghostwhite", "gold", "goldenrod", "greenyellow",
    "grey", "honeydew", "hotpink", "indianred", "indigo", "ivory", "khaki",
    "lavender", "lavenderblush", "lawngreen", "lemonchiffon", "lightblue",
    "lightcoral", "lightcyan", "lightgoldenrodyellow", "lightgray", "lightgreen",
    "lightgrey", "lightpink", "lightsalmon", "lightseagreen", "lightskyblue",
    "lightslategray", "lightslategrey", "lightsteelblue", "lightyellow",
    "limegreen", "linen", "magenta", "mediumaquamarine", "mediumblue",
    "mediumorchid", "mediumpurple", "mediumseagreen", "mediumslateblue",
    "mediumspringgreen", "mediumturquoise", "mediumvioletred", "midnightblue",
    "mintcream", "mistyrose", "moccasin", "navajowhite", "oldlace", "olivedrab",
    "orange", "orangered", "orchid", "palegoldenrod", "palegreen", "paleturquoise",
    "palevioletred", "papayawhip", "peachpuff", "peru", "pink", "plum",
    "powderblue", "rebeccapurple", "rosybrown", "royalblue", "saddlebrown",
    "salmon", "sandybrown", "seagreen", "seashell", "sienna", "skyblue",
    "slateblue", "slategray", "slategrey", "snow", "springgreen", "steelblue",
    "tan", "thistle", "tomato", "turquoise", "violet", "wheat", "whitesmoke",
    "yellowgreen",
)

NAMED_COLORS: tuple[str, ...] = (*_BASIC_COLORS, *_EXTENDED_COLORS, "transparent")

# ── System colors (CSS Color Level 4) ────────────────────────────────────────
_CURRENT_SYSTEM_COLORS = (
    "AccentColor", "AccentColorText", "ActiveText", "ButtonBorder", "ButtonFace",
    "ButtonText", "Canvas", "CanvasText", "Field", "FieldText", "GrayText",
    "Highlight", "HighlightText", "LinkText", "Mark", "MarkText", "SelectedItem",
    "SelectedItemText", "VisitedText",
)

# Deprecated but still accepted by browsers
DEPRECATED_SYSTEM_COLORS: tuple[str, ...] = (
    "ActiveBorder", "ActiveCaption", "AppWorkspace", "Background", "ButtonHighlight",
    "ButtonShadow", "CaptionText", "InactiveBorder", "InactiveCaption",
    "InactiveCaptionText", "InfoBackground", "InfoText", "Menu", "MenuText",
    "Scrollbar", "ThreeDDarkShadow", "ThreeDFace", "ThreeDHighlight",
    "ThreeDLightShadow", "ThreeDShadow", "Window", "WindowFrame", "WindowText",
)

SYSTEM_COLORS: tuple[str, ...] = (*_CURRENT_SYSTEM_COLORS, *DEPRECATED_SYSTEM_COLORS)

# ── Keywords ─────────────────────────────────────────────────────────────────
CSS_WIDE_KEYWORDS: tuple[str, ...] = ("currentcolor", "inherit", "initial", "unset")

# ── Lookup sets (lowercase) ──────────────────────────────────────────────────
_NAMED_LOOKUP: FrozenSet[str] = frozenset(NAMED_COLORS)
_SYSTEM_LOOKUP: FrozenSet[str] = frozenset(c.lower() for c in SYSTEM_COLORS)
_KEYWORD_LOOKUP: FrozenSet[str] = frozenset(CSS_WIDE_KEYWORDS)


# ── Accessors ────────────────────────────────────────────────────────────────
def get_named_color_names() -> FrozenSet[str]:
    """Does: Return all named colors (lowercase, `transparent` included)."""
    return _NAMED_LOOKUP


def get_system_color_names() -> FrozenSet[str]:
    """Does: Return all system colors, lowercased for comparison."""
    return _SYSTEM_LOOKUP


def get_keyword_names() -> FrozenSet[str]:
    """Does: Return the CSS-wide keywords accepted as colors."""
    return _KEYWORD_LOOKUP


def is_named_color(name: str) -> bool:
    return name.strip().lower() in _NAMED_LOOKUP


def is_system_color(name: str) -> bool:
    return name.strip().lower() in _SYSTEM_LOOKUP


def is_css_wide_keyword(name: str) -> bool:
    return name.strip().lower() in _KEYWORD_LOOKUP
