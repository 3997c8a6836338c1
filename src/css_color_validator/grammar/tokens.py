# src/css_color_validator/grammar/tokens.py
"""
tokens.
======

Does: Define the atomic lexical classes of the CSS <color> grammar (numbers, percentages,
      angles, alpha, `none`, whitespace, relative-color prefix) as non-capturing regex
      fragments, plus small combinators that compose them into full recognizer patterns.
Returns: Pattern strings (inlinable anywhere) and `compile_fullmatch()` for anchored use.
Used by: grammar.notations (one recognizer per color function family).
"""

from __future__ import annotations

import re
from collections.abc import Iterable

__all__ = [
    # numbers
    "DIGITS",
    "NUMBER",
    "SIGNED_NUMBER",
    "PERCENTAGE",
    "NONE",
    "NUMBER_OR_NONE",
    "SIGNED_NUMBER_OR_NONE",
    "BYTE",
    "BYTE_VALUE",
    # angles & alpha
    "ANGLE_UNITS",
    "ANGLE",
    "ANGLE_OR_NONE",
    "ALPHA",
    "ALPHA_OR_NONE",
    "ALPHA_SLASH",
    # separators
    "WS",
    "WS_REQUIRED",
    "COMMA",
    "SLASH",
    "FROM",
    # combinators
    "optional",
    "one_of",
    "with_from",
    "spaced",
    "comma_separated",
    "function_call",
    "compile_fullmatch",
    "PATTERN_FLAGS",
]

__docformat__ = "google"

# ── Flags ────────────────────────────────────────────────────────────────────
# ASCII: `\d` and `\s` must not pick up Unicode digits/spaces.
PATTERN_FLAGS = re.IGNORECASE | re.ASCII


# ─────────────────────────────────────────────────────────────────────────────
# 1) Combinators
# ─────────────────────────────────────────────────────────────────────────────
def optional(fragment: str) -> str:
    """Does: Wrap a fragment as an optional non-capturing group."""
    return f"(?:{fragment})?"


def one_of(*alternatives: str) -> str:
    """
    Does: Build a non-capturing alternation of fragments.
    Returns: Pattern string. Raises ValueError on an empty alternation.
    """
    if not alternatives:
        raise ValueError("one_of() needs at least one alternative")
    return "(?:" + "|".join(alternatives) + ")"


def spaced(fragments: Iterable[str]) -> str:
    """Does: Join positional fragments with required whitespace (modern syntax)."""
    return WS_REQUIRED.join(fragments)


def comma_separated(fragments: Iterable[str]) -> str:
    """Does: Join positional fragments with commas and optional whitespace (legacy syntax)."""
    return COMMA.join(fragments)


def with_from(pattern: str) -> str:
    """Does: Prefix a pattern with an optional relative-color `from <color> ` clause."""
    return optional(FROM) + pattern


def function_call(names: str | Iterable[str], body: str) -> str:
    """
    Does: Wrap an argument body as `<name>( body )` with optional inner padding.
    Returns: Pattern string; several names become an alternation (e.g. rgb|rgba).
    """
    if isinstance(names, str):
        names = (names,)
    name_alt = one_of(*(re.escape(n) for n in names))
    return rf"{name_alt}\({WS}{body}{WS}\)"


def compile_fullmatch(pattern: str, *, flags: int = PATTERN_FLAGS) -> re.Pattern[str]:
    """Does: Compile a composed pattern; callers anchor it with `.fullmatch()`."""
    return re.compile(pattern, flags)


# ─────────────────────────────────────────────────────────────────────────────
# 2) Separators
# ─────────────────────────────────────────────────────────────────────────────
WS = r"\s*"
WS_REQUIRED = r"\s+"
COMMA = rf"{WS},{WS}"
SLASH = rf"{WS}/{WS}"

# Relative color: `from <anything> `; the source color itself is not validated.
# The source text starts and ends on a non-space so each whitespace run has one owner.
FROM = rf"from{WS_REQUIRED}\S(?:.*\S)?{WS_REQUIRED}"


# ─────────────────────────────────────────────────────────────────────────────
# 3) Numbers
# ─────────────────────────────────────────────────────────────────────────────
DIGITS = r"\d+"
# Same language as `\d*\.?\d+`, without two ways to split a digit run.
NUMBER = r"(?:\d+(?:\.\d+)?|\.\d+)"
SIGNED_NUMBER = rf"[+-]?{NUMBER}"
PERCENTAGE = rf"{NUMBER}%"
NONE = "none"

NUMBER_OR_NONE = one_of(rf"{NUMBER}%?", NONE)
SIGNED_NUMBER_OR_NONE = one_of(rf"{SIGNED_NUMBER}%?", NONE)

# 0-255 literally (no leading zeros), optional fraction; `.5` style fractions too.
BYTE = one_of(r"(?:25[0-5]|2[0-4]\d|1\d{2}|[1-9]?\d)(?:\.\d+)?", r"\.\d+")
BYTE_VALUE = one_of(BYTE, PERCENTAGE, NONE)


# ─────────────────────────────────────────────────────────────────────────────
# 4) Angles & alpha
# ─────────────────────────────────────────────────────────────────────────────
ANGLE_UNITS = ("deg", "grad", "rad", "turn")

# A bare number is an angle in degrees.
ANGLE = NUMBER + optional(one_of(*ANGLE_UNITS))
ANGLE_OR_NONE = one_of(ANGLE, NONE)

ALPHA = rf"{NUMBER}%?"
ALPHA_OR_NONE = one_of(ALPHA, NONE)
ALPHA_SLASH = SLASH + ALPHA_OR_NONE
