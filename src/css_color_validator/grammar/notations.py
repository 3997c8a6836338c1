# src/css_color_validator/grammar/notations.py
"""
notations.
=========

Does: Compose token fragments into one recognizer per CSS color notation family
      (hex, rgb, hsl, hwb, lab, lch, oklab, oklch, color(), color-mix(), light-dark()),
      covering legacy comma syntax, modern space syntax, `/ alpha` and relative `from`.
Returns: Immutable `Recognizer` objects, the ordered `RECOGNIZERS` sweep and
         `match_notation()` which names the first family matching a whole string.
Used by: validate.is_valid_css_color (recognizer sweep after keyword lookups).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

from css_color_validator.grammar.tokens import (
    ALPHA,
    ALPHA_OR_NONE,
    ALPHA_SLASH,
    ANGLE,
    ANGLE_OR_NONE,
    BYTE,
    BYTE_VALUE,
    COMMA,
    FROM,
    NUMBER_OR_NONE,
    PERCENTAGE,
    SIGNED_NUMBER_OR_NONE,
    SLASH,
    WS,
    WS_REQUIRED,
    comma_separated,
    compile_fullmatch,
    function_call,
    one_of,
    optional,
    spaced,
    with_from,
)
from css_color_validator.utils.log import debug

__all__ = [
    "Recognizer",
    "COLOR_SPACES",
    "HEX",
    "RGB",
    "HSL",
    "HWB",
    "LAB",
    "LCH",
    "OKLAB",
    "OKLCH",
    "COLOR",
    "COLOR_MIX",
    "LIGHT_DARK",
    "RECOGNIZERS",
    "match_notation",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

# Predefined spaces accepted by color().
COLOR_SPACES: tuple[str, ...] = (
    "srgb",
    "srgb-linear",
    "display-p3",
    "a98-rgb",
    "prophoto-rgb",
    "rec2020",
    "xyz",
    "xyz-d50",
    "xyz-d65",
)


# ─────────────────────────────────────────────────────────────────────────────
# 1) Recognizer type
# ─────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Recognizer:
    """
    One color notation family.

    Attributes:
        name: Family name reported by `match_notation()`.
        functions: Function names matched (legacy aliases included, e.g. rgba).
        channels: Ordered argument fragments of the modern form (empty when permissive).
        accepts_alpha: Whether a trailing alpha clause is allowed.
        accepts_from: Whether the relative-color `from <color>` prefix is allowed.
        patterns: Compiled alternatives; the family matches when any fully matches.
        arguments_check: Optional linear test on the `args` group of a match, for
            shapes a single regex would only express with heavy backtracking.
    """

    name: str
    functions: tuple[str, ...]
    channels: tuple[str, ...]
    accepts_alpha: bool
    accepts_from: bool
    patterns: tuple[re.Pattern[str], ...] = field(repr=False)
    arguments_check: Callable[[str], bool] | None = field(default=None, repr=False)

    def matches(self, text: str) -> bool:
        """Does: Return True when `text` as a whole matches one of the patterns."""
        for pattern in self.patterns:
            m = pattern.fullmatch(text)
            if m is None:
                continue
            if self.arguments_check is None or self.arguments_check(m.group("args")):
                return True
        return False


# ─────────────────────────────────────────────────────────────────────────────
# 2) Body builders
# ─────────────────────────────────────────────────────────────────────────────
# Alpha slot of the relative form may reference the source alpha.
_RELATIVE_ALPHA_SLASH = SLASH + one_of(ALPHA_OR_NONE, "alpha")


def _modern_body(channels: Sequence[str], *, alpha: str = ALPHA_SLASH) -> str:
    """Does: Space-separated channels followed by an optional `/ alpha` clause."""
    return spaced(channels) + optional(alpha)


def _keyword_slots(channels: Sequence[str], keywords: Iterable[str]) -> list[str]:
    """Does: Let every channel slot also accept the family's channel keywords."""
    kw = tuple(keywords)
    return [one_of(ch, *kw) for ch in channels]


def _modern_patterns(
    functions: Sequence[str],
    channels: Sequence[str],
    keywords: Iterable[str],
    *,
    head: str = "",
) -> list[str]:
    """
    Does: Build the modern form (optional `from` prefix, numeric channels) and the
          relative form whose channels may be keywords such as `r g b`.
    Returns: Two uncompiled patterns. `head` is a fixed leading argument (color() space).
    """
    return [
        function_call(functions, with_from(head + _modern_body(channels))),
        function_call(
            functions,
            FROM
            + head
            + _modern_body(_keyword_slots(channels, keywords), alpha=_RELATIVE_ALPHA_SLASH),
        ),
    ]


def _build(
    name: str,
    functions: Sequence[str],
    patterns: Iterable[str],
    *,
    channels: Sequence[str] = (),
    accepts_alpha: bool = True,
    accepts_from: bool = True,
    arguments_check: Callable[[str], bool] | None = None,
) -> Recognizer:
    compiled = tuple(compile_fullmatch(p) for p in patterns)
    log.debug("Built recognizer %s (%d pattern(s))", name, len(compiled))
    return Recognizer(
        name=name,
        functions=tuple(functions),
        channels=tuple(channels),
        accepts_alpha=accepts_alpha,
        accepts_from=accepts_from,
        patterns=compiled,
        arguments_check=arguments_check,
    )


# ─────────────────────────────────────────────────────────────────────────────
# 3) Families
# ─────────────────────────────────────────────────────────────────────────────

# ── Hex: #RGB, #RGBA, #RRGGBB, #RRGGBBAA ─────────────────────────────────────
_HEX_DIGIT = "[0-9a-f]"
HEX = _build(
    "hex",
    (),
    [
        "#"
        + one_of(
            _HEX_DIGIT + "{3,4}",
            _HEX_DIGIT + "{6}",
            _HEX_DIGIT + "{8}",
        )
    ],
    accepts_alpha=True,
    accepts_from=False,
)

# ── rgb() / rgba() ───────────────────────────────────────────────────────────
_RGB_FUNCS = ("rgb", "rgba")
_RGB_CHANNELS = (BYTE_VALUE, BYTE_VALUE, BYTE_VALUE)
# `none` is modern-syntax only.
_LEGACY_BYTE = one_of(BYTE, PERCENTAGE)
RGB = _build(
    "rgb",
    _RGB_FUNCS,
    [
        function_call(
            _RGB_FUNCS, comma_separated([_LEGACY_BYTE] * 3) + optional(COMMA + ALPHA)
        ),
        *_modern_patterns(_RGB_FUNCS, _RGB_CHANNELS, ("r", "g", "b")),
    ],
    channels=_RGB_CHANNELS,
)

# ── hsl() / hsla() ───────────────────────────────────────────────────────────
# Modern form tolerates one or two leading hue-like tokens.
_HSL_FUNCS = ("hsl", "hsla")
_HSL_CHANNELS = (ANGLE_OR_NONE, NUMBER_OR_NONE, NUMBER_OR_NONE)
_HSL_KEYWORDS = ("h", "s", "l")


def _hsl_modern(hue: str, rest: Sequence[str], alpha: str) -> str:
    return rf"(?:{hue}{WS_REQUIRED}){{1,2}}" + _modern_body(rest, alpha=alpha)


_hsl_rel_slot = _keyword_slots(_HSL_CHANNELS, _HSL_KEYWORDS)
HSL = _build(
    "hsl",
    _HSL_FUNCS,
    [
        function_call(
            _HSL_FUNCS,
            comma_separated([ANGLE, PERCENTAGE, PERCENTAGE]) + optional(COMMA + ALPHA),
        ),
        function_call(
            _HSL_FUNCS,
            with_from(_hsl_modern(_HSL_CHANNELS[0], _HSL_CHANNELS[1:], ALPHA_SLASH)),
        ),
        function_call(
            _HSL_FUNCS,
            FROM + _hsl_modern(_hsl_rel_slot[0], _hsl_rel_slot[1:], _RELATIVE_ALPHA_SLASH),
        ),
    ],
    channels=_HSL_CHANNELS,
)

# ── hwb() (space syntax only) ────────────────────────────────────────────────
_HWB_CHANNELS = (ANGLE_OR_NONE, NUMBER_OR_NONE, NUMBER_OR_NONE)
HWB = _build(
    "hwb",
    ("hwb",),
    _modern_patterns(("hwb",), _HWB_CHANNELS, ("h", "w", "b")),
    channels=_HWB_CHANNELS,
)

# ── lab() / oklab(): unsigned lightness, signed a/b axes ─────────────────────
_LAB_CHANNELS = (NUMBER_OR_NONE, SIGNED_NUMBER_OR_NONE, SIGNED_NUMBER_OR_NONE)
_LAB_KEYWORDS = ("l", "a", "b")
LAB = _build(
    "lab",
    ("lab",),
    _modern_patterns(("lab",), _LAB_CHANNELS, _LAB_KEYWORDS),
    channels=_LAB_CHANNELS,
)
OKLAB = _build(
    "oklab",
    ("oklab",),
    _modern_patterns(("oklab",), _LAB_CHANNELS, _LAB_KEYWORDS),
    channels=_LAB_CHANNELS,
)

# ── lch() / oklch(): hue is angle-typed ──────────────────────────────────────
_LCH_CHANNELS = (NUMBER_OR_NONE, NUMBER_OR_NONE, ANGLE_OR_NONE)
_LCH_KEYWORDS = ("l", "c", "h")
LCH = _build(
    "lch",
    ("lch",),
    _modern_patterns(("lch",), _LCH_CHANNELS, _LCH_KEYWORDS),
    channels=_LCH_CHANNELS,
)
OKLCH = _build(
    "oklch",
    ("oklch",),
    _modern_patterns(("oklch",), _LCH_CHANNELS, _LCH_KEYWORDS),
    channels=_LCH_CHANNELS,
)

# ── color(<space> c1 c2 c3 [/ alpha]) ────────────────────────────────────────
_SPACE_NAME = one_of(*(re.escape(s) for s in sorted(COLOR_SPACES, key=len, reverse=True)))
_COLOR_CHANNELS = (SIGNED_NUMBER_OR_NONE,) * 3
COLOR = _build(
    "color",
    ("color",),
    _modern_patterns(
        ("color",),
        _COLOR_CHANNELS,
        ("r", "g", "b", "x", "y", "z"),
        head=_SPACE_NAME + WS_REQUIRED,
    ),
    channels=(_SPACE_NAME, *_COLOR_CHANNELS),
)

# ── color-mix(in <space> ...): only the `in <ident>` prefix is checked ───────
COLOR_MIX = _build(
    "color-mix",
    ("color-mix",),
    [rf"color-mix\({WS}in{WS_REQUIRED}[\w-]+[\s\S]*"],
    accepts_alpha=False,
    accepts_from=False,
)

# ── light-dark(<a>, <b>): only the two-argument shape is checked ─────────────
_ASCII_SPACE = " \t\n\r\f\v"


def _has_two_arguments(args: str) -> bool:
    """Does: True when some comma has non-blank text on both sides."""
    inner = args.strip(_ASCII_SPACE)
    return "," in inner[1:-1]


LIGHT_DARK = _build(
    "light-dark",
    ("light-dark",),
    [r"light-dark\((?P<args>.*)\)"],
    accepts_alpha=False,
    accepts_from=False,
    arguments_check=_has_two_arguments,
)


# ─────────────────────────────────────────────────────────────────────────────
# 4) Sweep
# ─────────────────────────────────────────────────────────────────────────────
RECOGNIZERS: tuple[Recognizer, ...] = (
    HEX,
    RGB,
    HSL,
    HWB,
    LAB,
    LCH,
    OKLAB,
    OKLCH,
    COLOR,
    COLOR_MIX,
    LIGHT_DARK,
)


def match_notation(text: str) -> str | None:
    """
    Does: Try every recognizer against the trimmed text (original case).
    Returns: Name of the first matching family, or None.
    """
    candidate = text.strip()
    for recognizer in RECOGNIZERS:
        if recognizer.matches(candidate):
            log.debug("Notation %s matched %r", recognizer.name, candidate)
            debug("%s matched %r", recognizer.name, candidate, topic="grammar")
            return recognizer.name
    log.debug("No notation matched %r", candidate)
    return None
