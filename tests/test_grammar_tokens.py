# tests/test_grammar_tokens.py
from __future__ import annotations

"""
token fragment tests
====================

Does: Check every lexical fragment in isolation (anchored with fullmatch) and the
      combinators that compose them into function-call patterns.
"""

import pytest

from css_color_validator.grammar import tokens as t


def _full(fragment: str, text: str) -> bool:
    return t.compile_fullmatch(fragment).fullmatch(text) is not None


# ──────────────────────────────────────────────────────────────────────────────
# Numbers
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("text", ["0", "10", "1.5", ".5", "0.25"])
def test_number_accepts(text):
    assert _full(t.NUMBER, text)


@pytest.mark.parametrize("text", ["", "1.", "-1", "+1", "1e3", "1..2", "١"])
def test_number_rejects(text):
    assert not _full(t.NUMBER, text)


@pytest.mark.parametrize("text", ["-1", "+2.5", "-.5", "3"])
def test_signed_number_accepts(text):
    assert _full(t.SIGNED_NUMBER, text)


@pytest.mark.parametrize("text", ["--1", "+-1", "-", "1-"])
def test_signed_number_rejects(text):
    assert not _full(t.SIGNED_NUMBER, text)


def test_percentage_requires_percent_sign():
    assert _full(t.PERCENTAGE, "50%")
    assert _full(t.PERCENTAGE, "0.5%")
    assert not _full(t.PERCENTAGE, "50")
    assert not _full(t.PERCENTAGE, "%")
    assert not _full(t.PERCENTAGE, "50 %")


@pytest.mark.parametrize("text", ["none", "NONE", "1", "50%", ".5"])
def test_number_or_none_accepts(text):
    assert _full(t.NUMBER_OR_NONE, text)


def test_number_or_none_is_unsigned_and_signed_variant_is_not():
    assert not _full(t.NUMBER_OR_NONE, "-1")
    assert _full(t.SIGNED_NUMBER_OR_NONE, "-1")
    assert _full(t.SIGNED_NUMBER_OR_NONE, "-12.5%")
    assert _full(t.SIGNED_NUMBER_OR_NONE, "none")
    assert not _full(t.SIGNED_NUMBER_OR_NONE, "-none")


# ──────────────────────────────────────────────────────────────────────────────
# Byte range
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "text",
    ["0", "9", "10", "99", "100", "199", "200", "249", "250", "255", "127.5", "255.0", ".5"],
)
def test_byte_accepts_0_to_255(text):
    assert _full(t.BYTE, text)


@pytest.mark.parametrize("text", ["256", "260", "300", "999", "1000", "007", "00", "-1", ""])
def test_byte_rejects_out_of_range(text):
    assert not _full(t.BYTE, text)


@pytest.mark.parametrize("text", ["255", "0%", "100%", "150%", "none", "None"])
def test_byte_value_adds_percentage_and_none(text):
    assert _full(t.BYTE_VALUE, text)


def test_byte_value_still_checks_plain_numbers():
    assert not _full(t.BYTE_VALUE, "256")


# ──────────────────────────────────────────────────────────────────────────────
# Angles & alpha
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "text", ["180", "180deg", "3.14rad", "100grad", "0.5turn", "90DEG", ".25Turn"]
)
def test_angle_accepts_bare_and_suffixed(text):
    assert _full(t.ANGLE, text)


@pytest.mark.parametrize("text", ["180px", "deg", "180 deg", "-90deg", "none"])
def test_angle_rejects(text):
    assert not _full(t.ANGLE, text)


def test_angle_or_none():
    assert _full(t.ANGLE_OR_NONE, "none")
    assert _full(t.ANGLE_OR_NONE, "45deg")


def test_alpha_has_no_none_alternative():
    assert _full(t.ALPHA, "0.5")
    assert _full(t.ALPHA, "50%")
    assert not _full(t.ALPHA, "none")
    assert _full(t.ALPHA_OR_NONE, "none")


@pytest.mark.parametrize("text", [" / 0.5", "/none", "/ 50%", "  /  1"])
def test_alpha_slash_accepts(text):
    assert _full(t.ALPHA_SLASH, text)


@pytest.mark.parametrize("text", ["0.5", "/", "/ -1", ", 0.5"])
def test_alpha_slash_rejects(text):
    assert not _full(t.ALPHA_SLASH, text)


# ──────────────────────────────────────────────────────────────────────────────
# Whitespace & relative prefix
# ──────────────────────────────────────────────────────────────────────────────
def test_whitespace_fragments():
    assert _full(t.WS, "")
    assert _full(t.WS, " \t ")
    assert not _full(t.WS_REQUIRED, "")
    assert _full(t.WS_REQUIRED, "  ")


def test_with_from_prefix_is_optional():
    pattern = t.with_from("x")
    assert _full(pattern, "x")
    assert _full(pattern, "from red x")
    assert _full(pattern, "from rgb(0 0 0) x")
    assert not _full(pattern, "fromred x")
    assert not _full(pattern, "from x")


def test_from_source_text_is_trimmed_by_the_separators():
    assert _full(t.FROM, "from  red   ")
    assert _full(t.FROM, "from rgb(0 0 0) ")
    assert not _full(t.FROM, "from    ")
    assert not _full(t.FROM, "from red")


# ──────────────────────────────────────────────────────────────────────────────
# Combinators
# ──────────────────────────────────────────────────────────────────────────────
def test_one_of_requires_alternatives():
    with pytest.raises(ValueError):
        t.one_of()


def test_spaced_requires_separation():
    pattern = t.spaced([t.NUMBER, t.NUMBER])
    assert _full(pattern, "1 2")
    assert not _full(pattern, "12")
    assert not _full(pattern, "1,2")


def test_comma_separated_allows_optional_padding():
    pattern = t.comma_separated([t.NUMBER, t.NUMBER])
    assert _full(pattern, "1,2")
    assert _full(pattern, "1 , 2")
    assert not _full(pattern, "1 2")


def test_function_call_matches_any_alias_case_insensitively():
    pattern = t.function_call(("rgb", "rgba"), t.NUMBER)
    assert _full(pattern, "rgb(1)")
    assert _full(pattern, "RGBA( 1 )")
    assert not _full(pattern, "rgbx(1)")
    assert not _full(pattern, "rgb 1")


def test_fragments_are_non_capturing():
    for fragment in (t.NUMBER_OR_NONE, t.BYTE_VALUE, t.ANGLE_OR_NONE, t.ALPHA_SLASH, t.FROM):
        assert t.compile_fullmatch(fragment).groups == 0
