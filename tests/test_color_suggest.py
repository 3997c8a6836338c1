# tests/test_color_suggest.py
from __future__ import annotations

"""
suggest tests
=============

Does: Check rapidfuzz-backed keyword suggestions for typos, exact hits, limits,
      and degenerate inputs.
"""

import pytest

from css_color_validator.color import suggest as sg


@pytest.mark.parametrize(
    "typo,expected",
    [
        ("gren", "green"),
        ("rebeccapurpel", "rebeccapurple"),
        ("ButtonFace", "buttonface"),
        ("Canvas  Text", "canvastext"),
        ("curentcolor", "currentcolor"),
    ],
)
def test_best_suggestion_first(typo, expected):
    assert sg.suggest_color_names(typo)[0] == expected


def test_limit_is_respected():
    assert len(sg.suggest_color_names("gray", limit=2)) <= 2
    assert len(sg.suggest_color_names("gray", limit=1)) == 1


def test_cutoff_filters_weak_matches():
    assert sg.suggest_color_names("zzzzzz") == []
    assert sg.suggest_color_names("gren", score_cutoff=100) == []


@pytest.mark.parametrize("value", [None, 3, "", "   "])
def test_degenerate_inputs_return_empty(value):
    assert sg.suggest_color_names(value) == []


def test_non_positive_limit_returns_empty():
    assert sg.suggest_color_names("red", limit=0) == []
