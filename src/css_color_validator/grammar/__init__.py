"""
grammar package.
===============

Does: Expose the token fragments and the per-notation recognizers of the CSS <color> grammar.
"""

from .notations import (
    COLOR_SPACES,
    RECOGNIZERS,
    Recognizer,
    match_notation,
)
from .tokens import compile_fullmatch

__all__ = [
    "Recognizer",
    "RECOGNIZERS",
    "COLOR_SPACES",
    "match_notation",
    "compile_fullmatch",
]

__docformat__ = "google"
