"""
schema.
======

Does: Wrap the CSS color predicate as a pydantic v2 type so models and standalone
      values can be validated with a single "Invalid CSS color value" failure.
Returns: `CssColor` (Annotated[str, ...]) and `css_color_adapter` (TypeAdapter).
Used by: Pydantic models carrying style/theme fields.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, TypeAdapter

from css_color_validator.validator import INVALID_CSS_COLOR_MESSAGE, is_valid_css_color

__all__ = ["CssColor", "css_color_adapter", "check_css_color"]


def check_css_color(value: str) -> str:
    """Return the value untouched, or raise ValueError for pydantic to report."""
    if not is_valid_css_color(value):
        raise ValueError(INVALID_CSS_COLOR_MESSAGE)
    return value


CssColor = Annotated[str, AfterValidator(check_css_color)]

css_color_adapter: TypeAdapter[str] = TypeAdapter(CssColor)
