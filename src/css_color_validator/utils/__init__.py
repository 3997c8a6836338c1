# css_color_validator/utils/__init__.py
"""

Does: Provide the opt-in, topic-gated trace logger shared by grammar and validate.
Returns: Public API via debug/is_enabled/reload_topics.
Used by: grammar.notations, validate, tests.
"""

from __future__ import annotations

from .log import (
    ENV_VAR,
    TRACE_LOGGER_NAME,
    debug,
    is_enabled,
    reload_topics,
)

__all__ = [
    "ENV_VAR",
    "TRACE_LOGGER_NAME",
    "debug",
    "is_enabled",
    "reload_topics",
]
