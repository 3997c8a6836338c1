"""
log.py.

Does: Opt-in tracer for validation decisions, gated by CSS_COLOR_DEBUG_TOPICS
      (comma-sep or 'all'). Records go through the `css_color_validator.trace`
      logger, which writes `[ts] [topic][LEVEL] msg` lines to stderr while enabled.
Returns: debug()/is_enabled()/reload_topics(). Used by grammar, validator and tests.
"""

from __future__ import annotations

import logging
import os
import sys

__all__ = ["debug", "is_enabled", "reload_topics", "ENV_VAR", "TRACE_LOGGER_NAME"]

ENV_VAR = "CSS_COLOR_DEBUG_TOPICS"
TRACE_LOGGER_NAME = "css_color_validator.trace"

_trace = logging.getLogger(TRACE_LOGGER_NAME)


class _StderrHandler(logging.StreamHandler):
    """Stream handler bound to whatever sys.stderr is at emit time."""

    def __init__(self) -> None:
        logging.Handler.__init__(self)

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr


_HANDLER = _StderrHandler()
_HANDLER.setFormatter(
    logging.Formatter(
        "[%(asctime)s] [%(topic)s][%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
)


def _load_topics() -> frozenset[str]:
    raw = os.getenv(ENV_VAR, "")
    return frozenset(t.strip().lower() for t in raw.split(",") if t.strip())


_DEBUG_TOPICS: frozenset[str] = frozenset()


def reload_topics() -> None:
    """Does: Re-read CSS_COLOR_DEBUG_TOPICS and attach/detach the stderr handler."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()
    if _DEBUG_TOPICS:
        if _HANDLER not in _trace.handlers:
            _trace.addHandler(_HANDLER)
        _trace.setLevel(logging.DEBUG)
        _trace.propagate = False
    else:
        _trace.removeHandler(_HANDLER)
        _trace.setLevel(logging.NOTSET)
        _trace.propagate = True


def is_enabled(topic: str) -> bool:
    """Does: Tell whether `topic` is traced under the current environment."""
    if not _DEBUG_TOPICS:
        return False
    return "all" in _DEBUG_TOPICS or topic.lower().strip() in _DEBUG_TOPICS


def debug(msg: str, *args: object, topic: str = "validate", level: str = "DEBUG") -> None:
    """Does: Emit `msg % args` on the trace logger when `topic` is enabled.
    Arguments are only formatted for enabled topics.
    """
    if not is_enabled(topic):
        return
    levelno = logging.getLevelName(level.upper())
    if not isinstance(levelno, int):
        levelno = logging.DEBUG
    _trace.log(levelno, msg, *args, extra={"topic": topic.lower().strip()})


reload_topics()
