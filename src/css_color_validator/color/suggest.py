# src/css_color_validator/color/suggest.py
from __future__ import annotations

"""
suggest.py

Does: Rank color keywords (named, system, CSS-wide) by fuzzy similarity to a
      user-typed string, for autocomplete and "did you mean" hints.
Returns: Ordered list of candidate keywords (best first).
Used by: Callers reporting an invalid color; never used by validation itself.
"""

import logging

from rapidfuzz import fuzz, process

from .vocab import get_keyword_names, get_named_color_names, get_system_color_names

__all__ = ["suggest_color_names", "DEFAULT_SCORE_CUTOFF"]

__docformat__ = "google"

log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
DEFAULT_SCORE_CUTOFF = 75.0
DEFAULT_LIMIT = 3


def _candidates() -> list[str]:
    """Does: Sorted keyword universe (stable order breaks score ties)."""
    return sorted(get_named_color_names() | get_system_color_names() | get_keyword_names())


def suggest_color_names(
    text: object,
    limit: int = DEFAULT_LIMIT,
    score_cutoff: float = DEFAULT_SCORE_CUTOFF,
) -> list[str]:
    """
    Does: Fuzzy-match `text` against every color keyword with rapidfuzz.
    Returns: At most `limit` keywords scoring >= `score_cutoff`, best first;
             [] for non-string, empty, or non-positive `limit`.
    """
    if not isinstance(text, str) or limit <= 0:
        return []
    query = " ".join(text.lower().split())
    if not query:
        return []

    hits = process.extract(
        query,
        _candidates(),
        scorer=fuzz.ratio,
        limit=limit,
        score_cutoff=score_cutoff,
    )
    names = [name for name, _score, _idx in hits]
    log.debug("Suggestions for %r: %s", query, names)
    return names
