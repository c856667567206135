"""
Mood-to-Query Mapping
=====================

Turns a mood label into catalog search phrases using the static table in
config. Unknown labels fall back to the default mood.
"""

from typing import Tuple

from .config import MOOD_QUERIES, DEFAULT_MOOD


def normalize_mood(label: str) -> str:
    """Trim and lowercase a raw mood label."""
    return (label or "").strip().lower()


def is_supported_mood(label: str) -> bool:
    """Whether the label (after normalization) is in the vocabulary."""
    return normalize_mood(label) in MOOD_QUERIES


def resolve_queries(label: str) -> Tuple[str, ...]:
    """
    All search phrases configured for a mood.

    Args:
        label: Mood label in any case

    Returns:
        Ordered phrases for the mood, or for DEFAULT_MOOD if unknown
    """
    return MOOD_QUERIES.get(normalize_mood(label), MOOD_QUERIES[DEFAULT_MOOD])


def resolve_query(label: str) -> str:
    """
    The search phrase used for a mood.

    Only the first configured phrase is searched; the rest are kept for
    callers of resolve_queries.
    """
    return resolve_queries(label)[0]
