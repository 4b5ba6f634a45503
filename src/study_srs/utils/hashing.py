"""Hashing utilities for study_srs.

This module provides deterministic hash functions for generating
stable identifiers for review items.
"""

import hashlib
from typing import Any

__all__ = [
    "generate_item_id",
    "hash_text",
    "stable_hash",
]


def hash_text(text: str) -> str:
    """Generate SHA256 hash of text.

    Args:
        text: Input text to hash

    Returns:
        Hexadecimal SHA256 hash string
    """
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def generate_item_id(user_id: str, topic_id: str) -> str:
    """Generate deterministic review item ID.

    A topic can be attached to a user's review queue only once, so the
    item ID is a SHA256 hash of: user_id + topic_id.

    Args:
        user_id: Owner of the item
        topic_id: Studied topic

    Returns:
        Hexadecimal SHA256 hash string
    """
    return stable_hash("review_item", user_id, topic_id)


def stable_hash(*args: Any) -> str:
    """Generate a stable hash from multiple arguments.

    Converts all arguments to strings and joins them with pipe separator.

    Args:
        *args: Values to include in the hash

    Returns:
        Hexadecimal SHA256 hash string
    """
    combined = "|".join(str(arg) for arg in args)
    return hash_text(combined)
