"""Utilities for word games."""

from __future__ import annotations


def is_palindrome(s: str) -> bool:
    """Report whether s reads the same forward and backward.

    Letter case is ignored, as are non-letters.
    """
    letters = [ch.lower() for ch in s if ch.isalpha()]
    return letters == letters[::-1]