"""Word and character operations on strings."""

from __future__ import annotations


def reverse_words(s: str) -> str:
    """Return the space-separated words of ``s`` in reverse order.

    Runs of spaces collapse to one and leading or trailing spaces are dropped;
    only the space character separates words. Raises ValueError when ``s``
    holds no words.
    """
    words = [word for word in s.split(" ") if word]
    if not words:
        raise ValueError("reverse_words() needs at least one word")
    return " ".join(reversed(words))


def is_palindrome(s: str) -> bool:
    """Tell whether ``s`` reads the same both ways.

    Only ASCII letters and digits are compared, and case is ignored.
    """
    kept = [ch.lower() for ch in s if ch.isascii() and ch.isalnum()]
    return kept == kept[::-1]