"""Shared text preprocessing for the indexer and the query engine.

Documents and query keywords must be normalized identically, otherwise a
query word would never meet its indexed form.
"""

from __future__ import annotations

import string
from pathlib import Path

PUNCTUATION = frozenset(".,?:;!")
LETTERS = frozenset(string.ascii_letters)


def read_tokens(path: str | Path) -> list[str]:
    """Return the whitespace-delimited tokens of a file, in order."""
    text = Path(path).read_text(encoding="utf-8", errors="replace")
    return text.split()


def load_noise_words(path: str | Path) -> frozenset[str]:
    """Load the noise-word list.  Raises FileNotFoundError if it is missing."""
    return frozenset(word.lower() for word in read_tokens(path))


def extract_keyword(token: str, noise_words: frozenset[str] | set[str] = frozenset()) -> str | None:
    """Letters → strip trailing punctuation → lowercase → drop noise words.

    Returns None when the token starts with a non-letter, when anything other
    than trailing punctuation follows the letters, or when the word is noise.
    """
    end = 0
    while end < len(token) and token[end] in LETTERS:
        end += 1

    if end == 0:
        return None
    if any(ch not in PUNCTUATION for ch in token[end:]):
        return None

    word = token[:end].lower()
    if word in noise_words:
        return None
    return word
