"""
Tokenization and stop-word filtering for search queries.
"""

from __future__ import annotations

from typing import Any, Iterable, List

# English noise words. Matching is exact and case-sensitive.
# Extend by editing this list; there is no runtime API for it.
STOPWORDS = frozenset({
    "a", "an", "and", "are", "as", "at", "be", "by", "for",
    "from", "has", "he", "in", "is", "it", "its", "of", "on",
    "that", "the", "to", "this",
})


def tokenize(text: Any) -> List[str]:
    """Split text on whitespace runs. Non-string and blank text give no tokens."""
    if not isinstance(text, str):
        return []
    return text.split()


def iter_keywords(tokens: Iterable[str]) -> Iterable[str]:
    """Yield tokens that are not stop words."""
    for tok in tokens:
        if tok in STOPWORDS:
            continue
        yield tok
