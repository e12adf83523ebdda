"""Term normalization: the single pipeline shared by indexing and querying.

A raw token becomes a term by trimming non-alphanumeric characters from both
ends, lowercasing ASCII letters and stemming the result. Tokens that are
empty after trimming or longer than `MAX_TERM_LENGTH` are rejected.
"""

from __future__ import annotations

import re
import string
from functools import lru_cache
from typing import Callable, List, Optional

from whoosh.lang.snowball.english import EnglishStemmer

MAX_TERM_LENGTH = 64

# Newlines and tabs are deliberately not delimiters
DELIMITERS = (" ", ",", ".", ";")
_SPLIT_PATTERN = re.compile("[" + re.escape("".join(DELIMITERS)) + "]")

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

Stemmer = Callable[[str], str]

_ENGLISH = EnglishStemmer()


@lru_cache(maxsize=65536)
def stem(token: str) -> str:
    """Snowball (Porter2) English stem of a lowercase token.

    Not idempotent for every word: stemming a stem can shorten it again.
    """
    return _ENGLISH.stem(token)


def _trim(token: str) -> str:
    start, end = 0, len(token)
    while start < end and not token[start].isalnum():
        start += 1
    while end > start and not token[end - 1].isalnum():
        end -= 1
    return token[start:end]


def split_tokens(text: str) -> List[str]:
    """Split `text` on the delimiter set; empty tokens are kept."""
    return _SPLIT_PATTERN.split(text)


class Normalizer:
    """Turns raw tokens into terms using an injectable stemmer."""

    def __init__(self, stemmer: Optional[Stemmer] = None) -> None:
        self._stem = stemmer or stem

    def normalize(self, token: str) -> Optional[str]:
        """Return the canonical term for `token`, or None if it is rejected."""
        trimmed = _trim(token)
        if not trimmed or len(trimmed) > MAX_TERM_LENGTH:
            return None
        return self._stem(trimmed.translate(_ASCII_LOWER))

    def tokenize(self, text: str) -> List[str]:
        """Return the accepted terms of `text` in order."""
        terms: List[str] = []
        for token in split_tokens(text):
            term = self.normalize(token)
            if term is not None:
                terms.append(term)
        return terms


DEFAULT_NORMALIZER = Normalizer()


def normalize(token: str) -> Optional[str]:
    return DEFAULT_NORMALIZER.normalize(token)


def tokenize(text: str) -> List[str]:
    return DEFAULT_NORMALIZER.tokenize(text)
