"""Per-file term statistics."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from docseek.search.terms import DEFAULT_NORMALIZER, Normalizer


@dataclass(frozen=True, slots=True)
class Document:
    """Term frequencies of one indexed file.

    Attributes
    ----------
    term_frequency: Mapping[str, int]
        Occurrences of each term in the document (read-only view).
    total_terms: int
        Number of accepted tokens; the denominator of term frequency. This is
        not the number of distinct terms.
    """

    term_frequency: Mapping[str, int]
    total_terms: int

    @classmethod
    def build(cls, content: str, *, normalizer: Optional[Normalizer] = None) -> "Document":
        """Tokenize `content` and count the surviving terms."""
        terms = (normalizer or DEFAULT_NORMALIZER).tokenize(content)
        return cls(term_frequency=MappingProxyType(dict(Counter(terms))), total_terms=len(terms))

    def term_count(self, term: str) -> int:
        return self.term_frequency.get(term, 0)

    def __contains__(self, term: object) -> bool:
        return term in self.term_frequency
