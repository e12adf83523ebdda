"""TF-IDF ranking over a `CorpusIndex`.

score(d) = sum over query terms t of tf(t, d) * idf(t), where

    tf(t, d) = count(t in d) / total_terms(d)   (0 for empty documents)
    idf(t)   = log10(N / df(t))

A term no document contains has df = 0, so its idf is +inf (or NaN for an
empty corpus) and every document that lacks it scores 0 * inf = NaN. NaN
scores are dropped rather than ranked as zero.
"""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

from docseek.search.document import Document
from docseek.search.index import CorpusIndex
from docseek.search.terms import DEFAULT_NORMALIZER

Ranking = List[Tuple[str, float]]


def term_frequency(term: str, document: Document) -> float:
    if document.total_terms == 0:
        return 0.0
    return document.term_count(term) / document.total_terms


def inverse_document_frequency(index: CorpusIndex, term: str) -> float:
    size = index.size()
    df = index.frequency(term)
    if df == 0:
        # IEEE-754 x/0; Python would raise ZeroDivisionError
        return math.inf if size > 0 else math.nan
    return math.log10(size / df)


def _sort_key(rank: Tuple[str, float]) -> Tuple[float, str]:
    path, score = rank
    return (-score, path)


def search(index: CorpusIndex, query: str, *, limit: Optional[int] = None) -> Ranking:
    """Rank every document in `index` against `query`, best first.

    Ties are ordered by path. `limit` truncates the ranking.
    """
    normalizer = index.normalizer or DEFAULT_NORMALIZER
    terms = normalizer.tokenize(query)
    idfs = [(term, inverse_document_frequency(index, term)) for term in terms]

    ranks: Ranking = []
    for path, document in index.documents.items():
        score = sum((term_frequency(term, document) * idf for term, idf in idfs), 0.0)
        if not math.isnan(score):
            ranks.append((path, score))

    ranks.sort(key=_sort_key)
    if limit is not None:
        return ranks[: max(0, limit)]
    return ranks
