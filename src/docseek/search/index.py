"""Corpus-wide index: documents keyed by path plus the document-frequency table.

All mutation goes through `add_document`, which retracts the previous
document for the path, applies the new one and stores it inside one
exclusive section. Callers build `Document` objects beforehand, outside of
that section (`add_or_replace` does both for single-threaded use).
"""

from __future__ import annotations

import logging
import threading
from collections import Counter
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional

from docseek.exceptions import IndexInvariantError
from docseek.search.document import Document
from docseek.search.terms import Normalizer

logger = logging.getLogger(__name__)


class CorpusIndex:
    """Owns every indexed `Document` and the document frequency of each term.

    Invariants, holding whenever the internal lock is released:

    - ``document_frequency[t]`` equals the number of stored documents whose
      term table contains ``t``; terms reaching zero are dropped.
    - a path is stored at most once.
    """

    def __init__(
        self,
        *,
        expected_documents: int = 0,
        normalizer: Optional[Normalizer] = None,
    ) -> None:
        # Sizing hint only; dicts grow on demand
        self.expected_documents = max(0, int(expected_documents))
        self.normalizer = normalizer
        self._documents: Dict[str, Document] = {}
        self._document_frequency: Dict[str, int] = {}
        self._lock = threading.Lock()

    # ----- Read access -----

    @property
    def documents(self) -> Mapping[str, Document]:
        return MappingProxyType(self._documents)

    @property
    def document_frequency(self) -> Mapping[str, int]:
        return MappingProxyType(self._document_frequency)

    def size(self) -> int:
        """Number of indexed documents."""
        return len(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, path: object) -> bool:
        return path in self._documents

    def get(self, path: str) -> Optional[Document]:
        return self._documents.get(path)

    def frequency(self, term: str) -> int:
        """Number of documents containing `term`."""
        return self._document_frequency.get(term, 0)

    # ----- Mutation -----

    def add_or_replace(self, path: str, content: str) -> None:
        """Index `content` under `path`, replacing any earlier document."""
        document = Document.build(content, normalizer=self.normalizer)
        self.add_document(path, document)

    def add_document(
        self,
        path: str,
        document: Document,
        *,
        on_commit: Optional[Callable[[], None]] = None,
    ) -> None:
        """Store a prebuilt document under `path`.

        `on_commit` runs inside the exclusive section right after the
        document is stored, so it observes a consistent index.
        """
        with self._lock:
            previous = self._documents.get(path)
            if previous is not None:
                self._retract(path, previous)
            for term in document.term_frequency:
                self._document_frequency[term] = self._document_frequency.get(term, 0) + 1
            self._documents[path] = document
            if on_commit is not None:
                on_commit()

    def _retract(self, path: str, document: Document) -> None:
        for term in document.term_frequency:
            count = self._document_frequency.get(term, 0)
            if count <= 0:
                raise IndexInvariantError(
                    f"document frequency of {term!r} would drop below zero while replacing {path!r}"
                )
            if count == 1:
                del self._document_frequency[term]
            else:
                self._document_frequency[term] = count - 1
        logger.debug("Retracted %d terms of %s", len(document.term_frequency), path)

    # ----- Diagnostics -----

    def check_invariants(self) -> None:
        """Recompute document frequencies and raise on any mismatch."""
        with self._lock:
            expected: Counter[str] = Counter()
            for document in self._documents.values():
                expected.update(document.term_frequency.keys())
            if dict(expected) != self._document_frequency:
                stale = {
                    term
                    for term in set(expected) | set(self._document_frequency)
                    if expected.get(term, 0) != self._document_frequency.get(term, 0)
                }
                raise IndexInvariantError(f"document frequency out of sync for terms: {sorted(stale)[:10]}")
