"""Indexing and ranking engine."""

from .builder import IndexBuilder, build_index, choose_mode, milestones
from .document import Document
from .index import CorpusIndex
from .progress import NullProgress, ProgressSink, ProgressView, QueueProgress
from .ranker import inverse_document_frequency, search, term_frequency
from .terms import Normalizer, normalize, stem, tokenize

__all__ = [
    "CorpusIndex",
    "Document",
    "IndexBuilder",
    "Normalizer",
    "NullProgress",
    "ProgressSink",
    "ProgressView",
    "QueueProgress",
    "build_index",
    "choose_mode",
    "inverse_document_frequency",
    "milestones",
    "normalize",
    "search",
    "stem",
    "term_frequency",
    "tokenize",
]
