"""Custom exception hierarchy for Docseek.

These exceptions allow callers to discriminate error categories
and handle them appropriately while preserving the original context.
"""

from __future__ import annotations


class DocseekError(Exception):
    """Base class for all Docseek exceptions."""


class ConfigError(DocseekError):
    """Raised when configuration loading or validation fails."""


class ParsingError(DocseekError):
    """Raised when a document fails to parse."""


class SearchError(DocseekError):
    """Raised for search indexing/query issues."""


class IndexInvariantError(SearchError):
    """Raised when the corpus frequency tables disagree with the stored documents.

    This signals a programming error in index maintenance, not bad input.
    """
