"""Base source abstraction feeding the index builder.

A `ContentSource` yields `(path, text)` pairs regardless of where the
documents come from. Files that cannot be read are left out rather than
reported.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple


class ContentSource(ABC):
    """Abstract content source."""

    @abstractmethod
    def fetch(self, limit: Optional[int] = None) -> List[Tuple[str, str]]:
        """Return extracted `(path, text)` pairs, optionally limited."""
        raise NotImplementedError
