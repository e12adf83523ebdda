"""Sources of extracted document text."""

from .base import ContentSource
from .filesystem import FilesystemSource

__all__ = ["ContentSource", "FilesystemSource"]
