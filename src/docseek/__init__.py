"""Docseek: a local TF-IDF full-text search engine."""

__version__ = "0.1.0"
