"""Incremental full-text indexing, autocompletion and ranked search over text and CORD-19 JSON documents."""

__version__ = "0.1.0"
__all__ = ["__version__"]