"""Bidirectional UTF-8 codec with an incremental decoder."""

__version__ = "0.1.0"
