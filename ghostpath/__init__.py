"""Inline ghost-text completion for directory paths typed into a single-line field."""

__version__ = "0.1.0"
