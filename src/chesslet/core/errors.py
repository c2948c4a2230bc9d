"""Exceptions raised by the core layer."""

from __future__ import annotations


class FormatError(ValueError):
    """Raised when FEN or algebraic text cannot be parsed."""
