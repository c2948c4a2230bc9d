"""Chesslet: chess board model, move generation, check detection and FEN."""

__version__ = "0.1.0"
