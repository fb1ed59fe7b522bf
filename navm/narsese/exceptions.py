# navm/narsese/exceptions.py
"""
Exceptions raised by the Narsese term adapter.

Hierarchy:
    NarseseError (ValueError)
    ├── NarseseParseError - text is not valid lexical ASCII Narsese
    └── NarseseConversionError - value has the wrong shape (term/sentence/task)
"""

from __future__ import annotations

from typing import Optional


class NarseseError(ValueError):
    """Base error for Narsese handling."""

    pass


class NarseseParseError(NarseseError):
    """Raised when Narsese text cannot be parsed."""

    def __init__(self, message: str, text: str = "", position: Optional[int] = None):
        self.text = text
        self.position = position
        if position is not None:
            message = f"{message} (at position {position} in {text!r})"
        elif text:
            message = f"{message} (in {text!r})"
        super().__init__(message)


class NarseseConversionError(NarseseError):
    """Raised when a value cannot be converted to the requested shape."""

    pass


__all__ = ["NarseseError", "NarseseParseError", "NarseseConversionError"]
