# navm/narsese/__init__.py
"""
Narsese term adapter.

Default implementation of the structured-term capability the protocol core
depends on. Terms are kept lexical: the adapter parses and formats ASCII
CommonNarsese but never interprets it.

Public API:
    - TermInterop: Protocol the codecs call into
    - DEFAULT_INTEROP: Lexical ASCII implementation used when none is given
    - parse_narsese / format_narsese: Direct text <-> value functions
    - Atom, Compound, TermSet, Statement, Sentence, Task: Value types
"""

from .exceptions import NarseseConversionError, NarseseError, NarseseParseError
from .formatter import format_narsese, format_sentence, format_task, format_term
from .interop import DEFAULT_INTEROP, LexicalAsciiInterop, TermInterop
from .lexical import Atom, Compound, Narsese, Sentence, Statement, Task, Term, TermSet, is_term
from .parser import parse_narsese, parse_term

__all__ = [
    # Interop
    "TermInterop",
    "LexicalAsciiInterop",
    "DEFAULT_INTEROP",
    # Functions
    "parse_narsese",
    "parse_term",
    "format_narsese",
    "format_term",
    "format_sentence",
    "format_task",
    # Types
    "Atom",
    "Compound",
    "TermSet",
    "Statement",
    "Term",
    "Sentence",
    "Task",
    "Narsese",
    "is_term",
    # Exceptions
    "NarseseError",
    "NarseseParseError",
    "NarseseConversionError",
]
