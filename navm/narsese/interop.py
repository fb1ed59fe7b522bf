# navm/narsese/interop.py
"""
TermInterop - the capability the protocol core uses for structured terms.

The command and output codecs never inspect term values themselves. They
only call the methods below, so a different term library can be plugged in
by passing another object that satisfies the protocol.

Usage:
    from navm.narsese import DEFAULT_INTEROP

    task = DEFAULT_INTEROP.try_into_task(DEFAULT_INTEROP.parse("<A --> B>."))
    DEFAULT_INTEROP.format(task)  # '$$ <A --> B>.'
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .exceptions import NarseseConversionError
from .formatter import format_narsese
from .lexical import Narsese, Sentence, Task, Term, is_term
from .parser import parse_narsese, parse_term


@runtime_checkable
class TermInterop(Protocol):
    """
    Opaque structured-term service.

    Implementations raise ``NarseseParseError`` from the ``parse*`` methods and
    ``NarseseConversionError`` from the ``try_into_*`` conversions.
    """

    def parse(self, text: str) -> Any:
        """Parse text into a term, sentence or task."""
        ...

    def parse_term(self, text: str) -> Any:
        """Parse text that must be a single bare term."""
        ...

    def format(self, value: Any) -> str:
        """Format a term, sentence or task to canonical text."""
        ...

    def try_into_task(self, value: Any) -> Any:
        """Return a task; sentences get an empty budget, terms are rejected."""
        ...

    def try_into_term(self, value: Any) -> Any:
        """Return the value if it is a bare term, else reject it."""
        ...

    def is_budget_empty(self, task: Any) -> bool:
        ...

    def sentence_of(self, task: Any) -> Any:
        ...


class LexicalAsciiInterop:
    """TermInterop over lexical ASCII CommonNarsese."""

    name = "lexical-ascii"

    def parse(self, text: str) -> Narsese:
        return parse_narsese(text)

    def parse_term(self, text: str) -> Term:
        return parse_term(text)

    def format(self, value: Narsese) -> str:
        return format_narsese(value)

    def try_into_task(self, value: Narsese) -> Task:
        if isinstance(value, Task):
            return value
        if isinstance(value, Sentence):
            return Task(budget=(), sentence=value)
        raise NarseseConversionError(f"A bare term cannot be used as a task: {format_narsese(value)}")

    def try_into_term(self, value: Narsese) -> Term:
        if is_term(value):
            return value
        raise NarseseConversionError(f"Expected a term, got: {format_narsese(value)}")

    def is_budget_empty(self, task: Task) -> bool:
        return task.has_empty_budget

    def sentence_of(self, task: Task) -> Sentence:
        return task.sentence

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


DEFAULT_INTEROP: TermInterop = LexicalAsciiInterop()


__all__ = ["TermInterop", "LexicalAsciiInterop", "DEFAULT_INTEROP"]
