# navm/narsese/lexical.py
"""
Lexical Narsese value types.

"Lexical" means the values keep the surface pieces of CommonNarsese as
strings: connecters, copulas, punctuation, stamps and the numeric fields of
truth values and budgets are never interpreted. Two values are equal when
they were written the same way (modulo insignificant whitespace).

Value hierarchy:
    Term
    ├── Atom       - prefix + name, e.g. ``$x``, ``^left``, ``bird``
    ├── Compound   - ``(connecter, t1, t2, ...)``
    ├── TermSet    - ``{t1, ...}`` or ``[t1, ...]``
    └── Statement  - ``<subject copula predicate>``
    Sentence       - term + punctuation + stamp + truth
    Task           - budget + sentence
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True, slots=True)
class Atom:
    """Atomic term: an optional prefix followed by a word."""

    prefix: str
    name: str


@dataclass(frozen=True, slots=True)
class Compound:
    """Compound term with a connecter, e.g. ``(&&, A, B)``."""

    connecter: str
    terms: Tuple["Term", ...]


@dataclass(frozen=True, slots=True)
class TermSet:
    """Set term, extensional ``{...}`` or intensional ``[...]``."""

    left_bracket: str
    terms: Tuple["Term", ...]
    right_bracket: str


@dataclass(frozen=True, slots=True)
class Statement:
    """Statement term, e.g. ``<A --> B>``."""

    copula: str
    subject: "Term"
    predicate: "Term"


Term = Union[Atom, Compound, TermSet, Statement]


@dataclass(frozen=True, slots=True)
class Sentence:
    """
    A term with punctuation and optional stamp and truth.

    ``stamp`` is the raw stamp text (``":|:"``) or ``""``.
    ``truth`` holds the lexical truth values, empty when absent.
    """

    term: Term
    punctuation: str
    stamp: str = ""
    truth: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Task:
    """A sentence with a budget. An empty ``budget`` means unset."""

    budget: Tuple[str, ...]
    sentence: Sentence

    @property
    def has_empty_budget(self) -> bool:
        return not self.budget


Narsese = Union[Term, Sentence, Task]

TERM_TYPES = (Atom, Compound, TermSet, Statement)


def is_term(value: object) -> bool:
    return isinstance(value, TERM_TYPES)


__all__ = [
    "Atom",
    "Compound",
    "TermSet",
    "Statement",
    "Term",
    "Sentence",
    "Task",
    "Narsese",
    "TERM_TYPES",
    "is_term",
]
