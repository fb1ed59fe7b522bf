# navm/narsese/formatter.py
"""
Canonical ASCII formatting for lexical Narsese.

    <A --> B>                       statement
    (&&, <A --> B>, C)              compound
    {SELF}                          set
    <A --> B>. :|: %1.0;0.9%        sentence
    $0.5;0.5;0.5$ <A --> B>.        task
    $$ <A --> B>.                   task with an empty budget
"""

from __future__ import annotations

from .exceptions import NarseseConversionError
from .lexical import Atom, Compound, Narsese, Sentence, Statement, Task, Term, TermSet

MEMBER_SEPARATOR = ", "


def format_term(term: Term) -> str:
    if isinstance(term, Atom):
        return term.prefix + term.name
    if isinstance(term, Statement):
        return f"<{format_term(term.subject)} {term.copula} {format_term(term.predicate)}>"
    if isinstance(term, Compound):
        members = [term.connecter] + [format_term(t) for t in term.terms]
        return "(" + MEMBER_SEPARATOR.join(members) + ")"
    if isinstance(term, TermSet):
        members = MEMBER_SEPARATOR.join(format_term(t) for t in term.terms)
        return term.left_bracket + members + term.right_bracket
    raise NarseseConversionError(f"Not a lexical term: {term!r}")


def format_sentence(sentence: Sentence) -> str:
    parts = [format_term(sentence.term) + sentence.punctuation]
    if sentence.stamp:
        parts.append(sentence.stamp)
    if sentence.truth:
        parts.append("%" + ";".join(sentence.truth) + "%")
    return " ".join(parts)


def format_task(task: Task) -> str:
    return "$" + ";".join(task.budget) + "$ " + format_sentence(task.sentence)


def format_narsese(value: Narsese) -> str:
    """Format any lexical Narsese value to canonical ASCII text."""
    if isinstance(value, Task):
        return format_task(value)
    if isinstance(value, Sentence):
        return format_sentence(value)
    return format_term(value)


__all__ = ["format_narsese", "format_term", "format_sentence", "format_task"]
