# navm/narsese/parser.py
"""
Parser for lexical ASCII CommonNarsese.

Whitespace is insignificant: it is removed before parsing, so
``<A-->B>.`` and ``< A --> B > .`` yield the same value. Parsing works from
both ends of the text:

1. a leading ``$...$`` is a budget (only digits, dots and semicolons inside)
2. a trailing ``%...%`` is a truth value
3. a trailing ``:...:`` is a stamp
4. a trailing ``.``, ``!``, ``?`` or ``@`` is the punctuation
5. whatever remains must be exactly one term
"""

from __future__ import annotations

import re
from typing import List, Tuple

from .exceptions import NarseseParseError
from .lexical import Atom, Compound, Narsese, Sentence, Statement, Task, Term, TermSet

PUNCTUATIONS = ".!?@"

ATOM_PREFIXES = "$#?^+"

PLACEHOLDER = "_"

# Prefixes that may stand alone (anonymous variables, placeholder)
ANONYMOUS_PREFIXES = ("#", "?", PLACEHOLDER)

COPULAS = (
    "-->",
    "<->",
    "==>",
    "<=>",
    "{--",
    "--]",
    "{-]",
    "=/>",
    "=|>",
    "=\\>",
    "</>",
    "<|>",
    "<\\>",
)

SET_BRACKETS = {"{": "}", "[": "]"}

# Deepest term nesting the parser accepts
MAX_DEPTH = 128

_WHITESPACE_RE = re.compile(r"\s+")
_BUDGET_RE = re.compile(r"\$([0-9.;]*)\$")
_TRUTH_RE = re.compile(r"%([0-9.;]*)%$")
_STAMP_RE = re.compile(r":(?:[|\\/]|![+-]?[0-9]+):$")
_NAME_RE = re.compile(r"\w*")


def _split_values(body: str) -> Tuple[str, ...]:
    """Split a ``;``-separated value list, dropping empty segments."""
    return tuple(v for v in body.split(";") if v)


class _TermParser:
    """Recursive descent over a whitespace-free term string."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.depth = 0

    def error(self, message: str) -> NarseseParseError:
        return NarseseParseError(message, text=self.text, position=self.pos)

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def expect(self, char: str) -> None:
        if self.peek() != char:
            found = self.peek() or "end of input"
            raise self.error(f"Expected {char!r}, found {found!r}")
        self.pos += 1

    def parse_all(self) -> Term:
        term = self.parse_term()
        if self.pos != len(self.text):
            raise self.error("Unexpected trailing characters")
        return term

    def parse_term(self) -> Term:
        char = self.peek()
        if not char:
            raise self.error("Unexpected end of input, expected a term")
        if char == "<" or char == "(" or char in SET_BRACKETS:
            if self.depth >= MAX_DEPTH:
                raise self.error(f"Term nesting deeper than {MAX_DEPTH} levels")
            self.depth += 1
            try:
                if char == "<":
                    return self.parse_statement()
                if char == "(":
                    return self.parse_compound()
                return self.parse_set()
            finally:
                self.depth -= 1
        return self.parse_atom()

    def parse_statement(self) -> Statement:
        self.expect("<")
        subject = self.parse_term()
        copula = self.parse_copula()
        predicate = self.parse_term()
        self.expect(">")
        return Statement(copula=copula, subject=subject, predicate=predicate)

    def parse_copula(self) -> str:
        for copula in COPULAS:
            if self.text.startswith(copula, self.pos):
                self.pos += len(copula)
                return copula
        raise self.error("Expected a copula")

    def parse_compound(self) -> Compound:
        self.expect("(")
        end = self.pos
        while end < len(self.text) and self.text[end] not in ",)":
            if self.text[end] in "<({[":
                raise NarseseParseError("Compound term has no connecter", text=self.text, position=end)
            end += 1
        connecter = self.text[self.pos:end]
        if not connecter:
            raise self.error("Compound term has no connecter")
        self.pos = end
        terms = self.parse_members(")")
        return Compound(connecter=connecter, terms=tuple(terms))

    def parse_set(self) -> TermSet:
        left = self.peek()
        right = SET_BRACKETS[left]
        self.pos += 1
        terms: List[Term] = []
        if self.peek() != right:
            terms.append(self.parse_term())
        terms.extend(self.parse_members(right))
        return TermSet(left_bracket=left, terms=tuple(terms), right_bracket=right)

    def parse_members(self, closing: str) -> List[Term]:
        """Parse ``,term`` repetitions up to and including ``closing``."""
        terms: List[Term] = []
        while self.peek() == ",":
            self.pos += 1
            terms.append(self.parse_term())
        self.expect(closing)
        return terms

    def parse_atom(self) -> Atom:
        char = self.peek()
        prefix = ""
        if char in ATOM_PREFIXES:
            prefix = char
            self.pos += 1
        elif char == PLACEHOLDER and not _NAME_RE.match(self.text, self.pos + 1).group():
            self.pos += 1
            return Atom(prefix=PLACEHOLDER, name="")

        name = _NAME_RE.match(self.text, self.pos).group()
        if not name and prefix not in ANONYMOUS_PREFIXES:
            if prefix:
                raise self.error(f"Atom prefix {prefix!r} needs a name")
            raise self.error(f"Unexpected character {char!r}")
        self.pos += len(name)
        return Atom(prefix=prefix, name=name)


def parse_term(text: str) -> Term:
    """Parse text that must be a single term (no punctuation)."""
    compact = _WHITESPACE_RE.sub("", text)
    if not compact:
        raise NarseseParseError("Empty Narsese text", text=text)
    return _TermParser(compact).parse_all()


def parse_narsese(text: str) -> Narsese:
    """
    Parse lexical ASCII Narsese into a term, a sentence or a task.

    Raises:
        NarseseParseError: If the text is not valid Narsese
    """
    rest = _WHITESPACE_RE.sub("", text)
    if not rest:
        raise NarseseParseError("Empty Narsese text", text=text)

    budget = None
    match = _BUDGET_RE.match(rest)
    if match:
        budget = _split_values(match.group(1))
        rest = rest[match.end():]

    truth: Tuple[str, ...] = ()
    has_truth = False
    match = _TRUTH_RE.search(rest)
    if match:
        truth = _split_values(match.group(1))
        has_truth = True
        rest = rest[: match.start()]

    stamp = ""
    match = _STAMP_RE.search(rest)
    if match:
        stamp = match.group()
        rest = rest[: match.start()]

    punctuation = ""
    if rest and rest[-1] in PUNCTUATIONS:
        punctuation = rest[-1]
        rest = rest[:-1]

    if not punctuation:
        if budget is not None or stamp or has_truth:
            raise NarseseParseError("Missing punctuation", text=text)
        return _TermParser(rest).parse_all()

    if not rest:
        # A lone "?" is the anonymous query variable, not an empty question
        if budget is None and not stamp and not has_truth:
            return _TermParser(punctuation).parse_all()
        raise NarseseParseError("Missing term before punctuation", text=text)

    sentence = Sentence(
        term=_TermParser(rest).parse_all(),
        punctuation=punctuation,
        stamp=stamp,
        truth=truth,
    )
    if budget is None:
        return sentence
    return Task(budget=budget, sentence=sentence)


__all__ = ["parse_narsese", "parse_term", "COPULAS", "PUNCTUATIONS", "ATOM_PREFIXES"]
