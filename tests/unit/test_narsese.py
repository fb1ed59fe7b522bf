# tests/unit/test_narsese.py
"""
Tests for the lexical ASCII Narsese adapter.

Verifies:
1. Terms, sentences and tasks parse into the expected values
2. Formatting is canonical (spacing, separators)
3. The TermInterop conversions accept and reject the right shapes
"""

import pytest

from navm.narsese import (
    DEFAULT_INTEROP,
    Atom,
    Compound,
    NarseseConversionError,
    NarseseParseError,
    Sentence,
    Statement,
    Task,
    TermInterop,
    TermSet,
    format_narsese,
    parse_narsese,
    parse_term,
)
from navm.narsese.parser import MAX_DEPTH


class TestParseTerms:
    """Term-level parsing."""

    def test_atom(self):
        assert parse_narsese("bird") == Atom(prefix="", name="bird")

    @pytest.mark.parametrize("text,prefix,name", [("$x", "$", "x"), ("#y", "#", "y"), ("?q", "?", "q"), ("^left", "^", "left")])
    def test_prefixed_atoms(self, text, prefix, name):
        assert parse_narsese(text) == Atom(prefix=prefix, name=name)

    def test_anonymous_variable_and_placeholder(self):
        assert parse_term("#") == Atom(prefix="#", name="")
        assert parse_term("_") == Atom(prefix="_", name="")

    def test_lone_query_variable_is_a_term(self):
        assert parse_narsese("?") == Atom(prefix="?", name="")
        assert parse_narsese(format_narsese(Atom("?", ""))) == Atom("?", "")

    @pytest.mark.parametrize("text", [".", "!", "$$ ?", "? :|:"])
    def test_lone_punctuation_is_invalid(self, text):
        with pytest.raises(NarseseParseError):
            parse_narsese(text)

    def test_statement(self):
        value = parse_narsese("<A --> B>")
        assert value == Statement(copula="-->", subject=Atom("", "A"), predicate=Atom("", "B"))

    def test_whitespace_is_insignificant(self):
        assert parse_narsese("<A-->B>") == parse_narsese("  < A  -->  B >  ")

    def test_compound(self):
        value = parse_narsese("(&&, A, B)")
        assert value == Compound(connecter="&&", terms=(Atom("", "A"), Atom("", "B")))

    def test_sets(self):
        assert parse_narsese("{SELF}") == TermSet("{", (Atom("", "SELF"),), "}")
        assert parse_narsese("[red, round]") == TermSet("[", (Atom("", "red"), Atom("", "round")), "]")

    def test_nested(self):
        value = parse_narsese("<(*, {SELF}) --> ^left>")
        assert isinstance(value, Statement)
        assert value.subject == Compound("*", (TermSet("{", (Atom("", "SELF"),), "}"),))
        assert value.predicate == Atom("^", "left")

    def test_nesting_within_limit(self):
        text = "<" * MAX_DEPTH + "A" + " --> B>" * MAX_DEPTH
        assert isinstance(parse_term(text), Statement)

    @pytest.mark.parametrize(
        "text",
        [
            "<" * 600 + "A --> B",
            "<" * 600 + "A" + " --> B>" * 600,
            "(&&," * 600,
            "{" * (MAX_DEPTH + 1) + "A" + "}" * (MAX_DEPTH + 1),
        ],
    )
    def test_deep_nesting_is_rejected(self, text):
        with pytest.raises(NarseseParseError):
            parse_narsese(text)

    @pytest.mark.parametrize("text", ["", "   ", "<A --> B", "<A B>", "()", "A, B", "<A --> B>>", "$"])
    def test_invalid_terms(self, text):
        with pytest.raises(NarseseParseError):
            parse_narsese(text)


class TestParseSentencesAndTasks:
    """Punctuation, stamp, truth and budget."""

    def test_sentence(self):
        value = parse_narsese("<A --> B>.")
        assert value == Sentence(term=parse_term("<A --> B>"), punctuation=".")

    def test_sentence_with_stamp_and_truth(self):
        value = parse_narsese("<A --> B>. :|: %1.0;0.9%")
        assert isinstance(value, Sentence)
        assert value.stamp == ":|:"
        assert value.truth == ("1.0", "0.9")

    @pytest.mark.parametrize("punctuation", [".", "!", "?", "@"])
    def test_punctuations(self, punctuation):
        assert parse_narsese(f"<A --> B>{punctuation}").punctuation == punctuation

    def test_question_with_query_variable(self):
        value = parse_narsese("<?x --> B>?")
        assert value.punctuation == "?"
        assert value.term.subject == Atom("?", "x")

    def test_task(self):
        value = parse_narsese("$0.5;0.5;0.5$ <A --> B>.")
        assert isinstance(value, Task)
        assert value.budget == ("0.5", "0.5", "0.5")
        assert not value.has_empty_budget

    def test_empty_budget(self):
        value = parse_narsese("$$ <A --> B>.")
        assert isinstance(value, Task)
        assert value.has_empty_budget

    def test_budget_without_punctuation_is_invalid(self):
        with pytest.raises(NarseseParseError):
            parse_narsese("$0.5$ <A --> B>")

    def test_parse_error_reports_position(self):
        with pytest.raises(NarseseParseError) as exc_info:
            parse_narsese("<A --> B")
        assert exc_info.value.position is not None


class TestFormat:
    """Canonical formatting."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("<A-->B>", "<A --> B>"),
            ("(&&,A,B)", "(&&, A, B)"),
            ("{A,B}", "{A, B}"),
            ("<A-->B>.:|:%1.0;0.9%", "<A --> B>. :|: %1.0;0.9%"),
            ("$0.5;0.5$<A-->B>!", "$0.5;0.5$ <A --> B>!"),
            ("$$<A-->B>.", "$$ <A --> B>."),
        ],
    )
    def test_canonical_text(self, text, expected):
        assert format_narsese(parse_narsese(text)) == expected

    def test_format_is_stable(self):
        text = "$0.8;0.5;0.9$ <(&&, <$x --> bird>, <$x --> [flying]>) ==> <$x --> animal>>. :|: %1.0;0.9%"
        assert format_narsese(parse_narsese(text)) == text


class TestInterop:
    """The default TermInterop implementation."""

    def test_satisfies_protocol(self):
        assert isinstance(DEFAULT_INTEROP, TermInterop)

    def test_sentence_becomes_task_with_empty_budget(self):
        task = DEFAULT_INTEROP.try_into_task(DEFAULT_INTEROP.parse("<A --> B>."))
        assert isinstance(task, Task)
        assert DEFAULT_INTEROP.is_budget_empty(task)
        assert DEFAULT_INTEROP.sentence_of(task) == parse_narsese("<A --> B>.")

    def test_task_passes_through(self):
        task = parse_narsese("$0.5$ <A --> B>.")
        assert DEFAULT_INTEROP.try_into_task(task) is task

    def test_bare_term_is_not_a_task(self):
        with pytest.raises(NarseseConversionError):
            DEFAULT_INTEROP.try_into_task(DEFAULT_INTEROP.parse("<A --> B>"))

    def test_sentence_is_not_a_term(self):
        with pytest.raises(NarseseConversionError):
            DEFAULT_INTEROP.try_into_term(DEFAULT_INTEROP.parse("<A --> B>."))

    def test_term_passes_through(self):
        term = DEFAULT_INTEROP.parse("{SELF}")
        assert DEFAULT_INTEROP.try_into_term(term) is term
