# tests/unit/conftest.py
"""
Test fixtures for unit tests.

Provides one sample of every command and output variant, so round-trip
tests cover the whole taxonomy.
"""

from __future__ import annotations

from typing import List

import pytest

from navm.cmd import (
    Cmd,
    Custom,
    Cycle,
    Delete,
    Exit,
    Help,
    Info,
    Load,
    NarseseInput,
    New,
    Register,
    Remark,
    Reset,
    Save,
    Volume,
)
from navm.narsese import DEFAULT_INTEROP, Atom, parse_narsese
from navm.output import (
    ANTICIPATE,
    Achieved,
    Answer,
    Comment,
    Derived,
    Echo,
    Error,
    Execute,
    Operation,
    Other,
    Output,
    Terminated,
    Unclassified,
)
from navm.output import Info as InfoOutput


def pytest_collection_modifyitems(items):
    """Add tier markers to unit tests.

    Tier 1: Pure logic tests with no I/O
    Tier 2: Everything else (CLI, config files, threads)
    """
    TIER1_PATTERNS = [
        "test_narsese",
        "test_cmd_",
        "test_output_",
        "test_vm_status",
        "test_vm_registry",
    ]

    for item in items:
        fspath = str(item.fspath)

        if "/unit/" not in fspath and "\\unit\\" not in fspath:
            continue

        has_tier = any(marker.name.startswith("tier") for marker in item.iter_markers())
        if has_tier:
            continue

        if any(pattern in fspath for pattern in TIER1_PATTERNS):
            item.add_marker(pytest.mark.tier1)
        else:
            item.add_marker(pytest.mark.tier2)


def task(text: str):
    """Parse NSE text the way the command parser does."""
    return DEFAULT_INTEROP.try_into_task(parse_narsese(text))


@pytest.fixture
def sample_commands() -> List[Cmd]:
    """One (or more) instance of every command variant."""
    return [
        Save(target="memory", path="./saves/memory.nal"),
        Save(target="memory"),
        Save(),
        Load(target="memory", path="./saves/memory.nal"),
        Reset(target="memory"),
        Reset(),
        NarseseInput(task=task("<A --> B>.")),
        NarseseInput(task=task("$0.5;0.5;0.5$ <(&&, <$x --> bird>, <$x --> [flying]>) ==> <$x --> animal>>. :|: %1.0;0.9%")),
        NarseseInput(task=task("<{SELF} --> [good]>!")),
        New(target="reasoner"),
        Delete(target="reasoner"),
        Cycle(137),
        Cycle(0),
        Volume(100),
        Register(name="left"),
        Info(source="memory"),
        Info(),
        Help(name="NSE"),
        Help(),
        Remark(comment="this is a comment  with  spacing"),
        Remark(),
        Exit(reason="end of session"),
        Exit(),
        Custom(head="FOO", tail="bar baz"),
        Custom(head="baz"),
        Custom(head="Trace", tail="  indented tail"),
    ]


@pytest.fixture
def sample_outputs() -> List[Output]:
    """One (or more) instance of every output variant."""
    statement = parse_narsese("<A --> B>")
    return [
        Echo(raw="Input: <A --> B>.", term=task("<A --> B>.")),
        Echo(raw="Input: something"),
        Echo(raw="Input: ?", term=Atom("?", "")),
        Derived(raw="Derived: <A --> C>.", term=parse_narsese("<A --> C>.")),
        Error(message="stack overflow in reasoner"),
        Answer(raw="Answer: <A --> B>. %1.0;0.9%", term=parse_narsese("<A --> B>. %1.0;0.9%")),
        Achieved(raw="ACHIEVED: <{SELF} --> [good]>!", term=parse_narsese("<{SELF} --> [good]>!")),
        Execute(raw="EXE: ^left({SELF})", operation=Operation.from_strings("^left", ["{SELF}"])),
        Execute(raw="EXE: ^deactivate()", operation=Operation("deactivate")),
        Execute(raw="EXE: ^ask(?)", operation=Operation("ask", (Atom("?", ""),))),
        InfoOutput(message="reasoner started"),
        Comment(text="volume set to 50"),
        Terminated(reason="bye"),
        Unclassified(type_tag=ANTICIPATE, raw="ANTICIPATE: <A --> B>", term=statement),
        Unclassified(type_tag="TRACE", raw="trace line"),
        Other(raw="unrecognised line"),
    ]
