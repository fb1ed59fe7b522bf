# navm/output/model.py
"""
Output model - one observable event reported by a runtime.

Variants and their stable type tags:

    Echo          IN          input echoed back by the backend
    Derived       OUT         derived/general line
    Error         ERROR       internal error reported by the backend
    Answer        ANSWER      answer to a question
    Achieved      ACHIEVED    goal achieved
    Execute       EXE         operation invocation
    Info          INFO        informational message
    Comment       COMMENT     less important than INFO
    Terminated    TERMINATED  advisory "backend stopped" notice
    Unclassified  <any>       backend-specific tag not in this list
    Other         OTHER       a line nothing else recognised

Every variant answers ``type_name``, ``raw_content``, ``get_term()`` and
``get_operation()``, so callers can handle outputs uniformly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Optional, Tuple, Union

from navm.narsese import DEFAULT_INTEROP, TermInterop


class OutputType(str, Enum):
    """Type tags, shared by the JSON encoder and decoder."""

    IN = "IN"
    OUT = "OUT"
    ERROR = "ERROR"
    ANSWER = "ANSWER"
    ACHIEVED = "ACHIEVED"
    EXE = "EXE"
    INFO = "INFO"
    COMMENT = "COMMENT"
    TERMINATED = "TERMINATED"
    OTHER = "OTHER"


BUILTIN_TYPES = frozenset(t.value for t in OutputType)

# Semi-official tag emitted by some backends (NAL-9); carried by Unclassified
ANTICIPATE = "ANTICIPATE"

OPERATOR_SIGIL = "^"


# =============================================================================
# Operation
# =============================================================================


@dataclass(frozen=True, slots=True)
class Operation:
    """
    An operation the backend asks the controller to execute.

    ``operator_name`` never carries the ``^`` sigil; ``str(op)`` adds it back.

    Examples:
        >>> op = Operation.from_strings("^left", ["{SELF}"])
        >>> op.operator_name
        'left'
        >>> str(op)
        '<(*, {SELF}) --> ^left>'
    """

    operator_name: str
    params: Tuple[Any, ...] = ()

    def __post_init__(self):
        if not self.operator_name:
            raise ValueError("operator_name cannot be empty")
        if self.operator_name.startswith(OPERATOR_SIGIL):
            raise ValueError(f"operator_name must not include {OPERATOR_SIGIL!r}: {self.operator_name!r}")
        if not isinstance(self.params, tuple):
            object.__setattr__(self, "params", tuple(self.params))

    @classmethod
    def from_strings(
        cls,
        operator_name: str,
        params: Iterable[str] = (),
        interop: TermInterop = DEFAULT_INTEROP,
    ) -> "Operation":
        """
        Build an operation from text, stripping a leading ``^``.

        Raises:
            NarseseParseError: If a parameter isn't a single bare term
        """
        name = operator_name[1:] if operator_name.startswith(OPERATOR_SIGIL) else operator_name
        terms = tuple(interop.parse_term(p) for p in params)
        return cls(operator_name=name, params=terms)

    def no_params(self) -> bool:
        return not self.params

    def has_params(self) -> bool:
        return bool(self.params)

    def to_strings(self, interop: TermInterop = DEFAULT_INTEROP) -> List[str]:
        """``[operator_name, param1, ...]``, the JSON array form."""
        return [self.operator_name] + [interop.format(p) for p in self.params]

    def format(self, interop: TermInterop = DEFAULT_INTEROP) -> str:
        args = "".join(f", {interop.format(p)}" for p in self.params)
        return f"<(*{args}) --> {OPERATOR_SIGIL}{self.operator_name}>"

    def __str__(self) -> str:
        return self.format()


# =============================================================================
# Output variants
# =============================================================================


class _OutputBase:
    """Uniform accessors. The variants below are the whole set."""

    __slots__ = ()

    tag: OutputType

    @property
    def type_name(self) -> str:
        return self.tag.value

    @property
    def raw_content(self) -> str:
        raise NotImplementedError

    def get_term(self) -> Optional[Any]:
        return None

    def get_operation(self) -> Optional[Operation]:
        return None

    def is_type(self, type_name: str) -> bool:
        return self.type_name == type_name


@dataclass(frozen=True, slots=True)
class Echo(_OutputBase):
    """IN - the backend echoed an input, e.g. ``Input: <A --> B>.``"""

    tag = OutputType.IN

    raw: str
    term: Optional[Any] = None

    @property
    def raw_content(self) -> str:
        return self.raw

    def get_term(self) -> Optional[Any]:
        return self.term


@dataclass(frozen=True, slots=True)
class Derived(_OutputBase):
    """OUT - a derived conclusion or other general line."""

    tag = OutputType.OUT

    raw: str
    term: Optional[Any] = None

    @property
    def raw_content(self) -> str:
        return self.raw

    def get_term(self) -> Optional[Any]:
        return self.term


@dataclass(frozen=True, slots=True)
class Error(_OutputBase):
    """ERROR - something went wrong inside the backend."""

    tag = OutputType.ERROR

    message: str

    @property
    def raw_content(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class Answer(_OutputBase):
    """ANSWER - an answer to a question."""

    tag = OutputType.ANSWER

    raw: str
    term: Optional[Any] = None

    @property
    def raw_content(self) -> str:
        return self.raw

    def get_term(self) -> Optional[Any]:
        return self.term


@dataclass(frozen=True, slots=True)
class Achieved(_OutputBase):
    """ACHIEVED - a goal was achieved."""

    tag = OutputType.ACHIEVED

    raw: str
    term: Optional[Any] = None

    @property
    def raw_content(self) -> str:
        return self.raw

    def get_term(self) -> Optional[Any]:
        return self.term


@dataclass(frozen=True, slots=True)
class Execute(_OutputBase):
    """EXE - the backend wants an operation executed."""

    tag = OutputType.EXE

    raw: str
    operation: Operation

    def __post_init__(self):
        if not isinstance(self.operation, Operation):
            raise TypeError(f"operation must be an Operation, got {type(self.operation).__name__}")

    @property
    def raw_content(self) -> str:
        return self.raw

    def get_operation(self) -> Optional[Operation]:
        return self.operation


@dataclass(frozen=True, slots=True)
class Info(_OutputBase):
    tag = OutputType.INFO

    message: str

    @property
    def raw_content(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class Comment(_OutputBase):
    tag = OutputType.COMMENT

    text: str

    @property
    def raw_content(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Terminated(_OutputBase):
    """
    TERMINATED - the backend says it stopped.

    Advisory only; the runtime's ``status`` is authoritative.
    """

    tag = OutputType.TERMINATED

    reason: str

    @property
    def raw_content(self) -> str:
        return self.reason


@dataclass(frozen=True, slots=True)
class Unclassified(_OutputBase):
    """A recognised but non-standard output type, e.g. ``ANTICIPATE``."""

    tag = None

    type_tag: str
    raw: str
    term: Optional[Any] = None

    def __post_init__(self):
        if not self.type_tag:
            raise ValueError("type_tag cannot be empty")
        if self.type_tag in BUILTIN_TYPES:
            raise ValueError(f"{self.type_tag!r} is a built-in output type; use its own variant")

    @property
    def type_name(self) -> str:
        return self.type_tag

    @property
    def raw_content(self) -> str:
        return self.raw

    def get_term(self) -> Optional[Any]:
        return self.term


@dataclass(frozen=True, slots=True)
class Other(_OutputBase):
    """OTHER - a line that could not be classified at all."""

    tag = OutputType.OTHER

    raw: str

    @property
    def raw_content(self) -> str:
        return self.raw


Output = Union[
    Echo,
    Derived,
    Error,
    Answer,
    Achieved,
    Execute,
    Info,
    Comment,
    Terminated,
    Unclassified,
    Other,
]

OUTPUT_TYPES = (
    Echo,
    Derived,
    Error,
    Answer,
    Achieved,
    Execute,
    Info,
    Comment,
    Terminated,
    Unclassified,
    Other,
)


__all__ = [
    "OutputType",
    "BUILTIN_TYPES",
    "ANTICIPATE",
    "Operation",
    "Echo",
    "Derived",
    "Error",
    "Answer",
    "Achieved",
    "Execute",
    "Info",
    "Comment",
    "Terminated",
    "Unclassified",
    "Other",
    "Output",
    "OUTPUT_TYPES",
]
