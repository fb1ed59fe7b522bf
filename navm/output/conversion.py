# navm/output/conversion.py
"""
JSON codec for outputs.

Every output flattens to the same record:

    {"type": "ANSWER", "content": "Answer: <A --> B>.", "term": "<A --> B>."}
    {"type": "EXE", "content": "EXE: ^left({SELF})", "operation": ["left", "{SELF}"]}

``term`` and ``operation`` are omitted when absent. ``term`` is the ASCII
form of the output's term; ``operation`` is ``[operator_name, *params]``.
Older producers wrote ``narsese`` instead of ``term``; it is accepted on
input.

Usage:
    from navm.output import to_json_string, from_json_string

    text = to_json_string(output)
    assert from_json_string(text) == output
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Sequence

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from navm.core.exceptions import JsonDecodeError, OperationMissingOperatorError
from navm.logging import get_logger
from navm.logging.tags import OUTPUT
from navm.narsese import DEFAULT_INTEROP, NarseseError, TermInterop

from .model import (
    Achieved,
    Answer,
    Comment,
    Derived,
    Echo,
    Error,
    Execute,
    Info,
    Operation,
    Other,
    Output,
    OutputType,
    Terminated,
    Unclassified,
)

logger = get_logger(__name__)


class OutputJSON(BaseModel):
    """The flat, JSON-ready form of any output."""

    model_config = ConfigDict(frozen=True)

    type: str
    content: str
    term: Optional[str] = Field(default=None, validation_alias=AliasChoices("term", "narsese"))
    operation: Optional[List[str]] = None

    def to_json_string(self) -> str:
        return self.model_dump_json(exclude_none=True)


_ARRAY_ADAPTER = TypeAdapter(List[OutputJSON])


# =============================================================================
# Encoding
# =============================================================================


def to_json_struct(output: Output, interop: TermInterop = DEFAULT_INTEROP) -> OutputJSON:
    term = output.get_term()
    operation = output.get_operation()
    return OutputJSON(
        type=output.type_name,
        content=output.raw_content,
        term=interop.format(term) if term is not None else None,
        operation=operation.to_strings(interop) if operation is not None else None,
    )


def to_json_string(output: Output, interop: TermInterop = DEFAULT_INTEROP) -> str:
    """Encode one output as compact JSON."""
    return to_json_struct(output, interop).to_json_string()


def to_json_array_string(outputs: Sequence[Output], interop: TermInterop = DEFAULT_INTEROP) -> str:
    """Encode several outputs as one JSON array."""
    records = [to_json_struct(o, interop) for o in outputs]
    return _ARRAY_ADAPTER.dump_json(records, exclude_none=True).decode("utf-8")


# =============================================================================
# Decoding
# =============================================================================


def _with_term(cls: Callable[..., Output]) -> Callable[[str, Any, Optional[Operation]], Output]:
    return lambda content, term, operation: cls(raw=content, term=term)


def _execute(content: str, term: Any, operation: Optional[Operation]) -> Output:
    if operation is None:
        raise JsonDecodeError("EXE output is missing its operation")
    return Execute(raw=content, operation=operation)


_DECODERS: Dict[OutputType, Callable[[str, Any, Optional[Operation]], Output]] = {
    OutputType.IN: _with_term(Echo),
    OutputType.OUT: _with_term(Derived),
    OutputType.ERROR: lambda content, term, operation: Error(message=content),
    OutputType.ANSWER: _with_term(Answer),
    OutputType.ACHIEVED: _with_term(Achieved),
    OutputType.EXE: _execute,
    OutputType.INFO: lambda content, term, operation: Info(message=content),
    OutputType.COMMENT: lambda content, term, operation: Comment(text=content),
    OutputType.TERMINATED: lambda content, term, operation: Terminated(reason=content),
    OutputType.OTHER: lambda content, term, operation: Other(raw=content),
}


def _decode_operation(values: Optional[List[str]], interop: TermInterop) -> Optional[Operation]:
    if values is None:
        return None
    if not values:
        raise OperationMissingOperatorError()
    try:
        return Operation.from_strings(values[0], values[1:], interop)
    except (NarseseError, ValueError) as e:
        raise JsonDecodeError(f"Invalid operation {values!r}: {e}") from e


def _decode_term(text: Optional[str], interop: TermInterop) -> Any:
    if text is None:
        return None
    try:
        return interop.parse(text)
    except NarseseError as e:
        raise JsonDecodeError(f"Invalid term {text!r}: {e}") from e


def from_json_struct(record: OutputJSON, interop: TermInterop = DEFAULT_INTEROP) -> Output:
    """
    Rebuild an output from its flat record.

    Raises:
        OperationMissingOperatorError: If ``operation`` is an empty list
        JsonDecodeError: If a term/operation doesn't parse, or EXE lacks one
    """
    operation = _decode_operation(record.operation, interop)
    term = _decode_term(record.term, interop)

    try:
        output_type = OutputType(record.type)
    except ValueError:
        if not record.type:
            raise JsonDecodeError("Output type cannot be empty") from None
        return Unclassified(type_tag=record.type, raw=record.content, term=term)
    return _DECODERS[output_type](record.content, term, operation)


def from_json_string(text: str, interop: TermInterop = DEFAULT_INTEROP) -> Output:
    """
    Decode one output from JSON text.

    Raises:
        JsonDecodeError: Malformed JSON, schema violation or bad payload
    """
    try:
        record = OutputJSON.model_validate_json(text)
    except ValidationError as e:
        raise JsonDecodeError(f"Invalid output JSON: {e}") from e
    return from_json_struct(record, interop)


def from_json_array_string(text: str, interop: TermInterop = DEFAULT_INTEROP) -> List[Output]:
    """
    Decode a JSON array of outputs. Fails as a whole if any element fails.

    Raises:
        JsonDecodeError: Malformed JSON, schema violation or bad payload
    """
    try:
        records = _ARRAY_ADAPTER.validate_json(text)
    except ValidationError as e:
        raise JsonDecodeError(f"Invalid output JSON array: {e}") from e
    outputs = [from_json_struct(r, interop) for r in records]
    logger.debug(f"{OUTPUT} Decoded {len(outputs)} outputs")
    return outputs


__all__ = [
    "OutputJSON",
    "to_json_struct",
    "to_json_string",
    "to_json_array_string",
    "from_json_struct",
    "from_json_string",
    "from_json_array_string",
]
