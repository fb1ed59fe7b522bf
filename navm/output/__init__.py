# navm/output/__init__.py
"""
navm outputs - events a runtime reports, and their JSON codec.

Public API:
    - Output and its variants: Echo, Derived, Error, Answer, Achieved,
      Execute, Info, Comment, Terminated, Unclassified, Other
    - Operation: operator name + term arguments (carried by Execute)
    - OutputType: the shared type-tag registry
    - to_json_string / from_json_string and the array variants
"""

from .conversion import (
    OutputJSON,
    from_json_array_string,
    from_json_string,
    from_json_struct,
    to_json_array_string,
    to_json_string,
    to_json_struct,
)
from .model import (
    ANTICIPATE,
    BUILTIN_TYPES,
    OUTPUT_TYPES,
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

__all__ = [
    # Model
    "Output",
    "OutputType",
    "BUILTIN_TYPES",
    "OUTPUT_TYPES",
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
    # JSON
    "OutputJSON",
    "to_json_struct",
    "to_json_string",
    "to_json_array_string",
    "from_json_struct",
    "from_json_string",
    "from_json_array_string",
]
