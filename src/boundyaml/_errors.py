"""
Error taxonomy for YAML parsing failures.

Every failure is reported as exactly one ErrorKind. The parser raises on the
first error it detects and never returns a partial tree.
"""

from enum import Enum
from typing import TypeAlias

Position: TypeAlias = int


class ErrorKind(Enum):
    """Closed set of failure classes reported by the tokenizer and parser."""

    INVALID_SYNTAX = "invalid_syntax"
    UNEXPECTED_TOKEN = "unexpected_token"
    UNTERMINATED_STRING = "unterminated_string"
    DUPLICATE_KEY = "duplicate_key"
    INVALID_DOCUMENT_START = "invalid_document_start"
    INVALID_DOCUMENT_END = "invalid_document_end"
    UNSUPPORTED_FEATURE = "unsupported_feature"
    CAPACITY_EXCEEDED = "capacity_exceeded"


class YAMLDecodeError(ValueError):
    """
    Handles YAML parsing failures with error kind and position information.

    Carries the classified kind, the offending position, and line/column
    numbers derived from it so callers can point at the problem.
    """

    def __init__(
        self, kind: ErrorKind, msg: str, doc: str = "", pos: Position = 0
    ) -> None:
        if not isinstance(kind, ErrorKind):
            raise TypeError("kind must be an ErrorKind")
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.kind = kind
        self.msg = msg
        self.doc = doc
        self.pos = pos

        self.lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1

        super().__init__(f"{msg} at line {self.lineno}, column {self.colno}")

    def __reduce__(self) -> tuple[type, tuple[ErrorKind, str, str, int]]:
        return (self.__class__, (self.kind, self.msg, self.doc, self.pos))


class ContainerError(ValueError):
    """
    Raised by Sequence and Mapping when an insertion violates a bound.

    Containers know nothing about source positions; the parser re-raises
    these as YAMLDecodeError at the token that caused them.
    """

    def __init__(self, kind: ErrorKind, msg: str = "") -> None:
        super().__init__(msg or kind.value)
        self.kind = kind
