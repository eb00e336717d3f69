"""
Immutable configuration for parsing and emitting.

ParseConfig holds the capacity bounds that guarantee every parse terminates
with a fixed memory ceiling, plus the strict/lenient switch.
"""

from dataclasses import dataclass
from typing import Any
from typing import Final

DEFAULT_MAX_TOKENS: Final = 1024
DEFAULT_MAX_SCALAR_LENGTH: Final = 255
DEFAULT_MAX_ENTRIES: Final = 64
DEFAULT_MAX_DEPTH: Final = 32

# Upper bound for max_depth; the parser recurses roughly three frames per
# nesting level and must stay inside the interpreter recursion limit.
MAX_DEPTH_CEILING: Final = 200


def _check_positive(name: str, value: Any) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer")
    if value < 1:
        raise ValueError(f"{name} must be at least 1")


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures YAML parsing with immutable capacity bounds.

    max_tokens counts every token including the end-of-input marker,
    max_scalar_length bounds string scalars and keys after quote removal,
    max_entries bounds each sequence and mapping, and max_depth bounds
    container nesting.
    """

    max_tokens: int = DEFAULT_MAX_TOKENS
    max_scalar_length: int = DEFAULT_MAX_SCALAR_LENGTH
    max_entries: int = DEFAULT_MAX_ENTRIES
    max_depth: int = DEFAULT_MAX_DEPTH
    strict: bool = True

    def __post_init__(self) -> None:
        _check_positive("max_tokens", self.max_tokens)
        _check_positive("max_scalar_length", self.max_scalar_length)
        _check_positive("max_entries", self.max_entries)
        _check_positive("max_depth", self.max_depth)
        if self.max_depth > MAX_DEPTH_CEILING:
            raise ValueError(f"max_depth must not exceed {MAX_DEPTH_CEILING}")
        if not isinstance(self.strict, bool):
            raise TypeError("strict must be a boolean")


@dataclass(frozen=True)
class EncodeConfig:
    """
    Configures flow-style YAML emission with immutable settings.
    """

    skipkeys: bool = False
    sort_keys: bool = False
    explicit_start: bool = False
    default: Any = None

    def __post_init__(self) -> None:
        if not isinstance(self.skipkeys, bool):
            raise TypeError("skipkeys must be a boolean")
        if not isinstance(self.sort_keys, bool):
            raise TypeError("sort_keys must be a boolean")
        if not isinstance(self.explicit_start, bool):
            raise TypeError("explicit_start must be a boolean")
