"""
Bounded, dependency-free parser for a subset of YAML.

Parses configuration snippets into a typed value tree under hard limits on
token count, scalar length, container size and nesting depth. A call either
returns a complete Document or raises a single YAMLDecodeError.
"""

import logging
from typing import IO
from typing import Any

from ._config import DEFAULT_MAX_DEPTH
from ._config import DEFAULT_MAX_ENTRIES
from ._config import DEFAULT_MAX_SCALAR_LENGTH
from ._config import DEFAULT_MAX_TOKENS
from ._config import EncodeConfig
from ._config import ParseConfig
from ._emitter import emit
from ._errors import ContainerError
from ._errors import ErrorKind
from ._errors import YAMLDecodeError
from ._lexer import Lexer
from ._lexer import Token
from ._lexer import TokenKind
from ._parser import Parser
from ._profiling import HotPathStats
from ._profiling import clear_hot_path_stats
from ._profiling import format_hot_path_report
from ._profiling import get_hot_path_stats
from ._values import Bool
from ._values import Document
from ._values import Float
from ._values import Int
from ._values import Mapping
from ._values import Null
from ._values import PyValue
from ._values import Sequence
from ._values import String
from ._values import Value
from ._values import ValueKind
from ._values import from_python

__version__ = "0.1.0"

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def _check_input(s: Any) -> str:
    if not isinstance(s, str):
        raise TypeError(
            f"the YAML document must be str, not {type(s).__name__}"
        )
    if s.startswith("\ufeff"):
        raise YAMLDecodeError(
            ErrorKind.INVALID_SYNTAX,
            "YAML input should not contain BOM (Byte Order Mark)",
            s,
            0,
        )
    return s


def tokenize(s: str, limits: ParseConfig | None = None) -> list[Token]:
    """
    Tokenizes s into a list of tokens ending with an END token.

    Raises YAMLDecodeError for lexical errors and when the stream would
    exceed limits.max_tokens.
    """
    return Lexer(_check_input(s), limits).tokenize()


def parse(s: str, limits: ParseConfig | None = None) -> Document:
    """
    Parses one YAML subset document into a Document.

    Either the whole tree is built or a single YAMLDecodeError is raised;
    no input makes the parser exceed the bounds in limits.
    """
    text = _check_input(s)
    config = limits or ParseConfig()
    tokens = Lexer(text, config).tokenize()
    document = Parser(tokens, text, config).parse_document()
    logger.debug(
        "Parsed %s document from %d tokens",
        document.root.kind.value,
        len(tokens),
    )
    return document


def validate(s: str, limits: ParseConfig | None = None) -> bool:
    """Reports whether s parses under limits, discarding the tree."""
    try:
        parse(s, limits)
    except YAMLDecodeError as exc:
        logger.debug("Validation failed: %s (%s)", exc, exc.kind.value)
        return False
    return True


def loads(s: str, **kwargs: Any) -> PyValue:
    """
    Parses s and returns plain Python objects.

    Keyword arguments configure the parse and are passed to ParseConfig.
    """
    config = ParseConfig(**kwargs)
    return parse(s, config).to_python()


def load(fp: IO[str], **kwargs: Any) -> PyValue:
    """
    Parses YAML from a file-like object and returns plain Python objects.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return loads(fp.read(), **kwargs)


def dumps(obj: Any, **kwargs: Any) -> str:
    """
    Serializes obj to a flow-style document that parse() reads back.

    Keyword arguments are passed to EncodeConfig.
    """
    return emit(obj, EncodeConfig(**kwargs))


def dump(obj: Any, fp: IO[str], **kwargs: Any) -> None:
    """
    Serializes obj to a file-like object.
    """
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    fp.write(dumps(obj, **kwargs))


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_MAX_ENTRIES",
    "DEFAULT_MAX_SCALAR_LENGTH",
    "DEFAULT_MAX_TOKENS",
    "Bool",
    "ContainerError",
    "Document",
    "EncodeConfig",
    "ErrorKind",
    "Float",
    "HotPathStats",
    "Int",
    "Lexer",
    "Mapping",
    "Null",
    "ParseConfig",
    "Parser",
    "PyValue",
    "Sequence",
    "String",
    "Token",
    "TokenKind",
    "Value",
    "ValueKind",
    "YAMLDecodeError",
    "clear_hot_path_stats",
    "dump",
    "dumps",
    "format_hot_path_report",
    "from_python",
    "get_hot_path_stats",
    "load",
    "loads",
    "parse",
    "tokenize",
    "validate",
]
