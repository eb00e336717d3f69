"""
Recursive descent parser for the YAML subset.

Consumes the token list produced by the lexer and builds a Document. Newline
tokens are trivia to the cursor: block structure is recognized by token
kind alone, without indentation tracking.
"""

import logging
import math
from collections.abc import Iterator
from contextlib import contextmanager

from ._config import ParseConfig
from ._errors import ContainerError
from ._errors import ErrorKind
from ._errors import YAMLDecodeError
from ._lexer import Token
from ._lexer import TokenKind
from ._profiling import ProfileContext
from ._values import Bool
from ._values import Document
from ._values import Float
from ._values import Int
from ._values import Mapping
from ._values import Null
from ._values import Sequence
from ._values import String
from ._values import Value

logger = logging.getLogger(__name__)

_STRING_TOKENS = (TokenKind.PLAIN_SCALAR, TokenKind.QUOTED_SCALAR)
_NODE_PROPERTIES = (TokenKind.ANCHOR, TokenKind.TAG)
_KEY_START_TOKENS = _STRING_TOKENS + _NODE_PROPERTIES


class Parser:
    """
    Builds a value tree from a token list with one token of lookahead.

    In strict mode the parser rejects sloppy separators, unclosed flow
    collections and trailing content; in lenient mode it tolerates them.
    """

    def __init__(
        self, tokens: list[Token], doc: str, config: ParseConfig | None = None
    ):
        if not tokens or tokens[-1].kind is not TokenKind.END:
            raise ValueError("token list must end with an END token")
        self.tokens = tokens
        self.doc = doc
        self.config = config or ParseConfig()
        self.index = 0
        self.depth = 0
        self._skip_newlines()

    @property
    def current(self) -> Token:
        return self.tokens[self.index]

    def _skip_newlines(self) -> None:
        while self.tokens[self.index].kind is TokenKind.NEWLINE:
            self.index += 1

    def advance_token(self) -> Token:
        """Moves past the current token and returns the new current one."""
        if self.tokens[self.index].kind is not TokenKind.END:
            self.index += 1
            self._skip_newlines()
        return self.tokens[self.index]

    def peek_token(self) -> Token:
        """Returns the token after the current one, skipping newlines."""
        index = self.index
        if self.tokens[index].kind is TokenKind.END:
            return self.tokens[index]
        index += 1
        while self.tokens[index].kind is TokenKind.NEWLINE:
            index += 1
        return self.tokens[index]

    def error(
        self, kind: ErrorKind, msg: str, token: Token | None = None
    ) -> YAMLDecodeError:
        token = token or self.current
        return YAMLDecodeError(kind, msg, self.doc, token.start)

    def expect_token(self, kind: TokenKind, delimiter: str) -> Token:
        """Expects a token of the given kind and advances past it."""
        token = self.current
        if token.kind is not kind:
            raise self.error(
                ErrorKind.UNEXPECTED_TOKEN, f"Expecting '{delimiter}' delimiter"
            )
        self.advance_token()
        return token

    def _expecting_value(self) -> YAMLDecodeError:
        if self.current.kind is TokenKind.END:
            return self.error(ErrorKind.INVALID_SYNTAX, "Expecting value")
        return self.error(ErrorKind.UNEXPECTED_TOKEN, "Expecting value")

    @contextmanager
    def _nested(self, token: Token) -> Iterator[None]:
        self.depth += 1
        if self.depth > self.config.max_depth:
            raise self.error(
                ErrorKind.CAPACITY_EXCEEDED,
                f"Nesting exceeds maximum depth of {self.config.max_depth}",
                token,
            )
        yield
        self.depth -= 1

    def _append(self, seq: Sequence, value: Value, token: Token) -> None:
        try:
            seq.append(value)
        except ContainerError as exc:
            raise self.error(exc.kind, str(exc), token) from exc

    def _insert(
        self, mapping: Mapping, key: str, value: Value, token: Token
    ) -> None:
        try:
            mapping.insert(key, value)
        except ContainerError as exc:
            raise self.error(exc.kind, str(exc), token) from exc

    def parse_document(self) -> Document:
        """Parses exactly one document and checks what follows it."""
        with ProfileContext("parse_document", len(self.tokens)):
            if self.current.kind is TokenKind.DOCUMENT_START:
                self.advance_token()
            if self.current.kind in (TokenKind.END, TokenKind.DOCUMENT_END):
                raise self.error(ErrorKind.INVALID_SYNTAX, "Expecting value")

            root = self.parse_value()
            self._finish_document()
            return Document(root)

    def _finish_document(self) -> None:
        token = self.current
        if token.kind is TokenKind.END:
            return
        if not self.config.strict:
            logger.debug(
                "Ignoring trailing %s token at line %d, column %d",
                token.kind.value,
                token.line,
                token.column,
            )
            return

        if token.kind is TokenKind.DOCUMENT_END:
            token = self.advance_token()
            if token.kind is not TokenKind.END:
                raise self.error(
                    ErrorKind.INVALID_DOCUMENT_END,
                    "Content after document end marker",
                )
        elif token.kind is TokenKind.DOCUMENT_START:
            raise self.error(
                ErrorKind.UNSUPPORTED_FEATURE,
                "Multiple documents are not supported",
            )
        else:
            raise self.error(ErrorKind.INVALID_SYNTAX, "Extra data")

    def parse_value(self) -> Value:  # noqa: PLR0911
        """Parses any value based on the current token."""
        token = self.current
        while token.kind in _NODE_PROPERTIES:
            # Anchors and tags are accepted and ignored.
            token = self.advance_token()

        kind = token.kind
        if kind is TokenKind.NULL:
            self.advance_token()
            return Null()
        elif kind is TokenKind.BOOLEAN:
            self.advance_token()
            return Bool(token.value == "true")
        elif kind is TokenKind.INTEGER:
            return self.parse_integer()
        elif kind is TokenKind.FLOAT:
            return self.parse_float()
        elif kind in _STRING_TOKENS:
            if self.peek_token().kind is TokenKind.COLON:
                return self.parse_block_mapping()
            return self.parse_string()
        elif kind is TokenKind.FLOW_SEQUENCE_START:
            return self.parse_flow_sequence()
        elif kind is TokenKind.FLOW_MAPPING_START:
            return self.parse_flow_mapping()
        elif kind is TokenKind.SEQUENCE_ENTRY:
            return self.parse_block_sequence()
        elif kind is TokenKind.ALIAS:
            raise self.error(
                ErrorKind.UNSUPPORTED_FEATURE, "Aliases are not supported"
            )
        elif kind in (TokenKind.LITERAL_BLOCK, TokenKind.FOLDED_BLOCK):
            raise self.error(
                ErrorKind.UNSUPPORTED_FEATURE, "Block scalars are not supported"
            )
        elif self.config.strict and kind is TokenKind.DOCUMENT_START:
            raise self.error(
                ErrorKind.INVALID_DOCUMENT_START,
                "Document start marker in value position",
            )
        elif self.config.strict and kind is TokenKind.DOCUMENT_END:
            raise self.error(
                ErrorKind.INVALID_DOCUMENT_END,
                "Document end marker in value position",
            )
        return self.parse_block_mapping()

    def _string_content(self, token: Token) -> str:
        if token.kind is TokenKind.QUOTED_SCALAR:
            content = token.value[1:-1]
        else:
            content = token.value
        limit = self.config.max_scalar_length
        if len(content) > limit:
            raise self.error(
                ErrorKind.CAPACITY_EXCEEDED,
                f"String exceeds maximum length of {limit}",
                token,
            )
        return content

    def parse_string(self) -> String:
        """Parses a plain or quoted scalar; strips quotes, keeps escapes."""
        token = self.current
        self.advance_token()
        return String(self._string_content(token))

    def _parse_key(self) -> tuple[str, Token]:
        token = self.current
        while token.kind in _NODE_PROPERTIES:
            token = self.advance_token()
        if token.kind not in _STRING_TOKENS:
            raise self.error(
                ErrorKind.UNEXPECTED_TOKEN, "Expecting key", token
            )
        self.advance_token()
        return self._string_content(token), token

    def parse_integer(self) -> Int:
        token = self.current
        self.advance_token()
        try:
            return Int(int(token.value))
        except (ValueError, OverflowError) as exc:
            raise self.error(
                ErrorKind.CAPACITY_EXCEEDED,
                "Integer out of 64-bit range",
                token,
            ) from exc

    def parse_float(self) -> Float:
        token = self.current
        self.advance_token()
        value = float(token.value)
        if not math.isfinite(value):
            raise self.error(
                ErrorKind.CAPACITY_EXCEEDED, "Float out of range", token
            )
        return Float(value)

    def parse_flow_sequence(self) -> Sequence:
        """Parses [a, b, ...]."""
        with ProfileContext("parse_flow_sequence"):
            open_token = self.current
            self.advance_token()
            seq = Sequence(capacity=self.config.max_entries)
            strict = self.config.strict
            after_separator = False

            with self._nested(open_token):
                while True:
                    token = self.current
                    if token.kind is TokenKind.FLOW_SEQUENCE_END:
                        if strict and after_separator:
                            raise self.error(
                                ErrorKind.UNEXPECTED_TOKEN,
                                "Illegal trailing comma before end of sequence",
                            )
                        self.advance_token()
                        break
                    if token.kind is TokenKind.END:
                        if strict:
                            raise self.error(
                                ErrorKind.INVALID_SYNTAX,
                                "Unterminated flow sequence",
                                open_token,
                            )
                        logger.debug("Closing flow sequence at end of input")
                        break
                    if token.kind is TokenKind.SEPARATOR:
                        if strict:
                            raise self.error(
                                ErrorKind.UNEXPECTED_TOKEN, "Expecting value"
                            )
                        self.advance_token()
                        continue
                    if strict and len(seq) and not after_separator:
                        raise self.error(
                            ErrorKind.UNEXPECTED_TOKEN,
                            "Expecting ',' delimiter",
                        )

                    before = self.index
                    value = self.parse_value()
                    if self.index == before:
                        raise self.error(
                            ErrorKind.UNEXPECTED_TOKEN, "Expecting value"
                        )
                    self._append(seq, value, token)

                    after_separator = False
                    if self.current.kind is TokenKind.SEPARATOR:
                        self.advance_token()
                        after_separator = True

            return seq

    def parse_flow_mapping(self) -> Mapping:
        """Parses {key: value, ...}."""
        with ProfileContext("parse_flow_mapping"):
            open_token = self.current
            self.advance_token()
            mapping = Mapping(capacity=self.config.max_entries)
            strict = self.config.strict
            after_separator = False

            with self._nested(open_token):
                while True:
                    token = self.current
                    if token.kind is TokenKind.FLOW_MAPPING_END:
                        if strict and after_separator:
                            raise self.error(
                                ErrorKind.UNEXPECTED_TOKEN,
                                "Illegal trailing comma before end of mapping",
                            )
                        self.advance_token()
                        break
                    if token.kind is TokenKind.END:
                        if strict:
                            raise self.error(
                                ErrorKind.INVALID_SYNTAX,
                                "Unterminated flow mapping",
                                open_token,
                            )
                        logger.debug("Closing flow mapping at end of input")
                        break
                    if token.kind is TokenKind.SEPARATOR:
                        if strict:
                            raise self.error(
                                ErrorKind.UNEXPECTED_TOKEN, "Expecting key"
                            )
                        self.advance_token()
                        continue
                    if strict and len(mapping) and not after_separator:
                        raise self.error(
                            ErrorKind.UNEXPECTED_TOKEN,
                            "Expecting ',' delimiter",
                        )

                    key, key_token = self._parse_key()
                    self.expect_token(TokenKind.COLON, ":")
                    value = self.parse_value()
                    self._insert(mapping, key, value, key_token)

                    after_separator = False
                    if self.current.kind is TokenKind.SEPARATOR:
                        self.advance_token()
                        after_separator = True

            return mapping

    def parse_block_sequence(self) -> Sequence:
        """Parses consecutive '- value' entries."""
        with ProfileContext("parse_block_sequence"):
            seq = Sequence(capacity=self.config.max_entries)
            with self._nested(self.current):
                while self.current.kind is TokenKind.SEQUENCE_ENTRY:
                    entry = self.current
                    self.advance_token()
                    value = self.parse_value()
                    self._append(seq, value, entry)
            return seq

    def parse_block_mapping(self) -> Mapping:
        """Parses consecutive 'key: value' pairs."""
        with ProfileContext("parse_block_mapping"):
            mapping = Mapping(capacity=self.config.max_entries)
            with self._nested(self.current):
                while self.current.kind in _KEY_START_TOKENS:
                    key, key_token = self._parse_key()
                    self.expect_token(TokenKind.COLON, ":")
                    value = self.parse_value()
                    self._insert(mapping, key, value, key_token)

            if not mapping and self.config.strict:
                raise self._expecting_value()
            return mapping

