"""
Tokenizer for the YAML subset.

Turns text into a bounded list of tokens with line/column tracking. The
token list never grows past ParseConfig.max_tokens; reaching the limit is
reported as CAPACITY_EXCEEDED rather than truncating the stream.
"""

from dataclasses import dataclass
from enum import Enum

from ._config import ParseConfig
from ._errors import ErrorKind
from ._errors import Position
from ._errors import YAMLDecodeError
from ._profiling import ProfileContext

_DIGITS = frozenset("0123456789")
_BLANKS = frozenset(" \t\r")
_ENTRY_FOLLOWERS = frozenset(" \t\r\n")


def _is_digit(char: str) -> bool:
    return char in _DIGITS


def _is_name_start(char: str) -> bool:
    return char == "_" or char.isalpha()


def _is_name_char(char: str) -> bool:
    return char in _DIGITS or char in "_-" or char.isalpha()


class TokenKind(Enum):
    """Closed set of token kinds produced by the tokenizer."""

    END = "end"
    NEWLINE = "newline"
    DOCUMENT_START = "document_start"
    DOCUMENT_END = "document_end"
    SEQUENCE_ENTRY = "sequence_entry"
    COLON = "colon"
    FLOW_SEQUENCE_START = "flow_sequence_start"
    FLOW_SEQUENCE_END = "flow_sequence_end"
    FLOW_MAPPING_START = "flow_mapping_start"
    FLOW_MAPPING_END = "flow_mapping_end"
    SEPARATOR = "separator"
    PLAIN_SCALAR = "plain_scalar"
    QUOTED_SCALAR = "quoted_scalar"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    NULL = "null"
    ANCHOR = "anchor"
    ALIAS = "alias"
    TAG = "tag"
    LITERAL_BLOCK = "literal_block"
    FOLDED_BLOCK = "folded_block"


_SINGLE_CHAR_TOKENS = {
    ":": TokenKind.COLON,
    "[": TokenKind.FLOW_SEQUENCE_START,
    "]": TokenKind.FLOW_SEQUENCE_END,
    "{": TokenKind.FLOW_MAPPING_START,
    "}": TokenKind.FLOW_MAPPING_END,
    "|": TokenKind.LITERAL_BLOCK,
    ">": TokenKind.FOLDED_BLOCK,
}

_KEYWORDS = {
    "true": TokenKind.BOOLEAN,
    "false": TokenKind.BOOLEAN,
    "null": TokenKind.NULL,
}


@dataclass(frozen=True, slots=True)
class Token:
    """
    A token with the slice of input it covers and its source position.

    line and column are 1-based and refer to the first character.
    """

    kind: TokenKind
    value: str
    start: Position
    end: Position
    line: int
    column: int


class Lexer:
    """
    Scans YAML subset text into tokens.

    Character-by-character scanning with one character of lookahead, plus
    the three-character lookahead needed for document markers.
    """

    def __init__(self, text: str, config: ParseConfig | None = None):
        self.text = text
        self.config = config or ParseConfig()
        self.pos = 0
        self.length = len(text)
        self.line = 1
        self.column = 1
        self.flow_depth = 0

    def peek(self, offset: int = 0) -> str:
        """Returns the character at pos + offset, or NUL past the end."""
        index = self.pos + offset
        return self.text[index] if index < self.length else "\0"

    def at_end(self) -> bool:
        return self.pos >= self.length

    def advance(self) -> str:
        """Returns current character and advances, tracking line/column."""
        if self.pos >= self.length:
            return "\0"
        char = self.text[self.pos]
        self.pos += 1
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return char

    def error(
        self, kind: ErrorKind, msg: str, pos: Position
    ) -> YAMLDecodeError:
        return YAMLDecodeError(kind, msg, self.text, pos)

    def _make(
        self, kind: TokenKind, start: Position, line: int, column: int
    ) -> Token:
        value = self.text[start : self.pos]
        return Token(kind, value, start, self.pos, line, column)

    def skip_blanks_and_comments(self) -> None:
        """Skips spaces, tabs, carriage returns and comments up to a newline."""
        with ProfileContext("skip_blanks_and_comments"):
            while self.pos < self.length:
                char = self.text[self.pos]
                if char in _BLANKS:
                    self.advance()
                elif char == "#":
                    end = self.text.find("\n", self.pos)
                    end = self.length if end == -1 else end
                    self.column += end - self.pos
                    self.pos = end
                else:
                    break

    def tokenize(self) -> list[Token]:
        """
        Scans the whole input and returns the token list ending with END.

        Raises YAMLDecodeError on the first lexical error, or with
        CAPACITY_EXCEEDED when the stream would exceed max_tokens.
        """
        with ProfileContext("tokenize", self.length):
            tokens: list[Token] = []
            limit = self.config.max_tokens
            while True:
                self.skip_blanks_and_comments()
                if self.at_end():
                    token = Token(
                        TokenKind.END,
                        "",
                        self.pos,
                        self.pos,
                        self.line,
                        self.column,
                    )
                else:
                    token = self.next_token()
                if len(tokens) >= limit:
                    raise self.error(
                        ErrorKind.CAPACITY_EXCEEDED,
                        f"Token stream exceeds maximum of {limit} tokens",
                        token.start,
                    )
                tokens.append(token)
                if token.kind is TokenKind.END:
                    return tokens

    def next_token(self) -> Token:
        """Scans one token starting at a non-blank character."""
        char = self.peek()
        start = self.pos
        line, column = self.line, self.column

        if char == "\n":
            self.advance()
            return self._make(TokenKind.NEWLINE, start, line, column)

        if char == "-":
            if self.peek(1) == "-" and self.peek(2) == "-":
                self.pos += 3
                self.column += 3
                return self._make(TokenKind.DOCUMENT_START, start, line, column)
            follower = self.peek(1)
            if follower in _ENTRY_FOLLOWERS or self.pos + 1 >= self.length:
                self.advance()
                return self._make(TokenKind.SEQUENCE_ENTRY, start, line, column)
            if _is_digit(follower):
                return self.scan_number()
            raise self.error(
                ErrorKind.UNEXPECTED_TOKEN, "Unexpected '-'", start
            )

        if char == ".":
            if self.peek(1) == "." and self.peek(2) == ".":
                self.pos += 3
                self.column += 3
                return self._make(TokenKind.DOCUMENT_END, start, line, column)
            raise self.error(
                ErrorKind.UNEXPECTED_TOKEN, "Unexpected '.'", start
            )

        if char in _SINGLE_CHAR_TOKENS:
            self.advance()
            if char in "[{":
                self.flow_depth += 1
            elif char in "]}" and self.flow_depth:
                self.flow_depth -= 1
            return self._make(_SINGLE_CHAR_TOKENS[char], start, line, column)

        if char == ",":
            if not self.flow_depth:
                raise self.error(
                    ErrorKind.UNEXPECTED_TOKEN,
                    "Separator outside of a flow collection",
                    start,
                )
            self.advance()
            return self._make(TokenKind.SEPARATOR, start, line, column)

        if char in "\"'":
            return self.scan_quoted()

        if char == "&":
            return self.scan_name(TokenKind.ANCHOR, "anchor")

        if char == "*":
            return self.scan_name(TokenKind.ALIAS, "alias")

        if char == "!":
            return self.scan_tag()

        if char == "~":
            self.advance()
            return self._make(TokenKind.NULL, start, line, column)

        if _is_digit(char) or (char == "+" and _is_digit(self.peek(1))):
            return self.scan_number()

        if _is_name_start(char):
            return self.scan_identifier()

        raise self.error(
            ErrorKind.UNEXPECTED_TOKEN, f"Unexpected character {char!r}", start
        )

    def scan_quoted(self) -> Token:
        """
        Scans a single- or double-quoted scalar including its quotes.

        A backslash skips the following character; escapes are not decoded.
        """
        with ProfileContext("scan_quoted"):
            start = self.pos
            line, column = self.line, self.column
            quote = self.advance()

            while self.pos < self.length:
                char = self.advance()
                if char == quote:
                    return self._make(
                        TokenKind.QUOTED_SCALAR, start, line, column
                    )
                if char == "\\":
                    self.advance()

            raise self.error(
                ErrorKind.UNTERMINATED_STRING,
                "Unterminated string starting at",
                start,
            )

    def _scan_digits(self) -> int:
        count = 0
        while _is_digit(self.peek()):
            self.advance()
            count += 1
        return count

    def scan_number(self) -> Token:
        """Scans an integer or float literal with an optional sign."""
        with ProfileContext("scan_number"):
            start = self.pos
            line, column = self.line, self.column
            is_float = False

            if self.peek() in "+-":
                self.advance()
            self._scan_digits()

            if self.peek() == ".":
                is_float = True
                self.advance()
                self._scan_digits()

            if self.peek() in ("e", "E"):
                is_float = True
                self.advance()
                if self.peek() in "+-":
                    self.advance()
                if not self._scan_digits():
                    raise self.error(
                        ErrorKind.INVALID_SYNTAX, "Invalid exponent", start
                    )

            kind = TokenKind.FLOAT if is_float else TokenKind.INTEGER
            return self._make(kind, start, line, column)

    def scan_identifier(self) -> Token:
        """Scans a bare word and classifies boolean and null keywords."""
        with ProfileContext("scan_identifier"):
            start = self.pos
            line, column = self.line, self.column
            while _is_name_char(self.peek()):
                self.advance()
            word = self.text[start : self.pos]
            kind = _KEYWORDS.get(word, TokenKind.PLAIN_SCALAR)
            return self._make(kind, start, line, column)

    def scan_name(self, kind: TokenKind, label: str) -> Token:
        """Scans an anchor or alias: a sigil followed by a name run."""
        start = self.pos
        line, column = self.line, self.column
        self.advance()
        while _is_name_char(self.peek()):
            self.advance()
        if self.pos - start == 1:
            raise self.error(
                ErrorKind.INVALID_SYNTAX, f"Empty {label} name", start
            )
        return self._make(kind, start, line, column)

    def scan_tag(self) -> Token:
        """Scans a !tag or !!tag up to the next whitespace."""
        start = self.pos
        line, column = self.line, self.column
        self.advance()
        if self.peek() == "!":
            self.advance()
        while not self.at_end() and self.peek() not in " \t\r\n":
            self.advance()
        return self._make(TokenKind.TAG, start, line, column)
