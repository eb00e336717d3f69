"""
Tokenizer tests.

Validates token classification, text spans, line/column tracking and the
lexical error cases.
"""

import pytest

import boundyaml
from boundyaml import ErrorKind
from boundyaml import TokenKind


def kinds(text: str) -> list[TokenKind]:
    return [token.kind for token in boundyaml.tokenize(text)]


def test_structural_tokens() -> None:
    """
    Validates single-character structural tokens and the END marker.
    """
    assert kinds("[{}]:") == [
        TokenKind.FLOW_SEQUENCE_START,
        TokenKind.FLOW_MAPPING_START,
        TokenKind.FLOW_MAPPING_END,
        TokenKind.FLOW_SEQUENCE_END,
        TokenKind.COLON,
        TokenKind.END,
    ]


def test_document_markers_and_entries() -> None:
    """
    Validates '---', '...' and '- ' recognition.
    """
    assert kinds("---\n- a\n...") == [
        TokenKind.DOCUMENT_START,
        TokenKind.NEWLINE,
        TokenKind.SEQUENCE_ENTRY,
        TokenKind.PLAIN_SCALAR,
        TokenKind.NEWLINE,
        TokenKind.DOCUMENT_END,
        TokenKind.END,
    ]


def test_entry_marker_at_end_of_input() -> None:
    """
    Validates a trailing dash is an entry marker.
    """
    assert kinds("-") == [TokenKind.SEQUENCE_ENTRY, TokenKind.END]


@pytest.mark.parametrize(
    "text,kind",
    [
        ("0", TokenKind.INTEGER),
        ("-12", TokenKind.INTEGER),
        ("+12", TokenKind.INTEGER),
        ("1.5", TokenKind.FLOAT),
        ("1e9", TokenKind.FLOAT),
        ("1.5E-3", TokenKind.FLOAT),
        ("true", TokenKind.BOOLEAN),
        ("false", TokenKind.BOOLEAN),
        ("null", TokenKind.NULL),
        ("~", TokenKind.NULL),
        ("name", TokenKind.PLAIN_SCALAR),
        ("_private", TokenKind.PLAIN_SCALAR),
        ("snake_case-and-dash", TokenKind.PLAIN_SCALAR),
        ("True", TokenKind.PLAIN_SCALAR),
        ('"double"', TokenKind.QUOTED_SCALAR),
        ("'single'", TokenKind.QUOTED_SCALAR),
        ("&anchor", TokenKind.ANCHOR),
        ("*alias", TokenKind.ALIAS),
        ("!tag", TokenKind.TAG),
        ("!!str", TokenKind.TAG),
        ("|", TokenKind.LITERAL_BLOCK),
        (">", TokenKind.FOLDED_BLOCK),
    ],
)
def test_scalar_classification(text: str, kind: TokenKind) -> None:
    """
    Validates the kind assigned to each leading character class.
    """
    tokens = boundyaml.tokenize(text)
    assert [t.kind for t in tokens] == [kind, TokenKind.END]
    assert tokens[0].value == text


def test_token_spans_and_positions() -> None:
    """
    Validates start/end offsets and 1-based line/column of each token.
    """
    tokens = boundyaml.tokenize("a: 1\n  b: 'x'")
    summary = [
        (t.kind, t.value, t.start, t.end, t.line, t.column) for t in tokens
    ]
    assert summary == [
        (TokenKind.PLAIN_SCALAR, "a", 0, 1, 1, 1),
        (TokenKind.COLON, ":", 1, 2, 1, 2),
        (TokenKind.INTEGER, "1", 3, 4, 1, 4),
        (TokenKind.NEWLINE, "\n", 4, 5, 1, 5),
        (TokenKind.PLAIN_SCALAR, "b", 7, 8, 2, 3),
        (TokenKind.COLON, ":", 8, 9, 2, 4),
        (TokenKind.QUOTED_SCALAR, "'x'", 10, 13, 2, 6),
        (TokenKind.END, "", 13, 13, 2, 9),
    ]


def test_multiline_quoted_scalar_positions() -> None:
    """
    Validates line tracking continues through newlines inside quotes.
    """
    tokens = boundyaml.tokenize('"a\nb" c')
    assert tokens[1].kind is TokenKind.PLAIN_SCALAR
    assert (tokens[1].line, tokens[1].column) == (2, 4)


def test_comments_skipped() -> None:
    """
    Validates comments run to end of line and keep the newline token.
    """
    assert kinds("a # comment: [x]\n# whole line\nb") == [
        TokenKind.PLAIN_SCALAR,
        TokenKind.NEWLINE,
        TokenKind.NEWLINE,
        TokenKind.PLAIN_SCALAR,
        TokenKind.END,
    ]


def test_separator_only_in_flow_context() -> None:
    """
    Validates ',' is a separator inside brackets and an error outside.
    """
    assert kinds("[a, {b: c}, d]").count(TokenKind.SEPARATOR) == 2

    with pytest.raises(boundyaml.YAMLDecodeError) as exc_info:
        boundyaml.tokenize("[a], b")
    assert exc_info.value.kind is ErrorKind.UNEXPECTED_TOKEN
    assert exc_info.value.pos == 3


def test_quoted_scalar_escape_skipping() -> None:
    """
    Validates a backslash hides the next character from the quote scan.
    """
    tokens = boundyaml.tokenize(r"'it\'s' x")
    assert tokens[0].value == r"'it\'s'"
    assert tokens[1].value == "x"


def test_number_then_word_split() -> None:
    """
    Validates a number scan stops at the first non-numeric character.
    """
    tokens = boundyaml.tokenize("8080abc")
    assert [(t.kind, t.value) for t in tokens[:2]] == [
        (TokenKind.INTEGER, "8080"),
        (TokenKind.PLAIN_SCALAR, "abc"),
    ]


def test_tag_runs_to_whitespace() -> None:
    """
    Validates a tag consumes everything up to the next blank.
    """
    tokens = boundyaml.tokenize("!custom:type[1] value")
    assert tokens[0].value == "!custom:type[1]"
    assert tokens[1].kind is TokenKind.PLAIN_SCALAR


@pytest.mark.parametrize(
    "text,kind,pos",
    [
        ("'open", ErrorKind.UNTERMINATED_STRING, 0),
        ('k: "a\\"', ErrorKind.UNTERMINATED_STRING, 3),
        ("--x", ErrorKind.UNEXPECTED_TOKEN, 0),
        ("-.5", ErrorKind.UNEXPECTED_TOKEN, 0),
        ("..", ErrorKind.UNEXPECTED_TOKEN, 0),
        ("+a", ErrorKind.UNEXPECTED_TOKEN, 0),
        ("a ? b", ErrorKind.UNEXPECTED_TOKEN, 2),
        ("2e+", ErrorKind.INVALID_SYNTAX, 0),
        ("*", ErrorKind.INVALID_SYNTAX, 0),
    ],
)
def test_lexical_errors(text: str, kind: ErrorKind, pos: int) -> None:
    """
    Validates lexical errors carry their kind and offending offset.
    """
    with pytest.raises(boundyaml.YAMLDecodeError) as exc_info:
        boundyaml.tokenize(text)
    assert exc_info.value.kind is kind
    assert exc_info.value.pos == pos


def test_token_limit_counts_end_marker() -> None:
    """
    Validates the END token counts against max_tokens and overflow is an
    error instead of a silently truncated stream.
    """
    limits = boundyaml.ParseConfig(max_tokens=4)
    assert len(boundyaml.tokenize("[1]", limits)) == 4

    with pytest.raises(boundyaml.YAMLDecodeError) as exc_info:
        boundyaml.tokenize("[1, 2]", limits)
    assert exc_info.value.kind is ErrorKind.CAPACITY_EXCEEDED
    assert exc_info.value.pos == 5
