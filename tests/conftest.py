"""
Pytest configuration and shared fixtures for boundyaml tests.

Provides immutable test data fixtures: documents that must parse, documents
that must fail with a specific error kind, and basic scalar cases.
"""

from dataclasses import dataclass
from typing import Any

import pytest

import boundyaml
from boundyaml import ErrorKind


@dataclass(frozen=True)
class YamlTestCase:
    """
    Immutable container for YAML test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None
    expected_kind: ErrorKind | None = None


@pytest.fixture
def small_limits() -> boundyaml.ParseConfig:
    """Tight bounds that make every capacity reachable with short inputs."""
    return boundyaml.ParseConfig(
        max_tokens=32, max_scalar_length=8, max_entries=3, max_depth=3
    )


@pytest.fixture
def yaml_fail_cases() -> list[YamlTestCase]:
    """
    Provides documents that must fail parsing under the default strict config.

    Each case names the single error kind the failure must be classified as.
    """
    cases = [
        ("empty document", "", ErrorKind.INVALID_SYNTAX),
        ("only a document start", "---", ErrorKind.INVALID_SYNTAX),
        ("only a comment", "# nothing here\n", ErrorKind.INVALID_SYNTAX),
        (
            "duplicate flow key",
            "{key: value, key: duplicate}",
            ErrorKind.DUPLICATE_KEY,
        ),
        ("duplicate block key", "a: 1\nb: 2\na: 3", ErrorKind.DUPLICATE_KEY),
        ("trailing comma", "[1, 2, 3,]", ErrorKind.UNEXPECTED_TOKEN),
        ("double comma", "[1,, 2]", ErrorKind.UNEXPECTED_TOKEN),
        ("leading comma", "[, 1]", ErrorKind.UNEXPECTED_TOKEN),
        ("missing comma", "[1 2]", ErrorKind.UNEXPECTED_TOKEN),
        ("mapping trailing comma", "{a: 1,}", ErrorKind.UNEXPECTED_TOKEN),
        ("mapping missing comma", "{a: 1 b: 2}", ErrorKind.UNEXPECTED_TOKEN),
        ("unclosed sequence", "[1, 2", ErrorKind.INVALID_SYNTAX),
        ("unclosed mapping", "{a: 1", ErrorKind.INVALID_SYNTAX),
        (
            "unterminated string",
            'key: "unterminated string',
            ErrorKind.UNTERMINATED_STRING,
        ),
        ("unterminated single", "'abc", ErrorKind.UNTERMINATED_STRING),
        ("missing key", ": invalid key", ErrorKind.UNEXPECTED_TOKEN),
        ("missing colon in flow", "{a 1}", ErrorKind.UNEXPECTED_TOKEN),
        ("non-string flow key", "{1: one}", ErrorKind.UNEXPECTED_TOKEN),
        ("missing value", "key:", ErrorKind.INVALID_SYNTAX),
        ("stray colon value", "key: :", ErrorKind.UNEXPECTED_TOKEN),
        ("extra data", "[1] [2]", ErrorKind.INVALID_SYNTAX),
        ("scalar then word", "key: value extra", ErrorKind.UNEXPECTED_TOKEN),
        (
            "content after end",
            "a: 1\n...\nb: 2",
            ErrorKind.INVALID_DOCUMENT_END,
        ),
        (
            "second document",
            "--- a\n--- b",
            ErrorKind.UNSUPPORTED_FEATURE,
        ),
        (
            "start marker as value",
            "[---]",
            ErrorKind.INVALID_DOCUMENT_START,
        ),
        ("end marker as value", "key: ...", ErrorKind.INVALID_DOCUMENT_END),
        ("alias", "key: *ref", ErrorKind.UNSUPPORTED_FEATURE),
        ("literal block", "text: |", ErrorKind.UNSUPPORTED_FEATURE),
        ("folded block", "text: >", ErrorKind.UNSUPPORTED_FEATURE),
        ("lone dot", "key: .5", ErrorKind.UNEXPECTED_TOKEN),
        ("dash without space", "-abc", ErrorKind.UNEXPECTED_TOKEN),
        ("comma outside flow", "a, b", ErrorKind.UNEXPECTED_TOKEN),
        ("unknown character", "key: @value", ErrorKind.UNEXPECTED_TOKEN),
        ("bad exponent", "1e", ErrorKind.INVALID_SYNTAX),
        ("empty anchor", "& value", ErrorKind.INVALID_SYNTAX),
        (
            "integer overflow",
            "9223372036854775808",
            ErrorKind.CAPACITY_EXCEEDED,
        ),
        ("float overflow", "1e400", ErrorKind.CAPACITY_EXCEEDED),
        ("mismatched close", "[1, 2}", ErrorKind.UNEXPECTED_TOKEN),
    ]
    return [
        YamlTestCase(
            description=description,
            input_data=doc,
            should_fail=True,
            expected_kind=kind,
        )
        for description, doc, kind in cases
    ]


@pytest.fixture
def yaml_pass_cases() -> list[YamlTestCase]:
    """
    Provides documents that must parse under the default strict config,
    with their plain Python rendition.
    """
    return [
        YamlTestCase(
            "flat block mapping",
            'name: "john doe"\nage: 30\nactive: true\n',
            expected_output={"name": "john doe", "age": 30, "active": True},
        ),
        YamlTestCase(
            "flow mapping",
            '{name: "test", count: 42}',
            expected_output={"name": "test", "count": 42},
        ),
        YamlTestCase(
            "flow sequence",
            "[1, 2, 3, 4, 5]",
            expected_output=[1, 2, 3, 4, 5],
        ),
        YamlTestCase(
            "block sequence",
            "- alpha\n- beta\n- 3\n",
            expected_output=["alpha", "beta", 3],
        ),
        YamlTestCase(
            "document markers",
            "---\nkey: value\n...\n",
            expected_output={"key": "value"},
        ),
        YamlTestCase(
            "comments everywhere",
            "# header\nport: 8080 # inline\n# footer\n",
            expected_output={"port": 8080},
        ),
        YamlTestCase(
            "nested flow collections",
            "{servers: [{host: alpha, port: 1}, {host: beta, port: 2}]}",
            expected_output={
                "servers": [
                    {"host": "alpha", "port": 1},
                    {"host": "beta", "port": 2},
                ]
            },
        ),
        YamlTestCase(
            "block mapping with flow values",
            "tags: [a, b]\nlimits: {cpu: 2, memory: 512}\n",
            expected_output={
                "tags": ["a", "b"],
                "limits": {"cpu": 2, "memory": 512},
            },
        ),
        YamlTestCase(
            "block sequence of flow mappings",
            "- {name: alice, age: 25}\n- {name: bob, age: 30}\n",
            expected_output=[
                {"name": "alice", "age": 25},
                {"name": "bob", "age": 30},
            ],
        ),
        YamlTestCase(
            "multi-line flow sequence",
            "[\n  1,\n  2,\n  3\n]\n",
            expected_output=[1, 2, 3],
        ),
        YamlTestCase(
            "anchors and tags are ignored",
            "base: &base {a: 1}\ncount: !!int 3\n",
            expected_output={"base": {"a": 1}, "count": 3},
        ),
        YamlTestCase(
            "anchors before later keys",
            "name: svc\n&port port: 80\n"
            "limits: {&cpu cpu: 2, !mem mem: 512}\n",
            expected_output={
                "name": "svc",
                "port": 80,
                "limits": {"cpu": 2, "mem": 512},
            },
        ),
        YamlTestCase(
            "quoted keys and values",
            "'single': \"double\"",
            expected_output={"single": "double"},
        ),
        YamlTestCase(
            "crlf line endings",
            "a: 1\r\nb: 2\r\n",
            expected_output={"a": 1, "b": 2},
        ),
    ]


@pytest.fixture
def basic_yaml_values() -> list[YamlTestCase]:
    """
    Provides bare scalar and empty container cases.
    """
    return [
        YamlTestCase("null keyword", "null", False, None),
        YamlTestCase("tilde null", "~", False, None),
        YamlTestCase("true boolean", "true", False, True),
        YamlTestCase("false boolean", "false", False, False),
        YamlTestCase("integer", "42", False, 42),
        YamlTestCase("negative integer", "-7", False, -7),
        YamlTestCase("explicit plus", "+7", False, 7),
        YamlTestCase("float", "3.14", False, 3.14),
        YamlTestCase("negative float", "-0.5", False, -0.5),
        YamlTestCase("plain string", "hello", False, "hello"),
        YamlTestCase("quoted string", '"test"', False, "test"),
        YamlTestCase("empty quoted string", "''", False, ""),
        YamlTestCase("empty sequence", "[]", False, []),
        YamlTestCase("empty mapping", "{}", False, {}),
    ]
