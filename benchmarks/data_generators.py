"""
Test data generators for YAML parsing benchmarks.

Creates documents inside the supported subset that PyYAML reads as well:
- Different sizes (small/large)
- Different shapes (block mappings, flow sequences, nesting)
- String-heavy content with quoted scalars
"""

import random
import string
from typing import Any

import boundyaml

# Constants for random data generation
_INT_TYPE = 1
_FLOAT_TYPE = 2
_STRING_TYPE = 3
_BOOL_TYPE = 4
_NULL_TYPE = 5

# Bounds generous enough for every generated document
BENCHMARK_LIMITS = boundyaml.ParseConfig(
    max_tokens=200_000,
    max_scalar_length=4_096,
    max_entries=4_096,
    max_depth=64,
)

DATA_TYPES = [
    "small_config",
    "large_config",
    "mixed_sequence",
    "nested_structure",
    "string_heavy",
]


def generate_test_data(data_type: str) -> str:
    """Generates YAML test data based on specified type."""
    generators = {
        "small_config": _generate_small_config,
        "large_config": _generate_large_config,
        "mixed_sequence": _generate_mixed_sequence,
        "nested_structure": _generate_nested_structure,
        "string_heavy": _generate_string_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type]()


def _block_mapping(data: dict[str, Any]) -> str:
    """Renders top-level keys as a block mapping with flow-style values."""
    lines = [
        f"{key}: {boundyaml.dumps(value, sort_keys=True)}"
        for key, value in data.items()
    ]
    return "\n".join(lines) + "\n"


def _generate_small_config() -> str:
    """Generates a small service configuration (< 1KB)."""
    data = {
        "service": "gateway",
        "replicas": 3,
        "debug": False,
        "timeout": 2.5,
        "listen": {"host": "0.0.0.0", "port": 8443},
        "tags": ["edge", "public"],
    }
    return "# service definition\n" + _block_mapping(data)


def _generate_large_config() -> str:
    """Generates a large configuration (> 10KB) with many sections."""
    data: dict[str, Any] = {
        "cluster": _random_string(12),
        "region": random.choice(["us-east", "eu-west", "ap-south"]),
    }
    for i in range(40):
        data[f"worker_{i:03d}"] = {
            "host": f"{_random_string(8)}-{i}",
            "port": random.randint(1024, 65535),
            "weight": round(random.uniform(0.0, 1.0), 3),
            "enabled": random.choice([True, False]),
            "labels": [_random_string(6) for _ in range(5)],
            "owner": None,
        }
    return "---\n" + _block_mapping(data) + "...\n"


def _generate_mixed_sequence() -> str:
    """Generates a block sequence with mixed scalar and mapping entries."""
    entries: list[str] = []

    for i in range(200):
        choice = random.randint(1, 6)
        if choice == _INT_TYPE:
            value: Any = random.randint(-1000, 1000)
        elif choice == _FLOAT_TYPE:
            value = round(random.uniform(-100.0, 100.0), 3)
        elif choice == _STRING_TYPE:
            value = _random_string(random.randint(5, 30))
        elif choice == _BOOL_TYPE:
            value = random.choice([True, False])
        elif choice == _NULL_TYPE:
            value = None
        else:
            value = {
                "index": i,
                "value": _random_string(10),
                "score": round(random.uniform(0, 100), 2),
            }
        entries.append(f"- {boundyaml.dumps(value)}")

    return "\n".join(entries) + "\n"


def _generate_nested_structure() -> str:
    """Generates a deeply nested flow mapping."""

    def create_nested_dict(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(10)}

        return {
            "level": depth,
            "data": _random_string(15),
            "items": [create_nested_dict(depth - 1) for _ in range(2)],
            "nested": create_nested_dict(depth - 1),
        }

    return boundyaml.dumps(create_nested_dict(7))


def _generate_string_heavy() -> str:
    """Generates a document dominated by quoted scalars."""

    def create_quoted_string() -> str:
        alphabet = string.ascii_letters + string.digits + " :#,[]{}"
        return "".join(random.choices(alphabet, k=60))

    data = {
        "messages": [create_quoted_string() for _ in range(100)],
        "templates": {
            f"key_{i}": {
                "subject": create_quoted_string(),
                "body": "Content with: colons, commas and # hashes",
            }
            for i in range(20)
        },
    }
    return _block_mapping(data)


def _random_string(length: int) -> str:
    """Generates a random string of specified length."""
    return "".join(random.choices(string.ascii_letters, k=length))
