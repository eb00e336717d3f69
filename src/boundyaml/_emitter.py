"""
Flow-style emitter for the YAML subset.

Produces text the parser reads back into an equal tree. Because quoted
scalars are never escape-decoded, a string is emitted raw between quotes,
and strings that cannot be quoted that way are rejected.
"""

import math
import re
from typing import Any

from ._config import EncodeConfig
from ._values import INT64_MAX
from ._values import INT64_MIN
from ._values import Document
from ._values import Value

_PLAIN_SCALAR = re.compile(r"[A-Za-z_][A-Za-z0-9_-]*")
_RESERVED_WORDS = frozenset({"true", "false", "null"})


def _encode_string(s: str) -> str:
    """Emits s plain when it reads back as a string, quoted otherwise."""
    if _PLAIN_SCALAR.fullmatch(s) and s not in _RESERVED_WORDS:
        return s

    trailing_backslashes = len(s) - len(s.rstrip("\\"))
    if trailing_backslashes % 2:
        msg = f"String {s!r} ends with an unpaired backslash"
        raise ValueError(msg)

    if '"' not in s:
        return f'"{s}"'
    if "'" not in s:
        return f"'{s}'"
    msg = f"String {s!r} contains both quote characters"
    raise ValueError(msg)


def _encode_number(n: int | float) -> str:
    if isinstance(n, float):
        if not math.isfinite(n):
            msg = "Out of range float values are not representable"
            raise ValueError(msg)
        return repr(n)
    if not INT64_MIN <= n <= INT64_MAX:
        msg = f"Integer {n} is outside the 64-bit range"
        raise ValueError(msg)
    return str(n)


def _encode_sequence(
    items: list[Any] | tuple[Any, ...], config: EncodeConfig
) -> str:
    encoded_items = [_encode_value(item, config) for item in items]
    return "[" + ", ".join(encoded_items) + "]"


def _encode_mapping(d: dict[Any, Any], config: EncodeConfig) -> str:
    items = []
    for key, value in d.items():
        if not isinstance(key, str):
            if config.skipkeys:
                continue
            msg = f"keys must be str, not {type(key).__name__}"
            raise TypeError(msg)
        items.append((key, _encode_value(value, config)))

    if config.sort_keys:
        items.sort(key=lambda item: item[0])

    pairs = [f"{_encode_string(key)}: {value}" for key, value in items]
    return "{" + ", ".join(pairs) + "}"


def _encode_value(obj: Any, config: EncodeConfig) -> str:  # noqa: PLR0911
    if isinstance(obj, Document | Value):
        obj = obj.to_python()

    if obj is None:
        return "null"
    elif obj is True:
        return "true"
    elif obj is False:
        return "false"
    elif isinstance(obj, str):
        return _encode_string(obj)
    elif isinstance(obj, int | float):
        return _encode_number(obj)
    elif isinstance(obj, dict):
        return _encode_mapping(obj, config)
    elif isinstance(obj, list | tuple):
        return _encode_sequence(obj, config)
    elif config.default is not None:
        return _encode_value(config.default(obj), config)
    msg = f"Object of type {type(obj).__name__} is not YAML serializable"
    raise TypeError(msg)


def emit(obj: Any, config: EncodeConfig | None = None) -> str:
    """Serializes obj as a single flow-style document."""
    config = config or EncodeConfig()
    text = _encode_value(obj, config)
    return f"--- {text}" if config.explicit_start else text
