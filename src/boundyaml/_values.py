"""
Recursive value model for parsed YAML documents.

A Value is one of a closed set of variants: Null, Bool, Int, Float, String,
Sequence and Mapping. Sequence and Mapping hold child Values and enforce
their entry capacity on every insertion.
"""

from collections.abc import Iterable
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any
from typing import ClassVar
from typing import Final

from ._config import DEFAULT_MAX_ENTRIES
from ._errors import ContainerError
from ._errors import ErrorKind

INT64_MIN: Final = -(2**63)
INT64_MAX: Final = 2**63 - 1

# Plain Python rendition of a value tree
PyValue = (
    str | int | float | bool | None | list["PyValue"] | dict[str, "PyValue"]
)


class ValueKind(Enum):
    """Type tag shared by every Value variant."""

    NULL = "null"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


class Value:
    """
    Base class of the value variants.

    The typed accessors raise TypeError unless the variant matches, so
    callers can extract scalars without isinstance chains.
    """

    __slots__ = ()
    kind: ClassVar[ValueKind]

    def _wrong_type(self, expected: str) -> TypeError:
        return TypeError(f"expected {expected} value, got {self.kind.value}")

    @property
    def is_null(self) -> bool:
        return self.kind is ValueKind.NULL

    def as_bool(self) -> bool:
        raise self._wrong_type("bool")

    def as_int(self) -> int:
        raise self._wrong_type("int")

    def as_float(self) -> float:
        raise self._wrong_type("float")

    def as_str(self) -> str:
        raise self._wrong_type("string")

    def as_sequence(self) -> "Sequence":
        raise self._wrong_type("sequence")

    def as_mapping(self) -> "Mapping":
        raise self._wrong_type("mapping")

    def to_python(self) -> PyValue:
        raise NotImplementedError

    def seal(self) -> None:
        """Makes this value and everything below it read-only."""

    @property
    def sealed(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Null(Value):
    kind: ClassVar[ValueKind] = ValueKind.NULL

    def to_python(self) -> PyValue:
        return None


@dataclass(frozen=True, slots=True)
class Bool(Value):
    kind: ClassVar[ValueKind] = ValueKind.BOOL
    value: bool

    def as_bool(self) -> bool:
        return self.value

    def to_python(self) -> PyValue:
        return self.value


@dataclass(frozen=True, slots=True)
class Int(Value):
    """Signed 64-bit integer; out-of-range values raise OverflowError."""

    kind: ClassVar[ValueKind] = ValueKind.INT
    value: int

    def __post_init__(self) -> None:
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise OverflowError(f"{self.value} is outside the 64-bit range")

    def as_int(self) -> int:
        return self.value

    def as_float(self) -> float:
        return float(self.value)

    def to_python(self) -> PyValue:
        return self.value


@dataclass(frozen=True, slots=True)
class Float(Value):
    kind: ClassVar[ValueKind] = ValueKind.FLOAT
    value: float

    def as_float(self) -> float:
        return self.value

    def to_python(self) -> PyValue:
        return self.value


@dataclass(frozen=True, slots=True)
class String(Value):
    kind: ClassVar[ValueKind] = ValueKind.STRING
    value: str

    def as_str(self) -> str:
        return self.value

    def to_python(self) -> PyValue:
        return self.value


class Sequence(Value):
    """Ordered, capacity-bounded list of values."""

    __slots__ = ("_items", "_sealed", "capacity")
    kind: ClassVar[ValueKind] = ValueKind.SEQUENCE

    def __init__(
        self, items: Iterable[Value] = (), capacity: int = DEFAULT_MAX_ENTRIES
    ) -> None:
        self.capacity = capacity
        self._items: list[Value] = []
        self._sealed = False
        for item in items:
            self.append(item)

    def append(self, value: Value) -> None:
        """
        Appends value, raising ContainerError once capacity is reached.

        A sealed sequence raises TypeError.
        """
        if self._sealed:
            raise TypeError("cannot append to a sealed Sequence")
        if len(self._items) >= self.capacity:
            raise ContainerError(
                ErrorKind.CAPACITY_EXCEEDED,
                f"Sequence exceeds maximum of {self.capacity} entries",
            )
        self._items.append(value)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Value:
        return self._items[index]

    def __iter__(self) -> Iterator[Value]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Sequence({self._items!r})"

    def as_sequence(self) -> "Sequence":
        return self

    def to_python(self) -> PyValue:
        return [item.to_python() for item in self._items]

    def seal(self) -> None:
        self._sealed = True
        for item in self._items:
            item.seal()

    @property
    def sealed(self) -> bool:
        return self._sealed


class Mapping(Value):
    """
    Insertion-ordered, capacity-bounded mapping from string keys to values.

    Keys are compared by exact string equality. A hashed index backs the
    duplicate check, so insertion is O(1); iteration and indexed access
    follow insertion order, which is not part of equality.
    """

    __slots__ = ("_pairs", "_index", "_sealed", "capacity")
    kind: ClassVar[ValueKind] = ValueKind.MAPPING

    def __init__(
        self,
        pairs: Iterable[tuple[str, Value]] = (),
        capacity: int = DEFAULT_MAX_ENTRIES,
    ) -> None:
        self.capacity = capacity
        self._pairs: list[tuple[str, Value]] = []
        self._index: dict[str, int] = {}
        self._sealed = False
        for key, value in pairs:
            self.insert(key, value)

    def insert(self, key: str, value: Value) -> None:
        """
        Adds key with value.

        Raises ContainerError with DUPLICATE_KEY if key is already present,
        or CAPACITY_EXCEEDED if the mapping is full. A sealed mapping
        raises TypeError.
        """
        if self._sealed:
            raise TypeError("cannot insert into a sealed Mapping")
        if key in self._index:
            raise ContainerError(
                ErrorKind.DUPLICATE_KEY, f"Duplicate key {key!r}"
            )
        if len(self._pairs) >= self.capacity:
            raise ContainerError(
                ErrorKind.CAPACITY_EXCEEDED,
                f"Mapping exceeds maximum of {self.capacity} entries",
            )
        self._index[key] = len(self._pairs)
        self._pairs.append((key, value))

    def find(self, key: str) -> Value | None:
        position = self._index.get(key)
        return None if position is None else self._pairs[position][1]

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __len__(self) -> int:
        return len(self._pairs)

    def __getitem__(self, index: int) -> tuple[str, Value]:
        return self._pairs[index]

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self._pairs)

    def keys(self) -> list[str]:
        return [key for key, _ in self._pairs]

    def values(self) -> list[Value]:
        return [value for _, value in self._pairs]

    def items(self) -> list[tuple[str, Value]]:
        return list(self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return dict(self._pairs) == dict(other._pairs)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Mapping({self._pairs!r})"

    def as_mapping(self) -> "Mapping":
        return self

    def to_python(self) -> PyValue:
        return {key: value.to_python() for key, value in self._pairs}

    def seal(self) -> None:
        self._sealed = True
        for _, value in self._pairs:
            value.seal()

    @property
    def sealed(self) -> bool:
        return self._sealed


@dataclass(frozen=True)
class Document:
    """
    A parsed document; owns its root value.

    Building a Document seals the tree, so containers reachable from root
    refuse further appends and inserts.
    """

    root: Value

    def __post_init__(self) -> None:
        self.root.seal()

    def to_python(self) -> PyValue:
        return self.root.to_python()


def from_python(obj: Any, capacity: int = DEFAULT_MAX_ENTRIES) -> Value:
    """
    Builds a value tree from plain Python objects.

    Accepts the same shapes to_python produces; tuples count as sequences.
    """
    if obj is None:
        return Null()
    if isinstance(obj, Value):
        return obj
    if isinstance(obj, bool):
        return Bool(obj)
    if isinstance(obj, int):
        return Int(obj)
    if isinstance(obj, float):
        return Float(obj)
    if isinstance(obj, str):
        return String(obj)
    if isinstance(obj, list | tuple):
        return Sequence((from_python(item, capacity) for item in obj), capacity)
    if isinstance(obj, dict):
        pairs = []
        for key, item in obj.items():
            if not isinstance(key, str):
                msg = f"keys must be str, not {type(key).__name__}"
                raise TypeError(msg)
            pairs.append((key, from_python(item, capacity)))
        return Mapping(pairs, capacity)
    raise TypeError(f"Object of type {type(obj).__name__} is not a YAML value")
