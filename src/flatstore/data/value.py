"""Closed set of value kinds a store can hold.

Every value that enters a FileData is classified with kind_of() first, so the
tree never contains anything outside these kinds. Consumers dispatch on the
ValueKind instead of probing arbitrary Python types.
"""
from enum import Enum
from typing import Any


class ValueKind(Enum):
    BOOLEAN = 'boolean'
    INTEGER = 'integer'
    FLOAT = 'float'
    STRING = 'string'
    BYTES = 'bytes'
    SEQUENCE = 'sequence'
    MAPPING = 'mapping'

    @property
    def is_scalar(self) -> bool:
        return self not in (ValueKind.SEQUENCE, ValueKind.MAPPING)


def kind_of(value: Any) -> ValueKind:
    """Classify a value into its ValueKind.

    bool is checked before int because bool is an int subclass.

    Raises:
        TypeError: value is None or of an unsupported type
    """
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (bytes, bytearray)):
        return ValueKind.BYTES
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, dict):
        return ValueKind.MAPPING
    raise TypeError(f"Unsupported value type {type(value).__name__}: {value!r}")


def copy_value(value: Any) -> Any:
    """Deep-copy a value into the canonical in-tree representation.

    Tuples become lists, bytearrays become bytes and mappings become plain
    dicts. Nested values are validated as they are copied.
    """
    kind = kind_of(value)
    if kind is ValueKind.SEQUENCE:
        return [copy_value(item) for item in value]
    if kind is ValueKind.MAPPING:
        return {str(k): copy_value(v) for k, v in value.items()}
    if kind is ValueKind.BYTES:
        return bytes(value)
    return value


def same_value(a: Any, b: Any) -> bool:
    """Compare two in-tree values, treating different kinds as unequal.

    Plain == would consider True equal to 1 and 1 equal to 1.0.
    """
    kind_a = kind_of(a)
    if kind_a is not kind_of(b):
        return False
    if kind_a is ValueKind.SEQUENCE:
        return len(a) == len(b) and all(same_value(x, y) for x, y in zip(a, b))
    if kind_a is ValueKind.MAPPING:
        return a.keys() == b.keys() and all(same_value(a[k], b[k]) for k in a)
    return a == b
