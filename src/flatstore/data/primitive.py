"""Coercion of untyped stored values into requested scalar types."""
import math
from enum import Enum
from typing import Any

from .value import ValueKind, kind_of
from ..errors import CoercionError


class Primitive(Enum):
    """Scalar target types with their zero values and integer ranges.

    Each member is a (name, zero, bits) triple; bits is only meaningful for
    the integer family and selects the signed range the result must fit.
    """
    BOOLEAN = ('boolean', False, None)
    BYTE = ('byte', 0, 8)
    SHORT = ('short', 0, 16)
    INTEGER = ('integer', 0, 32)
    LONG = ('long', 0, 64)
    FLOAT = ('float', 0.0, None)
    DOUBLE = ('double', 0.0, None)
    STRING = ('string', '', None)

    def __init__(self, label: str, zero: Any, bits: int | None):
        self.label = label
        self.zero = zero
        self.bits = bits

    @classmethod
    def for_type(cls, target: type) -> 'Primitive':
        """Map a Python type to the Primitive that produces it.

        Raises:
            TypeError: No primitive produces instances of target
        """
        try:
            return _PRIMITIVE_BY_TYPE[target]
        except KeyError:
            raise TypeError(f"No primitive coercion for type {target.__name__}") from None

    def coerce(self, value: Any) -> Any:
        """Convert value to this primitive's type.

        Raises:
            CoercionError: value cannot be represented as this type
        """
        try:
            kind = kind_of(value)
        except TypeError:
            raise CoercionError(value, self.label) from None

        if self is Primitive.BOOLEAN:
            return self._to_boolean(value, kind)
        if self is Primitive.STRING:
            return self._to_string(value, kind)
        if self in (Primitive.FLOAT, Primitive.DOUBLE):
            return self._to_float(value, kind)
        return self._to_integer(value, kind)

    def _to_boolean(self, value, kind: ValueKind) -> bool:
        if kind is ValueKind.BOOLEAN:
            return value
        if kind in (ValueKind.INTEGER, ValueKind.FLOAT):
            return value != 0
        if kind is ValueKind.STRING:
            lowered = value.strip().lower()
            if lowered == 'true':
                return True
            if lowered == 'false':
                return False
        raise CoercionError(value, self.label)

    def _to_string(self, value, kind: ValueKind) -> str:
        if kind is ValueKind.STRING:
            return value
        if kind is ValueKind.BOOLEAN:
            return 'true' if value else 'false'
        if kind is ValueKind.BYTES:
            try:
                return value.decode('utf-8')
            except UnicodeDecodeError:
                raise CoercionError(value, self.label) from None
        return str(value)

    def _to_float(self, value, kind: ValueKind) -> float:
        if kind in (ValueKind.BOOLEAN, ValueKind.INTEGER, ValueKind.FLOAT):
            return float(value)
        if kind is ValueKind.STRING:
            try:
                return float(value.strip())
            except ValueError:
                raise CoercionError(value, self.label) from None
        raise CoercionError(value, self.label)

    def _to_integer(self, value, kind: ValueKind) -> int:
        if kind in (ValueKind.BOOLEAN, ValueKind.INTEGER):
            result = int(value)
        elif kind is ValueKind.FLOAT:
            if not math.isfinite(value):
                raise CoercionError(value, self.label)
            result = int(value)
        elif kind is ValueKind.STRING:
            text = value.strip()
            try:
                result = int(text)
            except ValueError:
                try:
                    number = float(text)
                except ValueError:
                    raise CoercionError(value, self.label) from None
                if not math.isfinite(number):
                    raise CoercionError(value, self.label)
                result = int(number)
        else:
            raise CoercionError(value, self.label)

        limit = 1 << (self.bits - 1)
        if not -limit <= result < limit:
            raise CoercionError(value, self.label)
        return result


_PRIMITIVE_BY_TYPE = {
    bool: Primitive.BOOLEAN,
    int: Primitive.LONG,
    float: Primitive.DOUBLE,
    str: Primitive.STRING,
}
