"""Public accessor contract shared by stores and sections."""
from abc import ABC, abstractmethod
from typing import Any, Iterable, Mapping, TypeVar, TYPE_CHECKING

from ..data.primitive import Primitive

if TYPE_CHECKING:
    from threading import RLock
    from .section import FlatSection

T = TypeVar('T')


class StorageBase(ABC):
    """Typed access to a dotted-key store.

    Subclasses provide the raw operations (get, set, remove, the bulk forms
    and key enumeration). The typed getters here follow one rule: a missing
    key yields the type's zero value or an empty container, while a present
    value that cannot be converted raises CoercionError.

    Scalar getters coerce through Primitive. Container getters do not coerce;
    they return the stored list or dict and raise TypeError if the stored
    value is of another kind.
    """

    @property
    @abstractmethod
    def lock(self) -> 'RLock':
        """Re-entrant lock guarding the underlying store."""
        raise NotImplementedError

    @abstractmethod
    def has_key(self, key: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def get(self, key: str) -> Any:
        """Return the raw stored value at key, or None if absent."""
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, value: Any):
        """Store value at key and write the store back if it changed.

        Setting None removes the key.
        """
        raise NotImplementedError

    @abstractmethod
    def set_all(self, mapping: Mapping[str, Any], key: str | None = None):
        """Store every entry of mapping (under key if given) with one write-back."""
        raise NotImplementedError

    @abstractmethod
    def remove(self, key: str):
        raise NotImplementedError

    @abstractmethod
    def remove_all(self, keys: Iterable[str], key: str | None = None):
        """Remove every listed key (under key if given) with one write-back."""
        raise NotImplementedError

    @abstractmethod
    def key_set(self, key: str | None = None) -> list[str]:
        """Dotted paths of all terminal entries, optionally below key."""
        raise NotImplementedError

    @abstractmethod
    def single_layer_key_set(self, key: str | None = None) -> list[str]:
        """Names of the entries directly in the top layer, or in the layer at key."""
        raise NotImplementedError

    @abstractmethod
    def get_section(self, key: str) -> 'FlatSection':
        raise NotImplementedError

    @abstractmethod
    def reload(self):
        raise NotImplementedError

    def _get_primitive(self, key: str, primitive: Primitive) -> Any:
        value = self.get(key)
        if value is None:
            return primitive.zero
        return primitive.coerce(value)

    def _get_container(self, key: str, container: type) -> Any:
        value = self.get(key)
        if value is None:
            return container()
        if not isinstance(value, container):
            raise TypeError(f"Value at {key!r} is {type(value).__name__}, not {container.__name__}")
        return value

    def get_boolean(self, key: str) -> bool:
        return self._get_primitive(key, Primitive.BOOLEAN)

    def get_byte(self, key: str) -> int:
        return self._get_primitive(key, Primitive.BYTE)

    def get_short(self, key: str) -> int:
        return self._get_primitive(key, Primitive.SHORT)

    def get_int(self, key: str) -> int:
        return self._get_primitive(key, Primitive.INTEGER)

    def get_long(self, key: str) -> int:
        return self._get_primitive(key, Primitive.LONG)

    def get_float(self, key: str) -> float:
        return self._get_primitive(key, Primitive.FLOAT)

    def get_double(self, key: str) -> float:
        return self._get_primitive(key, Primitive.DOUBLE)

    def get_string(self, key: str) -> str:
        return self._get_primitive(key, Primitive.STRING)

    def get_list(self, key: str) -> list:
        return self._get_container(key, list)

    def get_string_list(self, key: str) -> list[str]:
        return self._get_container(key, list)

    def get_integer_list(self, key: str) -> list[int]:
        return self._get_container(key, list)

    def get_byte_list(self, key: str) -> list[int]:
        return self._get_container(key, list)

    def get_long_list(self, key: str) -> list[int]:
        return self._get_container(key, list)

    def get_map(self, key: str) -> dict:
        return self._get_container(key, dict)

    def get_as(self, key: str, target: type[T]) -> T:
        """Get the value at key converted to target (bool, int, float or str).

        The conversion starts from the string form of the stored value, so a
        stored 12 read as str gives '12' and a stored '12' read as int gives 12.

        Raises:
            TypeError: target is not a supported scalar type
            CoercionError: The value cannot be converted
        """
        primitive = Primitive.for_type(target)
        with self.lock:
            if not self.has_key(key):
                return primitive.zero
            return primitive.coerce(self.get_string(key))

    def get_or_set_default(self, key: str, default: T) -> T:
        """Return the value at key, storing default first if key is absent.

        A stored string is parsed toward the type of default, so a file edited
        by hand to hold "5" still answers 5 for an int default.
        """
        with self.lock:
            value = self.get(key)
            if value is None:
                self.set(key, default)
                return default
        if isinstance(value, str):
            if isinstance(default, bool):
                return value.strip().lower() == 'true'
            if isinstance(default, int):
                return Primitive.LONG.coerce(value)
            if isinstance(default, float):
                return Primitive.DOUBLE.coerce(value)
        return value

    def set_default(self, key: str, value: Any):
        """Store value only if key is absent."""
        with self.lock:
            if not self.has_key(key):
                self.set(key, value)
