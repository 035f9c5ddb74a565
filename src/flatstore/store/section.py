from typing import Any, Iterable, Mapping, TYPE_CHECKING

from .storage_base import StorageBase
from ..data.file_data import SEPARATOR, split_key

if TYPE_CHECKING:
    from threading import RLock
    from .flat_file import FlatFile


class FlatSection(StorageBase):
    """View of a FlatFile restricted to the subtree under a key prefix.

    A section holds no data of its own. Every call is forwarded to the parent
    store with prefix + '.' + key, so changes made through a section are
    visible through the store at once and vice versa.
    """

    def __init__(self, store: 'FlatFile', prefix: str):
        split_key(prefix)  # rejects malformed prefixes
        self._store = store
        self._prefix = prefix

    @property
    def store(self) -> 'FlatFile':
        return self._store

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def lock(self) -> 'RLock':
        return self._store.lock

    def _full_key(self, key: str) -> str:
        return self._prefix + SEPARATOR + key

    def has_key(self, key: str) -> bool:
        return self._store.has_key(self._full_key(key))

    def get(self, key: str) -> Any:
        return self._store.get(self._full_key(key))

    def set(self, key: str, value: Any):
        self._store.set(self._full_key(key), value)

    def set_all(self, mapping: Mapping[str, Any], key: str | None = None):
        self._store.set_all(mapping, self._prefix if key is None else self._full_key(key))

    def remove(self, key: str):
        self._store.remove(self._full_key(key))

    def remove_all(self, keys: Iterable[str], key: str | None = None):
        self._store.remove_all(keys, self._prefix if key is None else self._full_key(key))

    def key_set(self, key: str | None = None) -> list[str]:
        return self._store.key_set(self._prefix if key is None else self._full_key(key))

    def single_layer_key_set(self, key: str | None = None) -> list[str]:
        return self._store.single_layer_key_set(self._prefix if key is None else self._full_key(key))

    def get_section(self, key: str) -> 'FlatSection':
        return FlatSection(self._store, self._full_key(key))

    def reload(self):
        self._store.reload()

    def __eq__(self, other):
        if not isinstance(other, FlatSection):
            return NotImplemented
        return self._store is other._store and self._prefix == other._prefix

    def __hash__(self):
        return hash((id(self._store), self._prefix))

    def __repr__(self):
        return f"FlatSection({self._store!r}, {self._prefix!r})"
