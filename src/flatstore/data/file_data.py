"""In-memory tree of mappings addressed by dotted keys."""
from enum import Enum
from typing import Any, Iterator, Mapping

from .value import ValueKind, kind_of, copy_value, same_value

SEPARATOR = '.'


class DataType(Enum):
    """Key ordering of the mappings held by FileData.

    STANDARD keeps keys in insertion order (the order they were read from the
    file or set afterwards). SORTED presents every mapping layer in sorted
    key order when enumerating keys and when exporting for the codec.
    """
    STANDARD = 'standard'
    SORTED = 'sorted'


def split_key(key: str) -> list[str]:
    """Split a dotted key into its segments.

    Raises:
        ValueError: key is empty or contains an empty segment
    """
    segments = key.split(SEPARATOR)
    if not all(segments):
        raise ValueError(f"Invalid key {key!r}: empty path segment")
    return segments


class FileData:
    """Nested mapping tree with dotted-key access.

    A key such as 'a.b.c' addresses segment 'a' in the root mapping, then 'b'
    in that submapping, then 'c'. Walking through a segment that holds a
    non-mapping value is treated as "absent", never as an error.

    Values are copied into the tree on insertion, so callers cannot mutate the
    tree through references they keep.
    """

    def __init__(self, data: Mapping[str, Any] | None = None, data_type: DataType = DataType.STANDARD):
        self._data_type = data_type
        self._root: dict[str, Any] = {}
        if data:
            for key, value in data.items():
                self._merge(self._root, str(key), value)

    def _merge(self, layer: dict[str, Any], key: str, value: Any):
        """Add a loaded entry to layer, expanding dotted keys.

        Unlike insert(), nothing already present is replaced: 'a.b' next to a
        scalar 'a', or two spellings of the same path, would otherwise lose
        one of the values.

        Raises:
            ValueError: key collides with an entry already in layer
        """
        segments = split_key(key)
        for segment in segments[:-1]:
            layer = layer.setdefault(segment, {})
            if not isinstance(layer, dict):
                raise ValueError(f"Key {key!r} collides with a value at {segment!r}")

        last = segments[-1]
        if kind_of(value) is ValueKind.MAPPING:
            child = layer.setdefault(last, {})
            if not isinstance(child, dict):
                raise ValueError(f"Key {key!r} collides with a value at {last!r}")
            for name, item in value.items():
                self._merge(child, str(name), item)
        elif last in layer:
            raise ValueError(f"Key {key!r} is defined more than once")
        else:
            layer[last] = copy_value(value)

    @property
    def data_type(self) -> DataType:
        return self._data_type

    def _walk(self, segments: list[str]) -> Any:
        node: Any = self._root
        for segment in segments:
            if isinstance(node, dict) and segment in node:
                node = node[segment]
            else:
                return None
        return node

    def _layer(self, key: str | None) -> dict[str, Any] | None:
        if key is None:
            return self._root
        node = self._walk(split_key(key))
        return node if isinstance(node, dict) else None

    def _ordered(self, layer: dict[str, Any]) -> Iterator[tuple[str, Any]]:
        if self._data_type is DataType.SORTED:
            return iter(sorted(layer.items()))
        return iter(layer.items())

    def get(self, key: str) -> Any:
        """Return the value at key, or None if absent.

        A returned mapping or list is the live in-tree object; use to_map() for
        a detached copy.
        """
        return self._walk(split_key(key))

    def contains_key(self, key: str) -> bool:
        return self.get(key) is not None

    def __contains__(self, key: str) -> bool:
        return self.contains_key(key)

    def insert(self, key: str, value: Any) -> bool:
        """Set value at key, creating intermediate mappings as needed.

        An intermediate segment holding a non-mapping value is replaced with a
        new mapping. Mapping values are expanded so dotted keys inside them
        become nested layers.

        Returns:
            False if key already held an equal value of the same kind, True if
            the tree changed

        Raises:
            TypeError: value is None or of an unsupported type
            ValueError: key is malformed, or a mapping value holds colliding keys
        """
        segments = split_key(key)
        kind = kind_of(value)

        if kind is ValueKind.MAPPING:
            new_value = FileData(value, self._data_type)._root
        else:
            new_value = copy_value(value)

        parent = self._root
        for segment in segments[:-1]:
            child = parent.get(segment)
            if not isinstance(child, dict):
                child = {}
                parent[segment] = child
            parent = child

        last = segments[-1]
        if last in parent and same_value(parent[last], new_value):
            return False
        parent[last] = new_value
        return True

    def remove(self, key: str) -> bool:
        """Delete the terminal segment of key from its parent mapping.

        Ancestor mappings are left in place even when they become empty.

        Returns:
            True if an entry was removed
        """
        segments = split_key(key)
        parent = self._walk(segments[:-1])
        if isinstance(parent, dict) and segments[-1] in parent:
            del parent[segments[-1]]
            return True
        return False

    def key_set(self, key: str | None = None) -> list[str]:
        """Return dotted paths of every terminal entry, depth first.

        Args:
            key: Optional key of the layer to enumerate; paths are relative to it

        Returns:
            Paths in traversal order, or an empty list if key does not address
            a mapping
        """
        layer = self._layer(key)
        if layer is None:
            return []
        keys: list[str] = []
        self._collect(layer, '', keys)
        return keys

    def _collect(self, layer: dict[str, Any], prefix: str, keys: list[str]):
        for name, value in self._ordered(layer):
            if isinstance(value, dict):
                self._collect(value, prefix + name + SEPARATOR, keys)
            else:
                keys.append(prefix + name)

    def single_layer_key_set(self, key: str | None = None) -> list[str]:
        """Return the immediate child names of the root or of the layer at key."""
        layer = self._layer(key)
        if layer is None:
            return []
        return [name for name, _ in self._ordered(layer)]

    def size(self, key: str | None = None) -> int:
        return len(self.key_set(key))

    def __len__(self) -> int:
        return self.size()

    def clear(self):
        self._root.clear()

    def to_map(self) -> dict[str, Any]:
        """Export the tree as detached plain dicts and lists."""
        return self._export(self._root)

    def _export(self, layer: dict[str, Any]) -> dict[str, Any]:
        result = {}
        for name, value in self._ordered(layer):
            if isinstance(value, dict):
                result[name] = self._export(value)
            else:
                result[name] = copy_value(value)
        return result

    def __eq__(self, other):
        if not isinstance(other, FileData):
            return NotImplemented
        return same_value(self._root, other._root)

    __hash__ = None

    def __repr__(self):
        return f"FileData({self._root!r})"
