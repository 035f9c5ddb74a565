"""Codec boundary between the in-memory tree and the on-disk byte format."""
from abc import ABC, abstractmethod
from typing import Any, BinaryIO, Mapping

from ..errors import CodecError


class Codec(ABC):
    """Serializes nested mappings to and from binary streams.

    The settings mapping is opaque to the store: it is handed to the codec on
    every call and each backend forwards the entries its library accepts for
    that direction as keyword arguments. Each backend lists those names in
    decode_options and encode_options; any other name is rejected.
    """

    name: str = ''
    decode_options: frozenset[str] = frozenset()
    encode_options: frozenset[str] = frozenset()

    def load(self, stream: BinaryIO, settings: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Decode a whole stream into a nested dict.

        An empty stream decodes to an empty dict.

        Raises:
            CodecError: The content could not be decoded or is not a mapping
        """
        options = self._options(settings, self.decode_options)
        content = stream.read()
        if not content.strip():
            return {}

        try:
            data = self.decode(content, options)
        except Exception as e:
            raise CodecError(f"Failed to decode {self.name} data: {e}") from e

        if not isinstance(data, dict):
            raise CodecError(f"Decoded {self.name} data is {type(data).__name__}, expected a mapping")
        return data

    def dump(self, data: Mapping[str, Any], stream: BinaryIO, settings: Mapping[str, Any] | None = None):
        """Encode data and write it to stream.

        Raises:
            CodecError: The data could not be encoded
        """
        options = self._options(settings, self.encode_options)
        try:
            content = self.encode(data, options)
        except Exception as e:
            raise CodecError(f"Failed to encode {self.name} data: {e}") from e
        stream.write(content)

    @abstractmethod
    def decode(self, content: bytes, settings: dict[str, Any]) -> Any:
        raise NotImplementedError

    @abstractmethod
    def encode(self, data: Mapping[str, Any], settings: dict[str, Any]) -> bytes:
        raise NotImplementedError

    def _options(self, settings: Mapping[str, Any] | None, allowed: frozenset[str]) -> dict[str, Any]:
        settings = settings or {}
        unknown = settings.keys() - self.decode_options - self.encode_options
        if unknown:
            raise CodecError(f"Unknown {self.name} codec settings: {', '.join(sorted(unknown))}")
        return {k: v for k, v in settings.items() if k in allowed}
