from typing import Any, Mapping

import msgpack

from .base import Codec


class MsgpackCodec(Codec):
    """Binary msgpack encoding; preserves bytes, ints and floats exactly."""

    name = 'msgpack'
    decode_options = frozenset({'raw', 'use_list', 'strict_map_key', 'timestamp', 'max_buffer_size'})
    encode_options = frozenset({'use_bin_type', 'use_single_float', 'strict_types', 'datetime'})

    def decode(self, content: bytes, settings: dict[str, Any]) -> Any:
        settings.setdefault('raw', False)
        return msgpack.loads(content, **settings)

    def encode(self, data: Mapping[str, Any], settings: dict[str, Any]) -> bytes:
        settings.setdefault('use_bin_type', True)
        result = msgpack.dumps(data, **settings)
        assert isinstance(result, bytes)
        return result
