import json
from typing import Any, Mapping

from .base import Codec


class JsonCodec(Codec):
    """JSON encoding; indented by default so the file stays readable."""

    name = 'json'
    decode_options = frozenset({'parse_float', 'parse_int', 'parse_constant', 'strict'})
    encode_options = frozenset({'indent', 'sort_keys', 'ensure_ascii', 'separators', 'allow_nan'})

    def decode(self, content: bytes, settings: dict[str, Any]) -> Any:
        return json.loads(content.decode('utf-8'), **settings)

    def encode(self, data: Mapping[str, Any], settings: dict[str, Any]) -> bytes:
        settings.setdefault('indent', 2)
        settings.setdefault('ensure_ascii', False)
        return json.dumps(data, **settings).encode('utf-8')
