from typing import Any, Mapping

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib  # pyright: ignore[reportMissingImports]

import tomli_w

from .base import Codec


class TomlCodec(Codec):
    """TOML encoding for human-edited files.

    TOML has no bytes type; bytes values fail to encode.
    """

    name = 'toml'
    decode_options = frozenset({'parse_float'})
    encode_options = frozenset({'multiline_strings', 'indent'})

    def decode(self, content: bytes, settings: dict[str, Any]) -> Any:
        return tomllib.loads(content.decode('utf-8'), **settings)

    def encode(self, data: Mapping[str, Any], settings: dict[str, Any]) -> bytes:
        return tomli_w.dumps(data, **settings).encode('utf-8')
