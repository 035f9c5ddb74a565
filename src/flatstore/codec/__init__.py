from pathlib import Path

from .base import Codec
from .json_codec import JsonCodec
from .msgpack_codec import MsgpackCodec
from .toml_codec import TomlCodec

_CODECS_BY_SUFFIX = {
    '.toml': TomlCodec,
    '.json': JsonCodec,
    '.msgpack': MsgpackCodec,
    '.mpk': MsgpackCodec,
}


def codec_for_path(path: Path) -> Codec:
    """Pick a codec from the file suffix; unknown suffixes use msgpack."""
    return _CODECS_BY_SUFFIX.get(Path(path).suffix.lower(), MsgpackCodec)()
