from .codec import Codec, JsonCodec, MsgpackCodec, TomlCodec, codec_for_path
from .data.file_data import DataType, FileData
from .data.primitive import Primitive
from .data.value import ValueKind, kind_of
from .errors import FlatStoreError, CoercionError, CodecError, StoreReadError, StoreWriteError
from .store.flat_file import FlatFile
from .store.section import FlatSection
from .store.settings import ReloadSetting, StoreSettings
from .store.storage_base import StorageBase
