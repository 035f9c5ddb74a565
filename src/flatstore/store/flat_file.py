import logging
from pathlib import Path
from threading import RLock
from typing import Any, BinaryIO, Iterable, Mapping

from .section import FlatSection
from .settings import ReloadSetting, StoreSettings
from .storage_base import StorageBase
from ..codec import Codec, codec_for_path
from ..data.file_data import DataType, FileData, SEPARATOR
from ..data.value import copy_value, same_value
from ..errors import CodecError, StoreReadError, StoreWriteError
from ..utils.file_utils import FileStamp, create_file, file_stamp, replace_on_write, write_seed

logger = logging.getLogger(__name__)


class FlatFile(StorageBase):
    """Dotted-key store persisted to a single file.

    FlatFile keeps a FileData tree in memory and writes the whole tree back to
    disk after every mutation that changes it (write-through). Whether reads
    re-read the file first is governed by the ReloadSetting.

    Mutations hold the store's lock for the whole insert-then-serialize step,
    so other threads never see a write-back interleaved with another mutation.
    Reads hold the same lock around the reload check and the lookup.

    Failure semantics:
    - A failed write-back raises StoreWriteError. The in-memory tree keeps the
      new value, so memory and disk disagree until the next successful write
      or reload.
    - A failed reload raises StoreReadError and keeps the previous tree.

    Example:
        store = FlatFile(Path('config.toml'))
        store.set('server.port', 8080)
        port = store.get_int('server.port')
        server = store.get_section('server')
        server.set_default('host', 'localhost')
    """

    def __init__(
            self,
            path: str | Path,
            seed: BinaryIO | bytes | None = None,
            reload_setting: ReloadSetting | None = None,
            codec_settings: Mapping[str, Any] | None = None,
            data_type: DataType | None = None,
            codec: Codec | None = None,
            settings: StoreSettings | None = None):
        """Open the store, creating the backing file if it does not exist.

        Args:
            path: Backing file path
            seed: Initial content written to the file only when it is created here
            reload_setting: Reload policy, overriding settings
            codec_settings: Keyword arguments forwarded to the codec, overriding settings
            data_type: Key ordering of the in-memory tree, overriding settings
            codec: Codec backend; chosen from the file suffix if omitted
            settings: Bundled defaults for the three options above

        Raises:
            IsADirectoryError: path is a directory
            StoreReadError: The existing file could not be decoded
        """
        settings = settings or StoreSettings()

        self._path = Path(path)
        self._codec = codec or codec_for_path(self._path)
        self._codec_settings = dict(codec_settings if codec_settings is not None else settings.codec_settings)
        self._data_type = data_type or settings.data_type
        self._reload_setting = reload_setting or settings.reload_setting
        self._lock = RLock()
        self._stamp: FileStamp | None = None
        self._file_data = FileData(data_type=self._data_type)

        if create_file(self._path) and seed is not None:
            write_seed(self._path, seed)

        self.reload()

    @property
    def lock(self) -> RLock:
        return self._lock

    @property
    def file(self) -> Path:
        return self._path

    @property
    def name(self) -> str:
        return self._path.name

    @property
    def codec(self) -> Codec:
        return self._codec

    @property
    def reload_setting(self) -> ReloadSetting:
        return self._reload_setting

    @reload_setting.setter
    def reload_setting(self, value: ReloadSetting):
        self._reload_setting = value

    @property
    def data_type(self) -> DataType:
        return self._data_type

    def reload(self):
        """Replace the in-memory tree with the current file contents.

        Raises:
            StoreReadError: The file could not be read or decoded; the previous
                tree is kept
        """
        with self._lock:
            try:
                stamp = file_stamp(self._path)
                with open(self._path, 'rb') as f:
                    data = self._codec.load(f, self._codec_settings)
                file_data = FileData(data, self._data_type)
            except (OSError, CodecError, TypeError, ValueError) as e:
                raise StoreReadError(f"Failed to read {self._path}: {e}") from e

            self._file_data = file_data
            self._stamp = stamp
            logger.debug("Loaded %d entries from %s", len(file_data), self._path)

    def has_changed(self) -> bool:
        """Check whether the file was modified since the last load or write."""
        return file_stamp(self._path) != self._stamp

    def _update(self):
        if self._reload_setting is ReloadSetting.AUTOMATICALLY:
            self.reload()
        elif self._reload_setting is ReloadSetting.INTELLIGENT and self.has_changed():
            logger.debug("%s changed on disk, reloading", self._path)
            self.reload()

    def _write(self):
        try:
            with replace_on_write(self._path) as f:
                self._codec.dump(self._file_data.to_map(), f, self._codec_settings)
        except (OSError, CodecError) as e:
            logger.error("Error while writing to '%s': %s", self._path.absolute(), e)
            raise StoreWriteError(f"Failed to write {self._path}: {e}") from e
        self._stamp = file_stamp(self._path)
        logger.debug("Wrote %d entries to %s", len(self._file_data), self._path)

    def has_key(self, key: str) -> bool:
        with self._lock:
            self._update()
            return self._file_data.contains_key(key)

    def get(self, key: str) -> Any:
        """Return a detached copy of the value at key, or None if absent."""
        with self._lock:
            self._update()
            value = self._file_data.get(key)
            if isinstance(value, (list, dict)):
                return copy_value(value)
            return value

    def set(self, key: str, value: Any):
        if value is None:
            self.remove(key)
            return

        with self._lock:
            self._update()
            if self._file_data.insert(key, value):
                self._write()

    def set_all(self, mapping: Mapping[str, Any], key: str | None = None):
        with self._lock:
            self._update()
            changed = False
            try:
                for entry_key, value in mapping.items():
                    full_key = entry_key if key is None else key + SEPARATOR + entry_key
                    if value is None:
                        changed |= self._file_data.remove(full_key)
                    else:
                        changed |= self._file_data.insert(full_key, value)
            finally:
                # entries applied before a rejected one are still written back
                if changed:
                    self._write()

    def remove(self, key: str):
        with self._lock:
            self._update()
            if self._file_data.contains_key(key):
                self._file_data.remove(key)
                self._write()

    def remove_all(self, keys: Iterable[str], key: str | None = None):
        with self._lock:
            self._update()
            changed = False
            try:
                for entry_key in keys:
                    full_key = entry_key if key is None else key + SEPARATOR + entry_key
                    changed |= self._file_data.remove(full_key)
            finally:
                if changed:
                    self._write()

    def clear(self):
        """Remove every entry and write the empty store back."""
        with self._lock:
            self._file_data.clear()
            self._write()

    def key_set(self, key: str | None = None) -> list[str]:
        with self._lock:
            self._update()
            return self._file_data.key_set(key)

    def single_layer_key_set(self, key: str | None = None) -> list[str]:
        with self._lock:
            self._update()
            return self._file_data.single_layer_key_set(key)

    def get_section(self, key: str) -> FlatSection:
        return FlatSection(self, key)

    def to_map(self) -> dict[str, Any]:
        """Return a detached copy of the whole tree."""
        with self._lock:
            self._update()
            return self._file_data.to_map()

    def __eq__(self, other):
        if other is self:
            return True
        if other is None or type(other) is not type(self):
            return NotImplemented
        if self._path.resolve() != other._path.resolve():
            return False
        with self._lock:
            data = self._file_data.to_map()
        with other._lock:
            other_data = other._file_data.to_map()
        return same_value(data, other_data)

    def __hash__(self):
        return hash(self._path.resolve())

    def __repr__(self):
        return f"{type(self).__name__}({str(self._path)!r})"
