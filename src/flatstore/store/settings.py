from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib  # pyright: ignore[reportMissingImports]

from ..data.file_data import DataType


# Settings key constants
SETTING_RELOAD = 'store.reload'
SETTING_DATA_TYPE = 'store.data_type'
SETTING_CODEC = 'codec'


class ReloadSetting(Enum):
    """When a store re-reads its backing file before an access.

    MANUALLY: only on an explicit reload().
    INTELLIGENT: when the file's modification stamp differs from the one
        recorded at the last load or write.
    AUTOMATICALLY: before every access.
    """
    MANUALLY = 'manually'
    INTELLIGENT = 'intelligent'
    AUTOMATICALLY = 'automatically'


@dataclass
class StoreSettings:
    """Construction-time options of a FlatFile.

    Attributes:
        reload_setting: Reload policy applied before reads and removals
        data_type: Key ordering of the in-memory tree
        codec_settings: Keyword arguments forwarded untouched to the codec
    """
    reload_setting: ReloadSetting = ReloadSetting.INTELLIGENT
    data_type: DataType = DataType.STANDARD
    codec_settings: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def load(cls, settings_file: Path) -> 'StoreSettings':
        """Read settings from a TOML file.

        Recognized keys are store.reload, store.data_type and the [codec]
        table. A missing file yields the defaults.

        Example settings file:

            [store]
            reload = "automatically"
            data_type = "sorted"

            [codec]
            indent = 4

        Raises:
            ValueError: A setting has an unknown value
        """
        raw: dict[str, Any] = {}
        if settings_file.exists():
            with open(settings_file, 'rb') as f:
                raw = tomllib.load(f)

        settings = cls()
        reload_value = _lookup(raw, SETTING_RELOAD)
        if reload_value is not None:
            settings.reload_setting = ReloadSetting(str(reload_value).lower())
        data_type_value = _lookup(raw, SETTING_DATA_TYPE)
        if data_type_value is not None:
            settings.data_type = DataType(str(data_type_value).lower())
        codec_value = _lookup(raw, SETTING_CODEC)
        if isinstance(codec_value, dict):
            settings.codec_settings = dict(codec_value)
        return settings


def _lookup(settings: dict[str, Any], key: str, default=None):
    keys = key.split('.')
    value: Any = settings

    for k in keys:
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return default

    return value
