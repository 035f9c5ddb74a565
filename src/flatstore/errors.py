"""Exception hierarchy for flatstore.

Absent keys are never reported through these exceptions; typed getters return
zero values instead. Everything here signals that a value could not be
converted or that the backing file could not be read or written.
"""


class FlatStoreError(Exception):
    pass


class CoercionError(FlatStoreError, ValueError):
    """A stored value could not be converted to the requested type."""

    def __init__(self, value, target: str):
        super().__init__(f"Cannot convert {value!r} to {target}")
        self.value = value
        self.target = target


class CodecError(FlatStoreError):
    """The codec backend failed to decode or encode data."""


class StoreReadError(FlatStoreError):
    """The backing file could not be read into the in-memory model."""


class StoreWriteError(FlatStoreError):
    """The in-memory model could not be written back to the backing file.

    The in-memory model keeps the change that triggered the write, so memory
    and disk may disagree until the next successful write or reload.
    """
