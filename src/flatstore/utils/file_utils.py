"""File creation, stamping and replace-on-write helpers for the backing file."""
import logging
import os
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, NamedTuple

logger = logging.getLogger(__name__)


class FileStamp(NamedTuple):
    """Cheap fingerprint used to detect external modification of a file."""
    mtime_ns: int
    size: int


def file_stamp(path: Path) -> FileStamp | None:
    """Return the current stamp of path, or None if it does not exist."""
    try:
        st = path.stat()
    except FileNotFoundError:
        return None
    return FileStamp(st.st_mtime_ns, st.st_size)


def create_file(path: Path) -> bool:
    """Create path and its parent directories if the file does not exist.

    Returns:
        True if the file was created by this call

    Raises:
        IsADirectoryError: path exists and is a directory
    """
    if path.is_dir():
        raise IsADirectoryError(f"{path} is a directory")
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        with open(path, 'xb'):
            pass
    except FileExistsError:
        return False
    logger.info("Created file %s", path)
    return True


def write_seed(path: Path, seed: BinaryIO | bytes):
    """Copy seed content into path."""
    with replace_on_write(path) as f:
        if isinstance(seed, (bytes, bytearray)):
            f.write(seed)
        else:
            shutil.copyfileobj(seed, f)


@contextmanager
def replace_on_write(path: Path) -> Iterator[BinaryIO]:
    """Open a temporary file next to path and move it over path on success.

    If the body raises, the temporary file is removed and path is untouched.
    """
    fd, temp_name = tempfile.mkstemp(prefix=f'.{path.name}.', suffix='.tmp', dir=path.parent)
    try:
        with os.fdopen(fd, 'wb') as f:
            yield f
            f.flush()
            os.fsync(f.fileno())
        if path.exists():
            shutil.copymode(path, temp_name)
        os.replace(temp_name, path)
    except BaseException:
        try:
            os.unlink(temp_name)
        except FileNotFoundError:
            pass
        raise
