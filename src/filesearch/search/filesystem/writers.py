"""
Write strategies used by the filesystem search engine.

The engine never touches the disk for writes itself; it hands the encoded
document to a ``DocumentWriter``. Swapping the writer is how tests simulate a
full disk and how callers opt into atomic replacement.
"""

import os
from pathlib import Path
from typing import Protocol

# Suffix of in-flight files written by AtomicFileWriter
TEMP_SUFFIX = ".tmp"


class DocumentWriter(Protocol):
    def write(self, path: Path, data: bytes) -> None:
        """Write ``data`` to ``path``, replacing any existing file. Raises OSError on failure."""
        ...


class LocalFileWriter:
    """Writes straight to the target file, truncating the previous version."""

    def write(self, path: Path, data: bytes) -> None:
        with open(path, "wb") as f:
            f.write(data)


class AtomicFileWriter:
    """
    Writes to a temporary sibling file and renames it over the target.

    A failed write leaves the previous version of the target untouched.
    """

    def __init__(self, fsync: bool = False):
        self.fsync = fsync

    def write(self, path: Path, data: bytes) -> None:
        path = Path(path)
        tmp = path.with_name(path.name + TEMP_SUFFIX)
        try:
            with open(tmp, "wb") as f:
                f.write(data)
                if self.fsync:
                    f.flush()
                    os.fsync(f.fileno())
            os.replace(tmp, path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise
