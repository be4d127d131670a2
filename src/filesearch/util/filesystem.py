import os
import shutil
from pathlib import Path
from typing import Union

from filesearch.platform.logging import get_logger

logger = get_logger(__name__)


class FilesystemError(OSError):
    """Raised when a directory operation is given something that is not a directory."""


class LocalFilesystem:
    """Directory helpers for the local filesystem."""

    def remove_directory_contents(self, path: Union[str, Path]) -> None:
        """Delete everything inside ``path`` but keep ``path`` itself."""
        directory = self._require_directory(path)
        removed = 0
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.is_dir(follow_symlinks=False):
                    shutil.rmtree(entry.path)
                else:
                    os.unlink(entry.path)
                removed += 1
        logger.debug("directory_contents_removed", path=str(directory), entries=removed)

    def remove_directory_and_its_content(self, path: Union[str, Path]) -> None:
        directory = self._require_directory(path)
        shutil.rmtree(directory)
        logger.debug("directory_removed", path=str(directory))

    def _require_directory(self, path: Union[str, Path]) -> Path:
        directory = Path(path)
        if not directory.is_dir():
            raise FilesystemError(f'"{directory}" is not a directory')
        return directory
