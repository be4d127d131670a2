"""
Errors raised by search engine implementations.
"""

from pathlib import Path
from typing import Optional, Union


class SearchEngineError(Exception):
    """Base class for all search engine errors."""


class SearchEngineNotAvailable(SearchEngineError):
    """The storage backing a search engine cannot be used."""

    def __init__(
        self,
        storage_path: Union[str, Path],
        reason: str = "is not writable by the filesystem search engine",
    ):
        self.storage_path = str(storage_path)
        super().__init__(f'Directory "{self.storage_path}" {reason}.')


class SearchDocumentCanNotBeStored(SearchEngineError):
    """Writing a search document to storage did not complete."""

    def __init__(self, path: Union[str, Path], reason: Optional[str] = None):
        self.path = str(path)
        message = f'Search document could not be stored at "{self.path}"'
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DocumentCorrupt(SearchEngineError):
    """A stored record could not be decoded into a search document."""

    def __init__(self, source: Optional[Union[str, Path]], reason: str):
        self.source = str(source) if source is not None else None
        self.reason = reason
        where = f'"{self.source}"' if self.source else "<memory>"
        super().__init__(f"Search document {where} is corrupt: {reason}")
