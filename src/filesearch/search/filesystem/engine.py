"""
Filesystem-backed search engine.

Stores one JSON file per search document in a flat directory and reads the
whole directory back on every query. There is no index: the directory is the
index, and filtering is left to the caller-supplied criteria.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence, Union

from filesearch.platform.config import Settings, get_settings
from filesearch.platform.logging import get_logger
from filesearch.search.base import SearchEngine
from filesearch.search.document import SearchDocument
from filesearch.search.exceptions import (
    DocumentCorrupt,
    SearchDocumentCanNotBeStored,
    SearchEngineNotAvailable,
)
from filesearch.util.filesystem import LocalFilesystem

from . import codec
from .writers import TEMP_SUFFIX, AtomicFileWriter, DocumentWriter, LocalFileWriter

logger = get_logger(__name__)


@dataclass
class ScanResult:
    documents: List[SearchDocument] = field(default_factory=list)
    errors: List[DocumentCorrupt] = field(default_factory=list)


class FileSearchEngine(SearchEngine):
    """
    Search engine persisting documents as individual files.

    Use ``create()`` rather than the constructor: it checks that the storage
    directory is usable before any document is written.
    """

    def __init__(
        self,
        storage_path: Path,
        searchable_fields: Sequence[str],
        search_criteria_builder: Any,
        facet_field_transformation_registry: Any,
        writer: Optional[DocumentWriter] = None,
        filesystem: Optional[LocalFilesystem] = None,
    ):
        self._storage_path = Path(storage_path)
        self._searchable_fields = tuple(searchable_fields)
        self._search_criteria_builder = search_criteria_builder
        self._facet_field_transformation_registry = facet_field_transformation_registry
        self._writer = writer or LocalFileWriter()
        self._filesystem = filesystem or LocalFilesystem()

    @classmethod
    def create(
        cls,
        storage_path: Union[str, Path],
        searchable_fields: Sequence[str],
        search_criteria_builder: Any,
        facet_field_transformation_registry: Any,
        writer: Optional[DocumentWriter] = None,
    ) -> "FileSearchEngine":
        """
        Build an engine on top of an existing, writable directory.

        Raises:
            SearchEngineNotAvailable: ``storage_path`` is missing, not a
                directory or not writable. The directory is never created.
        """
        path = Path(storage_path)
        if not path.is_dir():
            raise SearchEngineNotAvailable(path.resolve(), "does not exist or is not a directory")
        if not os.access(path, os.W_OK):
            raise SearchEngineNotAvailable(path.resolve())

        return cls(
            path,
            searchable_fields,
            search_criteria_builder,
            facet_field_transformation_registry,
            writer=writer,
        )

    @classmethod
    def from_settings(
        cls,
        search_criteria_builder: Any,
        facet_field_transformation_registry: Any,
        settings: Optional[Settings] = None,
    ) -> "FileSearchEngine":
        """Build an engine from the ``SEARCH_*`` settings."""
        settings = settings or get_settings()
        writer = AtomicFileWriter() if settings.SEARCH_ATOMIC_WRITES else LocalFileWriter()
        return cls.create(
            settings.SEARCH_STORAGE_PATH,
            settings.SEARCHABLE_FIELDS,
            search_criteria_builder,
            facet_field_transformation_registry,
            writer=writer,
        )

    @property
    def storage_path(self) -> Path:
        return self._storage_path

    @property
    def writer(self) -> DocumentWriter:
        return self._writer

    @property
    def searchable_fields(self) -> Sequence[str]:
        return self._searchable_fields

    @property
    def search_criteria_builder(self) -> Any:
        return self._search_criteria_builder

    @property
    def facet_field_transformation_registry(self) -> Any:
        return self._facet_field_transformation_registry

    def identifier(self, document: SearchDocument) -> str:
        return codec.identifier(document)

    def add_document(self, document: SearchDocument) -> None:
        path = self._storage_path / self.identifier(document)
        data = codec.encode(document)
        try:
            self._writer.write(path, data)
        except OSError as e:
            logger.error(
                "search_document_store_failed",
                path=str(path),
                product_id=str(document.product_id),
                error=str(e),
            )
            raise SearchDocumentCanNotBeStored(path, e.strerror or str(e)) from e
        logger.debug("search_document_stored", path=str(path), product_id=str(document.product_id))

    def scan(self) -> ScanResult:
        """
        Read and decode every stored document.

        Files that cannot be read or decoded end up in ``errors`` instead of
        aborting the scan. Order follows the directory listing.
        """
        result = ScanResult()
        with os.scandir(self._storage_path) as entries:
            for entry in entries:
                if not entry.is_file() or entry.name.endswith(TEMP_SUFFIX):
                    continue
                path = Path(entry.path)
                try:
                    data = path.read_bytes()
                except FileNotFoundError:
                    # removed by a concurrent clear()
                    continue
                except OSError as e:
                    result.errors.append(DocumentCorrupt(path, f"unreadable: {e}"))
                    continue
                try:
                    result.documents.append(codec.decode(data, source=path))
                except DocumentCorrupt as e:
                    result.errors.append(e)

        logger.debug(
            "search_documents_scanned",
            path=str(self._storage_path),
            documents=len(result.documents),
            corrupt=len(result.errors),
        )
        return result

    def get_search_documents(
        self,
        on_corrupt: Optional[Callable[[DocumentCorrupt], None]] = None,
    ) -> List[SearchDocument]:
        """
        Return all stored documents.

        Every corrupt file is passed to ``on_corrupt`` once the whole directory
        has been read; the callback may raise. Without a callback, corrupt
        files are logged and left out.
        """
        result = self.scan()
        for error in result.errors:
            if on_corrupt is not None:
                on_corrupt(error)
            else:
                logger.warning("search_document_corrupt", path=error.source, reason=error.reason)
        return result.documents

    def clear(self) -> None:
        self._filesystem.remove_directory_contents(self._storage_path)
        logger.info("search_storage_cleared", path=str(self._storage_path))
