"""Search engine storing one JSON file per search document."""

from .codec import StoredRecord, decode, encode, from_record, identifier, to_record
from .engine import FileSearchEngine, ScanResult
from .writers import AtomicFileWriter, DocumentWriter, LocalFileWriter

__all__ = [
    "FileSearchEngine",
    "ScanResult",
    "StoredRecord",
    "encode",
    "decode",
    "to_record",
    "from_record",
    "identifier",
    "DocumentWriter",
    "LocalFileWriter",
    "AtomicFileWriter",
]
