from .base import SearchCriteria, SearchEngine
from .document import (
    ProductId,
    SearchDocument,
    SearchDocumentField,
    SearchDocumentFieldCollection,
)
from .exceptions import (
    DocumentCorrupt,
    SearchDocumentCanNotBeStored,
    SearchEngineError,
    SearchEngineNotAvailable,
)

__all__ = [
    "SearchCriteria",
    "SearchEngine",
    "ProductId",
    "SearchDocument",
    "SearchDocumentField",
    "SearchDocumentFieldCollection",
    "SearchEngineError",
    "SearchEngineNotAvailable",
    "SearchDocumentCanNotBeStored",
    "DocumentCorrupt",
]
