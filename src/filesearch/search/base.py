"""
Search engine abstraction shared by storage backends.
"""
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Protocol, Sequence

from .document import SearchDocument


class SearchCriteria(Protocol):
    """Anything able to tell whether a search document matches."""

    def matches(self, document: SearchDocument) -> bool:
        ...


class SearchEngine(ABC):
    """
    Abstract interface for search engines that hand filtering over to the
    caller-supplied criteria instead of evaluating queries themselves.
    """

    @abstractmethod
    def add_document(self, document: SearchDocument) -> None:
        """Store a document, replacing any document with the same identity."""
        pass

    def add_documents(self, documents: Iterable[SearchDocument]) -> None:
        for document in documents:
            self.add_document(document)

    @abstractmethod
    def get_search_documents(self) -> List[SearchDocument]:
        """Return every stored document."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove all stored documents."""
        pass

    @property
    @abstractmethod
    def searchable_fields(self) -> Sequence[str]:
        pass

    @property
    @abstractmethod
    def search_criteria_builder(self) -> Any:
        pass

    @property
    @abstractmethod
    def facet_field_transformation_registry(self) -> Any:
        pass

    def query(self, criteria: SearchCriteria) -> List[SearchDocument]:
        """Return the stored documents matching ``criteria``, in storage order."""
        return [doc for doc in self.get_search_documents() if criteria.matches(doc)]

    def count(self) -> int:
        return len(self.get_search_documents())
