"""
Search document model.

A search document is what gets stored in and returned from a search engine:
a product id, a collection of multi-valued fields and the context the
document applies to.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping, Sequence, Tuple

from filesearch.context import Context


@dataclass(frozen=True)
class ProductId:
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value:
            raise ValueError(f"Product id must be a non-empty string, got {self.value!r}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SearchDocumentField:
    key: str
    values: Tuple[str, ...]

    @classmethod
    def from_key_and_values(cls, key: str, values: Sequence[str]) -> "SearchDocumentField":
        if not isinstance(key, str) or not key:
            raise ValueError(f"Search document field key must be a non-empty string, got {key!r}")
        if isinstance(values, (str, bytes)):
            raise TypeError(f"Values of field '{key}' must be a sequence of strings, not a string")
        values = tuple(values)
        for value in values:
            if not isinstance(value, str):
                raise TypeError(f"Values of field '{key}' must be strings, got {value!r}")
        return cls(key, values)


class SearchDocumentFieldCollection:
    """Ordered collection of search document fields with unique keys."""

    def __init__(self, *fields: SearchDocumentField):
        keys = [f.key for f in fields]
        duplicates = sorted({k for k in keys if keys.count(k) > 1})
        if duplicates:
            raise ValueError(f"Duplicate search document field keys: {duplicates}")
        self._fields = tuple(fields)

    @classmethod
    def from_dict(cls, fields: Mapping[str, Sequence[str]]) -> "SearchDocumentFieldCollection":
        return cls(*(
            SearchDocumentField.from_key_and_values(key, values)
            for key, values in fields.items()
        ))

    @property
    def fields(self) -> Tuple[SearchDocumentField, ...]:
        return self._fields

    def to_dict(self) -> Dict[str, List[str]]:
        return {f.key: list(f.values) for f in self._fields}

    def __iter__(self) -> Iterator[SearchDocumentField]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, key: object) -> bool:
        return any(f.key == key for f in self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchDocumentFieldCollection):
            return NotImplemented
        return self._fields == other._fields

    def __hash__(self) -> int:
        return hash(self._fields)

    def __repr__(self) -> str:
        return f"SearchDocumentFieldCollection({self.to_dict()!r})"


@dataclass(frozen=True)
class SearchDocument:
    fields: SearchDocumentFieldCollection
    context: Context
    product_id: ProductId
