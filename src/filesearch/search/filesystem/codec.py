"""
Conversion between search documents and their on-disk JSON records.

A record is a JSON object with exactly three keys, always in this order::

    {
        "product_id": "foo",
        "fields": {"baz": ["1", "2"]},
        "context": {"website": "de"}
    }

Storage is not partitioned by data version, so every decoded context gets its
``version`` code forced to the "any version" sentinel.
"""

import hashlib
import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from filesearch.context import DATA_VERSION_CODE, UNVERSIONED, Context
from filesearch.search.document import (
    ProductId,
    SearchDocument,
    SearchDocumentFieldCollection,
)
from filesearch.search.exceptions import DocumentCorrupt

PRODUCT_ID = "product_id"
FIELDS = "fields"
CONTEXT = "context"

JSON_INDENT = 4

Source = Optional[Union[str, Path]]


class StoredRecord(BaseModel):
    """Schema of one stored search document."""

    model_config = ConfigDict(extra="forbid", strict=True)

    product_id: str
    fields: Dict[str, List[str]]
    context: Dict[str, str]

    @field_validator("fields", "context", mode="before")
    @classmethod
    def empty_collection_as_mapping(cls, value: Any) -> Any:
        # Older records stored empty collections as null or []
        if value is None or value == []:
            return {}
        return value


def to_record(document: SearchDocument) -> Dict[str, Any]:
    return {
        PRODUCT_ID: str(document.product_id),
        FIELDS: document.fields.to_dict(),
        CONTEXT: {
            code: document.context.get_value(code)
            for code in document.context.supported_codes()
        },
    }


def from_record(record: Mapping[str, Any], source: Source = None) -> SearchDocument:
    try:
        validated = StoredRecord.model_validate(dict(record))
    except ValidationError as e:
        raise DocumentCorrupt(source, _describe(e)) from e
    return _build_document(validated, source)


def encode(document: SearchDocument) -> bytes:
    """Serialize a document as pretty-printed UTF-8 JSON."""
    return json.dumps(to_record(document), indent=JSON_INDENT, ensure_ascii=False).encode("utf-8")


def decode(data: Union[bytes, str], source: Source = None) -> SearchDocument:
    """
    Parse a stored record back into a search document.

    Raises:
        DocumentCorrupt: payload is not valid JSON or does not match the
            three-key record schema. ``source`` names the offending file.
    """
    try:
        validated = StoredRecord.model_validate_json(data)
    except ValidationError as e:
        raise DocumentCorrupt(source, _describe(e)) from e
    return _build_document(validated, source)


def identifier(document: SearchDocument) -> str:
    """
    Deterministic storage identifier of a document.

    Derived from the product id and the context code/value pairs (sorted by
    code, data version excluded), so republishing the same product in the same
    context targets the same file.
    """
    context = document.context
    pairs = sorted(
        (code, context.get_value(code))
        for code in context.supported_codes()
        if code != DATA_VERSION_CODE
    )
    key = json.dumps([str(document.product_id), pairs], ensure_ascii=False)
    return hashlib.sha256(key.encode("utf-8")).hexdigest()


def _build_document(record: StoredRecord, source: Source) -> SearchDocument:
    context_data = dict(record.context)
    context_data[DATA_VERSION_CODE] = UNVERSIONED
    try:
        return SearchDocument(
            fields=SearchDocumentFieldCollection.from_dict(record.fields),
            context=Context.rehydrate(context_data),
            product_id=ProductId(record.product_id),
        )
    except (TypeError, ValueError) as e:
        raise DocumentCorrupt(source, str(e)) from e


def _describe(error: ValidationError) -> str:
    problems = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"]) or "<root>"
        problems.append(f"{location}: {err['msg']}")
    return "; ".join(problems)
