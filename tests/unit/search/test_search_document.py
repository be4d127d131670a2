import pytest

from filesearch.context import Context
from filesearch.search import (
    ProductId,
    SearchDocument,
    SearchDocumentField,
    SearchDocumentFieldCollection,
)


def test_product_id_string_representation():
    assert str(ProductId("foo")) == "foo"


@pytest.mark.parametrize("value", ["", None, 1])
def test_product_id_rejects_invalid_values(value):
    with pytest.raises(ValueError):
        ProductId(value)


def test_field_collection_preserves_order():
    collection = SearchDocumentFieldCollection.from_dict({
        "color": ["red", "blue"],
        "brand": ["Acme"],
    })

    assert [f.key for f in collection] == ["color", "brand"]
    assert collection.to_dict() == {"color": ["red", "blue"], "brand": ["Acme"]}
    assert list(collection.to_dict()["color"]) == ["red", "blue"]
    assert len(collection) == 2
    assert "color" in collection
    assert "size" not in collection


def test_empty_field_collection():
    collection = SearchDocumentFieldCollection.from_dict({})
    assert len(collection) == 0
    assert collection.to_dict() == {}


def test_value_order_is_significant_for_equality():
    a = SearchDocumentFieldCollection.from_dict({"baz": ["1", "2"]})
    b = SearchDocumentFieldCollection.from_dict({"baz": ["2", "1"]})
    assert a != b
    assert a == SearchDocumentFieldCollection.from_dict({"baz": ["1", "2"]})


def test_duplicate_keys_are_rejected():
    field = SearchDocumentField.from_key_and_values("baz", ["1"])
    with pytest.raises(ValueError, match="baz"):
        SearchDocumentFieldCollection(field, field)


def test_field_values_must_be_a_sequence_of_strings():
    with pytest.raises(TypeError):
        SearchDocumentField.from_key_and_values("baz", "12")
    with pytest.raises(TypeError):
        SearchDocumentField.from_key_and_values("baz", [1, 2])
    with pytest.raises(ValueError):
        SearchDocumentField.from_key_and_values("", ["1"])


def test_search_document_equality():
    make = lambda: SearchDocument(
        fields=SearchDocumentFieldCollection.from_dict({"baz": ["1"]}),
        context=Context({"website": "de"}),
        product_id=ProductId("foo"),
    )
    assert make() == make()
