"""
Pytest configuration and shared fixtures.
"""

import os
import sys
import pytest

sys.path.append(os.path.join(os.getcwd(), "src"))

from filesearch.context import Context
from filesearch.search import (
    ProductId,
    SearchDocument,
    SearchDocumentFieldCollection,
)


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> None:
    """Set up test environment variables."""
    os.environ.setdefault("APP_ENV", "test")
    os.environ.setdefault("LOG_LEVEL", "debug")


@pytest.fixture
def storage_dir(tmp_path):
    """Empty, writable storage directory for a search engine."""
    directory = tmp_path / "search-engine-storage"
    directory.mkdir()
    return directory


@pytest.fixture
def make_document():
    """Factory building search documents from plain dicts."""

    def _make(product_id="foo", fields=None, context=None) -> SearchDocument:
        return SearchDocument(
            fields=SearchDocumentFieldCollection.from_dict(fields or {}),
            context=Context(context or {}),
            product_id=ProductId(product_id),
        )

    return _make
