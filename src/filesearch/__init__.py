"""
FileSearch - filesystem-backed search document store

This package contains:
- context: dimensional context of search documents (website, locale, version)
- search: search documents, errors and the search engine abstraction
- search.filesystem: the file-per-document search engine and its codec
- util: local filesystem helpers
- platform: configuration and logging
"""

__version__ = "0.1.0"
