"""Dimensional context (locale, website, data version, ...) of search documents."""

from .context import (
    DATA_VERSION_CODE,
    UNVERSIONED,
    Context,
    ContextCodeNotSupported,
)

__all__ = ["Context", "ContextCodeNotSupported", "DATA_VERSION_CODE", "UNVERSIONED"]
