"""Ports - interfaces/protocols for external dependencies."""

from .document_store import (
    Document,
    DocumentNotFound,
    DocumentStore,
    RevisionConflict,
    StoreError,
)

__all__ = [
    "Document",
    "DocumentNotFound",
    "DocumentStore",
    "RevisionConflict",
    "StoreError",
]
