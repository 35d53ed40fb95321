"""Adapters - I/O implementations of ports."""

from .github_store import GitHubDocumentStore
from .file_store import FileDocumentStore

__all__ = [
    "GitHubDocumentStore",
    "FileDocumentStore",
]
