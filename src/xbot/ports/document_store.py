"""Document storage interface."""

from dataclasses import dataclass
from typing import Protocol


class StoreError(Exception):
    """Raised when a document store operation fails."""

    pass


class DocumentNotFound(StoreError):
    """Raised when the requested document does not exist."""

    pass


class RevisionConflict(StoreError):
    """Raised when a write's expected revision is no longer current."""

    pass


@dataclass
class Document:
    """A stored document and the revision token it was read at."""

    content: str
    revision: str | None = None


class DocumentStore(Protocol):
    """Interface for a versioned key/revision document store."""

    def fetch(self, path: str) -> Document:
        """Fetch a document. Raises DocumentNotFound if it does not exist."""
        ...

    def write(self, path: str, content: str, revision: str | None, message: str) -> str:
        """
        Write a document, guarded by the revision it was read at.

        Pass revision=None to create a new document. Returns the new revision.
        """
        ...
