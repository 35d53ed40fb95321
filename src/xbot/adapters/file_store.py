"""File-based document storage adapter."""

import hashlib
from pathlib import Path

from xbot.ports.document_store import (
    Document,
    DocumentNotFound,
    RevisionConflict,
    StoreError,
)


class FileDocumentStore:
    """
    File-based document storage.

    Implements DocumentStore protocol. Documents are files under a root
    directory; the revision is the SHA-1 of the file's bytes.
    """

    def __init__(self, root: Path | str):
        self.root = Path(root).expanduser()
        self.root.mkdir(parents=True, exist_ok=True)

    def _path_for(self, path: str) -> Path:
        return self.root / path.lstrip("/")

    @staticmethod
    def _revision(data: bytes) -> str:
        return hashlib.sha1(data).hexdigest()

    def fetch(self, path: str) -> Document:
        """Read a document. Raises DocumentNotFound if the file is missing."""
        file_path = self._path_for(path)
        if not file_path.exists():
            raise DocumentNotFound(f"File not found: {file_path}")
        try:
            data = file_path.read_bytes()
            content = data.decode("utf-8")
        except (OSError, ValueError) as e:
            raise StoreError(f"Failed to read {file_path}: {e}") from e
        return Document(content=content, revision=self._revision(data))

    def write(self, path: str, content: str, revision: str | None, message: str = "") -> str:
        """Write a document if it is still at the expected revision."""
        file_path = self._path_for(path)
        try:
            current = self._revision(file_path.read_bytes()) if file_path.exists() else None
        except OSError as e:
            raise StoreError(f"Failed to read {file_path}: {e}") from e
        if current != revision:
            raise RevisionConflict(f"File {file_path} changed since it was read")

        data = content.encode("utf-8")
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_bytes(data)
        except OSError as e:
            raise StoreError(f"Failed to write {file_path}: {e}") from e
        return self._revision(data)
