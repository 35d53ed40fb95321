"""GitHub contents API adapter - HTTP client for the notes document."""

import base64
import logging

import requests

from xbot.ports.document_store import (
    Document,
    DocumentNotFound,
    RevisionConflict,
    StoreError,
)

logger = logging.getLogger(__name__)

API_BASE = "https://api.github.com"


class GitHubDocumentStore:
    """
    GitHub repository file adapter.

    Implements DocumentStore protocol. Paths are files in one repository
    branch; revisions are the blob SHAs GitHub uses for optimistic locking.
    """

    def __init__(
        self,
        token: str,
        owner: str,
        repo: str,
        branch: str = "main",
        session: requests.Session | None = None,
        timeout: int = 30,
    ):
        self.owner = owner
        self.repo = repo
        self.branch = branch
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
            }
        )

    def _contents_url(self, path: str) -> str:
        return f"{API_BASE}/repos/{self.owner}/{self.repo}/contents/{path.lstrip('/')}"

    def fetch(self, path: str) -> Document:
        """Fetch a file's decoded content and SHA."""
        try:
            resp = self._session.get(
                self._contents_url(path),
                params={"ref": self.branch},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise StoreError(f"Failed to get file content: {e}") from e

        if resp.status_code == 404:
            raise DocumentNotFound(f"File not found: {path} on branch {self.branch}")
        if resp.status_code != 200:
            raise StoreError(f"Failed to get file content: {resp.status_code} {resp.text}")

        try:
            data = resp.json()
        except ValueError as e:
            raise StoreError(f"Failed to get file content: invalid JSON response: {e}") from e
        if isinstance(data, list):
            raise StoreError(f"Path {path} is a directory, not a file.")
        if not isinstance(data, dict):
            raise StoreError("Failed to get file content: unexpected response shape.")

        if data.get("encoding") != "base64" or not isinstance(data.get("content"), str):
            raise StoreError("Failed to decode file content: expected base64 encoded string content.")

        # GitHub wraps the base64 payload at 60 columns.
        try:
            raw = base64.b64decode("".join(data["content"].split()))
            return Document(content=raw.decode("utf-8"), revision=data["sha"])
        except (ValueError, KeyError) as e:
            raise StoreError(f"Failed to decode file content: {e!r}") from e

    def write(self, path: str, content: str, revision: str | None, message: str) -> str:
        """Create or update a file. Returns the new blob SHA."""
        payload = {
            "message": message,
            "content": base64.b64encode(content.encode("utf-8")).decode("ascii"),
            "branch": self.branch,
        }
        if revision:
            payload["sha"] = revision

        try:
            resp = self._session.put(
                self._contents_url(path),
                json=payload,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise StoreError(f"Failed to update file: {e}") from e

        if resp.status_code in (409, 422):
            logger.warning(f"Revision conflict writing {path}: {resp.text}")
            raise RevisionConflict(f"File {path} changed since it was read")
        if resp.status_code not in (200, 201):
            raise StoreError(f"Failed to update file: {resp.status_code} {resp.text}")

        try:
            return resp.json()["content"]["sha"]
        except (ValueError, KeyError, TypeError) as e:
            raise StoreError(f"Unexpected response updating {path}: {e!r}") from e
