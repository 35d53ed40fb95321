"""Shared workflow layer between CLI and Telegram.

record_note fetches the notes document, merges the new note into today's
section, and writes it back guarded by the revision it was read at.
"""

import logging
import re
from datetime import date, datetime
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .adapters.file_store import FileDocumentStore
from .adapters.github_store import GitHubDocumentStore
from .config import Config
from .core.notes import merge_note
from .ports.document_store import DocumentNotFound, DocumentStore, StoreError

logger = logging.getLogger(__name__)

NOTE_COMMAND_RE = re.compile(r"^/note(?:@\w+)?(?=\s|$)", re.IGNORECASE)


class NoteError(Exception):
    """Raised when a note could not be recorded. Nothing was written."""

    pass


def get_store(config: Config) -> tuple[DocumentStore, str]:
    """Resolve the document store and document path from config."""
    if config.github_configured():
        store = GitHubDocumentStore(
            token=config.github_token,
            owner=config.github_repo_owner,
            repo=config.github_repo_name,
            branch=config.github_branch_name,
        )
        return store, config.github_file_path

    if config.notes_dir:
        return FileDocumentStore(Path(config.notes_dir).expanduser()), config.notes_file

    missing = ", ".join(config.missing_github_settings())
    raise ValueError(
        f"No notes store configured. Set {missing} or NOTES_DIR in xbot.conf"
    )


def today_for(config: Config) -> date:
    """Today's date in the configured timezone."""
    try:
        tz = ZoneInfo(config.timezone or "UTC")
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown TIMEZONE {config.timezone!r} in xbot.conf") from e
    return datetime.now(tz).date()


def note_text_from_message(text: str) -> str:
    """Strip a leading /note command. Empty means nothing to record."""
    return NOTE_COMMAND_RE.sub("", text, count=1).lstrip()


def record_note(
    store: DocumentStore,
    path: str,
    content: str,
    target_date: date,
    commit_message: str,
) -> str:
    """Merge content into the document at path. Returns the written document."""
    try:
        document = store.fetch(path)
        current, revision = document.content, document.revision
    except DocumentNotFound:
        logger.warning(f"File {path} not found. Creating new file.")
        current, revision = "", None
    except StoreError as e:
        raise NoteError(f"Failed to retrieve file content: {e}") from e

    updated = merge_note(current, target_date, content)

    try:
        store.write(path, updated, revision, commit_message)
    except StoreError as e:
        raise NoteError(f"Failed to sync up file: {e}") from e

    logger.info(f"Recorded note in {path} for {target_date.isoformat()}")
    return updated


def record_note_from_config(config: Config, content: str, target_date: date | None = None) -> str:
    """Record a note using the store and date resolved from config."""
    store, path = get_store(config)
    return record_note(
        store,
        path,
        content,
        target_date or today_for(config),
        config.github_commit_message,
    )
