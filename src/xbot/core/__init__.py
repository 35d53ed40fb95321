"""Functional core - pure business logic with no I/O."""

from .notes import (
    format_date_label,
    is_dated_header,
    is_section_marker,
    merge_note,
    section_header,
    split_header_block,
)

__all__ = [
    "format_date_label",
    "is_dated_header",
    "is_section_marker",
    "merge_note",
    "section_header",
    "split_header_block",
]
