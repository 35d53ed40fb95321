"""Pure note log logic - date labels and the sectioned document merge.

The notes document is a markdown log bucketed by day:

    # 2025
    Some intro text.
    #### 10 Jun 2024
    newest entry

    #### 09 Jun 2024
    older entry

Everything before the first ``####`` line is the header block and is never
touched. No I/O here; the caller supplies the date.
"""

import re
from datetime import date

SECTION_MARKER = "####"

# Fixed English table so labels never depend on the process locale.
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

DATED_HEADER_RE = re.compile(
    r"#### [0-9]{2} (?:" + "|".join(MONTH_ABBREVIATIONS) + r") [0-9]{4}"
)


def format_date_label(target_date: date) -> str:
    """Render a date as ``DD Mon YYYY`` (e.g. ``10 Jun 2024``)."""
    month = MONTH_ABBREVIATIONS[target_date.month - 1]
    return f"{target_date.day:02d} {month} {target_date.year:04d}"


def section_header(target_date: date) -> str:
    """The dated section header line for a date."""
    return f"{SECTION_MARKER} {format_date_label(target_date)}"


def is_section_marker(line: str) -> bool:
    """Any line starting with four hashes opens the dated region."""
    return line.startswith(SECTION_MARKER)


def is_dated_header(line: str) -> bool:
    """Exact ``#### DD Mon YYYY`` line, nothing before or after."""
    return DATED_HEADER_RE.fullmatch(line) is not None


def split_header_block(lines: list[str]) -> tuple[list[str], list[str]]:
    """Split lines into (header block, remainder starting at first marker)."""
    for i, line in enumerate(lines):
        if is_section_marker(line):
            return lines[:i], lines[i:]
    return lines, []


def merge_note(document: str, target_date: date, new_content: str) -> str:
    """
    Record new_content under target_date's section of the document.

    Appends to the end of an existing section for the date, otherwise creates
    a new section right after the header block. Every other line is copied
    through unchanged. Calling twice records the content twice.
    """
    header = section_header(target_date)
    header_lines, remainder = split_header_block(document.split("\n"))

    output: list[str] = []
    found_today = False
    i = 0
    while i < len(remainder):
        line = remainder[i]
        if not (is_dated_header(line) and line == header):
            output.append(line)
            i += 1
            continue

        found_today = True
        output.append(line)
        i += 1
        # Copy the section body up to the next marker, then slot the note in.
        while i < len(remainder) and not is_section_marker(remainder[i]):
            output.append(remainder[i])
            i += 1
        output.append(new_content)
        output.append("")

    new_section = ""
    if not found_today:
        new_section = f"{header}\n{new_content}\n\n"

    return "\n".join(header_lines) + "\n" + new_section + "\n".join(output)
