"""
listing.py - Editable Listing Module

Responsibilities:
- Serialize a snapshot as `NNNN    name` lines
- Parse the edited listing back into (index, name) records
"""

from dataclasses import dataclass
from typing import IO, Iterable, List, Optional
import re

from .errors import StructuralIOError, ValidationError
from .models_fs import Entry, INDEX_WIDTH, NAME_TRIM, SEPARATOR


_INDEX_RE = re.compile(r"[0-9]+")
# Index field, then spaces/tabs, then the name through end of line
_RECORD_RE = re.compile(r"[ \t]*(\S+)(?:[ \t]+(.*))?", re.DOTALL)


@dataclass(frozen=True)
class ListingRecord:
    """One line of the edited listing"""
    index: int
    name: str
    line_no: int


def format_record(index: int, name: str) -> str:
    """Format one listing line"""
    return f"{index:0{INDEX_WIDTH}d}{SEPARATOR}{name}\n"


def write_listing(entries: Iterable[Entry], stream: IO[str]) -> None:
    """
    Write the snapshot to the listing, in snapshot order

    Raises:
        StructuralIOError: If writing fails
    """
    try:
        for entry in entries:
            stream.write(format_record(entry.index, entry.name))
        stream.flush()
    except OSError as e:
        raise StructuralIOError("unable to create temporary", e) from e


def parse_record(line: str, line_no: int, entry_count: int) -> Optional[ListingRecord]:
    """
    Parse one line of the edited listing

    Args:
        line: Line text (trailing newline allowed)
        line_no: 1-based line number, used in error messages
        entry_count: Number of entries in the snapshot

    Returns:
        The record, or None for a blank line
    """
    text = line.rstrip("\r\n")
    if not text.strip():
        return None

    match = _RECORD_RE.fullmatch(text)
    if match is None:
        raise ValidationError(f"parse error at '{text.strip()}'", line_no)
    index_text = match.group(1)

    if not _INDEX_RE.fullmatch(index_text):
        raise ValidationError(f"parse error at '{index_text}'", line_no)

    if match.group(2) is None:
        raise ValidationError(f"missing name for index {int(index_text)}", line_no)

    index = int(index_text)
    if index >= entry_count:
        raise ValidationError(f"index out of range ({index} >= {entry_count})", line_no)

    # May be empty; an empty rename target is rejected by validate_actions
    name = match.group(2).strip(NAME_TRIM)

    return ListingRecord(index=index, name=name, line_no=line_no)


def parse_listing(stream: IO[str], entry_count: int) -> List[ListingRecord]:
    """
    Parse the whole edited listing

    Args:
        stream: Edited listing opened for reading
        entry_count: Number of entries in the snapshot

    Returns:
        Records in listing order

    Raises:
        ValidationError: Malformed line, index out of range or duplicate index
        StructuralIOError: If reading fails
    """
    records: List[ListingRecord] = []
    seen = set()

    try:
        for line_no, line in enumerate(stream, start=1):
            record = parse_record(line, line_no, entry_count)
            if record is None:
                continue
            if record.index in seen:
                raise ValidationError(f"duplicate index {record.index}", line_no)
            seen.add(record.index)
            records.append(record)
    except (OSError, UnicodeDecodeError) as e:
        cause = e if isinstance(e, OSError) else OSError(str(e))
        raise StructuralIOError("unable to read temporary", cause) from e

    return records
