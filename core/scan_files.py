"""
scan_files.py - Directory Snapshot Module

Lists the immediate children of a directory and classifies paths by kind
"""

from pathlib import Path
from typing import Iterable, List
import os
import stat

from .errors import StructuralIOError
from .models_fs import Entry, EntryKind


def snapshot_directory(directory: Path, exclude: Iterable[str] = ()) -> List[Entry]:
    """
    Snapshot the immediate children of a directory (non-recursive)

    Entries keep the order the OS yields them; no sorting.

    Args:
        directory: Target directory
        exclude: Names left out of the snapshot (e.g. the listing file)

    Returns:
        Entries with dense indices 0..N-1
    """
    excluded = set(exclude)
    entries: List[Entry] = []

    try:
        with os.scandir(directory) as it:
            for item in it:
                if item.name in excluded:
                    continue
                entries.append(Entry(index=len(entries), name=item.name))
    except OSError as e:
        raise StructuralIOError(f"unable to read directory {directory}", e) from e

    return entries


def get_entry_kind(path: Path) -> EntryKind:
    """
    Classify a path without following symlinks

    Raises:
        OSError: If the path cannot be stat'ed
    """
    mode = os.lstat(path).st_mode

    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    if stat.S_ISFIFO(mode):
        return EntryKind.NAMED_PIPE
    if stat.S_ISLNK(mode):
        return EntryKind.SYMLINK
    return EntryKind.OTHER
