"""
session.py - Edit Session

Snapshot -> listing -> editor -> parse -> resolve -> execute, with the
listing file removed on every exit path
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, List, Optional
import os

from . import messages
from .editor import get_editor, run_editor
from .errors import StructuralIOError
from .exec_rename import Confirm, ExecutionResult, execute_actions
from .listing import parse_listing, write_listing
from .models_fs import Entry, EditOptions, LISTING_NAME
from .plan_rename import resolve_actions, validate_actions
from .safety_checks import check_writable
from .scan_files import snapshot_directory


Editor = Callable[[Path], None]

# Listing files hold names verbatim, including undecodable bytes
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


@contextmanager
def temporary_listing(directory: Path, entries: List[Entry]) -> Iterator[Path]:
    """
    Create the listing file in directory, remove it afterwards

    Removal failure is only a warning.

    Raises:
        StructuralIOError: If the listing cannot be written
    """
    path = Path(directory) / LISTING_NAME
    try:
        stream = open(path, "w", encoding=_ENCODING, errors=_ERRORS, newline="\n")
    except OSError as e:
        raise StructuralIOError("unable to create temporary", e) from e

    try:
        with stream:
            write_listing(entries, stream)
        yield path
    finally:
        try:
            os.unlink(path)
        except OSError:
            messages.warning(f"couldn't delete temporary {LISTING_NAME}")


def read_listing(path: Path, entries: List[Entry]) -> List[Entry]:
    """Parse the edited listing and resolve actions against the snapshot"""
    try:
        stream = open(path, "r", encoding=_ENCODING, errors=_ERRORS, newline="\n")
    except OSError as e:
        raise StructuralIOError("unable to reopen temporary", e) from e

    with stream:
        records = parse_listing(stream, len(entries))

    resolve_actions(entries, records)
    validate_actions(entries)
    return entries


def edit_directory(
    directory: Path,
    options: EditOptions,
    confirm: Confirm,
    editor: Optional[Editor] = None,
) -> ExecutionResult:
    """
    Run one full edit session on directory

    Args:
        directory: Target directory
        options: Resolved policy flags
        confirm: Yes/no prompt
        editor: Called with the listing path; defaults to running $EDITOR

    Returns:
        Execution result

    Raises:
        StructuralError: Any fatal error; the listing file is already removed
    """
    directory = Path(directory)

    writable, reason = check_writable(directory)
    if not writable:
        raise StructuralIOError(reason)

    entries = snapshot_directory(directory, exclude=(LISTING_NAME,))

    if editor is None:
        command = get_editor()

        def editor(target: Path) -> None:
            run_editor(command, target)

    with temporary_listing(directory, entries) as listing_path:
        editor(listing_path)
        read_listing(listing_path, entries)
        return execute_actions(entries, options, directory, confirm)
