"""
core - Directory Edit Tool Core Module

Provides directory snapshots, the editable listing, action resolution and execution.
"""

from .errors import (
    StructuralError,
    StructuralIOError,
    ValidationError,
    EditorError,
    ConfirmationAborted,
)

from .models_fs import (
    Entry,
    Action,
    ActionKind,
    EntryKind,
    EditOptions,
    listed_form,
    LISTING_NAME,
    DEFAULT_EDITOR,
)

from .scan_files import (
    snapshot_directory,
    get_entry_kind,
)

from .listing import (
    ListingRecord,
    format_record,
    write_listing,
    parse_record,
    parse_listing,
)

from .text_match import (
    is_valid_filename,
    is_case_only_change,
)

from .plan_rename import (
    resolve_actions,
    validate_actions,
)

from .exec_rename import (
    execute_actions,
    ExecutionResult,
)

from .safety_checks import (
    check_writable,
    is_same_file,
)

from .editor import (
    get_editor,
    run_editor,
)

from .session import (
    temporary_listing,
    read_listing,
    edit_directory,
)

__all__ = [
    # Errors
    "StructuralError",
    "StructuralIOError",
    "ValidationError",
    "EditorError",
    "ConfirmationAborted",

    # Data models
    "Entry",
    "Action",
    "ActionKind",
    "EntryKind",
    "EditOptions",
    "listed_form",
    "LISTING_NAME",
    "DEFAULT_EDITOR",
    "ExecutionResult",

    # Snapshot
    "snapshot_directory",
    "get_entry_kind",

    # Listing
    "ListingRecord",
    "format_record",
    "write_listing",
    "parse_record",
    "parse_listing",

    # Text checks
    "is_valid_filename",
    "is_case_only_change",

    # Resolution
    "resolve_actions",
    "validate_actions",

    # Execution
    "execute_actions",

    # Safety checks
    "check_writable",
    "is_same_file",

    # Editor
    "get_editor",
    "run_editor",

    # Session
    "temporary_listing",
    "read_listing",
    "edit_directory",
]
