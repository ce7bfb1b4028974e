"""
exec_rename.py - Action Execution Module

Responsibilities:
- Walk entries in snapshot order and apply Rename / Delete
- Confirmation, dry run, verbose and force policies
- Per-entry failures are recorded, the batch always runs to the end
- Two-phase rename when the target name is still held by a pending entry
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple
import os
import shutil
import uuid

from . import messages
from .models_fs import Entry, EntryKind, EditOptions
from .plan_rename import pending_names
from .safety_checks import is_same_file
from .scan_files import get_entry_kind
from .text_match import is_case_only_change


Confirm = Callable[[str], bool]


@dataclass
class ExecutionResult:
    """Execution result"""
    succeeded: List[Entry] = field(default_factory=list)
    failed: List[Tuple[Entry, str]] = field(default_factory=list)  # (entry, error_msg)
    skipped: List[Entry] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.succeeded)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    @property
    def exit_code(self) -> int:
        return 0 if not self.failed else 1

    def add_failure(self, entry: Entry, msg: str) -> None:
        """Record and report a per-entry failure"""
        messages.error(msg)
        self.failed.append((entry, msg))

    def summary(self) -> str:
        """Generate summary"""
        lines = [
            "Execution Result:",
            f"  - Success: {self.success_count}",
            f"  - Failed: {self.failed_count}",
            f"  - Skipped: {self.skipped_count}",
        ]
        if self.failed:
            lines.append("Failure Details:")
            for entry, error in self.failed[:10]:  # Show at most 10
                lines.append(f"  - {entry.name}: {error}")
            if len(self.failed) > 10:
                lines.append(f"  ... and {len(self.failed) - 10} more failures")
        return "\n".join(lines)


@dataclass
class _Deferred:
    entry: Entry
    src: Path
    temp: Path
    dst: Path


def _generate_temp_name(original: Path) -> Path:
    """Generate temporary filename"""
    unique_id = uuid.uuid4().hex[:8]
    return original.parent / f".__tmp_rename__{unique_id}__{original.name}"


def _cause(e: OSError) -> str:
    return e.strerror or str(e)


def execute_actions(
    entries: List[Entry],
    options: EditOptions,
    directory: Path,
    confirm: Confirm,
) -> ExecutionResult:
    """
    Execute resolved actions

    Args:
        entries: Resolved snapshot
        options: Resolved policy flags
        directory: Directory the entries live in
        confirm: Asks a yes/no question, used for interactive mode and
            directory deletion without force

    Returns:
        Execution result
    """
    directory = Path(directory)
    result = ExecutionResult()
    pending = pending_names(entries)
    deferred: List[_Deferred] = []

    if options.dry_run:
        messages.warning("dry run")

    try:
        for entry in entries:
            path = directory / entry.name

            try:
                kind = get_entry_kind(path)
            except OSError as e:
                result.add_failure(entry, f"unable to stat file {entry.name}: {_cause(e)}")
                continue

            if entry.is_keep:
                continue

            if not kind.is_known:
                messages.info(f"Skipping {kind.value} {entry.name}")
                result.skipped.append(entry)
                continue

            if entry.is_rename:
                _rename_entry(entry, path, options, confirm, pending, deferred, result)
            else:
                _delete_entry(entry, path, kind, options, confirm, result)
    finally:
        _finish_deferred(deferred, options, result)

    return result


def _rename_entry(
    entry: Entry,
    src: Path,
    options: EditOptions,
    confirm: Confirm,
    pending: Dict[str, Entry],
    deferred: List[_Deferred],
    result: ExecutionResult,
) -> None:
    new_name = entry.action.new_name

    if options.interactive and not confirm(f"Rename '{entry.name}' to '{new_name}'?"):
        result.skipped.append(entry)
        return

    if not options.dry_run:
        dst = src.parent / new_name
        try:
            # Case-only rename of one file on a case-insensitive filesystem
            case_only = is_case_only_change(entry.name, new_name) and is_same_file(src, dst)
            if os.path.lexists(dst) and not case_only:
                holder: Optional[Entry] = pending.get(new_name)
                if holder is None or holder.index < entry.index:
                    result.add_failure(
                        entry, f"unable to rename {entry.name}: {new_name} already exists"
                    )
                    return
                # Target is vacated later in the batch; park under a temporary name
                temp = _generate_temp_name(src)
                os.rename(src, temp)
                deferred.append(_Deferred(entry, src, temp, dst))
                return
            os.rename(src, dst)
        except OSError as e:
            result.add_failure(entry, f"unable to rename {entry.name}: {_cause(e)}")
            return

    result.succeeded.append(entry)
    if options.verbose:
        messages.info(f"rename    {entry.name}    to    {new_name}.")


def _delete_entry(
    entry: Entry,
    path: Path,
    kind: EntryKind,
    options: EditOptions,
    confirm: Confirm,
    result: ExecutionResult,
) -> None:
    if options.interactive and not confirm(f"Delete {entry.name}?"):
        result.skipped.append(entry)
        return

    is_dir = kind is EntryKind.DIRECTORY
    if is_dir and not options.force and not confirm(f"Delete directory {entry.name}?"):
        result.skipped.append(entry)
        return

    if not options.dry_run:
        try:
            if is_dir:
                shutil.rmtree(path)
            else:
                os.unlink(path)
        except OSError as e:
            result.add_failure(entry, f"unable to delete {entry.name}: {_cause(e)}")
            return

    result.succeeded.append(entry)
    if options.verbose:
        messages.info(f"delete    {entry.name}")


def _finish_deferred(
    deferred: List[_Deferred],
    options: EditOptions,
    result: ExecutionResult,
) -> None:
    """Phase 2: move parked entries to their final names"""
    for item in deferred:
        entry = item.entry
        new_name = item.dst.name

        if os.path.lexists(item.dst):
            try:
                os.rename(item.temp, item.src)
                result.add_failure(
                    entry,
                    f"unable to rename {entry.name}: {new_name} still exists (restored)",
                )
            except OSError as e:
                result.add_failure(
                    entry,
                    f"unable to rename {entry.name}: {new_name} still exists, "
                    f"restore failed ({_cause(e)}), left as {item.temp.name}",
                )
            continue

        try:
            os.rename(item.temp, item.dst)
        except OSError as e:
            result.add_failure(
                entry,
                f"unable to rename {entry.name}: {_cause(e)}, left as {item.temp.name}",
            )
            continue

        result.succeeded.append(entry)
        if options.verbose:
            messages.info(f"rename    {entry.name}    to    {new_name}.")
