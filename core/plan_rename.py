"""
plan_rename.py - Action Resolution Module

Responsibilities:
- Merge the edited listing into the snapshot (Keep / Rename / Delete)
- Reject rename targets that cannot be applied safely
"""

from collections import defaultdict
from typing import Dict, Iterable, List

from .errors import ValidationError
from .listing import ListingRecord
from .models_fs import Entry
from .text_match import is_valid_filename


def resolve_actions(entries: List[Entry], records: Iterable[ListingRecord]) -> List[Entry]:
    """
    Apply edited records to the snapshot

    Entries not mentioned by any record keep their default Delete action.

    Args:
        entries: Snapshot, addressed by index
        records: Parsed listing records

    Returns:
        The same entries, resolved
    """
    for record in records:
        try:
            entries[record.index].set_action(record.name)
        except ValidationError as e:
            raise ValidationError(e.reason, record.line_no) from None
    return entries


def validate_actions(entries: List[Entry]) -> None:
    """
    Validate rename targets before anything touches the filesystem

    Rejected:
    - names that are not a single valid path component
    - two entries renamed to the same name
    - a rename onto the name of an entry that is kept

    A rename onto the name of an entry that is itself renamed or deleted is
    allowed; the executor finishes it once that name is free.

    Raises:
        ValidationError: On the first offending entry
    """
    kept = {e.name for e in entries if e.is_keep}
    targets: Dict[str, List[Entry]] = defaultdict(list)

    for entry in entries:
        if not entry.is_rename:
            continue
        new_name = entry.action.new_name

        valid, error = is_valid_filename(new_name)
        if not valid:
            raise ValidationError(f"invalid name for index {entry.index}: {error}")

        if new_name in kept:
            raise ValidationError(
                f"cannot rename {entry.name} to {new_name}: target is kept"
            )
        targets[new_name].append(entry)

    for new_name, sources in targets.items():
        if len(sources) > 1:
            names = ", ".join(e.name for e in sources)
            raise ValidationError(f"duplicate target {new_name} (from {names})")


def pending_names(entries: Iterable[Entry]) -> Dict[str, Entry]:
    """Original names that will be vacated by a rename or delete"""
    return {e.name: e for e in entries if e.is_rename or e.is_delete}
