"""
text_match.py - Filename Text Checks

Provides validation of names typed into the edited listing
"""

from typing import Optional
import os


MAX_NAME_LENGTH = 255


def is_valid_filename(name: str) -> tuple[bool, Optional[str]]:
    """
    Check if a new name is a single path component

    Entries may only be renamed within their directory, so separators
    are rejected.

    Args:
        name: Filename

    Returns:
        (is_valid, error_reason)
    """
    if not name:
        return False, "filename cannot be empty"

    if name in (".", ".."):
        return False, f"'{name}' is not a valid filename"

    separators = {"/", "\0"}
    if os.sep:
        separators.add(os.sep)
    if os.altsep:
        separators.add(os.altsep)
    for char in separators:
        if char in name:
            return False, f"filename contains invalid character: {char!r}"

    if len(os.fsencode(name)) > MAX_NAME_LENGTH:
        return False, f"filename exceeds {MAX_NAME_LENGTH} bytes"

    return True, None


def is_case_only_change(old: str, new: str) -> bool:
    """Whether two names differ only by case"""
    return old != new and old.casefold() == new.casefold()
