"""
safety_checks.py - Safety Check Module

Provides checks run before the listing is created and before each rename
"""

from pathlib import Path
from typing import Tuple, Optional
import os


def check_writable(directory: Path) -> Tuple[bool, Optional[str]]:
    """
    Check if the target directory can hold the listing and be modified

    Args:
        directory: Directory to check

    Returns:
        (is_writable, error_reason)
    """
    if not directory.is_dir():
        return False, f"not a directory: {directory}"
    if not os.access(directory, os.W_OK | os.X_OK):
        return False, f"directory is not writable: {directory}"
    return True, None


def is_same_file(path1: Path, path2: Path) -> bool:
    """
    Check if two paths name the same file (case-only rename on a
    case-insensitive filesystem)

    Args:
        path1: Path 1
        path2: Path 2

    Returns:
        Whether both paths resolve to the same inode
    """
    try:
        stat1 = os.lstat(path1)
        stat2 = os.lstat(path2)
    except OSError:
        return False
    return (stat1.st_dev, stat1.st_ino) == (stat2.st_dev, stat2.st_ino)
