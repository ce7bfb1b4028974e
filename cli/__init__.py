"""
cli - Command Line Interface for Directory Edit Tool
"""

from .cli_entry import main
from .cli_interactive import confirm

__all__ = ["main", "confirm"]
