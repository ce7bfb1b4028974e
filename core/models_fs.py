"""
models_fs.py - Core Data Structure Definitions

Contains:
- Entry: One directory child and its reconciled action
- Action: Keep / Rename / Delete
- EntryKind: Filesystem kind learned before execution
- EditOptions: Execution policy flags
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .errors import ValidationError


LISTING_NAME = ".diredit.tmp"   # Fixed name of the editable listing
DEFAULT_EDITOR = "vi"           # Used when EDITOR is not set
INDEX_WIDTH = 4                 # Minimum zero padding of the index field
SEPARATOR = "    "              # Between index and name
NAME_TRIM = " \t"               # Trimmed from both ends of a listed name


def listed_form(name: str) -> str:
    """Name as it reads back from an unchanged listing line"""
    return name.rstrip("\r\n").strip(NAME_TRIM)


class ActionKind(Enum):
    """Action enumeration"""
    KEEP = "keep"
    RENAME = "rename"
    DELETE = "delete"


class EntryKind(Enum):
    """Filesystem kind of an entry"""
    FILE = "file"
    DIRECTORY = "directory"
    NAMED_PIPE = "named_pipe"
    SYMLINK = "sym_link"
    OTHER = "other"

    @property
    def is_known(self) -> bool:
        """Whether the executor may rename or delete this kind"""
        return self is not EntryKind.OTHER


@dataclass(frozen=True)
class Action:
    """Resolved action of one entry"""
    kind: ActionKind
    new_name: Optional[str] = None  # Only set for RENAME

    @classmethod
    def keep(cls) -> "Action":
        return cls(ActionKind.KEEP)

    @classmethod
    def delete(cls) -> "Action":
        return cls(ActionKind.DELETE)

    @classmethod
    def rename(cls, new_name: str) -> "Action":
        return cls(ActionKind.RENAME, new_name)

    def __str__(self) -> str:
        if self.kind is ActionKind.RENAME:
            return f"rename to {self.new_name}"
        return self.kind.value


@dataclass
class Entry:
    """One immediate child of the target directory"""
    index: int                      # Position in the snapshot, 0-based
    name: str                       # Original name, never changed
    action: Action = field(default_factory=Action.delete)
    resolved: bool = False          # Whether the listing mentioned this entry

    def set_action(self, new_name: str) -> None:
        """
        Record the edited name for this entry

        Equal names collapse to Keep, including the trimmed form an unchanged
        line reads back as. May only happen once per entry.

        Args:
            new_name: Name found in the edited listing
        """
        if self.resolved:
            raise ValidationError(f"duplicate index {self.index}")
        self.resolved = True
        if new_name in (self.name, listed_form(self.name)):
            self.action = Action.keep()
        else:
            self.action = Action.rename(new_name)

    @property
    def is_keep(self) -> bool:
        return self.action.kind is ActionKind.KEEP

    @property
    def is_rename(self) -> bool:
        return self.action.kind is ActionKind.RENAME

    @property
    def is_delete(self) -> bool:
        return self.action.kind is ActionKind.DELETE

    @property
    def target_name(self) -> str:
        """Name the entry will have after execution (its own name unless renamed)"""
        return self.action.new_name if self.is_rename else self.name


@dataclass(frozen=True)
class EditOptions:
    """Execution policy, resolved once before execution"""
    verbose: bool = False           # Report each action
    dry_run: bool = False           # Simulate, do not touch the filesystem
    interactive: bool = False       # Confirm each action
    force: bool = False             # Delete directories without the extra prompt

    @classmethod
    def resolve(
        cls,
        verbose: bool = False,
        dry_run: bool = False,
        interactive: bool = False,
        force: bool = False
    ) -> "EditOptions":
        """
        Apply flag precedence

        - force disables interactive mode
        - interactive mode without dry run disables verbose output
          (the prompts already describe each action)
        """
        if force:
            interactive = False
        if interactive and not dry_run:
            verbose = False
        return cls(verbose=verbose, dry_run=dry_run, interactive=interactive, force=force)
