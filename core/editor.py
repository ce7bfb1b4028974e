"""
editor.py - External Editor Invocation

Runs ``$EDITOR`` on the listing and blocks until it exits.
"""

from pathlib import Path
from typing import List, Mapping, Optional
import os
import shlex
import subprocess

from . import messages
from .errors import EditorError
from .models_fs import DEFAULT_EDITOR


def get_editor(environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Determine the editor command

    Falls back to the default editor, with a warning, when EDITOR is unset
    or empty.
    """
    if environ is None:
        environ = os.environ
    editor = environ.get("EDITOR", "").strip()
    if not editor:
        messages.warning(f"EDITOR not set, using default '{DEFAULT_EDITOR}'")
        return DEFAULT_EDITOR
    return editor


def run_editor(editor: str, target: Path) -> None:
    """
    Run the editor on target and wait for it

    Raises:
        EditorError: Editor could not be started, returned non-zero or was
            terminated by a signal
    """
    cmd: List[str] = shlex.split(editor)
    if not cmd:
        raise EditorError(f"unable to run '{editor}': empty command")

    try:
        completed = subprocess.run([*cmd, str(target)], check=False)
    except OSError as e:
        raise EditorError(f"unable to run '{editor}': {e.strerror or e}") from e

    if completed.returncode < 0:
        raise EditorError(f"{editor} did not exit")
    if completed.returncode != 0:
        raise EditorError(f"{editor} returned {completed.returncode}")
