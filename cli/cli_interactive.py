"""
cli_interactive.py - Interactive Prompts

Yes/no confirmation used by interactive mode and directory deletion
"""

import sys
from typing import Optional, TextIO

from core import ConfirmationAborted


YES = ("y", "Y")
NO = ("n", "N")


def confirm(prompt: str, stdin: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> bool:
    """
    Ask a yes/no question until a valid answer is given

    Args:
        prompt: Question text
        stdin: Answer source (default sys.stdin)
        stderr: Where the question is printed (default sys.stderr)

    Returns:
        True for y/Y, False for n/N

    Raises:
        ConfirmationAborted: If input ends before an answer
    """
    stdin = stdin or sys.stdin
    stderr = stderr or sys.stderr

    while True:
        stderr.write(f"{prompt} y/n: ")
        stderr.flush()
        line = stdin.readline()
        if not line:
            stderr.write("\n")
            raise ConfirmationAborted("read error: end of input")
        answer = line.rstrip("\r\n")
        if answer in YES:
            return True
        if answer in NO:
            return False
