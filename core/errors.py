"""
errors.py - Error Types

Structural errors abort the whole run. Per-entry filesystem failures are
plain OSError and are handled inside the executor.
"""

from typing import Optional


class StructuralError(Exception):
    """Fatal error: the run stops, only the temporary listing is cleaned up"""


class StructuralIOError(StructuralError):
    """Directory or listing could not be read or written"""

    def __init__(self, message: str, cause: Optional[OSError] = None):
        if cause is not None:
            message = f"{message}: {cause.strerror or cause}"
        super().__init__(message)
        self.cause = cause


class ValidationError(StructuralError):
    """Edited listing cannot be trusted to express user intent"""

    def __init__(self, message: str, line_no: Optional[int] = None):
        self.reason = message
        self.line_no = line_no
        if line_no is not None:
            message = f"{message} (line {line_no})"
        super().__init__(message)


class EditorError(StructuralError):
    """Editor could not be started or exited abnormally"""


class ConfirmationAborted(StructuralError):
    """Input closed while waiting for an answer"""
