"""Typed errors raised by the task service and client.

Each error carries an ``ErrorKind`` tag and, where one exists, the
underlying exception as ``cause`` so callers can branch on the kind
instead of parsing messages.
"""

import enum
from typing import Dict, Optional


class ErrorKind(str, enum.Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    STORAGE = "storage"


class TaskError(Exception):
    """Base error for task operations."""

    kind: ErrorKind = ErrorKind.STORAGE

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class ValidationError(TaskError, ValueError):
    """Input was malformed; ``fields`` maps field names to messages."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, fields: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.fields = fields or {}


class NotFoundError(TaskError):
    """No task exists with the referenced id."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, task_id):
        super().__init__(f"Task with ID {task_id} not found")
        self.task_id = task_id


class StorageError(TaskError):
    """The store call failed (connectivity, constraint, timeout...)."""

    kind = ErrorKind.STORAGE
