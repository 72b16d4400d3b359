"""View model for the task board.

Holds what the screen shows (the task list, whether the creation form is
open, field errors and toast notifications) and drives the API client.
After every successful mutation the full list is fetched again instead of
being patched locally, so the board always mirrors the server's view.
"""

import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Callable, Dict, List

import httpx

from ..config import TOAST_DURATION_SECONDS
from ..errors import ValidationError
from ..schemas.task import TaskRead
from .api import TaskApiClient

logger = logging.getLogger(__name__)

SUCCESS = "success"
ERROR = "error"


@dataclass
class Toast:
    message: str
    kind: str
    expires_at: float
    id: str = field(default_factory=lambda: uuid.uuid4().hex)


def validate_task_form(title: str, description: str) -> None:
    """Raise ValidationError if either field is blank after trimming."""
    fields: Dict[str, str] = {}
    if not title.strip():
        fields["title"] = "Task title is required"
    if not description.strip():
        fields["description"] = "Task description is required"
    if fields:
        raise ValidationError("Title and Description are required", fields=fields)


class TaskBoard:
    def __init__(
        self,
        api: TaskApiClient,
        toast_duration: float = TOAST_DURATION_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.api = api
        self.toast_duration = toast_duration
        self.clock = clock

        self.tasks: List[TaskRead] = []
        self.loading = True
        self.form_open = False
        self.form_errors: Dict[str, str] = {}
        self.toasts: List[Toast] = []

    def load(self) -> None:
        """Fetch the task list; on failure the current list is kept."""
        try:
            self.tasks = self.api.get_tasks()
        except httpx.HTTPError as exc:
            logger.error("Error loading tasks: %s", exc)
        finally:
            self.loading = False

    def open_form(self) -> None:
        self.form_open = True

    def close_form(self) -> None:
        self.form_open = False
        self.form_errors = {}

    def toggle_form(self) -> None:
        if self.form_open:
            self.close_form()
        else:
            self.open_form()

    def clear_field_error(self, name: str) -> None:
        """Drop the error for a field once the user edits it."""
        self.form_errors.pop(name, None)

    def submit_form(self, title: str, description: str) -> bool:
        """Validate and create a task. Returns True when the task was created."""
        try:
            validate_task_form(title, description)
        except ValidationError as exc:
            self.form_errors = dict(exc.fields)
            return False
        self.form_errors = {}

        try:
            self.api.create_task(title, description)
        except httpx.HTTPError as exc:
            logger.error("Error creating task: %s", exc)
            self.notify("Failed to create task. Please try again.", ERROR)
            return False

        self.load()
        self.close_form()
        self.notify("Task created successfully!", SUCCESS)
        return True

    def complete(self, task_id: int) -> bool:
        try:
            self.api.complete_task(task_id)
        except httpx.HTTPError as exc:
            logger.error("Error completing task %s: %s", task_id, exc)
            self.notify("Failed to complete task. Please try again.", ERROR)
            return False

        self.load()
        self.notify("Task marked as complete!", SUCCESS)
        return True

    def notify(self, message: str, kind: str) -> Toast:
        toast = Toast(message=message, kind=kind, expires_at=self.clock() + self.toast_duration)
        self.toasts.append(toast)
        return toast

    def dismiss(self, toast_id: str) -> None:
        self.toasts = [toast for toast in self.toasts if toast.id != toast_id]

    def expire_toasts(self) -> List[Toast]:
        """Remove toasts whose display time has run out and return them."""
        now = self.clock()
        expired = [toast for toast in self.toasts if toast.expires_at <= now]
        if expired:
            self.toasts = [toast for toast in self.toasts if toast.expires_at > now]
        return expired
