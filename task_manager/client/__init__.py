from .api import TaskApiClient
from .board import TaskBoard, Toast, validate_task_form

__all__ = ["TaskApiClient", "TaskBoard", "Toast", "validate_task_form"]
