import re
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..errors import ErrorKind, NotFoundError, TaskError
from ..schemas.envelope import TaskEnvelope, TaskListEnvelope
from ..schemas.task import TaskCreate, TaskRead
from ..services.task_service import TaskService

router = APIRouter()

_ID_PREFIX = re.compile(r"\s*([+-]?)(\d+)")

# Task.id is a 32-bit INTEGER column on Postgres.
MAX_TASK_ID = 2**31 - 1


def get_task_service(db: Session = Depends(get_db)) -> TaskService:
    return TaskService(db)


def parse_task_id(raw: str) -> Optional[int]:
    """Parse the leading integer of a path segment.

    None when there is no numeric prefix or the value cannot be a stored id.
    """
    match = _ID_PREFIX.match(raw)
    if not match:
        return None
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    if len(digits) > len(str(MAX_TASK_ID)):
        return None
    value = int(sign + digits)
    if abs(value) > MAX_TASK_ID:
        return None
    return value


def _id_label(raw: str) -> str:
    """How an unparseable id appears in the not-found message."""
    match = _ID_PREFIX.match(raw)
    if not match:
        return "NaN"
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    return digits if sign != "-" or digits == "0" else f"-{digits}"


def _http_error(status_code: int, message: str, exc: TaskError) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail={"message": message, "error": exc.message},
    )


@router.get("/task", response_model=TaskListEnvelope)
def list_tasks(service: TaskService = Depends(get_task_service)):
    """List the most recent incomplete tasks, newest first."""
    try:
        tasks = service.list_incomplete()
    except TaskError as exc:
        raise _http_error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch tasks", exc)

    data = [TaskRead.model_validate(task) for task in tasks]
    return TaskListEnvelope(
        code="200",
        message="Tasks retrieved successfully",
        data=data,
        count=len(data),
    )


@router.post("/task", response_model=TaskEnvelope, status_code=status.HTTP_201_CREATED)
def create_task(
    task: TaskCreate,
    service: TaskService = Depends(get_task_service),
):
    """Create a new, incomplete task."""
    try:
        created = service.create(task.title, task.description)
    except TaskError as exc:
        raise _http_error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to create task", exc)

    return TaskEnvelope(
        code="201",
        message="Task created successfully",
        data=TaskRead.model_validate(created),
    )


@router.patch("/task/{task_id}/complete", response_model=TaskEnvelope)
def mark_task_complete(
    task_id: str,
    service: TaskService = Depends(get_task_service),
):
    """Mark a task as complete."""
    try:
        parsed_id = parse_task_id(task_id)
        if parsed_id is None:
            raise NotFoundError(_id_label(task_id))
        task = service.complete_by_id(parsed_id)
    except TaskError as exc:
        if exc.kind is ErrorKind.NOT_FOUND:
            raise _http_error(status.HTTP_404_NOT_FOUND, exc.message, exc)
        raise _http_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to mark task as completed", exc
        )

    return TaskEnvelope(
        code="200",
        message="Task marked as completed",
        data=TaskRead.model_validate(task),
    )
