import logging
from datetime import timedelta
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..errors import NotFoundError, StorageError
from ..models import Task, utcnow

logger = logging.getLogger(__name__)

# The list view shows the most recent incomplete tasks only.
RECENT_TASK_LIMIT = 5


class TaskService:
    """Task lifecycle over a single SQLAlchemy session.

    Every storage failure is rolled back and re-raised as ``StorageError``
    carrying the original exception as its cause.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_incomplete(self) -> List[Task]:
        try:
            return (
                self.db.query(Task)
                .filter(Task.is_completed.is_(False))
                .order_by(Task.created_at.desc(), Task.id.desc())
                .limit(RECENT_TASK_LIMIT)
                .all()
            )
        except SQLAlchemyError as exc:
            raise self._storage_error("Failed to retrieve tasks", exc) from exc

    def create(self, title: str, description: str) -> Task:
        now = utcnow()
        task = Task(
            title=title,
            description=description,
            is_completed=False,
            created_at=now,
            updated_at=now,
        )
        try:
            self.db.add(task)
            self.db.commit()
            self.db.refresh(task)
        except SQLAlchemyError as exc:
            raise self._storage_error("Failed to create task", exc) from exc

        logger.info("Created task %s", task.id)
        return task

    def complete_by_id(self, task_id: int) -> Task:
        """Mark a task as completed and return the re-read row.

        Completing an already completed task re-applies the update.
        """
        try:
            task = self.db.get(Task, task_id)
        except SQLAlchemyError as exc:
            raise self._storage_error("Failed to mark task as completed", exc) from exc
        if task is None:
            raise NotFoundError(task_id)

        now = utcnow()
        if task.updated_at is not None and now <= task.updated_at:
            now = task.updated_at + timedelta(microseconds=1)

        try:
            task.is_completed = True
            task.updated_at = now
            self.db.commit()
            self.db.refresh(task)
        except SQLAlchemyError as exc:
            raise self._storage_error("Failed to mark task as completed", exc) from exc

        logger.info("Completed task %s", task.id)
        return task

    def _storage_error(self, action: str, exc: SQLAlchemyError) -> StorageError:
        self.db.rollback()
        logger.error("%s: %s", action, exc)
        return StorageError(f"{action}: {exc}", cause=exc)
