"""In-memory task storage.

Tasks live in a plain list in insertion order; lookups are linear scans.
Nothing is persisted and ids are not required to be unique.
"""

import logging

from todo_api.models import Todo

logger = logging.getLogger(__name__)


class TaskStore:
    """Simple in-memory task storage."""

    def __init__(self) -> None:
        """Initialize an empty task store."""
        self._tasks: list[Todo] = []

    def __len__(self) -> int:
        return len(self._tasks)

    def list_tasks(self) -> list[Todo]:
        """Return all tasks in insertion order (the live list, not a copy)."""
        return self._tasks

    def get_task_by_id(self, task_id: int) -> Todo | None:
        """Get the first task with the given ID, or None if not found."""
        return next((task for task in self._tasks if task.id == task_id), None)

    def add_task(self, task: Todo) -> Todo:
        """Append a task and return it unchanged."""
        self._tasks.append(task)
        logger.debug("Added todo id=%s (%d stored)", task.id, len(self._tasks))
        return task

    def delete_task_by_id(self, task_id: int) -> None:
        """Delete every task with the given ID. Missing IDs are a no-op."""
        before = len(self._tasks)
        self._tasks[:] = [task for task in self._tasks if task.id != task_id]
        logger.debug("Deleted %d todo(s) with id=%s", before - len(self._tasks), task_id)

    def clear(self) -> None:
        """Clear all tasks. Useful for testing."""
        self._tasks.clear()
