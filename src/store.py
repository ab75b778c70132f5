"""Task store: the single owner of the in-memory task collection.

Two mutating operations exist (add, toggle by id). Every successful
mutation is published synchronously to the subscribed callbacks with a
fresh snapshot of the collection.
"""
import logging
import uuid
from dataclasses import replace
from typing import Callable, Dict, Iterable, List, Tuple

from models import Task

logger = logging.getLogger(__name__)

Snapshot = Tuple[Task, ...]
Subscriber = Callable[[Snapshot], None]


def count_remaining(tasks: Iterable[Task]) -> int:
    return sum(1 for t in tasks if not t.is_completed)


class TaskStore:
    def __init__(self) -> None:
        self._tasks: List[Task] = []
        self._subscribers: Dict[int, Subscriber] = {}
        self._next_handle: int = 1

    # -------------------- queries --------------------
    @property
    def tasks(self) -> Snapshot:
        """Read-only snapshot in insertion order."""
        return tuple(self._tasks)

    @property
    def remaining(self) -> int:
        return count_remaining(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    # -------------------- observers --------------------
    def subscribe(self, callback: Subscriber) -> int:
        """Register a change callback; returns the handle for unsubscribe()."""
        handle = self._next_handle
        self._next_handle += 1
        self._subscribers[handle] = callback
        return handle

    def unsubscribe(self, handle: int) -> None:
        self._subscribers.pop(handle, None)

    def _notify(self) -> None:
        snapshot = self.tasks
        for callback in list(self._subscribers.values()):
            callback(snapshot)

    # -------------------- task operations --------------------
    def add_task(self, title: str, description: str) -> None:
        task = Task(title=title, description=description)
        self._tasks.append(task)
        logger.debug("Added task %s (%d total)", task.id, len(self._tasks))
        self._notify()

    def toggle_completion(self, task_id: uuid.UUID) -> None:
        """Flip completion of the task with ``task_id``; unknown ids are ignored."""
        for idx, task in enumerate(self._tasks):
            if task.id == task_id:
                self._tasks[idx] = replace(task, is_completed=not task.is_completed)
                logger.debug("Task %s completed=%s", task_id, not task.is_completed)
                self._notify()
                return

    def __str__(self) -> str:
        done = len(self._tasks) - self.remaining
        return f'{len(self._tasks)} tasks, {done} completed, {self.remaining} remaining'
