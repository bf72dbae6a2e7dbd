"""In-memory task store.

All state lives in one ordered list guarded by a single ``threading.Lock``.
Every public method runs as one critical section, including the batch
operations, so no caller ever observes a partially applied batch. Records
handed out are copies; the internal list never leaves the lock.

WARNING: All data is volatile and lost when the process terminates.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Sequence

from tasktracker.models.tasks import Task
from tasktracker.services.id_policy import IdAllocator, IdPolicy, TaskId, create_allocator

logger = logging.getLogger(__name__)


class TaskStore:
    """Thread-safe ordered collection of tasks.

    Usage:
        store = TaskStore(IdPolicy.REUSED_INTEGER)
        task = store.add("Buy milk")
        store.complete(task.id)
        store.delete_batch({task.id})
    """

    def __init__(self, id_policy: IdPolicy | str = IdPolicy.REUSED_INTEGER) -> None:
        """Initialize an empty store.

        Args:
            id_policy: Identifier policy used for every task created by this store
        """
        self._allocator: IdAllocator = create_allocator(id_policy)
        self._lock = threading.Lock()
        self._tasks: list[Task] = []

    @property
    def id_policy(self) -> IdPolicy:
        return self._allocator.policy

    def parse_id(self, raw: object) -> TaskId:
        """Parse a raw id under this store's policy.

        Raises:
            InvalidTaskIdError: If ``raw`` is not a valid id for the policy
        """
        return self._allocator.parse(raw)

    def add(self, description: str) -> Task:
        """Create one task and return a copy of it."""
        return self.add_batch([description])[0]

    def add_batch(self, descriptions: Sequence[str]) -> list[Task]:
        """Create tasks for ``descriptions`` in order and return copies of them."""
        with self._lock:
            used = {task.id for task in self._tasks}
            ids = self._allocator.allocate(used, len(descriptions))
            created = [
                Task(id=task_id, description=description, completed=False)
                for task_id, description in zip(ids, descriptions)
            ]
            self._tasks.extend(created)
            logger.debug("Added %d task(s): %s", len(created), ids)
            return [task.model_copy() for task in created]

    def list_tasks(self) -> list[Task]:
        """Return a snapshot of all tasks in insertion order."""
        with self._lock:
            return [task.model_copy() for task in self._tasks]

    def complete(self, task_id: TaskId) -> bool:
        """Mark one task completed. Returns False if no task has ``task_id``."""
        return self.complete_batch({task_id})

    def complete_batch(self, task_ids: Iterable[TaskId]) -> bool:
        """Mark every task whose id is in ``task_ids`` completed.

        Unknown ids are ignored. Returns True if at least one task matched,
        including tasks that were already completed.
        """
        wanted = set(task_ids)
        with self._lock:
            matched = 0
            for task in self._tasks:
                if task.id in wanted:
                    task.completed = True
                    matched += 1
        logger.debug("Completed %d of %d requested task(s)", matched, len(wanted))
        return matched > 0

    def delete(self, task_id: TaskId) -> bool:
        """Remove one task. Returns False if no task has ``task_id``."""
        return self.delete_batch({task_id})

    def delete_batch(self, task_ids: Iterable[TaskId]) -> bool:
        """Remove every task whose id is in ``task_ids``.

        Returns True if the store shrank.
        """
        wanted = set(task_ids)
        with self._lock:
            before = len(self._tasks)
            self._tasks = [task for task in self._tasks if task.id not in wanted]
            removed = before - len(self._tasks)
        logger.debug("Deleted %d of %d requested task(s)", removed, len(wanted))
        return removed > 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)
