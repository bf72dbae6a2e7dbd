"""Task identifier allocation policies.

Two policies are supported:

* ``reused_integer`` - every new task receives the smallest positive integer
  not held by a task currently in the store. Ids are recycled after deletion,
  so an id is not a long-term handle.
* ``unique_random`` - every new task receives a random UUID4 that is never
  reassigned.

Allocators are pure: they receive the set of ids in use and return fresh ids.
Locking is the caller's job (see ``TaskStore``).
"""

from __future__ import annotations

import uuid
from collections.abc import Set
from enum import Enum
from typing import Protocol, Union

TaskId = Union[int, uuid.UUID]


class IdPolicy(str, Enum):
    """Identifier policy selectable through configuration."""

    REUSED_INTEGER = "reused_integer"
    UNIQUE_RANDOM = "unique_random"


class InvalidTaskIdError(ValueError):
    """Raised when a raw identifier does not parse under the active policy."""

    def __init__(self, raw: object, policy: IdPolicy) -> None:
        super().__init__(f"Invalid task id {raw!r} for id policy '{policy.value}'")
        self.raw = raw
        self.policy = policy


class IdAllocator(Protocol):
    """Interface shared by the allocation policies."""

    policy: IdPolicy

    def allocate(self, used: Set[TaskId], count: int = 1) -> list[TaskId]:
        """Return ``count`` distinct ids, none of them in ``used``."""
        ...

    def parse(self, raw: object) -> TaskId:
        """Convert a path or body value into a task id."""
        ...


class ReusedIntegerAllocator:
    """Assigns the smallest positive integers not currently in use."""

    policy = IdPolicy.REUSED_INTEGER

    def allocate(self, used: Set[TaskId], count: int = 1) -> list[TaskId]:
        # Sequential single adds would each pick the smallest free integer, so a
        # batch receives the `count` smallest free integers in ascending order.
        allocated: list[TaskId] = []
        candidate = 1
        while len(allocated) < count:
            if candidate not in used:
                allocated.append(candidate)
            candidate += 1
        return allocated

    def parse(self, raw: object) -> TaskId:
        if isinstance(raw, bool):
            raise InvalidTaskIdError(raw, self.policy)
        if isinstance(raw, int):
            return raw
        if isinstance(raw, str):
            try:
                return int(raw.strip())
            except ValueError as exc:
                raise InvalidTaskIdError(raw, self.policy) from exc
        raise InvalidTaskIdError(raw, self.policy)


class UniqueRandomAllocator:
    """Assigns random UUID4 tokens."""

    policy = IdPolicy.UNIQUE_RANDOM

    def allocate(self, used: Set[TaskId], count: int = 1) -> list[TaskId]:
        allocated: list[TaskId] = []
        while len(allocated) < count:
            token = uuid.uuid4()
            if token in used or token in allocated:
                continue
            allocated.append(token)
        return allocated

    def parse(self, raw: object) -> TaskId:
        if isinstance(raw, uuid.UUID):
            return raw
        if isinstance(raw, str):
            try:
                return uuid.UUID(raw.strip())
            except ValueError as exc:
                raise InvalidTaskIdError(raw, self.policy) from exc
        raise InvalidTaskIdError(raw, self.policy)


_ALLOCATORS: dict[IdPolicy, type[IdAllocator]] = {
    IdPolicy.REUSED_INTEGER: ReusedIntegerAllocator,
    IdPolicy.UNIQUE_RANDOM: UniqueRandomAllocator,
}


def create_allocator(policy: IdPolicy | str) -> IdAllocator:
    """Build the allocator for a policy.

    Raises:
        ValueError: If ``policy`` names no known policy
    """
    return _ALLOCATORS[IdPolicy(policy)]()
