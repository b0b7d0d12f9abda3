"""A double-ended queue safe to share between threads."""

from __future__ import annotations

import threading
from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class ThreadSafeQueue(Generic[T]):
    """Deque guarded by a lock, with blocking wait for new items."""

    def __init__(self) -> None:
        self._queue: deque[T] = deque()
        self._cond = threading.Condition()

    def _require_items(self) -> None:
        if not self._queue:
            raise IndexError("queue is empty")

    def front(self) -> T:
        with self._cond:
            self._require_items()
            return self._queue[0]

    def back(self) -> T:
        with self._cond:
            self._require_items()
            return self._queue[-1]

    def pop_front(self) -> T:
        with self._cond:
            self._require_items()
            return self._queue.popleft()

    def pop_back(self) -> T:
        with self._cond:
            self._require_items()
            return self._queue.pop()

    def push_front(self, item: T) -> None:
        with self._cond:
            self._queue.appendleft(item)
            self._cond.notify()

    def push_back(self, item: T) -> None:
        with self._cond:
            self._queue.append(item)
            self._cond.notify()

    def is_empty(self) -> bool:
        with self._cond:
            return not self._queue

    def __len__(self) -> int:
        with self._cond:
            return len(self._queue)

    def clear(self) -> None:
        with self._cond:
            self._queue.clear()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the queue holds an item; False if the timeout ran out."""
        with self._cond:
            return self._cond.wait_for(lambda: bool(self._queue), timeout)