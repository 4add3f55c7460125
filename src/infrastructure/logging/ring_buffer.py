from collections import deque
from typing import Generic, List, TypeVar

T = TypeVar("T")


class RingBuffer(Generic[T]):
    """
    Bounded buffer between log calls and the dispatch task.

    Single producer (logging calls), single consumer (dispatch task).
    Items offered while full are dropped and counted.
    """

    def __init__(self, maxsize: int = 10000):
        self.maxsize = maxsize
        self._buffer = deque()
        self._dropped_count = 0

    def put_nowait(self, item: T) -> bool:
        """Add item without blocking. Returns False if the item was dropped."""
        if len(self._buffer) >= self.maxsize:
            self._dropped_count += 1
            return False
        self._buffer.append(item)
        return True

    def get_batch(self, batch_size: int = 100) -> List[T]:
        batch = []
        for _ in range(min(batch_size, len(self._buffer))):
            batch.append(self._buffer.popleft())
        return batch

    def size(self) -> int:
        return len(self._buffer)

    def dropped_count(self) -> int:
        return self._dropped_count
