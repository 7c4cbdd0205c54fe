"""Fixed-capacity FIFO used for the command and error panels."""

from collections import deque
from typing import Deque, Generic, Iterator, List, TypeVar

T = TypeVar("T")


class RingHistory(Generic[T]):
    """Keeps the last ``capacity`` pushed items; the oldest is dropped first."""

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"RingHistory capacity must be >= 1, got {capacity}")
        self._capacity = capacity
        self._items: Deque[T] = deque()

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, item: T) -> None:
        if len(self._items) == self._capacity:
            self._items.popleft()
        self._items.append(item)

    def snapshot(self) -> List[T]:
        """Copy of the current contents, oldest first."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"RingHistory(capacity={self._capacity}, items={self.snapshot()!r})"
