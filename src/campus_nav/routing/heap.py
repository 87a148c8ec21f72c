# routing/heap.py
import heapq
from typing import Generic, TypeVar

T = TypeVar("T")


class MinHeap(Generic[T]):
    """
    Ascending-priority queue over heapq.

    Entries are (priority, seq, item); seq grows on every push, so equal
    priorities pop in insertion order and items are never compared.
    """

    def __init__(self):
        self._q: list[tuple[float, int, T]] = []
        self._seq = 0

    def push(self, item: T, priority: float) -> None:
        self._seq += 1
        heapq.heappush(self._q, (priority, self._seq, item))

    def pop(self) -> tuple[T, float]:
        if not self._q:
            raise IndexError("pop from empty heap")
        priority, _, item = heapq.heappop(self._q)
        return item, priority

    def peek(self) -> tuple[T, float]:
        if not self._q:
            raise IndexError("peek at empty heap")
        priority, _, item = self._q[0]
        return item, priority

    def __len__(self) -> int:
        return len(self._q)

    def __bool__(self) -> bool:
        return bool(self._q)
