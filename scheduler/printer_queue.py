"""
FIFO queue of print jobs - one per priority class per printer.

Data structure: collections.deque
- enqueue: append to right  → O(1)
- dequeue: pop from left    → O(1)
- total_remaining: one read-only pass → O(n), order untouched

The only job that can be PRINTING is the one at the front; jobs are only
ever appended at the back, so iterating never changes which job that is.
"""

from collections import deque
from typing import Iterator, Optional

from models.job import PrintJob


class PrinterQueue:

    def __init__(self):
        self._queue: deque[PrintJob] = deque()

    def enqueue(self, job: PrintJob) -> None:
        self._queue.append(job)

    def dequeue(self) -> Optional[PrintJob]:
        return self._queue.popleft() if self._queue else None

    def front(self) -> Optional[PrintJob]:
        return self._queue[0] if self._queue else None

    def is_empty(self) -> bool:
        return not self._queue

    def size(self) -> int:
        return len(self._queue)

    def total_remaining(self) -> int:
        """Sum of `remaining` over every queued job, front included."""
        return sum(job.remaining for job in self._queue)

    def __len__(self) -> int:
        return len(self._queue)

    def __iter__(self) -> Iterator[PrintJob]:
        return iter(tuple(self._queue))
