from __future__ import annotations
from typing import Iterator, List, Optional
from .models import Track
from .utils.logging import setup_logging

logger = setup_logging(__name__)


class BoundedTrackList:
    """Ordered list of tracks with a capacity fixed at construction.

    Slots ``[0, length)`` hold tracks; the rest of the buffer is ``None``.
    Out-of-range input never raises: mutations report ``False`` or do nothing.
    Not safe for concurrent mutation without an external lock.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be a positive integer, got {capacity}")
        self._capacity = capacity
        self._slots: List[Optional[Track]] = [None] * capacity
        self._length = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def length(self) -> int:
        return self._length

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Track]:
        for i in range(self._length):
            yield self._slots[i]

    def is_full(self) -> bool:
        return self._length == self._capacity

    def is_empty(self) -> bool:
        return self._length == 0

    def get(self, index: int) -> Track | None:
        if 0 <= index < self._length:
            return self._slots[index]
        return None

    def append(self, track: Track) -> bool:
        if self.is_full():
            logger.info("append rejected, list is full (%s)", self._capacity)
            return False
        self._slots[self._length] = track
        self._length += 1
        return True

    def insert_at(self, index: int, track: Track) -> bool:
        if index < 0 or index > self._length or self.is_full():
            logger.info(
                "insert at %s rejected (length=%s, capacity=%s)", index, self._length, self._capacity
            )
            return False
        self._shift_right(index)
        self._slots[index] = track
        self._length += 1
        return True

    def remove_at(self, index: int) -> bool:
        """Remove the track at ``index`` and close the gap.

        ``index == length`` passes the range check; since nothing sits at
        that slot, the call drops the last track.
        """
        if self._length == 0 or index < 0 or index > self._length:
            logger.info("remove at %s rejected (length=%s)", index, self._length)
            return False
        if index < self._length:
            self._slots[index] = None
        self._shift_left(index)
        self._length -= 1
        self._slots[self._length] = None
        return True

    def remove_by_title(self, title: str) -> None:
        # A miss gives -1, which remove_at rejects.
        self.remove_at(self.index_of(title))

    def remove_first(self) -> None:
        self.remove_at(0)

    def remove_last(self) -> None:
        if self._length == 0:
            return
        self._length -= 1
        self._slots[self._length] = None

    def concat(self, other: BoundedTrackList) -> None:
        """Append every track of ``other``; do nothing if they would not all fit."""
        if self._length + other.length > self._capacity:
            logger.info(
                "concat rejected: %s + %s exceeds capacity %s", self._length, other.length, self._capacity
            )
            return
        for i in range(other.length):
            self.append(other.get(i))

    def index_of(self, title: str) -> int:
        wanted = title.lower()
        for i in range(self._length):
            if self._slots[i].title.lower() == wanted:
                return i
        return -1

    def total_duration(self) -> int:
        return sum(self._slots[i].duration for i in range(self._length))

    def shortest_from(self, start: int) -> int:
        """Index of the shortest track in ``[start, length)``, or -1 if ``start`` is out of range.

        Ties go to the lowest index. For durations 7, 1, 6, 7, 5, 8, 7,
        ``shortest_from(2)`` is 4.
        """
        if start < 0 or start > self._length - 1:
            return -1
        min_idx = start
        for i in range(start + 1, self._length):
            if self._slots[i].is_shorter_than(self._slots[min_idx]):
                min_idx = i
        return min_idx

    def title_of_shortest(self) -> str:
        idx = self.shortest_from(0)
        if idx == -1:
            raise ValueError("title_of_shortest() called on an empty track list")
        return self._slots[idx].title

    def sort_by_duration_ascending(self) -> None:
        # Selection sort, not stable for equal durations.
        for i in range(self._length - 1):
            self._swap(i, self.shortest_from(i))

    def describe(self) -> str:
        return "".join("\n" + str(self._slots[i]) for i in range(self._length))

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"BoundedTrackList(capacity={self._capacity}, length={self._length})"

    def _shift_right(self, index: int) -> None:
        for i in range(self._length - 1, index - 1, -1):
            self._slots[i + 1] = self._slots[i]

    def _shift_left(self, index: int) -> None:
        for i in range(index, self._length - 1):
            self._slots[i] = self._slots[i + 1]

    def _swap(self, idx1: int, idx2: int) -> None:
        self._slots[idx1], self._slots[idx2] = self._slots[idx2], self._slots[idx1]
