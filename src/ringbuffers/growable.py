import logging
from collections import deque
from typing import Callable, Deque, Iterable, Optional, TypeVar

from ._base import RingBufferExt, RingBufferRead, RingBufferWrite
from ._indexing import NonPowerOfTwo, check_capacity

_T = TypeVar("_T")

logger = logging.getLogger(__name__)


class GrowableAllocRingBuffer(RingBufferExt[_T], RingBufferRead[_T], RingBufferWrite[_T]):
    """
    A ring buffer that grows instead of overwriting.

    Backed by a ``deque`` whose left end is the oldest element. ``capacity``
    reports the current reservation, which doubles whenever a push would
    exceed it, so it is a size hint rather than a limit.

    An optional ``ceiling`` turns it back into a bounded buffer: once the
    ceiling is reached, pushes overwrite the oldest element exactly like the
    fixed-capacity buffers do.

    https://www.pythondoeswhat.com/2015/07/collectionsdeque-random-access-is-on.html
    """

    def __init__(self, capacity: int = 0, ceiling: Optional[int] = None) -> None:
        check_capacity(capacity, minimum=0)
        self._deque: Deque[_T] = deque()
        self._reserved = int(capacity)
        self._ceiling = None if ceiling is None else NonPowerOfTwo.validate(ceiling)

    @classmethod
    def with_capacity(cls, capacity: int) -> "GrowableAllocRingBuffer[_T]":
        return cls(capacity)

    @classmethod
    def with_ceiling(cls, ceiling: int) -> "GrowableAllocRingBuffer[_T]":
        return cls(ceiling, ceiling)

    @classmethod
    def from_iterable(
        cls, iterable: Iterable[_T], ceiling: Optional[int] = None
    ) -> "GrowableAllocRingBuffer[_T]":
        rb = cls(ceiling=ceiling)
        rb.extend(iterable)
        return rb

    @property
    def ceiling(self) -> Optional[int]:
        return self._ceiling

    @property
    def capacity(self) -> int:
        return self._reserved if self._ceiling is None else self._ceiling

    def __len__(self) -> int:
        return len(self._deque)

    def is_full(self) -> bool:
        return self._ceiling is not None and len(self._deque) == self._ceiling

    def _reserve(self, size: int) -> None:
        if size <= self._reserved:
            return
        reserved = max(1, self._reserved)
        while reserved < size:
            reserved *= 2
        logger.debug("Growing reservation from %d to %d", self._reserved, reserved)
        self._reserved = reserved

    def push(self, __object: _T) -> None:
        if self.is_full():
            self._deque.popleft()
        elif self._ceiling is None:
            self._reserve(len(self._deque) + 1)
        self._deque.append(__object)

    def enqueue(self, __object: _T) -> Optional[_T]:
        overwritten = self._deque[0] if self.is_full() else None
        self.push(__object)
        return overwritten

    def dequeue(self) -> Optional[_T]:
        return self._deque.popleft() if self._deque else None

    def skip(self) -> None:
        if self._deque:
            self._deque.popleft()

    def clear(self) -> None:
        self._deque.clear()

    def fill_with(self, factory: Callable[[], _T]) -> None:
        """Replaces the contents with ``capacity`` elements produced by ``factory``."""
        self.clear()
        self._deque.extend(factory() for _ in range(self.capacity))

    def fill(self, value: _T) -> None:
        self.fill_with(lambda: value)

    # There is no wrap-around to undo: physical and logical positions coincide.

    def _position(self, index: int) -> int:
        return index

    def _absolute_position(self, index: int) -> Optional[int]:
        return index if 0 <= index < len(self._deque) else None

    def _read(self, position: int) -> _T:
        return self._deque[position]

    def _write(self, position: int, value: _T) -> None:
        self._deque[position] = value

    def copy(self) -> "GrowableAllocRingBuffer[_T]":
        new = type(self)(self._reserved, self._ceiling)
        new._deque.extend(self._deque)
        return new

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._ceiling == other._ceiling and self._deque == other._deque
