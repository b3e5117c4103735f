import logging
from abc import abstractmethod
from typing import Any, Callable, Optional, TypeVar

from ._base import RingBufferExt, RingBufferRead, RingBufferWrite

_T = TypeVar("_T")

logger = logging.getLogger(__name__)


class FixedCapacityStorage(RingBufferExt[_T], RingBufferRead[_T], RingBufferWrite[_T]):
    """
    Queue and indexed access over ``capacity`` preallocated slots.

    Only two counters are kept: ``_writeptr``, the number of pushes since the
    last ``clear``, and ``_len``. Logical index ``i`` lives at physical slot
    ``mask(writeptr - len + i)``, so the oldest element never needs a pointer
    of its own and overwriting it on a full push is just another write.

    Subclasses set ``_buf``, ``_capacity``, ``_mode``, ``_writeptr`` and
    ``_len`` in ``__init__``.
    """

    _buf: Any
    _capacity: int
    _mode: Any
    _writeptr: int
    _len: int

    @abstractmethod
    def _empty_like(self) -> "FixedCapacityStorage[_T]":
        """A new, empty buffer with the same capacity and storage layout."""

    def _release(self, position: int) -> None:
        self._buf[position] = None

    def _mask(self, index):
        return self._mode.mask(self._capacity, index)

    def _position(self, index: int) -> int:
        return self._mask(self._writeptr - self._len + index)

    def _absolute_position(self, index: int) -> Optional[int]:
        if not 0 <= index < self._capacity:
            return None
        if self._mask(index - (self._writeptr - self._len)) >= self._len:
            return None  # vacant slot
        return index

    def _read(self, position: int) -> _T:
        return self._buf[position]

    def _write(self, position: int, value: _T) -> None:
        self._buf[position] = value

    def __len__(self) -> int:
        return self._len

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, __object: _T) -> None:
        if self._len < self._capacity:
            self._len += 1
        # when full this is the slot of the oldest element
        self._buf[self._mask(self._writeptr)] = __object
        self._writeptr += 1

    def enqueue(self, __object: _T) -> Optional[_T]:
        overwritten = self._buf[self._mask(self._writeptr)] if self.is_full() else None
        self.push(__object)
        return overwritten

    def dequeue(self) -> Optional[_T]:
        if self._len == 0:
            return None
        position = self._position(0)
        item = self._buf[position]
        self._release(position)
        self._len -= 1
        return item

    def skip(self) -> None:
        if self._len == 0:
            return
        self._release(self._position(0))
        self._len -= 1

    def clear(self) -> None:
        if self._len:
            logger.debug("Clearing %d elements from %s", self._len, type(self).__name__)
        for i in range(self._len):
            self._release(self._position(i))
        self._writeptr = 0
        self._len = 0

    def fill_with(self, factory: Callable[[], _T]) -> None:
        """Replaces the contents with ``capacity`` elements produced by ``factory``."""
        self.clear()
        for position in range(self._capacity):
            self._buf[position] = factory()
        self._writeptr = self._capacity
        self._len = self._capacity

    def fill(self, value: _T) -> None:
        self.fill_with(lambda: value)

    def copy(self) -> "FixedCapacityStorage[_T]":
        new = self._empty_like()
        new.extend(self.iter())
        return new

    __copy__ = copy
