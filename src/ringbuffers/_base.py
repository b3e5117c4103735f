"""
Capability interfaces shared by every ring buffer.

One ABC per capability, composed by the concrete buffers:

- ``RingBuffer``: bookkeeping (length, capacity, emptiness, clear)
- ``RingBufferRead``: the read end of the queue
- ``RingBufferWrite``: the write end of the queue
- ``RingBufferExt``: indexed access, iteration and conversion

Logical index 0 is the back (oldest element, next to be dequeued) and
index -1 is the front (most recently pushed element).
"""

import operator
from abc import ABC, abstractmethod
from typing import Generic, Iterable, Iterator, List, Optional, Sized, TypeVar

import numpy as np
from attrs import define

from .exceptions import OutOfBounds

_T = TypeVar("_T")


def _same(a: object, b: object) -> bool:
    if a is b:
        return True
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return np.array_equal(a, b)
    return bool(a == b)


class RingBuffer(Sized, Generic[_T], ABC):
    @abstractmethod
    def __len__(self) -> int:
        ...

    @property
    @abstractmethod
    def capacity(self) -> int:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...

    def is_empty(self) -> bool:
        return len(self) == 0

    def is_full(self) -> bool:
        return len(self) == self.capacity


class RingBufferRead(Generic[_T], ABC):
    @abstractmethod
    def dequeue(self) -> Optional[_T]:
        """Removes and returns the oldest element, ``None`` when empty."""

    @abstractmethod
    def skip(self) -> None:
        """Discards the oldest element. Does nothing when empty."""

    def drain(self) -> Iterator[_T]:
        """Dequeues lazily until the buffer is empty."""
        while len(self):
            yield self.dequeue()


class RingBufferWrite(Generic[_T], ABC):
    @abstractmethod
    def push(self, __object: _T) -> None:
        """Appends to the front. Never fails: a full buffer loses its oldest element."""

    @abstractmethod
    def enqueue(self, __object: _T) -> Optional[_T]:
        """Like ``push`` but returns the element that had to be overwritten, if any."""

    def extend(self, iterable: Iterable[_T]) -> None:
        for item in iterable:
            self.push(item)


@define
class Slot(Generic[_T]):
    """
    A writable view onto one physical position of a buffer.

    The view follows the position, not the element: once the buffer is
    pushed to or dequeued from, it may name a different element.
    """

    _buffer: "RingBufferExt[_T]"
    position: int

    @property
    def value(self) -> _T:
        return self._buffer._read(self.position)

    @value.setter
    def value(self, value: _T) -> None:
        self._buffer._write(self.position, value)


class RingBufferExt(RingBuffer[_T], ABC):
    # Storage primitives. Positions are physical, relative indices are logical.

    @abstractmethod
    def _position(self, index: int) -> int:
        """Physical position of the in-range, non-negative logical ``index``."""

    @abstractmethod
    def _absolute_position(self, index: int) -> Optional[int]:
        """``index`` if it names a physical slot holding a valid element, else ``None``."""

    @abstractmethod
    def _read(self, position: int) -> _T:
        ...

    @abstractmethod
    def _write(self, position: int, value: _T) -> None:
        ...

    def _resolve(self, index: int) -> Optional[int]:
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            return None
        return self._position(index)

    def get(self, index: int) -> Optional[_T]:
        position = self._resolve(index)
        return None if position is None else self._read(position)

    def get_mut(self, index: int) -> Optional[Slot[_T]]:
        position = self._resolve(index)
        return None if position is None else Slot(self, position)

    def get_absolute(self, index: int) -> Optional[_T]:
        position = self._absolute_position(index)
        return None if position is None else self._read(position)

    def get_absolute_mut(self, index: int) -> Optional[Slot[_T]]:
        position = self._absolute_position(index)
        return None if position is None else Slot(self, position)

    def front(self) -> Optional[_T]:
        return self.get(-1)

    def front_mut(self) -> Optional[Slot[_T]]:
        return self.get_mut(-1)

    def back(self) -> Optional[_T]:
        return self.get(0)

    def back_mut(self) -> Optional[Slot[_T]]:
        return self.get_mut(0)

    def peek(self) -> Optional[_T]:
        """The next element ``dequeue`` would return."""
        return self.back()

    def iter(self) -> Iterator[_T]:
        for i in range(len(self)):
            yield self._read(self._position(i))

    def iter_mut(self) -> Iterator[Slot[_T]]:
        for i in range(len(self)):
            yield Slot(self, self._position(i))

    def contains(self, value: object) -> bool:
        """Linear scan. numpy array elements compare with ``np.array_equal``."""
        return any(_same(item, value) for item in self.iter())

    def to_list(self) -> List[_T]:
        return list(self.iter())

    def __iter__(self) -> Iterator[_T]:
        return self.iter()

    def __reversed__(self) -> Iterator[_T]:
        for i in reversed(range(len(self))):
            yield self._read(self._position(i))

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def __getitem__(self, index: int) -> _T:
        position = self._resolve(operator.index(index))
        if position is None:
            raise OutOfBounds(f"index {index} out of range for length {len(self)}")
        return self._read(position)

    def __setitem__(self, index: int, value: _T) -> None:
        position = self._resolve(operator.index(index))
        if position is None:
            raise OutOfBounds(f"index {index} out of range for length {len(self)}")
        self._write(position, value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            self.capacity == other.capacity
            and len(self) == len(other)
            and all(_same(a, b) for a, b in zip(self.iter(), other.iter()))
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r}, capacity={self.capacity})"
