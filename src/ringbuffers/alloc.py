"""
Heap-allocated ring buffer of fixed capacity.

Example::

    buffer = AllocRingBuffer.with_capacity(2)
    buffer.push(5)
    assert buffer.get(-1) == 5
    buffer.push(42)
    assert buffer.peek() == 5
    assert buffer.is_full()
    buffer.push(1)  # capacity reached, 5 is overwritten
    assert buffer.to_list() == [42, 1]
"""

from typing import Iterable, Optional, TypeVar

import numpy as np
from numpy.typing import DTypeLike

from ._fixed import FixedCapacityStorage
from ._indexing import NonPowerOfTwo, PowerOfTwo, check_capacity

_T = TypeVar("_T")

# must be a power of 2
RINGBUFFER_DEFAULT_CAPACITY = 1024


class AllocRingBuffer(FixedCapacityStorage[_T]):
    """
    Fixed-capacity ring buffer over one contiguous numpy array.

    The default ``PowerOfTwo`` mode wraps indices with a bitmask and rejects
    any other capacity. ``NonPowerOfTwo`` accepts every positive capacity but
    wraps with a modulo, which benchmarks up to 3x slower on ``push``.

    With the default ``dtype=object`` any Python object can be stored; a
    numeric ``dtype`` keeps the elements unboxed and makes ``to_numpy`` a
    single gather.
    """

    def __init__(
        self,
        capacity: int = RINGBUFFER_DEFAULT_CAPACITY,
        mode=PowerOfTwo,
        dtype: DTypeLike = object,
    ) -> None:
        self._capacity = mode.validate(capacity)
        self._mode = mode
        self._dtype = np.dtype(dtype)
        # object arrays start out filled with None
        self._buf = np.empty(self._capacity, dtype=self._dtype)
        self._writeptr = 0
        self._len = 0

    @classmethod
    def with_capacity(cls, capacity: int, dtype: DTypeLike = object) -> "AllocRingBuffer[_T]":
        return cls(capacity, PowerOfTwo, dtype)

    @classmethod
    def with_capacity_power_of_2(
        cls, exponent: int, dtype: DTypeLike = object
    ) -> "AllocRingBuffer[_T]":
        """Capacity is ``2 ** exponent``."""
        check_capacity(exponent, minimum=0)
        return cls(1 << int(exponent), PowerOfTwo, dtype)

    @classmethod
    def with_capacity_non_power_of_two(
        cls, capacity: int, dtype: DTypeLike = object
    ) -> "AllocRingBuffer[_T]":
        return cls(capacity, NonPowerOfTwo, dtype)

    @classmethod
    def default(cls) -> "AllocRingBuffer[_T]":
        return cls(RINGBUFFER_DEFAULT_CAPACITY)

    @classmethod
    def from_iterable(
        cls,
        iterable: Iterable[_T],
        capacity: Optional[int] = None,
        dtype: DTypeLike = object,
    ) -> "AllocRingBuffer[_T]":
        """
        Bulk construction, oldest first. Capacity defaults to the number of
        items, so an empty iterable needs an explicit one.
        """
        items = list(iterable)
        rb = cls(len(items) if capacity is None else capacity, NonPowerOfTwo, dtype)
        rb.extend(items)
        return rb

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    def _release(self, position: int) -> None:
        if self._dtype.hasobject:
            self._buf[position] = None

    def _empty_like(self) -> "AllocRingBuffer[_T]":
        return type(self)(self._capacity, self._mode, self._dtype)

    def to_numpy(self) -> np.ndarray:
        """A new array of the valid elements, oldest to newest."""
        start = self._writeptr - self._len
        return self._buf[self._mask(np.arange(start, self._writeptr))]
