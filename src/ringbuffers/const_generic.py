"""
Ring buffer whose capacity is part of its type.

The capacity is fixed when the class is created, either by subclassing::

    class Window(ConstGenericRingBuffer[float], capacity=8):
        pass

or through the cached factory ``ConstGenericRingBuffer.sized(8)``. Every
instance of such a class preallocates exactly that many slots, and an
invalid capacity fails when the class is defined rather than when it is
used.
"""

import functools
import types
from typing import ClassVar, Iterable, Optional, Type, TypeVar

from ._fixed import FixedCapacityStorage
from ._indexing import NonPowerOfTwo, strategy_for
from .exceptions import InvalidCapacity

_T = TypeVar("_T")


class ConstGenericRingBuffer(FixedCapacityStorage[_T]):
    CAPACITY: ClassVar[Optional[int]] = None
    _MODE: ClassVar = NonPowerOfTwo

    def __init_subclass__(cls, capacity: Optional[int] = None, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if capacity is not None:
            cls.CAPACITY = NonPowerOfTwo.validate(capacity)
            cls._MODE = strategy_for(cls.CAPACITY)

    @classmethod
    def sized(cls, capacity: int) -> Type["ConstGenericRingBuffer"]:
        """The subclass of ``cls`` holding ``capacity`` elements. One class per capacity."""
        return cls._sized(NonPowerOfTwo.validate(capacity))

    @classmethod
    @functools.lru_cache(maxsize=None)
    def _sized(cls, capacity: int) -> Type["ConstGenericRingBuffer"]:
        return types.new_class(
            f"{cls.__name__}_{capacity}",
            (cls,),
            {"capacity": capacity},
            lambda ns: ns.update(__module__=cls.__module__),
        )

    @classmethod
    def from_iterable(cls, iterable: Iterable[_T]) -> "ConstGenericRingBuffer[_T]":
        """Bulk construction, oldest first. Only the newest ``CAPACITY`` items are kept."""
        rb = cls()
        rb.extend(iterable)
        return rb

    def __init__(self) -> None:
        if self.CAPACITY is None:
            raise InvalidCapacity(
                f"{type(self).__name__} has no capacity, "
                "subclass it with capacity=N or use ConstGenericRingBuffer.sized(N)"
            )
        self._capacity = self.CAPACITY
        self._mode = self._MODE
        self._buf = [None] * self._capacity
        self._writeptr = 0
        self._len = 0

    def _empty_like(self) -> "ConstGenericRingBuffer[_T]":
        return type(self)()
