"""
Logical position -> physical slot arithmetic.

https://graphics.stanford.edu/~seander/bithacks.html#DetermineIfPowerOf2
"""

from typing import Union

import numpy as np

from .exceptions import InvalidCapacity

_Index = Union[int, np.ndarray]


def is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def mask(capacity: int, index: _Index) -> _Index:
    """Wraps ``index`` into ``[0, capacity)``. ``capacity`` must be a power of two."""
    return index & (capacity - 1)


def mask_modulo(capacity: int, index: _Index) -> _Index:
    """Wraps ``index`` into ``[0, capacity)`` for any positive ``capacity``.

    ``%`` takes the sign of the divisor, so a negative dividend still lands
    inside the range (Euclidean remainder for positive ``capacity``).
    """
    return index % capacity


def check_capacity(capacity: int, minimum: int = 1) -> None:
    if isinstance(capacity, bool) or not isinstance(capacity, (int, np.integer)):
        raise InvalidCapacity(f"Capacity must be an integer, got {capacity!r}")
    if capacity < minimum:
        raise InvalidCapacity(f"Capacity must be at least {minimum}, got {capacity}")


class PowerOfTwo:
    """Bitmask wrap. Construction rejects capacities that are not powers of two."""

    @staticmethod
    def mask(capacity: int, index: _Index) -> _Index:
        return mask(capacity, index)

    @staticmethod
    def must_be_power_of_two() -> bool:
        return True

    @classmethod
    def validate(cls, capacity: int) -> int:
        check_capacity(capacity)
        if not is_power_of_two(capacity):
            raise InvalidCapacity(f"Capacity must be a power of two, got {capacity}")
        return int(capacity)


class NonPowerOfTwo:
    """Modulo wrap. Works for every positive capacity at the cost of a division."""

    @staticmethod
    def mask(capacity: int, index: _Index) -> _Index:
        return mask_modulo(capacity, index)

    @staticmethod
    def must_be_power_of_two() -> bool:
        return False

    @classmethod
    def validate(cls, capacity: int) -> int:
        check_capacity(capacity)
        return int(capacity)


def strategy_for(capacity: int):
    """The cheapest strategy able to index ``capacity`` slots."""
    return PowerOfTwo if is_power_of_two(capacity) else NonPowerOfTwo
