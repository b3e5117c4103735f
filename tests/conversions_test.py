from collections import deque

import pytest

from ringbuffers import AllocRingBuffer, ConstGenericRingBuffer, GrowableAllocRingBuffer

SOURCES = {
    "list": lambda: ["1", "2"],
    "tuple": lambda: ("1", "2"),
    "deque": lambda: deque("12"),
    "str": lambda: "12",
    "generator": lambda: (c for c in "12"),
    "alloc": lambda: AllocRingBuffer.from_iterable("12"),
    "growable": lambda: GrowableAllocRingBuffer.from_iterable("12"),
    "const": lambda: ConstGenericRingBuffer.sized(2).from_iterable("12"),
    "alloc_drain": lambda: AllocRingBuffer.from_iterable("12").drain(),
    "growable_drain": lambda: GrowableAllocRingBuffer.from_iterable("12").drain(),
    "const_drain": lambda: ConstGenericRingBuffer.sized(2).from_iterable("12").drain(),
}

TARGETS = {
    "alloc": AllocRingBuffer.from_iterable,
    "growable": GrowableAllocRingBuffer.from_iterable,
    "const": ConstGenericRingBuffer.sized(2).from_iterable,
}


@pytest.mark.parametrize("source", SOURCES.values(), ids=SOURCES.keys())
@pytest.mark.parametrize("convert", TARGETS.values(), ids=TARGETS.keys())
def test_conversion(convert, source):
    assert convert(source()).to_list() == ["1", "2"]


def test_drain_empties_the_source():
    source = AllocRingBuffer.from_iterable("12")
    GrowableAllocRingBuffer.from_iterable(source.drain())
    assert source.is_empty()
