import logging

import pytest

from ringbuffers import GrowableAllocRingBuffer, InvalidCapacity


def test_new_is_empty_with_no_reservation():
    rb = GrowableAllocRingBuffer()
    assert len(rb) == 0
    assert rb.capacity == 0
    assert rb.ceiling is None
    assert not rb.is_full()


def test_reservation_doubles():
    rb = GrowableAllocRingBuffer()
    capacities = []
    for value in range(9):
        rb.push(value)
        capacities.append(rb.capacity)
    assert capacities == [1, 2, 4, 4, 8, 8, 8, 8, 16]


def test_never_discards_without_ceiling():
    rb = GrowableAllocRingBuffer.with_capacity(10)
    assert rb.capacity == 10

    rb.extend(range(1000))
    assert len(rb) == 1000
    assert not rb.is_full()
    assert rb.enqueue(1000) is None
    assert rb.back() == 0
    assert rb.front() == 1000


def test_clear_keeps_the_reservation():
    rb = GrowableAllocRingBuffer()
    rb.extend(range(5))
    rb.clear()
    assert rb.is_empty()
    assert rb.capacity == 8


def test_ceiling_overwrites_like_a_fixed_buffer():
    rb = GrowableAllocRingBuffer.with_ceiling(3)
    rb.extend(range(3))
    assert rb.is_full()
    assert rb.capacity == 3

    assert rb.enqueue(3) == 0
    assert rb.to_list() == [1, 2, 3]


def test_negative_reservation_is_rejected():
    with pytest.raises(InvalidCapacity):
        GrowableAllocRingBuffer(-1)
    with pytest.raises(InvalidCapacity):
        GrowableAllocRingBuffer(ceiling=-1)


def test_get_absolute_indexes_from_the_oldest():
    rb = GrowableAllocRingBuffer.from_iterable("abc")
    assert [rb.get_absolute(n) for n in range(4)] == ["a", "b", "c", None]

    rb.get_absolute_mut(2).value = "z"
    assert rb.to_list() == ["a", "b", "z"]


def test_fill_uses_the_reservation():
    rb = GrowableAllocRingBuffer.with_capacity(3)
    rb.fill(0)
    assert rb.to_list() == [0, 0, 0]


def test_equality_ignores_the_reservation():
    a = GrowableAllocRingBuffer.from_iterable([1, 2])
    b = GrowableAllocRingBuffer.with_capacity(64)
    b.extend([1, 2])
    assert a == b
    assert a != GrowableAllocRingBuffer.from_iterable([1, 2], ceiling=2)


def test_growth_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="ringbuffers.growable")
    rb = GrowableAllocRingBuffer()
    rb.push(1)
    rb.push(2)
    assert "Growing reservation from 1 to 2" in caplog.text


@pytest.mark.parametrize("capacity", [2.5, "4", None, True])
def test_non_integer_reservation_is_rejected(capacity):
    with pytest.raises(InvalidCapacity):
        GrowableAllocRingBuffer(capacity)
