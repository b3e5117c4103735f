import numpy as np
import pytest
from omegaconf import OmegaConf
from pydantic import ValidationError

from ringbuffers import (
    AllocRingBuffer,
    BufferConfig,
    ConstGenericRingBuffer,
    GrowableAllocRingBuffer,
    InvalidCapacity,
    build,
    load_config,
)


def test_defaults_build_the_default_alloc_buffer():
    rb = build(BufferConfig())
    assert isinstance(rb, AllocRingBuffer)
    assert rb == AllocRingBuffer.default()


def test_load_from_yaml(tmp_path):
    path = tmp_path / "buffer.yaml"
    path.write_text("kind: alloc\ncapacity: 12\npower_of_two: false\ndtype: float32\n")

    rb = build(load_config(path))

    assert isinstance(rb, AllocRingBuffer)
    assert rb.capacity == 12
    assert rb.dtype == np.float32


def test_load_from_omegaconf_node():
    cfg = OmegaConf.create({"buffer": {"kind": "const", "capacity": 6}})

    rb = build(load_config(cfg.buffer))

    assert isinstance(rb, ConstGenericRingBuffer)
    assert rb.capacity == 6


def test_growable_with_ceiling():
    rb = build(load_config({"kind": "growable", "capacity": 0, "ceiling": 3}))

    assert isinstance(rb, GrowableAllocRingBuffer)
    assert rb.capacity == 3
    rb.extend(range(5))
    assert rb.to_list() == [2, 3, 4]


@pytest.mark.parametrize(
    "data",
    [
        {"kind": "ring"},
        {"dtype": "not-a-dtype"},
        {"kind": "alloc", "ceiling": 4},
        {"kind": "growable", "dtype": "int64"},
    ],
)
def test_invalid_configs(data):
    with pytest.raises(ValidationError):
        load_config(data)


@pytest.mark.parametrize(
    "data",
    [
        {"capacity": 0},
        {"capacity": 10},
        {"kind": "const", "capacity": -1},
        {"kind": "growable", "ceiling": 0},
    ],
)
def test_capacity_errors_surface_at_build(data):
    config = load_config(data)
    with pytest.raises(InvalidCapacity):
        build(config)


def test_non_power_of_two_capacity_needs_the_modulo_strategy():
    rb = build(load_config({"capacity": 10, "power_of_two": False}))
    assert rb.capacity == 10
