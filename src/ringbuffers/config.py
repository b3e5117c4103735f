"""
Declarative buffer construction.

    buffer:
      kind: alloc
      capacity: 4096
      dtype: float64

``load_config`` accepts a YAML file, a mapping or an omegaconf node, so the
same block can sit inside a larger application config.
"""

import logging
from pathlib import Path
from typing import Any, Literal, Mapping, Optional, Union

import numpy as np
from omegaconf import DictConfig, OmegaConf
from pydantic import BaseModel, field_validator, model_validator

from ._base import RingBufferExt
from ._indexing import NonPowerOfTwo, PowerOfTwo
from .alloc import RINGBUFFER_DEFAULT_CAPACITY, AllocRingBuffer
from .const_generic import ConstGenericRingBuffer
from .growable import GrowableAllocRingBuffer

logger = logging.getLogger(__name__)


class BufferConfig(BaseModel):
    kind: Literal["alloc", "growable", "const"] = "alloc"
    # for growable buffers this is the initial reservation, not a limit
    capacity: int = RINGBUFFER_DEFAULT_CAPACITY
    power_of_two: bool = True
    dtype: Optional[str] = None
    ceiling: Optional[int] = None

    @field_validator("dtype")
    @classmethod
    def is_numpy_dtype(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            try:
                np.dtype(v)
            except TypeError as e:
                raise ValueError(f"{v!r} is not a numpy dtype") from e
        return v

    @model_validator(mode="after")
    def options_match_kind(self) -> "BufferConfig":
        if self.ceiling is not None and self.kind != "growable":
            raise ValueError("ceiling only applies to growable buffers")
        if self.dtype is not None and self.kind != "alloc":
            raise ValueError("dtype only applies to alloc buffers")
        return self


def load_config(source: Union[str, Path, Mapping[str, Any], DictConfig]) -> BufferConfig:
    if isinstance(source, (str, Path)):
        cfg = OmegaConf.load(source)
    elif isinstance(source, DictConfig):
        cfg = source
    else:
        cfg = OmegaConf.create(dict(source))
    return BufferConfig(**OmegaConf.to_object(cfg))


def build(config: BufferConfig) -> RingBufferExt:
    """Constructs the configured buffer. Raises ``InvalidCapacity`` like the constructors do."""
    if config.kind == "growable":
        rb: RingBufferExt = GrowableAllocRingBuffer(config.capacity, config.ceiling)
    elif config.kind == "const":
        rb = ConstGenericRingBuffer.sized(config.capacity)()
    else:
        mode = PowerOfTwo if config.power_of_two else NonPowerOfTwo
        rb = AllocRingBuffer(config.capacity, mode, config.dtype or object)
    logger.debug("Built %s with capacity %d", type(rb).__name__, rb.capacity)
    return rb
