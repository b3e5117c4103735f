from ._base import RingBuffer, RingBufferExt, RingBufferRead, RingBufferWrite, Slot
from ._indexing import NonPowerOfTwo, PowerOfTwo, is_power_of_two, mask, mask_modulo
from .alloc import RINGBUFFER_DEFAULT_CAPACITY, AllocRingBuffer
from .config import BufferConfig, build, load_config
from .const_generic import ConstGenericRingBuffer
from .exceptions import InvalidCapacity, OutOfBounds, RingBufferError
from .growable import GrowableAllocRingBuffer


__all__ = (
    RingBuffer.__name__,
    RingBufferRead.__name__,
    RingBufferWrite.__name__,
    RingBufferExt.__name__,
    Slot.__name__,
    PowerOfTwo.__name__,
    NonPowerOfTwo.__name__,
    is_power_of_two.__name__,
    mask.__name__,
    mask_modulo.__name__,
    AllocRingBuffer.__name__,
    GrowableAllocRingBuffer.__name__,
    ConstGenericRingBuffer.__name__,
    "RINGBUFFER_DEFAULT_CAPACITY",
    BufferConfig.__name__,
    load_config.__name__,
    build.__name__,
    RingBufferError.__name__,
    InvalidCapacity.__name__,
    OutOfBounds.__name__,
)
