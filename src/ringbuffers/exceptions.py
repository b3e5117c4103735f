class RingBufferError(Exception):
    """Base class of every error raised by ringbuffers."""


class InvalidCapacity(RingBufferError, ValueError):
    """Raised at construction when a capacity is zero, negative or, for the
    power-of-two strategy, not a power of two."""


class OutOfBounds(RingBufferError, IndexError):
    """Raised by ``buffer[i]`` when ``i`` names no valid element."""
