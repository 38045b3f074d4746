"""Process-wide Mersenne Twister source of small random integers."""

import random

_MAX_UINT32 = 0xFFFFFFFF

_engine = random.Random()


def init():
    """Reseed the shared engine from the operating system's entropy source."""
    _engine.seed()


def generate(max_value):
    """Return a random whole number in ``[0, max_value]`` as a float."""
    if not 0 <= max_value <= _MAX_UINT32:
        raise ValueError(f"max_value must be between 0 and {_MAX_UINT32}, got {max_value}")
    return float(_engine.getrandbits(32) % (max_value + 1))