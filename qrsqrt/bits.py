"""Functions for reinterpreting 32-bit floats as integers and back."""
from ctypes import c_int32

import numpy as np


def float_to_bits(number: float) -> int:
    """Read the binary32 bits of ``number`` as a signed 32-bit integer."""
    return c_int32.from_buffer_copy(np.float32(number).tobytes()).value


def bits_to_float(bits: int) -> np.float32:
    """Read the low 32 bits of ``bits`` as a binary32 float."""
    return np.frombuffer(bytes(c_int32(bits)), dtype=np.float32)[0]
