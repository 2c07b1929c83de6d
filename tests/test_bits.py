import struct

import numpy as np
import pytest

from qrsqrt.bits import bits_to_float, float_to_bits


def reference_bits(number):
    return struct.unpack("<i", struct.pack("<f", number))[0]


@pytest.mark.parametrize(
    "number, bits",
    [
        (1.0, 0x3F800000),
        (4.0, 0x40800000),
        (0.25, 0x3E800000),
        (-2.0, -0x40000000),
        (-0.0, -(2**31)),
        (float("inf"), 0x7F800000),
    ],
)
def test_float_to_bits_known_patterns(number, bits):
    assert float_to_bits(number) == bits


@pytest.mark.parametrize("number", [0.1, 3.14159, 1e-30, 6.02e23, -7.5])
def test_float_to_bits_narrows_to_binary32(number):
    assert float_to_bits(number) == reference_bits(number)


def test_float_to_bits_accepts_numpy_scalars():
    assert float_to_bits(np.float32(0.1)) == reference_bits(0.1)


def test_bits_to_float_known_patterns():
    assert bits_to_float(0x3F800000) == 1.0
    assert bits_to_float(0x40800000) == 4.0
    assert bits_to_float(-0x40000000) == -2.0


def test_bits_to_float_keeps_only_low_32_bits():
    assert bits_to_float(0x9F3759DF) == bits_to_float(0x9F3759DF - 2**32)
    assert bits_to_float(0x3F800000 + 2**32) == 1.0
    assert bits_to_float(0x9F3759DF) < 0


def test_bits_survive_the_trip_back():
    for number in (0.15625, 100.0, 1.5e-12):
        assert bits_to_float(float_to_bits(number)) == np.float32(number)


@pytest.mark.parametrize("bits", [0x7F800001, 0x7FBFFFFF, 0xFF800001 - 2**32])
def test_signalling_nan_patterns_are_kept(bits):
    assert float_to_bits(bits_to_float(bits)) == bits


def test_bits_to_float_returns_binary32():
    assert isinstance(bits_to_float(0x3F800000), np.float32)
