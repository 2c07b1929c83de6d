from __future__ import annotations

import numpy as np

from qrsqrt.bits import bits_to_float, float_to_bits

MAGIC = 0x5F3759DF
THREEHALFS = np.float32(1.5)
HALF = np.float32(0.5)


def estimate(number: float) -> np.float32:
    """Zeroth-order guess at ``1 / sqrt(number)`` from its bit pattern.

    Halves the exponent of ``number`` and negates it, all in integer
    arithmetic on the 32-bit representation. The result is within a few
    percent of the true value.

    Parameters
    ----------
    number : float
        Narrowed to binary32 before its bits are read.

    Returns
    -------
    numpy.float32
    """
    i = float_to_bits(number)
    i = MAGIC - (i >> 1)  # evil floating point bit level hacking
    return bits_to_float(i)


def refine(number: float, y: float) -> np.float32:
    """Apply one Newton-Raphson step to an estimate ``y`` of ``1 / sqrt(number)``.

    Parameters
    ----------
    number : float
    y : float
        Any previous estimate, usually from `estimate`.

    Returns
    -------
    numpy.float32
    """
    x2 = np.float32(number) * HALF
    y = np.float32(y)
    return y * (THREEHALFS - x2 * y * y)


def approximate(number: float) -> np.float32:
    """Fast approximate inverse square root of a binary32 number.

    One bit-level estimate followed by a single Newton-Raphson step. The
    relative error is below 0.2% for every normal binary32 input. Subnormal
    inputs still give a finite positive result, but not an accurate one.

    Parameters
    ----------
    number : float
        A squared magnitude. Must be finite and strictly positive.

    Returns
    -------
    numpy.float32

    Warnings
    --------
    The input is not validated. Zero, negative, NaN or infinite values give
    an unspecified result instead of an error; use
    `qrsqrt.checked.approximate_checked` if you need the check.

    See Also
    --------
    estimate, refine

    Examples
    --------
    >>> import qrsqrt
    >>> round(float(qrsqrt.approximate(4.0)), 4)
    0.4992
    """
    return refine(number, estimate(number))
