"""Validating front-end for `qrsqrt.approximate`."""
from __future__ import annotations

import warnings

import numpy as np

from qrsqrt import approximate


class DomainError(ValueError):
    """The input has no real inverse square root in binary32.

    Raised for zero, negative, NaN and infinite values, after the input
    has been narrowed to binary32. Tiny values that underflow to zero
    count as zero.
    """

    pass


class DomainWarning(RuntimeWarning):
    """Same as `DomainError`, issued when the caller asked not to raise."""

    pass


def approximate_checked(number: float, strict: bool = True) -> np.float32:
    """`approximate`, but refuse inputs outside its domain.

    Parameters
    ----------
    number : float
    strict : bool, optional
        If false, out-of-domain input only warns and the unspecified
        result of `approximate` is returned anyway.

    Returns
    -------
    numpy.float32

    Raises
    ------
    DomainError
        ``number`` is not finite or not strictly positive, and ``strict``.

    Warns
    -----
    DomainWarning
        Same condition, when not ``strict``.
    """
    x = np.float32(number)
    if not (np.isfinite(x) and x > 0):
        if strict:
            raise DomainError("Inverse square root is undefined for %r" % number)
        warnings.warn(
            "Inverse square root is undefined for %r, result is meaningless"
            % number,
            DomainWarning,
            stacklevel=2,
        )
    return approximate(x)
