from __future__ import annotations

import numpy as np

from simple_norm.errors import InvalidArgument

# dtype kinds we accept: bool, signed/unsigned int, float, complex, object (Decimal, Fraction, big int)
_NUMERIC_KINDS = "biufcO"


def as_array(x) -> np.ndarray:
    """
    np.asarray with the checks the reductions rely on:
    a rectangular container of numeric elements.
    """
    try:
        arr = np.asarray(x)
    except ValueError as exc:
        # numpy >= 1.24 refuses ragged nested lists
        raise InvalidArgument(f"Input must be rectangular: {exc}") from exc

    if arr.dtype.kind not in _NUMERIC_KINDS:
        raise InvalidArgument(f"Input must hold numbers, got dtype {arr.dtype}")
    if arr.dtype == object:
        for e in arr.flat:
            if isinstance(e, (list, tuple, np.ndarray)):
                raise InvalidArgument("Input must be rectangular (ragged nested sequence)")
    return arr


def element_magnitude(e) -> float:
    """|e| for reals, modulus for complex, converted to float."""
    try:
        return float(abs(e))
    except OverflowError:
        # big int (or similar) beyond the float range
        return np.inf


def magnitudes(arr: np.ndarray) -> np.ndarray:
    """
    Elementwise magnitude as float64, same shape as arr.
    Integers are widened before abs so e.g. int8(-128) does not wrap.
    """
    kind = arr.dtype.kind
    if kind == "O":
        flat = [element_magnitude(e) for e in arr.flat]
        return np.array(flat, dtype=np.float64).reshape(arr.shape)
    if kind == "c":
        # np.abs on complex is hypot-based (no overflow of re^2 + im^2)
        return np.abs(arr).astype(np.float64)
    return np.abs(arr.astype(np.float64))


def count_nonzero(arr: np.ndarray) -> int:
    # compare the elements themselves: a tiny Decimal may round to 0.0 as a float
    if arr.dtype == object:
        return sum(1 for e in arr.flat if e != 0)
    return int(np.count_nonzero(arr))
