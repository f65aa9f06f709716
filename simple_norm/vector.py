"""
Vector p-norms over the flattened elements of any array-like.

The 2-norm and the general p-norm divide by the largest magnitude before
raising to a power and multiply back afterwards, so entries near the float
max do not overflow and subnormal entries do not underflow to zero.
"""
from __future__ import annotations

import numpy as np

from simple_norm.elements import as_array, count_nonzero, magnitudes
from simple_norm.errors import InvalidArgument


def _flat_magnitudes(x) -> np.ndarray:
    return magnitudes(as_array(x)).reshape(-1)


def _max_scale(mags: np.ndarray) -> float:
    # nan propagates through np.max
    return float(np.max(mags))


def norm1(x) -> float:
    """Sum of magnitudes (unscaled)."""
    return float(np.sum(_flat_magnitudes(x)))


def norm2(x) -> float:
    """
    Euclidean norm with scaling:
      scale = max |x_i|
      ||x||_2 = scale * sqrt(sum (|x_i| / scale)^2)
    """
    mags = _flat_magnitudes(x)
    if mags.size == 0:
        return 0.0

    scale = _max_scale(mags)
    if scale == 0.0:
        return 0.0
    if np.isinf(scale):
        return float(np.inf)

    scaled = mags / scale
    sumsq = float(np.sum(scaled * scaled))
    return float(scale * np.sqrt(sumsq))


def norm_inf(x) -> float:
    """Largest magnitude."""
    mags = _flat_magnitudes(x)
    if mags.size == 0:
        return 0.0
    return float(np.max(mags))


def norm_minus_inf(x) -> float:
    """Smallest magnitude."""
    mags = _flat_magnitudes(x)
    if mags.size == 0:
        return 0.0
    return float(np.min(mags))


def norm0(x) -> float:
    # number of non-zero elements, as a float
    return float(count_nonzero(as_array(x)))


def normp(x, p: float) -> float:
    """
    General p-norm for p > 0, same scaling as norm2:
      ||x||_p = scale * (sum (|x_i| / scale)^p)^(1/p)
    """
    p = float(p)
    if not p > 0.0:
        raise InvalidArgument(f"normp needs p > 0, got p = {p}")

    mags = _flat_magnitudes(x)
    if mags.size == 0:
        return 0.0

    scale = _max_scale(mags)
    if scale == 0.0:
        return 0.0
    if np.isinf(scale):
        return float(np.inf)

    sump = np.sum((mags / scale) ** p)
    # small p can push the root past the float max (-> inf)
    with np.errstate(over="ignore"):
        return float(scale * np.power(sump, 1.0 / p))


def vector_norm(x, p: float = 2.0) -> float:
    """
    Route a numeric p to the matching reduction.

    Supported p: 2, 1, inf, -inf, 0 and any p > 0.
    Empty input is 0.0 for every p; otherwise p < 0 (except -inf) and nan
    raise InvalidArgument.
    """
    arr = as_array(x)
    if arr.size == 0:
        return 0.0

    p = float(p)
    if p == 2.0:
        return norm2(arr)
    elif p == 1.0:
        return norm1(arr)
    elif p == np.inf:
        return norm_inf(arr)
    elif p == -np.inf:
        return norm_minus_inf(arr)
    elif p == 0.0:
        return norm0(arr)
    elif p > 0.0:
        return normp(arr, p)
    else:
        raise InvalidArgument(f"p-norm is not defined for p = {p} (p must be -inf or >= 0)")
