"""
norm(x, p=2): vector and matrix p-norms without a linear-algebra backend.

Dispatch is on the rank of x and the kind of selector:

  scalar (0-d)   : |x| for every valid p
  matrix (2-d)   : p = 1, inf, or a MatrixNormKind ("fro", "col", "row")
  vector (other) : p = 2, 1, inf, -inf, 0 or any p > 0; n-d arrays are flattened

Examples
--------
    norm([3.0, 4.0])           # 5.0
    norm([3.0, 4.0], 1)        # 7.0
    norm([3.0, 4.0], np.inf) # 4.0

    A = [[1, 2, 3], [4, 5, 6]]
    norm(A, 1)                 # 9.0
    norm(A, np.inf)          # 15.0
    norm(A, "fro")             # 9.539392014169456
"""
from __future__ import annotations

import numpy as np

from simple_norm.elements import as_array, magnitudes
from simple_norm.errors import InvalidArgument
from simple_norm.matrix import matrix_norm
from simple_norm.selectors import MatrixNormKind, NumericP, as_selector
from simple_norm.vector import vector_norm


def _check_scalar_p(selector: NumericP) -> None:
    p = selector.p
    if not (p == -np.inf or p >= 0.0):
        raise InvalidArgument(f"p-norm is not defined for p = {p} (p must be -inf or >= 0)")


def _scalar_norm(arr: np.ndarray, selector) -> float:
    if isinstance(selector, MatrixNormKind):
        raise InvalidArgument(f"Matrix norm {selector.label()!r} needs a 2D input, got a scalar")
    _check_scalar_p(selector)
    return float(magnitudes(arr))


def norm(x, p=2) -> float:
    """
    p-norm of a scalar, vector or matrix.

    Parameters
    ----------
    x : number, sequence, nested sequence or np.ndarray
    p : real exponent (np.inf / -np.inf allowed), or for 2D input a
        MatrixNormKind / its name ("fro", "col", "row")

    Returns
    -------
    float >= 0 (nan / inf propagate from the data)

    Raises
    ------
    InvalidArgument : p outside the norm's domain, unknown named norm
    Unimplemented   : matrix 2-norm
    """
    selector = as_selector(p)
    arr = as_array(x)

    if arr.ndim == 0:
        return _scalar_norm(arr, selector)
    if arr.ndim == 2:
        return matrix_norm(arr, selector)
    if isinstance(selector, MatrixNormKind):
        raise InvalidArgument(f"Matrix norm {selector.label()!r} needs a 2D input, got ndim={arr.ndim}")
    return vector_norm(arr, selector.p)


def _difference(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    if a.dtype == object or b.dtype == object:
        return a - b
    # widen first so small int dtypes do not wrap around
    dtype = np.result_type(a.dtype, b.dtype, np.float64)
    return a.astype(dtype) - b.astype(dtype)


def distance(x, y, p=2) -> float:
    """d(x, y) = ||x - y||_p, same selector rules as norm()."""
    a = as_array(x)
    b = as_array(y)
    if a.shape != b.shape:
        raise InvalidArgument(f"x and y must have the same shape, got {a.shape} and {b.shape}")
    return norm(_difference(a, b), p)
