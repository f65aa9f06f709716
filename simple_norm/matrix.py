from __future__ import annotations

import numpy as np

from simple_norm.elements import as_array, magnitudes
from simple_norm.errors import InvalidArgument, Unimplemented
from simple_norm.selectors import MatrixNormKind, as_selector
from simple_norm.vector import norm2


def _grid(A) -> np.ndarray:
    A = as_array(A)
    if A.ndim != 2:
        raise InvalidArgument(f"A must be 2D, got ndim={A.ndim}")
    return A


def norm1_matrix(A) -> float:
    """
    Induced 1-norm: max absolute column sum.
    Empty grid (0 rows or 0 cols) -> 0.0
    """
    A = _grid(A)
    if A.shape[0] == 0 or A.shape[1] == 0:
        return 0.0
    return float(np.max(np.sum(magnitudes(A), axis=0)))


def norm_inf_matrix(A) -> float:
    """
    Induced inf-norm: max absolute row sum.
    Empty grid (0 rows or 0 cols) -> 0.0
    """
    A = _grid(A)
    if A.shape[0] == 0 or A.shape[1] == 0:
        return 0.0
    return float(np.max(np.sum(magnitudes(A), axis=1)))


def norm_frobenius(A) -> float:
    # 2-norm of the entries viewed as one flat vector
    return norm2(_grid(A))


_NAMED_NORMS = {
    MatrixNormKind.COLUMN_SUM: norm1_matrix,
    MatrixNormKind.ROW_SUM: norm_inf_matrix,
    MatrixNormKind.FROBENIUS: norm_frobenius,
}


def matrix_norm(A, selector) -> float:
    """
    Matrix norms:
      NumericP(1)   / COLUMN_SUM -> max column sum
      NumericP(inf) / ROW_SUM    -> max row sum
      FROBENIUS                  -> Frobenius norm
      NumericP(2)                -> Unimplemented (needs an SVD)
    Any other p is InvalidArgument.
    """
    selector = as_selector(selector)
    if isinstance(selector, MatrixNormKind):
        return _NAMED_NORMS[selector](A)

    p = selector.p
    if p == 1.0:
        return norm1_matrix(A)
    elif p == np.inf:
        return norm_inf_matrix(A)
    elif p == 2.0:
        raise Unimplemented(
            "Spectral (2-) norm of a matrix requires a singular value decomposition, "
            "which simple_norm does not implement; use p=1, p=inf or 'fro'."
        )
    else:
        raise InvalidArgument(f"Matrix norm not supported for p = {selector.label()}")
