"""
simple_norm: vector and matrix p-norms with overflow/underflow-safe
scaling and no BLAS/LAPACK dependency.
"""

from simple_norm.core import distance, norm
from simple_norm.errors import InvalidArgument, NormError, Unimplemented
from simple_norm.selectors import MatrixNormKind, NumericP, parse_selector

__all__ = [
    'norm',
    'distance',
    'NumericP',
    'MatrixNormKind',
    'parse_selector',
    'NormError',
    'InvalidArgument',
    'Unimplemented',
]
