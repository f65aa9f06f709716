from __future__ import annotations


class NormError(Exception):
    """Base class for every error raised by simple_norm."""


class InvalidArgument(NormError, ValueError):
    """The selector (or the input shape) is outside the domain of the norm."""


class Unimplemented(NormError, NotImplementedError):
    """
    The norm is well defined but deliberately not provided here
    (the matrix 2-norm needs an SVD). Callers may fall back to a full
    linear-algebra library.
    """
