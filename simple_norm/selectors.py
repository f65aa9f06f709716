from __future__ import annotations

import numbers
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Union

import numpy as np

from simple_norm.errors import InvalidArgument


@dataclass(frozen=True)
class NumericP:
    # real exponent; +inf / -inf are the max / min sentinels
    p: float

    def __post_init__(self):
        object.__setattr__(self, "p", float(self.p))

    @property
    def is_pos_inf(self) -> bool:
        return self.p == np.inf

    @property
    def is_neg_inf(self) -> bool:
        return self.p == -np.inf

    def label(self) -> str:
        if self.is_pos_inf:
            return "inf"
        if self.is_neg_inf:
            return "-inf"
        if self.p.is_integer():
            return str(int(self.p))
        return repr(self.p)


class MatrixNormKind(Enum):
    """Named matrix norms, valid for 2-D inputs only."""

    COLUMN_SUM = "col"  # same as p = 1
    ROW_SUM = "row"     # same as p = inf
    FROBENIUS = "fro"

    def label(self) -> str:
        return self.value


Selector = Union[NumericP, MatrixNormKind]

_KIND_ALIASES = {
    "fro": MatrixNormKind.FROBENIUS,
    "frobenius": MatrixNormKind.FROBENIUS,
    "col": MatrixNormKind.COLUMN_SUM,
    "column": MatrixNormKind.COLUMN_SUM,
    "row": MatrixNormKind.ROW_SUM,
}


def _kind_from_text(text: str) -> MatrixNormKind:
    kind = _KIND_ALIASES.get(text.strip().lower())
    if kind is None:
        raise InvalidArgument(f"Unknown matrix norm: {text!r}")
    return kind


def as_selector(value: object) -> Selector:
    """
    Coerce a raw selector into its tagged form.

    Real numbers (and Decimal) -> NumericP, strings -> MatrixNormKind (e.g. "fro"),
    existing selectors pass through. bool is rejected even though it is an int.
    """
    if isinstance(value, (NumericP, MatrixNormKind)):
        return value
    if isinstance(value, bool):
        raise InvalidArgument("p must be a real number, got a bool")
    if isinstance(value, (numbers.Real, Decimal)):
        return NumericP(float(value))
    if isinstance(value, str):
        return _kind_from_text(value)
    raise InvalidArgument(f"Unsupported norm selector of type {type(value).__name__}: {value!r}")


def parse_selector(text: str) -> Selector:
    """
    Parse command-line text: "1", "2.5", "inf", "-inf", "fro", "col", "row".
    """
    try:
        p = float(text)
    except ValueError:
        return _kind_from_text(text)
    return NumericP(p)
