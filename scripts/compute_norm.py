from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

import numpy as np

from simple_norm import InvalidArgument, Unimplemented, norm, parse_selector

EXIT_INVALID = 2
EXIT_UNIMPLEMENTED = 3


def parse_number(text: str):
    """'3' -> int, '2.5' / 'inf' -> float, '1+2j' -> complex."""
    s = text.strip()
    for cast in (int, float, complex):
        try:
            return cast(s)
        except ValueError:
            continue
    raise InvalidArgument(f"Not a number: {text!r}")


def parse_matrix(text: str) -> np.ndarray:
    """
    "1,2,3;4,5,6" -> 2x3 array. Rows split on ';', entries on ','.
    An empty string is a 0x0 matrix.
    """
    if not text.strip():
        return np.zeros((0, 0))
    rows: List[list] = []
    for row_text in text.split(";"):
        rows.append([parse_number(e) for e in row_text.split(",") if e.strip()])
    widths = {len(r) for r in rows}
    if len(widths) != 1:
        raise InvalidArgument(f"Matrix rows must have equal length, got lengths {sorted(widths)}")
    return np.array(rows)


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Vector / matrix p-norms (scaled, no BLAS/LAPACK)")
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--vector", nargs="*", metavar="X", help="Vector entries, e.g. 3 4 or 1+2j")
    src.add_argument("--matrix", type=str, metavar="ROWS", help='Matrix rows, e.g. "1,2,3;4,5,6"')
    p.add_argument("--p", dest="selectors", action="append", metavar="SEL",
                   help="Norm selector: a number, inf, fro, col, row; write --p=-inf for -inf (repeatable, default 2)")
    args = p.parse_args(argv)

    selector_texts = args.selectors or ["2"]

    try:
        if args.matrix is not None:
            x = parse_matrix(args.matrix)
        else:
            x = np.array([parse_number(v) for v in args.vector])
        selectors = [parse_selector(s) for s in selector_texts]

        for sel in selectors:
            print(f"||x||_{sel.label()} = {norm(x, sel)!r}")
    except InvalidArgument as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID
    except Unimplemented as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_UNIMPLEMENTED

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
