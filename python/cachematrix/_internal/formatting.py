from __future__ import annotations

from typing import Callable

import numpy as np


_EDGE_ITEMS: int = 4

# Marks the position of an elided run of rows or columns.
_GAP = -1


def configure(*, edge_items: int) -> None:
    global _EDGE_ITEMS
    if int(edge_items) < 1:
        raise ValueError("edge_items must be at least 1")
    _EDGE_ITEMS = int(edge_items)


def _window(length: int) -> list[int]:
    """Indices to render along one axis, with ``_GAP`` where items are skipped."""
    if length <= 2 * _EDGE_ITEMS:
        return list(range(length))
    return [*range(_EDGE_ITEMS), _GAP, *range(length - _EDGE_ITEMS, length)]


def _cell_formatter(dtype: np.dtype) -> Callable[[np.generic], str]:
    kind = dtype.kind
    if kind == "b":
        return lambda v: "1" if v else "0"
    if kind in "iu":
        return lambda v: str(int(v))
    if kind == "f":
        return lambda v: f"{float(v):g}"
    if kind == "c":
        return lambda v: f"{v.real:g}{v.imag:+g}j"
    return str


def matrix_str(owner: object, array: np.ndarray, *, cached: bool) -> str:
    info = [f"shape={tuple(array.shape)}", f"dtype={array.dtype}", f"cached={cached}"]
    header = f"{owner.__class__.__name__}({', '.join(info)})"

    if array.ndim != 2:
        return header + "\n" + np.array2string(array, edgeitems=_EDGE_ITEMS)

    if array.size == 0:
        return header + "\n[]"

    fmt = _cell_formatter(array.dtype)
    cols = _window(array.shape[1])

    lines = [header, "["]
    for i in _window(array.shape[0]):
        if i == _GAP:
            lines.append(" ...")
            continue
        cells = ["..." if j == _GAP else fmt(array[i, j]) for j in cols]
        lines.append(f" [{' '.join(cells)}]")
    lines.append("]")
    return "\n".join(lines)
