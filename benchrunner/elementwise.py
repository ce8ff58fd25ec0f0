"""Element-wise addition kernels used as benchmark workloads."""

from __future__ import annotations

from typing import Sequence


def _check_lengths(a: Sequence[float], b: Sequence[float]) -> None:
    if len(a) != len(b):
        raise ValueError(f"operands differ in length: {len(a)} != {len(b)}")


def elementwise_add(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Return the element-wise sum of two equally long sequences."""
    _check_lengths(a, b)
    return [x + y for x, y in zip(a, b)]


def elementwise_add_unroll(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Return the element-wise sum, working through the operands four at a time."""
    _check_lengths(a, b)
    whole = len(a) - len(a) % 4
    result: list[float] = []
    for start in range(0, whole, 4):
        x0, x1, x2, x3 = a[start:start + 4]
        y0, y1, y2, y3 = b[start:start + 4]
        result.extend((x0 + y0, x1 + y1, x2 + y2, x3 + y3))
    result.extend(x + y for x, y in zip(a[whole:], b[whole:]))
    return result