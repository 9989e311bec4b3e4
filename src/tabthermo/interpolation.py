"""Piecewise-linear interpolation over composition tables."""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from tabthermo.exceptions import InternalConsistencyError
from tabthermo.table import Table


def interpolate(table: Table, x: float) -> float:
    """Evaluate ``table`` at mole fraction ``x``.

    Queries outside the tabulated range are clamped to the end values; there
    is no extrapolation. Between knots the result is the linear blend

        y = y0 + (y1 - y0) * (x - x0) / (x1 - x0)

    Args:
        table: Composition table.
        x: Mole fraction of the tracked species.

    Returns:
        Interpolated property value.
    """
    if math.isnan(x):
        raise ValueError("Cannot interpolate at a NaN composition")

    n = table.size()
    x_first, y_first = table.point_at(0)
    if x <= x_first:
        return y_first
    x_last, y_last = table.point_at(n - 1)
    if x >= x_last:
        return y_last

    i = table.lower_bound(x)
    x0, y0 = table.point_at(i)
    x1, y1 = table.point_at(i + 1)
    if x1 == x0:
        raise InternalConsistencyError(
            f"Zero-width interpolation bracket at x={x0} (index {i})"
        )
    return y0 + (y1 - y0) * (x - x0) / (x1 - x0)


def interpolate_many(table: Table, xs: Iterable[float]) -> np.ndarray:
    """Evaluate ``table`` at each mole fraction in ``xs``."""
    return np.array([interpolate(table, float(x)) for x in xs], dtype=float)
