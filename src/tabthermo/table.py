"""Composition tables.

A :class:`Table` holds ``(x, y)`` pairs where ``x`` is the mole fraction of the
tracked species and ``y`` is a property value (enthalpy in J/mol or entropy in
J/mol/K). Tables are validated once on construction and are read-only after
that.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

import numpy as np

from tabthermo.exceptions import InvalidTableError

BELOW_RANGE = -1


@dataclass(frozen=True, eq=False)
class Table:
    """Piecewise-linear table of a property against composition.

    Attributes:
        x: Mole fractions, strictly increasing, within [0, 1].
        y: Property values at each ``x``.
    """

    x: np.ndarray
    y: np.ndarray

    def __post_init__(self) -> None:
        try:
            x = np.array(self.x, dtype=float)
            y = np.array(self.y, dtype=float)
        except (TypeError, ValueError) as exc:
            raise InvalidTableError(f"Table entries must be numeric: {exc}") from exc

        if x.ndim != 1 or y.ndim != 1:
            raise InvalidTableError("Table columns must be one-dimensional")
        if x.size != y.size:
            raise InvalidTableError(
                f"Table has {x.size} compositions but {y.size} values"
            )
        if x.size < 2:
            raise InvalidTableError(
                f"Table needs at least 2 points, got {x.size}"
            )
        if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
            raise InvalidTableError("Table contains non-finite entries")
        if np.any((x < 0.0) | (x > 1.0)):
            raise InvalidTableError("Table compositions must lie within [0, 1]")
        steps = np.diff(x)
        if np.any(steps <= 0.0):
            i = int(np.argmax(steps <= 0.0))
            raise InvalidTableError(
                f"Table compositions must be strictly increasing "
                f"(x[{i}]={x[i]}, x[{i + 1}]={x[i + 1]})"
            )

        x.flags.writeable = False
        y.flags.writeable = False
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[float, float]]) -> "Table":
        points = []
        for i, p in enumerate(pairs):
            try:
                point = tuple(p)
            except TypeError:
                raise InvalidTableError(f"Point {i} is not an (x, y) pair") from None
            points.append(point)
            if len(point) != 2:
                raise InvalidTableError(
                    f"Point {i} has {len(point)} entries, expected 2"
                )
        if not points:
            raise InvalidTableError("Table needs at least 2 points, got 0")
        xs, ys = zip(*points)
        return cls(np.asarray(xs), np.asarray(ys))

    @property
    def x_min(self) -> float:
        return float(self.x[0])

    @property
    def x_max(self) -> float:
        return float(self.x[-1])

    def size(self) -> int:
        return int(self.x.size)

    def point_at(self, i: int) -> Tuple[float, float]:
        return float(self.x[i]), float(self.y[i])

    def pairs(self) -> List[Tuple[float, float]]:
        return [self.point_at(i) for i in range(self.size())]

    def lower_bound(self, x: float) -> int:
        """Index of the greatest tabulated composition <= ``x``.

        Returns ``BELOW_RANGE`` when ``x`` is below the first composition and
        ``size() - 1`` when ``x`` is at or beyond the last one.
        """
        return int(np.searchsorted(self.x, x, side="right")) - 1


@dataclass(frozen=True)
class TableSet:
    """Enthalpy and entropy tables for the tracked species."""

    enthalpy: Table
    entropy: Table
