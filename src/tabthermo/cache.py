"""Reference-state cache for the tracked species."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from tabthermo.constants import COMPOSITION_TOLERANCE
from tabthermo.interpolation import interpolate
from tabthermo.table import TableSet

logger = logging.getLogger(__name__)


@dataclass
class ReferenceStateCache:
    """Last interpolated enthalpy/entropy and the composition they belong to.

    ``enthalpy`` and ``entropy`` are only written by :meth:`ensure_updated`.
    A new cache has no composition and is stale for every query.

    Not safe for concurrent use; callers sharing a phase across threads must
    serialize access.
    """

    tables: TableSet
    tolerance: float = COMPOSITION_TOLERANCE
    last_composition: Optional[float] = field(default=None, init=False)
    enthalpy: float = field(default=float("nan"), init=False)
    entropy: float = field(default=float("nan"), init=False)

    def __post_init__(self) -> None:
        if self.tolerance < 0.0:
            raise ValueError("Cache tolerance must be non-negative")

    def is_stale(self, x_current: float) -> bool:
        if self.last_composition is None:
            return True
        # NaN compares unequal to everything, so it is always stale
        return not abs(x_current - self.last_composition) <= self.tolerance

    def ensure_updated(self, x_current: float) -> None:
        """Re-evaluate both tables if ``x_current`` moved past the tolerance."""
        if not self.is_stale(x_current):
            return
        enthalpy = interpolate(self.tables.enthalpy, x_current)
        entropy = interpolate(self.tables.entropy, x_current)
        self.enthalpy = enthalpy
        self.entropy = entropy
        self.last_composition = x_current
        logger.debug(
            f"Reference state refreshed at x={x_current}: h={enthalpy}, s={entropy}"
        )
