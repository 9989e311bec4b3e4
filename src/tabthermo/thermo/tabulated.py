"""Constant-density ideal solution with one tabulated species.

The tracked species gets its reference-state enthalpy and entropy from
composition tables; every other species keeps the closed-form ideal-solution
behavior of the underlying :class:`ConstDensityThermo`.
"""

from __future__ import annotations

from typing import Mapping, Sequence

import numpy as np

from tabthermo.cache import ReferenceStateCache
from tabthermo.constants import COMPOSITION_TOLERANCE
from tabthermo.interpolation import interpolate
from tabthermo.table import TableSet
from tabthermo.thermo.base import ThermoInterface
from tabthermo.thermo.ideal import ConstDensityThermo


class TabulatedThermo(ThermoInterface):
    """Phase whose tracked species has composition-dependent h0 and s0.

    Property queries pull the tracked mole fraction from ``phase`` and refresh
    the reference-state cache only when it has moved. Queries for any other
    species index go straight to ``phase``.

    Args:
        phase: Base constant-density phase holding T, P and composition.
        tracked_index: Index of the tabulated species in ``phase``.
        tables: Enthalpy (J/mol) and entropy (J/mol/K) against mole fraction.
        tolerance: Composition change below which cached values are reused.
    """

    def __init__(
        self,
        phase: ConstDensityThermo,
        tracked_index: int,
        tables: TableSet,
        tolerance: float = COMPOSITION_TOLERANCE,
    ):
        if not 0 <= tracked_index < phase.n_species:
            raise ValueError(
                f"Tracked species index {tracked_index} out of range "
                f"for {phase.n_species} species"
            )
        self.phase = phase
        self._tracked_index = int(tracked_index)
        self.tables = tables
        self.cache = ReferenceStateCache(tables, tolerance=tolerance)

    @property
    def tracked_index(self) -> int:
        return self._tracked_index

    @property
    def tracked_species(self) -> str:
        return self.phase.species[self._tracked_index].name

    def is_tracked(self, k: int) -> bool:
        return k == self._tracked_index

    def is_fresh(self) -> bool:
        return not self.cache.is_stale(self.tracked_mole_fraction())

    def tracked_mole_fraction(self) -> float:
        return self.phase.mole_fraction(self._tracked_index)

    def interpolate_enthalpy(self, x: float) -> float:
        return interpolate(self.tables.enthalpy, x)

    def interpolate_entropy(self, x: float) -> float:
        return interpolate(self.tables.entropy, x)

    # State, held by the base phase

    @property
    def n_species(self) -> int:
        return self.phase.n_species

    @property
    def temperature(self) -> float:
        return self.phase.temperature

    @property
    def pressure(self) -> float:
        return self.phase.pressure

    def set_temperature(self, temperature: float) -> None:
        self.phase.set_temperature(temperature)

    def set_pressure(self, pressure: float) -> None:
        self.phase.set_pressure(pressure)

    def mole_fractions(self) -> np.ndarray:
        return self.phase.mole_fractions()

    def set_mole_fractions(self, x: Sequence[float] | Mapping[str, float]) -> None:
        self.phase.set_mole_fractions(x)

    def set_mole_fractions_no_norm(self, x: Sequence[float] | Mapping[str, float]) -> None:
        self.phase.set_mole_fractions_no_norm(x)

    def set_mass_fractions(self, y: Sequence[float] | Mapping[str, float]) -> None:
        self.phase.set_mass_fractions(y)

    def set_mass_fractions_no_norm(self, y: Sequence[float] | Mapping[str, float]) -> None:
        self.phase.set_mass_fractions_no_norm(y)

    def set_concentrations(self, c: Sequence[float] | Mapping[str, float]) -> None:
        self.phase.set_concentrations(c)

    def set_tracked_mole_fraction(self, x: float) -> None:
        """Set the tracked mole fraction, rescaling the others to fill 1 - x.

        Other species keep their relative proportions; if they are all zero
        the remainder is split evenly between them.
        """
        if not 0.0 <= x <= 1.0:
            raise ValueError(f"Mole fraction must lie within [0, 1], got {x}")
        if self.n_species == 1:
            if x != 1.0:
                raise ValueError("Phase has no other species to balance the tracked one")
            self.phase.set_mole_fractions_no_norm([1.0])
            return

        current = self.phase.mole_fractions()
        others = np.ones(self.n_species, dtype=bool)
        others[self._tracked_index] = False
        rest = current[others].sum()
        new = np.zeros(self.n_species)
        if rest > 0.0:
            new[others] = current[others] * (1.0 - x) / rest
        else:
            new[others] = (1.0 - x) / (self.n_species - 1)
        new[self._tracked_index] = x
        self.phase.set_mole_fractions_no_norm(new)

    def molar_density(self) -> float:
        return self.phase.molar_density()

    def molar_volume(self) -> float:
        return self.phase.molar_volume()

    # Properties

    def activity_concentration(self, k: int) -> float:
        if self.is_tracked(k):
            return self.tracked_mole_fraction() * self.phase.molar_density()
        return self.phase.activity_concentration(k)

    def standard_concentration(self, k: int = 0) -> float:
        """1 / molar volume; fixed by the constant density, not by the tables."""
        return 1.0 / self.phase.molar_volume()

    def activity_coefficient(self, k: int) -> float:
        return 1.0

    def reference_enthalpy(self, k: int) -> float:
        if self.is_tracked(k):
            self.cache.ensure_updated(self.tracked_mole_fraction())
            return self.cache.enthalpy
        return self.phase.reference_enthalpy(k)

    def reference_entropy(self, k: int) -> float:
        if self.is_tracked(k):
            self.cache.ensure_updated(self.tracked_mole_fraction())
            return self.cache.entropy
        return self.phase.reference_entropy(k)
