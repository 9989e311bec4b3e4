"""Ideal solution thermodynamics at constant mass density."""

from __future__ import annotations

import math
from typing import List, Mapping, Sequence

import numpy as np

from tabthermo.constants import P_REF, T_REF
from tabthermo.models import Species
from tabthermo.thermo.base import ThermoInterface


class ConstDensityThermo(ThermoInterface):
    """Ideal solution with constant Cp species and a fixed mass density.

    Holds the phase state (temperature, pressure, composition). The molar
    density follows from the mass density and the mean molecular weight, so it
    changes with composition but not with pressure.
    """

    def __init__(
        self,
        species: Sequence[Species],
        density: float,
        temperature: float = T_REF,
        pressure: float = P_REF,
    ):
        if not species:
            raise ValueError("A phase needs at least one species")
        names = [sp.name for sp in species]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate species names in {names}")
        if not (math.isfinite(density) and density > 0.0):
            raise ValueError(f"Density must be positive, got {density}")
        for sp in species:
            if not (math.isfinite(sp.molecular_weight) and sp.molecular_weight > 0.0):
                raise ValueError(
                    f"Molecular weight of {sp.name} must be positive, got {sp.molecular_weight}"
                )

        self.species: List[Species] = list(species)
        self.density = float(density)  # kg/m^3
        self._index = {name: k for k, name in enumerate(names)}
        self._molecular_weights = np.array([sp.molecular_weight for sp in species])
        self._temperature = T_REF
        self._pressure = float(pressure)
        self._mole_fractions = np.zeros(len(species))
        self._mole_fractions[0] = 1.0
        self.set_temperature(temperature)

    @property
    def n_species(self) -> int:
        return len(self.species)

    @property
    def species_names(self) -> List[str]:
        return [sp.name for sp in self.species]

    def species_index(self, name: str) -> int:
        try:
            return self._index[name]
        except KeyError:
            raise ValueError(f"Unknown species: {name}") from None

    @property
    def temperature(self) -> float:
        return self._temperature

    @property
    def pressure(self) -> float:
        return self._pressure

    def set_temperature(self, temperature: float) -> None:
        if not (math.isfinite(temperature) and temperature > 0.0):
            raise ValueError(f"Temperature must be positive, got {temperature}")
        self._temperature = float(temperature)

    def set_pressure(self, pressure: float) -> None:
        self._pressure = float(pressure)

    # Composition

    def mole_fractions(self) -> np.ndarray:
        return self._mole_fractions.copy()

    def mole_fraction(self, k: int) -> float:
        return float(self._mole_fractions[k])

    def set_mole_fractions(self, x: Sequence[float] | Mapping[str, float]) -> None:
        """Set mole fractions, clipping negatives and normalizing to one."""
        x = np.clip(self._as_array(x), 0.0, None)
        total = x.sum()
        if total <= 0.0:
            raise ValueError("Mole fractions sum to zero")
        self._mole_fractions = x / total

    def set_mole_fractions_no_norm(self, x: Sequence[float] | Mapping[str, float]) -> None:
        self._mole_fractions = self._as_array(x)

    def set_mass_fractions(self, y: Sequence[float] | Mapping[str, float]) -> None:
        y = np.clip(self._as_array(y), 0.0, None)
        moles = y / self._molecular_weights
        total = moles.sum()
        if total <= 0.0:
            raise ValueError("Mass fractions sum to zero")
        self._mole_fractions = moles / total

    def set_mass_fractions_no_norm(self, y: Sequence[float] | Mapping[str, float]) -> None:
        """Set composition from mass fractions taken as given.

        Negative entries are kept and ``y`` is not rescaled; the mole fractions
        are y_k / M_k divided by sum(y_j / M_j).
        """
        moles = self._as_array(y) / self._molecular_weights
        total = moles.sum()
        if total == 0.0:
            raise ValueError("Mass fractions sum to zero")
        self._mole_fractions = moles / total

    def set_concentrations(self, c: Sequence[float] | Mapping[str, float]) -> None:
        """Set composition from molar concentrations (mol/m^3).

        Only the relative amounts are used; the mass density stays fixed.
        """
        self.set_mole_fractions(c)

    def _as_array(self, values: Sequence[float] | Mapping[str, float]) -> np.ndarray:
        if isinstance(values, Mapping):
            arr = np.zeros(self.n_species)
            for name, value in values.items():
                arr[self.species_index(name)] = float(value)
            return arr
        arr = np.array(values, dtype=float)
        if arr.shape != (self.n_species,):
            raise ValueError(
                f"Expected {self.n_species} composition entries, got {arr.size}"
            )
        return arr

    # Density

    def mean_molecular_weight(self) -> float:
        """Mole-fraction weighted molecular weight (kg/mol)."""
        return float(np.dot(self._mole_fractions, self._molecular_weights))

    def molar_density(self) -> float:
        """Total molar density (mol/m^3)."""
        return self.density / self.mean_molecular_weight()

    def molar_volume(self) -> float:
        return 1.0 / self.molar_density()

    # Activities

    def activity_concentration(self, k: int) -> float:
        return self.mole_fraction(k) * self.molar_density()

    def standard_concentration(self, k: int = 0) -> float:
        return self.molar_density()

    def activity_coefficient(self, k: int) -> float:
        return 1.0

    # Reference state, constant Cp from T_REF

    def reference_enthalpy(self, k: int) -> float:
        sp = self.species[k]
        return sp.heat_of_formation + sp.heat_capacity * (self._temperature - T_REF)

    def reference_entropy(self, k: int) -> float:
        sp = self.species[k]
        return sp.standard_entropy + sp.heat_capacity * float(
            np.log(self._temperature / T_REF)
        )
