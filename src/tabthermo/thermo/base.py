"""Base interface for thermodynamic phases."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from tabthermo.constants import P_REF, R_GAS, SMALL_NUMBER


class ThermoInterface(ABC):
    """Abstract base class for phases queried by equilibrium and rate code.

    Species are addressed by their index in the phase's species list.
    Properties are molar: J/mol, J/mol/K, mol/m^3.
    """

    @property
    @abstractmethod
    def n_species(self) -> int:
        pass

    @property
    @abstractmethod
    def temperature(self) -> float:
        """Temperature (K)."""
        pass

    @property
    @abstractmethod
    def pressure(self) -> float:
        """Pressure (Pa)."""
        pass

    @abstractmethod
    def mole_fractions(self) -> np.ndarray:
        pass

    @abstractmethod
    def molar_volume(self) -> float:
        """Molar volume of the solution (m^3/mol)."""
        pass

    @abstractmethod
    def activity_concentration(self, k: int) -> float:
        """Generalized concentration of species ``k`` (mol/m^3)."""
        pass

    @abstractmethod
    def standard_concentration(self, k: int = 0) -> float:
        """Concentration that normalizes activity concentrations (mol/m^3)."""
        pass

    @abstractmethod
    def activity_coefficient(self, k: int) -> float:
        pass

    @abstractmethod
    def reference_enthalpy(self, k: int) -> float:
        """Reference-state molar enthalpy of species ``k`` (J/mol)."""
        pass

    @abstractmethod
    def reference_entropy(self, k: int) -> float:
        """Reference-state molar entropy of species ``k`` (J/mol/K)."""
        pass

    def activity_concentrations(self) -> np.ndarray:
        return np.array([self.activity_concentration(k) for k in range(self.n_species)])

    def activity_coefficients(self) -> np.ndarray:
        return np.array([self.activity_coefficient(k) for k in range(self.n_species)])

    def activities(self) -> np.ndarray:
        """Dimensionless activities a_k = C_k / C0_k."""
        return np.array(
            [
                self.activity_concentration(k) / self.standard_concentration(k)
                for k in range(self.n_species)
            ]
        )

    def reference_gibbs(self, k: int) -> float:
        return self.reference_enthalpy(k) - self.temperature * self.reference_entropy(k)

    def chemical_potential(self, k: int) -> float:
        """mu_k = g0_k + R T ln(a_k)."""
        activity = self.activity_concentration(k) / self.standard_concentration(k)
        return float(
            self.reference_gibbs(k)
            + R_GAS * self.temperature * np.log(max(activity, SMALL_NUMBER))
        )

    def chemical_potentials(self) -> np.ndarray:
        return np.array([self.chemical_potential(k) for k in range(self.n_species)])

    def enthalpy_mole(self) -> float:
        """Molar enthalpy of the solution (J/mol).

        Ideal mixing of reference enthalpies plus the pressure work of an
        incompressible solution.
        """
        x = self.mole_fractions()
        h = sum(x[k] * self.reference_enthalpy(k) for k in range(self.n_species))
        return float(h + (self.pressure - P_REF) * self.molar_volume())

    def entropy_mole(self) -> float:
        """Molar entropy of the solution (J/mol/K), ideal entropy of mixing."""
        x = self.mole_fractions()
        s = 0.0
        for k in range(self.n_species):
            if x[k] > 0.0:
                s += x[k] * (self.reference_entropy(k) - R_GAS * np.log(x[k]))
        return float(s)

    def gibbs_mole(self) -> float:
        return self.enthalpy_mole() - self.temperature * self.entropy_mole()
