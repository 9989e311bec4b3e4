"""Data structures for species."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Species:
    name: str
    molecular_weight: float  # kg/mol
    heat_capacity: float  # J/mol/K (constant)
    heat_of_formation: float  # J/mol at T_REF
    standard_entropy: float  # J/mol/K at T_REF
    formula: str = ""
