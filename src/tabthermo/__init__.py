"""tabthermo core package."""

from tabthermo.cache import ReferenceStateCache
from tabthermo.exceptions import InternalConsistencyError, InvalidTableError
from tabthermo.interpolation import interpolate, interpolate_many
from tabthermo.loader import build_phase, load_phase, read_tables
from tabthermo.models import Species
from tabthermo.table import Table, TableSet
from tabthermo.thermo import ConstDensityThermo, TabulatedThermo, ThermoInterface

__all__ = [
    "ReferenceStateCache",
    "InternalConsistencyError",
    "InvalidTableError",
    "interpolate",
    "interpolate_many",
    "build_phase",
    "load_phase",
    "read_tables",
    "Species",
    "Table",
    "TableSet",
    "ConstDensityThermo",
    "TabulatedThermo",
    "ThermoInterface",
]
