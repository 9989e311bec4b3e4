from .base import ThermoInterface
from .ideal import ConstDensityThermo
from .tabulated import TabulatedThermo

__all__ = ["ThermoInterface", "ConstDensityThermo", "TabulatedThermo"]
