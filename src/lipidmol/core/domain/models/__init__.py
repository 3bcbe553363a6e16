"""Domain model classes."""

from .species import Species
from .counter import Counter
from .cu import Cu
from .saturation import Saturation
from .molecule import Molecule
from .formula_report import FormulaReport

__all__ = [
    "Species",
    "Counter",
    "Cu",
    "Saturation",
    "Molecule",
    "FormulaReport",
]
