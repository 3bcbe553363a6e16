"""Core domain models and interfaces."""

from .models.species import Species
from .models.counter import Counter
from .models.cu import Cu
from .models.saturation import Saturable, Saturation
from .models.molecule import Molecule
from .models.formula_report import FormulaReport
from .interfaces.species_lookup import SpeciesLookup

__all__ = [
    "Species",
    "Counter",
    "Cu",
    "Saturable",
    "Saturation",
    "Molecule",
    "FormulaReport",
    "SpeciesLookup",
]
