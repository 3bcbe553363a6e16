"""Core domain models, interfaces and services for formulas and molecules."""

from .domain.models.counter import Counter
from .domain.models.cu import Cu
from .domain.models.saturation import Saturation
from .domain.models.molecule import Molecule
from .domain.interfaces.species_lookup import SpeciesLookup
from .services.formula_service import FormulaService

__all__ = [
    "Counter",
    "Cu",
    "Saturation",
    "Molecule",
    "SpeciesLookup",
    "FormulaService",
]
