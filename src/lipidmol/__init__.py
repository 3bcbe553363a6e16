"""
lipidmol - chemical formulas, fatty acyl chain shorthand and small molecule graphs.

    >>> from lipidmol import Counter
    >>> counter = Counter.parse("C2H5OH")
    >>> counter.render()
    'H6C2O'
"""

__version__ = "0.1.0"

from .core.domain.models.species import Species
from .core.domain.models.counter import Counter, MAX_COUNT
from .core.domain.models.cu import Cu
from .core.domain.models.saturation import (
    Saturable,
    Saturation,
    is_saturated,
    saturation_of,
)
from .core.domain.models.molecule import Molecule
from .core.domain.models.formula_report import FormulaReport
from .core.domain.models import reference_library
from .core.domain.interfaces.species_lookup import SpeciesLookup
from .core.services.formula_service import FormulaService
from .core.exceptions import (
    ChemError,
    CuError,
    FormulaError,
    MalformedCountError,
    UnknownSpeciesError,
)
from .infrastructure.adapters.rdkit_species_lookup import (
    RDKitSpeciesLookup,
    default_species_lookup,
)

__all__ = [
    "Species",
    "Counter",
    "MAX_COUNT",
    "Cu",
    "Saturable",
    "Saturation",
    "is_saturated",
    "saturation_of",
    "Molecule",
    "FormulaReport",
    "reference_library",
    "SpeciesLookup",
    "FormulaService",
    "ChemError",
    "CuError",
    "FormulaError",
    "MalformedCountError",
    "UnknownSpeciesError",
    "RDKitSpeciesLookup",
    "default_species_lookup",
]
