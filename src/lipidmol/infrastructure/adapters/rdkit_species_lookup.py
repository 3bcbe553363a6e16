"""Adapter exposing RDKit's periodic table as a species lookup."""

import logging
from functools import lru_cache
from typing import Dict, Iterator

from rdkit import Chem

from ...core.domain.interfaces.species_lookup import SpeciesLookup
from ...core.domain.models.species import Species
from ...core.exceptions import UnknownSpeciesError

logger = logging.getLogger(__name__)

MAX_ATOMIC_NUMBER = 118

# Hydrogen isotopes with their own symbols, as (atomic number, mass number).
ISOTOPE_SYMBOLS = {
    "D": (1, 2),
    "T": (1, 3),
}


class RDKitSpeciesLookup(SpeciesLookup):
    """Species lookup backed by RDKit's periodic table.

    Elements carry RDKit's standard atomic weight; isotope symbols carry the
    exact isotope mass.
    """

    def __init__(self):
        """Build the symbol table from RDKit."""
        self._table = self._build_table()

    def _build_table(self) -> Dict[str, Species]:
        """Read symbols, atomic numbers and masses from RDKit."""
        table = Chem.GetPeriodicTable()
        species: Dict[str, Species] = {}

        for atomic_number in range(1, MAX_ATOMIC_NUMBER + 1):
            symbol = table.GetElementSymbol(atomic_number)
            species[symbol] = Species(
                atomic_number=atomic_number,
                symbol=symbol,
                relative_atomic_mass=table.GetAtomicWeight(atomic_number),
            )

        for symbol, (atomic_number, mass_number) in ISOTOPE_SYMBOLS.items():
            species[symbol] = Species(
                atomic_number=atomic_number,
                isotope=mass_number,
                symbol=symbol,
                relative_atomic_mass=table.GetMassForIsotope(
                    atomic_number, mass_number
                ),
            )

        logger.debug(f"Loaded {len(species)} species from RDKit periodic table")
        return species

    def lookup(self, symbol: str) -> Species:
        try:
            return self._table[symbol]
        except KeyError:
            raise UnknownSpeciesError(symbol) from None

    def __iter__(self) -> Iterator[Species]:
        return iter(sorted(self._table.values()))

    def __len__(self) -> int:
        return len(self._table)


@lru_cache(maxsize=None)
def default_species_lookup() -> RDKitSpeciesLookup:
    """Process-wide lookup used when none is injected."""
    return RDKitSpeciesLookup()
