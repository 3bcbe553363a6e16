"""Test configuration and fixtures for lipidmol tests."""

from typing import Dict

import pytest

from lipidmol import RDKitSpeciesLookup, Species, SpeciesLookup, UnknownSpeciesError
from lipidmol.infrastructure.adapters.rdkit_species_lookup import default_species_lookup


class TableLookup(SpeciesLookup):
    """Lookup over a fixed symbol table, for checking injection."""

    def __init__(self, table: Dict[str, Species]):
        self._table = table

    def lookup(self, symbol: str) -> Species:
        try:
            return self._table[symbol]
        except KeyError:
            raise UnknownSpeciesError(symbol) from None


@pytest.fixture
def lookup() -> RDKitSpeciesLookup:
    return default_species_lookup()


@pytest.fixture
def carbon(lookup) -> Species:
    return lookup.lookup("C")


@pytest.fixture
def hydrogen(lookup) -> Species:
    return lookup.lookup("H")


@pytest.fixture
def oxygen(lookup) -> Species:
    return lookup.lookup("O")


@pytest.fixture
def integer_mass_lookup() -> TableLookup:
    """Carbon and hydrogen with whole-number masses."""
    return TableLookup(
        {
            "C": Species(6, symbol="C", relative_atomic_mass=12.0),
            "H": Species(1, symbol="H", relative_atomic_mass=1.0),
        }
    )
