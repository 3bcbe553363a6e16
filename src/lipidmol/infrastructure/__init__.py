"""Infrastructure implementations of core interfaces and adapters."""

from .adapters.rdkit_species_lookup import RDKitSpeciesLookup

__all__ = [
    "RDKitSpeciesLookup",
]
