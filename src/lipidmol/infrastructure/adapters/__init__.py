"""Adapters for external libraries."""

from .rdkit_species_lookup import RDKitSpeciesLookup, default_species_lookup

__all__ = [
    "RDKitSpeciesLookup",
    "default_species_lookup",
]
