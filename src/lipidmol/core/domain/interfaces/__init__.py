"""Interfaces for external collaborators."""

from .species_lookup import SpeciesLookup

__all__ = ["SpeciesLookup"]
