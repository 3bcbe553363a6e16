#!/usr/bin/env python3
# src/lipidmol/core/domain/models/species.py

"""
Domain model representing an atomic species (element, optionally one isotope).
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, order=True)
class Species:
    """An element or a specific isotope of it.

    Identity and ordering use only the atomic number and the isotope mass
    number, so species sort by ascending atomic number with the natural
    abundance form (isotope 0) ahead of its isotopes.
    """

    atomic_number: int
    isotope: int = 0
    symbol: str = field(default="", compare=False)
    relative_atomic_mass: float = field(default=0.0, compare=False)

    @property
    def is_isotope(self) -> bool:
        """Whether this species pins a single isotope."""
        return self.isotope != 0

    def __str__(self) -> str:
        return self.symbol

    def __repr__(self) -> str:
        if self.is_isotope:
            return f"Species({self.symbol!r}, isotope={self.isotope})"
        return f"Species({self.symbol!r})"
