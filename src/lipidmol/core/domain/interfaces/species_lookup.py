"""Interface for atomic species reference data."""

from abc import ABC, abstractmethod
from ..models.species import Species
from ...exceptions import UnknownSpeciesError


class SpeciesLookup(ABC):
    """Abstract base class for read-only species lookup tables."""

    @abstractmethod
    def lookup(self, symbol: str) -> Species:
        """
        Resolve an element symbol.

        Args:
            symbol: Element symbol as written in a formula (e.g. "C", "Cl")

        Returns:
            Species registered under the symbol

        Raises:
            UnknownSpeciesError: If the symbol is not in the table
        """
        pass

    def mass(self, species: Species) -> float:
        """Relative atomic mass of a species."""
        return species.relative_atomic_mass

    def __contains__(self, symbol: str) -> bool:
        try:
            self.lookup(symbol)
        except UnknownSpeciesError:
            return False
        return True
