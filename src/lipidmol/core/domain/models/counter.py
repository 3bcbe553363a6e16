#!/usr/bin/env python3
# src/lipidmol/core/domain/models/counter.py

"""
Domain model representing a chemical formula as a multiset of atomic species.
"""

import logging
import re
import threading
from collections.abc import Mapping
from functools import total_ordering
from itertools import chain
from typing import Dict, Iterable, Iterator, Optional, Tuple

import numpy as np

from .species import Species
from .saturation import Saturation, is_saturated, saturation_of
from ..interfaces.species_lookup import SpeciesLookup
from ...exceptions import MalformedCountError, UnknownSpeciesError

logger = logging.getLogger(__name__)

# Counts saturate here instead of growing without bound.
MAX_COUNT = 2**64 - 1

CARBON = 6
HYDROGEN = 1

_pattern_lock = threading.Lock()
_atom_count_pattern: Optional[re.Pattern] = None


def atom_count_pattern() -> re.Pattern:
    """Compiled symbol/count token pattern, built once on first use."""
    global _atom_count_pattern
    if _atom_count_pattern is None:
        with _pattern_lock:
            if _atom_count_pattern is None:
                _atom_count_pattern = re.compile(r"([A-Z][a-z]*)([0-9]*)")
                logger.debug("Compiled formula token pattern")
    return _atom_count_pattern


def count_from_digits(digits: str) -> Optional[int]:
    """Value of a digit run, or None if it is zero or above MAX_COUNT.

    Runs with more digits than MAX_COUNT are rejected before conversion.
    """
    significant = digits.lstrip("0")
    if not significant or len(significant) > len(str(MAX_COUNT)):
        return None
    count = int(significant)
    return count if count <= MAX_COUNT else None


def saturating_add(left: int, right: int) -> int:
    """Add two counts, capping the result at MAX_COUNT."""
    return min(left + right, MAX_COUNT)


def resolve_lookup(lookup: Optional[SpeciesLookup]) -> SpeciesLookup:
    if lookup is not None:
        return lookup
    from ....infrastructure.adapters.rdkit_species_lookup import (
        default_species_lookup,
    )

    return default_species_lookup()


def _check_count(species: Species, count: int) -> int:
    if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
        raise ValueError(f"Count for {species!r} must be a positive integer, got {count!r}")
    return min(count, MAX_COUNT)


@total_ordering
class Counter(Mapping):
    """Immutable mapping of species to positive atom counts.

    Entries are kept in species order (ascending atomic number, natural
    abundance before isotopes), which is also the rendering order.
    """

    __slots__ = ("_items", "_counts")

    def __init__(self, counts: Optional[Mapping] = None):
        """
        Initialize a Counter.

        Args:
            counts: Mapping of Species to positive counts

        Raises:
            ValueError: If a count is not a positive integer
        """
        checked = {
            species: _check_count(species, count)
            for species, count in (counts or {}).items()
        }
        self._items: Tuple[Tuple[Species, int], ...] = tuple(sorted(checked.items()))
        self._counts: Dict[Species, int] = dict(self._items)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[Species, int]]) -> "Counter":
        """
        Accumulate (species, count) pairs into a Counter.

        Repeated species are summed with saturating addition, so the result
        does not depend on the order of the pairs.
        """
        counts: Dict[Species, int] = {}
        for species, count in pairs:
            count = _check_count(species, count)
            counts[species] = saturating_add(counts.get(species, 0), count)
        return cls(counts)

    @classmethod
    def parse(cls, text: str, lookup: Optional[SpeciesLookup] = None) -> "Counter":
        """
        Parse a formula such as "C2H5OH".

        Characters outside symbol/count tokens are skipped, so "CH3-CH3"
        reads as C2H6.

        Args:
            text: Sequence of symbol tokens, each optionally followed by a count
            lookup: Species table, defaults to the RDKit periodic table

        Returns:
            Counter with repeated symbols accumulated

        Raises:
            UnknownSpeciesError: If a symbol is not in the lookup table
            MalformedCountError: If a count is zero or exceeds MAX_COUNT
        """
        lookup = resolve_lookup(lookup)
        pairs = []

        for match in atom_count_pattern().finditer(text):
            symbol, digits = match.groups()

            try:
                species = lookup.lookup(symbol)
            except UnknownSpeciesError:
                raise UnknownSpeciesError(symbol, text, match.start(1)) from None

            if digits:
                count = count_from_digits(digits)
                if count is None:
                    raise MalformedCountError(digits, text, match.start(2))
            else:
                count = 1

            pairs.append((species, count))

        counter = cls.from_pairs(pairs)
        logger.debug(f"Parsed {text!r} as {counter.render()!r}")
        return counter

    @classmethod
    def from_dict(
        cls, data: Mapping, lookup: Optional[SpeciesLookup] = None
    ) -> "Counter":
        """Rebuild a Counter from its {symbol: count} form."""
        lookup = resolve_lookup(lookup)
        return cls.from_pairs(
            (lookup.lookup(symbol), count) for symbol, count in data.items()
        )

    def to_dict(self) -> Dict[str, int]:
        """Structured {symbol: count} form in canonical order."""
        return {species.symbol: count for species, count in self._items}

    def count(self, species: Species) -> int:
        """Number of atoms of a species, 0 if absent."""
        return self._counts.get(species, 0)

    def element_count(self, atomic_number: int) -> int:
        """Number of atoms of an element, all isotopes included."""
        total = 0
        for species, count in self._items:
            if species.atomic_number == atomic_number:
                total = saturating_add(total, count)
        return total

    def weight(self) -> float:
        """Sum of relative atomic masses over all atoms."""
        if not self._items:
            return 0.0
        masses = np.array([species.relative_atomic_mass for species, _ in self._items])
        counts = np.array([count for _, count in self._items], dtype=float)
        return float(np.dot(masses, counts))

    def merge(self, other: "Counter") -> "Counter":
        """Combine two counters, saturating on overflow."""
        return Counter.from_pairs(chain(self._items, other.items()))

    def __add__(self, other: "Counter") -> "Counter":
        if not isinstance(other, Counter):
            return NotImplemented
        return self.merge(other)

    def unsaturated(self) -> int:
        """Degree of unsaturation, (2C + 2 - H) / 2, never below zero.

        A counter without carbon reports zero.
        """
        carbon = self.element_count(CARBON)
        if carbon == 0:
            return 0
        hydrogen = self.element_count(HYDROGEN)
        return max(0, (2 * carbon + 2 - hydrogen) // 2)

    def saturated(self) -> bool:
        return is_saturated(self)

    def saturation(self) -> Saturation:
        return saturation_of(self)

    def render(self) -> str:
        """Formula text in canonical order, counts of one left implicit."""
        return "".join(
            species.symbol if count == 1 else f"{species.symbol}{count}"
            for species, count in self._items
        )

    def __getitem__(self, species: Species) -> int:
        return self._counts[species]

    def __iter__(self) -> Iterator[Species]:
        return (species for species, _ in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Counter):
            return NotImplemented
        return self._items == other._items

    def __lt__(self, other: "Counter") -> bool:
        if not isinstance(other, Counter):
            return NotImplemented
        return self._items < other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Counter({self.to_dict()!r})"
