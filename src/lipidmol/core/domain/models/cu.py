#!/usr/bin/env python3
# src/lipidmol/core/domain/models/cu.py

"""
Domain model for the carbon-number:unsaturation ("c:u") shorthand of fatty acyl chains.
"""

import re
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Tuple

from .counter import CARBON, HYDROGEN, MAX_COUNT, Counter, resolve_lookup
from .saturation import Saturation, is_saturated, saturation_of
from ..interfaces.species_lookup import SpeciesLookup
from ...exceptions import CuError

_CU_TEXT = re.compile(r"([0-9]+):([0-9]+)")


@dataclass(frozen=True, order=True)
class Cu:
    """Carbon number and unsaturation of a chain.

    The hydrogen count of the chain is h = 2c - 2u, so u may not exceed c.
    """

    c: int = 0
    u: int = 0

    def __post_init__(self):
        """Reject values that would give a negative hydrogen count."""
        for name, value in (("c", self.c), ("u", self.u)):
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise CuError(f"{name} must be a non-negative integer, got {value!r}")
        if self.u > self.c:
            raise CuError(
                f"Unsaturation {self.u} exceeds carbon number {self.c} in {self.c}:{self.u}"
            )

    @classmethod
    def parse(cls, text: str) -> "Cu":
        """Read the "c:u" form, e.g. "18:1"."""
        match = _CU_TEXT.fullmatch(text.strip())
        if match is None:
            raise CuError(f"Expected '<carbons>:<unsaturation>', got {text!r}")
        values = []
        for digits in match.groups():
            significant = digits.lstrip("0") or "0"
            if len(significant) > len(str(MAX_COUNT)) or int(significant) > MAX_COUNT:
                raise CuError(f"Value in {text[:40]!r} exceeds {MAX_COUNT}")
            values.append(int(significant))
        return cls(*values)

    @classmethod
    def from_tuple(cls, value: Tuple[int, int]) -> "Cu":
        c, u = value
        return cls(c, u)

    @classmethod
    def from_counter(cls, counter: Counter) -> "Cu":
        """
        Read the carbon and hydrogen counts of a formula.

        Computes u = c - h // 2, so an odd hydrogen count loses its remainder.

        Args:
            counter: Formula to read

        Returns:
            Cu for the formula

        Raises:
            CuError: If the formula holds more than 2c hydrogens
        """
        c = counter.element_count(CARBON)
        h = counter.element_count(HYDROGEN)
        u = c - h // 2
        if u < 0:
            raise CuError(f"{counter.render()} has more hydrogen than a {c}-carbon chain")
        return cls(c, u)

    @classmethod
    def from_dict(cls, data: Mapping) -> "Cu":
        return cls(data["c"], data["u"])

    def h(self) -> int:
        """Hydrogen count of the chain."""
        return 2 * self.c - 2 * self.u

    def to_counter(self, lookup: Optional[SpeciesLookup] = None) -> Counter:
        """Formula of the chain, {C: c, H: h}; zero counts are left out."""
        lookup = resolve_lookup(lookup)
        pairs = [(lookup.lookup("C"), self.c), (lookup.lookup("H"), self.h())]
        return Counter.from_pairs((species, count) for species, count in pairs if count)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.c, self.u)

    def to_dict(self) -> Dict[str, int]:
        return {"c": self.c, "u": self.u}

    def unsaturated(self) -> int:
        return self.u

    def saturated(self) -> bool:
        return is_saturated(self)

    def saturation(self) -> Saturation:
        return saturation_of(self)

    def render(self) -> str:
        return f"{self.c}:{self.u}"

    def __str__(self) -> str:
        return self.render()
