"""Service for formula analysis and reference structure identification."""

import logging
from typing import Dict, List, Optional

from ..domain.interfaces.species_lookup import SpeciesLookup
from ..domain.models.counter import CARBON, HYDROGEN, Counter, resolve_lookup
from ..domain.models.cu import Cu
from ..domain.models.formula_report import FormulaReport
from ..domain.models.molecule import Molecule
from ..domain.models.reference_library import REFERENCE_MOLECULES, reference_molecule
from ..exceptions import CuError


class FormulaService:
    """Service for analysing formulas and matching molecules."""

    def __init__(self, lookup: Optional[SpeciesLookup] = None):
        """Initialize service with a species lookup, RDKit's by default."""
        self._lookup = resolve_lookup(lookup)
        self._references: Dict[str, Molecule] = {}
        self.logger = logging.getLogger(__name__)

    def parse(self, text: str) -> Counter:
        return Counter.parse(text, self._lookup)

    def analyze(self, text: str) -> FormulaReport:
        """
        Parse a formula and compute its derived properties.

        Args:
            text: Formula such as "C18H34"

        Returns:
            FormulaReport; cu is set only for pure hydrocarbon chains

        Raises:
            FormulaError: If the formula cannot be parsed
        """
        counter = self.parse(text)
        report = FormulaReport(
            formula=counter,
            weight=counter.weight(),
            unsaturation=counter.unsaturated(),
            saturation=counter.saturation(),
            cu=self._chain_index(counter),
        )
        self.logger.info(
            f"Analyzed {text!r}: {report.canonical}, weight {report.weight:.4f}"
        )
        return report

    def cu_report(self, text: str) -> FormulaReport:
        """
        Expand a "c:u" shorthand into the chain's formula.

        The unsaturation reported is the chain's u, not the molecular
        degree of unsaturation of the formula.

        Raises:
            CuError: If the shorthand is malformed or u exceeds c
        """
        cu = Cu.parse(text)
        counter = cu.to_counter(self._lookup)
        return FormulaReport(
            formula=counter,
            weight=counter.weight(),
            unsaturation=cu.unsaturated(),
            saturation=cu.saturation(),
            cu=cu,
        )

    def _chain_index(self, counter: Counter) -> Optional[Cu]:
        """Cu for a formula made only of carbon and hydrogen."""
        elements = {species.atomic_number for species in counter}
        if not elements or not elements <= {CARBON, HYDROGEN}:
            return None
        try:
            return Cu.from_counter(counter)
        except CuError as e:
            self.logger.debug(f"No chain index for {counter.render()}: {e}")
            return None

    def reference(self, name: str) -> Molecule:
        """Reference molecule by name, built once per service."""
        if name not in self._references:
            self._references[name] = reference_molecule(name, self._lookup)
        return self._references[name]

    def identify(self, molecule: Molecule) -> List[str]:
        """Names of reference molecules with the same structure."""
        return [
            name
            for name in REFERENCE_MOLECULES
            if molecule.is_isomorphic(self.reference(name))
        ]

    def containing(self, molecule: Molecule) -> List[str]:
        """Names of reference molecules that contain the molecule as a subgraph."""
        return [
            name
            for name in REFERENCE_MOLECULES
            if molecule.is_isomorphic_subgraph(self.reference(name))
        ]
