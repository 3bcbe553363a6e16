#!/usr/bin/env python3
# src/lipidmol/core/domain/models/molecule.py

"""
Domain model representing a molecular structure as a graph.
"""

from typing import Any, Iterable, Iterator, Tuple

import networkx as nx
from networkx.algorithms import isomorphism

from .counter import CARBON, HYDROGEN, Counter
from .species import Species

# Species equality ignores symbol and mass, so bare identities work as filters.
_CARBON = Species(atomic_number=CARBON)
_HYDROGEN = Species(atomic_number=HYDROGEN)

_node_match = isomorphism.categorical_node_match("species", None)
_edge_match = isomorphism.categorical_edge_match("order", 1)


class Molecule:
    """Graph of atoms joined by bonds of integer order.

    Atoms are addressed by the integer handle returned from add_atom; handles
    are consecutive from zero and atoms are never removed.
    """

    def __init__(self, name: str = ""):
        """
        Initialize an empty Molecule.

        Args:
            name: Optional label, used by the reference library
        """
        self.name = name
        self._graph = nx.Graph()

    @property
    def graph(self) -> nx.Graph:
        """Read-only view of the underlying NetworkX graph."""
        return self._graph.copy(as_view=True)

    @property
    def number_of_atoms(self) -> int:
        return self._graph.number_of_nodes()

    @property
    def number_of_bonds(self) -> int:
        return self._graph.number_of_edges()

    def add_atom(self, species: Any) -> int:
        """Add an atom labelled with a species (or any comparable label)."""
        index = self._graph.number_of_nodes()
        self._graph.add_node(index, species=species)
        return index

    def add_bond(self, first: int, second: int, order: int = 1) -> None:
        """
        Bond two existing atoms.

        Raises:
            KeyError: If either handle was not returned by add_atom
        """
        for index in (first, second):
            if index not in self._graph:
                raise KeyError(f"No atom with index {index}")
        self._graph.add_edge(first, second, order=order)

    def add_bonds(self, bonds: Iterable[Tuple[int, int, int]]) -> None:
        for first, second, order in bonds:
            self.add_bond(first, second, order)

    def nodes(self) -> Iterator[int]:
        return iter(self._graph.nodes)

    def bonds(self) -> Iterator[Tuple[int, int, int]]:
        """Yield (first, second, order) for every bond."""
        for first, second, order in self._graph.edges(data="order"):
            yield first, second, order

    def species(self, index: int) -> Any:
        return self._graph.nodes[index]["species"]

    def bond_order(self, first: int, second: int) -> int:
        """Order of the bond between two atoms, 0 if they are not bonded."""
        if not self._graph.has_edge(first, second):
            return 0
        return self._graph.edges[first, second]["order"]

    def bond_order_sum(self, index: int) -> int:
        """Sum of the orders of all bonds at an atom."""
        return self._graph.degree(index, weight="order")

    def nodes_of(self, species: Any) -> Iterator[int]:
        """Atoms whose label equals the given species."""
        return (
            index
            for index, label in self._graph.nodes(data="species")
            if label == species
        )

    def carbon_nodes(self) -> Iterator[int]:
        return self.nodes_of(_CARBON)

    def hydrogen_nodes(self) -> Iterator[int]:
        return self.nodes_of(_HYDROGEN)

    def formula(self) -> Counter:
        """Counter of the atoms labelled with a Species."""
        return Counter.from_pairs(
            (label, 1)
            for _, label in self._graph.nodes(data="species")
            if isinstance(label, Species)
        )

    def is_isomorphic_subgraph(self, other: "Molecule") -> bool:
        """
        Check whether this molecule matches a subgraph of another.

        Uses VF2 matching for an induced subgraph of other; atoms must carry
        equal species and matched bonds equal orders.

        Args:
            other: Molecule to search in

        Returns:
            True if some subgraph of other is isomorphic to this molecule
        """
        matcher = isomorphism.GraphMatcher(
            other._graph, self._graph, node_match=_node_match, edge_match=_edge_match
        )
        return matcher.subgraph_is_isomorphic()

    def is_isomorphic(self, other: "Molecule") -> bool:
        """Check whether both molecules have the same labelled structure."""
        return nx.is_isomorphic(
            self._graph, other._graph, node_match=_node_match, edge_match=_edge_match
        )

    def __repr__(self) -> str:
        return (
            f"Molecule({self.name!r}, atoms={self.number_of_atoms}, "
            f"bonds={self.number_of_bonds})"
        )
