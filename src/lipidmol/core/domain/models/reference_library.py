"""Fixed library of small alkanes and alkenes."""

from typing import Callable, Dict, Optional

from .counter import resolve_lookup
from .molecule import Molecule
from ..interfaces.species_lookup import SpeciesLookup

CARBON_VALENCE = 4


def _chain(
    name: str,
    carbons: int,
    double_bond: bool,
    lookup: Optional[SpeciesLookup] = None,
) -> Molecule:
    """
    Build a linear hydrocarbon.

    Carbons are added first and joined by single bonds, except the first
    pair when double_bond is set; hydrogens then fill each carbon to valence 4.
    """
    lookup = resolve_lookup(lookup)
    carbon = lookup.lookup("C")
    hydrogen = lookup.lookup("H")

    molecule = Molecule(name)
    chain = [molecule.add_atom(carbon) for _ in range(carbons)]
    for position, (left, right) in enumerate(zip(chain, chain[1:])):
        molecule.add_bond(left, right, 2 if double_bond and position == 0 else 1)

    for atom in chain:
        for _ in range(CARBON_VALENCE - molecule.bond_order_sum(atom)):
            molecule.add_bond(molecule.add_atom(hydrogen), atom, 1)
    return molecule


# Alkanes


def methane(lookup: Optional[SpeciesLookup] = None) -> Molecule:
    """Methane (CH4)."""
    return _chain("methane", 1, False, lookup)


def ethane(lookup: Optional[SpeciesLookup] = None) -> Molecule:
    """Ethane (C2H6)."""
    return _chain("ethane", 2, False, lookup)


def propane(lookup: Optional[SpeciesLookup] = None) -> Molecule:
    """Propane (C3H8)."""
    return _chain("propane", 3, False, lookup)


# Alkenes


def ethene(lookup: Optional[SpeciesLookup] = None) -> Molecule:
    """Ethene (C2H4)."""
    return _chain("ethene", 2, True, lookup)


def propene(lookup: Optional[SpeciesLookup] = None) -> Molecule:
    """Propene (C3H6)."""
    return _chain("propene", 3, True, lookup)


def butene(lookup: Optional[SpeciesLookup] = None) -> Molecule:
    """But-1-ene (C4H8)."""
    return _chain("butene", 4, True, lookup)


def pentene(lookup: Optional[SpeciesLookup] = None) -> Molecule:
    """Pent-1-ene (C5H10)."""
    return _chain("pentene", 5, True, lookup)


ALKANES: Dict[str, Callable[..., Molecule]] = {
    "methane": methane,
    "ethane": ethane,
    "propane": propane,
}

ALKENES: Dict[str, Callable[..., Molecule]] = {
    "ethene": ethene,
    "propene": propene,
    "butene": butene,
    "pentene": pentene,
}

REFERENCE_MOLECULES: Dict[str, Callable[..., Molecule]] = {**ALKANES, **ALKENES}


def reference_molecule(
    name: str, lookup: Optional[SpeciesLookup] = None
) -> Molecule:
    """
    Build a reference molecule by name.

    Raises:
        KeyError: If the name is not in REFERENCE_MOLECULES
    """
    try:
        builder = REFERENCE_MOLECULES[name]
    except KeyError:
        raise KeyError(
            f"Unknown reference molecule {name!r}; "
            f"expected one of {', '.join(REFERENCE_MOLECULES)}"
        ) from None
    return builder(lookup)
