"""Molar and isotopologue masses."""

from __future__ import annotations

from formulipy.analysis.composition import FormulaLike, charge, iter_leaves
from formulipy.elements import ELECTRON_MASS, Element, Isotope


def _check_no_residual(leaf) -> None:
    if not isinstance(leaf, (Element, Isotope)):
        raise ValueError("Mass is undefined for formulas containing residuals")


def molar_mass(obj: FormulaLike) -> float:
    """Molar mass in g/mol from standard atomic weights.

    Explicit isotopes contribute their isotopic mass.

    Raises:
        ValueError: If the formula contains a residual.

    Example:
        >>> from formulipy import parse
        >>> round(molar_mass(parse("H2O")), 3)
        18.015
    """
    total = 0.0
    for leaf, multiplicity in iter_leaves(obj):
        _check_no_residual(leaf)
        if isinstance(leaf, Isotope):
            total += leaf.relative_mass * multiplicity
        else:
            total += leaf.standard_atomic_weight * multiplicity
    return total


def isotopologue_mass(obj: FormulaLike, include_charge: bool = False) -> float:
    """Mass of the isotopologue in u.

    Plain elements contribute the mass of their principal isotope. With
    ``include_charge``, electrons lost or gained are accounted for.

    Raises:
        ValueError: If the formula contains a residual.
    """
    total = 0.0
    for leaf, multiplicity in iter_leaves(obj):
        _check_no_residual(leaf)
        if isinstance(leaf, Isotope):
            total += leaf.relative_mass * multiplicity
        else:
            total += leaf.principal_isotope.relative_mass * multiplicity
    if include_charge:
        total -= charge(obj) * ELECTRON_MASS
    return total


def mass_over_charge(obj: FormulaLike) -> float:
    """Charged isotopologue mass divided by the signed charge.

    Raises:
        ValueError: If the formula is uncharged or contains a residual.

    Example:
        >>> from formulipy import parse
        >>> round(mass_over_charge(parse("OH-")), 6)
        -17.003288
    """
    z = charge(obj)
    if z == 0:
        raise ValueError("Mass over charge is undefined for uncharged formulas")
    return isotopologue_mass(obj, include_charge=True) / z
