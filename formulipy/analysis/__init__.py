"""Derived properties of formulas: composition, charge, masses, Hill order."""

from .hill import (
    hill_sort,
    is_hill_ordered,
    is_hill_sorted,
    is_hill_sorted_tree,
    leaf_symbols,
    to_hill_formula,
)
from .composition import (
    charge,
    contains_element,
    contains_elements,
    contains_isotope,
    contains_isotopes,
    contains_mixture,
    contains_residual,
    count_of_element,
    count_of_isotope,
    element_counts,
    is_homonuclear,
    is_noble_gas_compound,
    isotope_counts,
    iter_leaves,
    iter_nodes,
    number_of_elements,
)
from .mass import isotopologue_mass, mass_over_charge, molar_mass

__all__ = [
    # Composition
    "charge",
    "element_counts",
    "isotope_counts",
    "count_of_element",
    "count_of_isotope",
    "number_of_elements",
    "iter_nodes",
    "iter_leaves",
    # Predicates
    "contains_elements",
    "contains_isotopes",
    "contains_residual",
    "contains_element",
    "contains_isotope",
    "contains_mixture",
    "is_noble_gas_compound",
    "is_homonuclear",
    # Masses
    "molar_mass",
    "isotopologue_mass",
    "mass_over_charge",
    # Hill system
    "is_hill_sorted",
    "is_hill_sorted_tree",
    "is_hill_ordered",
    "hill_sort",
    "leaf_symbols",
    "to_hill_formula",
]
