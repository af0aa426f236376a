"""
Composition queries over formulas and trees.

All functions accept either a ``Formula`` or a bare tree node. Mixture
counts and repeat counts multiply through, so ``CuSO4.5H2O`` has ten
hydrogens. Trees are walked with an explicit stack.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterator, Union

from formulipy.elements import Element, Isotope
from formulipy.formula import Formula
from formulipy.types import Charge, Node, Repeat, Residual, children

FormulaLike = Union[Formula, Node]


def iter_roots(obj: FormulaLike) -> Iterator[tuple[int, Node]]:
    """Yield ``(count, tree)`` for each mixture component."""
    if isinstance(obj, Formula):
        yield from obj.components
    else:
        yield 1, obj


def iter_nodes(obj: FormulaLike) -> Iterator[tuple[Node, int]]:
    """Yield every node with the number of times it occurs.

    Nodes come in pre-order; a node below ``Repeat(x, 3)`` in a component
    counted twice has multiplicity 6.
    """
    for count, root in iter_roots(obj):
        stack: list[tuple[Node, int]] = [(root, count)]
        while stack:
            node, multiplicity = stack.pop()
            yield node, multiplicity
            if isinstance(node, Repeat):
                stack.append((node.node, multiplicity * node.count))
            else:
                for child in reversed(children(node)):
                    stack.append((child, multiplicity))


def iter_leaves(obj: FormulaLike) -> Iterator[tuple[Node, int]]:
    """Yield leaves (elements, isotopes, residuals) with their multiplicity."""
    for node, multiplicity in iter_nodes(obj):
        if isinstance(node, (Element, Isotope, Residual)):
            yield node, multiplicity


def charge(obj: FormulaLike) -> int:
    """Net charge.

    Example:
        >>> from formulipy import parse
        >>> charge(parse("[Co(NH3)6]+3(Cl-)3"))
        0
        >>> charge(parse("SO4-2"))
        -2
    """
    return sum(
        node.charge * multiplicity
        for node, multiplicity in iter_nodes(obj)
        if isinstance(node, Charge)
    )


def element_counts(obj: FormulaLike, fold_isotopes: bool = True) -> Counter[Element]:
    """Count atoms per element.

    Args:
        obj: Formula or tree.
        fold_isotopes: Count isotopes under their element.

    Returns:
        Counter keyed by element.
    """
    counts: Counter[Element] = Counter()
    for leaf, multiplicity in iter_leaves(obj):
        if isinstance(leaf, Element):
            counts[leaf] += multiplicity
        elif fold_isotopes and isinstance(leaf, Isotope):
            counts[leaf.element] += multiplicity
    return counts


def isotope_counts(obj: FormulaLike) -> Counter[Isotope]:
    """Count atoms per explicitly given isotope."""
    counts: Counter[Isotope] = Counter()
    for leaf, multiplicity in iter_leaves(obj):
        if isinstance(leaf, Isotope):
            counts[leaf] += multiplicity
    return counts


def count_of_element(obj: FormulaLike, element: Element) -> int:
    """Number of atoms of an element, isotopes included."""
    return element_counts(obj)[element]


def count_of_isotope(obj: FormulaLike, isotope: Isotope) -> int:
    return isotope_counts(obj)[isotope]


def number_of_elements(obj: FormulaLike) -> int:
    """Total number of atoms, residuals excluded."""
    return sum(element_counts(obj).values())


def contains_elements(obj: FormulaLike) -> bool:
    """Whether any plain element leaf is present."""
    return any(isinstance(leaf, Element) for leaf, _ in iter_leaves(obj))


def contains_isotopes(obj: FormulaLike) -> bool:
    return any(isinstance(leaf, Isotope) for leaf, _ in iter_leaves(obj))


def contains_residual(obj: FormulaLike) -> bool:
    return any(isinstance(leaf, Residual) for leaf, _ in iter_leaves(obj))


def contains_element(obj: FormulaLike, element: Element) -> bool:
    """Whether the element occurs, either plainly or as one of its isotopes."""
    for leaf, _ in iter_leaves(obj):
        if leaf == element or (isinstance(leaf, Isotope) and leaf.element == element):
            return True
    return False


def contains_isotope(obj: FormulaLike, isotope: Isotope) -> bool:
    return any(leaf == isotope for leaf, _ in iter_leaves(obj))


def contains_mixture(obj: FormulaLike) -> bool:
    """Whether the formula has more than one mixture component (with counts)."""
    return isinstance(obj, Formula) and obj.contains_mixture()


def is_noble_gas_compound(obj: FormulaLike) -> bool:
    """Whether every element present is a noble gas.

    Example:
        >>> from formulipy import parse
        >>> is_noble_gas_compound(parse("HeAr"))
        True
        >>> is_noble_gas_compound(parse("XeF4"))
        False
    """
    counts = element_counts(obj)
    return bool(counts) and all(element.is_noble_gas for element in counts)


def is_homonuclear(obj: FormulaLike) -> bool:
    """Whether each mixture component is made of a single element.

    Isotopes count as their element, so ``HD`` is homonuclear.

    Raises:
        ValueError: If the formula contains a residual.
    """
    for _, root in iter_roots(obj):
        seen: set[Element] = set()
        for leaf, _ in iter_leaves(root):
            if isinstance(leaf, Residual):
                raise ValueError("Homonuclearity is undefined for residuals")
            seen.add(leaf.element if isinstance(leaf, Isotope) else leaf)
        if len(seen) != 1:
            return False
    return True
