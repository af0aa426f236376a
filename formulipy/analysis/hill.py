"""
Hill system ordering.

In the Hill system carbon comes first, hydrogen second when carbon is
present, and every other element follows alphabetically. Without carbon all
elements, hydrogen included, are alphabetical. Each element appears once.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Union

from formulipy.elements import Element, Isotope
from formulipy.types import Node, children

if TYPE_CHECKING:
    from formulipy.formula import Formula


def leaf_symbols(tree: Node) -> list[str]:
    """Element symbols of the leaves of a tree, left to right.

    Isotopes give their element's symbol; residuals are skipped.
    """
    symbols: list[str] = []
    stack: list[Node] = [tree]
    while stack:
        node = stack.pop()
        if isinstance(node, Element):
            symbols.append(node.symbol)
        elif isinstance(node, Isotope):
            symbols.append(node.element.symbol)
        else:
            stack.extend(reversed(children(node)))
    return symbols


def _strictly_increasing(symbols: list[str]) -> bool:
    return all(a < b for a, b in zip(symbols, symbols[1:]))


def is_hill_ordered(symbols: list[str]) -> bool:
    """Whether a list of element symbols follows the Hill system."""
    if len(set(symbols)) != len(symbols):
        return False
    if "C" not in symbols:
        return _strictly_increasing(symbols)
    if symbols[0] != "C":
        return False
    rest = symbols[1:]
    if rest and rest[0] == "H":
        rest = rest[1:]
    return "H" not in rest and _strictly_increasing(rest)


def is_hill_sorted_tree(tree: Node) -> bool:
    return is_hill_ordered(leaf_symbols(tree))


def is_hill_sorted(obj: Union["Formula", Node]) -> bool:
    """Whether every mixture component is written in Hill order.

    Example:
        >>> from formulipy import parse
        >>> is_hill_sorted(parse("C6H12O6"))
        True
        >>> is_hill_sorted(parse("NaCl"))
        False
    """
    components = getattr(obj, "components", None)
    if components is None:
        return is_hill_sorted_tree(obj)
    return all(is_hill_sorted_tree(tree) for _, tree in components)


def hill_sort(symbols: Iterable[str]) -> list[str]:
    """Order element symbols by the Hill system."""
    symbols = sorted(set(symbols))
    if "C" not in symbols:
        return symbols
    head = ["C"] + (["H"] if "H" in symbols else [])
    return head + [s for s in symbols if s not in ("C", "H")]


def to_hill_formula(obj: Union["Formula", Node]) -> str:
    """Aggregate all atoms into one Hill-ordered formula with baseline counts.

    Isotopes count as their element and residuals are dropped.

    Example:
        >>> from formulipy import parse
        >>> to_hill_formula(parse("C2H5OH"))
        'C2H6O'
    """
    from formulipy.analysis.composition import element_counts

    counts = {element.symbol: n for element, n in element_counts(obj).items()}
    parts = []
    for symbol in hill_sort(counts):
        n = counts[symbol]
        parts.append(symbol if n == 1 else f"{symbol}{n}")
    return "".join(parts)
