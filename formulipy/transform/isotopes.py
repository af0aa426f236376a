"""
Isotope rewriting.

This module provides the rewrite that replaces explicit isotopes by their
element, so that isotopically labelled formulas can be compared with their
natural-abundance counterparts.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Union

from formulipy.elements import Isotope
from formulipy.formula import Formula
from formulipy.types import Node, Sequence, children, is_leaf


def _rebuild(node: Node, new_children: list[Node]) -> Node:
    if isinstance(node, Sequence):
        return Sequence(tuple(new_children))
    return replace(node, node=new_children[0])


def _normalize_tree(tree: Node) -> Node:
    results: list[Node] = []
    stack: list[tuple[Node, bool]] = [(tree, False)]
    while stack:
        node, expanded = stack.pop()
        if isinstance(node, Isotope):
            results.append(node.element)
        elif is_leaf(node):
            results.append(node)
        elif not expanded:
            stack.append((node, True))
            for child in reversed(children(node)):
                stack.append((child, False))
        else:
            n = len(children(node))
            new_children = results[-n:]
            del results[-n:]
            results.append(_rebuild(node, new_children))
    return results[0]


def isotopic_normalization(obj: Union[Formula, Node]) -> Union[Formula, Node]:
    """Replace every isotope by its element.

    Args:
        obj: Formula or tree.

    Returns:
        New object of the same kind with no isotope leaves.

    Example:
        >>> from formulipy import parse
        >>> str(isotopic_normalization(parse("D2[18O]")))
        'H₂O'
    """
    if isinstance(obj, Formula):
        return Formula(
            tuple((count, _normalize_tree(tree)) for count, tree in obj.components),
            obj.greek,
            obj.dialect,
        )
    return _normalize_tree(obj)
