"""
Formula tree node types.

A formula tree is built from two leaf types defined in ``formulipy.elements``
(``Element`` and ``Isotope``), the ``Residual`` placeholder leaf, and five
composite nodes defined here. Nodes are immutable and compare structurally.

The constructors only validate their own shape. Normalization (merging
repeats and charges, collapsing singleton sequences, eliding brackets around
leaves) is done by the combinators in ``formulipy.tree``, which is the way
trees should normally be built.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from formulipy.characters import Bracket
from formulipy.elements import Element, Isotope


class Side(Enum):
    """Side of a radical marker."""
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True, slots=True)
class Residual:
    """Placeholder ``R`` for an unspecified substituent."""

    def __str__(self) -> str:
        return "R"


@dataclass(frozen=True, slots=True)
class Sequence:
    """Concatenation of at least two subtrees.

    Attributes:
        items: Subtrees in input order.
    """

    items: tuple[Node, ...]

    def __post_init__(self) -> None:
        if len(self.items) < 2:
            raise ValueError(f"Sequence needs at least two items, got {len(self.items)}")

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        return _render(self)


@dataclass(frozen=True, slots=True)
class Repeat:
    """Subtree repeated ``count`` times (``H₂``)."""

    node: Node
    count: int

    def __post_init__(self) -> None:
        if self.count < 2:
            raise ValueError(f"Repeat count must be greater than one, got {self.count}")
        if isinstance(self.node, Repeat):
            raise ValueError("Repeat must not wrap another Repeat")

    def __str__(self) -> str:
        return _render(self)


@dataclass(frozen=True, slots=True)
class Charge:
    """Subtree carrying a non-zero charge (``Fe³⁺``)."""

    node: Node
    charge: int

    def __post_init__(self) -> None:
        if self.charge == 0:
            raise ValueError("Charge must not be zero")
        if isinstance(self.node, Charge):
            raise ValueError("Charge must not wrap another Charge")

    def __str__(self) -> str:
        return _render(self)


@dataclass(frozen=True, slots=True)
class Unit:
    """Bracketed subtree. Never wraps a leaf."""

    node: Node
    bracket: Bracket = Bracket.ROUND

    def __post_init__(self) -> None:
        if is_leaf(self.node):
            raise ValueError(f"Unit must not wrap the leaf {self.node}")

    def __str__(self) -> str:
        return _render(self)


@dataclass(frozen=True, slots=True)
class Radical:
    """Subtree with a radical marker on one side (``Cl•``, ``•OH``)."""

    node: Node
    side: Side = Side.RIGHT

    def __str__(self) -> str:
        return _render(self)


Node = Union[Element, Isotope, Residual, Sequence, Repeat, Charge, Unit, Radical]


def is_leaf(node: Node) -> bool:
    """Whether the node is an element, an isotope or a residual."""
    return isinstance(node, (Element, Isotope, Residual))


def children(node: Node) -> tuple[Node, ...]:
    """Direct subtrees of a node, empty for leaves."""
    if isinstance(node, Sequence):
        return node.items
    if isinstance(node, (Repeat, Charge, Unit, Radical)):
        return (node.node,)
    return ()


def _render(node: Node) -> str:
    from formulipy.writer import to_text
    return to_text(node)
