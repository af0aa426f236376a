"""
Normalizing tree combinators.

Every tree the parser builds goes through these functions, which keep the
tree in normal form:

    - a Repeat never wraps a Repeat, and a count of one disappears
    - a Charge never wraps a Charge, and charges summing to zero disappear
    - a Sequence has at least two items
    - brackets around a single leaf are dropped

Combinators raise the grammar-level ``ParseError`` subclasses without a
position; the parser attaches the input text and position.
"""

from __future__ import annotations

from typing import Iterable

from formulipy.characters import Bracket
from formulipy.dialects import Dialect
from formulipy.elements import CARBON, HYDROGEN, Complex
from formulipy.exceptions import (
    EmptyMolecularTreeError,
    ResidualNotSupportedError,
    ZeroChargeError,
    ZeroRepeatCountError,
)
from formulipy.numeric import DEFAULT_LIMITS, NumericLimits
from formulipy.types import (
    Charge,
    Node,
    Radical,
    Repeat,
    Residual,
    Sequence,
    Side,
    Unit,
    is_leaf,
)


def sequence(items: Iterable[Node]) -> Node:
    """Concatenate subtrees.

    Raises:
        EmptyMolecularTreeError: If there is nothing to concatenate.
    """
    items = tuple(items)
    if not items:
        raise EmptyMolecularTreeError()
    if len(items) == 1:
        return items[0]
    return Sequence(items)


def into_items(tree: Node) -> list[Node]:
    """Split a tree into the items of a sequence under construction."""
    if isinstance(tree, Sequence):
        return list(tree.items)
    return [tree]


def push(tree: Node, node: Node) -> Node:
    """Append a subtree after an existing tree."""
    return sequence(into_items(tree) + [node])


def repeat(tree: Node, count: int, limits: NumericLimits = DEFAULT_LIMITS) -> Node:
    """Repeat a tree ``count`` times.

    Repeating a Repeat adds the counts rather than nesting.

    Raises:
        ZeroRepeatCountError: If count is zero.
        PositiveOverflowError: If merged counts exceed the count width.
    """
    if count == 0:
        raise ZeroRepeatCountError()
    if count == 1:
        return tree
    if isinstance(tree, Repeat):
        return Repeat(tree.node, limits.add_counts(tree.count, count))
    return Repeat(tree, limits.check_count(count))


def charge(tree: Node, value: int, limits: NumericLimits = DEFAULT_LIMITS) -> Node:
    """Apply a charge to a tree.

    Charging a Charge adds the magnitudes; if they cancel the inner tree is
    returned unchanged.

    Raises:
        ZeroChargeError: If value is zero.
    """
    if value == 0:
        raise ZeroChargeError()
    if isinstance(tree, Charge):
        total = limits.add_charges(tree.charge, value)
        if total == 0:
            return tree.node
        return Charge(tree.node, total)
    return Charge(tree, limits.check_charge(value))


def wrap(tree: Node, bracket: Bracket) -> Node:
    """Put a tree in brackets, unless it is a single leaf."""
    if is_leaf(tree):
        return tree
    return Unit(tree, bracket)


def round_unit(tree: Node) -> Node:
    return wrap(tree, Bracket.ROUND)


def square_unit(tree: Node) -> Node:
    return wrap(tree, Bracket.SQUARE)


def left_radical(tree: Node) -> Node:
    return Radical(tree, Side.LEFT)


def right_radical(tree: Node) -> Node:
    """Put a radical marker after a tree.

    A marker may not follow a charge in text, so a charged tree becomes a
    charged radical: ``Cp•`` is ``(C₅H₅)•⁻``.
    """
    if isinstance(tree, Charge):
        return Charge(Radical(tree.node, Side.RIGHT), tree.charge)
    return Radical(tree, Side.RIGHT)


def residual(dialect: Dialect) -> Residual:
    """Create a residual leaf if the dialect accepts residuals.

    Raises:
        ResidualNotSupportedError: For dialects without residuals.
    """
    if not dialect.allows_residual:
        raise ResidualNotSupportedError(str(dialect))
    return Residual()


def expand_complex(group: Complex) -> Node:
    """Expand a complex group into its fragment tree.

    Example:
        >>> str(expand_complex(Complex.METHYL))
        '(CH₃)'
        >>> str(expand_complex(Complex.CYCLOPENTADIENYL))
        '(C₅H₅)⁻'
    """
    fragment = round_unit(sequence([
        repeat(CARBON, group.carbons),
        repeat(HYDROGEN, group.hydrogens),
    ]))
    if group.charge:
        return charge(fragment, group.charge)
    return fragment
