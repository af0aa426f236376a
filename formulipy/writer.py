"""
Canonical formula writer.

Renders trees and formulas back to text using the canonical glyphs:
subscript counts, superscript charges, ``•`` radicals and ``.`` between
mixture components. Parsing the output gives back an equal formula.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from formulipy.characters import (
    HYPHEN,
    MIXTURE_DOT,
    RADICAL_MARKER,
    SUPERSCRIPT_MINUS,
    SUPERSCRIPT_PLUS,
    to_subscript,
    to_superscript,
)
from formulipy.dialects import Dialect
from formulipy.elements import Element, Isotope
from formulipy.types import Charge, Node, Radical, Repeat, Residual, Sequence, Side, Unit

if TYPE_CHECKING:
    from formulipy.formula import Formula


def _charge_suffix(value: int) -> str:
    magnitude = abs(value)
    digits = to_superscript(magnitude) if magnitude != 1 else ""
    return digits + (SUPERSCRIPT_PLUS if value > 0 else SUPERSCRIPT_MINUS)


def _isotope_text(isotope: Isotope) -> str:
    shorthand = isotope.shorthand
    if shorthand is not None:
        return shorthand
    return f"[{to_superscript(isotope.mass_number)}{isotope.element.symbol}]"


class FormulaWriter:
    """Writer for formulas and formula trees.

    The tree is walked with an explicit stack, so deeply nested trees do not
    hit the interpreter's recursion limit.

    Args:
        obj: A ``Formula`` or a tree node.
        dialect: Dialect whose conventions to use. Defaults to the formula's
            own dialect, or CHEMICAL for bare trees.
    """

    __slots__ = ("_obj", "_baseline")

    def __init__(self, obj: Union["Formula", Node], dialect: Dialect | None = None) -> None:
        self._obj = obj
        if dialect is None:
            dialect = getattr(obj, "dialect", Dialect.CHEMICAL)
        self._baseline = dialect.baseline_counts

    def to_string(self) -> str:
        """Render the object as canonical text."""
        obj = self._obj
        if _is_formula(obj):
            return self._write_formula(obj)
        return self._write_tree(obj)

    def _count(self, count: int) -> str:
        return str(count) if self._baseline else to_subscript(count)

    def _write_formula(self, formula: "Formula") -> str:
        parts = []
        for count, tree in formula.components:
            prefix = str(count) if count != 1 else ""
            parts.append(prefix + self._write_tree(tree))
        text = MIXTURE_DOT.join(parts)
        if formula.greek is not None:
            text = f"{formula.greek}{HYPHEN}{text}"
        return text

    def _write_tree(self, tree: Node) -> str:
        out: list[str] = []
        stack: list[Node | str] = [tree]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                out.append(item)
            elif isinstance(item, Element):
                out.append(item.symbol)
            elif isinstance(item, Isotope):
                out.append(_isotope_text(item))
            elif isinstance(item, Residual):
                out.append("R")
            elif isinstance(item, Sequence):
                stack.extend(reversed(item.items))
            elif isinstance(item, Repeat):
                stack.append(self._count(item.count))
                stack.append(item.node)
            elif isinstance(item, Charge):
                stack.append(_charge_suffix(item.charge))
                stack.append(item.node)
            elif isinstance(item, Unit):
                stack.append(item.bracket.closing)
                stack.append(item.node)
                stack.append(item.bracket.opening)
            elif isinstance(item, Radical):
                if item.side is Side.LEFT:
                    stack.append(item.node)
                    stack.append(RADICAL_MARKER)
                else:
                    stack.append(RADICAL_MARKER)
                    stack.append(item.node)
            else:
                raise TypeError(f"Cannot render {type(item).__name__}")
        return "".join(out)


def _is_formula(obj: object) -> bool:
    from formulipy.formula import Formula
    return isinstance(obj, Formula)


def to_text(obj: Union["Formula", Node], dialect: Dialect | None = None) -> str:
    """Render a formula or tree as canonical text.

    Args:
        obj: A ``Formula`` or a tree node.
        dialect: Overrides the dialect used for count typesetting.

    Returns:
        Canonical text.

    Example:
        >>> from formulipy import parse
        >>> to_text(parse("Fe+++"))
        'Fe³⁺'
    """
    return FormulaWriter(obj, dialect).to_string()
