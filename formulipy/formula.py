"""
Top-level formula objects.

A ``Formula`` is an ordered list of mixture components, each a repeat count
and a tree, plus an optional greek prefix.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import Iterator

from formulipy.characters import GreekLetter
from formulipy.dialects import Dialect
from formulipy.exceptions import NumericOverflowError
from formulipy.numeric import DEFAULT_LIMITS, NumericLimits
from formulipy.types import Node


@dataclass(frozen=True)
class Formula:
    """A parsed formula.

    Attributes:
        components: ``(count, tree)`` pairs in input order. ``CuSO4.5H2O``
            has the components ``(1, CuSO₄)`` and ``(5, H₂O)``.
        greek: Polymorph prefix, if any.
        dialect: Dialect the formula was read in. Not part of equality.
    """

    components: tuple[tuple[int, Node], ...]
    greek: GreekLetter | None = None
    dialect: Dialect = field(default=Dialect.CHEMICAL, compare=False)

    def __post_init__(self) -> None:
        if not self.components:
            raise ValueError("Formula needs at least one component")
        for count, _ in self.components:
            if count < 1:
                raise ValueError(f"Mixture count must be positive, got {count}")

    @classmethod
    def from_tree(
        cls,
        tree: Node,
        count: int = 1,
        greek: GreekLetter | None = None,
        dialect: Dialect = Dialect.CHEMICAL,
    ) -> "Formula":
        """Wrap a single tree into a formula."""
        return cls(((count, tree),), greek, dialect)

    @classmethod
    def parse(cls, text: str, dialect: Dialect = Dialect.CHEMICAL, **kwargs) -> "Formula":
        """Parse text; see ``formulipy.parser.parse``."""
        from formulipy.parser import parse
        return parse(text, dialect, **kwargs)

    def __str__(self) -> str:
        from formulipy.writer import to_text
        return to_text(self)

    def __iter__(self) -> Iterator[tuple[int, Node]]:
        return iter(self.components)

    def __len__(self) -> int:
        return len(self.components)

    def __add__(self, other: "Formula") -> "Formula":
        if not isinstance(other, Formula):
            return NotImplemented
        return self.mix(other)

    @property
    def trees(self) -> tuple[Node, ...]:
        return tuple(tree for _, tree in self.components)

    @property
    def number_of_mixtures(self) -> int:
        """Number of mixture components counting multiplicity (``CuSO4.5H2O`` is 6)."""
        return sum(count for count, _ in self.components)

    def contains_mixture(self) -> bool:
        return self.number_of_mixtures > 1

    def mixtures(self) -> Iterator["Formula"]:
        """Yield one single-component formula per counted occurrence."""
        for count, tree in self.components:
            single = Formula(((1, tree),), self.greek, self.dialect)
            for _ in range(count):
                yield single

    def counted_mixtures(self) -> Iterator[tuple[int, "Formula"]]:
        """Yield each component as ``(count, single-component formula)``."""
        for count, tree in self.components:
            yield count, Formula(((1, tree),), self.greek, self.dialect)

    def mix(self, other: "Formula", limits: NumericLimits = DEFAULT_LIMITS) -> "Formula":
        """Combine two formulas into one mixture.

        Components with identical trees have their counts added. If the sum
        would overflow the count width, the component is appended separately
        and a ``RuntimeWarning`` is emitted.

        Example:
            >>> str(Formula.parse("H2O").mix(Formula.parse("NaCl.H2O")))
            '2H₂O.NaCl'
        """
        components = list(self.components)
        for count, tree in other.components:
            for i, (existing, existing_tree) in enumerate(components):
                if existing_tree == tree:
                    try:
                        components[i] = (limits.add_counts(existing, count), tree)
                    except NumericOverflowError:
                        warnings.warn(
                            f"Mixture count overflow for {tree}; appending separately",
                            RuntimeWarning,
                            stacklevel=2,
                        )
                        components.append((count, tree))
                    break
            else:
                components.append((count, tree))
        return Formula(tuple(components), self.greek or other.greek, self.dialect)
