"""Formula dialects and the grammar switches each one turns on."""

from __future__ import annotations

from enum import Enum


class Dialect(Enum):
    """Closed set of supported formula notations.

    CHEMICAL is the general notation used by compound databases. INCHI is the
    strict, Hill-ordered formula layer of an InChI identifier. MINERAL adds
    greek polymorph prefixes (``α-SiO₂``). RESIDUAL additionally accepts the
    ``R`` placeholder of generic structures.
    """

    CHEMICAL = "chemical"
    INCHI = "InChI"
    MINERAL = "mineral"
    RESIDUAL = "residual"

    def __str__(self) -> str:
        return self.value

    @property
    def allows_residual(self) -> bool:
        return self is Dialect.RESIDUAL

    @property
    def allows_greek(self) -> bool:
        """Whether a leading greek prefix is accepted."""
        return self is Dialect.MINERAL

    @property
    def requires_hill_order(self) -> bool:
        """Whether each component must list its elements in Hill order."""
        return self is Dialect.INCHI

    @property
    def baseline_counts(self) -> bool:
        """Whether counts are rendered with baseline digits."""
        return self is Dialect.INCHI
