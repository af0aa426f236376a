"""
Chemical formula parser.

This module converts formula strings into ``Formula`` objects holding
normalized trees.

General formula features (chemical, mineral and residual dialects):
    - Elements, D/T shorthands and superscript isotopes (``¹³C``)
    - Bracketed isotopes (``[13C]``, ``(13C)``, ``C[13]``)
    - Round and square brackets, nested to a configurable depth
    - Baseline and subscript counts (``H2O``, ``H₂O``)
    - Charges: ``Fe+3``, ``Fe+++``, ``Fe³⁺``, ``SO4-2``
    - Radicals on either side (``Cl•``, ``•OH``)
    - Complex groups: Me, Et, Bu, Ph, Bn, Cy, Cp
    - Dot-separated mixtures with leading multipliers (``CuSO4.5H2O``)
    - Greek polymorph prefixes (``α-SiO2``; mineral only)
    - Residual placeholder ``R`` (residual only)

InChI formula features:
    - Elements with baseline counts only, dot-separated mixtures
    - Every component must be in Hill order
"""

from __future__ import annotations

from formulipy.analysis.hill import is_hill_sorted_tree
from formulipy.characters import Bracket, Terminator, Typesetting
from formulipy.dialects import Dialect
from formulipy.elements import Element, get_isotope
from formulipy.exceptions import (
    EmptyFormulaError,
    EmptyMolecularTreeError,
    GreekLetterNotSupportedError,
    IsotopeAssignmentError,
    MissingClosingBracketError,
    NestingTooDeepError,
    NotHillOrderedError,
    ParseError,
    UnexpectedCharacterError,
    UnexpectedGreekLetterError,
    UnknownIsotopeError,
)
from formulipy.formula import Formula
from formulipy.numeric import DEFAULT_LIMITS, DEFAULT_MAX_DEPTH, NumericLimits
from formulipy.tokens import Token, TokenKind, TokenReader
from formulipy.tree import (
    charge,
    expand_complex,
    into_items,
    left_radical,
    repeat,
    residual,
    right_radical,
    sequence,
    wrap,
)
from formulipy.types import Charge, Node


class FormulaParser:
    """Recursive-descent parser for formula strings.

    The parser reads tokens left to right with one token of lookahead and
    never backtracks. Each bracket level or left radical adds one level of
    recursion, bounded by ``max_depth``.

    Args:
        formula: Text to parse.
        dialect: Notation the text is written in.
        limits: Integer widths for counts and charges.
        max_depth: Maximum bracket/radical nesting.

    Example:
        >>> parser = FormulaParser("[Co(NH3)6]+3(Cl-)3")
        >>> str(parser.parse())
        '[Co(NH₃)₆]³⁺(Cl⁻)₃'
    """

    __slots__ = ("_formula", "_dialect", "_limits", "_max_depth", "_tokens")

    def __init__(
        self,
        formula: str,
        dialect: Dialect = Dialect.CHEMICAL,
        limits: NumericLimits = DEFAULT_LIMITS,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        self._formula = formula
        self._dialect = dialect
        self._limits = limits
        self._max_depth = max_depth
        self._tokens = TokenReader(formula, limits)

    def parse(self) -> Formula:
        """Parse the whole input.

        Returns:
            The parsed formula.

        Raises:
            ParseError: Subclass describing the first problem found.
        """
        try:
            if self._dialect is Dialect.INCHI:
                return self._parse_inchi()
            return self._parse_general()
        except ParseError as exc:
            raise exc.locate(self._formula, self._tokens.position)

    # General dialects

    def _parse_general(self) -> Formula:
        greek = None
        first = self._tokens.peek()
        if first is not None and first.kind is TokenKind.GREEK:
            if not self._dialect.allows_greek:
                raise GreekLetterNotSupportedError(
                    str(first.value), str(self._dialect), self._formula, first.position
                )
            self._tokens.next()
            greek = first.value

        components: list[tuple[int, Node]] = []
        while not self._tokens.is_eof():
            count = self._mixture_count()
            tree = self._parse_unit(Terminator.DOT, 0)
            components.append((count, tree))
            self._end_mixture()

        if not components:
            raise EmptyFormulaError(self._formula, len(self._formula))
        return Formula(tuple(components), greek, self._dialect)

    def _mixture_count(self) -> int:
        token = self._tokens.peek()
        if token is not None and token.kind is TokenKind.COUNT:
            if self._dialect.baseline_counts and token.typesetting is not Typesetting.BASELINE:
                raise UnexpectedCharacterError(token.text, self._formula, token.position)
            self._tokens.next()
            return token.value
        return 1

    def _end_mixture(self) -> None:
        """Consume the dot after a mixture; a dot must be followed by more input."""
        dot = self._tokens.next()
        if dot is not None and self._tokens.is_eof():
            raise EmptyMolecularTreeError(
                "Empty mixture after separator", self._formula, dot.position
            )

    def _parse_unit(
        self,
        terminator: Terminator,
        depth: int,
        initial: Token | None = None,
    ) -> Node:
        """Parse tokens up to ``terminator``.

        Closing brackets are consumed; a mixture dot is left for the caller.

        Args:
            terminator: What ends this unit.
            depth: Current nesting level.
            initial: Token already read by the caller that starts the unit.
        """
        if depth > self._max_depth:
            raise NestingTooDeepError(self._max_depth, self._formula, self._tokens.position)

        items: list[Node] = []
        pending = initial
        while True:
            if pending is not None:
                token, pending = pending, None
            else:
                upcoming = self._tokens.peek()
                if (
                    terminator is Terminator.DOT
                    and upcoming is not None
                    and upcoming.kind is TokenKind.TERMINATOR
                    and upcoming.value is Terminator.DOT
                ):
                    break
                token = self._tokens.next()

            if token is None:
                if terminator is Terminator.DOT:
                    break
                raise MissingClosingBracketError(
                    terminator.value, self._formula, len(self._formula)
                )
            if token.kind is TokenKind.TERMINATOR and token.value is terminator:
                break
            try:
                if self._step(token, items, terminator, depth):
                    break
            except ParseError as exc:
                raise exc.locate(self._formula, token.position)

        return sequence(items)

    def _step(self, token: Token, items: list[Node], terminator: Terminator, depth: int) -> bool:
        """Apply one token to the unit under construction.

        Returns:
            True when the token ended the unit.
        """
        kind = token.kind
        if kind is TokenKind.ELEMENT:
            self._element(token, items, depth)
        elif kind is TokenKind.ISOTOPE:
            items.append(token.value)
        elif kind is TokenKind.COMPLEX:
            expansion = expand_complex(token.value)
            if isinstance(expansion, Charge):
                items.append(expansion.node)
                items[:] = into_items(charge(sequence(items), expansion.charge, self._limits))
            else:
                items.append(expansion)
        elif kind is TokenKind.CHARGE:
            if not items:
                raise EmptyMolecularTreeError(
                    "Charge without a preceding formula", self._formula, token.position
                )
            items[:] = into_items(charge(sequence(items), token.value, self._limits))
        elif kind is TokenKind.COUNT:
            self._count(token, items)
        elif kind is TokenKind.RADICAL:
            if not items:
                items.append(left_radical(self._parse_unit(terminator, depth + 1)))
                return True
            items[:] = [right_radical(sequence(items))]
        elif kind is TokenKind.RESIDUAL:
            items.append(residual(self._dialect))
        elif kind is TokenKind.OPEN_BRACKET:
            bracket: Bracket = token.value
            upcoming = self._tokens.peek()
            if (
                upcoming is not None
                and upcoming.kind is TokenKind.TERMINATOR
                and upcoming.value is bracket.terminator
            ):
                raise UnexpectedCharacterError(upcoming.text, self._formula, upcoming.position)
            items.append(wrap(self._parse_unit(bracket.terminator, depth + 1), bracket))
        elif kind is TokenKind.GREEK:
            raise UnexpectedGreekLetterError(str(token.value), self._formula, token.position)
        else:
            raise UnexpectedCharacterError(token.text, self._formula, token.position)
        return False

    def _element(self, token: Token, items: list[Node], depth: int) -> None:
        element: Element = token.value
        upcoming = self._tokens.peek()
        if not (
            upcoming is not None
            and upcoming.kind is TokenKind.OPEN_BRACKET
            and upcoming.value is Bracket.SQUARE
        ):
            items.append(element)
            return

        self._tokens.next()
        inner = self._tokens.next()
        if inner is None:
            raise MissingClosingBracketError(
                Bracket.SQUARE.closing, self._formula, len(self._formula)
            )
        if inner.kind is TokenKind.TERMINATOR:
            raise UnexpectedCharacterError(inner.text, self._formula, inner.position)

        close = self._tokens.peek()
        if (
            inner.kind is TokenKind.COUNT
            and close is not None
            and close.kind is TokenKind.TERMINATOR
            and close.value is Terminator.SQUARE
        ):
            self._tokens.next()
            items.append(self._isotope(element, inner))
            return

        items.append(element)
        unit = self._parse_unit(Terminator.SQUARE, depth + 1, initial=inner)
        items.append(wrap(unit, Bracket.SQUARE))

    def _count(self, token: Token, items: list[Node]) -> None:
        if items:
            items[-1] = repeat(items[-1], token.value, self._limits)
            return
        upcoming = self._tokens.peek()
        if upcoming is not None and upcoming.kind is TokenKind.ELEMENT:
            self._tokens.next()
            items.append(self._isotope(upcoming.value, token))
            return
        raise IsotopeAssignmentError(token.value, self._formula, token.position)

    def _isotope(self, element: Element, mass: Token):
        isotope = get_isotope(element, mass.value)
        if isotope is None:
            raise UnknownIsotopeError(element.symbol, mass.value, self._formula, mass.position)
        return isotope

    # InChI

    def _parse_inchi(self) -> Formula:
        components: list[tuple[int, Node]] = []
        starts: list[int] = []
        while not self._tokens.is_eof():
            starts.append(self._tokens.position)
            count = self._mixture_count()
            components.append((count, self._parse_inchi_component()))
            self._end_mixture()

        if not components:
            raise EmptyFormulaError(self._formula, len(self._formula))
        formula = Formula(tuple(components), None, self._dialect)

        if self._dialect.requires_hill_order:
            for (_, tree), start in zip(components, starts):
                if not is_hill_sorted_tree(tree):
                    from formulipy.writer import to_text
                    raise NotHillOrderedError(
                        to_text(tree, Dialect.INCHI), self._formula, start
                    )
        return formula

    def _parse_inchi_component(self) -> Node:
        items: list[Node] = []
        while (token := self._tokens.peek()) is not None:
            if token.kind is TokenKind.TERMINATOR and token.value is Terminator.DOT:
                break
            self._tokens.next()
            if token.kind is not TokenKind.ELEMENT:
                raise UnexpectedCharacterError(token.text, self._formula, token.position)
            node: Node = token.value
            count = self._tokens.peek()
            if (
                count is not None
                and count.kind is TokenKind.COUNT
                and count.typesetting is Typesetting.BASELINE
            ):
                self._tokens.next()
                try:
                    node = repeat(node, count.value, self._limits)
                except ParseError as exc:
                    raise exc.locate(self._formula, count.position)
            items.append(node)
        return sequence(items)


def parse(
    formula: str,
    dialect: Dialect = Dialect.CHEMICAL,
    *,
    limits: NumericLimits = DEFAULT_LIMITS,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Formula:
    """Parse a formula string.

    Args:
        formula: Text to parse.
        dialect: Notation of the text (default: general chemical formula).
        limits: Integer widths for counts and charges.
        max_depth: Maximum bracket/radical nesting.

    Returns:
        Parsed formula.

    Raises:
        ParseError: If the text is not a valid formula in the dialect.

    Example:
        >>> str(parse("CuSO4.5H2O"))
        'CuSO₄.5H₂O'
    """
    return FormulaParser(formula, dialect, limits, max_depth).parse()


def parse_inchi(formula: str, **kwargs) -> Formula:
    """Parse the formula layer of an InChI (``C6H12O6``)."""
    return parse(formula, Dialect.INCHI, **kwargs)


def parse_mineral(formula: str, **kwargs) -> Formula:
    """Parse a mineral formula, optionally with a greek prefix (``α-SiO2``)."""
    return parse(formula, Dialect.MINERAL, **kwargs)


def parse_residual(formula: str, **kwargs) -> Formula:
    """Parse a formula that may contain residual placeholders (``RCOOH``)."""
    return parse(formula, Dialect.RESIDUAL, **kwargs)
