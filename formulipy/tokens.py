"""
Token disambiguation.

Turns subtokens into the tokens the grammar works on. The only real decision
made here is what a superscript number means: followed by an element it is
a mass number and the pair becomes an isotope.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Final, Iterator

from formulipy.characters import Typesetting
from formulipy.elements import get_isotope
from formulipy.exceptions import (
    IsotopeAssignmentError,
    UnexpectedEndOfInputError,
    UnknownIsotopeError,
)
from formulipy.numeric import DEFAULT_LIMITS, NumericLimits
from formulipy.subtokens import SubToken, SubTokenKind, SubTokenReader


class TokenKind(IntEnum):
    """Kinds of token seen by the parser."""
    ELEMENT = 0
    ISOTOPE = 1
    COMPLEX = 2
    CHARGE = 3
    COUNT = 4
    RADICAL = 5
    RESIDUAL = 6
    OPEN_BRACKET = 7
    TERMINATOR = 8
    GREEK = 9


@dataclass(frozen=True, slots=True)
class Token:
    """A disambiguated token.

    Attributes:
        kind: Token kind.
        value: ``Element``, ``Isotope``, ``Complex``, signed charge, count,
            ``Bracket``, ``Terminator``, ``GreekLetter`` or marker glyph.
        position: Index of the first character in the input.
        text: Input text the token was read from.
        typesetting: Typesetting of COUNT and CHARGE tokens.
    """

    kind: TokenKind
    value: object
    position: int
    text: str
    typesetting: Typesetting | None = None


_KIND_BY_SUBTOKEN: Final[dict[SubTokenKind, TokenKind]] = {
    SubTokenKind.ELEMENT: TokenKind.ELEMENT,
    SubTokenKind.ISOTOPE: TokenKind.ISOTOPE,
    SubTokenKind.COMPLEX: TokenKind.COMPLEX,
    SubTokenKind.RESIDUAL: TokenKind.RESIDUAL,
    SubTokenKind.NUMBER: TokenKind.COUNT,
    SubTokenKind.CHARGE: TokenKind.CHARGE,
    SubTokenKind.RADICAL: TokenKind.RADICAL,
    SubTokenKind.OPEN_BRACKET: TokenKind.OPEN_BRACKET,
    SubTokenKind.TERMINATOR: TokenKind.TERMINATOR,
    SubTokenKind.GREEK: TokenKind.GREEK,
}


class TokenReader:
    """Pull reader of tokens with one token of lookahead.

    Args:
        string: Formula text.
        limits: Integer widths for counts and charges.
    """

    __slots__ = ("_subtokens", "_peeked")

    def __init__(self, string: str, limits: NumericLimits = DEFAULT_LIMITS) -> None:
        self._subtokens = SubTokenReader(string, limits)
        self._peeked: Token | None = None

    @property
    def string(self) -> str:
        return self._subtokens.string

    @property
    def position(self) -> int:
        """Index of the next unread token."""
        if self._peeked is not None:
            return self._peeked.position
        return self._subtokens.position

    def peek(self) -> Token | None:
        """Return the next token without consuming it."""
        if self._peeked is None:
            self._peeked = self._read()
        return self._peeked

    def next(self) -> Token | None:
        """Consume and return the next token, or None at end of input."""
        if self._peeked is not None:
            token, self._peeked = self._peeked, None
            return token
        return self._read()

    def is_eof(self) -> bool:
        return self.peek() is None

    def __iter__(self) -> Iterator[Token]:
        while (token := self.next()) is not None:
            yield token

    def _read(self) -> Token | None:
        sub = self._subtokens.next()
        if sub is None:
            return None
        if sub.kind is SubTokenKind.NUMBER and sub.typesetting is Typesetting.SUPERSCRIPT:
            return self._isotope(sub)
        return Token(_KIND_BY_SUBTOKEN[sub.kind], sub.value, sub.position, sub.text, sub.typesetting)

    def _isotope(self, mass: SubToken) -> Token:
        follower = self._subtokens.peek()
        if follower is None:
            raise UnexpectedEndOfInputError(
                f"Expected an element after mass number {mass.value}",
                self.string,
                mass.position,
            )
        if follower.kind is not SubTokenKind.ELEMENT:
            raise IsotopeAssignmentError(mass.value, self.string, follower.position)
        self._subtokens.next()
        isotope = get_isotope(follower.value, mass.value)
        if isotope is None:
            raise UnknownIsotopeError(follower.text, mass.value, self.string, mass.position)
        return Token(TokenKind.ISOTOPE, isotope, mass.position, mass.text + follower.text)


def tokenize(string: str, limits: NumericLimits = DEFAULT_LIMITS) -> list[Token]:
    """Read all tokens of a string.

    Example:
        >>> [t.kind.name for t in tokenize("¹³CH4")]
        ['ISOTOPE', 'ELEMENT', 'COUNT']
    """
    return list(TokenReader(string, limits))
