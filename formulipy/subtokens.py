"""
Subtoken reader.

Groups classified characters into subtokens: element and complex-group
symbols, folded digit runs, signed charges, brackets, terminators, radicals
and greek prefixes. Adjacent subtokens that can never follow each other are
rejected here, before any grammar is applied.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Final, Iterator

from formulipy.characters import AllowedCharacter, CharacterCursor, CharacterKind, Typesetting
from formulipy.elements import Complex, Element, Isotope
from formulipy.exceptions import (
    InvalidRepeatedCharacterError,
    InvalidSuccessorError,
    LeadingZeroError,
    ParseError,
    UnknownLetterCombinationError,
    UnknownLowercaseLetterError,
    UnknownUppercaseLetterError,
)
from formulipy.numeric import DEFAULT_LIMITS, NumericLimits

RESIDUAL_SYMBOL: Final[str] = "R"


class SubTokenKind(IntEnum):
    """Kinds of subtoken."""
    ELEMENT = 0
    ISOTOPE = 1   # single-letter shorthand (D, T)
    COMPLEX = 2
    RESIDUAL = 3
    NUMBER = 4
    CHARGE = 5
    RADICAL = 6
    OPEN_BRACKET = 7
    TERMINATOR = 8
    GREEK = 9


@dataclass(frozen=True, slots=True)
class SubToken:
    """A group of characters with one meaning.

    Attributes:
        kind: Subtoken kind.
        value: ``Element``, ``Isotope``, ``Complex``, int magnitude (NUMBER),
            signed int (CHARGE), ``Bracket``, ``Terminator``, ``GreekLetter``,
            or the marker glyph for RADICAL and RESIDUAL.
        position: Index of the first character in the input.
        text: Input text the subtoken was read from.
        typesetting: Typesetting of NUMBER and CHARGE subtokens.
    """

    kind: SubTokenKind
    value: object
    position: int
    text: str
    typesetting: Typesetting | None = None

    @property
    def is_count(self) -> bool:
        """Baseline or subscript number."""
        return self.kind is SubTokenKind.NUMBER and self.typesetting in (
            Typesetting.BASELINE,
            Typesetting.SUBSCRIPT,
        )


_SIGN_DIGITS: Final[dict[CharacterKind, CharacterKind]] = {
    CharacterKind.PLUS: CharacterKind.DIGIT,
    CharacterKind.MINUS: CharacterKind.DIGIT,
    CharacterKind.SUPERSCRIPT_PLUS: CharacterKind.SUPERSCRIPT_DIGIT,
    CharacterKind.SUPERSCRIPT_MINUS: CharacterKind.SUPERSCRIPT_DIGIT,
}

_SIMPLE_KINDS: Final[dict[CharacterKind, SubTokenKind]] = {
    CharacterKind.OPEN_BRACKET: SubTokenKind.OPEN_BRACKET,
    CharacterKind.CLOSE_BRACKET: SubTokenKind.TERMINATOR,
    CharacterKind.DOT: SubTokenKind.TERMINATOR,
    CharacterKind.RADICAL: SubTokenKind.RADICAL,
    CharacterKind.GREEK: SubTokenKind.GREEK,
}


class SubTokenReader:
    """Pull reader turning a formula string into subtokens.

    Args:
        string: Formula text.
        limits: Integer widths for counts and charges.

    Example:
        >>> [t.kind.name for t in SubTokenReader("Fe³⁺")]
        ['ELEMENT', 'CHARGE']
    """

    __slots__ = ("_cursor", "_limits", "_peeked", "_last")

    def __init__(self, string: str, limits: NumericLimits = DEFAULT_LIMITS) -> None:
        self._cursor = CharacterCursor(string)
        self._limits = limits
        self._peeked: SubToken | None = None
        self._last: SubToken | None = None

    @property
    def string(self) -> str:
        return self._cursor.string

    @property
    def position(self) -> int:
        """Index of the next unread subtoken."""
        if self._peeked is not None:
            return self._peeked.position
        return self._cursor.position

    def peek(self) -> SubToken | None:
        """Return the next subtoken without consuming it."""
        if self._peeked is None:
            self._peeked = self._read()
        return self._peeked

    def next(self) -> SubToken | None:
        """Consume and return the next subtoken, or None at end of input."""
        if self._peeked is not None:
            token, self._peeked = self._peeked, None
            return token
        return self._read()

    def __iter__(self) -> Iterator[SubToken]:
        while (token := self.next()) is not None:
            yield token

    def _read(self) -> SubToken | None:
        char = self._cursor.next()
        if char is None:
            return None
        token = self._scan(char)
        self._check_successor(token)
        self._last = token
        return token

    def _text(self, start: int) -> str:
        return self._cursor.string[start:self._cursor.position]

    def _scan(self, char: AllowedCharacter) -> SubToken:
        kind = char.kind
        if kind is CharacterKind.UPPERCASE:
            return self._scan_symbol(char)
        if kind is CharacterKind.LOWERCASE:
            raise UnknownLowercaseLetterError(char.raw, self.string, char.position)
        if char.is_digit:
            return self._scan_number(char)
        if char.is_sign:
            return self._scan_sign(char)
        return SubToken(_SIMPLE_KINDS[kind], char.value, char.position, char.raw)

    def _scan_symbol(self, char: AllowedCharacter) -> SubToken:
        start = char.position
        follower = self._cursor.peek()
        if follower is not None and follower.kind is CharacterKind.LOWERCASE:
            self._cursor.next()
            symbol = char.raw + follower.raw
            element = Element.from_symbol(symbol)
            if element is not None:
                return SubToken(SubTokenKind.ELEMENT, element, start, symbol)
            complex_group = Complex.from_symbol(symbol)
            if complex_group is not None:
                return SubToken(SubTokenKind.COMPLEX, complex_group, start, symbol)
            raise UnknownLetterCombinationError(symbol, self.string, start)

        symbol = char.raw
        element = Element.from_symbol(symbol)
        if element is not None:
            return SubToken(SubTokenKind.ELEMENT, element, start, symbol)
        isotope = Isotope.from_shorthand(symbol)
        if isotope is not None:
            return SubToken(SubTokenKind.ISOTOPE, isotope, start, symbol)
        if symbol == RESIDUAL_SYMBOL:
            return SubToken(SubTokenKind.RESIDUAL, RESIDUAL_SYMBOL, start, symbol)
        raise UnknownUppercaseLetterError(symbol, self.string, start)

    def _fold_digits(self, first: AllowedCharacter) -> int:
        """Fold a run of same-typesetting digits starting at ``first``."""
        if first.value == 0:
            raise LeadingZeroError(self.string, first.position)
        value = first.value
        while (char := self._cursor.peek()) is not None and char.kind is first.kind:
            self._cursor.next()
            try:
                value = self._limits.append_digit(value, char.value)
            except ParseError as exc:
                raise exc.locate(self.string, first.position)
        try:
            return self._limits.check_count(value)
        except ParseError as exc:
            raise exc.locate(self.string, first.position)

    def _scan_number(self, first: AllowedCharacter) -> SubToken:
        start = first.position
        value = self._fold_digits(first)
        if first.kind is CharacterKind.SUPERSCRIPT_DIGIT:
            sign = self._cursor.peek()
            if sign is not None and sign.kind in (
                CharacterKind.SUPERSCRIPT_PLUS,
                CharacterKind.SUPERSCRIPT_MINUS,
            ):
                self._cursor.next()
                return self._charge(value, sign.value, start, Typesetting.SUPERSCRIPT)
        return SubToken(SubTokenKind.NUMBER, value, start, self._text(start), first.typesetting)

    def _scan_sign(self, first: AllowedCharacter) -> SubToken:
        start = first.position
        magnitude = 1
        while (char := self._cursor.peek()) is not None and char.kind is first.kind:
            self._cursor.next()
            magnitude += 1
        if magnitude == 1:
            digit = self._cursor.peek()
            if digit is not None and digit.kind is _SIGN_DIGITS[first.kind]:
                self._cursor.next()
                magnitude = self._fold_digits(digit)
        return self._charge(magnitude, first.value, start, first.typesetting)

    def _charge(self, magnitude: int, sign: str, start: int, typesetting: Typesetting) -> SubToken:
        value = -magnitude if sign == "-" else magnitude
        try:
            value = self._limits.check_charge(value)
        except ParseError as exc:
            raise exc.locate(self.string, start)
        return SubToken(SubTokenKind.CHARGE, value, start, self._text(start), typesetting)

    def _check_successor(self, token: SubToken) -> None:
        previous = self._last
        if previous is None:
            return
        if previous.kind is SubTokenKind.RADICAL and token.kind is SubTokenKind.RADICAL:
            raise InvalidRepeatedCharacterError(token.text, self.string, token.position)
        if previous.kind is SubTokenKind.CHARGE:
            if token.kind in (SubTokenKind.CHARGE, SubTokenKind.RADICAL) or (
                token.kind is SubTokenKind.NUMBER
                and token.typesetting is not Typesetting.SUBSCRIPT
            ):
                raise InvalidSuccessorError(previous.text, token.text, self.string, token.position)
        elif previous.is_count and token.is_count:
            raise InvalidSuccessorError(previous.text, token.text, self.string, token.position)


def subtokenize(string: str, limits: NumericLimits = DEFAULT_LIMITS) -> list[SubToken]:
    """Read all subtokens of a string."""
    return list(SubTokenReader(string, limits))
