"""
Character classification for formula strings.

Every code point of an input string is mapped onto a closed alphabet of
allowed characters. OCR look-alikes (fullwidth brackets, the many dash and
middle-dot variants, ideographic full stops) fold onto one canonical value
here, so later layers only ever see canonical characters.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Final, Iterator

from formulipy.exceptions import GreekLetterHyphenError, NotAllowedCharacterError


class CharacterKind(IntEnum):
    """Classes of the formula alphabet."""
    UPPERCASE = 0
    LOWERCASE = 1
    DIGIT = 2
    SUBSCRIPT_DIGIT = 3
    SUPERSCRIPT_DIGIT = 4
    PLUS = 5
    MINUS = 6
    SUPERSCRIPT_PLUS = 7
    SUPERSCRIPT_MINUS = 8
    OPEN_BRACKET = 9
    CLOSE_BRACKET = 10
    DOT = 11
    RADICAL = 12
    GREEK = 13


class Typesetting(IntEnum):
    """Vertical placement of digits and signs."""
    BASELINE = 0
    SUBSCRIPT = 1
    SUPERSCRIPT = 2


class Bracket(Enum):
    """Bracket kinds, valued by their (open, close) glyphs."""
    ROUND = ("(", ")")
    SQUARE = ("[", "]")

    @property
    def opening(self) -> str:
        return self.value[0]

    @property
    def closing(self) -> str:
        return self.value[1]

    @property
    def terminator(self) -> "Terminator":
        return Terminator.ROUND if self is Bracket.ROUND else Terminator.SQUARE


class Terminator(Enum):
    """Characters that end a unit: closing brackets and the mixture dot."""
    ROUND = ")"
    SQUARE = "]"
    DOT = "."

    def __str__(self) -> str:
        return self.value


class GreekLetter(Enum):
    """Greek letters accepted as polymorph prefixes."""
    ALPHA = "α"
    BETA = "β"
    GAMMA = "γ"
    DELTA = "δ"
    PHI = "φ"
    OMEGA = "ω"
    LAMBDA = "λ"
    MU = "μ"
    PI = "π"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_char(cls, char: str) -> "GreekLetter | None":
        try:
            return cls(char)
        except ValueError:
            return None


# Canonical glyphs used by the renderer
SUPERSCRIPT_PLUS: Final[str] = "⁺"
SUPERSCRIPT_MINUS: Final[str] = "⁻"
RADICAL_MARKER: Final[str] = "•"
MIXTURE_DOT: Final[str] = "."
HYPHEN: Final[str] = "-"

SUBSCRIPT_DIGITS: Final[str] = "₀₁₂₃₄₅₆₇₈₉"
SUPERSCRIPT_DIGITS: Final[str] = "⁰¹²³⁴⁵⁶⁷⁸⁹"

FORBIDDEN_UPPERCASE: Final[frozenset[str]] = frozenset("JQ")
ALLOWED_LOWERCASE: Final[frozenset[str]] = frozenset("abcdefghiklmnoprstuvy")

PLUS_SIGNS: Final[frozenset[str]] = frozenset({"+", "＋", "﹢"})
MINUS_SIGNS: Final[frozenset[str]] = frozenset({
    "-",       # hyphen-minus
    "−",  # minus sign
    "－",  # fullwidth hyphen-minus
    "‐",  # hyphen
    "‑",  # non-breaking hyphen
    "‒",  # figure dash
    "–",  # en dash
    "—",  # em dash
    "―",  # horizontal bar
    "﹣",  # small hyphen-minus
})
DOTS: Final[frozenset[str]] = frozenset({
    ".", "⋅", "۔", "．", "｡", "。",
})
RADICALS: Final[frozenset[str]] = frozenset({
    "•",  # bullet
    "·",  # middle dot
    "∙",  # bullet operator
    "・",  # katakana middle dot
    "･",  # halfwidth katakana middle dot
    "·",  # greek ano teleia
    "‧",  # hyphenation point
    "⦁",  # z notation spot
})
OPEN_BRACKETS: Final[dict[str, Bracket]] = {
    "(": Bracket.ROUND,
    "（": Bracket.ROUND,
    "[": Bracket.SQUARE,
    "［": Bracket.SQUARE,
}
CLOSE_BRACKETS: Final[dict[str, Bracket]] = {
    ")": Bracket.ROUND,
    "）": Bracket.ROUND,
    "]": Bracket.SQUARE,
    "］": Bracket.SQUARE,
}

_SUBSCRIPT_VALUES: Final[dict[str, int]] = {c: i for i, c in enumerate(SUBSCRIPT_DIGITS)}
_SUPERSCRIPT_VALUES: Final[dict[str, int]] = {c: i for i, c in enumerate(SUPERSCRIPT_DIGITS)}


@dataclass(frozen=True, slots=True)
class AllowedCharacter:
    """One classified character.

    Attributes:
        kind: Alphabet class.
        value: Canonical value: the letter itself, a digit as int, "+" or "-"
            for signs, a ``Bracket`` for opening brackets, a ``Terminator``
            for closing brackets and dots, a ``GreekLetter`` for greek
            letters, and the canonical glyph for radicals.
        raw: Text as it appeared in the input (a greek letter includes its
            hyphen).
        position: Index of the first code point in the input.
    """

    kind: CharacterKind
    value: object
    raw: str
    position: int = 0

    @property
    def typesetting(self) -> Typesetting | None:
        """Typesetting of digits and signs, None for other kinds."""
        return _TYPESETTING_BY_KIND.get(self.kind)

    @property
    def is_digit(self) -> bool:
        return self.kind in (
            CharacterKind.DIGIT,
            CharacterKind.SUBSCRIPT_DIGIT,
            CharacterKind.SUPERSCRIPT_DIGIT,
        )

    @property
    def is_sign(self) -> bool:
        return self.kind in (
            CharacterKind.PLUS,
            CharacterKind.MINUS,
            CharacterKind.SUPERSCRIPT_PLUS,
            CharacterKind.SUPERSCRIPT_MINUS,
        )


_TYPESETTING_BY_KIND: Final[dict[CharacterKind, Typesetting]] = {
    CharacterKind.DIGIT: Typesetting.BASELINE,
    CharacterKind.SUBSCRIPT_DIGIT: Typesetting.SUBSCRIPT,
    CharacterKind.SUPERSCRIPT_DIGIT: Typesetting.SUPERSCRIPT,
    CharacterKind.PLUS: Typesetting.BASELINE,
    CharacterKind.MINUS: Typesetting.BASELINE,
    CharacterKind.SUPERSCRIPT_PLUS: Typesetting.SUPERSCRIPT,
    CharacterKind.SUPERSCRIPT_MINUS: Typesetting.SUPERSCRIPT,
}


def classify(char: str, position: int = 0) -> AllowedCharacter:
    """Map one code point onto the formula alphabet.

    Args:
        char: A single character.
        position: Index of the character in its input, kept for messages.

    Returns:
        The classified character.

    Raises:
        NotAllowedCharacterError: If the character is outside the alphabet.

    Example:
        >>> classify("₂").value
        2
        >>> classify("–").kind is CharacterKind.MINUS
        True
    """
    if "A" <= char <= "Z":
        if char in FORBIDDEN_UPPERCASE:
            raise NotAllowedCharacterError(char, position=position)
        return AllowedCharacter(CharacterKind.UPPERCASE, char, char, position)
    if char in ALLOWED_LOWERCASE:
        return AllowedCharacter(CharacterKind.LOWERCASE, char, char, position)
    if "0" <= char <= "9":
        return AllowedCharacter(CharacterKind.DIGIT, ord(char) - 48, char, position)
    if char in _SUBSCRIPT_VALUES:
        return AllowedCharacter(
            CharacterKind.SUBSCRIPT_DIGIT, _SUBSCRIPT_VALUES[char], char, position
        )
    if char in _SUPERSCRIPT_VALUES:
        return AllowedCharacter(
            CharacterKind.SUPERSCRIPT_DIGIT, _SUPERSCRIPT_VALUES[char], char, position
        )
    if char in PLUS_SIGNS:
        return AllowedCharacter(CharacterKind.PLUS, "+", char, position)
    if char in MINUS_SIGNS:
        return AllowedCharacter(CharacterKind.MINUS, "-", char, position)
    if char == SUPERSCRIPT_PLUS:
        return AllowedCharacter(CharacterKind.SUPERSCRIPT_PLUS, "+", char, position)
    if char == SUPERSCRIPT_MINUS:
        return AllowedCharacter(CharacterKind.SUPERSCRIPT_MINUS, "-", char, position)
    if char in OPEN_BRACKETS:
        return AllowedCharacter(CharacterKind.OPEN_BRACKET, OPEN_BRACKETS[char], char, position)
    if char in CLOSE_BRACKETS:
        return AllowedCharacter(
            CharacterKind.CLOSE_BRACKET, CLOSE_BRACKETS[char].terminator, char, position
        )
    if char in DOTS:
        return AllowedCharacter(CharacterKind.DOT, Terminator.DOT, char, position)
    if char in RADICALS:
        return AllowedCharacter(CharacterKind.RADICAL, RADICAL_MARKER, char, position)
    greek = GreekLetter.from_char(char)
    if greek is not None:
        return AllowedCharacter(CharacterKind.GREEK, greek, char, position)
    raise NotAllowedCharacterError(char, position=position)


class CharacterCursor:
    """Peekable pull cursor over the classified characters of a string.

    A greek letter and the hyphen that must follow it are returned as a
    single ``GREEK`` character.
    """

    __slots__ = ("_string", "_pos", "_peeked")

    def __init__(self, string: str) -> None:
        self._string = string
        self._pos = 0
        self._peeked: AllowedCharacter | None = None

    @property
    def string(self) -> str:
        return self._string

    @property
    def position(self) -> int:
        """Index of the next unread code point."""
        if self._peeked is not None:
            return self._peeked.position
        return self._pos

    def is_eof(self) -> bool:
        return self._peeked is None and self._pos >= len(self._string)

    def _read(self) -> AllowedCharacter | None:
        if self._pos >= len(self._string):
            return None
        start = self._pos
        char = self._string[start]
        try:
            allowed = classify(char, start)
        except NotAllowedCharacterError as exc:
            raise exc.locate(self._string, start)
        self._pos += 1
        if allowed.kind is CharacterKind.GREEK:
            hyphen = self._string[self._pos] if self._pos < len(self._string) else None
            if hyphen is None or hyphen not in MINUS_SIGNS:
                raise GreekLetterHyphenError(char, self._string, start)
            self._pos += 1
            allowed = AllowedCharacter(CharacterKind.GREEK, allowed.value, char + hyphen, start)
        return allowed

    def peek(self) -> AllowedCharacter | None:
        """Return the next character without consuming it."""
        if self._peeked is None:
            self._peeked = self._read()
        return self._peeked

    def next(self) -> AllowedCharacter | None:
        """Consume and return the next character, or None at end of input."""
        if self._peeked is not None:
            allowed, self._peeked = self._peeked, None
            return allowed
        return self._read()

    def __iter__(self) -> Iterator[AllowedCharacter]:
        while (allowed := self.next()) is not None:
            yield allowed


def to_subscript(number: int) -> str:
    """Render a non-negative integer with subscript digits."""
    return "".join(SUBSCRIPT_DIGITS[int(d)] for d in str(number))


def to_superscript(number: int) -> str:
    """Render a non-negative integer with superscript digits."""
    return "".join(SUPERSCRIPT_DIGITS[int(d)] for d in str(number))


def to_typesetting(number: int, typesetting: Typesetting) -> str:
    """Render a non-negative integer in the given typesetting."""
    if typesetting is Typesetting.SUBSCRIPT:
        return to_subscript(number)
    if typesetting is Typesetting.SUPERSCRIPT:
        return to_superscript(number)
    return str(number)
