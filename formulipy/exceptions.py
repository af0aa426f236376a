"""Custom exceptions for formulipy.

Errors are layered the same way the pipeline is: character, subtoken, token
and grammar errors are all ``ParseError`` subclasses, so a caller can catch
one class for everything that went wrong while reading a formula.
"""

from __future__ import annotations


class FormulaError(Exception):
    """Base exception for formula-related errors."""
    pass


class ParseError(FormulaError):
    """Error while reading a formula string.

    When both the formula text and a position are known, the message shows a
    caret under the offending character.
    """

    def __init__(
        self,
        message: str,
        formula: str | None = None,
        position: int | None = None,
    ):
        self.message = message
        self.formula = formula
        self.position = position
        super().__init__(self._format())

    def _format(self) -> str:
        if self.formula is not None and self.position is not None:
            return f"{self.message}\n  {self.formula}\n  {' ' * self.position}^"
        if self.formula is not None:
            return f"{self.message} in: {self.formula}"
        return self.message

    def locate(self, formula: str, position: int | None = None) -> "ParseError":
        """Attach input text and position if the error was raised without them.

        Already-known values are kept. Returns the error itself so it can be
        re-raised in one expression.
        """
        if self.formula is None:
            self.formula = formula
        if self.position is None:
            self.position = position
        self.args = (self._format(),)
        return self


# Character level

class CharacterError(ParseError):
    """A raw code point could not be classified."""
    pass


class NotAllowedCharacterError(CharacterError):
    """Character outside the formula alphabet."""

    def __init__(self, character: str, formula: str | None = None, position: int | None = None):
        self.character = character
        super().__init__(
            f"Character '{character}' (U+{ord(character):04X}) is not allowed",
            formula,
            position,
        )


class GreekLetterHyphenError(CharacterError):
    """Greek letter not immediately followed by a hyphen."""

    def __init__(self, letter: str, formula: str | None = None, position: int | None = None):
        self.letter = letter
        super().__init__(
            f"Greek letter '{letter}' must be followed by a hyphen",
            formula,
            position,
        )


# Subtoken level

class SubTokenError(ParseError):
    """Characters could not be grouped into a subtoken."""
    pass


class UnknownLetterCombinationError(SubTokenError):
    """Two-letter combination that is neither an element nor a complex group."""

    def __init__(self, letters: str, formula: str | None = None, position: int | None = None):
        self.letters = letters
        super().__init__(f"Unknown letter combination '{letters}'", formula, position)


class UnknownUppercaseLetterError(SubTokenError):
    """Lone uppercase letter with no meaning (e.g. 'A', 'E', 'G')."""

    def __init__(self, letter: str, formula: str | None = None, position: int | None = None):
        self.letter = letter
        super().__init__(f"Unknown uppercase letter '{letter}'", formula, position)


class UnknownLowercaseLetterError(SubTokenError):
    """Lowercase letter not preceded by an uppercase letter."""

    def __init__(self, letter: str, formula: str | None = None, position: int | None = None):
        self.letter = letter
        super().__init__(f"Unexpected lowercase letter '{letter}'", formula, position)


class NumericOverflowError(SubTokenError):
    """Count or charge does not fit the configured integer width."""
    pass


class PositiveOverflowError(NumericOverflowError):
    """Value exceeds the upper bound."""

    def __init__(self, message: str = "Numeric overflow", formula: str | None = None, position: int | None = None):
        super().__init__(message, formula, position)


class NegativeOverflowError(NumericOverflowError):
    """Value falls below the lower bound."""

    def __init__(self, message: str = "Numeric underflow", formula: str | None = None, position: int | None = None):
        super().__init__(message, formula, position)


class LeadingZeroError(SubTokenError):
    """Number written with a leading zero."""

    def __init__(self, formula: str | None = None, position: int | None = None):
        super().__init__("Numbers must not start with zero", formula, position)


class InvalidSuccessorError(SubTokenError):
    """A subtoken that may not follow the previous one."""

    def __init__(self, first: str, second: str, formula: str | None = None, position: int | None = None):
        self.first = first
        self.second = second
        super().__init__(f"'{second}' may not follow '{first}'", formula, position)


class InvalidRepeatedCharacterError(SubTokenError):
    """Marker that may not appear twice in a row."""

    def __init__(self, character: str, formula: str | None = None, position: int | None = None):
        self.character = character
        super().__init__(f"'{character}' may not be repeated", formula, position)


# Token level

class TokenError(ParseError):
    """Subtokens could not be combined into a token."""
    pass


class IsotopeAssignmentError(TokenError):
    """Mass number with no element to attach to."""

    def __init__(self, mass_number: int, formula: str | None = None, position: int | None = None):
        self.mass_number = mass_number
        super().__init__(
            f"Cannot assign mass number {mass_number} to an isotope",
            formula,
            position,
        )


class UnknownIsotopeError(TokenError):
    """Element and mass number do not name a known isotope."""

    def __init__(self, symbol: str, mass_number: int, formula: str | None = None, position: int | None = None):
        self.symbol = symbol
        self.mass_number = mass_number
        super().__init__(f"Unknown isotope {mass_number}{symbol}", formula, position)


class UnexpectedEndOfInputError(TokenError):
    """Input ended where more was required."""

    def __init__(self, message: str = "Unexpected end of input", formula: str | None = None, position: int | None = None):
        super().__init__(message, formula, position)


# Grammar level

class GrammarError(ParseError):
    """Tokens do not form a valid formula."""
    pass


class EmptyMolecularTreeError(GrammarError):
    """A unit, charge or radical has nothing to apply to."""

    def __init__(self, message: str = "Empty molecular tree", formula: str | None = None, position: int | None = None):
        super().__init__(message, formula, position)


class EmptyFormulaError(EmptyMolecularTreeError):
    """Formula contains no mixture at all."""

    def __init__(self, formula: str | None = None, position: int | None = None):
        super().__init__("Empty formula", formula, position)


class UnexpectedCharacterError(GrammarError):
    """Token valid on its own but not at this place."""

    def __init__(self, character: str, formula: str | None = None, position: int | None = None):
        self.character = character
        super().__init__(f"Unexpected character '{character}'", formula, position)


class MissingClosingBracketError(GrammarError):
    """Input ended inside a bracket."""

    def __init__(self, bracket: str, formula: str | None = None, position: int | None = None):
        self.bracket = bracket
        super().__init__(f"Missing closing bracket '{bracket}'", formula, position)


class ResidualNotSupportedError(GrammarError):
    """Residual 'R' used in a dialect that forbids it."""

    def __init__(self, dialect: str, formula: str | None = None, position: int | None = None):
        self.dialect = dialect
        super().__init__(f"Residuals are not supported in {dialect} formulas", formula, position)


class UnexpectedGreekLetterError(GrammarError):
    """Greek letter anywhere but the start of the formula."""

    def __init__(
        self,
        letter: str,
        formula: str | None = None,
        position: int | None = None,
        message: str | None = None,
    ):
        self.letter = letter
        super().__init__(message or f"Unexpected greek letter '{letter}'", formula, position)


class GreekLetterNotSupportedError(UnexpectedGreekLetterError):
    """Leading greek letter in a dialect without polymorph prefixes."""

    def __init__(self, letter: str, dialect: str, formula: str | None = None, position: int | None = None):
        self.dialect = dialect
        super().__init__(
            letter,
            formula,
            position,
            message=f"Greek letter prefix '{letter}' is not supported in {dialect} formulas",
        )


class ZeroChargeError(GrammarError):
    """Charge of magnitude zero."""

    def __init__(self, formula: str | None = None, position: int | None = None):
        super().__init__("Charge must not be zero", formula, position)


class ZeroRepeatCountError(GrammarError):
    """Repeat count of zero."""

    def __init__(self, formula: str | None = None, position: int | None = None):
        super().__init__("Repeat count must not be zero", formula, position)


class NotHillOrderedError(GrammarError):
    """InChI formula component whose elements are not in Hill order."""

    def __init__(self, component: str, formula: str | None = None, position: int | None = None):
        self.component = component
        super().__init__(f"Component '{component}' is not in Hill order", formula, position)


class NestingTooDeepError(GrammarError):
    """Brackets or radicals nested beyond the configured depth."""

    def __init__(self, max_depth: int, formula: str | None = None, position: int | None = None):
        self.max_depth = max_depth
        super().__init__(f"Nesting deeper than {max_depth} levels", formula, position)
