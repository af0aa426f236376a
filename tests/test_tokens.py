"""Tests for token disambiguation."""

import pytest

from formulipy.characters import Typesetting
from formulipy.elements import DEUTERIUM, Element, get_isotope
from formulipy.exceptions import (
    IsotopeAssignmentError,
    TokenError,
    UnexpectedEndOfInputError,
    UnknownIsotopeError,
)
from formulipy.tokens import TokenKind, TokenReader, tokenize


class TestIsotopeTokens:
    """Test superscript mass numbers."""

    def test_superscript_isotope(self):
        """Superscript number followed by an element is an isotope."""
        tokens = tokenize("¹³CH4")
        assert [t.kind for t in tokens] == [TokenKind.ISOTOPE, TokenKind.ELEMENT, TokenKind.COUNT]
        assert tokens[0].value is get_isotope(Element.from_symbol("C"), 13)
        assert tokens[0].text == "¹³C"
        assert tokens[1].position == 3

    def test_deuterium_by_mass_number(self):
        """²H is the same isotope as D."""
        assert tokenize("²H")[0].value is DEUTERIUM
        assert tokenize("D")[0].value is DEUTERIUM

    def test_mass_number_at_end(self):
        """Superscript number with nothing after it."""
        with pytest.raises(UnexpectedEndOfInputError) as info:
            tokenize("H²")
        assert info.value.position == 1

    def test_mass_number_before_bracket(self):
        """Superscript number followed by something other than an element."""
        with pytest.raises(IsotopeAssignmentError) as info:
            tokenize("¹³(C)")
        assert info.value.mass_number == 13
        assert info.value.position == 2

    def test_mass_number_before_complex(self):
        """Complex groups have no isotopes."""
        with pytest.raises(IsotopeAssignmentError):
            tokenize("¹³Me")

    def test_unknown_isotope(self):
        """Mass number that is not a known isotope of the element."""
        with pytest.raises(UnknownIsotopeError) as info:
            tokenize("¹²⁰C")
        assert info.value.symbol == "C"
        assert info.value.mass_number == 120

    def test_token_errors(self):
        """Token-level errors share a base class."""
        with pytest.raises(TokenError):
            tokenize("CH²")


class TestTokenReader:
    """Test token kinds and lookahead."""

    def test_counts_keep_typesetting(self):
        """Baseline and subscript counts both become COUNT tokens."""
        baseline = tokenize("H2")[1]
        subscript = tokenize("H₂")[1]
        assert baseline.kind is subscript.kind is TokenKind.COUNT
        assert baseline.typesetting is Typesetting.BASELINE
        assert subscript.typesetting is Typesetting.SUBSCRIPT

    def test_superscript_charge_is_not_isotope(self):
        """Superscript digits with a sign stay a charge."""
        tokens = tokenize("SO₄²⁻")
        assert tokens[-1].kind is TokenKind.CHARGE
        assert tokens[-1].value == -2

    def test_all_kinds(self):
        """Every token kind appears in a suitable string."""
        kinds = {t.kind for t in tokenize("(MeR)2[¹³C]•Fe+")}
        assert kinds == {
            TokenKind.OPEN_BRACKET,
            TokenKind.COMPLEX,
            TokenKind.RESIDUAL,
            TokenKind.TERMINATOR,
            TokenKind.COUNT,
            TokenKind.ISOTOPE,
            TokenKind.RADICAL,
            TokenKind.ELEMENT,
            TokenKind.CHARGE,
        }

    def test_greek_token(self):
        """Greek prefixes are tokens too."""
        assert tokenize("β-C")[0].kind is TokenKind.GREEK

    def test_peek_and_position(self):
        """peek() does not move the reader."""
        reader = TokenReader("NaCl")
        assert reader.position == 0
        assert reader.peek().text == "Na"
        assert reader.position == 0
        reader.next()
        assert reader.position == 2
        reader.next()
        assert reader.is_eof()
        assert reader.next() is None

    def test_empty_input(self):
        """Nothing to read."""
        assert tokenize("") == []
