"""Tests for canonical rendering.

Rendering is checked the way canonical SMILES are: the output must parse
back to an equal formula and rendering it again must not change it.
"""

import pytest

from formulipy import Dialect, FormulaWriter, parse, parse_inchi, parse_mineral, to_text
from formulipy.elements import Element, get_isotope
from formulipy.types import Charge, Radical, Repeat, Sequence, Side, Unit


def assert_round_trip(text: str, dialect: Dialect = Dialect.CHEMICAL) -> None:
    """Parse, render, re-parse and re-render."""
    formula = parse(text, dialect)
    rendered = str(formula)
    reparsed = parse(rendered, dialect)
    assert reparsed == formula, f"{text} -> {rendered}"
    assert str(reparsed) == rendered


class TestCanonicalText:
    """Test canonical glyphs."""

    @pytest.mark.parametrize("text,expected", [
        ("H2O", "H₂O"),
        ("Fe+++", "Fe³⁺"),
        ("Fe+3", "Fe³⁺"),
        ("Cl-", "Cl⁻"),
        ("SO4-2", "SO₄²⁻"),
        ("NH4+", "NH₄⁺"),
        ("Cl·", "Cl•"),
        ("•OH", "•OH"),
        ("CuSO4｡5H2O", "CuSO₄.5H₂O"),
        ("（NH4）2SO4", "(NH₄)₂SO₄"),
        ("［Fe(CN)6］−4", "[Fe(CN)₆]⁴⁻"),
        ("D2O", "D₂O"),
        ("[13C]H4", "[¹³C]H₄"),
        ("²H2O", "D₂O"),
        ("Me2O", "(CH₃)₂O"),
        ("Cp2Fe", "(C₅H₅)⁻₂Fe"),
        ("Cp•", "(C₅H₅)•⁻"),
        ("C12H22O11", "C₁₂H₂₂O₁₁"),
    ])
    def test_canonical(self, text, expected):
        """Input spellings normalize to one canonical text."""
        assert str(parse(text)) == expected

    def test_inchi_uses_baseline_digits(self):
        """InChI formulas keep baseline counts."""
        assert str(parse_inchi("C6H12O6")) == "C6H12O6"

    def test_dialect_override(self):
        """Rendering dialect can be chosen explicitly."""
        formula = parse("C6H12O6")
        assert to_text(formula, Dialect.INCHI) == "C6H12O6"
        assert to_text(parse_inchi("C6H12O6"), Dialect.CHEMICAL) == "C₆H₁₂O₆"

    def test_greek_prefix(self):
        """Prefix is written with an ASCII hyphen."""
        assert str(parse_mineral("α–SiO2")) == "α-SiO₂"

    def test_writer_class(self):
        """FormulaWriter renders trees and formulas."""
        tree = Sequence((Repeat(Element.from_symbol("H"), 2), Element.from_symbol("O")))
        assert FormulaWriter(tree).to_string() == "H₂O"
        assert FormulaWriter(parse("H2O")).to_string() == "H₂O"

    def test_bare_trees(self):
        """Hand-built trees render too."""
        fe = Element.from_symbol("Fe")
        oh = Sequence((Element.from_symbol("O"), Element.from_symbol("H")))
        assert to_text(Charge(Unit(oh), -2)) == "(OH)²⁻"
        assert to_text(Radical(oh, Side.RIGHT)) == "OH•"
        assert to_text(Repeat(Charge(fe, 1), 2)) == "Fe⁺₂"
        assert to_text(get_isotope(fe, 56)) == "[⁵⁶Fe]"

    def test_unknown_node(self):
        """Objects that are not nodes cannot be rendered."""
        with pytest.raises(TypeError):
            to_text(42)

    def test_deep_tree(self):
        """Rendering does not recurse."""
        tree = Element.from_symbol("H")
        for _ in range(5000):
            tree = Unit(Sequence((tree, Element.from_symbol("O"))))
        assert to_text(tree).count("(") == 5000


class TestRoundTrip:
    """Test parse(str(parse(s))) == parse(s)."""

    def test_simple(self, simple_formulas):
        """Simple formulas."""
        for text in simple_formulas:
            assert_round_trip(text)

    def test_ocr(self, ocr_formulas):
        """OCR spellings."""
        for text in ocr_formulas:
            assert_round_trip(text)

    def test_brackets(self, bracket_formulas):
        """Nested brackets."""
        for text in bracket_formulas:
            assert_round_trip(text)

    @pytest.mark.parametrize("text", [
        "Cp2Fe",
        "Cp•",
        "FeCp+",
        "(•OH)2",
        "CH3•Cl",
        "Cl•2",
        "Fe[13C]",
        "H2[18O]",
        "C[13]H4",
        "((HO))",
        "Fe(CN)6-4",
        "H+H-",
        "(Fe+)+",
        "•OH-",
        "T2O.D2O.H2O",
    ])
    def test_edge_cases(self, text):
        """Structures that stress the renderer."""
        assert_round_trip(text)

    def test_dialects(self):
        """Round trip in the other dialects."""
        assert_round_trip("C32H34N4O4.Ni", Dialect.INCHI)
        assert_round_trip("γ-Fe2O3", Dialect.MINERAL)
        assert_round_trip("63F6BR.N", Dialect.RESIDUAL)
