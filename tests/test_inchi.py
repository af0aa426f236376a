"""Tests for the InChI formula dialect.

RDKit's ``CalcMolFormula`` writes Hill-ordered formulas, which must be
accepted by the strict InChI parser unchanged.
"""

import pytest

from formulipy import Dialect, parse, parse_inchi
from formulipy.analysis import to_hill_formula
from formulipy.exceptions import (
    EmptyFormulaError,
    EmptyMolecularTreeError,
    NotHillOrderedError,
    ParseError,
    UnexpectedCharacterError,
)
from conftest import rdkit_formula


class TestInChIParsing:
    """Test accepted InChI formulas."""

    def test_glucose(self):
        """Plain Hill formula."""
        formula = parse_inchi("C6H12O6")
        assert formula.dialect is Dialect.INCHI
        assert str(formula) == "C6H12O6"

    def test_hill_sorted(self, hill_sorted_formulas):
        """Hill-ordered formulas parse and render unchanged."""
        for text in hill_sorted_formulas:
            assert str(parse_inchi(text)) == text

    def test_mixture_count(self):
        """Baseline leading counts multiply the component."""
        formula = parse_inchi("2H2O")
        assert formula.components[0][0] == 2
        assert str(formula) == "2H2O"

    def test_same_tree_as_chemical(self):
        """Dialect does not take part in equality."""
        assert parse_inchi("C2H6O") == parse("C2H6O")

    def test_no_carbon_alphabetical(self):
        """Without carbon, hydrogen sorts alphabetically."""
        assert str(parse_inchi("ClH")) == "ClH"
        assert str(parse_inchi("H3O4P")) == "H3O4P"


class TestHillOrder:
    """Test Hill order enforcement."""

    def test_not_hill_sorted(self, not_hill_sorted_formulas):
        """Formulas out of Hill order are rejected."""
        for text in not_hill_sorted_formulas:
            with pytest.raises(NotHillOrderedError):
                parse_inchi(text)

    def test_only_inchi_requires_hill_order(self):
        """Other dialects accept any element order."""
        assert Dialect.INCHI.requires_hill_order
        for dialect in (Dialect.CHEMICAL, Dialect.MINERAL, Dialect.RESIDUAL):
            assert not dialect.requires_hill_order
            assert str(parse("OH2", dialect)) == "OH₂"

    def test_failing_component_reported(self):
        """The error names the component and where it starts."""
        with pytest.raises(NotHillOrderedError) as info:
            parse_inchi("Na.HCl")
        assert info.value.component == "HCl"
        assert info.value.position == 3

    def test_duplicate_element(self):
        """Each element appears once per component."""
        with pytest.raises(NotHillOrderedError):
            parse_inchi("CC")

    def test_hydrogen_after_other_elements(self):
        """With carbon present hydrogen must come second."""
        with pytest.raises(NotHillOrderedError):
            parse_inchi("CNH5")


class TestInChIRejections:
    """Test notations outside the InChI formula layer."""

    @pytest.mark.parametrize("text", [
        "H₂O",
        "₂H2O",
        "D2O",
        "(CH3)2",
        "[Na]",
        "H2O+",
        "MeOH",
        "Cl•",
        "RCOOH",
        "¹³CH4",
    ])
    def test_unexpected(self, text):
        """Brackets, charges, isotopes and subscripts are not InChI."""
        with pytest.raises(UnexpectedCharacterError):
            parse_inchi(text)

    def test_greek_prefix(self):
        """No polymorph prefix in InChI."""
        with pytest.raises(ParseError):
            parse_inchi("α-SiO2")

    def test_empty(self):
        """Empty input and dangling separators."""
        with pytest.raises(EmptyFormulaError):
            parse_inchi("")
        with pytest.raises(EmptyMolecularTreeError):
            parse_inchi("H2O.")


class TestInChIMatchesRDKit:
    """Test against formulas written by RDKit."""

    def test_rdkit_formulas_parse(self, drug_smiles):
        """RDKit formulas are valid InChI formula layers."""
        for smiles in drug_smiles:
            expected = rdkit_formula(smiles)
            formula = parse_inchi(expected)
            assert str(formula) == expected

    def test_hill_formula_matches_rdkit(self, drug_smiles):
        """Aggregating a general formula gives RDKit's Hill formula."""
        for smiles in drug_smiles:
            expected = rdkit_formula(smiles)
            assert to_hill_formula(parse(expected)) == expected
