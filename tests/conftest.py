"""Test configuration and fixtures for formulipy tests."""

from collections import Counter

import pytest

# RDKit is used as reference for formulas, atomic weights and isotope masses
from rdkit import Chem
from rdkit.Chem import Descriptors, rdMolDescriptors


def rdkit_formula(smiles: str) -> str:
    """Get RDKit's Hill-ordered molecular formula for a SMILES string.

    Args:
        smiles: Input SMILES string.

    Returns:
        Formula as computed by ``CalcMolFormula``.
    """
    mol = Chem.MolFromSmiles(smiles)
    if mol is None:
        raise ValueError(f"RDKit could not parse: {smiles}")
    return rdMolDescriptors.CalcMolFormula(mol)


def rdkit_element_counts(smiles: str) -> Counter:
    """Count atoms per element symbol, hydrogens included.

    Args:
        smiles: Input SMILES string.

    Returns:
        Counter keyed by element symbol.
    """
    mol = Chem.MolFromSmiles(smiles)
    if mol is None:
        raise ValueError(f"RDKit could not parse: {smiles}")
    mol = Chem.AddHs(mol)
    return Counter(atom.GetSymbol() for atom in mol.GetAtoms())


def rdkit_molar_mass(smiles: str) -> float:
    """Average molecular weight from RDKit."""
    return Descriptors.MolWt(Chem.MolFromSmiles(smiles))


def rdkit_exact_mass(smiles: str) -> float:
    """Monoisotopic mass from RDKit."""
    return rdMolDescriptors.CalcExactMolWt(Chem.MolFromSmiles(smiles))


def rdkit_atomic_weight(symbol: str) -> float:
    """Standard atomic weight from RDKit's periodic table."""
    return Chem.GetPeriodicTable().GetAtomicWeight(symbol)


def rdkit_isotope_mass(symbol: str, mass_number: int) -> float:
    """Exact isotope mass from RDKit's periodic table."""
    return Chem.GetPeriodicTable().GetMassForIsotope(symbol, mass_number)


@pytest.fixture
def simple_formulas() -> list[str]:
    """Basic valid formulas for smoke testing."""
    return [
        "H2O",
        "CO2",
        "NaCl",
        "CH4",
        "C6H12O6",
        "H2SO4",
        "NH4+",
        "Fe+3",
        "O2",
    ]


@pytest.fixture
def ocr_formulas() -> list[str]:
    """Formulas written with Unicode look-alikes."""
    return [
        "H₂O",
        "Fe³⁺",
        "SO₄²⁻",
        "CuSO4｡5H2O",
        "CuSO4．5H2O",
        "Fe–2",
        "（NH4）2SO4",
        "［Fe(CN)6］−4",
        "Cl·",
        "C⁴⁺.H₂",
    ]


@pytest.fixture
def bracket_formulas() -> list[str]:
    """Formulas with nested brackets."""
    return [
        "Ca(OH)2",
        "(NH4)2SO4",
        "[Co(NH3)6]+3(Cl-)3",
        "K4[Fe(CN)6]",
        "[Cu(H2O)4]SO4",
        "Al2(SO4)3",
        "[Pt(NH3)2Cl2]",
    ]


@pytest.fixture
def hill_sorted_formulas() -> list[str]:
    """Formulas in Hill order."""
    return [
        "C6H12O6",
        "H2O",
        "C2H6O",
        "C6H8O6",
        "C16H25NS",
        "C28H23ClO7",
        "C32H34N4O4.Ni",
        "ClH.Na",
        "C20H18F3N4O8P.Na",
    ]


@pytest.fixture
def not_hill_sorted_formulas() -> list[str]:
    """Formulas violating Hill order."""
    return [
        "C2H5OH",
        "NaCl",
        "C32H34O4N4.Ni",
        "HCl.Na",
        "C15H18O7.C15O6H16",
        "CH2SCl2O3",
        "C6H18NaNSi4",
    ]


@pytest.fixture
def drug_smiles() -> list[str]:
    """Neutral drug-like molecules used to cross-check against RDKit."""
    return [
        "CCO",
        "CC(=O)Oc1ccccc1C(=O)O",
        "CC(C)Cc1ccc(cc1)C(C)C(=O)O",
        "CN1C=NC2=C1C(=O)N(C(=O)N2C)C",
        "OC[C@H]1OC(O)[C@H](O)[C@@H](O)[C@@H]1O",
        "c1ccc2c(c1)ccc1ccccc12",
        "ClC(Cl)(Cl)Cl",
        "CS(=O)(=O)N",
        "FC(F)(F)c1ccc(Br)cc1",
        "OP(=O)(O)O",
    ]


@pytest.fixture
def invalid_formulas() -> list[str]:
    """Strings that must fail to parse as chemical formulas."""
    return [
        "",
        "H[]",
        "()",
        "·",
        "(H2O",
        "H2O)",
        "H2O.",
        "Xx",
        "J",
        "h2o",
        "C02",
        "H²",
        "Fe+-",
        "α-SiO2",
        "R",
    ]
