"""
Formulipy - Pure Python chemical formula library.

A zero-dependency library for parsing, normalizing, and rendering chemical
formulas, including InChI formula layers, mineral formulas with polymorph
prefixes, and generic formulas with residual placeholders.

    >>> from formulipy import parse
    >>> formula = parse("CuSO4.5H2O")
    >>> str(formula)
    'CuSO₄.5H₂O'
    >>> formula.number_of_mixtures
    6

Submodules:
    formulipy.analysis  - Composition, charge, masses, Hill order
    formulipy.transform - Isotopic normalization
"""

__version__ = "0.1.0"
__author__ = "Vladimir Lekić"

# Core types
from formulipy.types import Charge, Radical, Repeat, Residual, Sequence, Side, Unit
from formulipy.formula import Formula
from formulipy.dialects import Dialect
from formulipy.characters import Bracket, GreekLetter, Typesetting

# Parsing and writing
from formulipy.parser import parse, parse_inchi, parse_mineral, parse_residual, FormulaParser
from formulipy.writer import to_text, FormulaWriter

# Configuration
from formulipy.numeric import NumericLimits, DEFAULT_LIMITS, DEFAULT_MAX_DEPTH

# Exceptions
from formulipy.exceptions import FormulaError, ParseError

# Element data
from formulipy.elements import Element, Isotope, Complex, ELEMENTS, NOBLE_GASES

# Submodules
from formulipy import analysis, transform

__all__ = [
    # Types
    "Formula", "Sequence", "Repeat", "Charge", "Unit", "Radical", "Residual", "Side",
    "Dialect", "Bracket", "GreekLetter", "Typesetting",
    # Parsing
    "parse", "parse_inchi", "parse_mineral", "parse_residual", "FormulaParser",
    # Writing
    "to_text", "FormulaWriter",
    # Configuration
    "NumericLimits", "DEFAULT_LIMITS", "DEFAULT_MAX_DEPTH",
    # Exceptions
    "FormulaError", "ParseError",
    # Elements
    "Element", "Isotope", "Complex", "ELEMENTS", "NOBLE_GASES",
    # Submodules
    "analysis", "transform",
]
