"""Randomized robustness tests.

Random strings are assembled from formula fragments and stray characters.
Every input must either parse or raise a ParseError within the time budget,
and every successful parse must survive a render/parse round trip.
"""

import random
import time

import pytest

from formulipy import Dialect, parse
from formulipy.exceptions import ParseError

MAX_LENGTH = 200
TIME_BUDGET = 0.5
SAMPLES = 2000

FRAGMENTS = [
    "C", "H", "O", "N", "S", "P", "B", "F", "I", "Na", "Cl", "Fe", "Co", "Br",
    "D", "T", "R", "Me", "Et", "Cp", "Ph", "Bn",
    "(", ")", "[", "]", "（", "）", ".", "｡",
    "•", "·", "+", "-", "–", "⁺", "⁻",
    "1", "2", "3", "10", "0", "₂", "₃", "₁₀", "²", "³", "¹³", "¹⁸",
    "α-", "β–", "γ",
    "a", "x", "!", " ",
]


def random_formula(rng: random.Random) -> str:
    """Join random fragments into a string of at most MAX_LENGTH characters."""
    pieces = [rng.choice(FRAGMENTS) for _ in range(rng.randint(1, 60))]
    return "".join(pieces)[:MAX_LENGTH]


def check(text: str, dialect: Dialect) -> None:
    """Parse within budget; on success the rendering must round-trip."""
    start = time.perf_counter()
    try:
        formula = parse(text, dialect)
    except ParseError:
        formula = None
    elapsed = time.perf_counter() - start
    assert elapsed < TIME_BUDGET, f"{text!r} took {elapsed:.3f}s"

    if formula is not None:
        rendered = str(formula)
        assert parse(rendered, dialect) == formula, f"{text!r} -> {rendered!r}"


class TestFuzzing:
    """Test random inputs in every dialect."""

    @pytest.mark.parametrize("dialect", list(Dialect))
    def test_random_inputs(self, dialect):
        """Random strings parse or fail cleanly."""
        rng = random.Random(20240613)
        for _ in range(SAMPLES):
            check(random_formula(rng), dialect)

    @pytest.mark.parametrize("text", [
        "(" * MAX_LENGTH,
        ")" * MAX_LENGTH,
        "•(" * (MAX_LENGTH // 2),
        "H" * MAX_LENGTH,
        "9" * MAX_LENGTH,
        "+" * MAX_LENGTH,
        "Cp" * (MAX_LENGTH // 2),
        "(H)" * (MAX_LENGTH // 3),
        ".H" * (MAX_LENGTH // 2),
    ])
    def test_pathological_inputs(self, text):
        """Long repetitive inputs stay within budget."""
        for dialect in Dialect:
            check(text, dialect)
