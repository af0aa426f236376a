#!/usr/bin/env python3
"""
Benchmark script measuring formula parsing and rendering speed.

Usage:
    python benchmarks/bench_parse.py [--extended]

Run from the repository root to use the local version:
    python benchmarks/bench_parse.py

Options:
    --extended    Run extended benchmark over every dialect with detailed metrics
"""

import sys
import os
import time
from dataclasses import dataclass

# Ensure local formulipy is used (not installed version)
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Test formulas with varying complexity, keyed by name: (dialect, formula)
TEST_FORMULAS = {
    "water": ("chemical", "H2O"),
    "hydrate": ("chemical", "CuSO4.5H2O"),
    "coordination": ("chemical", "[Co(NH3)6]+3(Cl-)3"),
    "ocr_unicode": ("chemical", "[Co(NH₃)₆]³⁺(Cl⁻)₃"),
    "complex_groups": ("chemical", "Cp2Fe.Et2O.PhOH"),
    "isotopes": ("chemical", "[13C]H4.D2[18O].¹⁵NH3"),
    "glucose_inchi": ("inchi", "C6H12O6"),
    "salt_inchi": ("inchi", "C32H34N4O4.Ni"),
    "mineral": ("mineral", "α-SiO2"),
    "residual": ("residual", "RCOOH.R2NH"),
}

# Default formula for quick benchmark
LARGE_FORMULA = "[Pd(PPh3)4].2[Co(NH3)6]+3(Cl-)3.(C17H23NO3)2.H2SO4.5H2O"

ITERATIONS = 10000
EXTENDED_ITERATIONS = 5000


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    formula: str
    time_seconds: float
    iterations: int
    num_characters: int

    @property
    def time_per_call_us(self) -> float:
        return (self.time_seconds / self.iterations) * 1_000_000

    @property
    def time_per_char_us(self) -> float:
        """Microseconds per input character per call."""
        return (self.time_seconds / self.iterations / self.num_characters) * 1_000_000


def benchmark_parse(formula: str, dialect_name: str, iterations: int) -> BenchmarkResult:
    """Benchmark parsing a formula."""
    from formulipy import Dialect, parse

    dialect = Dialect[dialect_name.upper()]

    # Warmup
    _ = parse(formula, dialect)

    start = time.perf_counter()
    for _ in range(iterations):
        parse(formula, dialect)
    end = time.perf_counter()

    return BenchmarkResult(
        formula=formula,
        time_seconds=end - start,
        iterations=iterations,
        num_characters=len(formula),
    )


def benchmark_render(formula: str, dialect_name: str, iterations: int) -> BenchmarkResult:
    """Benchmark rendering an already parsed formula."""
    from formulipy import Dialect, parse, to_text

    dialect = Dialect[dialect_name.upper()]
    parsed = parse(formula, dialect)

    start = time.perf_counter()
    for _ in range(iterations):
        to_text(parsed)
    end = time.perf_counter()

    return BenchmarkResult(
        formula=formula,
        time_seconds=end - start,
        iterations=iterations,
        num_characters=len(formula),
    )


def run_single_benchmark():
    """Run the quick benchmark on one large formula."""
    print("=" * 70)
    print("formulipy parse/render benchmark")
    print("=" * 70)
    print(f"Formula: {LARGE_FORMULA}")
    print(f"Iterations: {ITERATIONS}\n")

    parse_res = benchmark_parse(LARGE_FORMULA, "chemical", ITERATIONS)
    render_res = benchmark_render(LARGE_FORMULA, "chemical", ITERATIONS)

    print(f"Parse:  {parse_res.time_per_call_us:10.2f} µs/call "
          f"({parse_res.time_per_char_us:.2f} µs/char)")
    print(f"Render: {render_res.time_per_call_us:10.2f} µs/call "
          f"({render_res.time_per_char_us:.2f} µs/char)")


def run_extended_benchmark():
    """Run the benchmark over every test formula."""
    print("=" * 78)
    print("formulipy extended benchmark")
    print("=" * 78)
    print(f"Iterations per formula: {EXTENDED_ITERATIONS}\n")

    print(f"{'Name':<18} {'Dialect':<10} {'Chars':>6} "
          f"{'Parse µs':>10} {'Render µs':>10} {'µs/char':>10}")
    print("-" * 78)

    per_char = []
    for name, (dialect_name, formula) in TEST_FORMULAS.items():
        parse_res = benchmark_parse(formula, dialect_name, EXTENDED_ITERATIONS)
        render_res = benchmark_render(formula, dialect_name, EXTENDED_ITERATIONS)
        per_char.append(parse_res.time_per_char_us)
        print(f"{name:<18} {dialect_name:<10} {parse_res.num_characters:>6} "
              f"{parse_res.time_per_call_us:>10.2f} "
              f"{render_res.time_per_call_us:>10.2f} "
              f"{parse_res.time_per_char_us:>10.2f}")

    print("\n" + "-" * 78)
    print(f"Average parse time per character: {sum(per_char) / len(per_char):.2f} µs")
    print("This helps identify if performance scales linearly with formula length.")


def main():
    if "--extended" in sys.argv or "-e" in sys.argv:
        run_extended_benchmark()
    else:
        run_single_benchmark()
        print("\n" + "-" * 70)
        print("TIP: Run with --extended for detailed multi-formula analysis")


if __name__ == "__main__":
    main()
