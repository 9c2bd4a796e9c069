#!/usr/bin/env python3
from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from yapg.core.password_engine import IndexSampler, SeededIndexSampler, SystemIndexSampler
from yapg.core.password_service import generate


def _run_probe(
    *,
    alphabet: str,
    samples: int,
    tolerance: float,
    sampler: IndexSampler | None = None,
) -> tuple[dict[str, float], float, float]:
    """Draw `samples` characters and compare observed frequencies with 1/|alphabet|.

    Returns (frequency per distinct character, max absolute deviation, chi-square).
    Duplicated characters are expected at their multiplicity / |alphabet|.
    """
    if not alphabet:
        raise ValueError("alphabet must not be empty")
    if samples <= 0:
        raise ValueError("samples must be > 0")
    if not (0.0 < tolerance < 1.0):
        raise ValueError("tolerance must be within (0, 1)")

    drawn = generate(alphabet, samples, 1, sampler)[0]
    observed = Counter(drawn)
    weights = Counter(alphabet)
    size = len(alphabet)

    frequencies: dict[str, float] = {}
    max_deviation = 0.0
    chi_square = 0.0
    for ch, weight in weights.items():
        expected_ratio = weight / size
        freq = observed.get(ch, 0) / samples
        frequencies[ch] = freq
        max_deviation = max(max_deviation, abs(freq - expected_ratio))
        expected_count = expected_ratio * samples
        chi_square += (observed.get(ch, 0) - expected_count) ** 2 / expected_count

    if max_deviation > tolerance:
        raise RuntimeError(
            f"uniformity probe failed: max frequency deviation {max_deviation:.6f} exceeds tolerance {tolerance:.6f}"
        )
    return frequencies, max_deviation, chi_square


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Check that generated characters are spread evenly over the alphabet. "
            "This is a sanity check, not a statistical certification."
        )
    )
    parser.add_argument("--alphabet", default="ab", help="Alphabet to sample from (default: ab).")
    parser.add_argument("--samples", type=int, default=100000, help="Characters to draw (default: 100000).")
    parser.add_argument(
        "--tolerance",
        type=float,
        default=0.01,
        help="Maximum allowed absolute deviation from the expected frequency (default: 0.01).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Probe a seeded sampler instead of the OS CSPRNG.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    sampler = SystemIndexSampler() if args.seed is None else SeededIndexSampler(args.seed)
    try:
        frequencies, max_deviation, chi_square = _run_probe(
            alphabet=args.alphabet,
            samples=args.samples,
            tolerance=args.tolerance,
            sampler=sampler,
        )
    except (RuntimeError, ValueError) as exc:
        print(f"[uniformity] probe failed: {exc}", file=sys.stderr)
        return 1

    print(f"[uniformity] samples={args.samples} alphabet_size={len(args.alphabet)}")
    for ch in sorted(frequencies):
        print(f"[uniformity] {ch!r}={frequencies[ch]:.6f}")
    print(f"[uniformity] max_deviation={max_deviation:.6f} chi_square={chi_square:.3f}")
    print("[uniformity] probe ok")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
