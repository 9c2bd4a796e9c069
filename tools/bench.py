from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

# Allow running as `python tools/bench.py` without installing the package.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from yapg.core.charsets import CharsetSpec
from yapg.core.password_engine import SeededIndexSampler, SystemIndexSampler
from yapg.core.password_service import generate


def _bench_passwords(count: int, length: int, alphabet: str, seed: int | None) -> float:
    sampler = SystemIndexSampler() if seed is None else SeededIndexSampler(seed)
    t0 = time.perf_counter()
    outputs = generate(alphabet, length, count, sampler)
    dt = time.perf_counter() - t0
    rate = (len(outputs) / dt) if dt > 0 else 0.0
    source = "system" if seed is None else f"seeded({seed})"
    print(f"[passwords] count={len(outputs)} length={length} source={source} seconds={dt:.4f} rate={rate:.1f}/s")
    return rate


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="yapg baseline benchmark (stdlib-only).")
    parser.add_argument("--passwords", type=int, default=10000, help="Number of passwords to generate.")
    parser.add_argument("--length", type=int, default=24, help="Password length.")
    parser.add_argument("--charsets", default="", help="Charset abbreviations (default: std64).")
    parser.add_argument("--seed", type=int, default=None, help="Use a seeded sampler instead of the OS CSPRNG.")
    args = parser.parse_args(argv)

    if args.passwords <= 0 or args.length <= 0:
        parser.error("--passwords and --length must be > 0")

    try:
        spec = CharsetSpec.parse(args.charsets) if args.charsets else CharsetSpec.std64()
    except ValueError as exc:
        parser.error(str(exc))
    _bench_passwords(count=args.passwords, length=args.length, alphabet=spec.construct(), seed=args.seed)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
