from __future__ import annotations

import argparse
import random
import string
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from yapg.core.error_dialect import InvalidInput
from yapg.core.password_engine import SeededIndexSampler
from yapg.core.password_service import generate


def _rand_text(rng: random.Random, max_len: int = 16) -> str:
    n = rng.randint(0, max_len)
    alphabet = string.ascii_letters + string.digits + " _-./\\:;,+*'\"é中"
    return "".join(rng.choice(alphabet) for _ in range(n))


def _rand_numish(rng: random.Random) -> object:
    choices: list[object] = [
        rng.randint(-5, 40),
        rng.randint(0, 3),
        rng.random() * 10,
        True,
        _rand_text(rng, 4),
        None,
    ]
    return rng.choice(choices)


def _check_outputs(alphabet: str, length: int, count: int, outputs: list[str]) -> str:
    if len(outputs) != count:
        return f"expected {count} outputs, got {len(outputs)}"
    allowed = set(alphabet)
    for value in outputs:
        if len(value) != length:
            return f"expected length {length}, got {len(value)}"
        if not set(value).issubset(allowed):
            return f"output {value!r} contains characters outside the alphabet"
    return ""


def fuzz(iterations: int, seed: int) -> int:
    rng = random.Random(seed)
    sampler = SeededIndexSampler(seed)
    failures = 0

    for i in range(iterations):
        alphabet = _rand_text(rng)
        length = _rand_numish(rng)
        count = _rand_numish(rng)
        try:
            outputs = generate(alphabet, length, count, sampler)  # type: ignore[arg-type]
        except InvalidInput:
            continue
        except Exception as exc:  # pragma: no cover
            failures += 1
            print(f"[unexpected] generate i={i} exc={exc!r}", file=sys.stderr)
            continue
        problem = _check_outputs(alphabet, length, count, outputs)  # type: ignore[arg-type]
        if problem:
            failures += 1
            print(f"[invariant] generate i={i} {problem}", file=sys.stderr)

    if failures:
        print(f"[fuzz] failures={failures}", file=sys.stderr)
        return 2
    print(f"[fuzz] ok iterations={iterations} seed={seed}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Quick fuzz harness for the password generator (stdlib-only).")
    parser.add_argument("--iterations", type=int, default=5000)
    parser.add_argument("--seed", type=int, default=0)
    args = parser.parse_args(argv)
    return fuzz(iterations=args.iterations, seed=args.seed)


if __name__ == "__main__":
    raise SystemExit(main())
