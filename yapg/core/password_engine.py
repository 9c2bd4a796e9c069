r"""
Character selection for yapg.

Every password character is an independent, uniform draw (with replacement)
from the alphabet. The random source is an index sampler: any object with
`randbelow(n)` returning a uniform integer in [0, n).

  - SystemIndexSampler: OS CSPRNG via `secrets` (default)
  - SeededIndexSampler: `random.Random` with a fixed seed (tests, benchmarks)
"""
from __future__ import annotations

import random
import secrets
from typing import Optional, Protocol

from yapg.core.error_dialect import InvalidInput


class IndexSampler(Protocol):
    def randbelow(self, n: int) -> int:
        ...


class SystemIndexSampler:
    def randbelow(self, n: int) -> int:
        return secrets.randbelow(n)


class SeededIndexSampler:
    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def randbelow(self, n: int) -> int:
        return self._rng.randrange(n)


def generate_password(length: int, alphabet: str, sampler: Optional[IndexSampler] = None) -> str:
    if not alphabet:
        raise InvalidInput("alphabet is empty")
    if sampler is None:
        sampler = SystemIndexSampler()
    # Duplicates in `alphabet` are not collapsed; they weight selection.
    size = len(alphabet)
    return "".join(alphabet[sampler.randbelow(size)] for _ in range(length))
