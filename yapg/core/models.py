from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


DEFAULT_LENGTH = 24
DEFAULT_NUMBER = 20
ENTROPY_THRESHOLD = 100
EAVESDROPPER_THRESHOLD = 10


@dataclass(frozen=True)
class GenerationRequest:
    alphabet: str
    length: int = DEFAULT_LENGTH
    count: int = DEFAULT_NUMBER


@dataclass(frozen=True)
class PasswordResult:
    outputs: Tuple[str, ...]
    entropy_bits: float = 0.0
    quality: str = ""
    warnings: Tuple[str, ...] = ()

    def as_lines(self) -> Tuple[str, ...]:
        return self.outputs
