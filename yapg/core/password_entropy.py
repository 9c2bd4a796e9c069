from __future__ import annotations

from collections import Counter
import math

from yapg.core.models import EAVESDROPPER_THRESHOLD, ENTROPY_THRESHOLD


def quality_from_entropy_bits(entropy_bits: float) -> str:
    """Mirror KeePassXC quality bands used by PasswordHealth::quality()."""
    if entropy_bits <= 0:
        return "bad"
    if entropy_bits < 40:
        return "poor"
    if entropy_bits < 75:
        return "weak"
    if entropy_bits < 100:
        return "good"
    return "excellent"


def combinations(alphabet: str, length: int) -> float:
    """Number of distinct draws of `length` characters from `alphabet` (positions, not symbols)."""
    if length <= 0:
        return 1.0
    try:
        return float(len(alphabet)) ** length
    except OverflowError:
        return math.inf


def estimate_entropy_bits(alphabet: str, length: int) -> float:
    """Shannon entropy of a generated password in bits.

    Repeated characters in `alphabet` skew the per-character distribution, so
    the estimate is taken over symbol frequencies rather than the raw size.
    For an alphabet without duplicates this is `length * log2(len(alphabet))`.
    """
    if length <= 0 or not alphabet:
        return 0.0
    counts = Counter(alphabet)
    if len(set(counts.values())) == 1:
        return float(length) * math.log2(len(counts))
    total = len(alphabet)
    per_char = 0.0
    for n in counts.values():
        p = n / total
        per_char -= p * math.log2(p)
    return float(length) * per_char


def entropy_floor_bits(alphabet: str, length: int) -> int:
    return int(math.floor(estimate_entropy_bits(alphabet, length)))


def safety_warnings(count: int, entropy_bits: float) -> tuple[str, ...]:
    warnings: list[str] = []
    if count < EAVESDROPPER_THRESHOLD:
        warnings.append(f"Any eavesdropper will have an easy time trying one of your {count} passphrases!")
    floored = int(math.floor(entropy_bits))
    if floored < ENTROPY_THRESHOLD:
        warnings.append(f"Low password entropy of {floored} bits!")
    return tuple(warnings)
