from __future__ import annotations

from typing import Iterable, Optional, Union

from yapg.core import password_engine as engine
from yapg.core.error_dialect import InvalidInput, make_error
from yapg.core.models import GenerationRequest, PasswordResult
from yapg.core.password_entropy import estimate_entropy_bits, quality_from_entropy_bits, safety_warnings


def _coerce_alphabet(alphabet: Union[str, Iterable[str]]) -> str:
    if isinstance(alphabet, str):
        return alphabet
    try:
        chars = list(alphabet)
    except TypeError as exc:
        raise InvalidInput("alphabet must be a string or a sequence of characters") from exc
    for ch in chars:
        if not isinstance(ch, str) or len(ch) != 1:
            raise InvalidInput(f"alphabet entries must be single characters, got {ch!r}")
    return "".join(chars)


def _require_positive_int(value: object, field: str) -> int:
    # bool is an int subclass; `length=True` is a caller bug, not a length of one.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"{field} must be an integer")
    if value <= 0:
        raise InvalidInput(f"{field} must be > 0")
    return value


def validate_request(request: GenerationRequest) -> GenerationRequest:
    alphabet = _coerce_alphabet(request.alphabet)
    if not alphabet:
        raise InvalidInput("alphabet is empty")
    length = _require_positive_int(request.length, "length")
    count = _require_positive_int(request.count, "count")
    return GenerationRequest(alphabet=alphabet, length=length, count=count)


def generate(
    alphabet: Union[str, Iterable[str]],
    length: int,
    count: int,
    sampler: Optional[engine.IndexSampler] = None,
) -> list[str]:
    """Generate `count` passwords of `length` characters drawn uniformly from `alphabet`.

    Raises `InvalidInput` before drawing anything if the alphabet is empty or
    `length`/`count` is not a positive integer. Passwords within one batch are
    independent and may repeat.
    """
    request = validate_request(GenerationRequest(alphabet=alphabet, length=length, count=count))
    if sampler is None:
        sampler = engine.SystemIndexSampler()
    outputs = []
    for _ in range(request.count):
        try:
            outputs.append(engine.generate_password(request.length, request.alphabet, sampler))
        except OSError as e:
            raise make_error("rng_failure", str(e)) from e
    return outputs


def generate_passwords(
    request: GenerationRequest,
    sampler: Optional[engine.IndexSampler] = None,
) -> PasswordResult:
    request = validate_request(request)
    outputs = generate(request.alphabet, request.length, request.count, sampler)
    entropy_bits = estimate_entropy_bits(request.alphabet, request.length)
    return PasswordResult(
        outputs=tuple(outputs),
        entropy_bits=entropy_bits,
        quality=quality_from_entropy_bits(entropy_bits),
        warnings=safety_warnings(request.count, entropy_bits),
    )
