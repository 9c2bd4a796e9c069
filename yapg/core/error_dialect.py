from __future__ import annotations

from dataclasses import dataclass


INVALID_INPUT = "invalid_input"


@dataclass(frozen=True)
class ErrorDetail:
    code: str
    message: str


class YapgError(ValueError):
    def __init__(self, code: str, message: str) -> None:
        normalized = _normalize_code(code)
        clean_message = message.strip() or "unspecified error"
        self.code = normalized
        self.message = clean_message
        super().__init__(clean_message)

    def as_detail(self) -> ErrorDetail:
        return ErrorDetail(code=self.code, message=self.message)


class InvalidInput(YapgError):
    """Raised for an empty alphabet, a non-positive length or count, or an unknown charset."""

    def __init__(self, message: str) -> None:
        super().__init__(INVALID_INPUT, message)


def _normalize_code(code: str) -> str:
    lowered = code.strip().lower()
    if not lowered:
        return INVALID_INPUT
    out = []
    for ch in lowered:
        if ch.isalnum() or ch == "_":
            out.append(ch)
        elif ch in ("-", " ", "."):
            out.append("_")
    normalized = "".join(out).strip("_")
    return normalized or INVALID_INPUT


def error_detail_from_exception(
    exc: BaseException,
    *,
    default_code: str = INVALID_INPUT,
    default_message: str = "invalid input",
) -> ErrorDetail:
    if isinstance(exc, YapgError):
        return exc.as_detail()
    message = str(exc).strip() or default_message
    return ErrorDetail(code=_normalize_code(default_code), message=message)


def make_error(code: str, message: str) -> YapgError:
    if _normalize_code(code) == INVALID_INPUT:
        return InvalidInput(message)
    return YapgError(code=code, message=message)


def format_error_text(
    exc: BaseException,
    *,
    default_code: str = INVALID_INPUT,
    default_message: str = "invalid input",
) -> str:
    detail = error_detail_from_exception(exc, default_code=default_code, default_message=default_message)
    return f"{detail.code}: {detail.message}"
