"""Core generation engine, models, and service API for yapg."""

from __future__ import annotations

from yapg.core.error_dialect import InvalidInput
from yapg.core.models import GenerationRequest, PasswordResult
from yapg.core.password_service import generate, generate_passwords

__all__ = ["GenerationRequest", "InvalidInput", "PasswordResult", "generate", "generate_passwords"]
