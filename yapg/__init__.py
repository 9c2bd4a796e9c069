"""yapg: generate random passwords from configurable character sets."""

from yapg.core import GenerationRequest, InvalidInput, PasswordResult, generate, generate_passwords

__version__ = "0.1.0"

__all__ = ["GenerationRequest", "InvalidInput", "PasswordResult", "generate", "generate_passwords"]
