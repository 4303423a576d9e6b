"""
SecureHex password and passphrase generator package.
"""

from .config import (
    DEFAULT_OPTIONS,
    GenerationOptions,
    InvalidOptions,
    Mode,
    SecureHexError,
)
from .entropy import classify_strength
from .generator import GeneratedResult, generate
from .random_source import RandomnessUnavailable, secure_random_int

__all__ = [
    "DEFAULT_OPTIONS",
    "GenerationOptions",
    "GeneratedResult",
    "InvalidOptions",
    "Mode",
    "RandomnessUnavailable",
    "SecureHexError",
    "classify_strength",
    "generate",
    "secure_random_int",
]
