"""
Configuration for the SecureHex password generator.

Options are immutable values: every generate() call receives a complete
GenerationOptions, and front ends build a new instance on each toggle.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, fields, replace as _dc_replace


MIN_LENGTH = 6
MAX_LENGTH = 64

LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?~"

# Visually confusable characters removed by exclude_ambiguous.
AMBIGUOUS = "O0Il1"


class SecureHexError(Exception):
    """Base class for all SecureHex errors."""


class InvalidOptions(SecureHexError, ValueError):
    """Options rejected at the generate() boundary."""


class Mode(enum.Enum):
    """Which generator runs: character password or word passphrase."""

    PASSWORD = "password"
    PASSPHRASE = "passphrase"


class CharacterClass(enum.Enum):
    """
    Selectable character classes, declared in canonical charset order.
    The value of each member is its seed alphabet.
    """

    LOWERCASE = LOWERCASE
    UPPERCASE = UPPERCASE
    NUMBERS = DIGITS
    SYMBOLS = SYMBOLS

    @property
    def alphabet(self) -> str:
        return self.value


@dataclass(frozen=True)
class GenerationOptions:
    # Requested secret length in characters. In passphrase mode this only
    # drives the word count.
    length: int = 16

    include_lowercase: bool = True
    include_uppercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True

    # Drop O, 0, I, l, 1 from the combined charset (fill characters only).
    exclude_ambiguous: bool = False

    # Insert "-" separators into passwords longer than 8 characters.
    include_dashes: bool = False

    def selected_classes(self) -> tuple[CharacterClass, ...]:
        flags = (
            (CharacterClass.LOWERCASE, self.include_lowercase),
            (CharacterClass.UPPERCASE, self.include_uppercase),
            (CharacterClass.NUMBERS, self.include_numbers),
            (CharacterClass.SYMBOLS, self.include_symbols),
        )
        return tuple(cls for cls, enabled in flags if enabled)

    def replace(self, **changes) -> "GenerationOptions":
        """
        Return a copy with the given fields changed.
        """
        return _dc_replace(self, **changes)


def validate_options(options: GenerationOptions) -> GenerationOptions:
    """
    Reject structurally invalid options or an out-of-range length.

    Returns the options unchanged so callers can validate inline.
    """
    if not isinstance(options, GenerationOptions):
        raise InvalidOptions(
            f"Expected GenerationOptions, got {type(options).__name__}."
        )

    length = options.length
    # bool is an int subclass; True is not a length.
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidOptions(f"length must be an integer, got {length!r}.")
    if not MIN_LENGTH <= length <= MAX_LENGTH:
        raise InvalidOptions(
            f"length={length} is outside the supported range "
            f"[{MIN_LENGTH}, {MAX_LENGTH}]."
        )

    for f in fields(options):
        if f.name == "length":
            continue
        value = getattr(options, f.name)
        if not isinstance(value, bool):
            raise InvalidOptions(f"{f.name} must be a bool, got {value!r}.")

    return options


def coerce_mode(mode: Mode | str) -> Mode:
    if isinstance(mode, Mode):
        return mode
    try:
        return Mode(mode)
    except ValueError:
        raise InvalidOptions(
            f"Unknown mode {mode!r}; expected 'password' or 'passphrase'."
        ) from None


# Default options instance you can import elsewhere
DEFAULT_OPTIONS = GenerationOptions()
