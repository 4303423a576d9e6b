"""
Password and passphrase generation pipeline.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .charset import build_charset
from .config import (
    GenerationOptions,
    Mode,
    coerce_mode,
    validate_options,
)
from .entropy import classify_strength, estimate_entropy_bits, strength_label
from .random_source import DEFAULT_SOURCE, SecureRandomSource
from .wordlist import WORD_LIST

logger = logging.getLogger(__name__)

DASH = "-"
# Passwords at or below this length never get dashes.
DASH_MIN_LENGTH = 8

MIN_PASSPHRASE_WORDS = 4
MAX_PASSPHRASE_WORDS = 8
PASSPHRASE_NUMBER_BOUND = 100

# Passphrase entropy is approximated as if every character came from a
# 62-symbol alphanumeric alphabet.
PASSPHRASE_ALPHABET_SIZE = 62


@dataclass(frozen=True)
class GeneratedResult:
    """
    Result of one generation.
    """

    secret: str
    entropy_bits: float
    strength_tier: int
    mode: Mode

    # Alphabet size the entropy estimate was computed from.
    charset_size: int = 0

    @property
    def strength_label(self) -> str:
        return strength_label(self.strength_tier)


def _empty_result(mode: Mode) -> GeneratedResult:
    return GeneratedResult(
        secret="",
        entropy_bits=0.0,
        strength_tier=0,
        mode=mode,
        charset_size=0,
    )


def insert_dashes(text: str) -> str:
    """
    Insert "-" before every index i > 0 where i % (len(text) // 4) == 0.

    Text of DASH_MIN_LENGTH characters or fewer is returned unchanged.
    """
    if len(text) <= DASH_MIN_LENGTH:
        return text

    interval = len(text) // 4
    out: list[str] = []
    for i, ch in enumerate(text):
        if i > 0 and i % interval == 0:
            out.append(DASH)
        out.append(ch)
    return "".join(out)


def assemble_password(
    options: GenerationOptions,
    source: SecureRandomSource | None = None,
) -> GeneratedResult:
    """
    Build a password from the selected character classes.

    - One required character per selected class, drawn from that class's
      full seed alphabet. exclude_ambiguous does not apply to these, so a
      required character may be one of O 0 I l 1.
    - The rest, up to options.length, drawn from the combined charset.
    - Fisher-Yates shuffle, then optional dashes.

    If options.length is below the number of selected classes, the password
    consists of the required characters only.
    """
    rng = source or DEFAULT_SOURCE

    charset = build_charset(options)
    if not charset:
        logger.debug("No character class selected; returning empty result.")
        return _empty_result(Mode.PASSWORD)

    chars = [rng.choice(cls.alphabet) for cls in options.selected_classes()]

    for _ in range(len(chars), options.length):
        chars.append(rng.choice(charset))

    rng.shuffle(chars)
    password = "".join(chars)

    # Entropy is taken before dashes are added; they carry no randomness.
    entropy_bits = estimate_entropy_bits(len(password), len(charset))

    if options.include_dashes:
        password = insert_dashes(password)

    tier = classify_strength(entropy_bits)
    logger.debug(
        "Generated password: length=%d charset_size=%d entropy=%.2f tier=%d",
        len(chars),
        len(charset),
        entropy_bits,
        tier,
    )
    return GeneratedResult(
        secret=password,
        entropy_bits=entropy_bits,
        strength_tier=tier,
        mode=Mode.PASSWORD,
        charset_size=len(charset),
    )


def passphrase_word_count(length: int) -> int:
    return max(MIN_PASSPHRASE_WORDS, min(MAX_PASSPHRASE_WORDS, length // 4))


def assemble_passphrase(
    options: GenerationOptions,
    source: SecureRandomSource | None = None,
) -> GeneratedResult:
    """
    Build a passphrase of Word+Number tokens joined by "-".

    Only options.length is used, to derive the word count (4 to 8).
    """
    rng = source or DEFAULT_SOURCE

    word_count = passphrase_word_count(options.length)
    tokens = [
        f"{rng.choice(WORD_LIST)}{rng.randbelow(PASSPHRASE_NUMBER_BOUND)}"
        for _ in range(word_count)
    ]
    passphrase = DASH.join(tokens)

    entropy_bits = estimate_entropy_bits(len(passphrase), PASSPHRASE_ALPHABET_SIZE)
    tier = classify_strength(entropy_bits)
    logger.debug(
        "Generated passphrase: words=%d length=%d entropy=%.2f tier=%d",
        word_count,
        len(passphrase),
        entropy_bits,
        tier,
    )
    return GeneratedResult(
        secret=passphrase,
        entropy_bits=entropy_bits,
        strength_tier=tier,
        mode=Mode.PASSPHRASE,
        charset_size=PASSPHRASE_ALPHABET_SIZE,
    )


def generate(
    options: GenerationOptions,
    mode: Mode | str = Mode.PASSWORD,
    source: SecureRandomSource | None = None,
) -> GeneratedResult:
    """
    Validate options and run the generator for the given mode.

    Raises InvalidOptions for bad options and RandomnessUnavailable when
    the secure source cannot be read.
    """
    mode = coerce_mode(mode)
    validate_options(options)

    if mode is Mode.PASSPHRASE:
        return assemble_passphrase(options, source)
    return assemble_password(options, source)
