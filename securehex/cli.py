"""
Command-line interface for the SecureHex generator.
"""

from __future__ import annotations

import logging
import sys
from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser

from .config import (
    DEFAULT_OPTIONS,
    MAX_LENGTH,
    MIN_LENGTH,
    GenerationOptions,
    InvalidOptions,
    Mode,
    SecureHexError,
)
from .export import write_secret_file
from .generator import GeneratedResult, generate

logger = logging.getLogger(__name__)


def build_parser() -> ArgumentParser:
    p = ArgumentParser(
        prog="securehex",
        description="Generate a random password or passphrase.",
        formatter_class=ArgumentDefaultsHelpFormatter,
    )
    p.add_argument(
        "-m",
        "--mode",
        choices=[m.value for m in Mode],
        default=Mode.PASSWORD.value,
        help="generation mode",
    )
    p.add_argument(
        "-l",
        "--length",
        type=int,
        default=DEFAULT_OPTIONS.length,
        help=f"length in characters ({MIN_LENGTH}-{MAX_LENGTH}); "
        "in passphrase mode it sets the word count (length // 4, 4 to 8)",
    )
    p.add_argument("--no-lowercase", action="store_true", help="omit a-z")
    p.add_argument("--no-uppercase", action="store_true", help="omit A-Z")
    p.add_argument("--no-numbers", action="store_true", help="omit 0-9")
    p.add_argument("--no-symbols", action="store_true", help="omit symbols")
    p.add_argument(
        "--exclude-ambiguous",
        action="store_true",
        help="leave O 0 I l 1 out of the fill characters",
    )
    p.add_argument(
        "--dashes",
        action="store_true",
        help="split passwords longer than 8 characters with dashes",
    )
    p.add_argument(
        "-n", "--count", type=int, default=1, help="how many secrets to generate"
    )
    p.add_argument(
        "-o",
        "--output",
        metavar="DIR",
        default=None,
        help="also save each secret to a text file in DIR",
    )
    p.add_argument(
        "-q", "--quiet", action="store_true", help="print only the secrets"
    )
    p.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    return p


def options_from_args(args) -> GenerationOptions:
    return GenerationOptions(
        length=args.length,
        include_lowercase=not args.no_lowercase,
        include_uppercase=not args.no_uppercase,
        include_numbers=not args.no_numbers,
        include_symbols=not args.no_symbols,
        exclude_ambiguous=args.exclude_ambiguous,
        include_dashes=args.dashes,
    )


def format_result(result: GeneratedResult) -> str:
    if not result.secret:
        return "No character class selected; nothing generated."
    return (
        f"{result.secret}\n"
        f"  strength: {result.strength_label} "
        f"({result.entropy_bits:.1f} bits of entropy)"
    )


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for `securehex` and `run_securehex.py`.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.count < 1:
        parser.error("--count must be at least 1")

    options = options_from_args(args)

    try:
        for _ in range(args.count):
            result = generate(options, args.mode)
            print(result.secret if args.quiet else format_result(result))

            if args.output is not None and result.secret:
                path = write_secret_file(result.secret, args.output)
                if not args.quiet:
                    print(f"  saved to {path}")
    except InvalidOptions as exc:
        parser.error(str(exc))
    except SecureHexError as exc:
        logger.debug("Generation failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    return 0
