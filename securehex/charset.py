"""
Character-set construction for password mode.
"""

from __future__ import annotations

from .config import AMBIGUOUS, GenerationOptions


def build_charset(options: GenerationOptions) -> str:
    """
    Concatenate the seed alphabets of the selected classes.

    Order is canonical (lowercase, uppercase, digits, symbols) so the same
    options always index the same string. The seed alphabets are disjoint,
    so no deduplication is needed. With exclude_ambiguous, O 0 I l 1 are
    filtered out. Returns "" when no class is selected.
    """
    charset = "".join(cls.alphabet for cls in options.selected_classes())

    if options.exclude_ambiguous:
        charset = "".join(ch for ch in charset if ch not in AMBIGUOUS)

    return charset
