"""
Entropy estimate and strength tiers.
"""

from __future__ import annotations

import math

# (exclusive upper bound in bits, tier, label)
_TIERS = (
    (28.0, 1, "Very Weak"),
    (35.0, 2, "Weak"),
    (59.0, 3, "Fair"),
    (127.0, 4, "Strong"),
)
_TOP_TIER = (5, "Very Strong")

_LABELS = {tier: label for _bound, tier, label in _TIERS}
_LABELS[_TOP_TIER[0]] = _TOP_TIER[1]
_LABELS[0] = "None"


def estimate_entropy_bits(length: int, alphabet_size: int) -> float:
    """
    length * log2(alphabet_size), assuming uniform independent selection.
    """
    if length <= 0 or alphabet_size <= 0:
        return 0.0
    return length * math.log2(alphabet_size)


def classify_strength(entropy_bits: float) -> int:
    """
    Map entropy in bits to a tier from 1 (Very Weak) to 5 (Very Strong).
    """
    for bound, tier, _label in _TIERS:
        if entropy_bits < bound:
            return tier
    return _TOP_TIER[0]


def strength_label(tier: int) -> str:
    try:
        return _LABELS[tier]
    except KeyError:
        raise ValueError(f"Unknown strength tier {tier!r}") from None
