import math
import re
from concurrent.futures import ThreadPoolExecutor

import pytest

from securehex import (
    GenerationOptions,
    InvalidOptions,
    Mode,
    RandomnessUnavailable,
    generate,
)
from securehex.config import AMBIGUOUS, CharacterClass, DIGITS
from securehex.entropy import classify_strength
from securehex.generator import (
    PASSPHRASE_ALPHABET_SIZE,
    assemble_passphrase,
    assemble_password,
    insert_dashes,
    passphrase_word_count,
)
from securehex.random_source import SecureRandomSource
from securehex.wordlist import WORD_LIST

NONE_SELECTED = GenerationOptions(
    include_lowercase=False,
    include_uppercase=False,
    include_numbers=False,
    include_symbols=False,
)

TOKEN_RE = re.compile(r"^([A-Za-z]+)(\d{1,2})$")

CLASS_FLAGS = [
    "include_lowercase",
    "include_uppercase",
    "include_numbers",
    "include_symbols",
]


def all_flag_combinations():
    for mask in range(1, 16):
        yield {flag: bool(mask & (1 << i)) for i, flag in enumerate(CLASS_FLAGS)}


# ---------- password mode ----------


def test_default_password_scenario():
    result = generate(GenerationOptions(length=16), Mode.PASSWORD)
    assert len(result.secret) == 16
    assert result.charset_size == 89
    assert result.entropy_bits == pytest.approx(16 * math.log2(89))
    assert result.strength_tier == 4
    assert result.strength_label == "Strong"
    assert result.mode is Mode.PASSWORD


@pytest.mark.parametrize("flags", list(all_flag_combinations()))
def test_every_selected_class_is_present(flags):
    options = GenerationOptions(length=6, **flags)
    for _ in range(30):
        secret = generate(options).secret
        assert len(secret) == 6
        for cls in options.selected_classes():
            assert any(ch in cls.alphabet for ch in secret), cls


def test_no_class_selected_is_empty_result():
    result = generate(NONE_SELECTED, Mode.PASSWORD)
    assert result.secret == ""
    assert result.entropy_bits == 0
    assert result.strength_tier == 0
    assert result.strength_label == "None"


def test_exclude_ambiguous_applies_to_fill_characters():
    # Numbers only: one required digit from 0-9, the rest from 2-9.
    options = NONE_SELECTED.replace(
        include_numbers=True, exclude_ambiguous=True, length=64
    )
    for _ in range(20):
        result = generate(options)
        ambiguous = [ch for ch in result.secret if ch in AMBIGUOUS]
        assert len(ambiguous) <= 1
        assert result.charset_size == 8
        assert result.entropy_bits == pytest.approx(64 * 3.0)


def test_required_character_may_be_ambiguous(zero_source):
    # Every draw returns index 0, so the required digit is "0" even though
    # the fill charset starts at "2".
    options = NONE_SELECTED.replace(
        include_numbers=True, exclude_ambiguous=True, length=6
    )
    result = assemble_password(options, zero_source)
    assert sorted(result.secret) == sorted("022222")


def test_short_length_keeps_all_required_characters():
    options = GenerationOptions(length=2)
    result = assemble_password(options)
    assert len(result.secret) == 4
    for cls in CharacterClass:
        assert any(ch in cls.alphabet for ch in result.secret)
    assert result.entropy_bits == pytest.approx(4 * math.log2(89))


def test_dashes_inserted_and_removable():
    options = GenerationOptions(length=16, include_dashes=True)
    result = generate(options)
    secret = result.secret
    # "-" is also a symbol, so check dash positions rather than counts.
    assert len(secret) == 19
    assert [secret[i] for i in (4, 9, 14)] == ["-", "-", "-"]
    undashed = secret[:4] + secret[5:9] + secret[10:14] + secret[15:]
    assert len(undashed) == 16
    assert result.entropy_bits == pytest.approx(16 * math.log2(89))


def test_dashes_skipped_for_short_passwords():
    options = NONE_SELECTED.replace(
        include_lowercase=True, length=8, include_dashes=True
    )
    secret = generate(options).secret
    assert len(secret) == 8
    assert "-" not in secret


@pytest.mark.parametrize(
    "text, expected",
    [
        ("abcdefgh", "abcdefgh"),
        ("abcdefghi", "ab-cd-ef-gh-i"),
        ("abcdefghijkl", "abc-def-ghi-jkl"),
        ("abcdefghijklmnop", "abcd-efgh-ijkl-mnop"),
    ],
)
def test_insert_dashes(text, expected):
    assert insert_dashes(text) == expected


def test_insert_dashes_never_leads_with_dash():
    for n in range(9, 65):
        dashed = insert_dashes("x" * n)
        assert not dashed.startswith("-")
        assert dashed.replace("-", "") == "x" * n


def test_password_uses_injected_source(make_counting_source):
    options = NONE_SELECTED.replace(include_numbers=True, length=6)
    first = assemble_password(options, make_counting_source())
    second = assemble_password(options, make_counting_source())
    assert first.secret == second.secret
    assert set(first.secret) <= set(DIGITS)


# ---------- passphrase mode ----------


def test_default_passphrase_scenario():
    result = generate(GenerationOptions(length=16), Mode.PASSPHRASE)
    tokens = result.secret.split("-")
    assert len(tokens) == 4
    assert result.secret.count("-") == 3
    assert result.mode is Mode.PASSPHRASE
    assert result.charset_size == PASSPHRASE_ALPHABET_SIZE
    assert result.entropy_bits == pytest.approx(
        len(result.secret) * math.log2(62)
    )


@pytest.mark.parametrize("length", range(6, 65))
def test_passphrase_tokens(length):
    result = generate(GenerationOptions(length=length), "passphrase")
    tokens = result.secret.split("-")
    assert len(tokens) == passphrase_word_count(length)
    assert 4 <= len(tokens) <= 8
    for token in tokens:
        match = TOKEN_RE.match(token)
        assert match, token
        word, number = match.groups()
        assert word in WORD_LIST
        assert 0 <= int(number) < 100
        assert str(int(number)) == number


@pytest.mark.parametrize(
    "length, words",
    [(6, 4), (16, 4), (19, 4), (20, 5), (28, 7), (32, 8), (64, 8)],
)
def test_passphrase_word_count(length, words):
    assert passphrase_word_count(length) == words


def test_passphrase_ignores_class_flags():
    result = generate(NONE_SELECTED, Mode.PASSPHRASE)
    assert result.secret
    assert result.strength_tier >= 1


def test_passphrase_from_fixed_draws(zero_source):
    result = assemble_passphrase(GenerationOptions(length=16), zero_source)
    assert result.secret == "-".join([f"{WORD_LIST[0]}0"] * 4)


def test_passphrase_strength_tier():
    # Even the shortest passphrase (4 x "Sun0" + 3 dashes = 19 chars) is
    # above 59 bits under the 62-symbol estimate.
    result = generate(GenerationOptions(length=6), Mode.PASSPHRASE)
    assert result.strength_tier in (4, 5)


# ---------- boundary checks ----------


@pytest.mark.parametrize("length", [5, 65, 0, -3])
def test_out_of_range_length_rejected(length):
    with pytest.raises(InvalidOptions):
        generate(GenerationOptions(length=length))


@pytest.mark.parametrize("length", [16.0, "16", True])
def test_non_integer_length_rejected(length):
    with pytest.raises(InvalidOptions):
        generate(GenerationOptions(length=length))


def test_non_bool_flag_rejected():
    with pytest.raises(InvalidOptions):
        generate(GenerationOptions(include_symbols=1))


def test_unknown_mode_rejected():
    with pytest.raises(InvalidOptions):
        generate(GenerationOptions(), "pin")


def test_invalid_options_is_value_error():
    with pytest.raises(ValueError):
        generate(GenerationOptions(length=100))


def test_non_options_object_rejected():
    with pytest.raises(InvalidOptions):
        generate({"length": 16})


def test_randomness_failure_propagates():
    def broken(n):
        raise OSError("no entropy")

    with pytest.raises(RandomnessUnavailable):
        generate(GenerationOptions(), source=SecureRandomSource(broken))


def test_options_are_immutable():
    options = GenerationOptions()
    with pytest.raises(AttributeError):
        options.length = 32
    changed = options.replace(length=32)
    assert changed.length == 32
    assert options.length == 16


def undash(secret, length):
    """Drop the separators insert_dashes adds for a password of this length."""
    if length <= 8:
        return secret
    interval = length // 4
    out = []
    pos = 0
    for i in range(length):
        if i > 0 and i % interval == 0:
            assert secret[pos] == "-"
            pos += 1
        out.append(secret[pos])
        pos += 1
    assert pos == len(secret)
    return "".join(out)


def check_password_invariants(options, result):
    secret = result.secret
    if options.include_dashes:
        secret = undash(secret, options.length)
    assert len(secret) == options.length
    for cls in options.selected_classes():
        assert any(ch in cls.alphabet for ch in secret), cls
    assert result.strength_tier == classify_strength(result.entropy_bits)


def test_exclude_ambiguous_with_every_class():
    options = GenerationOptions(length=64, exclude_ambiguous=True)
    for _ in range(50):
        result = generate(options)
        ambiguous = [ch for ch in result.secret if ch in AMBIGUOUS]
        # Only the one required character per class may be ambiguous.
        assert len(ambiguous) <= len(options.selected_classes())
        assert result.charset_size == 84
        assert result.entropy_bits == pytest.approx(64 * math.log2(84))
        check_password_invariants(options, result)


def test_exclude_ambiguous_letters_only():
    options = NONE_SELECTED.replace(
        include_lowercase=True,
        include_uppercase=True,
        exclude_ambiguous=True,
        length=40,
    )
    for _ in range(50):
        result = generate(options)
        assert len([ch for ch in result.secret if ch in AMBIGUOUS]) <= 2
        assert result.charset_size == 49


def test_generate_from_many_threads():
    password_options = GenerationOptions(length=24, include_dashes=True)
    passphrase_options = GenerationOptions(length=32)

    def work(i):
        if i % 2:
            return Mode.PASSPHRASE, generate(passphrase_options, Mode.PASSPHRASE)
        return Mode.PASSWORD, generate(password_options, Mode.PASSWORD)

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(work, range(400)))

    assert len(results) == 400
    for mode, result in results:
        assert result.mode is mode
        if mode is Mode.PASSWORD:
            # 24 characters plus dashes before indices 6, 12 and 18.
            assert len(result.secret) == 27
            assert result.charset_size == 89
            check_password_invariants(password_options, result)
        else:
            tokens = result.secret.split("-")
            assert len(tokens) == 8
            assert all(TOKEN_RE.match(t) for t in tokens)
    assert len({r.secret for _mode, r in results}) == 400
