import itertools

import pytest

from securehex.random_source import SecureRandomSource


def counting_reader(start: int = 0):
    """Byte reader yielding consecutive 32-bit big-endian words."""
    counter = itertools.count(start)

    def read(n: int) -> bytes:
        assert n == 4
        return next(counter).to_bytes(4, "big")

    return read


@pytest.fixture
def counting_source():
    return SecureRandomSource(counting_reader())


@pytest.fixture
def zero_source():
    return SecureRandomSource(lambda n: bytes(n))


@pytest.fixture
def make_counting_source():
    def factory(start: int = 0) -> SecureRandomSource:
        return SecureRandomSource(counting_reader(start))

    return factory
