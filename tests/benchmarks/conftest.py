"""Deterministic sequence generators for performance benchmarks.

All generators produce fixed, reproducible sequences.  No random values.
Three tiers: 10, 500 and 2,000 elements.  Each tier provides a "similar"
pair (scattered substitutions and adjacent swaps) and a "dissimilar" pair
(disjoint alphabets, so the matching scan finds nothing).
"""

from __future__ import annotations

import pytest

ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def generate_text(length: int, offset: int = 0) -> str:
    """Return a deterministic lowercase string of ``length`` characters."""
    return "".join(ALPHABET[(i * 7 + offset) % len(ALPHABET)] for i in range(length))


def _make_similar(length: int) -> tuple[str, str]:
    """Copy of the text with every 10th element replaced and every 25th pair swapped."""
    left = generate_text(length)
    chars = list(left)
    for i in range(0, length, 10):
        chars[i] = "#"
    for i in range(1, length - 1, 25):
        chars[i], chars[i + 1] = chars[i + 1], chars[i]
    return left, "".join(chars)


def _make_dissimilar(length: int) -> tuple[str, str]:
    return generate_text(length), "".join(str(i % 10) for i in range(length))


@pytest.fixture
def pair_10_similar() -> tuple[str, str]:
    return _make_similar(10)


@pytest.fixture
def pair_10_dissimilar() -> tuple[str, str]:
    return _make_dissimilar(10)


@pytest.fixture
def pair_500_similar() -> tuple[str, str]:
    return _make_similar(500)


@pytest.fixture
def pair_500_dissimilar() -> tuple[str, str]:
    return _make_dissimilar(500)


@pytest.fixture
def pair_2k_similar() -> tuple[str, str]:
    return _make_similar(2_000)


@pytest.fixture
def pair_2k_dissimilar() -> tuple[str, str]:
    return _make_dissimilar(2_000)
