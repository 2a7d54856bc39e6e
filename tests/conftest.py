"""Shared fixtures."""

import random

import pytest


class FixedRng:
    """Stand-in for random.Random that always picks the same index."""

    def __init__(self, index: int = 0):
        self.index = index

    def randrange(self, n):
        return min(self.index, n - 1)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def fixed_rng():
    return FixedRng


@pytest.fixture
def gbk_file(tmp_path):
    """Write a GBK-encoded source file and return its path."""

    def _write(text: str, name: str = "novel.txt"):
        path = tmp_path / name
        path.write_bytes(text.encode("gbk"))
        return path

    return _write
