"""Shared fixtures for serbian-transliteration tests."""

import pytest

from serbian_transliteration import SkipOptions, Transliterator
from serbian_transliteration.skip import PlaceholderTable


@pytest.fixture
def table() -> PlaceholderTable:
    """Return a fresh placeholder table."""
    return PlaceholderTable()


@pytest.fixture
def default_options() -> SkipOptions:
    """Return the default skip options."""
    return SkipOptions()


@pytest.fixture
def transliterator() -> Transliterator:
    """Return a transliterator with default options."""
    return Transliterator()


@pytest.fixture
def cyrillic_alphabet() -> str:
    """The Serbian Cyrillic alphabet, upper then lower case."""
    return (
        "АБВГДЂЕЖЗИЈКЛЉМНЊОПРСТЋУФХЦЧЏШ"
        "абвгдђежзијклљмнњопрстћуфхцчџш"
    )
