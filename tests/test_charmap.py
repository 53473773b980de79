"""Tests for the character tables and Cyrillic → Latin conversion."""

import pytest

from serbian_transliteration import CYRILLIC_TO_LATIN, LATIN_TO_CYRILLIC, to_latin


# =============================================================================
# Tables
# =============================================================================


class TestTables:
    def test_table_sizes(self):
        assert len(CYRILLIC_TO_LATIN) == 60
        assert len(LATIN_TO_CYRILLIC) == 54

    def test_digraph_letters(self):
        assert CYRILLIC_TO_LATIN["љ"] == "lj"
        assert CYRILLIC_TO_LATIN["Њ"] == "Nj"
        assert CYRILLIC_TO_LATIN["Џ"] == "Dž"

    def test_latin_table_has_no_digraphs(self):
        assert all(len(key) == 1 for key in LATIN_TO_CYRILLIC)

    def test_single_letters_invert(self):
        for cyrillic, latin in CYRILLIC_TO_LATIN.items():
            if len(latin) == 1:
                assert LATIN_TO_CYRILLIC[latin] == cyrillic

    def test_tables_read_only(self):
        with pytest.raises(TypeError):
            CYRILLIC_TO_LATIN["а"] = "x"
        with pytest.raises(TypeError):
            LATIN_TO_CYRILLIC["a"] = "x"


# =============================================================================
# to_latin
# =============================================================================


class TestToLatin:
    def test_basic(self):
        assert to_latin("Добар дан") == "Dobar dan"

    def test_digraph_letters(self):
        assert to_latin("Љубав, Њежност, Џем") == "Ljubav, Nježnost, Džem"

    def test_mixed_content(self):
        assert to_latin("Београд (Belgrade)") == "Beograd (Belgrade)"

    def test_latin_passthrough(self):
        assert to_latin("Dobar dan, čačkalica đak") == "Dobar dan, čačkalica đak"

    def test_full_alphabet(self, cyrillic_alphabet):
        assert to_latin(cyrillic_alphabet) == (
            "ABVGDĐEŽZIJKLLjMNNjOPRSTĆUFHCČDžŠ"
            "abvgdđežzijklljmnnjoprstćufhcčdžš"
        )

    def test_non_serbian_cyrillic_passthrough(self):
        # Russian letters outside the Serbian alphabet
        assert to_latin("ыэ") == "ыэ"

    def test_empty(self):
        assert to_latin("") == ""

    def test_none(self):
        assert to_latin(None) == ""
