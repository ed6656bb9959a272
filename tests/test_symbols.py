"""Tests for spotdiff.core.symbols – alphabet building."""

from __future__ import annotations

import pytest

from spotdiff.core.errors import AlphabetTooSmall, PuzzleError
from spotdiff.core.symbols import DIGITS, LETTERS, PICTOGRAMS, SymbolFlags, build_alphabet


# ---------------------------------------------------------------------------
# build_alphabet
# ---------------------------------------------------------------------------

class TestBuildAlphabet:
    def test_all_groups_in_order(self):
        symbols = build_alphabet(True, True, True)
        assert symbols == list(LETTERS) + list(DIGITS) + list(PICTOGRAMS)
        assert len(symbols) == 26 + 10 + 10

    def test_letters_only(self):
        symbols = build_alphabet(True, False, False)
        assert symbols[0] == "A"
        assert symbols[-1] == "Z"
        assert len(symbols) == 26

    def test_digits_only(self):
        assert build_alphabet(False, True, False) == [str(d) for d in range(10)]

    def test_pictograms_only(self):
        assert build_alphabet(False, False, True) == list(PICTOGRAMS)

    def test_digits_then_pictograms(self):
        symbols = build_alphabet(False, True, True)
        assert symbols[:10] == list(DIGITS)
        assert symbols[10:] == list(PICTOGRAMS)

    def test_symbols_are_distinct(self):
        symbols = build_alphabet(True, True, True)
        assert len(set(symbols)) == len(symbols)

    def test_no_groups_raises(self):
        with pytest.raises(AlphabetTooSmall):
            build_alphabet(False, False, False)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            build_alphabet(False, False, False)
        assert issubclass(AlphabetTooSmall, PuzzleError)

    def test_returns_new_list(self):
        a = build_alphabet(True, False, False)
        a.append("extra")
        assert "extra" not in build_alphabet(True, False, False)


# ---------------------------------------------------------------------------
# SymbolFlags
# ---------------------------------------------------------------------------

class TestSymbolFlags:
    def test_defaults_enable_everything(self):
        flags = SymbolFlags()
        assert flags.letters and flags.digits and flags.pictograms
        assert flags.alphabet() == build_alphabet(True, True, True)

    def test_alphabet_follows_flags(self):
        assert SymbolFlags(letters=False, pictograms=False).alphabet() == list(DIGITS)

    def test_frozen(self):
        flags = SymbolFlags()
        with pytest.raises(AttributeError):
            flags.letters = False  # type: ignore[misc]
