from __future__ import annotations

import string
from dataclasses import dataclass
from typing import List

from spotdiff.core.errors import AlphabetTooSmall

LETTERS: tuple[str, ...] = tuple(string.ascii_uppercase)
DIGITS: tuple[str, ...] = tuple(string.digits)
PICTOGRAMS: tuple[str, ...] = (
    "😀",
    "😂",
    "🎉",
    "🚀",
    "💡",
    "🎨",
    "⭐",
    "🌟",
    "💎",
    "🎭",
)


@dataclass(frozen=True)
class SymbolFlags:
    letters: bool = True
    digits: bool = True
    pictograms: bool = True

    def alphabet(self) -> List[str]:
        return build_alphabet(self.letters, self.digits, self.pictograms)


def build_alphabet(use_letters: bool, use_digits: bool, use_pictograms: bool) -> List[str]:
    """Return letters, digits and pictograms (in that order) for the enabled groups."""
    symbols: List[str] = []
    if use_letters:
        symbols.extend(LETTERS)
    if use_digits:
        symbols.extend(DIGITS)
    if use_pictograms:
        symbols.extend(PICTOGRAMS)
    if not symbols:
        raise AlphabetTooSmall("At least one symbol group must be enabled")
    return symbols
