"""Free-play game settings and their persistence."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import List

from spotdiff.core.session import GameMode, SessionRules
from spotdiff.core.storage import SettingsStore
from spotdiff.core.symbols import SymbolFlags

logger = logging.getLogger(__name__)

SIZE_CHOICES = (3, 4, 5, 6, 8)
DEFAULT_DIFFERENCES = 3

_KEYS = {
    "size": "gameMatrixSize",
    "differences": "gameNumDifferences",
    "letters": "gameUseLetters",
    "digits": "gameUseNumbers",
    "pictograms": "gameUseEmojis",
    "sounds": "gameSounds",
    "mode": "gameMode",
    "error_budget": "gameErrors",
    "time_limit": "gameTimeLimit",
}


def max_differences(size: int) -> int:
    return size * size // 2


@dataclass(frozen=True)
class GameConfig:
    """Settings chosen on the home screen for free play."""

    size: int = 4
    differences: int = DEFAULT_DIFFERENCES
    symbols: SymbolFlags = SymbolFlags()
    sounds: bool = True
    mode: GameMode = GameMode.ZEN
    error_budget: int = 0
    time_limit: int = 300

    @property
    def max_differences(self) -> int:
        return max_differences(self.size)

    @property
    def rules(self) -> SessionRules:
        return SessionRules(mode=self.mode, error_budget=self.error_budget, time_limit=self.time_limit)

    def alphabet(self) -> List[str]:
        return self.symbols.alphabet()

    def with_size(self, size: int) -> GameConfig:
        """Pick a new grid size; the difference count goes back to its default."""
        if size not in SIZE_CHOICES:
            raise ValueError(f"Size must be one of {SIZE_CHOICES}, got {size}")
        return replace(self, size=size, differences=min(DEFAULT_DIFFERENCES, max_differences(size)))

    @classmethod
    def load(cls, store: SettingsStore) -> GameConfig:
        default = cls()
        size = store.get_int(_KEYS["size"], default.size)
        if size not in SIZE_CHOICES:
            logger.warning("Stored size %d not in %s, using %d", size, SIZE_CHOICES, default.size)
            size = default.size
        differences = store.get_int(_KEYS["differences"], default.differences)
        if not 1 <= differences <= max_differences(size):
            logger.warning("Stored difference count %d invalid for size %d", differences, size)
            differences = min(DEFAULT_DIFFERENCES, max_differences(size))
        symbols = SymbolFlags(
            letters=store.get_bool(_KEYS["letters"], True),
            digits=store.get_bool(_KEYS["digits"], True),
            pictograms=store.get_bool(_KEYS["pictograms"], True),
        )
        if not (symbols.letters or symbols.digits or symbols.pictograms):
            logger.warning("No symbol group enabled in settings, enabling all")
            symbols = SymbolFlags()
        try:
            mode = GameMode(store.get(_KEYS["mode"], default.mode.value))
        except ValueError:
            logger.warning("Unknown game mode %r, using %s", store.get(_KEYS["mode"]), default.mode.value)
            mode = default.mode
        return cls(
            size=size,
            differences=differences,
            symbols=symbols,
            sounds=store.get_bool(_KEYS["sounds"], default.sounds),
            mode=mode,
            error_budget=store.get_int(_KEYS["error_budget"], default.error_budget),
            time_limit=max(1, store.get_int(_KEYS["time_limit"], default.time_limit)),
        )

    def save(self, store: SettingsStore) -> None:
        store.set(_KEYS["size"], self.size)
        store.set(_KEYS["differences"], self.differences)
        store.set(_KEYS["letters"], self.symbols.letters)
        store.set(_KEYS["digits"], self.symbols.digits)
        store.set(_KEYS["pictograms"], self.symbols.pictograms)
        store.set(_KEYS["sounds"], self.sounds)
        store.set(_KEYS["mode"], self.mode.value)
        store.set(_KEYS["error_budget"], self.error_budget)
        store.set(_KEYS["time_limit"], self.time_limit)
