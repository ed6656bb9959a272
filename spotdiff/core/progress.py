from __future__ import annotations

import logging

from spotdiff.core.levels import MAX_LEVEL, MIN_LEVEL, is_unlocked
from spotdiff.core.storage import SettingsStore

logger = logging.getLogger(__name__)

CURRENT_LEVEL_KEY = "journeyCurrentLevel"
# One past the last level: every level completed.
ALL_COMPLETE = MAX_LEVEL + 1


class ProgressStore:
    """Journey progress: the highest unlocked level.

    Read from the settings store once at startup and written once per level
    completion. ``current_level`` never decreases except through ``reset``.
    """

    def __init__(self, store: SettingsStore) -> None:
        self._store = store
        self._current_level = self._load()

    @property
    def current_level(self) -> int:
        return self._current_level

    def get(self) -> int:
        return self._current_level

    def is_unlocked(self, level: int) -> bool:
        return is_unlocked(level, self._current_level)

    def all_complete(self) -> bool:
        return self._current_level >= ALL_COMPLETE

    def advance_to(self, level: int) -> int:
        """Raise the current level to ``level`` (capped); never lowers it."""
        target = min(level, ALL_COMPLETE)
        if target > self._current_level:
            logger.info("Journey advanced from level %d to %d", self._current_level, target)
            self._current_level = target
            self._store.set(CURRENT_LEVEL_KEY, self._current_level)
        return self._current_level

    def record_win(self, level: int) -> int:
        """Unlock the next level after winning the frontier level.

        Winning an already completed level leaves progress unchanged.
        """
        if level == self._current_level:
            return self.advance_to(level + 1)
        return self._current_level

    def reset(self) -> None:
        """Clear journey progress back to level 1."""
        self._current_level = MIN_LEVEL
        self._store.set(CURRENT_LEVEL_KEY, self._current_level)

    def _load(self) -> int:
        level = self._store.get_int(CURRENT_LEVEL_KEY, MIN_LEVEL)
        if level < MIN_LEVEL:
            logger.warning("Stored level %d below %d, starting from level 1", level, MIN_LEVEL)
            return MIN_LEVEL
        return min(level, ALL_COMPLETE)
