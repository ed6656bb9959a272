from __future__ import annotations

from dataclasses import dataclass
from typing import List

from spotdiff.core.errors import OutOfRangeLevel
from spotdiff.core.session import GameMode, SessionRules

MIN_LEVEL = 1
MAX_LEVEL = 40
LEVELS_PER_SECTION = 10
SECTION_COUNT = MAX_LEVEL // LEVELS_PER_SECTION

ZEN_LAST_LEVEL = 10
NORMAL_LAST_LEVEL = 25

# Zen never applies the budget; the value only mirrors the "unlimited" label.
ZEN_ERROR_BUDGET = 10
DEFAULT_TIME_LIMIT = 300

# (last level of band, grid size, time limit in seconds)
_TIME_CHALLENGE_BANDS = (
    (27, 4, 120),
    (29, 5, 100),
    (31, 6, 80),
    (33, 7, 60),
    (35, 8, 40),
    (37, 8, 25),
)


@dataclass(frozen=True)
class LevelConfig:
    level: int
    size: int
    differences: int
    error_budget: int
    mode: GameMode
    time_limit: int

    @property
    def rules(self) -> SessionRules:
        return SessionRules(mode=self.mode, error_budget=self.error_budget, time_limit=self.time_limit)

    @property
    def section(self) -> int:
        return section_index(self.level)


def _check_level(level: int) -> None:
    if not MIN_LEVEL <= level <= MAX_LEVEL:
        raise OutOfRangeLevel(f"Level must be between {MIN_LEVEL} and {MAX_LEVEL}, got {level}")


def parameters_for(level: int) -> LevelConfig:
    """Return the generator and rule settings for a 1-based level."""
    _check_level(level)

    if level <= ZEN_LAST_LEVEL:
        step = (level - 1) // 2
        return LevelConfig(
            level=level,
            size=3 + step,
            differences=7 - step,
            error_budget=ZEN_ERROR_BUDGET,
            mode=GameMode.ZEN,
            time_limit=DEFAULT_TIME_LIMIT,
        )

    if level <= NORMAL_LAST_LEVEL:
        step = min((level - 11) // 2, 4)
        return LevelConfig(
            level=level,
            size=4 + step,
            differences=5,
            error_budget=5 - step,
            mode=GameMode.NORMAL,
            time_limit=DEFAULT_TIME_LIMIT,
        )

    size, time_limit = 8, max(5, 20 - (level - 37) * 5)
    for last, band_size, band_time in _TIME_CHALLENGE_BANDS:
        if level <= last:
            size, time_limit = band_size, band_time
            break
    return LevelConfig(
        level=level,
        size=size,
        differences=3,
        error_budget=max(1, 5 - (level - 25) // 3),
        mode=GameMode.TIME_CHALLENGE,
        time_limit=time_limit,
    )


def all_levels() -> List[LevelConfig]:
    return [parameters_for(level) for level in range(MIN_LEVEL, MAX_LEVEL + 1)]


def section_index(level: int) -> int:
    """0-based map section holding ``level``."""
    _check_level(level)
    return (level - 1) // LEVELS_PER_SECTION


def section_levels(index: int) -> range:
    if not 0 <= index < SECTION_COUNT:
        raise IndexError(f"Section index must be between 0 and {SECTION_COUNT - 1}, got {index}")
    first = index * LEVELS_PER_SECTION + 1
    return range(first, first + LEVELS_PER_SECTION)


def is_unlocked(level: int, current_level: int) -> bool:
    return level <= current_level


def is_completed(level: int, current_level: int) -> bool:
    return level < current_level
