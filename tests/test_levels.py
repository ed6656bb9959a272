"""Tests for spotdiff.core.levels – the 40-level curriculum."""

from __future__ import annotations

import pytest

from spotdiff.core.errors import OutOfRangeLevel
from spotdiff.core.levels import (
    MAX_LEVEL,
    MIN_LEVEL,
    SECTION_COUNT,
    LevelConfig,
    all_levels,
    is_completed,
    is_unlocked,
    parameters_for,
    section_index,
    section_levels,
)
from spotdiff.core.session import GameMode, SessionRules


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------

class TestEndpoints:
    def test_first_level(self):
        assert parameters_for(1) == LevelConfig(
            level=1, size=3, differences=7, error_budget=10, mode=GameMode.ZEN, time_limit=300
        )

    def test_last_level(self):
        assert parameters_for(40) == LevelConfig(
            level=40, size=8, differences=3, error_budget=1, mode=GameMode.TIME_CHALLENGE, time_limit=5
        )

    @pytest.mark.parametrize("level", [0, -5, 41, 100])
    def test_out_of_range(self, level: int):
        with pytest.raises(OutOfRangeLevel):
            parameters_for(level)

    def test_out_of_range_is_value_error(self):
        with pytest.raises(ValueError):
            parameters_for(41)


# ---------------------------------------------------------------------------
# Bands
# ---------------------------------------------------------------------------

class TestZenBand:
    @pytest.mark.parametrize(
        "level,size,differences",
        [(1, 3, 7), (2, 3, 7), (3, 4, 6), (4, 4, 6), (5, 5, 5), (6, 5, 5), (7, 6, 4), (8, 6, 4), (9, 7, 3), (10, 7, 3)],
    )
    def test_size_and_differences(self, level: int, size: int, differences: int):
        cfg = parameters_for(level)
        assert (cfg.size, cfg.differences) == (size, differences)
        assert cfg.mode is GameMode.ZEN
        assert cfg.error_budget == 10
        assert cfg.time_limit == 300


class TestNormalBand:
    @pytest.mark.parametrize(
        "level,size,errors",
        [(11, 4, 5), (12, 4, 5), (13, 5, 4), (14, 5, 4), (15, 6, 3), (16, 6, 3), (17, 7, 2), (18, 7, 2), (19, 8, 1), (25, 8, 1)],
    )
    def test_size_and_budget(self, level: int, size: int, errors: int):
        cfg = parameters_for(level)
        assert (cfg.size, cfg.error_budget) == (size, errors)
        assert cfg.mode is GameMode.NORMAL
        assert cfg.differences == 5
        assert cfg.time_limit == 300


class TestTimeChallengeBand:
    @pytest.mark.parametrize(
        "level,size,time_limit",
        [
            (26, 4, 120), (27, 4, 120), (28, 5, 100), (29, 5, 100), (30, 6, 80), (31, 6, 80),
            (32, 7, 60), (33, 7, 60), (34, 8, 40), (35, 8, 40), (36, 8, 25), (37, 8, 25),
            (38, 8, 15), (39, 8, 10), (40, 8, 5),
        ],
    )
    def test_size_and_time(self, level: int, size: int, time_limit: int):
        cfg = parameters_for(level)
        assert (cfg.size, cfg.time_limit) == (size, time_limit)
        assert cfg.mode is GameMode.TIME_CHALLENGE
        assert cfg.differences == 3

    @pytest.mark.parametrize(
        "level,errors",
        [(26, 5), (27, 5), (28, 4), (30, 4), (31, 3), (34, 2), (37, 1), (40, 1)],
    )
    def test_error_budget(self, level: int, errors: int):
        assert parameters_for(level).error_budget == errors


class TestMonotonicity:
    def _pairs(self):
        for level in range(MIN_LEVEL, MAX_LEVEL):
            yield parameters_for(level), parameters_for(level + 1)

    def test_size_never_shrinks_within_band(self):
        for a, b in self._pairs():
            if a.mode is b.mode:
                assert b.size >= a.size, (a, b)

    def test_differences_never_grow_within_band(self):
        for a, b in self._pairs():
            if a.mode is b.mode:
                assert b.differences <= a.differences, (a, b)

    def test_budget_never_grows_in_scored_bands(self):
        for a, b in self._pairs():
            if a.mode is b.mode and a.mode is not GameMode.ZEN:
                assert b.error_budget <= a.error_budget, (a, b)

    def test_time_never_grows_in_time_challenge(self):
        for a, b in self._pairs():
            if a.mode is b.mode is GameMode.TIME_CHALLENGE:
                assert b.time_limit <= a.time_limit, (a, b)

    def test_differences_fit_grid(self):
        for cfg in all_levels():
            assert 1 <= cfg.differences <= cfg.size * cfg.size


# ---------------------------------------------------------------------------
# LevelConfig
# ---------------------------------------------------------------------------

class TestLevelConfig:
    def test_rules(self):
        assert parameters_for(30).rules == SessionRules(
            mode=GameMode.TIME_CHALLENGE, error_budget=4, time_limit=80
        )

    def test_section(self):
        assert parameters_for(10).section == 0
        assert parameters_for(11).section == 1

    def test_all_levels(self):
        levels = all_levels()
        assert len(levels) == 40
        assert [cfg.level for cfg in levels] == list(range(1, 41))

    def test_pure(self):
        assert parameters_for(17) == parameters_for(17)


# ---------------------------------------------------------------------------
# Sections and unlocking
# ---------------------------------------------------------------------------

class TestSections:
    @pytest.mark.parametrize("level,index", [(1, 0), (10, 0), (11, 1), (20, 1), (21, 2), (31, 3), (40, 3)])
    def test_section_index(self, level: int, index: int):
        assert section_index(level) == index

    def test_four_sections_of_ten(self):
        assert SECTION_COUNT == 4
        covered = [level for i in range(SECTION_COUNT) for level in section_levels(i)]
        assert covered == list(range(1, 41))

    def test_section_levels_out_of_range(self):
        with pytest.raises(IndexError):
            section_levels(4)

    def test_section_index_out_of_range(self):
        with pytest.raises(OutOfRangeLevel):
            section_index(0)


class TestUnlock:
    def test_unlocked_up_to_current(self):
        assert is_unlocked(1, 1)
        assert is_unlocked(5, 5)
        assert not is_unlocked(6, 5)

    def test_completed_below_current(self):
        assert is_completed(4, 5)
        assert not is_completed(5, 5)
