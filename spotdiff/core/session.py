from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, FrozenSet, List, Optional

from spotdiff.core.puzzle import Coordinate, Puzzle

logger = logging.getLogger(__name__)

TIME_BONUS_SECONDS = 3
ERROR_FLASH_MS = 500


class GameMode(str, Enum):
    ZEN = "Zen"
    NORMAL = "Normal"
    TIME_CHALLENGE = "Time Challenge"


class Outcome(str, Enum):
    PENDING = "pending"
    WON = "won"
    LOST = "lost"


class SessionEvent(str, Enum):
    CORRECT_FIND = "correct_find"
    MISTAKE = "mistake"
    WON = "won"
    LOST = "lost"
    IGNORED = "ignored"


@dataclass(frozen=True)
class SessionRules:
    """Rule set for one attempt. ``error_budget <= 0`` means unlimited."""

    mode: GameMode
    error_budget: int = 0
    time_limit: int = 300

    @property
    def counts_errors(self) -> bool:
        return self.mode is not GameMode.ZEN

    @property
    def is_timed(self) -> bool:
        return self.mode is GameMode.TIME_CHALLENGE


@dataclass
class ClickResult:
    """Outcome of a single cell click."""

    event: SessionEvent
    coordinate: Coordinate
    outcome: Outcome


Listener = Callable[[SessionEvent, Optional[Coordinate]], None]


class GameSession:
    """Tracks one attempt at a puzzle under a rule mode.

    Pending is the only non-terminal state. Won and Lost are left only through
    ``reset`` with a freshly generated puzzle.

    Mistakes (clicks on cells that are equal in both grids) count against the
    error budget in Normal and Time Challenge modes; Zen only reports them.
    Time Challenge sessions count down on every ``tick`` and earn
    ``TIME_BONUS_SECONDS`` per correct find.
    """

    def __init__(self, puzzle: Puzzle, rules: SessionRules) -> None:
        self._listeners: List[Listener] = []
        self._start(puzzle, rules)

    def _start(self, puzzle: Puzzle, rules: SessionRules) -> None:
        self._puzzle = puzzle
        self._rules = rules
        self._found: set[Coordinate] = set()
        self._error_count = 0
        self._elapsed = 0
        self._time_remaining: Optional[int] = rules.time_limit if rules.is_timed else None
        self._outcome = Outcome.PENDING
        self._loss_reason: Optional[str] = None
        self._last_mistake: Optional[Coordinate] = None

    @property
    def puzzle(self) -> Puzzle:
        return self._puzzle

    @property
    def rules(self) -> SessionRules:
        return self._rules

    @property
    def found(self) -> FrozenSet[Coordinate]:
        return frozenset(self._found)

    @property
    def remaining(self) -> int:
        """Number of differences not found yet."""
        return len(self._puzzle.differences) - len(self._found)

    @property
    def error_count(self) -> int:
        return self._error_count

    @property
    def elapsed_seconds(self) -> int:
        return self._elapsed

    @property
    def time_remaining(self) -> Optional[int]:
        return self._time_remaining

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def loss_reason(self) -> Optional[str]:
        return self._loss_reason

    @property
    def last_mistake(self) -> Optional[Coordinate]:
        """Most recent mistake, for the error flash. Cosmetic only."""
        return self._last_mistake

    def is_over(self) -> bool:
        return self._outcome is not Outcome.PENDING

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def on_cell_click(self, row: int, col: int) -> ClickResult:
        coord = Coordinate(row, col)
        if not self._puzzle.contains(coord):
            raise IndexError(f"Cell {coord} outside {self._puzzle.size}x{self._puzzle.size} grid")
        if self.is_over():
            return ClickResult(SessionEvent.IGNORED, coord, self._outcome)

        base = self._puzzle.base[row][col]
        modified = self._puzzle.modified[row][col]
        if base == modified:
            return self._register_mistake(coord)

        if coord in self._found or coord not in self._puzzle.differences:
            return ClickResult(SessionEvent.IGNORED, coord, self._outcome)

        self._found.add(coord)
        if self._rules.is_timed and self._time_remaining is not None:
            self._time_remaining += TIME_BONUS_SECONDS
        self._emit(SessionEvent.CORRECT_FIND, coord)

        if len(self._found) == len(self._puzzle.differences):
            self._outcome = Outcome.WON
            logger.info("Puzzle solved after %d errors in %ds", self._error_count, self._elapsed)
            self._emit(SessionEvent.WON, coord)
            return ClickResult(SessionEvent.WON, coord, self._outcome)
        return ClickResult(SessionEvent.CORRECT_FIND, coord, self._outcome)

    def _register_mistake(self, coord: Coordinate) -> ClickResult:
        self._last_mistake = coord
        if self._rules.counts_errors:
            self._error_count += 1
        self._emit(SessionEvent.MISTAKE, coord)

        budget = self._rules.error_budget
        if self._rules.counts_errors and budget > 0 and self._error_count >= budget:
            self._lose("errors", coord)
            return ClickResult(SessionEvent.LOST, coord, self._outcome)
        return ClickResult(SessionEvent.MISTAKE, coord, self._outcome)

    def tick(self) -> GameSession:
        """Advance the clock by one second. No-op once the session is over."""
        if self.is_over():
            return self
        self._elapsed += 1
        if self._rules.is_timed and self._time_remaining is not None:
            self._time_remaining -= 1
            if self._time_remaining <= 0:
                self._time_remaining = 0
                self._lose("time", None)
        return self

    def reset(self, puzzle: Puzzle, rules: SessionRules) -> GameSession:
        """Start a new attempt. The previous puzzle is never reused."""
        if puzzle is self._puzzle:
            raise ValueError("reset() requires a newly generated puzzle")
        self._start(puzzle, rules)
        return self

    def _lose(self, reason: str, coord: Optional[Coordinate]) -> None:
        self._outcome = Outcome.LOST
        self._loss_reason = reason
        logger.info("Puzzle lost (%s) with %d/%d found", reason, len(self._found), len(self._puzzle.differences))
        self._emit(SessionEvent.LOST, coord)

    def _emit(self, event: SessionEvent, coord: Optional[Coordinate]) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, coord)
            except Exception:
                logger.warning("Session listener failed on %s", event.value, exc_info=True)


def create_session(puzzle: Puzzle, rules: SessionRules) -> GameSession:
    return GameSession(puzzle, rules)
