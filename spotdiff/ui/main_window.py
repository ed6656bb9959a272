from __future__ import annotations

import logging
import random
from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from spotdiff.core.config import GameConfig
from spotdiff.core.errors import PuzzleError
from spotdiff.core.journey import JourneyMap
from spotdiff.core.levels import MAX_LEVEL, parameters_for
from spotdiff.core.progress import ProgressStore
from spotdiff.core.puzzle import Coordinate, Puzzle, generate_puzzle
from spotdiff.core.session import (
    ERROR_FLASH_MS,
    GameMode,
    GameSession,
    Outcome,
    SessionEvent,
    SessionRules,
    create_session,
)
from spotdiff.core.storage import SettingsStore
from spotdiff.core.symbols import SymbolFlags
from spotdiff.ui.colors import GameColors, mode_color
from spotdiff.ui.grid_widgets import SymbolGridWidget
from spotdiff.ui.level_map import LevelMapWidget
from spotdiff.ui.models import build_level_states
from spotdiff.ui.settings_dialog import SettingsDialog
from spotdiff.ui.sounds import SoundPlayer

logger = logging.getLogger(__name__)

TICK_MS = 1000

# Journey levels always draw from every symbol group.
JOURNEY_SYMBOLS = SymbolFlags()


def _title_label(text: str, size: int = 28) -> QLabel:
    label = QLabel(text)
    label.setAlignment(Qt.AlignCenter)
    label.setStyleSheet(f"color: {GameColors.PRIMARY}; font-size: {size}px; font-weight: bold;")
    return label


class MainWindow(QMainWindow):
    """Home, journey and game screens around a single active session."""

    def __init__(
        self,
        *,
        settings: SettingsStore,
        progress_store: ProgressStore,
        journey: JourneyMap,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Find the Differences")
        self._settings = settings
        self._progress_store = progress_store
        self._journey = journey
        self._rng = rng or random.Random()
        self._config = GameConfig.load(settings)

        self._session: Optional[GameSession] = None
        self._level: Optional[int] = None
        self._sound_player = SoundPlayer(enabled=self._config.sounds, parent=self)

        self._tick_timer = QTimer(self)
        self._tick_timer.setInterval(TICK_MS)
        self._tick_timer.timeout.connect(self._on_tick)

        self._stack = QStackedWidget()
        self._home = self._build_home()
        self._journey_page = self._build_journey()
        self._game_page = self._build_game()
        for page in (self._home, self._journey_page, self._game_page):
            self._stack.addWidget(page)
        self.setCentralWidget(self._stack)
        self._stack.setStyleSheet(
            f"QStackedWidget {{ background: qlineargradient(x1:0, y1:0, x2:0, y2:1,"
            f" stop:0 {GameColors.BG_TOP}, stop:1 {GameColors.BG_BOTTOM}); }}"
        )
        self._show_home()

    # ------------------------------------------------------------------
    # Pages
    # ------------------------------------------------------------------

    def _build_home(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.addStretch(1)
        layout.addWidget(_title_label("Find the Differences", 36))
        subtitle = QLabel("Spot all the differences between the two matrices!")
        subtitle.setAlignment(Qt.AlignCenter)
        subtitle.setStyleSheet(f"color: {GameColors.TEXT_MUTED};")
        layout.addWidget(subtitle)

        for text, slot in (
            ("Play", self._start_free_play),
            ("Journey", self._show_journey),
            ("Settings", self._open_settings),
        ):
            button = QPushButton(text)
            button.setMinimumHeight(48)
            button.setMaximumWidth(360)
            button.clicked.connect(slot)
            layout.addWidget(button, 0, Qt.AlignHCenter)
        layout.addStretch(1)
        return page

    def _build_journey(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        top = QHBoxLayout()
        self._journey_status = QLabel()
        self._journey_status.setStyleSheet(f"color: {GameColors.TEXT_PRIMARY}; font-weight: bold;")
        home = QPushButton("Home")
        home.clicked.connect(self._show_home)
        reset = QPushButton("Reset progress")
        reset.clicked.connect(self._reset_progress)
        top.addWidget(self._journey_status, 1)
        top.addWidget(reset)
        top.addWidget(home)
        layout.addLayout(top)
        self._level_map = LevelMapWidget(self._journey, on_level_click=self._start_level)
        layout.addWidget(self._level_map, 1)
        return page

    def _build_game(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)

        header = QHBoxLayout()
        self._game_title = _title_label("Find the Differences")
        self._mode_badge = QLabel()
        self._mode_badge.setAlignment(Qt.AlignCenter)
        back = QPushButton("⚙️")
        back.setToolTip("Back")
        back.clicked.connect(self._leave_game)
        header.addWidget(self._mode_badge)
        header.addWidget(self._game_title, 1)
        header.addWidget(back)
        layout.addLayout(header)

        self._status = QLabel()
        self._status.setAlignment(Qt.AlignCenter)
        self._status.setStyleSheet(f"color: {GameColors.TEXT_PRIMARY}; font-size: 16px;")
        layout.addWidget(self._status)

        grids = QHBoxLayout()
        self._base_grid = SymbolGridWidget(interactive=False)
        self._modified_grid = SymbolGridWidget(interactive=True)
        self._modified_grid.cell_clicked.connect(self._on_cell_clicked)
        for caption, grid in (("Original", self._base_grid), ("Find Differences", self._modified_grid)):
            column = QVBoxLayout()
            column.addWidget(_title_label(caption, 16))
            column.addWidget(grid, 0, Qt.AlignHCenter)
            column.addStretch(1)
            grids.addLayout(column)
        layout.addLayout(grids, 1)
        return page

    def _show_home(self) -> None:
        self._stop_timer()
        self._stack.setCurrentWidget(self._home)

    def _show_journey(self) -> None:
        self._stop_timer()
        current = self._progress_store.current_level
        self._level_map.set_states(build_level_states(self._journey, current))
        if self._progress_store.all_complete():
            self._journey_status.setText("Journey complete!")
        else:
            section = self._journey.section_for(current)
            self._journey_status.setText(f"Level {current} · {section.title}")
        self._stack.setCurrentWidget(self._journey_page)

    # ------------------------------------------------------------------
    # Starting games
    # ------------------------------------------------------------------

    def _start_free_play(self) -> None:
        cfg = self._config
        self._begin(cfg.size, cfg.alphabet(), cfg.differences, cfg.rules, level=None)

    def _start_level(self, level: int) -> None:
        if not self._progress_store.is_unlocked(level):
            logger.info("Level %d is locked", level)
            return
        cfg = parameters_for(level)
        self._begin(cfg.size, JOURNEY_SYMBOLS.alphabet(), cfg.differences, cfg.rules, level=level)

    def _begin(self, size: int, alphabet: list[str], differences: int, rules: SessionRules, level: Optional[int]) -> None:
        try:
            puzzle = generate_puzzle(size, alphabet, differences, self._rng)
        except PuzzleError as e:
            logger.error("Could not generate puzzle: %s", e)
            QMessageBox.warning(self, "Find the Differences", str(e))
            return

        self._level = level
        if self._session is None:
            self._session = create_session(puzzle, rules)
            self._session.add_listener(self._sound_player)
        else:
            self._session.reset(puzzle, rules)
        logger.info(
            "Starting %s: %dx%d, %d differences, %s",
            f"level {level}" if level else "free play",
            size,
            size,
            differences,
            rules.mode.value,
        )
        self._show_puzzle(puzzle, rules)
        self._stack.setCurrentWidget(self._game_page)
        self._tick_timer.start()

    def _show_puzzle(self, puzzle: Puzzle, rules: SessionRules) -> None:
        self._base_grid.set_grid(puzzle.base)
        self._modified_grid.set_grid(puzzle.modified)
        self._game_title.setText(f"Level {self._level}" if self._level else "Find the Differences")
        self._mode_badge.setText(rules.mode.value)
        self._mode_badge.setStyleSheet(
            f"background: {mode_color(rules.mode)}; border-radius: 10px; padding: 4px 10px; font-weight: bold;"
        )
        self._update_status()

    # ------------------------------------------------------------------
    # Session events
    # ------------------------------------------------------------------

    def _on_cell_clicked(self, row: int, col: int) -> None:
        if self._session is None:
            return
        result = self._session.on_cell_click(row, col)
        if result.event is SessionEvent.MISTAKE or (
            result.event is SessionEvent.LOST and self._session.loss_reason == "errors"
        ):
            self._modified_grid.flash_error(result.coordinate, ERROR_FLASH_MS)
        elif result.event in (SessionEvent.CORRECT_FIND, SessionEvent.WON):
            self._mark_found(result.coordinate)
        self._update_status()
        if self._session.is_over():
            self._finish()

    def _on_tick(self) -> None:
        if self._session is None or self._session.is_over():
            self._stop_timer()
            return
        self._session.tick()
        self._update_status()
        if self._session.is_over():
            self._finish()

    def _mark_found(self, coord: Coordinate) -> None:
        self._base_grid.mark_found(coord)
        self._modified_grid.mark_found(coord)

    def _update_status(self) -> None:
        session = self._session
        if session is None:
            return
        total = len(session.puzzle.differences)
        parts = [f"Found: {len(session.found)} / {total}"]
        rules = session.rules
        if rules.mode is not GameMode.ZEN:
            budget = "∞" if rules.error_budget <= 0 else str(rules.error_budget)
            parts.append(f"Errors: {session.error_count} / {budget}")
        if session.time_remaining is not None:
            parts.append(f"Time: {session.time_remaining}s")
        else:
            parts.append(f"Time: {session.elapsed_seconds}s")
        self._status.setText("   ·   ".join(parts))

    def _finish(self) -> None:
        self._stop_timer()
        self._modified_grid.set_locked(True)
        session = self._session
        if session is None:
            return

        box = QMessageBox(self)
        box.setWindowTitle("Find the Differences")
        next_button = None
        if session.outcome is Outcome.WON:
            box.setText("🎉 You Won! 🎉")
            box.setInformativeText("You found all the differences!")
            if self._level is not None:
                self._progress_store.record_win(self._level)
                if self._level < MAX_LEVEL:
                    next_button = box.addButton("Next Level", QMessageBox.AcceptRole)
        else:
            box.setText("Game Over")
            box.setInformativeText(
                "Time's up!" if session.loss_reason == "time" else "Too many mistakes!"
            )
        again = box.addButton("Play Again", QMessageBox.AcceptRole)
        box.addButton("Close", QMessageBox.RejectRole)
        box.exec()

        clicked = box.clickedButton()
        if next_button is not None and clicked is next_button:
            self._start_level(self._level + 1)
        elif clicked is again:
            self._replay()
        else:
            self._leave_game()

    def _replay(self) -> None:
        if self._level is None:
            self._start_free_play()
        else:
            self._start_level(self._level)

    def _leave_game(self) -> None:
        if self._level is None:
            self._show_home()
        else:
            self._show_journey()

    def _stop_timer(self) -> None:
        if self._tick_timer.isActive():
            self._tick_timer.stop()

    # ------------------------------------------------------------------
    # Settings / progress
    # ------------------------------------------------------------------

    def _open_settings(self) -> None:
        dialog = SettingsDialog(self._config, self)
        if dialog.exec():
            self._config = dialog.config()
            self._config.save(self._settings)
            self._sound_player.enabled = self._config.sounds
            logger.info("Saved settings: %s", self._config)

    def _reset_progress(self) -> None:
        answer = QMessageBox.question(
            self,
            "Reset progress",
            "Start the journey again from level 1?",
            QMessageBox.Yes | QMessageBox.No,
        )
        if answer == QMessageBox.Yes:
            self._progress_store.reset()
            self._show_journey()

    def closeEvent(self, event: QCloseEvent) -> None:
        self._stop_timer()
        super().closeEvent(event)
