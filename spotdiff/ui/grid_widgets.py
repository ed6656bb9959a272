"""Symbol grid widgets for the game screen."""

from __future__ import annotations

from typing import Dict, Optional

from PySide6.QtCore import Qt, QTimer, Signal
from PySide6.QtWidgets import QGridLayout, QLabel, QPushButton, QWidget

from spotdiff.core.puzzle import Coordinate, Grid
from spotdiff.ui.colors import GameColors

_CELL_PX = 44


def _cell_style(background: str, border: str, text: str = GameColors.TEXT_PRIMARY) -> str:
    return (
        f"background: {background}; border: 2px solid {border}; border-radius: 8px;"
        f" color: {text}; font-size: 18px; font-weight: bold;"
    )


class SymbolGridWidget(QWidget):
    """Square grid of symbols. Interactive grids emit ``cell_clicked(row, col)``."""

    cell_clicked = Signal(int, int)

    def __init__(self, *, interactive: bool, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._interactive = interactive
        self._cells: Dict[Coordinate, QWidget] = {}
        self._found: set[Coordinate] = set()
        self._layout = QGridLayout(self)
        self._layout.setSpacing(4)
        self._layout.setContentsMargins(8, 8, 8, 8)

    def set_grid(self, grid: Grid) -> None:
        """Replace all cells with the symbols of ``grid``."""
        for widget in self._cells.values():
            self._layout.removeWidget(widget)
            widget.deleteLater()
        self._cells.clear()
        self._found.clear()

        for row, symbols in enumerate(grid):
            for col, symbol in enumerate(symbols):
                coord = Coordinate(row, col)
                if self._interactive:
                    cell = QPushButton(symbol)
                    cell.setCursor(Qt.PointingHandCursor)
                    cell.clicked.connect(lambda _=False, r=row, c=col: self.cell_clicked.emit(r, c))
                else:
                    cell = QLabel(symbol)
                    cell.setAlignment(Qt.AlignCenter)
                cell.setFixedSize(_CELL_PX, _CELL_PX)
                cell.setStyleSheet(_cell_style(GameColors.CELL_BG, GameColors.CELL_BORDER))
                self._layout.addWidget(cell, row, col)
                self._cells[coord] = cell

    def mark_found(self, coord: Coordinate) -> None:
        cell = self._cells.get(coord)
        if cell is None:
            return
        self._found.add(coord)
        cell.setStyleSheet(_cell_style(GameColors.ACCENT, GameColors.ACCENT, GameColors.ACCENT_TEXT))
        if isinstance(cell, QPushButton):
            cell.setEnabled(False)

    def flash_error(self, coord: Coordinate, duration_ms: int) -> None:
        """Tint a cell red for ``duration_ms``; purely visual."""
        cell = self._cells.get(coord)
        if cell is None:
            return
        cell.setStyleSheet(_cell_style(GameColors.ERROR_FLASH, GameColors.ERROR_FLASH, GameColors.ACCENT_TEXT))
        QTimer.singleShot(duration_ms, lambda: self._clear_flash(coord))

    def _clear_flash(self, coord: Coordinate) -> None:
        cell = self._cells.get(coord)
        # The grid may have been rebuilt for a new puzzle in the meantime.
        if cell is None or coord in self._found:
            return
        cell.setStyleSheet(_cell_style(GameColors.CELL_BG, GameColors.CELL_BORDER))

    def set_locked(self, locked: bool) -> None:
        for coord, cell in self._cells.items():
            if isinstance(cell, QPushButton) and coord not in self._found:
                cell.setEnabled(not locked)
