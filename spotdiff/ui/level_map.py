"""Journey map: level nodes laid out over the map canvas, grouped by section."""

from __future__ import annotations

from typing import Callable, List, Optional

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QLinearGradient, QPainter, QPen
from PySide6.QtWidgets import QWidget

from spotdiff.core.journey import JourneyMap
from spotdiff.ui.colors import GameColors, blend_hex, mode_color
from spotdiff.ui.models import LevelState

_NODE_RADIUS = 16


class LevelMapWidget(QWidget):
    """Paints the 40 journey nodes and reports clicks on unlocked ones."""

    def __init__(
        self,
        journey: JourneyMap,
        *,
        on_level_click: Callable[[int], None],
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._journey = journey
        self._on_level_click = on_level_click
        self._states: List[LevelState] = []
        canvas_w, canvas_h = journey.canvas_size
        self.setMinimumSize(canvas_w // 2, canvas_h // 2)
        self.setMouseTracking(True)

    def set_states(self, states: List[LevelState]) -> None:
        self._states = list(states)
        self.update()

    def _scale(self) -> float:
        canvas_w, canvas_h = self._journey.canvas_size
        return min(self.width() / canvas_w, self.height() / canvas_h)

    def _node_center(self, state: LevelState) -> QPointF:
        canvas_w, canvas_h = self._journey.canvas_size
        s = self._scale()
        offset_x = (self.width() - canvas_w * s) / 2
        offset_y = (self.height() - canvas_h * s) / 2
        return QPointF(offset_x + state.node.x * s, offset_y + state.node.y * s)

    def _state_at(self, pos: QPointF) -> Optional[LevelState]:
        radius = _NODE_RADIUS * max(self._scale(), 0.6)
        for state in self._states:
            center = self._node_center(state)
            dx, dy = pos.x() - center.x(), pos.y() - center.y()
            if dx * dx + dy * dy <= radius * radius:
                return state
        return None

    def mousePressEvent(self, event) -> None:
        state = self._state_at(event.position())
        if state is not None and state.unlocked:
            self._on_level_click(state.level)
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event) -> None:
        state = self._state_at(event.position())
        if state is None:
            self.setToolTip("")
            self.unsetCursor()
        else:
            cfg = state.config
            self.setToolTip(
                f"Level {state.level} ({state.status_label})\n"
                f"{cfg.mode.value} · {cfg.size}x{cfg.size} · {cfg.differences} differences"
            )
            self.setCursor(Qt.PointingHandCursor if state.unlocked else Qt.ForbiddenCursor)
        super().mouseMoveEvent(event)

    def paintEvent(self, event) -> None:
        super().paintEvent(event)
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)

        gradient = QLinearGradient(0, 0, 0, self.height())
        gradient.setColorAt(0.0, QColor(GameColors.BG_TOP))
        gradient.setColorAt(1.0, QColor(GameColors.BG_BOTTOM))
        painter.fillRect(self.rect(), QBrush(gradient))

        if not self._states:
            painter.end()
            return

        # Path between consecutive nodes, tinted by the mode of the next level.
        for prev, nxt in zip(self._states, self._states[1:]):
            tint = blend_hex(mode_color(nxt.config.mode), GameColors.TEXT_MUTED, 0.0 if nxt.unlocked else 0.6)
            painter.setPen(QPen(QColor(tint), 4, Qt.DashLine))
            painter.drawLine(self._node_center(prev), self._node_center(nxt))

        radius = _NODE_RADIUS * max(self._scale(), 0.6)
        title_font = QFont(painter.font())
        title_font.setBold(True)
        title_font.setPointSize(12)
        node_font = QFont(painter.font())
        node_font.setBold(True)
        node_font.setPointSize(8)

        for section in self._journey.sections():
            first = self._states[section.levels[0] - 1]
            anchor = self._node_center(first)
            painter.setFont(title_font)
            painter.setPen(QColor(GameColors.PRIMARY))
            painter.drawText(QPointF(8, anchor.y() + radius * 2.5), section.title)

        painter.setFont(node_font)
        for state in self._states:
            center = self._node_center(state)
            if state.completed:
                fill, border, text = GameColors.NODE_COMPLETED, GameColors.NODE_COMPLETED, GameColors.ACCENT_TEXT
            elif state.unlocked:
                fill, border, text = GameColors.NODE_AVAILABLE, GameColors.NODE_AVAILABLE, GameColors.ACCENT_TEXT
            else:
                fill, border, text = GameColors.NODE_LOCKED, GameColors.NODE_LOCKED_BORDER, GameColors.TEXT_MUTED
            r = radius * (1.15 if state.is_current else 1.0)
            painter.setBrush(QColor(fill))
            painter.setPen(QPen(QColor(blend_hex(border, "#000000", 0.15)), 2))
            painter.drawEllipse(center, r, r)
            painter.setPen(QColor(text))
            painter.drawText(QRectF(center.x() - r, center.y() - r, 2 * r, 2 * r), Qt.AlignCenter, str(state.level))
        painter.end()
