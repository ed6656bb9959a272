"""Free-play settings dialog."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QButtonGroup,
    QCheckBox,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSlider,
    QSpinBox,
    QWidget,
)

from spotdiff.core.config import SIZE_CHOICES, GameConfig
from spotdiff.core.session import GameMode
from spotdiff.core.symbols import SymbolFlags


class SettingsDialog(QDialog):
    """Edits a GameConfig. Sliders are clamped here so the core never sees bad values."""

    def __init__(self, config: GameConfig, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Game Settings")
        self._config = config

        size_row = QWidget()
        size_layout = QHBoxLayout(size_row)
        size_layout.setContentsMargins(0, 0, 0, 0)
        self._size_group = QButtonGroup(self)
        for size in SIZE_CHOICES:
            button = QPushButton(f"{size}×{size}")
            button.setCheckable(True)
            button.setChecked(size == config.size)
            self._size_group.addButton(button, size)
            size_layout.addWidget(button)
        self._size_group.idClicked.connect(self._on_size_changed)

        self._diff_slider = QSlider(Qt.Horizontal)
        self._diff_label = QLabel()
        self._diff_slider.valueChanged.connect(self._update_diff_label)
        self._set_diff_range(config.max_differences, config.differences)

        self._letters = QCheckBox("Letters")
        self._letters.setChecked(config.symbols.letters)
        self._digits = QCheckBox("Numbers")
        self._digits.setChecked(config.symbols.digits)
        self._pictograms = QCheckBox("Emojis")
        self._pictograms.setChecked(config.symbols.pictograms)
        for box in (self._letters, self._digits, self._pictograms):
            box.toggled.connect(self._keep_one_symbol_group)

        self._sounds = QCheckBox("Sounds")
        self._sounds.setChecked(config.sounds)

        self._mode = QComboBox()
        for mode in GameMode:
            self._mode.addItem(mode.value, mode)
        self._mode.setCurrentIndex(list(GameMode).index(config.mode))

        self._errors = QSpinBox()
        self._errors.setRange(0, 20)
        self._errors.setSpecialValueText("Unlimited")
        self._errors.setValue(max(0, config.error_budget))

        self._time_limit = QSpinBox()
        self._time_limit.setRange(5, 600)
        self._time_limit.setSuffix(" s")
        self._time_limit.setValue(config.time_limit)

        symbols_row = QWidget()
        symbols_layout = QHBoxLayout(symbols_row)
        symbols_layout.setContentsMargins(0, 0, 0, 0)
        for box in (self._letters, self._digits, self._pictograms):
            symbols_layout.addWidget(box)

        buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)

        form = QFormLayout(self)
        form.addRow("Matrix Size", size_row)
        form.addRow("Number of Differences", self._diff_slider)
        form.addRow("", self._diff_label)
        form.addRow("Symbols", symbols_row)
        form.addRow("Mode", self._mode)
        form.addRow("Errors", self._errors)
        form.addRow("Time Limit", self._time_limit)
        form.addRow("", self._sounds)
        form.addRow(buttons)

    def _set_diff_range(self, maximum: int, value: int) -> None:
        self._diff_slider.setRange(1, maximum)
        self._diff_slider.setValue(max(1, min(value, maximum)))
        self._update_diff_label()

    def _update_diff_label(self) -> None:
        self._diff_label.setText(f"{self._diff_slider.value()} / {self._diff_slider.maximum()} differences")

    def _on_size_changed(self, size: int) -> None:
        resized = self._config.with_size(size)
        self._set_diff_range(resized.max_differences, resized.differences)

    def _keep_one_symbol_group(self, checked: bool) -> None:
        if checked:
            return
        if not (self._letters.isChecked() or self._digits.isChecked() or self._pictograms.isChecked()):
            box = self.sender()
            if isinstance(box, QCheckBox):
                box.setChecked(True)

    def config(self) -> GameConfig:
        """The edited configuration."""
        return GameConfig(
            size=self._size_group.checkedId(),
            differences=self._diff_slider.value(),
            symbols=SymbolFlags(
                letters=self._letters.isChecked(),
                digits=self._digits.isChecked(),
                pictograms=self._pictograms.isChecked(),
            ),
            sounds=self._sounds.isChecked(),
            mode=self._mode.currentData(),
            error_budget=self._errors.value(),
            time_limit=self._time_limit.value(),
        )
