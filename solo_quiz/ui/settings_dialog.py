"""Settings dialog for configuring SoloQuiz display preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from solo_quiz.constants.quiz_constants import LEADERBOARD_SIZE
from solo_quiz.styling.color_palette import Theme


class SettingsDialog(QDialog):
    """Dialog for configuring application settings."""

    def __init__(
        self,
        parent=None,
        ui_font_size: int = 10,
        game_font_size: int = 14,
        leaderboard_size: int = LEADERBOARD_SIZE,
        theme: Theme = Theme.LIGHT,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._ui_font_size = ui_font_size
        self._game_font_size = game_font_size
        self._leaderboard_size = max(1, min(20, leaderboard_size))
        self._theme = theme

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        font_group = QGroupBox("Font Sizes")
        font_layout = QVBoxLayout()
        font_group.setLayout(font_layout)

        self.ui_font_spinbox = self._add_spin_row(
            font_layout, "UI font size (buttons, menus):", 8, 24, self._ui_font_size, " pt"
        )
        self.game_font_spinbox = self._add_spin_row(
            font_layout, "Game font size (questions, answers):", 10, 32, self._game_font_size, " pt"
        )
        layout.addWidget(font_group)

        display_group = QGroupBox("Display Settings")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)

        self.leaderboard_spinbox = self._add_spin_row(
            display_layout, "Leaderboard slots (top N):", 1, 20, self._leaderboard_size, ""
        )

        self.dark_theme_checkbox = QCheckBox("Use dark theme")
        self.dark_theme_checkbox.setChecked(self._theme == Theme.DARK)
        display_layout.addWidget(self.dark_theme_checkbox)

        layout.addWidget(display_group)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    @staticmethod
    def _add_spin_row(
        layout: QVBoxLayout, text: str, minimum: int, maximum: int, value: int, suffix: str
    ) -> QSpinBox:
        row = QHBoxLayout()
        spinbox = QSpinBox()
        spinbox.setRange(minimum, maximum)
        spinbox.setValue(value)
        spinbox.setSuffix(suffix)
        row.addWidget(QLabel(text))
        row.addStretch()
        row.addWidget(spinbox)
        layout.addLayout(row)
        return spinbox

    def get_ui_font_size(self) -> int:
        return self.ui_font_spinbox.value()

    def get_game_font_size(self) -> int:
        return self.game_font_spinbox.value()

    def get_leaderboard_size(self) -> int:
        return self.leaderboard_spinbox.value()

    def get_theme(self) -> Theme:
        return Theme.DARK if self.dark_theme_checkbox.isChecked() else Theme.LIGHT
