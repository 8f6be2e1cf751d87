"""Component for the main menu: score, stats, leaderboard and actions."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from solo_quiz.constants.quiz_constants import LEADERBOARD_SIZE
from solo_quiz.constants.ui_constants import (
    MENU_BUTTON_ABOUT,
    MENU_BUTTON_ADMIN,
    MENU_BUTTON_HELP,
    MENU_BUTTON_LOGOUT,
    MENU_BUTTON_RESET,
    MENU_BUTTON_SETTINGS,
    MENU_BUTTON_START,
    MENU_LEADERBOARD_EMPTY,
    MENU_LEADERBOARD_TITLE,
)
from solo_quiz.core.quiz_manager import QuizManager
from solo_quiz.styling.styles import Styles


class MenuPanel(QWidget):
    """Landing screen after login."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        on_start_quiz: Callable[[], None],
        on_open_admin: Callable[[], None],
        on_open_settings: Callable[[], None],
        on_show_help: Callable[[], None],
        on_show_about: Callable[[], None],
        on_reset_all: Callable[[], None],
        on_logout: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self._leaderboard_size = LEADERBOARD_SIZE
        self._callbacks = {
            MENU_BUTTON_START: on_start_quiz,
            MENU_BUTTON_ADMIN: on_open_admin,
            MENU_BUTTON_SETTINGS: on_open_settings,
            MENU_BUTTON_HELP: on_show_help,
            MENU_BUTTON_ABOUT: on_show_about,
            MENU_BUTTON_RESET: on_reset_all,
            MENU_BUTTON_LOGOUT: on_logout,
        }
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.user_label = QLabel("", self)
        self.user_label.setAlignment(Qt.AlignCenter)
        self.user_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.user_label)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.score_label)

        self.stats_group = QGroupBox("Your Statistics", self)
        stats_layout = QGridLayout()
        self.stats_group.setLayout(stats_layout)
        self.stats_score_label = QLabel("0", self.stats_group)
        self.stats_answered_label = QLabel("0", self.stats_group)
        self.stats_accuracy_label = QLabel("-", self.stats_group)
        for column, (value_label, caption) in enumerate(
            (
                (self.stats_score_label, "Total score"),
                (self.stats_answered_label, "Questions answered"),
                (self.stats_accuracy_label, "Accuracy"),
            )
        ):
            value_label.setAlignment(Qt.AlignCenter)
            value_label.setStyleSheet(Styles.get_large_label_style())
            caption_label = QLabel(caption, self.stats_group)
            caption_label.setAlignment(Qt.AlignCenter)
            stats_layout.addWidget(value_label, 0, column)
            stats_layout.addWidget(caption_label, 1, column)
        layout.addWidget(self.stats_group)

        self.question_count_label = QLabel("", self)
        self.question_count_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.question_count_label)

        self.buttons: dict[str, QPushButton] = {}
        primary_row = QHBoxLayout()
        secondary_row = QHBoxLayout()
        for text, callback in self._callbacks.items():
            button = QPushButton(text, self)
            button.clicked.connect(callback)
            self.buttons[text] = button
            if text in (MENU_BUTTON_START, MENU_BUTTON_ADMIN):
                primary_row.addWidget(button)
            else:
                secondary_row.addWidget(button)
        layout.addLayout(primary_row)
        layout.addLayout(secondary_row)

        self.leaderboard_group = QGroupBox(MENU_LEADERBOARD_TITLE, self)
        leaderboard_layout = QVBoxLayout()
        self.leaderboard_group.setLayout(leaderboard_layout)
        self.leaderboard_list = QListWidget(self.leaderboard_group)
        self.leaderboard_list.setAlternatingRowColors(True)
        leaderboard_layout.addWidget(self.leaderboard_list)
        layout.addWidget(self.leaderboard_group, stretch=1)

    def refresh(self) -> None:
        """Re-read score, stats and leaderboard."""
        name = self.quiz_manager.current_user_name or ""
        self.user_label.setText(name)
        self.score_label.setText(f"{self.quiz_manager.current_score} points")

        count = self.quiz_manager.question_count
        self.question_count_label.setText(f"{count} question(s) available")
        self.buttons[MENU_BUTTON_START].setEnabled(count > 0)

        stats = self.quiz_manager.get_current_user_stats()
        self.stats_group.setVisible(stats is not None)
        if stats is not None:
            self.stats_score_label.setText(str(stats.score))
            self.stats_answered_label.setText(str(stats.questions_answered))
            if stats.questions_answered:
                accuracy = stats.score / stats.questions_answered * 100
                self.stats_accuracy_label.setText(f"{accuracy:.0f}%")
            else:
                self.stats_accuracy_label.setText("-")

        self.leaderboard_list.clear()
        rows = self.quiz_manager.get_leaderboard(self._leaderboard_size)
        if not rows:
            QListWidgetItem(MENU_LEADERBOARD_EMPTY, self.leaderboard_list)
            return
        for row in rows:
            marker = "  (you)" if name and row.name.casefold() == name.casefold() else ""
            QListWidgetItem(
                f"{row.rank}. {row.name} - {row.score} pts ({row.questions_answered} answered){marker}",
                self.leaderboard_list,
            )

    def set_leaderboard_size(self, size: int) -> None:
        self._leaderboard_size = size
        self.leaderboard_group.setTitle(f"{MENU_LEADERBOARD_TITLE} (top {size})")

    def apply_font_size(self, font_size: int) -> None:
        style = f"font-size: {font_size}pt;"
        for button in self.buttons.values():
            button.setStyleSheet(style)
        self.leaderboard_list.setStyleSheet(style)
