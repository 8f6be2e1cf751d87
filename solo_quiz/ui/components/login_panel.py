"""Component for the name entry screen."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGroupBox,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from solo_quiz.constants.ui_constants import (
    LOGIN_BUTTON_NEW,
    LOGIN_BUTTON_RETURNING,
    LOGIN_DESCRIPTION,
    LOGIN_TITLE,
    LOGIN_WELCOME_BACK,
    PLACEHOLDER_NAME,
)
from solo_quiz.core.quiz_manager import QuizManager
from solo_quiz.styling.styles import Styles


class LoginPanel(QWidget):
    """Asks for the player's name and greets returning players."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        on_login: Callable[[str], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self.on_login = on_login
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        self.title_label = QLabel(LOGIN_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.description_label = QLabel(LOGIN_DESCRIPTION, self)
        self.description_label.setAlignment(Qt.AlignCenter)
        self.description_label.setStyleSheet(Styles.get_secondary_label_style())
        layout.addWidget(self.description_label)

        self.name_input = QLineEdit(self)
        self.name_input.setPlaceholderText(PLACEHOLDER_NAME)
        self.name_input.setAlignment(Qt.AlignCenter)
        self.name_input.setMinimumWidth(320)
        self.name_input.textChanged.connect(self._on_name_changed)
        self.name_input.returnPressed.connect(self._handle_login)
        layout.addWidget(self.name_input)

        self.returning_box = QGroupBox(LOGIN_WELCOME_BACK, self)
        returning_layout = QVBoxLayout()
        self.returning_box.setLayout(returning_layout)
        self.returning_score_label = QLabel("", self.returning_box)
        self.returning_answered_label = QLabel("", self.returning_box)
        returning_layout.addWidget(self.returning_score_label)
        returning_layout.addWidget(self.returning_answered_label)
        self.returning_box.setVisible(False)
        layout.addWidget(self.returning_box)

        self.login_button = QPushButton(LOGIN_BUTTON_NEW, self)
        self.login_button.setEnabled(False)
        self.login_button.clicked.connect(self._handle_login)
        layout.addWidget(self.login_button)

    def _on_name_changed(self, text: str) -> None:
        user = self.quiz_manager.lookup_user(text)
        self.login_button.setEnabled(bool(text.strip()))
        if user is None:
            self.returning_box.setVisible(False)
            self.login_button.setText(LOGIN_BUTTON_NEW)
            return
        self.returning_score_label.setText(f"Current score: {user.score}")
        self.returning_answered_label.setText(f"Questions answered: {user.questions_answered}")
        self.returning_box.setVisible(True)
        self.login_button.setText(LOGIN_BUTTON_RETURNING)

    def _handle_login(self) -> None:
        name = self.name_input.text().strip()
        if not name:
            return
        self.on_login(name)

    def reset_state(self) -> None:
        self.name_input.clear()
        self.returning_box.setVisible(False)
        self.login_button.setText(LOGIN_BUTTON_NEW)
        self.name_input.setFocus()

    def apply_font_size(self, font_size: int) -> None:
        style = f"font-size: {font_size}pt;"
        self.name_input.setStyleSheet(style)
        self.login_button.setStyleSheet(style)
