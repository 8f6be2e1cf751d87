"""Component for playing through a quiz."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QTextBrowser,
    QVBoxLayout,
    QWidget,
)

from solo_quiz.constants.quiz_constants import OPTION_COUNT
from solo_quiz.constants.ui_constants import (
    QUIZ_BUTTON_CONFIRM,
    QUIZ_BUTTON_FINISH,
    QUIZ_BUTTON_NEXT,
    QUIZ_BUTTON_QUIT,
    QUIZ_CORRECT_MESSAGE,
    QUIZ_WRONG_MESSAGE,
)
from solo_quiz.core.services.game_session import GameSession, QuizResult, SessionState
from solo_quiz.styling.color_palette import Theme
from solo_quiz.styling.styles import Styles
from solo_quiz.ui.question_renderer import render_option_label, render_prompt


class QuizPanel(QWidget):
    """Renders the current question of a ``GameSession`` and forwards clicks to it."""

    def __init__(
        self,
        on_finished: Callable[[QuizResult], None],
        on_quit: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_finished = on_finished
        self.on_quit = on_quit
        self._session: GameSession | None = None
        self._game_font_size: int = 14
        self._theme = Theme.LIGHT
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header_row = QHBoxLayout()
        header_left = QVBoxLayout()
        self.title_label = QLabel("", self)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        self.position_label = QLabel("", self)
        header_left.addWidget(self.title_label)
        header_left.addWidget(self.position_label)
        header_row.addLayout(header_left)
        header_row.addStretch()

        header_right = QVBoxLayout()
        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignRight)
        self.score_label.setStyleSheet(Styles.get_large_label_style())
        self.session_label = QLabel("", self)
        self.session_label.setAlignment(Qt.AlignRight)
        header_right.addWidget(self.score_label)
        header_right.addWidget(self.session_label)
        header_row.addLayout(header_right)
        layout.addLayout(header_row)

        self.progress_bar = QProgressBar(self)
        self.progress_bar.setTextVisible(False)
        layout.addWidget(self.progress_bar)

        self.prompt_view = QTextBrowser(self)
        self.prompt_view.setOpenExternalLinks(False)
        layout.addWidget(self.prompt_view, stretch=1)

        self.option_buttons: list[QPushButton] = []
        for index in range(OPTION_COUNT):
            button = QPushButton("", self)
            button.clicked.connect(lambda _checked=False, i=index: self._handle_select(i))
            layout.addWidget(button)
            self.option_buttons.append(button)

        action_row = QHBoxLayout()
        self.quit_button = QPushButton(QUIZ_BUTTON_QUIT, self)
        self.quit_button.clicked.connect(self._handle_quit)
        action_row.addWidget(self.quit_button)
        action_row.addStretch()
        self.confirm_button = QPushButton(QUIZ_BUTTON_CONFIRM, self)
        self.confirm_button.clicked.connect(self._handle_confirm)
        action_row.addWidget(self.confirm_button)
        self.next_button = QPushButton(QUIZ_BUTTON_NEXT, self)
        self.next_button.clicked.connect(self._handle_next)
        action_row.addWidget(self.next_button)
        layout.addLayout(action_row)

        self.result_label = QLabel("", self)
        self.result_label.setVisible(False)
        layout.addWidget(self.result_label)

    def start(self, session: GameSession) -> None:
        self._session = session
        self._render()

    def _handle_select(self, index: int) -> None:
        if self._session is None:
            return
        self._session.select_answer(index)
        self._render()

    def _handle_confirm(self) -> None:
        if self._session is None:
            return
        self._session.confirm_answer()
        self._render()

    def _handle_next(self) -> None:
        if self._session is None:
            return
        result = self._session.advance()
        if result is not None:
            self._session = None
            self.on_finished(result)
            return
        self._render()

    def _handle_quit(self) -> None:
        if self._session is not None:
            self._session.abandon()
            self._session = None
        self.on_quit()

    def _render(self) -> None:
        session = self._session
        if session is None:
            return
        question = session.get_current_question()
        if question is None:
            return

        position = session.current_index + 1
        self.title_label.setText(f"Quiz - {session.user_name}")
        self.position_label.setText(f"Question {position} of {session.question_count}")
        self.score_label.setText(f"{session.running_score} pts")
        self.session_label.setText(f"This session: +{session.session_score}")
        self.progress_bar.setRange(0, session.question_count)
        self.progress_bar.setValue(position)
        self.prompt_view.setHtml(render_prompt(question.question, self._game_font_size))

        revealed = session.state == SessionState.RESULT_SHOWN
        result = session.last_result
        for index, button in enumerate(self.option_buttons):
            button.setText(render_option_label(index, question.options[index]))
            button.setEnabled(not revealed)
            button.setStyleSheet(self._option_style(index, session, revealed))

        self.confirm_button.setVisible(not revealed)
        self.confirm_button.setEnabled(session.state == SessionState.ANSWER_SELECTED)
        self.next_button.setVisible(revealed)
        self.next_button.setText(QUIZ_BUTTON_FINISH if session.is_last_question() else QUIZ_BUTTON_NEXT)

        self.result_label.setVisible(revealed and result is not None)
        if revealed and result is not None:
            self.result_label.setText(QUIZ_CORRECT_MESSAGE if result.is_correct else QUIZ_WRONG_MESSAGE)
            self.result_label.setStyleSheet(Styles.get_result_style(result.is_correct, self._theme))

    def _option_style(self, index: int, session: GameSession, revealed: bool) -> str:
        font = f" font-size: {self._game_font_size}pt;"
        result = session.last_result
        if revealed and result is not None:
            if index == result.correct_index:
                return Styles.get_option_style("correct", self._theme) + font
            if index == result.selected_index:
                return Styles.get_option_style("wrong", self._theme) + font
        elif index == session.selected_index:
            return Styles.get_option_style("selected", self._theme) + font
        return Styles.get_option_style("idle", self._theme) + font

    def set_game_font_size(self, font_size: int) -> None:
        self._game_font_size = font_size
        self._render()

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme
        self._render()

    def apply_font_size(self, font_size: int) -> None:
        style = f"font-size: {font_size}pt;"
        for button in (self.quit_button, self.confirm_button, self.next_button):
            button.setStyleSheet(style)
