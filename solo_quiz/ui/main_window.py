"""Qt main window switching between the login, menu, quiz and admin screens."""

from __future__ import annotations

from enum import Enum, auto
import logging

from PySide6.QtWidgets import QMainWindow, QStackedWidget

from solo_quiz.constants.about import (
    APP_ABOUT_TEXT,
    APP_AUTHOR,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from solo_quiz.constants.quiz_constants import LEADERBOARD_SIZE
from solo_quiz.constants.ui_constants import (
    NO_QUESTIONS_MESSAGE,
    QUIZ_COMPLETE_TEMPLATE,
    RESET_DONE_MESSAGE,
    WINDOW_TITLE,
)
from solo_quiz.core.quiz_manager import NoQuestionsError, QuizManager
from solo_quiz.core.services.game_session import QuizResult
from solo_quiz.styling.color_palette import Theme
from solo_quiz.styling.styles import Styles
from solo_quiz.ui.components.admin_panel import AdminPanel
from solo_quiz.ui.components.login_panel import LoginPanel
from solo_quiz.ui.components.menu_panel import MenuPanel
from solo_quiz.ui.components.quiz_panel import QuizPanel
from solo_quiz.ui.dialog_helpers import confirm_reset_all, show_info, show_warning
from solo_quiz.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class Screen(Enum):
    """Top-level screen shown in the window."""

    LOGIN = auto()
    MENU = auto()
    QUIZ = auto()
    ADMIN = auto()


class MainWindow(QMainWindow):
    """Main Qt window orchestrating the four screens."""

    def __init__(self, quiz_manager: QuizManager) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(900, 680)

        self.quiz_manager = quiz_manager
        self._screen = Screen.LOGIN

        self._ui_font_size: int = 10
        self._game_font_size: int = 14
        self._leaderboard_size: int = LEADERBOARD_SIZE
        self._theme: Theme = Theme.LIGHT

        self._build_ui()
        self._apply_styles()

    def _build_ui(self) -> None:
        self.screen_stack = QStackedWidget(self)
        self.setCentralWidget(self.screen_stack)

        self.login_panel = LoginPanel(self.quiz_manager, on_login=self._handle_login, parent=self)
        self.menu_panel = MenuPanel(
            self.quiz_manager,
            on_start_quiz=self._handle_start_quiz,
            on_open_admin=self._handle_open_admin,
            on_open_settings=self._handle_settings,
            on_show_help=self._handle_help,
            on_show_about=self._handle_about,
            on_reset_all=self._handle_reset_all,
            on_logout=self._handle_logout,
            parent=self,
        )
        self.quiz_panel = QuizPanel(
            on_finished=self._handle_quiz_finished,
            on_quit=self._handle_quiz_quit,
            parent=self,
        )
        self.admin_panel = AdminPanel(self.quiz_manager, on_back=self._handle_back_to_menu, parent=self)

        self._panels = {
            Screen.LOGIN: self.login_panel,
            Screen.MENU: self.menu_panel,
            Screen.QUIZ: self.quiz_panel,
            Screen.ADMIN: self.admin_panel,
        }
        for panel in self._panels.values():
            self.screen_stack.addWidget(panel)

        self._set_screen(Screen.LOGIN)

    def _set_screen(self, screen: Screen) -> None:
        self._screen = screen
        if screen == Screen.MENU:
            self.menu_panel.refresh()
        elif screen == Screen.ADMIN:
            self.admin_panel.refresh()
        elif screen == Screen.LOGIN:
            self.login_panel.reset_state()
        self.screen_stack.setCurrentWidget(self._panels[screen])

    # --- Login / logout ---

    def _handle_login(self, name: str) -> None:
        try:
            self.quiz_manager.login(name)
        except ValueError as exc:
            show_warning(self, "Invalid name", str(exc))
            return
        self._set_screen(Screen.MENU)

    def _handle_logout(self) -> None:
        self.quiz_manager.logout()
        self._set_screen(Screen.LOGIN)

    # --- Quiz ---

    def _handle_start_quiz(self) -> None:
        try:
            session = self.quiz_manager.start_quiz()
        except NoQuestionsError:
            show_warning(self, "No questions", NO_QUESTIONS_MESSAGE)
            return
        self.quiz_panel.start(session)
        self._set_screen(Screen.QUIZ)

    def _handle_quiz_finished(self, result: QuizResult) -> None:
        self.quiz_manager.finish_quiz(result)
        self._set_screen(Screen.MENU)
        show_info(
            self,
            "Quiz finished!",
            QUIZ_COMPLETE_TEMPLATE.format(
                name=result.user_name,
                points=result.session_score,
                total=result.final_score,
            ),
            font_point_size=self._game_font_size,
        )

    def _handle_quiz_quit(self) -> None:
        self.quiz_manager.abandon_quiz()
        self._set_screen(Screen.MENU)

    # --- Admin / reset ---

    def _handle_open_admin(self) -> None:
        self._set_screen(Screen.ADMIN)

    def _handle_back_to_menu(self) -> None:
        self._set_screen(Screen.MENU)

    def _handle_reset_all(self) -> None:
        if not confirm_reset_all(self):
            return
        self.quiz_manager.reset_all()
        self.menu_panel.refresh()
        show_info(self, "Reset complete", RESET_DONE_MESSAGE)

    # --- Dialogs ---

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"Author: {APP_AUTHOR}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}\n\n"
            f"Data file: {self.quiz_manager.repository.location}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self._ui_font_size,
            self._game_font_size,
            self._leaderboard_size,
            self._theme,
        )
        if dialog.exec():
            self._ui_font_size = dialog.get_ui_font_size()
            self._game_font_size = dialog.get_game_font_size()
            self._leaderboard_size = dialog.get_leaderboard_size()
            self._theme = dialog.get_theme()
            self._apply_styles()
            self.menu_panel.refresh()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style(self._theme))

        self.login_panel.apply_font_size(self._game_font_size)
        self.menu_panel.apply_font_size(self._ui_font_size)
        self.menu_panel.set_leaderboard_size(self._leaderboard_size)
        self.admin_panel.apply_font_size(self._ui_font_size)
        self.quiz_panel.apply_font_size(self._ui_font_size)
        self.quiz_panel.set_game_font_size(self._game_font_size)
        self.quiz_panel.set_theme(self._theme)
