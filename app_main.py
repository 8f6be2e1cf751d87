"""Application entry point for SoloQuiz."""

from __future__ import annotations

from pathlib import Path
import sys

from PySide6.QtWidgets import QApplication

from solo_quiz.constants.about import APP_NAME
from solo_quiz.core.quiz_manager import QuizManager
from solo_quiz.core.services.quiz_repository import QuizRepository
from solo_quiz.core.storage import PersistenceStore, QSettingsBackend
from solo_quiz.ui.main_window import MainWindow
from solo_quiz.utils.logging_config import configure_logging


def _settings_path_from_args(argv: list[str]) -> Path | None:
    """An optional first argument points the store at an INI file instead of the native settings."""
    if len(argv) > 1 and argv[1].strip():
        return Path(argv[1]).expanduser()
    return None


def main() -> None:
    """Initialize logging and storage, then launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting %s...", APP_NAME)

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)

    backend = QSettingsBackend(_settings_path_from_args(sys.argv))
    logger.info("Using data store at %s", backend.location)
    repository = QuizRepository(PersistenceStore(backend))
    quiz_manager = QuizManager(repository)
    quiz_manager.seed_default_questions()

    window = MainWindow(quiz_manager=quiz_manager)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
