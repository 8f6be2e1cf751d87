"""Business logic shared by the Qt screens: login, menu, quiz and admin."""

from __future__ import annotations

import logging
from pathlib import Path

from solo_quiz.constants.quiz_constants import LEADERBOARD_SIZE
from solo_quiz.core.models import Question, User
from solo_quiz.core.question_form import QuestionForm, QuestionIdFactory
from solo_quiz.core.quiz_exporter import save_questions_to_file
from solo_quiz.core.quiz_importer import ImportedQuestions, load_questions_from_file
from solo_quiz.core.services.game_session import GameSession, QuizResult
from solo_quiz.core.services.quiz_repository import QuizRepository
from solo_quiz.core.services.scoreboard import ScoreboardRow, scoreboard_rows

logger = logging.getLogger(__name__)


class NoQuestionsError(RuntimeError):
    """Raised when a quiz is started while the question bank is empty."""


class QuizManager:
    """Facade over the repository and the current player's session."""

    def __init__(self, repository: QuizRepository, id_factory: QuestionIdFactory | None = None) -> None:
        self._repository = repository
        self._id_factory = id_factory or QuestionIdFactory()
        self._questions: list[Question] = repository.list_questions()
        self._current_user: str | None = None
        self._current_score: int = 0
        self._current_answered: int = 0
        self._session: GameSession | None = None

    @property
    def repository(self) -> QuizRepository:
        return self._repository

    # --- Player ---

    def login(self, name: str) -> User | None:
        """Start playing as ``name``; returns the stored record for returning players.

        Logging in never creates a user record. That only happens once a quiz
        has been finished.
        """
        cleaned = name.strip()
        if not cleaned:
            raise ValueError("Name must not be empty.")
        existing = self._repository.get_user(cleaned)
        self._current_user = cleaned
        self._current_score = existing.score if existing else 0
        self._current_answered = existing.questions_answered if existing else 0
        self._session = None
        logger.info("%s logged in (%s)", cleaned, "returning" if existing else "new")
        return existing

    def lookup_user(self, name: str) -> User | None:
        cleaned = name.strip()
        if not cleaned:
            return None
        return self._repository.get_user(cleaned)

    def logout(self) -> None:
        if self._session is not None:
            self._session.abandon()
        self._current_user = None
        self._current_score = 0
        self._current_answered = 0
        self._session = None

    def is_logged_in(self) -> bool:
        return self._current_user is not None

    @property
    def current_user_name(self) -> str | None:
        return self._current_user

    @property
    def current_score(self) -> int:
        return self._current_score

    def get_current_user_stats(self) -> User | None:
        if self._current_user is None:
            return None
        return self._repository.get_user(self._current_user)

    def get_leaderboard(self, limit: int = LEADERBOARD_SIZE) -> list[ScoreboardRow]:
        return scoreboard_rows(self._repository.get_top_users(limit))

    # --- Quiz ---

    def start_quiz(self) -> GameSession:
        """Create a session over a snapshot of the current question bank."""
        if self._current_user is None:
            raise RuntimeError("Log in before starting a quiz.")
        if not self._questions:
            raise NoQuestionsError("The question bank is empty.")
        if self._session is not None:
            self._session.abandon()
        self._session = GameSession(
            repository=self._repository,
            user_name=self._current_user,
            prior_score=self._current_score,
            questions=self._questions,
            prior_questions_answered=self._current_answered,
        )
        logger.info("%s started a quiz with %d question(s)", self._current_user, len(self._questions))
        return self._session

    def finish_quiz(self, result: QuizResult) -> None:
        """Adopt the totals of a finished session as the player's current score."""
        self._current_score = result.final_score
        self._current_answered = result.lifetime_answered
        self._session = None

    def abandon_quiz(self) -> None:
        if self._session is not None:
            self._session.abandon()
        self._session = None

    # --- Question bank ---

    def get_questions(self) -> list[Question]:
        return list(self._questions)

    @property
    def question_count(self) -> int:
        return len(self._questions)

    def seed_default_questions(self) -> list[Question]:
        self._questions = self._repository.seed_default_questions()
        return self.get_questions()

    def save_question(self, form: QuestionForm, editing_id: str | None = None) -> Question:
        """Validate the form and add or update the question it describes.

        Raises ``QuestionValidationError`` before anything is written.
        """
        question = form.to_question(existing_id=editing_id, id_factory=self._id_factory)
        if editing_id:
            self._questions = self._repository.update_question(editing_id, question)
            logger.info("Updated question %s", editing_id)
        else:
            self._questions = self._repository.add_question(question)
            logger.info("Added question %s", question.id)
        return question

    def delete_question(self, question_id: str) -> None:
        self._questions = self._repository.remove_question(question_id)
        logger.info("Removed question %s", question_id)

    def import_questions(self, file_path: Path) -> ImportedQuestions:
        """Append every question in ``file_path``; raises ``QuizImportError`` or ``OSError``."""
        imported = load_questions_from_file(file_path, id_factory=self._id_factory)
        self._questions = self._repository.import_questions(imported.questions)
        return imported

    def export_questions(self, file_path: Path) -> None:
        save_questions_to_file(file_path, self._questions)
        logger.info("Exported %d question(s) to %s", len(self._questions), file_path)

    # --- Reset ---

    def reset_all(self) -> None:
        """Erase every question and score. The player stays logged in at zero points."""
        self.abandon_quiz()
        self._repository.clear_all()
        self._questions = []
        self._current_score = 0
        self._current_answered = 0
