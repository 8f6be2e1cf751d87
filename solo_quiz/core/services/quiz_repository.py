"""Service for the persisted question bank and player records."""

from __future__ import annotations

from collections.abc import Callable
import logging

from pydantic import ValidationError

from solo_quiz.constants.quiz_constants import DEFAULT_QUESTIONS
from solo_quiz.constants.storage_constants import QUESTIONS_KEY, USERS_KEY
from solo_quiz.core.models import Question, User, utc_now_iso
from solo_quiz.core.records import QUESTION_LIST, USER_LIST, QuestionRecord, UserRecord
from solo_quiz.core.services.scoreboard import rank_users
from solo_quiz.core.storage import PersistenceStore

logger = logging.getLogger(__name__)


class QuizRepository:
    """Typed operations over the two stored collections.

    Every call reads the current collection from the store and, for mutations,
    writes the whole collection back before returning. Mutations hand back the
    updated collection so callers do not need to re-read it.
    """

    def __init__(self, store: PersistenceStore, clock: Callable[[], str] = utc_now_iso) -> None:
        self._store = store
        self._clock = clock

    @property
    def location(self) -> str:
        return self._store.location

    # --- Questions ---

    def list_questions(self) -> list[Question]:
        """Return all questions in insertion order."""
        records = self._store.read_collection(QUESTIONS_KEY, QUESTION_LIST)
        return [record.to_question() for record in records]

    def add_question(self, question: Question) -> list[Question]:
        """Append a question. Ids are not checked for uniqueness."""
        questions = self.list_questions()
        questions.append(question)
        self._save_questions(questions)
        return questions

    def import_questions(self, new_questions: list[Question]) -> list[Question]:
        """Append a batch of questions with a single write."""
        questions = self.list_questions()
        questions.extend(new_questions)
        self._save_questions(questions)
        logger.info("Imported %d question(s)", len(new_questions))
        return questions

    def update_question(self, question_id: str, question: Question) -> list[Question]:
        """Replace the first question with ``question_id``. Unknown ids are ignored."""
        questions = self.list_questions()
        index = next((i for i, q in enumerate(questions) if q.id == question_id), -1)
        if index == -1:
            return questions
        questions[index] = question
        self._save_questions(questions)
        return questions

    def remove_question(self, question_id: str) -> list[Question]:
        """Drop every question with ``question_id``. Unknown ids are ignored."""
        questions = self.list_questions()
        remaining = [q for q in questions if q.id != question_id]
        if len(remaining) != len(questions):
            self._save_questions(remaining)
        return remaining

    def seed_default_questions(self) -> list[Question]:
        """Install the starter questions when the bank is empty."""
        questions = self.list_questions()
        if questions:
            return questions
        created_at = self._clock()
        defaults = [
            Question(
                id=entry["id"],
                question=entry["question"],
                options=list(entry["options"]),
                correct_answer=entry["correct_answer"],
                created_at=created_at,
            )
            for entry in DEFAULT_QUESTIONS
        ]
        self._save_questions(defaults)
        logger.info("Seeded %d default question(s)", len(defaults))
        return defaults

    # --- Users ---

    def get_users(self) -> list[User]:
        records = self._store.read_collection(USERS_KEY, USER_LIST)
        return [record.to_user() for record in records]

    def get_user(self, name: str) -> User | None:
        """Look up a user by name, ignoring case."""
        return next((user for user in self.get_users() if user.matches(name)), None)

    def get_top_users(self, limit: int) -> list[User]:
        """Users by score, highest first; ties keep insertion order."""
        return rank_users(self.get_users(), limit)

    def update_user_score(self, name: str, new_score: int, questions_answered: int) -> User:
        """Upsert the user's totals, matching the name case-insensitively."""
        users = self.get_users()
        now = self._clock()
        user = next((u for u in users if u.matches(name)), None)
        if user is None:
            user = User(name=name, score=new_score, questions_answered=questions_answered, last_played=now)
            users.append(user)
        else:
            user.score = new_score
            user.questions_answered = questions_answered
            user.last_played = now
        self._save_users(users)
        return user

    # --- Reset ---

    def clear_all(self) -> None:
        """Remove both collections from the store."""
        self._store.delete(QUESTIONS_KEY)
        self._store.delete(USERS_KEY)
        logger.info("Cleared all questions and users")

    def _save_questions(self, questions: list[Question]) -> bool:
        try:
            records = [QuestionRecord.from_question(q) for q in questions]
        except ValidationError:
            logger.exception("Error serializing questions; nothing was saved")
            return False
        return self._store.write_collection(QUESTIONS_KEY, QUESTION_LIST, records)

    def _save_users(self, users: list[User]) -> bool:
        try:
            records = [UserRecord.from_user(u) for u in users]
        except ValidationError:
            logger.exception("Error serializing users; nothing was saved")
            return False
        return self._store.write_collection(USERS_KEY, USER_LIST, records)
