"""Service driving a single quiz playthrough."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
import logging

from solo_quiz.constants.quiz_constants import POINTS_PER_CORRECT_ANSWER
from solo_quiz.core.models import Question, QuizSession
from solo_quiz.core.services.quiz_repository import QuizRepository

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """Where the current question stands in the confirm/reveal cycle."""

    AWAITING_SELECTION = auto()
    ANSWER_SELECTED = auto()
    RESULT_SHOWN = auto()
    FINISHED = auto()
    NO_CONTENT = auto()
    ABANDONED = auto()


@dataclass(slots=True, frozen=True)
class AnswerResult:
    """Outcome of a confirmed answer."""

    question_id: str
    selected_index: int
    correct_index: int
    is_correct: bool


@dataclass(slots=True, frozen=True)
class QuizResult:
    """Summary produced once the last result has been acknowledged."""

    user_name: str
    session_score: int
    total_answered: int
    final_score: int
    lifetime_answered: int


class GameSession:
    """State machine over a fixed snapshot of questions.

    The snapshot and the player's prior score are taken at construction, so
    admin edits or score changes made elsewhere are not seen until the next
    session. The final score is written through the repository exactly once,
    when ``advance`` is called on the last revealed result.
    """

    def __init__(
        self,
        repository: QuizRepository,
        user_name: str,
        prior_score: int,
        questions: list[Question],
        prior_questions_answered: int = 0,
    ) -> None:
        self._repository = repository
        self._prior_score = prior_score
        self._prior_questions_answered = prior_questions_answered
        self._session = QuizSession(current_user=user_name, questions=list(questions))
        self._selected_index: int | None = None
        self._last_result: AnswerResult | None = None
        self._total_answered: int = 0
        self._result: QuizResult | None = None

        if self._session.questions:
            self._state = SessionState.AWAITING_SELECTION
        else:
            self._state = SessionState.NO_CONTENT
            self._session.is_active = False

    # --- Read-only view ---

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def user_name(self) -> str:
        return self._session.current_user

    @property
    def is_active(self) -> bool:
        return self._session.is_active

    @property
    def current_index(self) -> int:
        return self._session.current_question_index

    @property
    def question_count(self) -> int:
        return len(self._session.questions)

    @property
    def selected_index(self) -> int | None:
        return self._selected_index

    @property
    def last_result(self) -> AnswerResult | None:
        return self._last_result

    @property
    def session_score(self) -> int:
        return self._session.session_score

    @property
    def total_answered(self) -> int:
        return self._total_answered

    @property
    def prior_score(self) -> int:
        return self._prior_score

    @property
    def running_score(self) -> int:
        """Cumulative score to show while playing."""
        return self._prior_score + self._session.session_score

    @property
    def result(self) -> QuizResult | None:
        return self._result

    def get_current_question(self) -> Question | None:
        if not self._session.is_active:
            return None
        return self._session.questions[self._session.current_question_index]

    def is_last_question(self) -> bool:
        return self._session.current_question_index >= len(self._session.questions) - 1

    # --- Transitions ---

    def select_answer(self, option_index: int) -> None:
        """Tentatively choose an option. Ignored once the result is shown."""
        if self._state not in (SessionState.AWAITING_SELECTION, SessionState.ANSWER_SELECTED):
            return
        question = self._session.questions[self._session.current_question_index]
        if not 0 <= option_index < len(question.options):
            raise ValueError(f"Option index {option_index} out of range")
        self._selected_index = option_index
        self._state = SessionState.ANSWER_SELECTED

    def confirm_answer(self) -> AnswerResult | None:
        """Lock in the tentative choice and reveal correctness.

        Without a tentative choice this is a no-op and returns ``None``.
        """
        if self._state != SessionState.ANSWER_SELECTED or self._selected_index is None:
            return None

        question = self._session.questions[self._session.current_question_index]
        is_correct = self._selected_index == question.correct_answer
        if is_correct:
            self._session.session_score += POINTS_PER_CORRECT_ANSWER
        self._total_answered += 1

        self._last_result = AnswerResult(
            question_id=question.id,
            selected_index=self._selected_index,
            correct_index=question.correct_answer,
            is_correct=is_correct,
        )
        self._state = SessionState.RESULT_SHOWN
        return self._last_result

    def advance(self) -> QuizResult | None:
        """Move past a revealed result; finishing the quiz on the last question.

        Returns the ``QuizResult`` when this call finished the quiz.
        """
        if self._state != SessionState.RESULT_SHOWN:
            return None

        if not self.is_last_question():
            self._session.current_question_index += 1
            self._selected_index = None
            self._last_result = None
            self._state = SessionState.AWAITING_SELECTION
            return None

        final_score = self._prior_score + self._session.session_score
        lifetime_answered = self._prior_questions_answered + self._total_answered
        self._repository.update_user_score(self._session.current_user, final_score, lifetime_answered)
        self._result = QuizResult(
            user_name=self._session.current_user,
            session_score=self._session.session_score,
            total_answered=self._total_answered,
            final_score=final_score,
            lifetime_answered=lifetime_answered,
        )
        self._session.is_active = False
        self._state = SessionState.FINISHED
        logger.info(
            "Quiz finished for %s: %d/%d correct, total score %d",
            self._session.current_user,
            self._session.session_score,
            self._total_answered,
            final_score,
        )
        return self._result

    def abandon(self) -> None:
        """Discard the playthrough without recording anything."""
        if self._state in (SessionState.FINISHED, SessionState.NO_CONTENT, SessionState.ABANDONED):
            return
        self._session.is_active = False
        self._selected_index = None
        self._state = SessionState.ABANDONED
        logger.info("Quiz abandoned by %s", self._session.current_user)
