"""Admin-side question form: four fixed option fields validated as a unit."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
import time

from solo_quiz.constants.quiz_constants import OPTION_COUNT, OPTION_LETTERS
from solo_quiz.core.models import Question, utc_now_iso


class QuestionValidationError(ValueError):
    """Raised when the form cannot be turned into a question."""


class QuestionIdFactory:
    """Mints time-based question ids (milliseconds since the epoch).

    Two ids requested within the same millisecond are bumped so that every id
    handed out by one factory is strictly greater than the previous one.
    """

    def __init__(self, clock_ms: Callable[[], int] | None = None) -> None:
        self._clock_ms = clock_ms or (lambda: time.time_ns() // 1_000_000)
        self._last_issued: int = 0

    def next_id(self) -> str:
        candidate = self._clock_ms()
        if candidate <= self._last_issued:
            candidate = self._last_issued + 1
        self._last_issued = candidate
        return str(candidate)


_default_id_factory = QuestionIdFactory()


def _empty_options() -> tuple[str, str, str, str]:
    return ("", "", "", "")


@dataclass(slots=True)
class QuestionForm:
    """Raw values typed into the admin form."""

    question: str = ""
    options: tuple[str, str, str, str] = field(default_factory=_empty_options)
    correct_answer: int | None = None

    @classmethod
    def from_question(cls, question: Question) -> "QuestionForm":
        padded = list(question.options[:OPTION_COUNT]) + [""] * (OPTION_COUNT - len(question.options))
        return cls(
            question=question.question,
            options=tuple(padded),  # type: ignore[arg-type]
            correct_answer=question.correct_answer,
        )

    def with_option(self, index: int, text: str) -> "QuestionForm":
        """Return a copy with option ``index`` replaced."""
        if not 0 <= index < OPTION_COUNT:
            raise IndexError(f"Option index {index} out of range")
        options = list(self.options)
        options[index] = text
        return QuestionForm(
            question=self.question,
            options=tuple(options),  # type: ignore[arg-type]
            correct_answer=self.correct_answer,
        )

    def validate(self) -> tuple[str, list[str], int]:
        """Return trimmed prompt, options and correct index, or raise."""
        prompt = self.question.strip()
        if not prompt:
            raise QuestionValidationError("Question text must not be empty.")
        if len(self.options) != OPTION_COUNT:
            raise QuestionValidationError("Each question must have exactly four options.")
        options = [option.strip() for option in self.options]
        for letter, option in zip(OPTION_LETTERS, options):
            if not option:
                raise QuestionValidationError(f"Option {letter} must not be empty.")
        if self.correct_answer is None:
            raise QuestionValidationError("Select the correct option before saving.")
        if not 0 <= self.correct_answer < OPTION_COUNT:
            raise QuestionValidationError("Correct option must be one of A, B, C or D.")
        return prompt, options, self.correct_answer

    def to_question(
        self,
        existing_id: str | None = None,
        id_factory: QuestionIdFactory | None = None,
    ) -> Question:
        """Build a validated question, keeping ``existing_id`` when editing."""
        prompt, options, correct_answer = self.validate()
        question_id = existing_id or (id_factory or _default_id_factory).next_id()
        return Question(
            id=question_id,
            question=prompt,
            options=options,
            correct_answer=correct_answer,
            created_at=utc_now_iso(),
        )
