"""Persisted record layout for the two stored collections.

The store keeps JSON arrays with camelCase keys. These pydantic models
validate what comes back from storage and convert between the persisted
layout and the domain dataclasses in ``solo_quiz.core.models``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from solo_quiz.constants.quiz_constants import OPTION_COUNT
from solo_quiz.core.models import Question, User


class QuestionRecord(BaseModel):
    """Stored shape of a question: ``{id, question, options, correctAnswer, createdAt}``."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    question: str
    options: list[str] = Field(min_length=OPTION_COUNT, max_length=OPTION_COUNT)
    correct_answer: int = Field(alias="correctAnswer", ge=0, lt=OPTION_COUNT)
    created_at: str = Field(alias="createdAt")

    @classmethod
    def from_question(cls, question: Question) -> "QuestionRecord":
        return cls(
            id=question.id,
            question=question.question,
            options=list(question.options),
            correct_answer=question.correct_answer,
            created_at=question.created_at,
        )

    def to_question(self) -> Question:
        return Question(
            id=self.id,
            question=self.question,
            options=list(self.options),
            correct_answer=self.correct_answer,
            created_at=self.created_at,
        )


class UserRecord(BaseModel):
    """Stored shape of a user: ``{name, score, questionsAnswered, lastPlayed}``."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    score: int = 0
    questions_answered: int = Field(default=0, alias="questionsAnswered")
    last_played: str = Field(default="", alias="lastPlayed")

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("User name must not be empty.")
        return value

    @classmethod
    def from_user(cls, user: User) -> "UserRecord":
        return cls(
            name=user.name,
            score=user.score,
            questions_answered=user.questions_answered,
            last_played=user.last_played,
        )

    def to_user(self) -> User:
        return User(
            name=self.name,
            score=self.score,
            questions_answered=self.questions_answered,
            last_played=self.last_played,
        )


QUESTION_LIST = TypeAdapter(list[QuestionRecord])
USER_LIST = TypeAdapter(list[UserRecord])
