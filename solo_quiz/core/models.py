"""Domain models for the quiz application."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(slots=True)
class Question:
    """Multiple-choice question with exactly four options."""

    id: str
    question: str
    options: list[str]
    correct_answer: int
    created_at: str  # ISO 8601


@dataclass(slots=True)
class User:
    """Cumulative record for a player, keyed by case-insensitive name."""

    name: str
    score: int = 0
    questions_answered: int = 0
    last_played: str = ""  # ISO 8601

    def matches(self, name: str) -> bool:
        return self.name.casefold() == name.casefold()


@dataclass(slots=True)
class QuizSession:
    """Transient state of one playthrough. Never persisted."""

    current_user: str
    questions: list[Question] = field(default_factory=list)
    current_question_index: int = 0
    session_score: int = 0
    is_active: bool = True


def utc_now_iso() -> str:
    """Current UTC time as an ISO 8601 string with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
