"""Shared fixtures for the SoloQuiz test suite."""

from __future__ import annotations

import itertools

import pytest

from solo_quiz.core.models import Question
from solo_quiz.core.question_form import QuestionIdFactory
from solo_quiz.core.services.quiz_repository import QuizRepository
from solo_quiz.core.storage import MemoryBackend, PersistenceStore


class TickingClock:
    """Returns a new, increasing ISO timestamp on every call."""

    def __init__(self) -> None:
        self._ticks = itertools.count(1)

    def __call__(self) -> str:
        return f"2024-01-01T00:00:{next(self._ticks):02d}.000Z"


@pytest.fixture
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def store(backend: MemoryBackend) -> PersistenceStore:
    return PersistenceStore(backend)


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def repository(store: PersistenceStore, clock: TickingClock) -> QuizRepository:
    return QuizRepository(store, clock=clock)


@pytest.fixture
def id_factory() -> QuestionIdFactory:
    counter = itertools.count(1_700_000_000_000)
    return QuestionIdFactory(clock_ms=lambda: next(counter))


def make_question(question_id: str, correct_answer: int = 0, prompt: str | None = None) -> Question:
    return Question(
        id=question_id,
        question=prompt or f"Question {question_id}?",
        options=[f"{question_id}-a", f"{question_id}-b", f"{question_id}-c", f"{question_id}-d"],
        correct_answer=correct_answer,
        created_at="2024-01-01T00:00:00.000Z",
    )
