"""Tests for the quiz session state machine."""

from __future__ import annotations

import pytest
from conftest import make_question

from solo_quiz.core.services.game_session import GameSession, SessionState
from solo_quiz.core.services.quiz_repository import QuizRepository


@pytest.fixture
def three_questions():
    return [make_question("q1", 2), make_question("q2", 1), make_question("q3", 2)]


def play(session: GameSession, choices: list[int]):
    result = None
    for choice in choices:
        session.select_answer(choice)
        session.confirm_answer()
        result = session.advance()
    return result


def test_scoring_example(repository: QuizRepository, three_questions) -> None:
    repository.update_user_score("Ana", 10, 4)
    session = GameSession(repository, "Ana", prior_score=10, questions=three_questions, prior_questions_answered=4)

    result = play(session, [2, 0, 2])

    assert session.session_score == 2
    assert session.total_answered == 3
    assert session.state == SessionState.FINISHED
    assert result is not None
    assert result.final_score == 12
    stored = repository.get_user("ana")
    assert stored is not None
    assert stored.score == 12
    assert stored.questions_answered == 7


def test_new_player_record_created_only_at_finish(repository: QuizRepository, three_questions) -> None:
    session = GameSession(repository, "Newbie", prior_score=0, questions=three_questions)

    session.select_answer(2)
    session.confirm_answer()
    session.advance()
    assert repository.get_user("Newbie") is None

    play(session, [1, 2])
    stored = repository.get_user("newbie")
    assert stored is not None
    assert (stored.score, stored.questions_answered) == (3, 3)


def test_confirm_without_selection_is_a_no_op(repository: QuizRepository, three_questions) -> None:
    session = GameSession(repository, "Ana", prior_score=0, questions=three_questions)

    assert session.confirm_answer() is None
    assert session.state == SessionState.AWAITING_SELECTION
    assert session.total_answered == 0


def test_selection_can_change_until_confirmed(repository: QuizRepository, three_questions) -> None:
    session = GameSession(repository, "Ana", prior_score=0, questions=three_questions)

    session.select_answer(0)
    session.select_answer(2)
    assert session.state == SessionState.ANSWER_SELECTED
    assert session.selected_index == 2

    result = session.confirm_answer()
    assert result is not None
    assert result.is_correct
    assert (result.selected_index, result.correct_index) == (2, 2)


def test_selection_is_locked_after_confirmation(repository: QuizRepository, three_questions) -> None:
    session = GameSession(repository, "Ana", prior_score=0, questions=three_questions)
    session.select_answer(0)
    first = session.confirm_answer()

    session.select_answer(2)
    assert session.selected_index == 0
    assert session.confirm_answer() is None
    assert session.last_result == first
    assert session.session_score == 0
    assert session.total_answered == 1


def test_advance_only_after_result_shown(repository: QuizRepository, three_questions) -> None:
    session = GameSession(repository, "Ana", prior_score=0, questions=three_questions)

    assert session.advance() is None
    assert session.current_index == 0
    session.select_answer(1)
    assert session.advance() is None
    assert session.current_index == 0

    session.confirm_answer()
    session.advance()
    assert session.current_index == 1
    assert session.state == SessionState.AWAITING_SELECTION
    assert session.selected_index is None
    assert session.last_result is None


def test_running_score_uses_prior_snapshot(repository: QuizRepository, three_questions) -> None:
    session = GameSession(repository, "Ana", prior_score=7, questions=three_questions)
    repository.update_user_score("Ana", 100, 100)

    session.select_answer(2)
    session.confirm_answer()

    assert session.running_score == 8
    session.advance()
    play(session, [0, 0])
    stored = repository.get_user("Ana")
    assert stored is not None
    assert stored.score == 8


def test_final_score_written_exactly_once(three_questions) -> None:
    calls = []

    class RecordingRepository:
        def update_user_score(self, name, new_score, questions_answered):
            calls.append((name, new_score, questions_answered))

    session = GameSession(RecordingRepository(), "Ana", prior_score=1, questions=three_questions)  # type: ignore[arg-type]
    play(session, [2, 1, 2])

    assert session.advance() is None
    session.select_answer(0)
    assert session.confirm_answer() is None
    assert calls == [("Ana", 4, 3)]


def test_question_snapshot_ignores_later_bank_edits(repository: QuizRepository) -> None:
    questions = [make_question("q1", 0)]
    repository.add_question(questions[0])
    session = GameSession(repository, "Ana", prior_score=0, questions=repository.list_questions())

    repository.update_question("q1", make_question("q1", 3))
    repository.add_question(make_question("q2", 0))

    assert session.question_count == 1
    session.select_answer(0)
    result = session.confirm_answer()
    assert result is not None and result.is_correct


def test_empty_question_list_is_no_content(repository: QuizRepository) -> None:
    session = GameSession(repository, "Ana", prior_score=0, questions=[])

    assert session.state == SessionState.NO_CONTENT
    assert session.state != SessionState.FINISHED
    assert session.get_current_question() is None
    assert not session.is_active
    session.select_answer(0)
    assert session.confirm_answer() is None
    assert session.advance() is None
    assert repository.get_users() == []


def test_out_of_range_selection_is_rejected(repository: QuizRepository, three_questions) -> None:
    session = GameSession(repository, "Ana", prior_score=0, questions=three_questions)

    with pytest.raises(ValueError):
        session.select_answer(4)
    assert session.state == SessionState.AWAITING_SELECTION


def test_abandon_discards_without_persisting(repository: QuizRepository, three_questions) -> None:
    session = GameSession(repository, "Ana", prior_score=0, questions=three_questions)
    session.select_answer(2)
    session.confirm_answer()

    session.abandon()

    assert session.state == SessionState.ABANDONED
    assert session.advance() is None
    assert repository.get_user("Ana") is None


def test_last_question_button_label_logic(repository: QuizRepository, three_questions) -> None:
    session = GameSession(repository, "Ana", prior_score=0, questions=three_questions)
    assert not session.is_last_question()
    play(session, [0, 0])
    assert session.is_last_question()
    assert session.get_current_question() == three_questions[2]


def test_questions_answered_accumulates_across_sessions(repository: QuizRepository, three_questions) -> None:
    first = GameSession(repository, "Ana", prior_score=0, questions=three_questions)
    first_result = play(first, [2, 1, 2])
    assert first_result is not None

    stored = repository.get_user("Ana")
    assert stored is not None
    second = GameSession(
        repository,
        "Ana",
        prior_score=stored.score,
        questions=three_questions,
        prior_questions_answered=stored.questions_answered,
    )
    second_result = play(second, [0, 0, 0])

    assert second_result is not None
    assert second_result.total_answered == 3
    assert second_result.lifetime_answered == 6
    stored = repository.get_user("Ana")
    assert stored is not None
    assert (stored.score, stored.questions_answered) == (3, 6)
