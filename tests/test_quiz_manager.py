"""Tests for the application facade used by the Qt screens."""

from __future__ import annotations

from pathlib import Path

import pytest

from solo_quiz.core.question_form import QuestionForm, QuestionValidationError
from solo_quiz.core.quiz_importer import QuizImportError
from solo_quiz.core.quiz_manager import NoQuestionsError, QuizManager
from solo_quiz.core.services.game_session import SessionState
from solo_quiz.core.services.quiz_repository import QuizRepository


@pytest.fixture
def manager(repository: QuizRepository, id_factory) -> QuizManager:
    manager = QuizManager(repository, id_factory=id_factory)
    manager.seed_default_questions()
    return manager


def finish(manager: QuizManager, choices: list[int]):
    session = manager.start_quiz()
    result = None
    for choice in choices:
        session.select_answer(choice)
        session.confirm_answer()
        result = session.advance()
    assert result is not None
    manager.finish_quiz(result)
    return result


def test_login_does_not_create_a_user(manager: QuizManager, repository: QuizRepository) -> None:
    assert manager.login("  Ana  ") is None
    assert manager.current_user_name == "Ana"
    assert manager.current_score == 0
    assert repository.get_users() == []


def test_login_rejects_blank_names(manager: QuizManager) -> None:
    with pytest.raises(ValueError):
        manager.login("   ")
    assert not manager.is_logged_in()


def test_returning_player_starts_from_stored_score(manager: QuizManager, repository: QuizRepository) -> None:
    repository.update_user_score("Ana", 9, 12)

    existing = manager.login("ANA")

    assert existing is not None
    assert manager.current_score == 9


def test_full_playthrough_updates_score_and_leaderboard(manager: QuizManager) -> None:
    manager.login("Ana")
    result = finish(manager, [2, 1, 0])

    assert result.session_score == 2
    assert manager.current_score == 2
    rows = manager.get_leaderboard()
    assert [(r.rank, r.name, r.score) for r in rows] == [(1, "Ana", 2)]

    finish(manager, [2, 1, 2])
    stats = manager.get_current_user_stats()
    assert stats is not None
    assert (stats.score, stats.questions_answered) == (5, 6)


def test_start_quiz_requires_questions(manager: QuizManager) -> None:
    manager.login("Ana")
    manager.reset_all()

    with pytest.raises(NoQuestionsError):
        manager.start_quiz()


def test_start_quiz_requires_login(manager: QuizManager) -> None:
    with pytest.raises(RuntimeError):
        manager.start_quiz()


def test_save_question_adds_then_updates(manager: QuizManager) -> None:
    form = QuestionForm(question="Capital of Portugal?", options=("Porto", "Lisbon", "Braga", "Faro"), correct_answer=1)

    added = manager.save_question(form)
    assert manager.question_count == 4
    assert manager.get_questions()[-1] == added

    edited_form = form.with_option(3, "Coimbra")
    edited = manager.save_question(edited_form, editing_id=added.id)
    assert edited.id == added.id
    assert manager.question_count == 4
    assert manager.get_questions()[-1].options[3] == "Coimbra"


def test_invalid_form_is_never_persisted(manager: QuizManager, repository: QuizRepository) -> None:
    with pytest.raises(QuestionValidationError):
        manager.save_question(QuestionForm(question="Half done", options=("a", "", "c", "d"), correct_answer=0))
    assert len(repository.list_questions()) == 3


def test_delete_question(manager: QuizManager, repository: QuizRepository) -> None:
    manager.delete_question("2")
    assert [q.id for q in manager.get_questions()] == ["1", "3"]
    assert [q.id for q in repository.list_questions()] == ["1", "3"]


def test_reset_all_zeroes_current_score_and_abandons_session(manager: QuizManager, repository: QuizRepository) -> None:
    manager.login("Ana")
    finish(manager, [2, 1, 2])
    session = manager.start_quiz()

    manager.reset_all()

    assert session.state == SessionState.ABANDONED
    assert manager.current_score == 0
    assert manager.question_count == 0
    assert repository.get_user("Ana") is None
    assert manager.get_leaderboard() == []


def test_logout_clears_player(manager: QuizManager) -> None:
    manager.login("Ana")
    session = manager.start_quiz()

    manager.logout()

    assert not manager.is_logged_in()
    assert manager.current_score == 0
    assert session.state == SessionState.ABANDONED


def test_import_and_export_round_trip(manager: QuizManager, tmp_path: Path) -> None:
    export_path = tmp_path / "bank.txt"
    manager.export_questions(export_path)

    imported = manager.import_questions(export_path)

    assert len(imported.questions) == 3
    assert manager.question_count == 6
    originals = manager.get_questions()[:3]
    copies = manager.get_questions()[3:]
    for original, copy in zip(originals, copies):
        assert copy.id != original.id
        assert (copy.question, copy.options, copy.correct_answer) == (
            original.question,
            original.options,
            original.correct_answer,
        )


def test_leaderboard_comes_from_repository_top_users(
    manager: QuizManager, repository: QuizRepository, monkeypatch: pytest.MonkeyPatch
) -> None:
    repository.update_user_score("Ana", 3, 3)
    repository.update_user_score("Bruno", 8, 9)
    repository.update_user_score("Carla", 5, 6)
    calls = []
    original = repository.get_top_users

    def recording_top_users(limit: int):
        calls.append(limit)
        return original(limit)

    monkeypatch.setattr(repository, "get_top_users", recording_top_users)

    rows = manager.get_leaderboard(2)

    assert calls == [2]
    assert [(r.rank, r.name) for r in rows] == [(1, "Bruno"), (2, "Carla")]


def test_import_of_non_utf8_file_changes_nothing(manager: QuizManager, tmp_path: Path) -> None:
    path = tmp_path / "latin1.txt"
    path.write_bytes("Q: Água?\nA: 1\nB: 2\nC: 3\nD: 4\nCORRECT: B\n".encode("latin-1"))

    with pytest.raises(QuizImportError):
        manager.import_questions(path)
    assert manager.question_count == 3
