"""Tests for the question bank and player records."""

from __future__ import annotations

from conftest import make_question

from solo_quiz.constants.storage_constants import QUESTIONS_KEY
from solo_quiz.core.services.quiz_repository import QuizRepository
from solo_quiz.core.storage import MemoryBackend, PersistenceStore, StorageError


def test_empty_store_has_no_questions_or_users(repository: QuizRepository) -> None:
    assert repository.list_questions() == []
    assert repository.get_users() == []
    assert repository.get_user("anyone") is None


def test_question_round_trip_is_field_for_field_identical(repository: QuizRepository) -> None:
    question = make_question("17", correct_answer=3, prompt="Which planet is *red*?\nPick one.")
    repository.add_question(question)

    assert repository.list_questions() == [question]


def test_mutations_reflect_net_effect_in_insertion_order(repository: QuizRepository) -> None:
    for question_id in ("1", "2", "3", "4"):
        repository.add_question(make_question(question_id))

    repository.remove_question("2")
    edited = make_question("3", correct_answer=2, prompt="Edited?")
    repository.update_question("3", edited)
    repository.add_question(make_question("5"))

    assert [q.id for q in repository.list_questions()] == ["1", "3", "4", "5"]
    assert repository.list_questions()[1] == edited


def test_mutations_return_the_updated_collection(repository: QuizRepository) -> None:
    after_add = repository.add_question(make_question("1"))
    assert [q.id for q in after_add] == ["1"]

    after_update = repository.update_question("1", make_question("1", correct_answer=1))
    assert after_update[0].correct_answer == 1

    after_remove = repository.remove_question("1")
    assert after_remove == []
    assert repository.list_questions() == after_remove


def test_unknown_ids_are_silent_no_ops(repository: QuizRepository) -> None:
    repository.add_question(make_question("1"))

    assert [q.id for q in repository.update_question("missing", make_question("missing"))] == ["1"]
    assert [q.id for q in repository.remove_question("missing")] == ["1"]
    assert [q.id for q in repository.list_questions()] == ["1"]


def test_duplicate_ids_are_both_kept(repository: QuizRepository) -> None:
    repository.add_question(make_question("dup", prompt="First"))
    repository.add_question(make_question("dup", prompt="Second"))

    assert [q.question for q in repository.list_questions()] == ["First", "Second"]

    # Update only touches the first match; removal drops both.
    repository.update_question("dup", make_question("dup", prompt="First, edited"))
    assert [q.question for q in repository.list_questions()] == ["First, edited", "Second"]
    assert repository.remove_question("dup") == []


def test_user_lookup_ignores_case(repository: QuizRepository) -> None:
    repository.update_user_score("ANA", 4, 6)

    upper = repository.get_user("Ana")
    lower = repository.get_user("ana")
    assert upper is not None
    assert upper == lower
    assert upper.name == "ANA"


def test_update_user_score_upserts_by_case_insensitive_name(repository: QuizRepository) -> None:
    repository.update_user_score("Ana", 2, 3)
    repository.update_user_score("ana", 5, 7)

    users = repository.get_users()
    assert len(users) == 1
    assert users[0].name == "Ana"
    assert (users[0].score, users[0].questions_answered) == (5, 7)


def test_update_user_score_is_idempotent_except_last_played(repository: QuizRepository) -> None:
    first = repository.update_user_score("Bruno", 3, 4)
    second = repository.update_user_score("Bruno", 3, 4)

    assert len(repository.get_users()) == 1
    assert (second.name, second.score, second.questions_answered) == (first.name, first.score, first.questions_answered)
    assert second.last_played > first.last_played


def test_top_users_sorted_by_score_and_stable_on_ties(repository: QuizRepository) -> None:
    repository.update_user_score("carla", 5, 5)
    repository.update_user_score("ana", 9, 9)
    repository.update_user_score("bruno", 5, 6)
    repository.update_user_score("dora", 1, 3)

    top = repository.get_top_users(3)
    assert [u.name for u in top] == ["ana", "carla", "bruno"]
    assert [u.name for u in repository.get_top_users(3)] == [u.name for u in top]


def test_top_users_limit_bounds(repository: QuizRepository) -> None:
    repository.update_user_score("ana", 1, 1)
    repository.update_user_score("bruno", 2, 2)

    assert len(repository.get_top_users(5)) == 2
    assert repository.get_top_users(0) == []


def test_clear_all_removes_everything(repository: QuizRepository, backend: MemoryBackend) -> None:
    repository.add_question(make_question("1"))
    repository.update_user_score("Ana", 1, 1)

    repository.clear_all()

    assert backend.keys() == []
    assert repository.list_questions() == []
    assert repository.get_users() == []
    assert repository.get_user("Ana") is None


def test_seed_default_questions_only_fills_an_empty_bank(repository: QuizRepository) -> None:
    seeded = repository.seed_default_questions()
    assert [q.id for q in seeded] == ["1", "2", "3"]
    assert seeded[0].options[seeded[0].correct_answer] == "Brasília"

    repository.remove_question("2")
    assert [q.id for q in repository.seed_default_questions()] == ["1", "3"]


def test_import_questions_appends_batch(repository: QuizRepository) -> None:
    repository.add_question(make_question("1"))
    result = repository.import_questions([make_question("2"), make_question("3")])
    assert [q.id for q in result] == ["1", "2", "3"]


def test_corrupt_questions_do_not_affect_users(clock) -> None:
    backend = MemoryBackend({QUESTIONS_KEY: "garbage"})
    repository = QuizRepository(PersistenceStore(backend), clock=clock)
    repository.update_user_score("Ana", 1, 1)

    assert repository.list_questions() == []
    assert repository.get_user("ana") is not None


class FullDiskBackend(MemoryBackend):
    def set(self, key: str, value: str) -> None:
        raise StorageError("quota exceeded")


def test_write_failures_never_raise_and_return_in_memory_view(clock) -> None:
    repository = QuizRepository(PersistenceStore(FullDiskBackend()), clock=clock)

    after_add = repository.add_question(make_question("1"))
    user = repository.update_user_score("Ana", 3, 3)

    assert [q.id for q in after_add] == ["1"]
    assert user.score == 3
    assert repository.list_questions() == []
    assert repository.get_user("Ana") is None


def test_invalid_question_is_not_persisted(repository: QuizRepository) -> None:
    broken = make_question("1")
    broken.options = ["only", "three", "options"]

    repository.add_question(broken)

    assert repository.list_questions() == []
