"""Tests for the admin question form and id minting."""

from __future__ import annotations

import pytest
from conftest import make_question

from solo_quiz.core.question_form import QuestionForm, QuestionIdFactory, QuestionValidationError


def valid_form(**overrides) -> QuestionForm:
    values = {
        "question": "  What is 2 + 2?  ",
        "options": (" 3", "4 ", "5", "6"),
        "correct_answer": 1,
    }
    values.update(overrides)
    return QuestionForm(**values)


def test_to_question_trims_and_mints_id(id_factory: QuestionIdFactory) -> None:
    question = valid_form().to_question(id_factory=id_factory)

    assert question.id == "1700000000000"
    assert question.question == "What is 2 + 2?"
    assert question.options == ["3", "4", "5", "6"]
    assert question.correct_answer == 1
    assert question.created_at.endswith("Z")


def test_editing_keeps_existing_id(id_factory: QuestionIdFactory) -> None:
    question = valid_form().to_question(existing_id="42", id_factory=id_factory)
    assert question.id == "42"


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"question": "   "}, "Question text"),
        ({"options": ("a", " ", "c", "d")}, "Option B"),
        ({"options": ("a", "b", "c", "")}, "Option D"),
        ({"correct_answer": None}, "Select the correct option"),
        ({"correct_answer": 4}, "one of A, B, C or D"),
    ],
)
def test_validation_rejects_incomplete_forms(overrides, message) -> None:
    with pytest.raises(QuestionValidationError, match=message):
        valid_form(**overrides).validate()


def test_validation_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        QuestionForm().to_question()


def test_from_question_prefills_all_fields() -> None:
    question = make_question("7", correct_answer=3)
    form = QuestionForm.from_question(question)

    assert form.question == question.question
    assert form.options == tuple(question.options)
    assert form.correct_answer == 3


def test_with_option_replaces_by_index() -> None:
    form = valid_form().with_option(2, "five")
    assert form.options[2] == "five"
    with pytest.raises(IndexError):
        form.with_option(4, "nope")


def test_id_factory_is_strictly_increasing_within_a_millisecond() -> None:
    factory = QuestionIdFactory(clock_ms=lambda: 1000)
    ids = [factory.next_id() for _ in range(3)]
    assert ids == ["1000", "1001", "1002"]
