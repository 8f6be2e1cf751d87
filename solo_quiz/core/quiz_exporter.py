"""Utilities for exporting the question bank to the plain-text import format."""

from __future__ import annotations

from pathlib import Path

from solo_quiz.constants.quiz_constants import OPTION_LETTERS
from solo_quiz.core.models import Question


def save_questions_to_file(file_path: Path, questions: list[Question]) -> None:
    """Write the questions to disk in the text import format."""

    if not questions:
        raise ValueError("Cannot export an empty question bank.")

    file_path = file_path.resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(serialize_questions(questions), encoding="utf-8")


def serialize_questions(questions: list[Question]) -> str:
    return "\n\n---\n\n".join(_serialize_question(question) for question in questions) + "\n"


def _serialize_question(question: Question) -> str:
    prompt_lines = question.question.splitlines() or [""]
    lines = [f"Q: {prompt_lines[0]}", *prompt_lines[1:]]

    for letter, option in zip(OPTION_LETTERS, question.options):
        option_lines = option.splitlines() or [""]
        lines.append(f"{letter}: {option_lines[0]}")
        lines.extend(option_lines[1:])

    lines.append(f"CORRECT: {OPTION_LETTERS[question.correct_answer]}")
    return "\n".join(lines)
