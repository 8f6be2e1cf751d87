"""Read a question bank from a plain-text file.

Each question is a block of marker lines; blocks are separated by blank lines
or a line holding only ``---``::

    Q: Which planet is known as the red planet?
    A: Venus
    B: Mars
    C: Jupiter
    D: Mercury
    CORRECT: B

Lines without a marker continue the prompt or option above them. Markers are
case-insensitive and ``CORRECT`` is mandatory.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import re

from solo_quiz.constants.quiz_constants import OPTION_LETTERS
from solo_quiz.core.models import Question
from solo_quiz.core.question_form import QuestionForm, QuestionIdFactory, QuestionValidationError

_MARKER = re.compile(r"^(Q|A|B|C|D|CORRECT)\s*:\s?(.*)$", re.IGNORECASE)
_SEPARATOR = "---"


class QuizImportError(Exception):
    """Raised when a question file cannot be parsed."""


@dataclass(slots=True)
class ImportedQuestions:
    """Questions read from one file."""

    source_path: Path
    questions: list[Question]


def load_questions_from_file(file_path: Path, id_factory: QuestionIdFactory | None = None) -> ImportedQuestions:
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise QuizImportError(f"Question file is not valid UTF-8: {exc.reason}") from exc
    questions = parse_questions(text, id_factory=id_factory)
    if not questions:
        raise QuizImportError("Question file did not contain any questions.")
    return ImportedQuestions(source_path=file_path, questions=questions)


def parse_questions(text: str, id_factory: QuestionIdFactory | None = None) -> list[Question]:
    """Parse every block in ``text``; each question gets a freshly minted id."""
    forms = [_parse_block(lines, number) for number, lines in enumerate(_split_blocks(text), start=1)]
    return [form.to_question(id_factory=id_factory) for form in forms]


def _split_blocks(text: str) -> list[list[str]]:
    blocks: list[list[str]] = [[]]
    for line in (raw.strip() for raw in text.splitlines()):
        if line and line != _SEPARATOR:
            blocks[-1].append(line)
        elif blocks[-1]:
            blocks.append([])
    return [block for block in blocks if block]


def _parse_block(lines: list[str], number: int) -> QuestionForm:
    sections: dict[str, list[str]] = {}
    section: str | None = None

    for line in lines:
        match = _MARKER.match(line)
        if match:
            section = match.group(1).upper()
            sections[section] = [match.group(2).strip()]
        elif section is not None and section != "CORRECT":
            sections[section].append(line)
        else:
            raise QuizImportError(f"Question {number}: text outside of a known section: '{line}'.")

    if "Q" not in sections:
        raise QuizImportError(f"Question {number}: question text missing (Q: ...).")
    if any(letter not in sections for letter in OPTION_LETTERS):
        raise QuizImportError(f"Question {number}: exactly four options (A-D) are required.")
    if "CORRECT" not in sections:
        raise QuizImportError(f"Question {number}: CORRECT is required.")
    correct_letter = sections["CORRECT"][0].upper()
    if correct_letter not in OPTION_LETTERS:
        raise QuizImportError(f"Question {number}: CORRECT must be one of A, B, C or D.")

    form = QuestionForm(
        question="\n".join(sections["Q"]),
        options=tuple("\n".join(sections[letter]) for letter in OPTION_LETTERS),  # type: ignore[arg-type]
        correct_answer=OPTION_LETTERS.index(correct_letter),
    )
    try:
        form.validate()
    except QuestionValidationError as exc:
        raise QuizImportError(f"Question {number}: {exc}") from exc
    return form
