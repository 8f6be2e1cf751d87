"""Component for curating the question bank."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QComboBox,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPlainTextEdit,
    QPushButton,
    QTextBrowser,
    QVBoxLayout,
    QWidget,
)

from solo_quiz.constants.quiz_constants import OPTION_LETTERS
from solo_quiz.constants.ui_constants import (
    ADMIN_BUTTON_BACK,
    ADMIN_BUTTON_CANCEL,
    ADMIN_BUTTON_DELETE,
    ADMIN_BUTTON_EXPORT,
    ADMIN_BUTTON_IMPORT,
    ADMIN_BUTTON_NEW,
    ADMIN_BUTTON_SAVE,
    ADMIN_EMPTY_STATE,
    ADMIN_TITLE,
    EXPORT_DIALOG_TITLE,
    EXPORT_FILE_FILTER,
    IMPORT_DIALOG_TITLE,
    IMPORT_FILE_FILTER,
    PLACEHOLDER_QUESTION,
)
from solo_quiz.core.models import Question
from solo_quiz.core.question_form import QuestionForm, QuestionValidationError
from solo_quiz.core.quiz_importer import QuizImportError
from solo_quiz.core.quiz_manager import QuizManager
from solo_quiz.styling.styles import Styles
from solo_quiz.ui.dialog_helpers import (
    check_unsaved_changes,
    confirm_delete_question,
    show_error,
    show_info,
    show_warning,
)
from solo_quiz.ui.question_renderer import render_question_preview


class AdminPanel(QWidget):
    """UI component for creating, editing and deleting questions."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        on_back: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self.on_back = on_back
        self._editing_id: str | None = None
        self._is_adding: bool = False
        self._has_unsaved_changes: bool = False
        self._last_export_path: Path | None = None

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header_row = QHBoxLayout()
        self.title_label = QLabel(ADMIN_TITLE, self)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        header_row.addWidget(self.title_label)
        header_row.addStretch()
        self.back_button = QPushButton(ADMIN_BUTTON_BACK, self)
        self.back_button.clicked.connect(self._handle_back)
        header_row.addWidget(self.back_button)
        layout.addLayout(header_row)

        action_row = QHBoxLayout()
        self.new_button = QPushButton(ADMIN_BUTTON_NEW, self)
        self.new_button.clicked.connect(self._handle_start_add)
        action_row.addWidget(self.new_button)

        self.delete_button = QPushButton(ADMIN_BUTTON_DELETE, self)
        self.delete_button.clicked.connect(self._handle_delete)
        action_row.addWidget(self.delete_button)

        self.import_button = QPushButton(ADMIN_BUTTON_IMPORT, self)
        self.import_button.clicked.connect(self._handle_import)
        action_row.addWidget(self.import_button)

        self.export_button = QPushButton(ADMIN_BUTTON_EXPORT, self)
        self.export_button.clicked.connect(self._handle_export)
        action_row.addWidget(self.export_button)
        layout.addLayout(action_row)

        body_row = QHBoxLayout()

        list_column = QVBoxLayout()
        self.question_list = QListWidget(self)
        self.question_list.currentItemChanged.connect(self._on_list_selection)
        list_column.addWidget(self.question_list, stretch=1)
        self.empty_label = QLabel(ADMIN_EMPTY_STATE, self)
        self.empty_label.setAlignment(Qt.AlignCenter)
        list_column.addWidget(self.empty_label)
        body_row.addLayout(list_column, stretch=1)

        form_column = QVBoxLayout()
        self.question_input = QPlainTextEdit(self)
        self.question_input.setPlaceholderText(PLACEHOLDER_QUESTION)
        self.question_input.textChanged.connect(self._on_input_changed)
        form_column.addWidget(self.question_input)

        self.option_inputs: list[QLineEdit] = []
        for letter in OPTION_LETTERS:
            option_input = QLineEdit(self)
            option_input.setPlaceholderText(f"Option {letter}")
            option_input.textChanged.connect(self._on_input_changed)
            form_column.addWidget(option_input)
            self.option_inputs.append(option_input)

        selector_row = QHBoxLayout()
        selector_row.addWidget(QLabel("Correct option:", self))
        self.correct_option_combo = QComboBox(self)
        self.correct_option_combo.addItem("Select...", userData=None)
        for index, letter in enumerate(OPTION_LETTERS):
            self.correct_option_combo.addItem(letter, userData=index)
        self.correct_option_combo.currentIndexChanged.connect(self._on_input_changed)
        selector_row.addWidget(self.correct_option_combo)
        selector_row.addStretch()
        form_column.addLayout(selector_row)

        save_row = QHBoxLayout()
        save_row.addStretch()
        self.cancel_button = QPushButton(ADMIN_BUTTON_CANCEL, self)
        self.cancel_button.clicked.connect(self._handle_cancel)
        save_row.addWidget(self.cancel_button)
        self.save_button = QPushButton(ADMIN_BUTTON_SAVE, self)
        self.save_button.clicked.connect(self._handle_save)
        save_row.addWidget(self.save_button)
        form_column.addLayout(save_row)

        self.preview_view = QTextBrowser(self)
        form_column.addWidget(self.preview_view, stretch=1)

        body_row.addLayout(form_column, stretch=2)
        layout.addLayout(body_row, stretch=1)

        self.status_label = QLabel("", self)
        layout.addWidget(self.status_label)

    # --- List ---

    def refresh(self) -> None:
        """Rebuild the question list from the manager's current bank."""
        self._populate_list(self.quiz_manager.get_questions())
        self._set_form_enabled(self._is_adding or self._editing_id is not None)

    def _populate_list(self, questions: list[Question]) -> None:
        self.question_list.blockSignals(True)
        self.question_list.clear()
        for number, question in enumerate(questions, start=1):
            correct = OPTION_LETTERS[question.correct_answer]
            item = QListWidgetItem(f"{number}. {question.question}  [{correct}]", self.question_list)
            item.setData(Qt.UserRole, question.id)
            if question.id == self._editing_id:
                self.question_list.setCurrentItem(item)
        self.question_list.blockSignals(False)
        self.empty_label.setVisible(not questions)
        self.status_label.setText(f"{len(questions)} question(s) in the bank.")

    def _on_list_selection(self, current: QListWidgetItem | None, previous: QListWidgetItem | None) -> None:
        if current is None:
            return
        if not self.check_unsaved_changes():
            self.question_list.blockSignals(True)
            self.question_list.setCurrentItem(previous)
            self.question_list.blockSignals(False)
            return
        question_id = current.data(Qt.UserRole)
        question = next((q for q in self.quiz_manager.get_questions() if q.id == question_id), None)
        if question is None:
            return
        self._editing_id = question.id
        self._is_adding = False
        self.populate_fields(QuestionForm.from_question(question))
        self._set_form_enabled(True)
        self.status_label.setText("Editing the selected question.")

    # --- Form ---

    def _on_input_changed(self) -> None:
        self._has_unsaved_changes = True
        self._refresh_preview()

    def _handle_start_add(self) -> None:
        if not self.check_unsaved_changes():
            return
        self._editing_id = None
        self._is_adding = True
        self.question_list.clearSelection()
        self.clear_fields()
        self._set_form_enabled(True)
        self.question_input.setFocus()
        self.status_label.setText("Ready to add a new question.")

    def _handle_save(self) -> None:
        form = self._build_form_from_inputs()
        try:
            saved = self.quiz_manager.save_question(form, editing_id=self._editing_id)
        except QuestionValidationError as exc:
            show_warning(self, "Invalid question", str(exc))
            return

        self._has_unsaved_changes = False
        verb = "Updated" if self._editing_id else "Added"
        self._editing_id = saved.id
        self._is_adding = False
        self._populate_list(self.quiz_manager.get_questions())
        self.status_label.setText(f"{verb} question. {self.quiz_manager.question_count} question(s) in the bank.")

    def _handle_cancel(self) -> None:
        self._editing_id = None
        self._is_adding = False
        self.question_list.clearSelection()
        self.clear_fields()
        self._set_form_enabled(False)

    def _handle_delete(self) -> None:
        if self._editing_id is None:
            show_info(self, "No selection", "Select a question before deleting.")
            return
        prompt = self.question_input.toPlainText().strip()
        if not confirm_delete_question(self, prompt):
            return
        self.quiz_manager.delete_question(self._editing_id)
        self._handle_cancel()
        self._populate_list(self.quiz_manager.get_questions())
        self.status_label.setText(f"Question deleted. {self.quiz_manager.question_count} question(s) left.")

    def _handle_back(self) -> None:
        if not self.check_unsaved_changes():
            return
        self._handle_cancel()
        self.on_back()

    def check_unsaved_changes(self) -> bool:
        """Prompt about unsaved edits. Returns True if it is ok to proceed."""
        if not self._has_unsaved_changes:
            return True

        result = check_unsaved_changes(self)

        if result is True:  # Save
            self._handle_save()
            return not self._has_unsaved_changes
        elif result is False:  # Discard
            self._has_unsaved_changes = False
            return True
        else:  # Cancel (None)
            return False

    def _build_form_from_inputs(self) -> QuestionForm:
        correct_data = self.correct_option_combo.currentData()
        return QuestionForm(
            question=self.question_input.toPlainText(),
            options=tuple(field.text() for field in self.option_inputs),  # type: ignore[arg-type]
            correct_answer=None if correct_data is None else int(correct_data),
        )

    def clear_fields(self) -> None:
        self.populate_fields(QuestionForm())

    def populate_fields(self, form: QuestionForm) -> None:
        self.question_input.setPlainText(form.question)
        for field, text in zip(self.option_inputs, form.options):
            field.setText(text)
        if form.correct_answer is not None:
            self.correct_option_combo.setCurrentIndex(form.correct_answer + 1)
        else:
            self.correct_option_combo.setCurrentIndex(0)
        self._has_unsaved_changes = False
        self._refresh_preview()

    def _set_form_enabled(self, enabled: bool) -> None:
        widgets = [self.question_input, *self.option_inputs, self.correct_option_combo, self.save_button, self.cancel_button]
        for widget in widgets:
            widget.setEnabled(enabled)
        self.delete_button.setEnabled(self._editing_id is not None)

    def _refresh_preview(self) -> None:
        options = [field.text() for field in self.option_inputs]
        self.preview_view.setHtml(render_question_preview(self.question_input.toPlainText(), options))

    # --- Files ---

    def _handle_import(self) -> None:
        if not self.check_unsaved_changes():
            return
        file_path, _ = QFileDialog.getOpenFileName(self, IMPORT_DIALOG_TITLE, str(Path.home()), IMPORT_FILE_FILTER)
        if not file_path:
            return
        try:
            imported = self.quiz_manager.import_questions(Path(file_path))
        except (OSError, QuizImportError) as exc:
            show_error(self, "Import failed", str(exc))
            return
        self._populate_list(self.quiz_manager.get_questions())
        show_info(self, "Questions imported", f"Imported {len(imported.questions)} question(s).")

    def _handle_export(self) -> None:
        if self.quiz_manager.question_count == 0:
            show_warning(self, "No questions", "There are no questions to export.")
            return
        default_path = self._last_export_path or (Path.cwd() / "questions_export.txt")
        file_path, _ = QFileDialog.getSaveFileName(self, EXPORT_DIALOG_TITLE, str(default_path), EXPORT_FILE_FILTER)
        if not file_path:
            return
        try:
            self.quiz_manager.export_questions(Path(file_path))
        except (OSError, ValueError) as exc:
            show_error(self, "Export failed", str(exc))
            return
        self._last_export_path = Path(file_path)
        show_info(self, "Questions saved", f"Questions exported to {file_path}.")

    def apply_font_size(self, font_size: int) -> None:
        style = f"font-size: {font_size}pt;"
        buttons = [
            self.new_button,
            self.delete_button,
            self.import_button,
            self.export_button,
            self.save_button,
            self.cancel_button,
            self.back_button,
        ]
        for button in buttons:
            button.setStyleSheet(style)
