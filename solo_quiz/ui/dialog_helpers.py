"""Helper functions for common dialog patterns in the quiz UI."""

from __future__ import annotations

from PySide6.QtGui import QFont
from PySide6.QtWidgets import QMessageBox, QWidget


def _apply_optional_font(widget: QWidget, font_point_size: int | None) -> None:
    """Apply font size to a widget when requested."""
    if font_point_size is None or font_point_size <= 0:
        return

    font: QFont = widget.font()
    font.setPointSize(font_point_size)
    widget.setFont(font)


def _ask(parent: QWidget, title: str, message: str) -> bool:
    reply = QMessageBox.question(
        parent,
        title,
        message,
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No,
    )
    return reply == QMessageBox.Yes


def confirm_delete_question(parent: QWidget, question_text: str) -> bool:
    """Show confirmation dialog for deleting a question.

    Args:
        parent: Parent widget for the dialog
        question_text: Prompt of the question, shortened for display

    Returns:
        True if user confirmed, False otherwise
    """
    preview = question_text if len(question_text) <= 60 else f"{question_text[:57]}..."
    return _ask(parent, "Confirm Delete", f"Are you sure you want to delete this question?\n\n{preview}")


def confirm_reset_all(parent: QWidget) -> bool:
    """Ask before erasing every question and score. Returns True if confirmed."""
    return _ask(
        parent,
        "Confirm Reset",
        "Delete ALL questions and scores? This cannot be undone!",
    )


def check_unsaved_changes(parent: QWidget) -> bool | None:
    """Show dialog asking user about unsaved changes.

    Returns:
        True if user wants to save, False if discard, None if cancelled
    """
    reply = QMessageBox.question(
        parent,
        "Unsaved Changes",
        "The question is not saved. Do you want to save it?",
        QMessageBox.Yes | QMessageBox.No | QMessageBox.Cancel,
        QMessageBox.Yes,
    )

    if reply == QMessageBox.Yes:
        return True
    elif reply == QMessageBox.No:
        return False
    else:  # Cancel
        return None


def show_error(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.critical(parent, title, message)


def show_info(
    parent: QWidget,
    title: str,
    message: str,
    *,
    font_point_size: int | None = None,
) -> None:
    """Show information dialog, optionally with a larger font."""
    msg_box = QMessageBox(parent)
    msg_box.setIcon(QMessageBox.Information)
    msg_box.setWindowTitle(title)
    msg_box.setText(message)
    msg_box.setStandardButtons(QMessageBox.Ok)
    _apply_optional_font(msg_box, font_point_size)
    if font_point_size is not None and font_point_size > 0:
        msg_box.setStyleSheet(
            f"QLabel {{ font-size: {font_point_size}pt; }}\n"
            f"QPushButton {{ font-size: {font_point_size}pt; }}"
        )
    msg_box.exec()


def show_warning(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.warning(parent, title, message)
