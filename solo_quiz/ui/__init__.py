"""Qt UI components for the quiz application."""

from .dialog_helpers import (
    check_unsaved_changes,
    confirm_delete_question,
    confirm_reset_all,
    show_error,
    show_info,
    show_warning,
)
from .main_window import MainWindow

__all__ = [
    "MainWindow",
    "check_unsaved_changes",
    "confirm_delete_question",
    "confirm_reset_all",
    "show_error",
    "show_info",
    "show_warning",
]
