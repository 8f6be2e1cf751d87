"""Centralized Qt stylesheets for the application."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        text = ColorPalette.TEXT_PRIMARY.get(theme)
        muted = ColorPalette.TEXT_SECONDARY.get(theme)
        border = ColorPalette.BORDER_PRIMARY.get(theme)
        field_bg = ColorPalette.BACKGROUND_SECONDARY.get(theme)
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {text};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                color: {text};
                border: 1px solid {border};
                border-radius: 6px;
                padding: 8px 14px;
            }}
            QPushButton:hover {{ background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)}; }}
            QPushButton:default {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
            }}
            QPushButton:disabled, QLineEdit:disabled, QPlainTextEdit:disabled {{ color: {muted}; }}
            QLineEdit, QPlainTextEdit, QTextBrowser, QComboBox, QSpinBox, QListWidget {{
                background-color: {field_bg};
                color: {text};
                border: 1px solid {border};
                border-radius: 4px;
                padding: 4px;
            }}
            QGroupBox {{
                border: 1px solid {border};
                border-radius: 8px;
                margin-top: 12px;
                padding: 12px 8px 8px 8px;
            }}
            QGroupBox::title {{ subcontrol-origin: margin; left: 12px; color: {muted}; }}
            QProgressBar {{ border: none; background-color: {field_bg}; max-height: 6px; }}
            QProgressBar::chunk {{ background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)}; }}
        """

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_secondary_label_style(theme: Theme = Theme.LIGHT) -> str:
        return f"color: {ColorPalette.TEXT_SECONDARY.get(theme)};"

    @staticmethod
    def get_result_style(is_correct: bool, theme: Theme = Theme.LIGHT) -> str:
        """Banner shown after an answer is confirmed."""
        fg = ColorPalette.SUCCESS if is_correct else ColorPalette.ERROR
        bg = ColorPalette.SUCCESS_BG if is_correct else ColorPalette.ERROR_BG
        return (
            f"color: {fg.get(theme)}; background-color: {bg.get(theme)};"
            " padding: 10px; border-radius: 6px; font-weight: bold;"
        )

    @staticmethod
    def get_option_style(role: str, theme: Theme = Theme.LIGHT) -> str:
        """Option button look for ``role`` in {"idle", "selected", "correct", "wrong"}."""
        if role == "selected":
            border = ColorPalette.ACCENT_PRIMARY.get(theme)
            return f"text-align: left; padding: 12px; border: 2px solid {border};"
        if role == "correct":
            return (
                f"text-align: left; padding: 12px; color: {ColorPalette.SUCCESS.get(theme)};"
                f" background-color: {ColorPalette.SUCCESS_BG.get(theme)};"
                f" border: 2px solid {ColorPalette.SUCCESS.get(theme)};"
            )
        if role == "wrong":
            return (
                f"text-align: left; padding: 12px; color: {ColorPalette.ERROR.get(theme)};"
                f" background-color: {ColorPalette.ERROR_BG.get(theme)};"
                f" border: 2px solid {ColorPalette.ERROR.get(theme)};"
            )
        return "text-align: left; padding: 12px;"
