"""Question rendering utilities for displaying quiz questions."""

from __future__ import annotations

from solo_quiz.constants.quiz_constants import OPTION_LETTERS
from solo_quiz.core.markdown_renderer import renderer


def render_prompt(question_text: str, font_size: int = 14) -> str:
    """Render a question prompt (Markdown) as HTML for a QTextBrowser."""
    body = renderer.render_fragment(question_text)
    return f'<div style="font-size: {font_size}pt;">{body}</div>'


def render_option_label(index: int, option_text: str) -> str:
    """Plain-text label for an option button, e.g. ``"B)  Rio de Janeiro"``."""
    return f"{OPTION_LETTERS[index]})  {option_text or '(empty)'}"


def render_question_preview(question_text: str, options: list[str], font_size: int = 12) -> str:
    """Render a question together with its options, as shown in the admin preview."""
    lines = [renderer.render_fragment(question_text)]
    for idx, option in enumerate(options):
        lines.append(f"<p><b>{OPTION_LETTERS[idx]}.</b> {renderer.render_inline(option) or '(empty)'}</p>")
    return f'<div style="font-size: {font_size}pt;">{"".join(lines)}</div>'
