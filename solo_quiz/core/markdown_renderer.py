"""Markdown rendering for question prompts.

Prompts are authored as Markdown and shown in Qt rich-text widgets, which
understand a subset of HTML. Raw HTML in the source is escaped rather than
passed through.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown text into HTML fragments."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into an HTML fragment."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def render_inline(self, markdown_text: str) -> str:
        """Render a single line (e.g. an option label) without a paragraph wrapper."""

        return self._markdown.renderInline(markdown_text.strip())


# Shared instance; the Qt event loop is the only caller.
renderer = MarkdownRenderer()
