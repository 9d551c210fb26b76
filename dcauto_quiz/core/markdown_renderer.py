"""Markdown rendering helpers shared by Qt and web clients.

Prompts often quote CLI commands, JSON payloads or API paths, so they are
authored in markdown and rendered to HTML for both the desktop web view and
the browser page. Raw HTML in the source is escaped, never passed through.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import html

from markdown_it import MarkdownIt


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown into HTML fragments or full documents."""

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

    def wrap_document(
        self,
        body_html: str,
        title: str = "DCAUTO Quiz",
        font_size: int = 14,
        text_color: str = "#f5f5f5",
    ) -> str:
        """Wrap a fragment inside a minimal HTML document."""

        return f"""<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>{html.escape(title)}</title>
    <style>
      body {{ font-family: ui-monospace, 'Cascadia Mono', 'Consolas', monospace; margin: 0; padding: 1rem; background: transparent; color: {text_color}; }}
      .prompt-html {{ font-size: {font_size}pt; line-height: 1.5; }}
      code, pre {{ background: rgba(127, 127, 127, 0.18); padding: 0.1rem 0.3rem; }}
    </style>
  </head>
  <body>
    <div class=\"prompt-html\">{body_html}</div>
  </body>
</html>"""

    def render_full_document(self, markdown_text: str, title: str = "DCAUTO Quiz", **style: object) -> str:
        """Convenience wrapper to render markdown into a standalone page."""

        fragment = self.render_fragment(markdown_text)
        return self.wrap_document(fragment, title=title, **style)


# Shared by the Qt thread and the API worker threads.
renderer = MarkdownRenderer()
