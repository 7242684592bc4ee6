"""
Markdown rendering

Content bodies are stored as markdown and passed through untouched by the
content layer; this is where they become HTML for readers and previews.
"""
from typing import Iterable, Optional

import markdown

from app.core.exceptions import ValidationError

DEFAULT_EXTENSIONS = ("fenced_code", "tables")


class MarkdownRenderer:
    """Thin wrapper around Python-Markdown with the extensions the editor relies on."""

    SUPPORTED_FORMATS = ("html",)

    def __init__(self, extensions: Optional[Iterable[str]] = None):
        self.extensions = list(extensions or DEFAULT_EXTENSIONS)

    def render(self, content: str, fmt: str = "html") -> str:
        """
        Render markdown `content`

        Raises:
        - ValidationError: unsupported output format
        """
        if fmt not in self.SUPPORTED_FORMATS:
            raise ValidationError(f"Unsupported format: {fmt}", code="UNSUPPORTED_FORMAT")
        return markdown.markdown(content or "", extensions=self.extensions)


# Global renderer instance
markdown_renderer = MarkdownRenderer()
