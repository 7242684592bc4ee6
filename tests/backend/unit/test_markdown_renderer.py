"""
Unit tests for services.markdown_renderer module.
"""
import pytest

from app.core.exceptions import ValidationError
from app.services.markdown_renderer import MarkdownRenderer, markdown_renderer


class TestMarkdownRenderer:
    def test_renders_headings_and_paragraphs(self):
        html = markdown_renderer.render("# Title\n\nSome *text*.")
        assert "<h1>Title</h1>" in html
        assert "<em>text</em>" in html

    def test_fenced_code_blocks(self):
        html = markdown_renderer.render("```\nprint('hi')\n```")
        assert "<code>" in html
        assert "print(&#x27;hi&#x27;)" in html or "print('hi')" in html

    def test_tables(self):
        html = markdown_renderer.render("| a | b |\n|---|---|\n| 1 | 2 |")
        assert "<table>" in html

    def test_empty_content(self):
        assert markdown_renderer.render("") == ""

    def test_unsupported_format(self):
        with pytest.raises(ValidationError) as exc:
            MarkdownRenderer().render("text", "mdx")
        assert exc.value.code == "UNSUPPORTED_FORMAT"

    def test_custom_extensions(self):
        renderer = MarkdownRenderer(extensions=["tables"])
        assert renderer.extensions == ["tables"]
