"""Tests for the built-in parser plugins and render strategies."""

from unittest.mock import patch

import pytest

from mdengine.markdown.parsers import BaseParser, PandocParser, PythonMarkdownParser
from mdengine.markdown.plugins import ParserPluginManager


class EchoParser(BaseParser):
    id = "echo"

    def convert(self, markdown, language=None):
        return f"<pre>{markdown}</pre>"


class TestPythonMarkdownParser:
    """Tests for PythonMarkdownParser."""

    def test_basic_markdown(self, parser_manager):
        parsed = parser_manager.create_instance("python_markdown").parse("# Title\n\nSome *text*.")

        assert "<h1>Title</h1>" in parsed.html
        assert "<em>text</em>" in parsed.html
        assert parsed.parser_id == "python_markdown"
        assert parsed.markdown == "# Title\n\nSome *text*."

    def test_empty_input(self, parser_manager):
        assert parser_manager.create_instance("python_markdown").parse("").html == ""

    def test_footnotes_enabled_by_default(self, parser_manager):
        html = parser_manager.create_instance("python_markdown").parse("Text.[^1]\n\n[^1]: A note.").html

        assert "footnote-ref" in html
        assert "A note." in html

    def test_tables_enabled_by_default(self, parser_manager):
        markdown = "| Name | Value |\n|------|-------|\n| a    | 1     |"

        html = parser_manager.create_instance("python_markdown").parse(markdown).html

        assert "<table>" in html
        assert "<th>Name</th>" in html
        assert "<td>1</td>" in html

    def test_fenced_code(self, parser_manager):
        html = parser_manager.create_instance("python_markdown").parse("```\nx = 1\n```").html

        assert "<pre><code>x = 1" in html

    def test_toc_disabled_by_default(self, parser_manager):
        html = parser_manager.create_instance("python_markdown").parse("[TOC]\n\n## Section").html

        assert "[TOC]" in html

    def test_toc_through_configuration(self, parser_manager):
        parser = parser_manager.create_instance("python_markdown", {"extensions": [{"id": "toc"}]})

        html = parser.parse("[TOC]\n\n## Section").html

        assert 'class="toc"' in html
        assert "[TOC]" not in html

    def test_paragraph_classes(self, parser_manager):
        parser = parser_manager.create_instance("python_markdown", {"extensions": [{"id": "paragraph_classes"}]})

        html = parser.parse("Introduction. {.lead}\n\nPlain paragraph.").html

        assert '<p class="lead">Introduction.</p>' in html
        assert "<p>Plain paragraph.</p>" in html

    def test_paragraph_classes_configured(self, parser_manager):
        parser = parser_manager.create_instance(
            "python_markdown",
            {"extensions": [{"id": "paragraph_classes", "settings": {"classes": ["prose"]}}]},
        )

        html = parser.parse("Introduction. {.lead}").html

        assert '<p class="prose lead">Introduction.</p>' in html

    def test_blockquote_levels(self, parser_manager):
        parser = parser_manager.create_instance("python_markdown", {"extensions": [{"id": "blockquote_levels"}]})

        html = parser.parse("> Outer\n>\n> > Inner").html

        assert 'class="blockquote-level-1"' in html
        assert 'class="blockquote-level-2"' in html

    def test_markdown_options_from_settings(self, parser_manager):
        parser = parser_manager.create_instance(
            "python_markdown", {"settings": {"output_format": "xhtml"}, "render_strategy": "none"}
        )

        assert "<br />" in parser.parse("line one  \nline two").html

    def test_language_recorded(self, parser_manager):
        assert parser_manager.create_instance("python_markdown").parse("Bonjour", "fr").language == "fr"


class TestLifetime:
    """Tests for the expiry of parsed results."""

    def test_permanent_by_default(self, parser_manager):
        assert parser_manager.create_instance("python_markdown").parse("text").expire is None

    def test_lifetime_sets_expire(self, parser_manager):
        parser = parser_manager.create_instance("python_markdown", {"lifetime": 60})

        with patch("mdengine.markdown.parsers.base.time.time", return_value=1_000_000.0):
            parsed = parser.parse("text")

        assert parsed.expire == 1_000_060.0


class TestRenderStrategies:
    """Tests for the render strategy applied around conversion."""

    def parse(self, parser_manager, strategy, markdown):
        parser = parser_manager.create_instance("python_markdown", {"render_strategy": strategy})
        return parser.parse(markdown).html

    def test_default_is_filter_output(self, parser_manager):
        assert parser_manager.create_instance("python_markdown").render_strategy == "filter_output"

    def test_filter_output_escapes_disallowed_html(self, parser_manager):
        html = self.parse(parser_manager, "filter_output", "<script>alert(1)</script>\n\nSafe *text*.")

        assert "<script>" not in html
        assert "&lt;script&gt;" in html
        assert "<em>text</em>" in html

    def test_filter_output_removes_event_handlers(self, parser_manager):
        html = self.parse(parser_manager, "filter_output", '<p onclick="steal()">Click</p>')

        assert "onclick" not in html
        assert "Click" in html

    def test_filter_output_keeps_footnotes(self, parser_manager):
        html = self.parse(parser_manager, "filter_output", "Text.[^1]\n\n[^1]: A note.")

        assert "<sup" in html
        assert 'class="footnote"' in html

    def test_filter_output_drops_javascript_links(self, parser_manager):
        html = self.parse(parser_manager, "filter_output", "[click](javascript:alert)")

        assert "javascript:" not in html

    def test_strip_removes_disallowed_tags(self, parser_manager):
        html = self.parse(parser_manager, "strip", "<script>alert(1)</script>\n\n**Bold**")

        assert "<script" not in html
        assert "&lt;script" not in html
        assert "<strong>Bold</strong>" in html

    def test_escape_shows_html_literally(self, parser_manager):
        html = self.parse(parser_manager, "escape", "Some <b>bold</b> text")

        assert "&lt;b&gt;bold&lt;/b&gt;" in html
        assert "<b>" not in html

    def test_escape_keeps_blockquotes(self, parser_manager):
        html = self.parse(parser_manager, "escape", "> quoted <i>text</i>\n>\n> > nested")

        assert html.count("<blockquote>") == 2
        assert "&lt;i&gt;" in html

    def test_escape_keeps_code_spans(self, parser_manager):
        html = self.parse(parser_manager, "escape", "Compare `a < b` here")

        assert "<code>a &lt; b</code>" in html
        assert "&amp;lt;" not in html

    def test_escape_keeps_fenced_code(self, parser_manager):
        html = self.parse(parser_manager, "escape", "```\nif a < b:\n    pass\n```")

        assert "if a &lt; b:" in html
        assert "&amp;lt;" not in html

    def test_escape_keeps_autolinks(self, parser_manager):
        html = self.parse(parser_manager, "escape", "See <https://example.com>")

        assert '<a href="https://example.com">https://example.com</a>' in html

    def test_escape_keeps_link_titles(self, parser_manager):
        html = self.parse(parser_manager, "escape", '[docs](https://example.com "The docs")')

        assert 'title="The docs"' in html
        assert "&quot;" not in html

    def test_escape_shows_html_blocks_literally(self, parser_manager):
        html = self.parse(parser_manager, "escape", "<div onclick=\"steal()\">block</div>")

        assert "<div" not in html
        assert "&lt;div" in html

    def test_escape_for_parser_without_native_support(self, extension_manager):
        manager = ParserPluginManager([EchoParser], extension_manager=extension_manager)

        html = manager.create_instance("echo", {"render_strategy": "escape"}).parse("> <b>x</b>").html

        assert html == "<pre>> &lt;b&gt;x&lt;/b&gt;</pre>"

    def test_none_passes_html_through(self, parser_manager):
        html = self.parse(parser_manager, "none", "Some <b>bold</b> text")

        assert "<b>bold</b>" in html

    def test_unknown_strategy(self, parser_manager):
        with pytest.raises(ValueError, match="Unknown render strategy 'shout'"):
            parser_manager.create_instance("python_markdown", {"render_strategy": "shout"})


class TestPandocParser:
    """Tests for PandocParser, with pypandoc mocked out."""

    @pytest.fixture
    def manager(self, extension_manager):
        with patch("mdengine.markdown.parsers.pandoc.pypandoc.get_pandoc_version", return_value="3.1"):
            return ParserPluginManager([PandocParser, PythonMarkdownParser], extension_manager=extension_manager)

    @pytest.fixture
    def convert_text(self):
        with patch("mdengine.markdown.parsers.pandoc.pypandoc.convert_text", return_value="<p>Converted</p>") as mock:
            yield mock

    def test_own_extensions_only(self, manager):
        parser = manager.create_instance("pandoc")

        assert list(parser.get_extensions()) == [
            "pandoc_footnotes",
            "pandoc_pipe_tables",
            "pandoc_smart",
            "pandoc_task_lists",
        ]

    def test_input_format_from_enabled_extensions(self, manager):
        assert manager.create_instance("pandoc").input_format() == "markdown+footnotes+pipe_tables"

    def test_input_format_with_configured_extensions(self, manager):
        parser = manager.create_instance("pandoc", {"extensions": [{"id": "pandoc_smart"}]})

        assert parser.input_format() == "markdown+footnotes+pipe_tables+smart"

    def test_input_format_for_escape_strategy(self, manager):
        parser = manager.create_instance("pandoc", {"render_strategy": "escape"})

        assert parser.input_format() == "markdown+footnotes+pipe_tables-raw_html"

    def test_convert(self, manager, convert_text):
        parsed = manager.create_instance("pandoc").parse("Text")

        assert parsed.html == "<p>Converted</p>"
        assert parsed.parser_id == "pandoc"
        convert_text.assert_called_once_with(
            "Text",
            to="html5",
            format="markdown+footnotes+pipe_tables",
            extra_args=["--mathjax"],
        )

    def test_convert_with_language(self, manager, convert_text):
        manager.create_instance("pandoc").parse("Texte", "fr")

        assert convert_text.call_args.kwargs["extra_args"] == ["--mathjax", "--metadata=lang:fr"]

    def test_settings_override(self, manager, convert_text):
        parser = manager.create_instance("pandoc", {"settings": {"from": "commonmark", "extra_args": []}})

        parser.parse("Text")

        assert convert_text.call_args.kwargs["format"] == "commonmark+footnotes+pipe_tables"
        assert convert_text.call_args.kwargs["extra_args"] == []

    def test_output_sanitized(self, manager, convert_text):
        convert_text.return_value = "<p>ok</p><script>alert(1)</script>"

        html = manager.create_instance("pandoc").parse("Text").html

        assert "<script>" not in html

    def test_smart_alters_emphasis_guidelines(self, manager):
        parser = manager.create_instance("pandoc", {"extensions": [{"id": "pandoc_smart"}, {"id": "pandoc_task_lists"}]})

        guides = parser.get_guidelines()

        assert "typographic punctuation" in guides["items"]["emphasis"]["description"]
        assert list(guides["extensions"]) == ["pandoc_footnotes", "pandoc_pipe_tables", "pandoc_task_lists"]
