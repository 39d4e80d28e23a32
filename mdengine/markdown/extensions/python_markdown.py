"""Extension plugins wrapping the extensions shipped with Python-Markdown."""

from .base import PythonMarkdownExtension


class FootnotesExtension(PythonMarkdownExtension):
    id = "footnotes"
    label = "Footnotes"
    url = "https://python-markdown.github.io/extensions/footnotes/"
    markdown_extension = "markdown.extensions.footnotes"
    enabled_by_default = True

    def get_guidelines(self):
        return {
            "title": "Footnotes",
            "description": "Reference a footnote with [^label] and define it on its own line.",
            "examples": ["Text with a footnote.[^1]\n\n[^1]: The footnote."],
        }


class TablesExtension(PythonMarkdownExtension):
    id = "tables"
    label = "Tables"
    url = "https://python-markdown.github.io/extensions/tables/"
    markdown_extension = "markdown.extensions.tables"
    enabled_by_default = True

    def get_guidelines(self):
        return {
            "title": "Tables",
            "description": "Separate cells with pipes and the header row with dashes.",
            "examples": ["| Name | Value |\n|------|-------|\n| a    | 1     |"],
        }


class FencedCodeExtension(PythonMarkdownExtension):
    id = "fenced_code"
    label = "Fenced code blocks"
    url = "https://python-markdown.github.io/extensions/fenced_code_blocks/"
    markdown_extension = "markdown.extensions.fenced_code"
    enabled_by_default = True

    def alter_guidelines(self, guides):
        code = guides["items"].get("code")
        if code is not None:
            code["examples"].append("```python\nprint('hello')\n```")


class TocExtension(PythonMarkdownExtension):
    id = "toc"
    label = "Table of contents"
    url = "https://python-markdown.github.io/extensions/toc/"
    markdown_extension = "markdown.extensions.toc"
    default_settings = {
        "marker": "[TOC]",
        "toc_depth": "2-4",
    }

    def get_guidelines(self):
        return {
            "title": "Table of contents",
            "description": f"Place {self.settings['marker']} on its own line to insert a table of contents.",
            "examples": [self.settings["marker"]],
        }


class AttrListExtension(PythonMarkdownExtension):
    id = "attr_list"
    label = "Attribute lists"
    url = "https://python-markdown.github.io/extensions/attr_list/"
    markdown_extension = "markdown.extensions.attr_list"

    def alter_guidelines(self, guides):
        headings = guides["items"].get("headings")
        if headings is not None:
            headings["examples"].append("## Heading {#custom-id .class-name}")
