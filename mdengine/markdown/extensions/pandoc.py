"""Extension plugins switching on Pandoc's Markdown syntax extensions."""

from .base import PandocExtension


class PandocFootnotes(PandocExtension):
    id = "pandoc_footnotes"
    label = "Footnotes"
    url = "https://pandoc.org/MANUAL.html#footnotes"
    pandoc_extension = "footnotes"
    enabled_by_default = True

    def get_guidelines(self):
        return {
            "title": "Footnotes",
            "description": "Reference a footnote with [^label] or write it inline with ^[text].",
            "examples": ["Text.[^1]\n\n[^1]: The footnote.", "Text.^[An inline note.]"],
        }


class PandocPipeTables(PandocExtension):
    id = "pandoc_pipe_tables"
    label = "Pipe tables"
    url = "https://pandoc.org/MANUAL.html#extension-pipe_tables"
    pandoc_extension = "pipe_tables"
    enabled_by_default = True

    def get_guidelines(self):
        return {
            "title": "Tables",
            "description": "Separate cells with pipes; colons in the separator row set alignment.",
            "examples": ["| Left | Right |\n|:-----|------:|\n| a    |     1 |"],
        }


class PandocSmart(PandocExtension):
    id = "pandoc_smart"
    label = "Smart punctuation"
    url = "https://pandoc.org/MANUAL.html#extension-smart"
    pandoc_extension = "smart"

    def alter_guidelines(self, guides):
        emphasis = guides["items"].get("emphasis")
        if emphasis is not None:
            emphasis["description"] += " Straight quotes, -- and ... become typographic punctuation."


class PandocTaskLists(PandocExtension):
    id = "pandoc_task_lists"
    label = "Task lists"
    url = "https://pandoc.org/MANUAL.html#extension-task_lists"
    pandoc_extension = "task_lists"

    def get_guidelines(self):
        return {
            "title": "Task lists",
            "description": "Start list items with [ ] or [x].",
            "examples": ["- [ ] To do\n- [x] Done"],
        }
