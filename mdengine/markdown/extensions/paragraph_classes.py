# mdengine/markdown/extensions/paragraph_classes.py
"""
Markdown extension to add classes to paragraph (<p>) elements.

Syntax:
- Append a class list in braces at the end of a paragraph:
    This is a paragraph {.lead .muted}

- Class names must be prefixed by a dot within the braces and separated by spaces.
  Valid characters for class names: letters, digits, underscore, and hyphen.

Behavior:
- The marker is removed from the rendered text and the classes are applied to the
  enclosing <p> element's class attribute (merged with any existing classes).
- Classes listed in the "classes" setting are added to every paragraph.
- Only affects <p> elements. Does not change code/pre blocks.
"""

import re
from typing import List, Optional
from xml.etree import ElementTree as ET

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from .base import PythonMarkdownExtension

# Pattern for a trailing class spec like:  {.class-one .class_two}
_CLASS_SPEC_RE = re.compile(r"\s*\{(?:\s*\.[A-Za-z0-9_-]+)+\s*\}\s*$")
# Pattern to extract class names from content inside braces
_CLASS_NAME_RE = re.compile(r"\.([A-Za-z0-9_-]+)")


def _extract_trailing_class_spec(text: Optional[str]) -> tuple[Optional[str], List[str]]:
    """
    If the given text ends with a class spec, return the text with the spec removed
    and the list of classes. Otherwise return (text, []).
    """
    if not text:
        return text, []
    match = _CLASS_SPEC_RE.search(text)
    if not match:
        return text, []
    return text[: match.start()].rstrip(), _CLASS_NAME_RE.findall(match.group(0))


class ParagraphClassAssigner(Treeprocessor):
    def __init__(self, md, classes: Optional[List[str]] = None):
        super().__init__(md)
        self.classes = [c for c in (classes or []) if isinstance(c, str) and c.strip()]

    def run(self, root: ET.Element):
        for p in root.iter("p"):
            children = list(p)
            # The marker ends up in the tail of the last inline element, if any.
            if children:
                children[-1].tail, inline_classes = _extract_trailing_class_spec(children[-1].tail)
            else:
                p.text, inline_classes = _extract_trailing_class_spec(p.text)

            existing = (p.get("class") or "").split()
            # Preserve order and uniqueness: existing first, then configured, then inline
            merged = list(existing)
            for cls in self.classes + inline_classes:
                if cls not in merged:
                    merged.append(cls)
            if merged:
                p.set("class", " ".join(merged))
        return root


class ParagraphClassesExtension(Extension):
    def __init__(self, **kwargs):
        self.config = {
            "classes": [[], "Classes to add to every <p> element"],
        }
        super().__init__(**kwargs)

    def extendMarkdown(self, md):
        classes = self.getConfig("classes")
        # Run after inline parsing (priority 20) created the <p> content
        md.treeprocessors.register(
            ParagraphClassAssigner(md, classes=classes), "paragraph_classes", priority=15
        )


def makeExtension(**kwargs):
    return ParagraphClassesExtension(**kwargs)


class ParagraphClasses(PythonMarkdownExtension):
    id = "paragraph_classes"
    label = "Paragraph classes"
    description = "Adds CSS classes to paragraphs from trailing {.class} markers."
    markdown_extension = "mdengine.markdown.extensions.paragraph_classes"
    default_settings = {
        "classes": [],
    }

    def get_guidelines(self):
        return {
            "title": "Paragraph classes",
            "description": "End a paragraph with class names in braces to style it.",
            "examples": ["An introduction paragraph. {.lead}"],
        }
