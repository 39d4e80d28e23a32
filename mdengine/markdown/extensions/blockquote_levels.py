# mdengine/markdown/extensions/blockquote_levels.py
"""
Markdown extension that marks each blockquote with its nesting depth.

> Level 1
>
> > Level 2
> >
> > > Level 3

renders blockquotes with the classes blockquote-level-1, -2 and -3.
"""

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from .base import PythonMarkdownExtension


class _BlockquoteLevels(Treeprocessor):
    def __init__(self, md, prefix="blockquote-level-"):
        super().__init__(md)
        self.prefix = prefix

    def run(self, root):
        # depth-first assignment of classes
        def visit(node, depth):
            if isinstance(node.tag, str) and node.tag.lower() == "blockquote":
                cls_list = [c for c in node.get("class", "").split() if c]
                level_class = f"{self.prefix}{depth}"
                if level_class not in cls_list:
                    cls_list.append(level_class)
                node.set("class", " ".join(cls_list))
                # Children of a blockquote increase depth for nested blockquotes
                for child in node:
                    visit(child, depth + 1)
            else:
                for child in node:
                    visit(child, depth)

        visit(root, 1)


class BlockquoteLevelsExtension(Extension):
    def __init__(self, **kwargs):
        self.config = {
            "prefix": ["blockquote-level-", "Prefix of the nesting level class"],
        }
        super().__init__(**kwargs)

    def extendMarkdown(self, md):
        # Ensure we run after the parser has built the tree, before serialization
        md.treeprocessors.register(
            _BlockquoteLevels(md, prefix=self.getConfig("prefix")), "blockquote_levels", 15
        )


def makeExtension(**kwargs):
    return BlockquoteLevelsExtension(**kwargs)


class BlockquoteLevels(PythonMarkdownExtension):
    id = "blockquote_levels"
    label = "Blockquote levels"
    description = "Adds a nesting level class to every blockquote."
    markdown_extension = "mdengine.markdown.extensions.blockquote_levels"
    default_settings = {
        "prefix": "blockquote-level-",
    }
