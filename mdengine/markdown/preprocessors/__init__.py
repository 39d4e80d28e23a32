# mdengine/markdown/preprocessors/__init__.py

from .escape import escape_markdown

# Preprocessors per render strategy. Order matters - they run sequentially.
PREPROCESSORS = {
    "filter_output": [],
    "strip": [],
    "escape": [
        escape_markdown,  # raw HTML in the source is shown literally
    ],
    "none": [],
}


def apply_preprocessors(text, context):
    """Apply the preprocessors of the context's render strategy in order"""
    for processor in PREPROCESSORS[context["render_strategy"]]:
        text = processor(text, context)
    return text
