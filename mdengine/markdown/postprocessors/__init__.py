# mdengine/markdown/postprocessors/__init__.py

from .sanitizer import sanitize_html, strip_html

# Postprocessors per render strategy. Order matters - they run sequentially.
POSTPROCESSORS = {
    "filter_output": [
        sanitize_html,
    ],
    "strip": [
        strip_html,
    ],
    "escape": [],  # handled before conversion, see preprocessors
    "none": [],
}


def apply_postprocessors(html, context):
    """Apply the postprocessors of the context's render strategy in order"""
    for processor in POSTPROCESSORS[context["render_strategy"]]:
        html = processor(html, context)
    return html
