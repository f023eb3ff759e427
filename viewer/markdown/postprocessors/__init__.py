# viewer/markdown/postprocessors/__init__.py
"""
HTML postprocessors for the document page.

These run on the rendered fragment when it is embedded in the viewer page.
The Content API returns the renderer's fragment without them.
"""

from .heading_anchors import add_heading_anchors

POSTPROCESSORS = [
    add_heading_anchors,  # Heading ids for the page outline
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
