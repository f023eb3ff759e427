# viewer/markdown/preprocessors/__init__.py

from .escape import escape_text_blocks
from .fences import extract_fenced_blocks

PREPROCESSORS = [
    extract_fenced_blocks,  # Must be first: fences are cut out before escaping
    escape_text_blocks,
    # Order matters - they run sequentially
]


def apply_preprocessors(blocks, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        blocks = processor(blocks, context)
    return blocks
