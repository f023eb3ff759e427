# viewer/markdown/renderer.py

import logging

from .blocks import TextBlock
from .config import get_renderer_config
from .inline import format_inline
from .paragraphs import wrap_paragraphs
from .preprocessors import apply_preprocessors
from .structure import convert_structure

logger = logging.getLogger(__name__)

CONVERTERS = [
    convert_structure,  # Tables, headings, rules, blockquotes, lists
    wrap_paragraphs,  # Loose text into paragraphs
    format_inline,  # Emphasis, code spans, links, images
    # Order matters - they run sequentially
]


def normalize_newlines(text):
    return text.replace("\r\n", "\n").replace("\r", "\n")


def render_blocks(blocks):
    """Flatten the block sequence into the final HTML fragment."""
    return "".join(block.render() for block in blocks)


def render_markdown(text, context=None):
    """
    Main rendering function: Markdown text in, HTML fragment out.

    Fenced code and diagram blocks are cut out first and carry their final
    HTML through every later stage untouched; the remaining text is escaped,
    converted block by block, and flattened back in document order.

    Args:
        text: Raw markdown text
        context: Optional dict overriding renderer options
            (document_extension, diagram_language, navigation_parameter)
    """
    options = get_renderer_config()
    options.update(context or {})

    blocks = [TextBlock(normalize_newlines(text or ""))]

    # Pre-processing: split out protected blocks and escape the rest
    blocks = apply_preprocessors(blocks, options)

    for converter in CONVERTERS:
        blocks = converter(blocks, options)

    html = render_blocks(blocks)
    logger.debug("Rendered %d characters of markdown into %d blocks", len(text or ""), len(blocks))
    return html
