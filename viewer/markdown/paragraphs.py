import re

from .blocks import Paragraph, TextBlock

# One or more blank (or whitespace-only) lines
PARAGRAPH_BREAK_PATTERN = re.compile(r"\n(?:[ \t]*\n)+")


def wrap_paragraphs(blocks, context):
    """
    Turn loose text runs into paragraphs split at blank lines.

    Only ``TextBlock`` runs are candidates; headings, lists, tables, rules,
    blockquotes and protected blocks pass through unwrapped. Empty
    paragraphs are dropped.
    """
    result = []
    for block in blocks:
        if not isinstance(block, TextBlock):
            result.append(block)
            continue
        for chunk in PARAGRAPH_BREAK_PATTERN.split(block.text):
            chunk = chunk.strip()
            if chunk:
                result.append(Paragraph(text=chunk))
    return result
