from django.utils.html import escape

from ..blocks import TextBlock


def escape_text_blocks(blocks, context):
    """
    HTML-escape every remaining text block, exactly once.

    Runs after fence extraction, so protected blocks are already out of the
    text and keep the HTML they were given.
    """
    return [
        TextBlock(str(escape(block.text))) if isinstance(block, TextBlock) else block
        for block in blocks
    ]
