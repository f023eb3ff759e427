"""
Preprocessor that pulls fenced code and diagram blocks out of the document.

Converts:
    ```python              → CodeBlock   <pre><code class="language-python">…</code></pre>
    ```mermaid             → DiagramBlock <div class="mermaid">…</div>

Fences are split out before the text is escaped, so the bodies reach their
final HTML untouched by every later pass. Code bodies are escaped here;
diagram bodies are kept verbatim because the client-side diagram renderer
reads the raw syntax from the container's text.

A fence without a closing line runs to the end of the document.
"""

import itertools
import logging
import re

from django.utils.html import escape

from ..blocks import CodeBlock, DiagramBlock, TextBlock

logger = logging.getLogger(__name__)

FENCE_PATTERN = re.compile(
    r"^```[ \t]*(?P<language>[\w+#.-]+)?[ \t]*\n"
    r"(?P<body>.*?)"
    r"(?P<close>^```[ \t]*$|\Z)",
    re.MULTILINE | re.DOTALL,
)


def build_code_block(index, body, language=None):
    language_class = f' class="language-{escape(language)}"' if language else ""
    html = f"<pre><code{language_class}>{escape(body)}</code></pre>"
    return CodeBlock(index=index, code=body, language=language or None, html=html)


def build_diagram_block(index, body):
    source = body.strip()
    return DiagramBlock(index=index, source=source, html=f'<div class="mermaid">{source}</div>')


def split_fenced_blocks(text, diagram_language, counter):
    """Yield text, code and diagram blocks for ``text`` in document order."""
    position = 0
    for match in FENCE_PATTERN.finditer(text):
        if match.start() > position:
            yield TextBlock(text[position:match.start()])

        language = match.group("language")
        body = match.group("body")
        if not match.group("close"):
            logger.debug("Unterminated fence at offset %d runs to end of document", match.start())

        if language == diagram_language:
            yield build_diagram_block(next(counter), body)
        else:
            yield build_code_block(next(counter), body, language)

        position = match.end()

    if position < len(text):
        yield TextBlock(text[position:])


def extract_fenced_blocks(blocks, context):
    """Split every text block on its fences. The block counter is per call."""
    counter = itertools.count()
    diagram_language = context.get("diagram_language", "mermaid")

    result = []
    for block in blocks:
        if isinstance(block, TextBlock):
            result.extend(split_fenced_blocks(block.text, diagram_language, counter))
        else:
            result.append(block)
    return result
