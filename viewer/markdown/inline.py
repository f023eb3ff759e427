# viewer/markdown/inline.py
"""
Inline formatting applied to the text of every block that carries text.

Images, links and code spans are recognised first, in one left-to-right
scan, and rendered straight away. While emphasis runs they are stood in for
by stash markers built from a private-use character that does not occur in
the text being formatted, so emphasis can wrap a link but never reaches into
an href, an image source or a code span.

Link text and image alt text never contain brackets, and targets never
contain parentheses, so a scan that starts at an unclosed ``[`` stops at the
next bracket or parenthesis instead of running to the end of the text.
Image sources with a script scheme are replaced by ``#`` like link targets.

Emphasis goes from the longest marker to the shortest so ``**bold**`` is
not read as two italics:

    ***x*** / ___x___      → <strong><em>x</em></strong>
    **x**   / __x__        → <strong>x</strong>
    *x*     / _x_          → <em>x</em>

Markers without a partner are left as literal text.
"""

from __future__ import annotations

import re

from .links import has_unsafe_scheme, rewrite_link

INLINE_TOKEN_PATTERN = re.compile(
    r"!\[(?P<alt>[^\[\]]*)\]\((?P<src>[^()\s][^()]*)\)"
    r"|\[(?P<text>[^\[\]]+)\]\((?P<target>[^()\s][^()]*)\)"
    r"|`(?P<code>[^`]+)`"
)

EMPHASIS_RULES = (
    (re.compile(r"\*\*\*(.+?)\*\*\*", re.DOTALL), r"<strong><em>\1</em></strong>"),
    (re.compile(r"___(.+?)___", re.DOTALL), r"<strong><em>\1</em></strong>"),
    (re.compile(r"\*\*(.+?)\*\*", re.DOTALL), r"<strong>\1</strong>"),
    (re.compile(r"__(.+?)__", re.DOTALL), r"<strong>\1</strong>"),
    (re.compile(r"\*(.+?)\*", re.DOTALL), r"<em>\1</em>"),
    (re.compile(r"_(.+?)_", re.DOTALL), r"<em>\1</em>"),
)

_PRIVATE_USE_START = 0xE000
_PRIVATE_USE_END = 0xF8FF


def _pick_stash_marker(text: str) -> str:
    for codepoint in range(_PRIVATE_USE_START, _PRIVATE_USE_END + 1):
        marker = chr(codepoint)
        if marker not in text:
            return marker
    return chr(_PRIVATE_USE_START) * 2 + chr(_PRIVATE_USE_END)


def apply_emphasis(text: str) -> str:
    for pattern, replacement in EMPHASIS_RULES:
        text = pattern.sub(replacement, text)
    return text


def format_text(text: str, context: dict) -> str:
    """
    Format one piece of escaped text.

    Args:
        text: Escaped author text (heading, list item, cell, quote, paragraph)
        context: Renderer options (document_extension, navigation_parameter)

    Returns:
        Text with inline HTML applied
    """
    if not text:
        return text

    marker = _pick_stash_marker(text)
    stash: list[str] = []

    def stash_token(match: re.Match) -> str:
        if match.group("src") is not None:
            src = match.group("src").strip()
            if has_unsafe_scheme(src):
                src = "#"
            html = f'<img src="{src}" alt="{match.group("alt")}" />'
        elif match.group("target") is not None:
            html = rewrite_link(
                format_text(match.group("text"), context),
                match.group("target"),
                extension=context.get("document_extension", ".md"),
                parameter=context.get("navigation_parameter", "file"),
            )
        else:
            html = f"<code>{match.group('code')}</code>"
        stash.append(html)
        return f"{marker}{len(stash) - 1}{marker}"

    text = INLINE_TOKEN_PATTERN.sub(stash_token, text)
    text = apply_emphasis(text)

    if not stash:
        return text
    restore_pattern = re.compile(re.escape(marker) + r"(\d+)" + re.escape(marker))

    def restore_token(match: re.Match) -> str:
        index = int(match.group(1))
        return stash[index] if index < len(stash) else match.group(0)

    return restore_pattern.sub(restore_token, text)


def format_inline(blocks, context):
    """Apply inline formatting to the text of every unprotected block."""
    return [block.map_text(lambda text: format_text(text, context)) for block in blocks]
