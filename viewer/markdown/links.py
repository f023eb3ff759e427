# viewer/markdown/links.py
"""
Link rewriting for rendered documents.

Links whose target ends with the document extension point at another
document in the viewer, so they become navigation links:

    [Guide](docs/guide.md)    → <a href="?file=docs%2Fguide.md">Guide</a>

Everything else is external and opens in a new tab without giving the
opened page a handle on this window:

    [Site](https://example.com)
        → <a href="https://example.com" target="_blank" rel="noopener">Site</a>

Targets arrive HTML-escaped (escaping runs before inline formatting), so
navigation targets are unescaped before being URL-encoded.
"""

from __future__ import annotations

import html
import re
from urllib.parse import quote_plus

# Schemes that execute script when followed
UNSAFE_SCHEMES = ("javascript:", "vbscript:", "data:")

_IGNORED_URL_CHARACTERS = re.compile(r"[\x00-\x20\x7f]+")


def is_internal_link(target: str, extension: str = ".md") -> bool:
    """Check if a link target refers to another document."""
    return bool(extension) and target.lower().endswith(extension.lower())


def has_unsafe_scheme(target: str) -> bool:
    # Browsers ignore whitespace and control characters inside the scheme
    normalized = _IGNORED_URL_CHARACTERS.sub("", html.unescape(target)).lower()
    return normalized.startswith(UNSAFE_SCHEMES)


def navigation_href(target: str, parameter: str = "file") -> str:
    return f"?{parameter}={quote_plus(html.unescape(target))}"


def rewrite_link(
    text: str,
    target: str,
    extension: str = ".md",
    parameter: str = "file",
) -> str:
    """
    Render an anchor for an (escaped) link target and (formatted) link text.

    Args:
        text: Display text, already escaped and inline-formatted
        target: Raw link target as it appears in the escaped document
        extension: Document extension marking internal links
        parameter: Query parameter used by navigation links

    Returns:
        Anchor HTML
    """
    target = target.strip()
    if is_internal_link(target, extension):
        return f'<a href="{navigation_href(target, parameter)}">{text}</a>'

    href = "#" if has_unsafe_scheme(target) else target
    return f'<a href="{href}" target="_blank" rel="noopener">{text}</a>'
