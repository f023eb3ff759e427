"""
Plain-text search across every discovered document.

Matching is a case-insensitive substring test on the raw file text, line by
line. Each file reports at most MARKVIEW_SEARCH_MAX_MATCHES lines; files with
more matching lines rank first.
"""

import logging
import re
from pathlib import Path, PurePosixPath

from django.conf import settings
from django.utils.html import escape, format_html

from .files import scan_markdown_files
from .files.discovery import get_document_root

logger = logging.getLogger(__name__)


class InvalidSearchQuery(ValueError):
    pass


def get_min_query_length():
    return getattr(settings, "MARKVIEW_SEARCH_MIN_QUERY_LENGTH", 2)


def get_max_matches():
    return getattr(settings, "MARKVIEW_SEARCH_MAX_MATCHES", 5)


def highlight_match(text, pattern):
    """Escape ``text`` and wrap every match of ``pattern`` in <mark>."""
    parts = []
    position = 0
    for match in pattern.finditer(text):
        parts.append(escape(text[position:match.start()]))
        parts.append(format_html("<mark>{}</mark>", match.group(0)))
        position = match.end()
    parts.append(escape(text[position:]))
    return "".join(parts)


def search_file(content, pattern, max_matches):
    """Matching lines of one document as line/text/preview dicts."""
    matches = []
    for number, line in enumerate(content.split("\n"), start=1):
        if not pattern.search(line):
            continue
        line = line.rstrip("\r")
        matches.append(
            {
                "line": number,
                "text": line.strip(),
                "preview": highlight_match(line, pattern),
            }
        )
        if len(matches) >= max_matches:
            break
    return matches


def search_documents(query, root=None):
    """
    Search every document under ``root`` for ``query``.

    Returns:
        List of {"file", "fileName", "matchCount", "matches"} dicts, most
        matches first (ties keep discovery order)

    Raises:
        InvalidSearchQuery: query shorter than the configured minimum
    """
    query = (query or "").strip()
    min_length = get_min_query_length()
    if len(query) < min_length:
        raise InvalidSearchQuery(f"Search query must be at least {min_length} characters")

    root = Path(root) if root is not None else get_document_root()
    pattern = re.compile(re.escape(query), re.IGNORECASE)
    max_matches = get_max_matches()

    results = []
    for relative in scan_markdown_files(root):
        try:
            content = (root / relative).read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.warning("Skipping unreadable document %s: %s", relative, exc)
            continue

        matches = search_file(content, pattern, max_matches)
        if matches:
            results.append(
                {
                    "file": relative,
                    "fileName": PurePosixPath(relative).name,
                    "matchCount": len(matches),
                    "matches": matches,
                }
            )

    results.sort(key=lambda result: result["matchCount"], reverse=True)
    logger.debug("Search for %r matched %d documents", query, len(results))
    return results
