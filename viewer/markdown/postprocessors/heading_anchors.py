# viewer/markdown/postprocessors/heading_anchors.py

import re

from bs4 import BeautifulSoup
from django.utils.text import slugify

HEADING_TAG_PATTERN = re.compile(
    r"<(?P<tag>h[1-6])(?P<attrs>(?:\s[^>]*)?)>(?P<inner>(?:(?!<h[1-6][\s>]).)*?)</(?P=tag)>",
    re.IGNORECASE | re.DOTALL,
)
ID_ATTRIBUTE_PATTERN = re.compile(r"\sid\s*=", re.IGNORECASE)


def add_heading_anchors(html: str, context: dict) -> str:
    """
    Give every heading (h1-h6) an ``id`` so the page outline can link to it.

    Ids are slugs of the heading text; repeated slugs get a numeric suffix
    (``setup``, ``setup-1``, ...). Headings that already have an id keep it.
    Only the opening heading tags are rewritten; everything else in the
    fragment, diagram sources included, is passed through byte for byte.
    """
    seen: dict[str, int] = {}

    def anchor(match: re.Match) -> str:
        if ID_ATTRIBUTE_PATTERN.search(match.group("attrs")):
            return match.group(0)

        text = BeautifulSoup(match.group("inner"), "html.parser").get_text(" ", strip=True)
        slug = slugify(text) or "section"
        count = seen.get(slug, 0)
        seen[slug] = count + 1
        anchor_id = slug if count == 0 else f"{slug}-{count}"
        return (
            f'<{match.group("tag")}{match.group("attrs")} id="{anchor_id}">'
            f'{match.group("inner")}</{match.group("tag")}>'
        )

    return HEADING_TAG_PATTERN.sub(anchor, html)
