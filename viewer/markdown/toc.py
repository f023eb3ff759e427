from __future__ import annotations

from typing import TypedDict

from bs4 import BeautifulSoup
from django.utils.text import slugify


class HeadingNode(TypedDict):
    level: int
    id: str
    title: str
    title_html: str
    children: list["HeadingNode"]


def extract_toc_from_html(html: str) -> list[HeadingNode]:
    """
    Given rendered HTML, return a hierarchical list of headings for a TOC.

    The resulting structure is a list of dictionaries. Each dictionary contains:
        - level: Heading level (1-6)
        - id: HTML id of the heading (slug of its text when it has none)
        - title: Plain-text version of the heading
        - title_html: HTML snippet preserving inline formatting
        - children: Nested list of child headings
    """
    soup = BeautifulSoup(html, "html.parser")
    toc: list[HeadingNode] = []
    stack: list[HeadingNode] = []
    for heading in soup.find_all(["h1", "h2", "h3", "h4", "h5", "h6"]):
        level = int(heading.name[1])  # "h2" -> 2
        text = heading.get_text(separator=" ", strip=True)
        if not text:
            continue

        node: HeadingNode = {
            "level": level,
            "id": heading.get("id") or slugify(text),
            "title": text,
            "title_html": "".join(str(child) for child in heading.contents),
            "children": [],
        }

        while stack and stack[-1]["level"] >= level:
            stack.pop()

        if stack:
            stack[-1]["children"].append(node)
        else:
            toc.append(node)

        stack.append(node)

    return toc
