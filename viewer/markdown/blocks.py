# viewer/markdown/blocks.py
"""
Block types that flow through the rendering pipeline.

A document enters the pipeline as a single ``TextBlock``. Fence extraction
splits it into text and protected blocks (code, diagrams); structural
conversion turns text into headings, lists, tables and the like; paragraph
wrapping turns what is left into paragraphs. Every stage takes and returns a
list of blocks, and ``render()`` on each block yields its final HTML.

Protected blocks carry HTML that was finished at extraction time. Their
``map_text`` is the identity, so no later pass can ever touch them.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable

TextFn = Callable[[str], str]

ALIGNMENTS = ("left", "center", "right")
DEFAULT_ALIGNMENT = "left"


class Block:
    """Base class for pipeline blocks."""

    def map_text(self, fn: TextFn) -> "Block":
        """Return a copy with ``fn`` applied to every piece of author text."""
        return self

    def render(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class TextBlock(Block):
    """Document text not yet classified (or loose lines after structure)."""

    text: str

    def map_text(self, fn: TextFn) -> "TextBlock":
        return replace(self, text=fn(self.text))

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class CodeBlock(Block):
    index: int
    code: str
    language: str | None
    html: str

    def render(self) -> str:
        return self.html


@dataclass(frozen=True)
class DiagramBlock(Block):
    index: int
    source: str
    html: str

    def render(self) -> str:
        return self.html


@dataclass(frozen=True)
class Heading(Block):
    level: int
    text: str

    def map_text(self, fn: TextFn) -> "Heading":
        return replace(self, text=fn(self.text))

    def render(self) -> str:
        return f"<h{self.level}>{self.text}</h{self.level}>"


@dataclass(frozen=True)
class Rule(Block):
    def render(self) -> str:
        return "<hr>"


@dataclass(frozen=True)
class Blockquote(Block):
    text: str

    def map_text(self, fn: TextFn) -> "Blockquote":
        return replace(self, text=fn(self.text))

    def render(self) -> str:
        return f"<blockquote>{self.text}</blockquote>"


@dataclass(frozen=True)
class ListBlock(Block):
    ordered: bool
    items: tuple[str, ...]

    def map_text(self, fn: TextFn) -> "ListBlock":
        return replace(self, items=tuple(fn(item) for item in self.items))

    def render(self) -> str:
        tag = "ol" if self.ordered else "ul"
        items = "".join(f"<li>{item}</li>" for item in self.items)
        return f"<{tag}>{items}</{tag}>"


@dataclass(frozen=True)
class TableModel:
    """
    Header cells, per-column alignment and body rows of one table.

    Rows are kept exactly as written: no padding or truncation to the
    header width. Columns without an alignment entry render left-aligned.
    """

    headers: tuple[str, ...]
    alignments: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]

    def alignment(self, column: int) -> str:
        if column < len(self.alignments):
            return self.alignments[column]
        return DEFAULT_ALIGNMENT


@dataclass(frozen=True)
class Table(Block):
    model: TableModel

    def map_text(self, fn: TextFn) -> "Table":
        model = replace(
            self.model,
            headers=tuple(fn(cell) for cell in self.model.headers),
            rows=tuple(tuple(fn(cell) for cell in row) for row in self.model.rows),
        )
        return replace(self, model=model)

    def render(self) -> str:
        model = self.model
        parts = ["<table><thead><tr>"]
        for column, header in enumerate(model.headers):
            parts.append(
                f'<th style="text-align:{model.alignment(column)}">{header}</th>'
            )
        parts.append("</tr></thead><tbody>")
        for row in model.rows:
            parts.append("<tr>")
            for column, cell in enumerate(row):
                parts.append(
                    f'<td style="text-align:{model.alignment(column)}">{cell}</td>'
                )
            parts.append("</tr>")
        parts.append("</tbody></table>")
        return "".join(parts)


@dataclass(frozen=True)
class Paragraph(Block):
    text: str

    def map_text(self, fn: TextFn) -> "Paragraph":
        return replace(self, text=fn(self.text))

    def render(self) -> str:
        return f"<p>{self.text}</p>"
