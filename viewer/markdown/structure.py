# viewer/markdown/structure.py
"""
Structural conversion of escaped document text.

Each text block is read line by line. A line (or run of lines) that forms a
table, heading, horizontal rule, blockquote or list becomes the matching
block; everything else is collected into loose ``TextBlock`` runs that the
paragraph wrapper handles next.

Recognised forms:
    | A | B |            header row, separator row, one or more body rows
    |:-:|--:|            :-: center, --: right, anything else left
    ## Title             1-6 hashes then whitespace
    ***  ---  ___        three or more of one character
    > quoted             one blockquote per line, never merged
    - item / 1. item     one list per run of a single marker family

Blockquote lines are matched on the escaped ``&gt;`` because escaping has
already run. Indentation is not interpreted, so there are no nested lists.
"""

import re

from .blocks import (
    Blockquote,
    Heading,
    ListBlock,
    Rule,
    Table,
    TableModel,
    TextBlock,
)

TABLE_ROW_PATTERN = re.compile(r"^\|.+\|$")
TABLE_SEPARATOR_PATTERN = re.compile(r"^\|[ \t:|-]+\|$")
CENTER_ALIGNMENT_PATTERN = re.compile(r"^:-+:$")
RIGHT_ALIGNMENT_PATTERN = re.compile(r"^-+:$")

HEADING_PATTERN = re.compile(r"^(#{1,6})[ \t]+(\S.*)$")
RULE_PATTERN = re.compile(r"^(?:\*{3,}|-{3,}|_{3,})[ \t]*$")
BLOCKQUOTE_PATTERN = re.compile(r"^&gt;[ \t]+(\S.*)$")

# (pattern, ordered) per list marker family
LIST_PATTERNS = (
    (re.compile(r"^[*+-][ \t]+(\S.*)$"), False),
    (re.compile(r"^\d+\.[ \t]+(\S.*)$"), True),
)


def split_table_cells(line: str) -> tuple[str, ...]:
    """Cells of a pipe-delimited row, outer pipes removed, each trimmed."""
    return tuple(cell.strip() for cell in line.strip().strip("|").split("|"))


def is_table_separator(line: str) -> bool:
    """Pipes, colons, spaces and dashes only, with at least one dash."""
    return "-" in line and bool(TABLE_SEPARATOR_PATTERN.match(line))


def parse_alignment(cell: str) -> str:
    cell = cell.strip()
    if CENTER_ALIGNMENT_PATTERN.match(cell):
        return "center"
    if RIGHT_ALIGNMENT_PATTERN.match(cell):
        return "right"
    return "left"


def match_table(lines: list[str], start: int) -> tuple[Table | None, int]:
    """
    Try to read a table starting at ``lines[start]``.

    Returns the table and the number of lines it spans, or ``(None, 0)``
    when the header, separator or body rows are missing.
    """
    if start + 2 >= len(lines):
        return None, 0

    header = lines[start].rstrip()
    separator = lines[start + 1].rstrip()
    if not (TABLE_ROW_PATTERN.match(header) and is_table_separator(separator)):
        return None, 0

    end = start + 2
    while end < len(lines) and TABLE_ROW_PATTERN.match(lines[end].rstrip()):
        end += 1
    if end == start + 2:
        return None, 0

    model = TableModel(
        headers=split_table_cells(header),
        alignments=tuple(parse_alignment(cell) for cell in split_table_cells(separator)),
        rows=tuple(split_table_cells(line.rstrip()) for line in lines[start + 2:end]),
    )
    return Table(model=model), end - start


def match_list(lines: list[str], start: int) -> tuple[ListBlock | None, int]:
    """Read the maximal run of list items of one marker family."""
    for pattern, ordered in LIST_PATTERNS:
        items = []
        position = start
        while position < len(lines):
            match = pattern.match(lines[position])
            if not match:
                break
            items.append(match.group(1).rstrip())
            position += 1
        if items:
            return ListBlock(ordered=ordered, items=tuple(items)), len(items)
    return None, 0


def match_single_line(line: str):
    """Heading, rule or blockquote for one line, or None."""
    match = HEADING_PATTERN.match(line)
    if match:
        return Heading(level=len(match.group(1)), text=match.group(2).rstrip())

    if RULE_PATTERN.match(line):
        return Rule()

    match = BLOCKQUOTE_PATTERN.match(line)
    if match:
        return Blockquote(text=match.group(1).rstrip())

    return None


def convert_text(text: str) -> list:
    """Convert one escaped text block into structural blocks and loose text."""
    lines = text.split("\n")
    blocks = []
    loose: list[str] = []

    def flush_loose():
        if loose:
            blocks.append(TextBlock("\n".join(loose)))
            loose.clear()

    position = 0
    while position < len(lines):
        block, consumed = match_table(lines, position)
        if block is None:
            block = match_single_line(lines[position])
            consumed = 1
        if block is None:
            block, consumed = match_list(lines, position)

        if block is None:
            loose.append(lines[position])
            position += 1
            continue

        flush_loose()
        blocks.append(block)
        position += consumed

    flush_loose()
    return blocks


def convert_structure(blocks, context):
    """Apply structural conversion to every text block."""
    result = []
    for block in blocks:
        if isinstance(block, TextBlock):
            result.extend(convert_text(block.text))
        else:
            result.append(block)
    return result
