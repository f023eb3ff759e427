import pytest

from viewer.markdown.blocks import (
    CodeBlock,
    DiagramBlock,
    Heading,
    ListBlock,
    Paragraph,
    Table,
    TextBlock,
)
from viewer.markdown.inline import format_text
from viewer.markdown.paragraphs import wrap_paragraphs
from viewer.markdown.preprocessors import apply_preprocessors
from viewer.markdown.preprocessors.fences import extract_fenced_blocks
from viewer.markdown.structure import convert_text, is_table_separator, parse_alignment, split_table_cells

CONTEXT = {"diagram_language": "mermaid", "document_extension": ".md", "navigation_parameter": "file"}


def test_fences_split_in_document_order():
    text = "a\n```mermaid\ngraph\n```\nb\n```sh\nls\n```\n"
    blocks = extract_fenced_blocks([TextBlock(text)], CONTEXT)

    assert [type(block) for block in blocks] == [
        TextBlock,
        DiagramBlock,
        TextBlock,
        CodeBlock,
        TextBlock,
    ]
    assert blocks[1].index == 0
    assert blocks[3].index == 1
    assert blocks[3].language == "sh"
    assert blocks[3].code == "ls\n"


def test_block_counter_is_per_call():
    text = "```\nx\n```"
    first = extract_fenced_blocks([TextBlock(text)], CONTEXT)
    second = extract_fenced_blocks([TextBlock(text)], CONTEXT)
    assert first[0].index == second[0].index == 0


def test_diagram_language_is_configurable():
    blocks = extract_fenced_blocks([TextBlock("```dot\ndigraph {}\n```")], {"diagram_language": "dot"})
    assert isinstance(blocks[0], DiagramBlock)
    assert blocks[0].source == "digraph {}"


def test_escaping_skips_protected_blocks():
    blocks = apply_preprocessors([TextBlock("<i>\n```\n<b>\n```\n")], CONTEXT)
    assert blocks[0] == TextBlock("&lt;i&gt;\n")
    assert blocks[1].html == "<pre><code>&lt;b&gt;\n</code></pre>"


def test_protected_blocks_ignore_text_passes():
    block = CodeBlock(index=0, code="*x*", language=None, html="<pre><code>*x*</code></pre>")
    assert block.map_text(str.upper) is block


def test_split_table_cells():
    assert split_table_cells("| a | b |") == ("a", "b")
    assert split_table_cells("|a||c|") == ("a", "", "c")


@pytest.mark.parametrize(
    "line,expected",
    [
        ("|---|:-:|", True),
        ("| --- | ---: |", True),
        ("|:|", False),
        ("| | |", False),
        ("|---x|", False),
        ("|" + "-" * 50 + "x", False),
    ],
)
def test_is_table_separator(line, expected):
    assert is_table_separator(line) is expected


def test_parse_alignment():
    assert parse_alignment(":---:") == "center"
    assert parse_alignment(" --: ") == "right"
    assert parse_alignment(":---") == "left"
    assert parse_alignment("---") == "left"


def test_convert_text_mixes_structure_and_loose_lines():
    blocks = convert_text("# T\ntext\n- a\n| h |\n|---|\n| c |")
    assert blocks[0] == Heading(level=1, text="T")
    assert blocks[1] == TextBlock("text")
    assert blocks[2] == ListBlock(ordered=False, items=("a",))
    assert isinstance(blocks[3], Table)
    assert blocks[3].model.rows == (("c",),)


def test_unordered_markers_share_one_family():
    assert convert_text("- a\n* b\n+ c") == [ListBlock(ordered=False, items=("a", "b", "c"))]


def test_list_families_split_runs():
    assert convert_text("- a\n1. b") == [
        ListBlock(ordered=False, items=("a",)),
        ListBlock(ordered=True, items=("b",)),
    ]


def test_wrap_paragraphs_splits_on_blank_lines():
    blocks = wrap_paragraphs([TextBlock("a\nb\n\n  \nc\n"), Heading(level=2, text="h")], CONTEXT)
    assert blocks == [Paragraph(text="a\nb"), Paragraph(text="c"), Heading(level=2, text="h")]


def test_format_text_with_private_use_characters_in_text():
    html = format_text("\ue000 [x](y.md) *z*", CONTEXT)
    assert html == '\ue000 <a href="?file=y.md">x</a> <em>z</em>'


def test_link_text_is_formatted():
    html = format_text("[**bold** `code`](https://example.com)", CONTEXT)
    assert html == (
        '<a href="https://example.com" target="_blank" rel="noopener">'
        "<strong>bold</strong> <code>code</code></a>"
    )
