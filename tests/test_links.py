import pytest

from viewer.markdown.links import has_unsafe_scheme, is_internal_link, navigation_href, rewrite_link


@pytest.mark.parametrize(
    "target,expected",
    [
        ("guide.md", True),
        ("docs/Guide.MD", True),
        ("https://example.com/readme.md", True),
        ("guide.md#install", False),
        ("https://example.com", False),
        ("image.png", False),
    ],
)
def test_is_internal_link(target, expected):
    assert is_internal_link(target, ".md") is expected


def test_navigation_href_unescapes_then_encodes():
    assert navigation_href("a&amp;b.md") == "?file=a%26b.md"
    assert navigation_href("docs/a b.md") == "?file=docs%2Fa+b.md"


@pytest.mark.parametrize(
    "target",
    ["javascript:alert(1)", "JavaScript:void(0)", " java\tscript:x", "data:text/html,x", "vbscript:x"],
)
def test_unsafe_schemes(target):
    assert has_unsafe_scheme(target)


def test_http_is_safe():
    assert not has_unsafe_scheme("https://example.com/?q=javascript:")


def test_rewrite_external_link():
    assert rewrite_link("Docs", "https://docs.example.com") == (
        '<a href="https://docs.example.com" target="_blank" rel="noopener">Docs</a>'
    )


def test_rewrite_internal_link_with_custom_parameter():
    assert rewrite_link("Notes", "notes.txt", extension=".txt", parameter="doc") == (
        '<a href="?doc=notes.txt">Notes</a>'
    )
