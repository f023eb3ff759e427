from viewer.markdown import render_markdown
from viewer.markdown.postprocessors import apply_postprocessors
from viewer.markdown.postprocessors.heading_anchors import add_heading_anchors
from viewer.markdown.toc import extract_toc_from_html


def test_toc_nests_headings_by_level():
    toc = extract_toc_from_html('<h1 id="intro">Intro</h1><h2>Set up</h2><h3>Linux</h3><h1>Usage</h1>')

    assert [node["id"] for node in toc] == ["intro", "usage"]
    setup = toc[0]["children"][0]
    assert setup["id"] == "set-up"
    assert setup["level"] == 2
    assert setup["children"][0]["title"] == "Linux"


def test_toc_keeps_inline_markup():
    toc = extract_toc_from_html(render_markdown("## Run `make`"))
    assert toc[0]["title"] == "Run make"
    assert toc[0]["title_html"] == "Run <code>make</code>"


def test_heading_anchors_are_unique():
    html = add_heading_anchors("<h2>Setup</h2><p>x</p><h2>Setup</h2><h3 id=\"keep\">Other</h3>", {})
    assert html == '<h2 id="setup">Setup</h2><p>x</p><h2 id="setup-1">Setup</h2><h3 id="keep">Other</h3>'


def test_postprocessors_leave_protected_blocks_readable():
    html = apply_postprocessors(render_markdown("# T\n\n```\na < b\n```"), {})
    assert '<h1 id="t">T</h1>' in html
    assert "<pre><code>a &lt; b\n</code></pre>" in html


def test_heading_anchors_leave_diagram_source_verbatim():
    fragment = render_markdown("# Flow\n\n```mermaid\nA-->B\n```")
    html = apply_postprocessors(fragment, {})
    assert '<div class="mermaid">A-->B</div>' in html
    assert html == fragment.replace("<h1>", '<h1 id="flow">')


def test_heading_anchors_match_headings_case_insensitively():
    html = add_heading_anchors('<H2 class="x">Mixed</H2>', {})
    assert html == '<H2 class="x" id="mixed">Mixed</H2>'
