from pathlib import Path

import pytest


@pytest.fixture()
def docs_root(tmp_path: Path, settings) -> Path:
    """Small document tree under tmp_path, served as MARKVIEW_ROOT."""
    root = tmp_path / "docs"
    root.mkdir()
    (root / "README.md").write_text(
        "# Welcome\n\nSee [the guide](guide/setup.md).\n", encoding="utf-8"
    )
    guide = root / "guide"
    guide.mkdir()
    (guide / "setup.md").write_text(
        "# Setup\n\nRun install.\nInstall <again>.\n", encoding="utf-8"
    )
    (guide / "faq.md").write_text("## FAQ\n\nHow to install?\n", encoding="utf-8")
    (root / "notes.txt").write_text("install notes", encoding="utf-8")
    hidden = root / ".drafts"
    hidden.mkdir()
    (hidden / "draft.md").write_text("install draft", encoding="utf-8")

    settings.MARKVIEW_ROOT = str(root)
    return root
