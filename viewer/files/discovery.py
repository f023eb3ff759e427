"""
Discovery of the Markdown documents served by the viewer.

Walks the document root, follows symlinks to files and directories, and
returns root-relative POSIX paths sorted lexicographically. Hidden entries
(leading dot) are skipped unless they are symlinks. A visited set of
resolved directory paths stops symlink cycles.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from django.conf import settings

logger = logging.getLogger(__name__)


def get_document_root() -> Path:
    return Path(getattr(settings, "MARKVIEW_ROOT", None) or os.getcwd())


def get_document_extension() -> str:
    return getattr(settings, "MARKVIEW_DOCUMENT_EXTENSION", ".md")


def has_document_extension(name: str, extension: str | None = None) -> bool:
    extension = extension or get_document_extension()
    return name.lower().endswith(extension.lower())


def _scan_directory(
    directory: Path,
    prefix: str,
    extension: str,
    visited: set[Path],
) -> list[str]:
    try:
        real_directory = directory.resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        logger.warning("Skipping unresolvable directory %s: %s", directory, exc)
        return []

    if real_directory in visited:
        logger.debug("Skipping already visited directory %s", real_directory)
        return []
    visited.add(real_directory)

    try:
        with os.scandir(directory) as iterator:
            entries = sorted(iterator, key=lambda entry: entry.name)
    except OSError as exc:
        logger.warning("Skipping unreadable directory %s: %s", directory, exc)
        return []

    files: list[str] = []
    for entry in entries:
        is_link = entry.is_symlink()
        if entry.name.startswith(".") and not is_link:
            continue

        relative = f"{prefix}{entry.name}"
        try:
            if entry.is_dir():
                files.extend(
                    _scan_directory(Path(entry.path), f"{relative}/", extension, visited)
                )
            elif entry.is_file():
                # Symlinked files count by the extension of their target
                name = Path(entry.path).resolve().name if is_link else entry.name
                if has_document_extension(name, extension):
                    files.append(relative)
        except OSError as exc:
            logger.warning("Skipping unreadable entry %s: %s", entry.path, exc)

    return files


def scan_markdown_files(root: str | Path | None = None, extension: str | None = None) -> list[str]:
    """
    List every document reachable from ``root``.

    Args:
        root: Directory to scan (defaults to MARKVIEW_ROOT)
        extension: Document extension (defaults to MARKVIEW_DOCUMENT_EXTENSION)

    Returns:
        Sorted list of root-relative paths using ``/`` separators
    """
    root = Path(root) if root is not None else get_document_root()
    extension = extension or get_document_extension()

    files = sorted(_scan_directory(root, "", extension, set()))
    logger.debug("Found %d documents under %s", len(files), root)
    return files
