"""
Resolution of requested document paths to files under the document root.

A requested path is sanitised, joined to the root and resolved (symlinks
included). The resolved file must exist, lie inside the resolved root and
carry the document extension; anything else raises a ``ResolutionError``
subclass. Views turn these into JSON failures or error documents, so they
never reach the renderer.
"""

from __future__ import annotations

import logging
from pathlib import Path

from django.conf import settings

from .discovery import get_document_extension, get_document_root, has_document_extension

logger = logging.getLogger(__name__)


class ResolutionError(Exception):
    """A requested document cannot be served."""

    message = "File not found or invalid"
    title = "Error"
    status_code = 404

    def __init__(self, path: str, message: str | None = None):
        self.path = path
        if message:
            self.message = message
        super().__init__(f"{self.message}: {path}")

    def as_markdown(self) -> str:
        """Markdown document shown in place of the requested one."""
        return f"# {self.title}\n\n{self.message}."


class DocumentNotFound(ResolutionError):
    message = "File not found"
    title = "File Not Found"

    def as_markdown(self) -> str:
        return f"# {self.title}\n\nThe file `{self.path}` could not be found."


class InvalidDocumentPath(ResolutionError):
    message = "Invalid file path"

    def as_markdown(self) -> str:
        return f"# {self.title}\n\nThe requested file path is invalid or not allowed."


class InvalidDocumentType(ResolutionError):
    message = "Invalid file type"

    def as_markdown(self) -> str:
        extension = get_document_extension()
        return f"# {self.title}\n\nOnly markdown ({extension}) files are allowed."


class UnreadableDocument(ResolutionError):
    message = "File could not be read"


def get_default_file() -> str:
    return getattr(settings, "MARKVIEW_DEFAULT_FILE", "README.md")


def sanitize_path(path: str | None) -> str:
    """Drop ``../`` sequences and leading separators from a requested path."""
    path = path or ""
    previous = None
    while previous != path:
        previous = path
        path = path.replace("../", "").replace("..\\", "")
    return path.lstrip("/\\")


def resolve_document(relative_path: str | None, root: str | Path | None = None) -> Path:
    """
    Resolve a requested document to a real file under the document root.

    Args:
        relative_path: Path as requested (query parameter or link target)
        root: Document root (defaults to MARKVIEW_ROOT)

    Returns:
        Resolved path of the document

    Raises:
        DocumentNotFound: Nothing exists at the path, or it is not a file
        InvalidDocumentPath: The path resolves outside the root
        InvalidDocumentType: The resolved file lacks the document extension
    """
    requested = sanitize_path(relative_path) or get_default_file()
    root_path = Path(root) if root is not None else get_document_root()

    try:
        real_root = root_path.resolve(strict=True)
        resolved = (root_path / requested).resolve(strict=True)
    except FileNotFoundError:
        logger.info("Document not found: %s", requested)
        raise DocumentNotFound(requested)
    except (OSError, RuntimeError) as exc:
        logger.warning("Could not resolve %s: %s", requested, exc)
        raise InvalidDocumentPath(requested)

    if not resolved.is_relative_to(real_root):
        logger.warning("Rejected path outside document root: %s -> %s", requested, resolved)
        raise InvalidDocumentPath(requested)

    if not resolved.is_file():
        raise DocumentNotFound(requested)

    if not has_document_extension(resolved.name):
        logger.info("Rejected non-document file: %s", resolved)
        raise InvalidDocumentType(requested)

    return resolved


def read_document(path: Path) -> str:
    """Read a resolved document; undecodable bytes are replaced."""
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.warning("Could not read %s: %s", path, exc)
        raise UnreadableDocument(str(path)) from exc
