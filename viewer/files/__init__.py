"""
Document discovery and path resolution under the configured root.
"""

from .discovery import scan_markdown_files
from .resolver import (
    DocumentNotFound,
    InvalidDocumentPath,
    InvalidDocumentType,
    ResolutionError,
    UnreadableDocument,
    read_document,
    resolve_document,
    sanitize_path,
)

__all__ = [
    'scan_markdown_files',
    'resolve_document',
    'read_document',
    'sanitize_path',
    'ResolutionError',
    'DocumentNotFound',
    'InvalidDocumentPath',
    'InvalidDocumentType',
    'UnreadableDocument',
]
