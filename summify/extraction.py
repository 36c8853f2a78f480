"""Plain text extraction for uploaded documents."""
from __future__ import annotations

import io
import logging
from pathlib import PurePath
from typing import Callable, Optional

from summify.errors import ExtractionError, UnsupportedDocumentError


logger = logging.getLogger("summify.extraction")

SUPPORTED_TYPES: dict[str, str] = {
    "application/pdf": "pdf",
    "text/plain": "txt",
    "application/msword": "doc",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": "docx",
}

_EXTENSIONS: dict[str, str] = {
    ".pdf": "pdf",
    ".txt": "txt",
    ".doc": "doc",
    ".docx": "docx",
}


def resolve_kind(content_type: Optional[str], filename: Optional[str]) -> str:
    """Map a MIME type (or, failing that, a file extension) to a document kind."""
    if content_type:
        mime = content_type.split(";", 1)[0].strip().lower()
        if mime in SUPPORTED_TYPES:
            return SUPPORTED_TYPES[mime]
    if filename:
        kind = _EXTENSIONS.get(PurePath(filename).suffix.lower())
        if kind:
            return kind
    raise UnsupportedDocumentError()


def extract_pdf(data: bytes) -> str:
    from PyPDF2 import PdfReader

    reader = PdfReader(io.BytesIO(data))
    pages = [page.extract_text() or "" for page in reader.pages]
    return "\n".join(pages)


def extract_txt(data: bytes) -> str:
    # utf-8-sig drops a leading BOM if present
    return data.decode("utf-8-sig")


def extract_docx(data: bytes) -> str:
    import docx

    document = docx.Document(io.BytesIO(data))
    return "\n".join(p.text for p in document.paragraphs)


_EXTRACTORS: dict[str, Callable[[bytes], str]] = {
    "pdf": extract_pdf,
    "txt": extract_txt,
    # Legacy .doc goes through the Word reader too; binary .doc files fail to parse.
    "doc": extract_docx,
    "docx": extract_docx,
}


def extract_text(data: bytes, content_type: Optional[str] = None, filename: Optional[str] = None) -> str:
    kind = resolve_kind(content_type, filename)
    logger.info("Extracting %s document name=%s bytes=%d", kind, filename, len(data))
    try:
        text = _EXTRACTORS[kind](data)
    except Exception as e:
        label = {"pdf": "PDF file", "txt": "text file"}.get(kind, "Word document")
        raise ExtractionError(f"Failed to parse {label}: {e}") from e

    if not text or not text.strip():
        raise ExtractionError("Extracted text is empty")
    return text


__all__ = ["SUPPORTED_TYPES", "extract_docx", "extract_pdf", "extract_text", "extract_txt", "resolve_kind"]
