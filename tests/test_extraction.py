from __future__ import annotations

import io

import docx
import pytest
from PyPDF2 import PdfWriter

from summify.errors import ExtractionError, UnsupportedDocumentError
from summify.extraction import extract_text, resolve_kind


DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def _docx_bytes(*paragraphs: str) -> bytes:
    document = docx.Document()
    for p in paragraphs:
        document.add_paragraph(p)
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


def _blank_pdf_bytes() -> bytes:
    writer = PdfWriter()
    writer.add_blank_page(width=72, height=72)
    buf = io.BytesIO()
    writer.write(buf)
    return buf.getvalue()


@pytest.mark.parametrize(
    "content_type,filename,expected",
    [
        ("application/pdf", None, "pdf"),
        ("text/plain; charset=utf-8", None, "txt"),
        ("application/msword", "old.doc", "doc"),
        (DOCX_MIME, None, "docx"),
        ("application/octet-stream", "Notes.DOCX", "docx"),
        (None, "report.pdf", "pdf"),
    ],
)
def test_resolve_kind(content_type, filename, expected) -> None:
    assert resolve_kind(content_type, filename) == expected


def test_resolve_kind_rejects_other_types() -> None:
    with pytest.raises(UnsupportedDocumentError, match="Invalid file type"):
        resolve_kind("image/png", "photo.png")
    with pytest.raises(UnsupportedDocumentError):
        resolve_kind(None, None)


def test_extract_txt_strips_bom() -> None:
    assert extract_text(b"\xef\xbb\xbfHello there.", "text/plain") == "Hello there."


def test_extract_txt_invalid_utf8() -> None:
    with pytest.raises(ExtractionError, match="Failed to parse text file"):
        extract_text(b"\xff\xfe\xfa broken", "text/plain")


def test_extract_docx_joins_paragraphs() -> None:
    data = _docx_bytes("First paragraph.", "Second paragraph.")
    assert extract_text(data, DOCX_MIME, "doc.docx") == "First paragraph.\nSecond paragraph."


def test_extract_legacy_doc_that_is_not_docx() -> None:
    with pytest.raises(ExtractionError, match="Word document"):
        extract_text(b"\xd0\xcf\x11\xe0 legacy binary", "application/msword", "old.doc")


def test_extract_pdf_garbage() -> None:
    with pytest.raises(ExtractionError, match="Failed to parse PDF file"):
        extract_text(b"definitely not a pdf", "application/pdf")


def test_extract_pdf_without_text_is_empty() -> None:
    with pytest.raises(ExtractionError, match="Extracted text is empty"):
        extract_text(_blank_pdf_bytes(), "application/pdf")


def test_extract_whitespace_only_is_empty() -> None:
    with pytest.raises(ExtractionError, match="empty"):
        extract_text(b"  \n\t ", "text/plain")
