"""Extractive document summarization.

This package provides:
- Text cleaning, sentence segmentation and word tokenization
- A word-frequency extractive summarizer
- Text extraction for uploaded documents (PDF, TXT, DOC, DOCX)
- A FastAPI service and a command line front end
"""
from __future__ import annotations

from summify.errors import (
    DegenerateSentenceError,
    EmptyInputError,
    ExtractionError,
    SegmentationError,
    SummarizationError,
    SummifyError,
    TextTooShortError,
    UnsupportedDocumentError,
)
from summify.summarizer import LengthPreference, SummaryResult, extract_summary, summarize

__all__ = [
    "DegenerateSentenceError",
    "EmptyInputError",
    "ExtractionError",
    "LengthPreference",
    "SegmentationError",
    "SummarizationError",
    "SummaryResult",
    "SummifyError",
    "TextTooShortError",
    "UnsupportedDocumentError",
    "extract_summary",
    "summarize",
]
