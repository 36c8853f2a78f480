from __future__ import annotations


class SummifyError(Exception):
    """Base class for every error raised by summify."""


class SummarizationError(SummifyError):
    """The summarizer rejected its input. No partial summary is produced."""


class EmptyInputError(SummarizationError):
    def __init__(self, message: str = "Input text is empty") -> None:
        super().__init__(message)


class TextTooShortError(SummarizationError):
    def __init__(self, length: int, minimum: int) -> None:
        super().__init__(f"Text is too short to summarize ({length} < {minimum} characters)")
        self.length = length
        self.minimum = minimum


class SegmentationError(SummarizationError):
    def __init__(self, message: str = "Could not split text into sentences") -> None:
        super().__init__(message)


class DegenerateSentenceError(SummarizationError):
    """No sentence contains a single word token, so none can be scored."""

    def __init__(self, message: str = "No sentence contains any words to score") -> None:
        super().__init__(message)


class ExtractionError(SummifyError):
    """Text could not be extracted from an uploaded document."""


class UnsupportedDocumentError(ExtractionError):
    def __init__(self, message: str = "Invalid file type. Supported formats: PDF, TXT, DOC, DOCX") -> None:
        super().__init__(message)
