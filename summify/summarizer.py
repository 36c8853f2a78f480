"""Word-frequency extractive summarizer.

Every sentence is scored by the average document-wide frequency of its
words; the best sentences are kept and emitted in reading order.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Union

from summify.errors import DegenerateSentenceError, EmptyInputError, SegmentationError, TextTooShortError
from summify.preprocessing import normalize_whitespace, split_sentences, word_frequencies, word_tokens


logger = logging.getLogger("summify.summarizer")

MIN_TEXT_CHARS = 50


class LengthPreference(str, Enum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"

    @classmethod
    def parse(cls, value: Union["LengthPreference", str, None]) -> "LengthPreference":
        """Resolve a user supplied length, falling back to ``MEDIUM``."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        logger.debug("Unknown length preference %r, using medium", value)
        return cls.MEDIUM


# (minimum sentences, percent of all sentences)
_LENGTH_RULES: dict[LengthPreference, tuple[int, int]] = {
    LengthPreference.SHORT: (2, 20),
    LengthPreference.MEDIUM: (4, 30),
    LengthPreference.LONG: (6, 40),
}


@dataclass(frozen=True)
class ScoredSentence:
    index: int
    text: str
    score: float


@dataclass(frozen=True)
class SummaryResult:
    summary: str
    sentences: list[str]
    selected: list[ScoredSentence]
    length: LengthPreference

    @property
    def sentence_count(self) -> int:
        return len(self.sentences)

    @property
    def selected_count(self) -> int:
        return len(self.selected)


def target_sentence_count(sentence_count: int, length: Union[LengthPreference, str, None]) -> int:
    """How many sentences a summary of the given length keeps.

    Never more than ``sentence_count``.
    """
    floor, percent = _LENGTH_RULES[LengthPreference.parse(length)]
    # ceil(count * percent / 100) without float rounding
    proportional = -(-sentence_count * percent // 100)
    return min(sentence_count, max(floor, proportional))


def score_sentences(sentences: Sequence[str], frequencies: Mapping[str, int]) -> list[ScoredSentence]:
    """Average document frequency of each sentence's words.

    Sentences without any word token have no defined score and are left out.
    """
    scored: list[ScoredSentence] = []
    for index, sentence in enumerate(sentences):
        tokens = word_tokens(sentence)
        if not tokens:
            logger.debug("Skipping sentence %d without words: %r", index, sentence)
            continue
        total = sum(frequencies.get(token, 0) for token in tokens)
        scored.append(ScoredSentence(index=index, text=sentence, score=total / len(tokens)))
    return scored


def select_sentences(scored: Sequence[ScoredSentence], k: int) -> list[ScoredSentence]:
    """Top ``k`` by score, returned in reading order. Ties go to the earlier sentence."""
    best = sorted(scored, key=lambda s: (-s.score, s.index))[: max(0, k)]
    return sorted(best, key=lambda s: s.index)


def extract_summary(text: str, length: Union[LengthPreference, str, None] = LengthPreference.MEDIUM) -> SummaryResult:
    pref = LengthPreference.parse(length)

    normalized = normalize_whitespace(text or "")
    if not normalized:
        raise EmptyInputError()
    if len(normalized) < MIN_TEXT_CHARS:
        raise TextTooShortError(len(normalized), MIN_TEXT_CHARS)

    sentences = split_sentences(normalized)
    if not sentences:
        raise SegmentationError()

    frequencies = word_frequencies(normalized)
    scored = score_sentences(sentences, frequencies)
    if not scored:
        raise DegenerateSentenceError()

    k = min(target_sentence_count(len(sentences), pref), len(scored))
    selected = select_sentences(scored, k)
    summary = " ".join(s.text.strip() for s in selected)

    logger.debug(
        "summarized chars=%d sentences=%d selected=%d length=%s",
        len(normalized),
        len(sentences),
        len(selected),
        pref.value,
    )
    return SummaryResult(summary=summary, sentences=sentences, selected=selected, length=pref)


def summarize(text: str, length: Union[LengthPreference, str, None] = LengthPreference.MEDIUM) -> str:
    """Summarize ``text`` by keeping its highest scoring sentences."""
    return extract_summary(text, length).summary


__all__ = [
    "LengthPreference",
    "MIN_TEXT_CHARS",
    "ScoredSentence",
    "SummaryResult",
    "extract_summary",
    "score_sentences",
    "select_sentences",
    "summarize",
    "target_sentence_count",
]
