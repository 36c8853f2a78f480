from __future__ import annotations

import re


# Non-terminators closed by a run of terminators. Text after the last
# terminator never matches and is dropped.
_SENTENCE_RE = re.compile(r"[^.!?]+[.!?]+")


def split_sentences(text: str) -> list[str]:
    """Split text into sentences, in order of occurrence.

    A sentence is one or more non-terminator characters followed by one or
    more of ``.``, ``!`` or ``?``. The terminator run stays with the sentence
    it closes. Sentences are not trimmed here.
    """
    if not text:
        return []
    return _SENTENCE_RE.findall(text)
