from __future__ import annotations

from summify.preprocessing.cleaning import normalize_whitespace
from summify.preprocessing.segmentation import split_sentences
from summify.preprocessing.tokenization import word_frequencies, word_tokens

__all__ = ["normalize_whitespace", "split_sentences", "word_frequencies", "word_tokens"]
