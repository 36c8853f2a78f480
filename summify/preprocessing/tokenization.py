from __future__ import annotations

import re
from collections import Counter


_WORD_RE = re.compile(r"\w+")


def word_tokens(text: str) -> list[str]:
    """Lowercased maximal runs of letters, digits and underscores."""
    return [w.lower() for w in _WORD_RE.findall(text)]


def word_frequencies(text: str) -> Counter[str]:
    return Counter(word_tokens(text))
