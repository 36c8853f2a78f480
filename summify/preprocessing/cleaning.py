from __future__ import annotations

import re


_WS_RE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs (spaces, tabs, newlines) to one space and trim."""
    return _WS_RE.sub(" ", text).strip()
