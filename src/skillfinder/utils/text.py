"""Text helpers: search tokenization and word-set similarity."""

from __future__ import annotations

import re
from typing import List

_NON_TOKEN_CHARS = re.compile(r"[^a-z0-9\-]")


def tokenize(text: str, *, expand_hyphens: bool = True) -> List[str]:
    """Split text into lower-case search tokens.

    Anything outside ``[a-z0-9-]`` acts as a separator. Hyphenated words are kept
    whole and, unless ``expand_hyphens`` is false, also emitted part by part, so
    ``"react-hooks"`` gives ``["react-hooks", "react", "hooks"]``.
    """
    words = _NON_TOKEN_CHARS.sub(" ", text.lower()).split()
    if not expand_hyphens:
        return words

    tokens: List[str] = []
    for word in words:
        tokens.append(word)
        if "-" in word:
            tokens.extend(part for part in word.split("-") if part)
    return tokens


def word_set(text: str) -> set[str]:
    """Lower-cased whitespace-separated words of ``text``."""
    return set(text.lower().split())


def collapse_line_breaks(text: str) -> str:
    """Strip text and join its lines with single spaces."""
    return re.sub(r"\s*\n\s*", " ", text.strip())
