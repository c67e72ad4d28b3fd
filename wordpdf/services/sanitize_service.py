"""Text sanitization for the single-byte page font.

Every character of the output fits in one byte (code point <= 255). Known
characters are spelled through the substitution table in
``wordpdf.utils.charmap``; anything else above U+00FF becomes ``?``.
"""
from __future__ import annotations

import logging
import re
from collections import Counter
from typing import Tuple

from wordpdf.utils.charmap import (
    CHAR_TABLE,
    FALLBACK,
    MAX_SINGLE_BYTE,
    STRAY_COMBINING_DOT,
)

logger = logging.getLogger(__name__)

_FALLBACK_RUN = re.compile(r"\?{2,}")
_SPACE_RUN = re.compile(r" {2,}")


def substitute_char(ch: str) -> str:
    """Return the single-byte spelling of one character"""
    cp = ord(ch)
    if cp == STRAY_COMBINING_DOT:
        return FALLBACK
    replacement = CHAR_TABLE.get(cp)
    if replacement is not None:
        return replacement
    if cp > MAX_SINGLE_BYTE:
        return FALLBACK
    return ch


def _transliterate(text: str) -> Tuple[str, int, Counter]:
    parts = []
    substituted = 0
    unmapped: Counter = Counter()
    for ch in text:
        out = substitute_char(ch)
        if out != ch:
            substituted += 1
            if out == FALLBACK and ch != FALLBACK:
                unmapped[ord(ch)] += 1
        parts.append(out)
    return "".join(parts), substituted, unmapped


def collapse_runs(text: str) -> str:
    """Collapse repeated fallback marks and spaces, then trim"""
    text = _FALLBACK_RUN.sub(FALLBACK, text)
    text = _SPACE_RUN.sub(" ", text)
    return text.strip()


def sanitize_text(text: str, verbose: bool = False) -> str:
    """Rewrite ``text`` so that every character has a code point of at most 255.

    Args:
        text: Extracted document text, newline-delimited paragraphs.
        verbose: Log an INFO summary of substituted and unmapped characters.

    Returns:
        The sanitized text. Runs of ``?`` and runs of spaces are collapsed to a
        single character and surrounding whitespace is trimmed.
    """
    if not text:
        return ""

    result, substituted, unmapped = _transliterate(text)
    result = collapse_runs(result)

    if verbose and substituted:
        logger.info(
            "Sanitized %d character(s); %d unmapped code point(s): %s",
            substituted,
            len(unmapped),
            ", ".join(f"U+{cp:04X}x{count}" for cp, count in sorted(unmapped.items())),
        )
    return result