from __future__ import annotations

import re
import string
from typing import List

PUNCTUATION = frozenset(string.punctuation)

WHITESPACE_RE = re.compile(r"\s")

# Sentence end followed by whitespace and a non-lowercase character. Misses
# abbreviations and mid-sentence capitals; kept as-is so scores stay stable.
SENTENCE_RE = re.compile(r"[.?!]\s[^a-z]")

# Vowel clusters as an English syllable approximation. \Z rather than $ so a
# token ending in a newline is not treated as ending before it.
SYLLABLE_RE = re.compile(r"[aiouy]+e*|e(?!d\Z|ly).|[td]ed|le\Z")


def split_words(text: str) -> List[str]:
    """Split on single spaces, keeping empty tokens between repeated spaces."""
    return text.split(" ")


def sample_text(text: str, limit: int) -> str:
    """Return ``text`` capped at its first ``limit`` space-separated words.

    A limit of 0 returns the text unchanged.
    """
    if limit <= 0:
        return text
    return " ".join(split_words(text)[:limit])


def strip_whitespace(text: str) -> str:
    return WHITESPACE_RE.sub("", text)


def remove_punctuation(text: str) -> str:
    """Drop the ASCII punctuation characters from ``text``."""
    return "".join(ch for ch in text if ch not in PUNCTUATION)


def word_syllables(word: str) -> int:
    """Count syllables in one lower-cased word; every word has at least one."""
    matches = SYLLABLE_RE.findall(word)
    return len(matches) or 1
